"""Validated quote request: the strict boundary in front of the pricing core."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
from paintquote.models.validation import require_finite_non_negative


class QuoteRequest(BaseModel):
    """Everything needed to price one job.

    Only ``areas`` is required. Rates, paint costs, labor percentage and
    coverage fall back to the contractor profile when omitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    areas: ProjectAreas
    rates: ChargeRates | None = None
    paint_costs: PaintCosts | None = None
    labor_percent: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    coverage: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    @field_validator("areas", "rates", "paint_costs")
    @classmethod
    def amounts_must_be_non_negative(
        cls, v: BaseModel | None, info: ValidationInfo,
    ) -> BaseModel | None:
        if v is None:
            return v
        return require_finite_non_negative(v, info.field_name)
