"""Contractor pricing profile: the standing rates a quote starts from."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from paintquote.constants import DEFAULT_COVERAGE_SQFT_PER_GALLON, DEFAULT_LABOR_PERCENT
from paintquote.exceptions import InvalidQuoteInputError
from paintquote.models.inputs import ChargeRates, PaintCosts
from paintquote.models.validation import require_finite_non_negative


class ContractorProfile(BaseModel):
    """A contractor's default charge rates, paint costs and labor share.

    Unlike the raw pricing records, a profile is validated: every rate and
    cost must be finite and non-negative and coverage must be positive.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rates: ChargeRates
    paint_costs: PaintCosts
    labor_percent: float = Field(default=DEFAULT_LABOR_PERCENT, ge=0, allow_inf_nan=False)
    coverage: float = Field(
        default=DEFAULT_COVERAGE_SQFT_PER_GALLON, gt=0, allow_inf_nan=False,
    )

    @field_validator("rates", "paint_costs")
    @classmethod
    def amounts_must_be_non_negative(
        cls, v: BaseModel, info: ValidationInfo,
    ) -> BaseModel:
        return require_finite_non_negative(v, info.field_name)

    def adjusted(
        self,
        *,
        rates: Mapping[str, float] | None = None,
        paint_costs: Mapping[str, float] | None = None,
        labor_percent: float | None = None,
        coverage: float | None = None,
    ) -> ContractorProfile:
        """Return a copy with per-project overrides applied.

        ``rates`` and ``paint_costs`` are partial, keyed by field name
        (e.g. ``{"trim_rate": 2.25}``). The result is re-validated.

        Raises:
            InvalidQuoteInputError: If an override is unknown or invalid.
        """
        data = self.model_dump()
        if rates:
            data["rates"] = {**data["rates"], **rates}
        if paint_costs:
            data["paint_costs"] = {**data["paint_costs"], **paint_costs}
        if labor_percent is not None:
            data["labor_percent"] = labor_percent
        if coverage is not None:
            data["coverage"] = coverage
        try:
            return ContractorProfile.model_validate(data)
        except ValidationError as exc:
            raise InvalidQuoteInputError(str(exc)) from exc
