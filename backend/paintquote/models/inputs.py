"""Input value records for the pricing engine.

These records hold whatever floats the caller hands them, negative values
and NaN included, and the pricing core propagates them arithmetically.
Validation lives at the boundary, see :mod:`paintquote.models.request`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from paintquote.models.enums import Surface


class ProjectAreas(BaseModel):
    """Measured square footage for each surface.

    Trim may be given as an area approximation of linear trim.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    walls_sqft: float = 0.0
    ceilings_sqft: float = 0.0
    trim_sqft: float = 0.0

    def sqft(self, surface: Surface) -> float:
        return getattr(self, f"{Surface(surface).value}_sqft")

    @property
    def total_sqft(self) -> float:
        return self.walls_sqft + self.ceilings_sqft + self.trim_sqft


class ChargeRates(BaseModel):
    """Price per square foot billed to the customer for each surface."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    walls_rate: float
    ceilings_rate: float
    trim_rate: float

    def rate(self, surface: Surface) -> float:
        return getattr(self, f"{Surface(surface).value}_rate")


class PaintCosts(BaseModel):
    """Contractor's paint cost per gallon for each surface."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    walls_paint_cost: float
    ceilings_paint_cost: float
    trim_paint_cost: float

    def cost(self, surface: Surface) -> float:
        return getattr(self, f"{Surface(surface).value}_paint_cost")
