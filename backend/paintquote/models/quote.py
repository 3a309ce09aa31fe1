"""Quote calculation output models for the paintquote engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, computed_field

from paintquote.models.enums import Surface


class SurfaceMaterials(BaseModel):
    """Paint purchased for one surface."""

    model_config = ConfigDict(frozen=True)

    # Whole gallons; a float only when a non-finite input propagated through.
    gallons: int | float
    cost: float


class RevenueBreakdown(BaseModel):
    """Amount charged to the customer per surface."""

    model_config = ConfigDict(frozen=True)

    walls: float
    ceilings: float
    trim: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return self.walls + self.ceilings + self.trim

    def for_surface(self, surface: Surface) -> float:
        return getattr(self, Surface(surface).value)


class MaterialsBreakdown(BaseModel):
    """Paint gallons and cost per surface."""

    model_config = ConfigDict(frozen=True)

    walls: SurfaceMaterials
    ceilings: SurfaceMaterials
    trim: SurfaceMaterials

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return self.walls.cost + self.ceilings.cost + self.trim.cost

    @property
    def total_gallons(self) -> int | float:
        return self.walls.gallons + self.ceilings.gallons + self.trim.gallons

    def for_surface(self, surface: Surface) -> SurfaceMaterials:
        return getattr(self, Surface(surface).value)


class LaborCalculation(BaseModel):
    """Labor priced as a share of the margin left after materials."""

    model_config = ConfigDict(frozen=True)

    revenue_after_materials: float
    projected_labor: float
    labor_percentage: float


class QuoteCalculation(BaseModel):
    """Complete output of the pricing engine.

    ``profit`` may be negative when the job is priced at a loss; it is
    reported as-is and left to the caller to interpret.
    """

    model_config = ConfigDict(frozen=True)

    revenue: RevenueBreakdown
    materials: MaterialsBreakdown
    labor: LaborCalculation
    profit: float

    @property
    def profit_margin(self) -> float:
        """Profit as a percentage of revenue (0.0 for a zero-revenue quote)."""
        if self.revenue.total == 0:
            return 0.0
        return self.profit / self.revenue.total * 100.0

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat dict of display strings for the presentation layer."""
        from paintquote.formatting import format_currency, format_percent

        return {
            "total_revenue_formatted": format_currency(self.revenue.total),
            "total_materials_formatted": format_currency(self.materials.total),
            "projected_labor_formatted": format_currency(self.labor.projected_labor),
            "labor_percentage_formatted": format_percent(self.labor.labor_percentage),
            "projected_profit_formatted": format_currency(self.profit),
            "profit_margin_formatted": format_percent(round(self.profit_margin, 1)),
            "total_gallons": self.materials.total_gallons,
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a flat numeric record for downstream consumers.

        Values keep full precision; rounding is a presentation concern.
        """
        return {
            "total_revenue": self.revenue.total,
            "total_materials": self.materials.total,
            "projected_labor": self.labor.projected_labor,
            "projected_profit": self.profit,
            "labor_percentage": self.labor.labor_percentage,
            "quote_amount": self.revenue.total,
            "walls_gallons": self.materials.walls.gallons,
            "ceilings_gallons": self.materials.ceilings.gallons,
            "trim_gallons": self.materials.trim.gallons,
        }
