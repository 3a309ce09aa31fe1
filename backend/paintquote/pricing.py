"""Core pricing functions for painting quotes.

A quote is a strict composition of four steps:

1. **Revenue**: square footage times the charge rate, per surface.
2. **Materials**: square footage divided by coverage, rounded *up* to whole
   gallons, times the paint cost per gallon.
3. **Labor**: a percentage of the margin left after materials, not of raw
   revenue.
4. **Profit**: revenue minus materials minus labor, with no floor at zero.

Every function here is pure. Nothing is rounded for display, nothing is
validated and nothing is logged; NaN or infinite inputs propagate through the
arithmetic into the result, and nothing raises. ``coverage`` should be
greater than zero; a zero coverage produces infinite gallons.
"""

from __future__ import annotations

import math

from paintquote.constants import DEFAULT_COVERAGE_SQFT_PER_GALLON, DEFAULT_LABOR_PERCENT
from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
from paintquote.models.quote import (
    LaborCalculation,
    MaterialsBreakdown,
    QuoteCalculation,
    RevenueBreakdown,
    SurfaceMaterials,
)

__all__ = [
    "DEFAULT_COVERAGE_SQFT_PER_GALLON",
    "DEFAULT_LABOR_PERCENT",
    "calculate_labor",
    "calculate_materials",
    "calculate_profit",
    "calculate_quote",
    "calculate_revenue",
    "gallons_needed",
]


def calculate_revenue(areas: ProjectAreas, rates: ChargeRates) -> RevenueBreakdown:
    """Price each surface at its charge rate. The total is derived from the parts."""
    return RevenueBreakdown(
        walls=areas.walls_sqft * rates.walls_rate,
        ceilings=areas.ceilings_sqft * rates.ceilings_rate,
        trim=areas.trim_sqft * rates.trim_rate,
    )


def gallons_needed(area_sqft: float, coverage: float) -> int | float:
    """Whole gallons needed to cover ``area_sqft``, rounding up only.

    An unpainted surface (area 0) needs 0 gallons. NaN and ``+inf`` quotients
    are returned unchanged so they propagate instead of raising; ``-inf``
    clamps to 0 like any other negative quotient. A zero ``coverage`` yields
    infinite gallons (NaN for a zero area) rather than raising.
    """
    if coverage == 0:
        if math.isnan(area_sqft) or area_sqft == 0:
            quotient = math.nan
        else:
            quotient = math.copysign(math.inf, area_sqft)
    else:
        quotient = area_sqft / coverage
    if math.isnan(quotient) or quotient == math.inf:
        return quotient
    if quotient == -math.inf:
        return 0
    return max(0, math.ceil(quotient))


def _surface_materials(
    area_sqft: float, paint_cost: float, coverage: float,
) -> SurfaceMaterials:
    gallons = gallons_needed(area_sqft, coverage)
    return SurfaceMaterials(gallons=gallons, cost=gallons * paint_cost)


def calculate_materials(
    areas: ProjectAreas,
    paint_costs: PaintCosts,
    coverage: float = DEFAULT_COVERAGE_SQFT_PER_GALLON,
) -> MaterialsBreakdown:
    """Compute gallons and paint cost per surface.

    Args:
        areas: Square footage per surface.
        paint_costs: Cost per gallon per surface.
        coverage: Square feet one gallon covers. Should be > 0; zero
            propagates infinite gallons and cost instead of raising.
    """
    return MaterialsBreakdown(
        walls=_surface_materials(
            areas.walls_sqft, paint_costs.walls_paint_cost, coverage,
        ),
        ceilings=_surface_materials(
            areas.ceilings_sqft, paint_costs.ceilings_paint_cost, coverage,
        ),
        trim=_surface_materials(
            areas.trim_sqft, paint_costs.trim_paint_cost, coverage,
        ),
    )


def calculate_labor(
    revenue: float,
    materials: float,
    labor_percent: float = DEFAULT_LABOR_PERCENT,
) -> LaborCalculation:
    """Allocate ``labor_percent`` of the post-materials margin to labor.

    When materials exceed revenue the margin and the labor figure go
    negative; they are not clamped.
    """
    revenue_after_materials = revenue - materials
    return LaborCalculation(
        revenue_after_materials=revenue_after_materials,
        projected_labor=revenue_after_materials * (labor_percent / 100),
        labor_percentage=labor_percent,
    )


def calculate_profit(revenue: float, materials: float, labor: float) -> float:
    return revenue - materials - labor


def calculate_quote(
    areas: ProjectAreas,
    rates: ChargeRates,
    paint_costs: PaintCosts,
    labor_percent: float = DEFAULT_LABOR_PERCENT,
    coverage: float = DEFAULT_COVERAGE_SQFT_PER_GALLON,
) -> QuoteCalculation:
    """Run revenue, materials, labor and profit in sequence.

    Returns:
        A complete QuoteCalculation. Profit is returned even when negative.
    """
    revenue = calculate_revenue(areas, rates)
    materials = calculate_materials(areas, paint_costs, coverage)
    labor = calculate_labor(revenue.total, materials.total, labor_percent)
    profit = calculate_profit(revenue.total, materials.total, labor.projected_labor)

    return QuoteCalculation(
        revenue=revenue,
        materials=materials,
        labor=labor,
        profit=profit,
    )
