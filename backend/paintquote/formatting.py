"""Formatting helpers for quote output.

The pricing core carries full floating-point precision; rounding to cents
happens here, at presentation time only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paintquote.models.enums import Surface

if TYPE_CHECKING:
    from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
    from paintquote.models.quote import QuoteCalculation


def format_currency(amount: float) -> str:
    """Format an amount with cents and comma separators.

    Negative amounts put the sign before the dollar sign: '-$12.50'.
    Anything that rounds to zero cents renders unsigned.
    """
    cents = round(amount, 2) + 0.0
    if cents < 0:
        return f"-${-cents:,.2f}"
    return f"${cents:,.2f}"


def format_percent(value: float) -> str:
    """Format a percentage without trailing zeros: '30%', '27.5%'."""
    return f"{value:g}%"


def _format_sqft(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.1f}"


def _surface_label(surface: Surface) -> str:
    return surface.value.capitalize()


def render_rate_sheet(rates: ChargeRates, areas: ProjectAreas) -> str:
    """List the charge rate for every surface being painted."""
    lines = [
        f"- {_surface_label(s)}: {format_currency(rates.rate(s))}/sqft"
        for s in Surface
        if areas.sqft(s) > 0
    ]
    return "\n".join(lines)


def render_quote_summary(
    calc: QuoteCalculation,
    areas: ProjectAreas,
    rates: ChargeRates,
) -> str:
    """Render the short quote shown to the contractor before saving."""
    revenue_lines = [
        (
            f"- {_surface_label(s)}: {_format_sqft(areas.sqft(s))} sqft x "
            f"{format_currency(rates.rate(s))}/sqft = "
            f"{format_currency(calc.revenue.for_surface(s))}"
        )
        for s in Surface
        if areas.sqft(s) > 0
    ]
    sections = [
        "REVENUE BREAKDOWN",
        *revenue_lines,
        f"Total Revenue: {format_currency(calc.revenue.total)}",
        "",
        "MATERIALS",
        f"- Total Materials Cost: {format_currency(calc.materials.total)}",
        "",
        "LABOR ESTIMATE",
        (
            f"- Projected Labor ({format_percent(calc.labor.labor_percentage)}): "
            f"{format_currency(calc.labor.projected_labor)}"
        ),
        "",
        "FINAL QUOTE",
        f"Total Quote: {format_currency(calc.revenue.total)}",
        f"Projected Profit: {format_currency(calc.profit)}",
    ]
    return "\n".join(sections)


def render_breakdown(
    calc: QuoteCalculation,
    areas: ProjectAreas,
    rates: ChargeRates,
    paint_costs: PaintCosts,
) -> str:
    """Render every step of the calculation, from square footage to profit."""
    revenue_lines = [
        (
            f"- {_surface_label(s)}: {_format_sqft(areas.sqft(s))} sqft x "
            f"{format_currency(rates.rate(s))} = "
            f"{format_currency(calc.revenue.for_surface(s))}"
        )
        for s in Surface
        if areas.sqft(s) > 0
    ]
    material_lines = [
        (
            f"- {_surface_label(s)}: {calc.materials.for_surface(s).gallons} gallons x "
            f"{format_currency(paint_costs.cost(s))} = "
            f"{format_currency(calc.materials.for_surface(s).cost)}"
        )
        for s in Surface
    ]
    sections = [
        "REVENUE CALCULATION",
        *revenue_lines,
        f"Sum: {format_currency(calc.revenue.total)}",
        "",
        "MATERIALS COST",
        *material_lines,
        f"Materials Total: {format_currency(calc.materials.total)}",
        "",
        "LABOR CALCULATION",
        f"- Revenue after materials: {format_currency(calc.labor.revenue_after_materials)}",
        (
            f"- Labor ({format_percent(calc.labor.labor_percentage)}): "
            f"{format_currency(calc.labor.projected_labor)}"
        ),
        "",
        "PROFIT",
        f"- Revenue: {format_currency(calc.revenue.total)}",
        f"- Materials: -{format_currency(calc.materials.total)}",
        f"- Labor: -{format_currency(calc.labor.projected_labor)}",
        f"Projected Profit: {format_currency(calc.profit)}",
    ]
    return "\n".join(sections)
