"""Seed pricing data for a typical interior repaint.

Rates and paint costs reflect a mid-range residential contractor:
walls and ceilings at two coats with paint included, trim priced on an
area approximation of linear footage.
"""

from paintquote.constants import DEFAULT_COVERAGE_SQFT_PER_GALLON, DEFAULT_LABOR_PERCENT
from paintquote.models.inputs import ChargeRates, PaintCosts
from paintquote.models.profile import ContractorProfile

DEFAULT_CHARGE_RATES = ChargeRates(
    walls_rate=3.00,
    ceilings_rate=2.00,
    trim_rate=1.92,
)

DEFAULT_PAINT_COSTS = PaintCosts(
    walls_paint_cost=26.00,
    ceilings_paint_cost=25.00,
    trim_paint_cost=35.00,
)

DEFAULT_PROFILE = ContractorProfile(
    rates=DEFAULT_CHARGE_RATES,
    paint_costs=DEFAULT_PAINT_COSTS,
    labor_percent=DEFAULT_LABOR_PERCENT,
    coverage=DEFAULT_COVERAGE_SQFT_PER_GALLON,
)
