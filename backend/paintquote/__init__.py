"""paintquote: quote pricing engine for painting contractors.

Usage::

    from paintquote import ChargeRates, PaintCosts, ProjectAreas, calculate_quote

    quote = calculate_quote(
        ProjectAreas(walls_sqft=1000, ceilings_sqft=1000, trim_sqft=520),
        ChargeRates(walls_rate=3.00, ceilings_rate=2.00, trim_rate=1.92),
        PaintCosts(walls_paint_cost=26, ceilings_paint_cost=25, trim_paint_cost=35),
    )
    quote.profit  # 4042.78

or, against a contractor's standing rates::

    from paintquote import create_default_engine

    engine = create_default_engine()
    quote = engine.quote(ProjectAreas(walls_sqft=1000))
"""

from paintquote.constants import DEFAULT_COVERAGE_SQFT_PER_GALLON, DEFAULT_LABOR_PERCENT
from paintquote.engine import QuoteEngine
from paintquote.exceptions import InvalidQuoteInputError, PaintQuoteError
from paintquote.factory import create_default_engine
from paintquote.inputs import parse_contractor_profile, parse_quote_request
from paintquote.models.enums import ProjectType, Surface
from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
from paintquote.models.profile import ContractorProfile
from paintquote.models.quote import (
    LaborCalculation,
    MaterialsBreakdown,
    QuoteCalculation,
    RevenueBreakdown,
    SurfaceMaterials,
)
from paintquote.models.request import QuoteRequest
from paintquote.pricing import (
    calculate_labor,
    calculate_materials,
    calculate_profit,
    calculate_quote,
    calculate_revenue,
)

__all__ = [
    "DEFAULT_COVERAGE_SQFT_PER_GALLON",
    "DEFAULT_LABOR_PERCENT",
    "ChargeRates",
    "ContractorProfile",
    "InvalidQuoteInputError",
    "LaborCalculation",
    "MaterialsBreakdown",
    "PaintCosts",
    "PaintQuoteError",
    "ProjectAreas",
    "ProjectType",
    "QuoteCalculation",
    "QuoteEngine",
    "QuoteRequest",
    "RevenueBreakdown",
    "Surface",
    "SurfaceMaterials",
    "calculate_labor",
    "calculate_materials",
    "calculate_profit",
    "calculate_quote",
    "calculate_revenue",
    "create_default_engine",
    "parse_contractor_profile",
    "parse_quote_request",
]
