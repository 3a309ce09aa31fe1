"""Quote engine: binds the pure pricing functions to a contractor profile.

The pricing functions in :mod:`paintquote.pricing` take every parameter
explicitly. ``QuoteEngine`` is the convenience layer on top: it holds a
validated :class:`ContractorProfile` and fills in whatever a particular quote
does not override (rates, paint costs, labor share, coverage).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from paintquote.pricing import calculate_quote

if TYPE_CHECKING:
    from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
    from paintquote.models.profile import ContractorProfile
    from paintquote.models.quote import QuoteCalculation
    from paintquote.models.request import QuoteRequest

logger = logging.getLogger(__name__)


class QuoteEngine:
    """Prices jobs against a contractor's standing rates.

    Args:
        profile: The contractor profile supplying default rates, paint
            costs, labor percentage and coverage.

    Example::

        from paintquote import ProjectAreas, create_default_engine

        engine = create_default_engine()
        quote = engine.quote(ProjectAreas(walls_sqft=1000, ceilings_sqft=1000))
    """

    def __init__(self, profile: ContractorProfile) -> None:
        self._profile = profile

    @property
    def profile(self) -> ContractorProfile:
        return self._profile

    def quote(
        self,
        areas: ProjectAreas,
        *,
        rates: ChargeRates | None = None,
        paint_costs: PaintCosts | None = None,
        labor_percent: float | None = None,
        coverage: float | None = None,
    ) -> QuoteCalculation:
        """Price a job, using profile values for anything not given."""
        profile = self._profile
        rates = rates if rates is not None else profile.rates
        paint_costs = paint_costs if paint_costs is not None else profile.paint_costs
        labor_percent = labor_percent if labor_percent is not None else profile.labor_percent
        coverage = coverage if coverage is not None else profile.coverage

        logger.debug(
            "Calculating quote for %.1f sqft (labor %s%%, coverage %s sqft/gal)",
            areas.total_sqft, labor_percent, coverage,
        )
        result = calculate_quote(areas, rates, paint_costs, labor_percent, coverage)
        logger.debug(
            "Quote: revenue=%.2f materials=%.2f labor=%.2f profit=%.2f",
            result.revenue.total,
            result.materials.total,
            result.labor.projected_labor,
            result.profit,
        )
        return result

    def quote_request(self, request: QuoteRequest) -> QuoteCalculation:
        """Price a validated QuoteRequest."""
        return self.quote(
            request.areas,
            rates=request.rates,
            paint_costs=request.paint_costs,
            labor_percent=request.labor_percent,
            coverage=request.coverage,
        )
