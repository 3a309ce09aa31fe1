"""Factory functions for creating pre-configured QuoteEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paintquote.data.defaults import DEFAULT_PROFILE
from paintquote.engine import QuoteEngine

if TYPE_CHECKING:
    from paintquote.models.profile import ContractorProfile


def create_default_engine(profile: ContractorProfile | None = None) -> QuoteEngine:
    """Create a QuoteEngine wired up with the seed contractor profile.

    This is the recommended way to create a QuoteEngine for typical usage.
    Pass ``profile`` to price against a specific contractor's rates instead
    of the built-in defaults ($3.00 / $2.00 / $1.92 per sq ft, 30% labor,
    350 sq ft per gallon).

    Example::

        from paintquote import create_default_engine, ProjectAreas

        engine = create_default_engine()
        quote = engine.quote(ProjectAreas(walls_sqft=1200))
    """
    return QuoteEngine(profile if profile is not None else DEFAULT_PROFILE)
