"""Seed pricing data for the paintquote engine."""

from paintquote.data.defaults import DEFAULT_CHARGE_RATES, DEFAULT_PAINT_COSTS, DEFAULT_PROFILE

__all__ = [
    "DEFAULT_CHARGE_RATES",
    "DEFAULT_PAINT_COSTS",
    "DEFAULT_PROFILE",
]
