"""Enums for the paintquote domain models."""

from enum import StrEnum


class Surface(StrEnum):
    """The three paintable surface categories priced by the engine."""

    WALLS = "walls"
    CEILINGS = "ceilings"
    TRIM = "trim"


class ProjectType(StrEnum):
    """Where the painting happens, used when splitting a total area."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"
    BOTH = "both"
