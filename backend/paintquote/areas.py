"""Helpers for assembling ProjectAreas from rough measurements.

Contractors often quote from partial numbers: a run of linear wall footage
and a ceiling height, or a single "about 2,000 square feet" figure. These
helpers turn such numbers into per-surface areas. They do no text parsing.
"""

from __future__ import annotations

import math

from paintquote.models.enums import ProjectType, Surface
from paintquote.models.inputs import ProjectAreas

# (walls, ceilings, trim) share of a single total-area figure.
_INTERIOR_SPLIT = (0.6, 0.6, 0.3)
_EXTERIOR_SPLIT = (0.8, 0.0, 0.2)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def wall_area_from_linear_feet(linear_feet: float, height_ft: float) -> float:
    """Wall area for a run of ``linear_feet`` at ``height_ft`` tall."""
    return linear_feet * height_ft


def estimate_areas_from_total(
    total_sqft: float,
    project_type: ProjectType = ProjectType.INTERIOR,
) -> ProjectAreas:
    """Split one total-area figure into walls, ceilings and trim.

    Interior jobs assume walls and ceilings of roughly the floor area
    each (60% of the figure) with trim at 30%. Every other project type is
    treated as exterior: 80% walls, no ceilings, 20% trim. Each share is
    rounded half-up to a whole square foot.
    """
    if ProjectType(project_type) is ProjectType.INTERIOR:
        walls, ceilings, trim = _INTERIOR_SPLIT
    else:
        walls, ceilings, trim = _EXTERIOR_SPLIT
    return ProjectAreas(
        walls_sqft=_round_half_up(total_sqft * walls),
        ceilings_sqft=_round_half_up(total_sqft * ceilings),
        trim_sqft=_round_half_up(total_sqft * trim),
    )


def exclude_surfaces(areas: ProjectAreas, *surfaces: Surface) -> ProjectAreas:
    """Return a copy with the given surfaces zeroed (not being painted)."""
    update = {f"{Surface(s).value}_sqft": 0.0 for s in surfaces}
    return areas.model_copy(update=update)


def only_surfaces(areas: ProjectAreas, *surfaces: Surface) -> ProjectAreas:
    """Return a copy keeping only the given surfaces, e.g. a walls-only job."""
    keep = {Surface(s) for s in surfaces}
    return exclude_surfaces(areas, *(s for s in Surface if s not in keep))
