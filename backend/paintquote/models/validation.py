"""Shared checks for boundary models.

The core input records accept anything; models that sit at the edge of the
engine (profiles, requests) use these checks to reject bad numbers early.
"""

from __future__ import annotations

import math

from pydantic import BaseModel


def require_finite_non_negative(record: BaseModel, label: str) -> BaseModel:
    """Raise ValueError if any numeric field of ``record`` is negative or non-finite."""
    for name, value in record.model_dump().items():
        if not math.isfinite(value):
            msg = f"{label}.{name} must be a finite number, got {value}"
            raise ValueError(msg)
        if value < 0:
            msg = f"{label}.{name} must be >= 0, got {value}"
            raise ValueError(msg)
    return record
