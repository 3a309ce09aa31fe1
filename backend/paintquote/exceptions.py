"""Custom exception hierarchy for the paintquote package."""

from __future__ import annotations


class PaintQuoteError(Exception):
    """Base exception for all paintquote errors."""


class InvalidQuoteInputError(PaintQuoteError):
    """Raised when a quote payload fails boundary validation."""
