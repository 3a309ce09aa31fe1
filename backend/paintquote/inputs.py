"""Adapters that turn loosely-typed payloads into validated quote inputs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from paintquote.exceptions import InvalidQuoteInputError
from paintquote.models.profile import ContractorProfile
from paintquote.models.request import QuoteRequest

logger = logging.getLogger(__name__)


def parse_quote_request(payload: Mapping[str, Any]) -> QuoteRequest:
    """Validate a plain mapping (e.g. decoded JSON) into a QuoteRequest.

    Raises:
        InvalidQuoteInputError: If any field is missing, unknown, negative or
            non-finite, or if coverage is not positive.
    """
    try:
        return QuoteRequest.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Rejected quote request: %d validation error(s)", exc.error_count())
        raise InvalidQuoteInputError(str(exc)) from exc


def parse_contractor_profile(payload: Mapping[str, Any]) -> ContractorProfile:
    """Validate a plain mapping into a ContractorProfile.

    Raises:
        InvalidQuoteInputError: If the profile fails validation.
    """
    try:
        return ContractorProfile.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Rejected contractor profile: %d validation error(s)", exc.error_count())
        raise InvalidQuoteInputError(str(exc)) from exc
