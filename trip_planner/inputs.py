"""Validation and normalization of incoming trip requests."""

from __future__ import annotations

import logging
from typing import List

from .catalog import (
    DEFAULT_TRAVEL_STYLE,
    DEFAULT_TRAVEL_TYPE,
    MAX_TRIP_DAYS,
    TRAVEL_STYLES,
    TRAVEL_TYPE_LABELS,
    TRAVEL_TYPES,
    VALID_CONSTRAINTS,
)
from .errors import ValidationError
from .models import NormalizedInput, TripRequest, ValidationResult
from .utils import coerce_number, parse_iso_date


logger = logging.getLogger(__name__)


def validate_trip_request(request: TripRequest) -> ValidationResult:
    """Check every input rule and collect all violations.

    Rules are not short-circuited, so a caller sees the full list of problems
    at once. ``trip_duration`` is only filled in for a valid request.
    """

    errors: List[str] = []

    if not isinstance(request.destination, str) or not request.destination.strip():
        errors.append("Destination is required")

    start = end = None
    if request.start_date in (None, ""):
        errors.append("Start date is required")
    else:
        start = parse_iso_date(request.start_date)
        if start is None:
            errors.append("Invalid start date format")

    if request.end_date in (None, ""):
        errors.append("End date is required")
    else:
        end = parse_iso_date(request.end_date)
        if end is None:
            errors.append("Invalid end date format")

    duration = None
    if start is not None and end is not None:
        if start > end:
            errors.append("Start date must be before end date")
        duration = (end - start).days + 1
        if duration > MAX_TRIP_DAYS:
            errors.append(f"Trips longer than {MAX_TRIP_DAYS} days are not supported")
        if duration < 1:
            errors.append("Trip must be at least 1 day")

    budget = coerce_number(request.budget)
    if budget is None or budget <= 0:
        errors.append("Budget must be a positive number")

    if request.travel_style and request.travel_style not in TRAVEL_STYLES:
        errors.append(
            f"Invalid travel style: {request.travel_style}. "
            f"Valid options: {', '.join(TRAVEL_STYLES)}"
        )

    if (
        request.travel_type
        and request.travel_type not in TRAVEL_TYPES
        and request.travel_type not in TRAVEL_TYPE_LABELS
    ):
        errors.append(
            f"Invalid travel type: {request.travel_type}. "
            f"Valid options: {', '.join(TRAVEL_TYPES)}"
        )

    if request.constraints is not None:
        if isinstance(request.constraints, (list, tuple)):
            for constraint in request.constraints:
                if constraint not in VALID_CONSTRAINTS:
                    errors.append(f"Invalid constraint: {constraint}")
        else:
            errors.append("Constraints must be a list")

    is_valid = not errors
    return ValidationResult(
        is_valid=is_valid,
        errors=errors,
        trip_duration=duration if is_valid else None,
    )


def ensure_valid(request: TripRequest) -> ValidationResult:
    """Validate ``request`` and raise ValidationError when it is rejected."""

    result = validate_trip_request(request)
    if not result.is_valid:
        logger.info("Rejected trip request with %d error(s)", len(result.errors))
        raise ValidationError(result.errors)
    return result


def normalize_trip_request(request: TripRequest) -> NormalizedInput:
    """Canonicalize a request that already passed validation."""

    full_destination = request.destination.strip()
    city = full_destination.split(",")[0]
    destination = " ".join(city.split()).lower()

    start = parse_iso_date(request.start_date)
    end = parse_iso_date(request.end_date)

    travel_style = request.travel_style or DEFAULT_TRAVEL_STYLE
    travel_type = request.travel_type or DEFAULT_TRAVEL_TYPE
    travel_type = TRAVEL_TYPE_LABELS.get(travel_type, travel_type)

    return NormalizedInput(
        destination=destination,
        full_destination=full_destination,
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        duration=(end - start).days + 1,
        budget=coerce_number(request.budget),
        travel_style=travel_style,
        travel_type=travel_type,
        constraints=tuple(request.constraints or ()),
        style_config=TRAVEL_STYLES[travel_style],
    )
