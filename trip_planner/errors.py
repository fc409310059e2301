"""Exceptions raised by the travel plan pipeline."""

from typing import List, Sequence


class TripPlannerError(Exception):
    """Base class for trip planner failures."""


class ValidationError(TripPlannerError):
    """Raised when a trip request breaks one or more input rules."""

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__("Validation failed: " + "; ".join(self.errors))


class MalformedResponse(TripPlannerError):
    """Raised when model output cannot be turned into a travel plan."""


class GatewayError(TripPlannerError):
    """Raised when the model service call fails."""
