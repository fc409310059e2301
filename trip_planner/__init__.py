"""Travel plan generation: validation, prompting, model call, repair and fallback."""

from .errors import GatewayError, MalformedResponse, TripPlannerError, ValidationError
from .fallback import generate_fallback_plan
from .inputs import normalize_trip_request, validate_trip_request
from .models import DayPlan, NormalizedInput, TravelPlan, TripRequest, ValidationResult
from .planner import generate_travel_plan
from .prompts import build_travel_prompt
from .repair import repair_model_response
from .safety import resolve_safety_notes

__all__ = [
    "DayPlan",
    "GatewayError",
    "MalformedResponse",
    "NormalizedInput",
    "TravelPlan",
    "TripPlannerError",
    "TripRequest",
    "ValidationError",
    "ValidationResult",
    "build_travel_prompt",
    "generate_fallback_plan",
    "generate_travel_plan",
    "normalize_trip_request",
    "repair_model_response",
    "resolve_safety_notes",
    "validate_trip_request",
]
