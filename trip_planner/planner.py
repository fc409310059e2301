"""Core orchestration logic for generating travel plans."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .config import get_settings
from .errors import GatewayError, MalformedResponse
from .fallback import generate_fallback_plan
from .inputs import ensure_valid, normalize_trip_request
from .llm import ModelGateway, OpenAIGateway
from .models import NormalizedInput, TripRequest
from .prompts import build_travel_prompt
from .repair import repair_model_response, review_plan
from .safety import resolve_safety_notes


logger = logging.getLogger(__name__)


def request_model_plan(
    normalized: NormalizedInput, gateway: ModelGateway, currency: str
) -> Dict[str, Any]:
    """Ask the model for a plan and return it parsed and reviewed.

    Makes exactly one gateway call. Raises GatewayError or MalformedResponse.
    """

    prompt = build_travel_prompt(normalized, currency)
    try:
        raw_text = gateway.complete(prompt)
    except GatewayError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise GatewayError(f"Model gateway failed: {exc}") from exc

    plan = repair_model_response(raw_text)
    issues = review_plan(plan, normalized)
    if issues:
        raise MalformedResponse("Model plan rejected: " + "; ".join(issues))

    notes = plan.get("safetyNotes")
    if not isinstance(notes, str) or not notes.strip():
        plan["safetyNotes"] = resolve_safety_notes(
            normalized.full_destination, normalized.travel_type
        )
    return plan


def generate_travel_plan(
    trip_request: TripRequest,
    gateway: Optional[ModelGateway] = None,
    currency: Optional[str] = None,
) -> Dict[str, Any]:
    """Validate a request and produce a travel plan dict.

    Only ValidationError escapes. Any gateway or parsing failure is logged and
    answered with the rule-based fallback plan.
    """

    validation = ensure_valid(trip_request)
    normalized = normalize_trip_request(trip_request)
    currency = currency or get_settings().currency
    logger.info(
        "Planning %d day trip to %s (%s, %s)",
        validation.trip_duration,
        normalized.full_destination,
        normalized.travel_style,
        normalized.travel_type,
    )

    if gateway is None:
        gateway = OpenAIGateway()
    try:
        return request_model_plan(normalized, gateway, currency)
    except (GatewayError, MalformedResponse) as exc:
        logger.warning("Fallback travel plan used due to error: %s", exc)
    return generate_fallback_plan(normalized, currency).to_dict()
