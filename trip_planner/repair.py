"""Turning raw model text into a travel plan dict."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List

from .errors import MalformedResponse
from .models import NormalizedInput


logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("tripOverview", "budgetBreakdown", "dailyItinerary")
TEXT_DAY_FIELDS = ("accommodation", "transport", "notes")

_TRAILING_COMMA = re.compile(r",\s*([}\]])")


def _apply_corrections(text: str) -> str:
    """The single correction pass, applied in a fixed order."""

    text = _TRAILING_COMMA.sub(r"\1", text)
    text = text.replace("'", '"')
    start = text.find("{")
    if start != -1:
        text = text[start:]
    end = text.rfind("}")
    if end != -1:
        text = text[: end + 1]
    return text


def repair_model_response(raw_text: str) -> Dict[str, Any]:
    """Parse model output, allowing exactly one textual repair pass.

    Raises MalformedResponse when the text is still not valid JSON after the
    repair pass, or when the result lacks the plan's top-level sections.
    """

    text = (raw_text or "").strip()
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        corrected = _apply_corrections(text)
        try:
            parsed = json.loads(corrected)
        except (ValueError, RecursionError) as exc:
            raise MalformedResponse(
                f"Model response is not valid JSON after repair: {exc}"
            ) from exc
        logger.info("Model response parsed after one repair pass")

    if not isinstance(parsed, dict):
        raise MalformedResponse("Model response is not a JSON object")
    missing = [key for key in REQUIRED_KEYS if parsed.get(key) is None]
    if missing:
        raise MalformedResponse(f"Model response missing: {', '.join(missing)}")
    return parsed


def review_plan(plan: Dict[str, Any], normalized: NormalizedInput) -> List[str]:
    """List the ways a parsed model plan disagrees with the request."""

    issues: List[str] = []
    overview = plan.get("tripOverview")
    if not isinstance(overview, dict):
        issues.append("tripOverview is not an object")
        overview = {}

    expected = {
        "startDate": normalized.start_date,
        "endDate": normalized.end_date,
        "duration": normalized.duration,
    }
    for key, value in expected.items():
        if overview.get(key) != value:
            issues.append(f"{key} mismatch: expected {value}, got {overview.get(key)}")

    issues.extend(_budget_issues(plan.get("budgetBreakdown")))

    days = plan.get("dailyItinerary")
    if not isinstance(days, list):
        issues.append("dailyItinerary is not a list")
        return issues
    if len(days) != normalized.duration:
        issues.append(
            f"Itinerary day count mismatch: expected {normalized.duration}, got {len(days)}"
        )
    for index, day in enumerate(days, start=1):
        if not isinstance(day, dict):
            issues.append(f"Day {index} is not an object")
            continue
        for key in ("activities", "meals"):
            if not day.get(key):
                issues.append(f"Day {index} missing {key}")
            elif not isinstance(day[key], list):
                issues.append(f"Day {index} {key} is not a list")
        if not day.get("transport"):
            issues.append(f"Day {index} missing transport information")
        for key in TEXT_DAY_FIELDS:
            if key in day and not isinstance(day[key], str):
                issues.append(f"Day {index} {key} is not text")
    return issues


def _budget_issues(breakdown: Any) -> List[str]:
    if not isinstance(breakdown, dict):
        return ["budgetBreakdown is not an object"]
    issues: List[str] = []
    for category, item in breakdown.items():
        if not isinstance(item, dict):
            issues.append(f"Budget item {category} is not an object")
            continue
        amount = item.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            issues.append(f"Budget item {category} amount is not a number")
        if not isinstance(item.get("description"), str):
            issues.append(f"Budget item {category} description is not text")
    return issues
