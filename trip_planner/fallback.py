"""Rule-based travel plan used when the model cannot produce one."""

from __future__ import annotations

import logging
from typing import List, Optional

from .catalog import (
    BUDGET_SPLIT,
    GENERIC_ACCOMMODATION,
    GENERIC_ACTIVITIES,
    GENERIC_DAY,
    GENERIC_MEALS,
    GENERIC_TRANSPORT,
    CuratedDestination,
    DayTemplate,
    find_curated_destination,
)
from .models import BudgetItem, DayPlan, NormalizedInput, TravelPlan
from .safety import resolve_safety_notes
from .utils import make_date_list, percent_of


logger = logging.getLogger(__name__)


def _generic_template(constraints, activities_per_day: int) -> DayTemplate:
    if "no museums" in constraints:
        activities = GENERIC_ACTIVITIES["no museums"]
    elif "outdoor activities only" in constraints:
        activities = GENERIC_ACTIVITIES["outdoor activities only"]
    else:
        activities = GENERIC_ACTIVITIES["default"]
    first, *rest = activities
    activities = (f"{first} ({activities_per_day} activities)", *rest)
    meals = GENERIC_MEALS["vegetarian"] if "vegetarian" in constraints else GENERIC_MEALS["default"]
    return DayTemplate(activities=activities, meals=meals, accommodation=GENERIC_ACCOMMODATION)


def _template_for_day(
    day_number: int, curated: Optional[CuratedDestination], generic: DayTemplate
) -> DayTemplate:
    if curated is None:
        return generic
    if day_number <= len(curated.days):
        return curated.days[day_number - 1]
    return GENERIC_DAY


def _day_notes(normalized: NormalizedInput) -> str:
    if normalized.constraints:
        focus = "customized for constraints: " + ", ".join(normalized.constraints)
    else:
        focus = "balanced activities"
    return f"{normalized.style_config.description} day with {focus}. Start early to avoid crowds."


def build_itinerary(normalized: NormalizedInput) -> List[DayPlan]:
    curated = find_curated_destination(normalized.destination)
    generic = _generic_template(
        normalized.constraints, normalized.style_config.activities_per_day
    )
    notes = _day_notes(normalized)
    itinerary: List[DayPlan] = []
    for day_number, day_date in enumerate(
        make_date_list(normalized.start_date, normalized.duration), start=1
    ):
        template = _template_for_day(day_number, curated, generic)
        itinerary.append(
            DayPlan(
                day=day_number,
                date=day_date,
                activities=list(template.activities),
                meals=list(template.meals),
                accommodation=template.accommodation,
                transport=GENERIC_TRANSPORT,
                notes=notes,
            )
        )
    return itinerary


def generate_fallback_plan(normalized: NormalizedInput, currency: str = "INR") -> TravelPlan:
    """Build a deterministic plan without calling the model.

    Budget categories are whole-unit floors of their fixed percentages; any
    remainder is left unallocated rather than moved into contingency.
    """

    budget_breakdown = {
        share.category: BudgetItem(
            amount=percent_of(normalized.budget, share.percent),
            description=share.describe(normalized.duration),
        )
        for share in BUDGET_SPLIT
    }
    itinerary = build_itinerary(normalized)
    logger.info(
        "Generated fallback plan for %s with %d day(s)",
        normalized.full_destination,
        len(itinerary),
    )
    return TravelPlan(
        trip_overview={
            "destination": normalized.full_destination,
            "duration": normalized.duration,
            "startDate": normalized.start_date,
            "endDate": normalized.end_date,
            "travelStyle": normalized.travel_style,
            "travelType": normalized.travel_type,
            "totalBudget": normalized.budget,
            "currency": currency,
        },
        budget_breakdown=budget_breakdown,
        daily_itinerary=itinerary,
        safety_notes=resolve_safety_notes(normalized.full_destination, normalized.travel_type),
    )
