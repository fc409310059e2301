"""Tests for the rule-based fallback plan."""

from __future__ import annotations

import pytest

from trip_planner.catalog import CURATED_DESTINATIONS, GENERIC_DAY
from trip_planner.fallback import generate_fallback_plan
from trip_planner.inputs import normalize_trip_request
from trip_planner.models import TripRequest


def _normalized(**overrides):
    data = dict(
        destination="Lisbon, Portugal",
        start_date="2026-06-10",
        end_date="2026-06-12",
        budget=20000,
        travel_style="balanced",
    )
    data.update(overrides)
    return normalize_trip_request(TripRequest(**data))


def test_budget_split_uses_fixed_percentages():
    plan = generate_fallback_plan(_normalized(budget=20000))
    amounts = {category: item.amount for category, item in plan.budget_breakdown.items()}
    assert amounts == {
        "accommodation": 8000,
        "food": 5000,
        "transport": 3000,
        "activities": 3000,
        "contingency": 1000,
    }


@pytest.mark.parametrize("budget", [1, 7, 14, 99, 1234, 15001, 33333, 999.99])
def test_budget_never_exceeds_total(budget):
    plan = generate_fallback_plan(_normalized(budget=budget))
    allocated = sum(item.amount for item in plan.budget_breakdown.values())
    assert allocated <= budget
    assert budget - allocated < 5


def test_jaipur_uses_curated_days_then_generic():
    normalized = _normalized(
        destination="Jaipur, India",
        start_date="2026-03-27",
        end_date="2026-03-29",
        budget=15000,
    )
    plan = generate_fallback_plan(normalized)
    jaipur = CURATED_DESTINATIONS[0]
    days = plan.daily_itinerary

    assert normalized.duration == 3
    assert [d.day for d in days] == [1, 2, 3]
    assert [d.date for d in days] == ["2026-03-27", "2026-03-28", "2026-03-29"]
    assert days[0].activities == list(jaipur.days[0].activities)
    assert days[1].activities == list(jaipur.days[1].activities)
    assert days[2].activities == list(GENERIC_DAY.activities)
    assert "Amber Fort" in days[0].activities[0]


def test_other_destinations_follow_constraint_templates():
    no_museums = generate_fallback_plan(_normalized(constraints=["no museums", "vegetarian"]))
    day = no_museums.daily_itinerary[0]
    assert day.activities[0].startswith("Morning (9:00-12:00): City walking tour")
    assert day.meals[0] == "Vegetarian breakfast at local café"
    assert "customized for constraints: no museums, vegetarian" in day.notes

    outdoor = generate_fallback_plan(_normalized(constraints=["outdoor activities only"]))
    assert "Nature hike" in outdoor.daily_itinerary[0].activities[0]

    default = generate_fallback_plan(_normalized())
    assert "landmarks and monuments" in default.daily_itinerary[0].activities[0]
    assert default.daily_itinerary[0].meals[0] == "Breakfast at local café"


def test_plan_dict_has_the_shared_shape():
    data = generate_fallback_plan(_normalized(travel_type="solo"), currency="EUR").to_dict()
    assert set(data) == {"tripOverview", "budgetBreakdown", "dailyItinerary", "safetyNotes"}
    assert data["tripOverview"]["currency"] == "EUR"
    assert data["tripOverview"]["destination"] == "Lisbon, Portugal"
    assert data["tripOverview"]["travelType"] == "solo"
    assert data["budgetBreakdown"]["food"] == {"amount": 5000, "description": "Meals for 3 days"}
    assert set(data["dailyItinerary"][0]) == {
        "day", "date", "activities", "meals", "accommodation", "transport", "notes",
    }
    assert "solo traveler" in data["safetyNotes"]


def test_fallback_is_deterministic():
    normalized = _normalized(destination="Mumbai")
    assert generate_fallback_plan(normalized) == generate_fallback_plan(normalized)


@pytest.mark.parametrize("style, count", [("chill", 2), ("balanced", 3), ("fast-paced", 4)])
def test_generic_days_state_the_pace(style, count):
    plan = generate_fallback_plan(_normalized(travel_style=style))
    for day in plan.daily_itinerary:
        assert day.activities[0].endswith(f"({count} activities)")
        assert not day.activities[1].endswith("activities)")
