"""Tests for travel plan orchestration."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from trip_planner.errors import GatewayError, ValidationError
from trip_planner.models import TripRequest
from trip_planner.planner import generate_travel_plan


def _sample_request(**overrides):
    data = dict(
        destination="Jaipur, India",
        start_date="2026-03-27",
        end_date="2026-03-29",
        budget=15000,
        travel_style="balanced",
    )
    data.update(overrides)
    return TripRequest(**data)


class StubGateway:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


def _model_plan(**overrides):
    plan = {
        "tripOverview": {
            "destination": "Jaipur, India",
            "duration": 3,
            "startDate": "2026-03-27",
            "endDate": "2026-03-29",
        },
        "budgetBreakdown": {"food": {"amount": 3750, "description": "Meals"}},
        "dailyItinerary": [
            {
                "day": n,
                "date": f"2026-03-{26 + n}",
                "activities": [f"Model activity {n}"],
                "meals": ["Model meal"],
                "transport": "Taxi",
            }
            for n in (1, 2, 3)
        ],
    }
    plan.update(overrides)
    return plan


def test_model_plan_is_returned_with_safety_notes_filled():
    gateway = StubGateway(response=json.dumps(_model_plan()))
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert len(gateway.prompts) == 1
    assert plan["dailyItinerary"][0]["activities"] == ["Model activity 1"]
    assert plan["safetyNotes"].startswith("Safety Guidelines for Jaipur, India:")


def test_model_safety_notes_are_kept():
    gateway = StubGateway(response=json.dumps(_model_plan(safetyNotes="Model notes")))
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert plan["safetyNotes"] == "Model notes"


def test_gateway_failure_falls_back_to_curated_plan():
    gateway = StubGateway(error=GatewayError("quota exceeded"))
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    days = plan["dailyItinerary"]
    assert len(gateway.prompts) == 1
    assert plan["tripOverview"]["duration"] == 3
    assert "Amber Fort" in days[0]["activities"][0]
    assert "City Palace" in days[1]["activities"][0]
    assert days[2]["activities"][0] == "Morning (9:00-12:00): Visit local landmarks and cultural sites"


def test_unexpected_gateway_exception_falls_back():
    gateway = StubGateway(error=RuntimeError("socket closed"))
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert plan["budgetBreakdown"]["accommodation"]["amount"] == 6000


def test_unparsable_response_falls_back():
    gateway = StubGateway(response="Sorry, I cannot help with that.")
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert "Amber Fort" in plan["dailyItinerary"][0]["activities"][0]


def test_plan_failing_review_falls_back():
    gateway = StubGateway(response=json.dumps(_model_plan(dailyItinerary=[])))
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert len(plan["dailyItinerary"]) == 3
    assert "Amber Fort" in plan["dailyItinerary"][0]["activities"][0]


def test_invalid_request_raises_before_calling_gateway():
    gateway = StubGateway(response="{}")
    with pytest.raises(ValidationError) as excinfo:
        generate_travel_plan(_sample_request(destination=""), gateway=gateway)
    assert "Destination is required" in excinfo.value.errors
    assert gateway.prompts == []


@patch("trip_planner.planner.OpenAIGateway")
def test_default_gateway_is_openai(mock_gateway_cls):
    mock_gateway_cls.return_value.complete.side_effect = GatewayError("no key")
    plan = generate_travel_plan(_sample_request(), currency="USD")
    mock_gateway_cls.assert_called_once_with()
    assert plan["tripOverview"]["currency"] == "USD"


def test_deeply_nested_response_falls_back():
    gateway = StubGateway(response="[" * 100000 + "]" * 100000)
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert "Amber Fort" in plan["dailyItinerary"][0]["activities"][0]


def test_plan_with_wrong_shape_falls_back():
    bad_days = [
        {"day": n, "activities": "see stuff", "meals": "eat", "transport": "Taxi"}
        for n in (1, 2, 3)
    ]
    gateway = StubGateway(
        response=json.dumps(_model_plan(budgetBreakdown="about 15000", dailyItinerary=bad_days))
    )
    plan = generate_travel_plan(_sample_request(), gateway=gateway)
    assert plan["budgetBreakdown"]["accommodation"]["amount"] == 6000
    assert isinstance(plan["dailyItinerary"][0]["activities"], list)
