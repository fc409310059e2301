"""Core data models for the trip planner."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union


Number = Union[int, float]


@dataclass
class TripRequest:
    """Raw trip parameters as received from a caller, before validation."""

    destination: Optional[str]
    start_date: Union[str, date, None]
    end_date: Union[str, date, None]
    budget: Any
    travel_style: Optional[str] = None
    travel_type: Optional[str] = None
    constraints: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class StyleConfig:
    activities_per_day: int
    pace: str
    description: str


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    trip_duration: Optional[int] = None


@dataclass(frozen=True)
class NormalizedInput:
    """Canonical, read-only view of a validated trip request."""

    destination: str
    full_destination: str
    start_date: str
    end_date: str
    duration: int
    budget: Number
    travel_style: str
    travel_type: str
    constraints: Tuple[str, ...]
    style_config: StyleConfig


@dataclass
class BudgetItem:
    amount: Number
    description: str


@dataclass
class DayPlan:
    day: int
    date: str
    activities: List[str] = field(default_factory=list)
    meals: List[str] = field(default_factory=list)
    accommodation: str = ""
    transport: str = ""
    notes: str = ""


@dataclass
class TravelPlan:
    trip_overview: Dict[str, Any]
    budget_breakdown: Dict[str, BudgetItem]
    daily_itinerary: List[DayPlan] = field(default_factory=list)
    safety_notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into the camelCase shape shared with model-generated plans."""

        return {
            "tripOverview": dict(self.trip_overview),
            "budgetBreakdown": {
                category: {"amount": item.amount, "description": item.description}
                for category, item in self.budget_breakdown.items()
            },
            "dailyItinerary": [
                {
                    "day": day.day,
                    "date": day.date,
                    "activities": list(day.activities),
                    "meals": list(day.meals),
                    "accommodation": day.accommodation,
                    "transport": day.transport,
                    "notes": day.notes,
                }
                for day in self.daily_itinerary
            ],
            "safetyNotes": self.safety_notes,
        }


@dataclass
class SavedPlan:
    """A travel plan persisted for a user."""

    id: str
    user_id: str
    destination: str
    start_date: str
    end_date: str
    budget: Any
    trip_type: str
    plan_data: Dict[str, Any]
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "destination": self.destination,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "budget": self.budget,
            "tripType": self.trip_type,
            "planData": self.plan_data,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
