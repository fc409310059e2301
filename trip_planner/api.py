"""FastAPI application exposing the trip planner."""

from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings
from .errors import ValidationError
from .llm import ModelGateway, OpenAIGateway
from .models import TripRequest
from .planner import generate_travel_plan
from .store import InMemoryPlanStore, PlanStore, new_saved_plan


API_VERSION = "1.0.0"

app = FastAPI(title="Trip Planner", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_store = InMemoryPlanStore()


def get_store() -> PlanStore:
    return _store


def get_gateway() -> ModelGateway:
    return OpenAIGateway()


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Access denied. No user identity provided.")
    return x_user_id


class TravelPlanPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    budget: Any = None
    travel_style: Optional[str] = Field(default=None, alias="travelStyle")
    travel_type: Optional[str] = Field(default=None, alias="travelType")
    constraints: Optional[Any] = None


class SavePlanPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    budget: Any
    trip_type: str = Field(alias="tripType")
    plan_data: Dict[str, Any] = Field(alias="planData")


class UpdatePlanPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plan_data: Optional[Dict[str, Any]] = Field(default=None, alias="planData")


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "service": "Trip Planner API", "version": API_VERSION}


@app.post("/api/travel/plan")
def create_travel_plan(
    payload: TravelPlanPayload, gateway: ModelGateway = Depends(get_gateway)
) -> Dict[str, Any]:
    trip_request = TripRequest(**payload.model_dump())
    try:
        plan = generate_travel_plan(trip_request, gateway=gateway)
    except ValidationError as exc:
        raise HTTPException(
            status_code=400, detail={"error": "Validation failed", "errors": exc.errors}
        ) from exc
    return {"message": "Travel plan generated successfully", "data": plan}


@app.post("/api/user-travel/plans", status_code=201)
def save_travel_plan(
    payload: SavePlanPayload,
    user_id: str = Depends(get_user_id),
    store: PlanStore = Depends(get_store),
) -> Dict[str, Any]:
    plan = store.save(new_saved_plan(user_id=user_id, **payload.model_dump()))
    return {"message": "Travel plan saved successfully", "plan": plan.to_dict()}


@app.get("/api/user-travel/plans")
def list_travel_plans(
    user_id: str = Depends(get_user_id), store: PlanStore = Depends(get_store)
) -> Dict[str, List[Dict[str, Any]]]:
    return {"plans": [plan.to_dict() for plan in store.list_by_user(user_id)]}


@app.put("/api/user-travel/plans/{plan_id}")
def update_travel_plan(
    plan_id: str,
    payload: UpdatePlanPayload,
    user_id: str = Depends(get_user_id),
    store: PlanStore = Depends(get_store),
) -> Dict[str, Any]:
    patch = payload.model_dump(exclude_none=True)
    if patch:
        plan = store.update_by_id(plan_id, patch, user_id=user_id)
    else:
        plan = store.get_by_id(plan_id, user_id=user_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Travel plan not found")
    return {"message": "Travel plan updated successfully", "plan": plan.to_dict()}


@app.delete("/api/user-travel/plans/{plan_id}")
def delete_travel_plan(
    plan_id: str,
    user_id: str = Depends(get_user_id),
    store: PlanStore = Depends(get_store),
) -> Dict[str, str]:
    if store.delete_by_id(plan_id, user_id=user_id) is None:
        raise HTTPException(status_code=404, detail="Travel plan not found")
    return {"message": "Travel plan deleted successfully"}
