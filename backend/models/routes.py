# models/routes.py
from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Route(BaseModel):
    """A known city pair. Usable in either direction."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    distance_km: float = Field(..., gt=0)

    # Accept the camelCase key used by the browser data files
    @model_validator(mode="before")
    @classmethod
    def _accept_camel_case(cls, v: Any) -> Any:
        if isinstance(v, dict) and "distanceKm" in v and "distance_km" not in v:
            out: Dict[str, Any] = dict(v)
            out["distance_km"] = out.pop("distanceKm")
            return out
        return v

    @field_validator("origin", "destination")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("place name must not be blank")
        return v


class PlacesResponse(BaseModel):
    places: List[str]


class DistanceResponse(BaseModel):
    origin: str
    destination: str
    distance_km: float


class CalculateRequest(BaseModel):
    origin: str
    destination: str
    mode: str
    # Omit to resolve from the route table
    distance_km: Optional[float] = Field(default=None, gt=0)

    @field_validator("origin", "destination")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("origin and destination are required")
        return v


class CalculateResult(BaseModel):
    origin: str
    destination: str
    distance_km: float
    distance_source: Literal["route_table", "manual"]
    mode: str
    mode_label: str
    mode_icon: str
    mode_color: str
    emissions_kg: float
    formatted_emissions: str
    comparison: Dict[str, float]
    eco_mode: Optional[str] = None
    credits_needed: int
    estimated_cost: float
    formatted_cost: str
    eco_tip: str = ""
    impact_fact: str = ""
