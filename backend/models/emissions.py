# models/emissions.py
from __future__ import annotations
import math
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _canonical_factors() -> Dict[str, float]:
    # kg CO2 per km; insertion order is the comparison order
    return {
        "bicycle": 0.0,
        "car": 0.12,
        "bus": 0.089,
        "truck": 0.27,
    }


class CalculatorConfig(BaseModel):
    """Emission factors (kg CO2e per km) and carbon-credit settings. Override as needed."""

    model_config = ConfigDict(frozen=True)

    emission_factors: Dict[str, float] = Field(default_factory=_canonical_factors)
    kg_per_credit: float = Field(default=1000.0, gt=0)
    price_range: Tuple[float, float] = (50.0, 150.0)

    @field_validator("emission_factors")
    @classmethod
    def _normalize_factors(cls, v: Dict[str, float]) -> Dict[str, float]:
        if not v:
            raise ValueError("emission_factors must define at least one mode")
        out: Dict[str, float] = {}
        for mode, factor in v.items():
            key = str(mode).strip().lower()
            if not key:
                raise ValueError("emission_factors has a blank mode name")
            f = float(factor)
            if not math.isfinite(f) or f < 0:
                raise ValueError(f"emission factor for {key!r} must be finite and >= 0")
            out[key] = f
        return out

    @field_validator("kg_per_credit")
    @classmethod
    def _finite_credit_size(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("kg_per_credit must be finite")
        return v

    @model_validator(mode="after")
    def _check_price_range(self) -> "CalculatorConfig":
        lo, hi = self.price_range
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise ValueError("price_range bounds must be finite")
        if lo < 0 or lo > hi:
            raise ValueError(f"price_range must satisfy 0 <= min <= max, got {self.price_range}")
        return self

    @property
    def modes(self) -> list[str]:
        return list(self.emission_factors.keys())

    @property
    def price_min(self) -> float:
        return self.price_range[0]

    @property
    def price_max(self) -> float:
        return self.price_range[1]


class CreditEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    credits_needed: int
    estimated_cost: float


class EmissionsRequest(BaseModel):
    distance_km: float = Field(..., ge=0)
    mode: str


class EmissionsResult(BaseModel):
    mode: str
    distance_km: float
    emissions_kg: float


class ComparisonRequest(BaseModel):
    distance_km: float = Field(..., ge=0)


class ComparisonResult(BaseModel):
    distance_km: float
    emissions_kg: Dict[str, float]
    eco_mode: Optional[str] = None


class CreditsRequest(BaseModel):
    emissions_kg: float = Field(..., ge=0)


class CreditsResult(BaseModel):
    emissions_kg: float
    credits_needed: int
    estimated_cost: float
    formatted_cost: str
    currency: str
