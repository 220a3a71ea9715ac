# api/emissions_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from api._resp import fail, ok
from api.deps import calculator_dep
from core.exceptions import CalculationError
from models.emissions import (
    ComparisonRequest,
    ComparisonResult,
    EmissionsRequest,
    EmissionsResult,
)
from services.emissions.calculator import EmissionCalculator

router = APIRouter(prefix="/emissions", tags=["emissions"])


@router.post("/estimate")
def estimate_emissions(
    req: EmissionsRequest, calc: EmissionCalculator = Depends(calculator_dep)
):
    try:
        kg = calc.calculate_emissions(req.distance_km, req.mode)
    except CalculationError as e:
        # 400 rather than 500: unknown modes are bad input
        fail(400, f"Emissions estimation failed: {e}")
    return ok(
        EmissionsResult(
            mode=req.mode.strip().lower(), distance_km=req.distance_km, emissions_kg=kg
        ).model_dump(),
        units="kgCO2e",
    )


@router.post("/compare")
def compare_emissions(
    req: ComparisonRequest, calc: EmissionCalculator = Depends(calculator_dep)
):
    try:
        per_mode = calc.calculate_all_emissions(req.distance_km)
        eco = calc.get_eco_friendly_mode(req.distance_km)
    except CalculationError as e:
        fail(400, f"Emissions comparison failed: {e}")
    return ok(
        ComparisonResult(
            distance_km=req.distance_km, emissions_kg=per_mode, eco_mode=eco
        ).model_dump(),
        units="kgCO2e",
    )
