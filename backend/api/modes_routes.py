# api/modes_routes.py
from fastapi import APIRouter, Depends

from api._resp import ok
from api.deps import calculator_dep
from models.transport import mode_info
from services.emissions.calculator import EmissionCalculator

router = APIRouter(prefix="/modes", tags=["modes"])


@router.get("", summary="Configured transport modes with factors and display metadata")
def list_modes(calc: EmissionCalculator = Depends(calculator_dep)):
    data = []
    for mode, factor in calc.config.emission_factors.items():
        data.append({"mode": mode, "factor_kg_per_km": factor, **mode_info(mode).model_dump()})
    return ok(data)
