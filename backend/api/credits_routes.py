# api/credits_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from api._resp import fail, ok
from api.deps import calculator_dep
from config import settings
from core.exceptions import CalculationError
from models.emissions import CreditsRequest, CreditsResult
from services.emissions.calculator import EmissionCalculator
from services.emissions.formatting import format_currency

router = APIRouter(prefix="/credits", tags=["credits"])


@router.post("/estimate", summary="Carbon credits to offset an emission, with a sampled price")
def estimate_credits(
    req: CreditsRequest, calc: EmissionCalculator = Depends(calculator_dep)
):
    try:
        est = calc.estimate_credits(req.emissions_kg)
    except CalculationError as e:
        fail(400, f"Credit estimation failed: {e}")
    return ok(
        CreditsResult(
            emissions_kg=req.emissions_kg,
            credits_needed=est.credits_needed,
            estimated_cost=est.estimated_cost,
            formatted_cost=format_currency(
                est.estimated_cost, settings.CURRENCY, settings.DISPLAY_LOCALE
            ),
            currency=settings.CURRENCY,
        ).model_dump()
    )
