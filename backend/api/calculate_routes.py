# api/calculate_routes.py
from __future__ import annotations
import logging

from fastapi import APIRouter, Depends

from api._resp import fail, ok
from api.deps import calculator_dep, route_table_dep
from config import settings
from core.exceptions import CalculationError
from models.routes import CalculateRequest, CalculateResult
from models.transport import mode_info
from services.emissions.calculator import EmissionCalculator
from services.emissions.formatting import format_currency, format_number
from services.routes.route_table import ROUTE_NOT_FOUND, RouteTable
from services.tips import IMPACT_INFO, get_random_tip

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculate"])


@router.post("/calculate", summary="Full trip calculation: emissions, comparison and offset")
def calculate(
    req: CalculateRequest,
    calc: EmissionCalculator = Depends(calculator_dep),
    table: RouteTable = Depends(route_table_dep),
):
    """
    Mirrors the calculator form: resolve the distance from the route table
    unless one was typed in, then compute everything the results page shows.
    """
    if req.distance_km is not None:
        distance, source = req.distance_km, "manual"
    else:
        distance = table.find_distance(req.origin, req.destination)
        if distance is ROUTE_NOT_FOUND:
            fail(
                404,
                f"Route not found: {req.origin} -> {req.destination}. "
                "Provide distance_km to calculate manually.",
            )
        source = "route_table"

    try:
        emissions = calc.calculate_emissions(distance, req.mode)
        comparison = calc.calculate_all_emissions(distance)
        eco_mode = calc.get_eco_friendly_mode(distance)
        credits = calc.estimate_credits(emissions)
    except CalculationError as e:
        fail(400, f"Calculation failed: {e}")

    mode = req.mode.strip().lower()
    info = mode_info(mode)
    logger.debug(
        "[calculate] %s -> %s %.1f km (%s) by %s: %.2f kg",
        req.origin, req.destination, distance, source, mode, emissions,
    )
    result = CalculateResult(
        origin=req.origin,
        destination=req.destination,
        distance_km=distance,
        distance_source=source,
        mode=mode,
        mode_label=info.label,
        mode_icon=info.icon,
        mode_color=info.color,
        emissions_kg=emissions,
        formatted_emissions=format_number(emissions, 2, settings.DISPLAY_LOCALE),
        comparison=comparison,
        eco_mode=eco_mode,
        credits_needed=credits.credits_needed,
        estimated_cost=credits.estimated_cost,
        formatted_cost=format_currency(
            credits.estimated_cost, settings.CURRENCY, settings.DISPLAY_LOCALE
        ),
        eco_tip=get_random_tip(mode, calc.rng),
        impact_fact=IMPACT_INFO["co2_equivalent"],
    )
    return ok(result.model_dump())
