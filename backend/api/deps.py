# api/deps.py
from __future__ import annotations

from config import settings
from services.emissions.calculator import EmissionCalculator
from services.emissions.emissions_factory import get_calculator
from services.routes.route_table import RouteTable
from services.routes.routes_factory import get_route_table


# Thin wrappers so tests can swap them via app.dependency_overrides
def calculator_dep() -> EmissionCalculator:
    return get_calculator()


def route_table_dep() -> RouteTable:
    return get_route_table(settings.routes_path)
