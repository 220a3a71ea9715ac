# api/places_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from api._resp import fail, ok
from api.deps import route_table_dep
from models.routes import DistanceResponse, PlacesResponse
from services.routes.route_table import ROUTE_NOT_FOUND, RouteTable

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("/places", summary="Known places, sorted (for input suggestions)")
def list_places(table: RouteTable = Depends(route_table_dep)):
    return ok(PlacesResponse(places=table.list_places()).model_dump())


@router.get("/distance", summary="Known distance between two places")
def find_distance(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    table: RouteTable = Depends(route_table_dep),
):
    dist = table.find_distance(origin, destination)
    if dist is ROUTE_NOT_FOUND:
        fail(404, f"Route not found: {origin} -> {destination}. Enter the distance manually.")
    return ok(
        DistanceResponse(
            origin=origin.strip(), destination=destination.strip(), distance_km=dist
        ).model_dump()
    )
