# services/routes/loader.py
from __future__ import annotations
import csv
from pathlib import Path
from typing import List

from pydantic import ValidationError

from core.exceptions import ConfigurationError
from models.routes import Route


def load_routes_csv(path: str | Path) -> List[Route]:
    """
    Read routes from a CSV with origin/destination/distance_km columns.
    Also tolerates from/to and distanceKm/km headers.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Routes file not found: {path}")

    routes: List[Route] = []
    try:
        with open(path, newline="", encoding="utf-8") as f:
            for i, row in enumerate(csv.DictReader(f), start=2):  # header is line 1
                routes.append(_row_to_route(row, path.name, i))
    except (UnicodeDecodeError, csv.Error) as e:
        raise ConfigurationError(f"{path.name}: not a readable UTF-8 CSV: {e}") from e

    if not routes:
        raise ConfigurationError(f"No routes found in {path}")
    return routes


def _row_to_route(row: dict, source: str, line: int) -> Route:
    origin = row.get("origin", row.get("from"))
    destination = row.get("destination", row.get("to"))
    dist = row.get("distance_km", row.get("distanceKm", row.get("km")))
    if origin is None or destination is None or dist is None:
        raise ConfigurationError(
            "Routes CSV must have origin, destination and distance_km columns."
        )
    try:
        return Route(
            origin=origin.strip(),
            destination=destination.strip(),
            distance_km=float(dist),
        )
    except (ValueError, ValidationError) as e:
        raise ConfigurationError(f"{source}:{line}: bad route row: {e}") from e
