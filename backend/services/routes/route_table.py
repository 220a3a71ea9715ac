# services/routes/route_table.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from models.routes import Route

logger = logging.getLogger(__name__)

# Sentinel returned by RouteTable.find_distance when no route is known
ROUTE_NOT_FOUND = None

Key = Tuple[str, str]  # (origin, destination), normalized


class RouteTable:
    """
    Read-only lookup of known city-pair distances (km).
    Place names are compared after trimming and case-folding; a route (A, B)
    also answers lookups for (B, A).
    """

    def __init__(self, routes: Iterable[Route], name: str = "custom") -> None:
        self.name = name
        self._routes: Tuple[Route, ...] = tuple(routes)
        self._by_pair: Dict[Key, float] = {}
        for r in self._routes:
            # first route listed for a pair wins
            self._by_pair.setdefault(
                (self._norm(r.origin), self._norm(r.destination)), float(r.distance_km)
            )

    @staticmethod
    def _norm(place: str) -> str:
        return place.strip().casefold()

    @property
    def routes(self) -> Tuple[Route, ...]:
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def list_places(self) -> List[str]:
        places = set()
        for r in self._routes:
            places.add(r.origin)
            places.add(r.destination)
        return sorted(places)

    def find_distance(self, origin: str, destination: str) -> Optional[float]:
        """
        Returns the distance for (origin, destination), trying the given order
        first and then the reverse. ROUTE_NOT_FOUND (None) if neither is known.
        """
        a, b = self._norm(origin), self._norm(destination)
        dist = self._by_pair.get((a, b))
        if dist is None:
            dist = self._by_pair.get((b, a))
        if dist is None:
            logger.debug("[routes] no route between %r and %r", origin, destination)
            return ROUTE_NOT_FOUND
        return dist
