# services/routes/routes_factory.py
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Optional

from core.exceptions import ConfigurationError
from .loader import load_routes_csv
from .presets import brazil_routes
from .route_table import RouteTable

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def get_route_table(path: Optional[str] = None) -> RouteTable:
    """
    Return a cached route table.
    - no path -> built-in Brazilian routes
    - a CSV path -> routes from that file, falling back to the built-in
      table when the file cannot be read
    """
    if path:
        try:
            table = RouteTable(load_routes_csv(path), name=path)
            logger.info("[routes] loaded %d routes from %s", len(table), path)
            return table
        except (OSError, ConfigurationError) as e:
            # Fallback so the backend still runs
            logger.warning(
                "[routes] WARNING: Failed to load routes from %s: %s. Using built-in routes.",
                path,
                e,
            )

    return RouteTable(brazil_routes(), name="brazil")
