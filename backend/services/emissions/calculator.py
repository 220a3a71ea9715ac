# services/emissions/calculator.py
from __future__ import annotations
import math
import random
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Union

from core.exceptions import (
    CalculationError,
    InvalidDistanceError,
    InvalidEmissionsError,
    UnknownModeError,
)
from models.emissions import CalculatorConfig, CreditEstimate
from models.transport import TransportMode

ModeLike = Union[TransportMode, str]

_CENTS = Decimal("0.01")


def _as_amount(value, what: str, exc: type) -> float:
    if isinstance(value, bool):
        raise exc(f"{what} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise exc(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(v) or v < 0:
        raise exc(f"{what} must be finite and >= 0, got {value!r}")
    return v


class EmissionCalculator:
    """
    Turns a distance (km) and a transport mode into kg CO2, a per-mode
    comparison and a carbon-credit offset estimate.

    Credit prices are sampled from ``config.price_range`` on every call to
    simulate a fluctuating market; pass a seeded ``random.Random`` to pin them.
    """

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or CalculatorConfig()
        self.rng = rng or random.Random()

    def _factor(self, mode: ModeLike) -> tuple[str, float]:
        key = mode.value if isinstance(mode, TransportMode) else mode
        if not isinstance(key, str):
            raise UnknownModeError(mode, self.config.modes)
        key = key.strip().lower()
        factors = self.config.emission_factors
        if key not in factors:
            raise UnknownModeError(mode, self.config.modes)
        return key, factors[key]

    def calculate_emissions(self, distance_km: float, mode: ModeLike) -> float:
        """kg CO2 for travelling ``distance_km`` with ``mode``."""
        _, factor = self._factor(mode)
        dist = _as_amount(distance_km, "distance_km", InvalidDistanceError)
        return dist * factor

    def calculate_all_emissions(self, distance_km: float) -> Dict[str, float]:
        return {
            mode: self.calculate_emissions(distance_km, mode)
            for mode in self.config.emission_factors
        }

    def get_eco_friendly_mode(self, distance_km: float) -> Optional[str]:
        best_mode: Optional[str] = None
        best = math.inf
        for mode, kg in self.calculate_all_emissions(distance_km).items():
            if kg < best:  # first-seen wins on ties
                best = kg
                best_mode = mode
        return best_mode

    def get_carbon_credits_needed(self, emissions_kg: float) -> int:
        kg = _as_amount(emissions_kg, "emissions_kg", InvalidEmissionsError)
        return int(math.ceil(kg / self.config.kg_per_credit))

    def calculate_credit_cost(self, num_credits: int) -> float:
        """Total price for ``num_credits`` at a randomly sampled unit price, rounded to cents."""
        if isinstance(num_credits, bool) or not isinstance(num_credits, int) or num_credits < 0:
            raise CalculationError(f"num_credits must be a non-negative integer, got {num_credits!r}")
        lo, hi = self.config.price_range
        unit_price = min(max(self.rng.uniform(lo, hi), lo), hi)
        total = Decimal(repr(num_credits * unit_price)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return float(total)

    def estimate_credits(self, emissions_kg: float) -> CreditEstimate:
        credits = self.get_carbon_credits_needed(emissions_kg)
        return CreditEstimate(
            credits_needed=credits,
            estimated_cost=self.calculate_credit_cost(credits),
        )
