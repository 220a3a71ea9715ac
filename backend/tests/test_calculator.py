# backend/tests/test_calculator.py
import math
import random

import pytest

from core.exceptions import (
    CalculationError,
    InvalidDistanceError,
    InvalidEmissionsError,
    UnknownModeError,
)
from models.emissions import CalculatorConfig
from models.transport import TransportMode
from services.emissions.calculator import EmissionCalculator


def _two_decimals(x: float) -> bool:
    return round(x, 2) == x


@pytest.mark.parametrize(
    "mode,factor",
    [("bicycle", 0.0), ("car", 0.12), ("bus", 0.089), ("truck", 0.27)],
)
@pytest.mark.parametrize("distance", [0, 1, 95.5, 430, 3939])
def test_emissions_is_distance_times_factor(calc, mode, factor, distance):
    assert calc.calculate_emissions(distance, mode) == pytest.approx(distance * factor)


def test_bicycle_emits_nothing(calc):
    assert calc.calculate_emissions(100, "bicycle") == 0
    assert calc.get_eco_friendly_mode(100) == "bicycle"


def test_enum_and_string_modes_agree(calc):
    assert calc.calculate_emissions(50, TransportMode.TRUCK) == calc.calculate_emissions(50, "truck")
    assert calc.calculate_emissions(50, " Car ") == calc.calculate_emissions(50, "car")


@pytest.mark.parametrize("mode", ["plane", "", None, 3])
def test_unknown_mode(calc, mode):
    with pytest.raises(UnknownModeError) as ei:
        calc.calculate_emissions(10, mode)
    assert "bicycle" in str(ei.value)


@pytest.mark.parametrize("distance", [-1, math.nan, math.inf, -math.inf, "ten", None, True])
def test_invalid_distance(calc, distance):
    with pytest.raises(InvalidDistanceError):
        calc.calculate_emissions(distance, "car")


def test_errors_are_calculation_errors_and_value_errors(calc):
    with pytest.raises(CalculationError):
        calc.calculate_emissions(10, "rocket")
    with pytest.raises(ValueError):
        calc.calculate_emissions(-5, "car")


def test_all_emissions_one_entry_per_mode_in_order(calc):
    all_em = calc.calculate_all_emissions(200)
    assert list(all_em) == ["bicycle", "car", "bus", "truck"]
    assert all_em["truck"] == pytest.approx(54.0)


@pytest.mark.parametrize("distance", [0.1, 1, 430, 10_000])
def test_eco_mode_is_bicycle_for_positive_distance(calc, distance):
    assert calc.get_eco_friendly_mode(distance) == "bicycle"


def test_eco_mode_first_seen_wins_on_ties():
    calc = EmissionCalculator(
        CalculatorConfig(emission_factors={"bus": 0.05, "train": 0.05, "car": 0.1})
    )
    assert calc.get_eco_friendly_mode(100) == "bus"
    # everything is zero at zero distance
    assert calc.get_eco_friendly_mode(0) == "bus"


def test_custom_factor_table_drives_comparison():
    calc = EmissionCalculator(CalculatorConfig(emission_factors={"Car": 0.2, "Train": 0.04}))
    assert calc.calculate_all_emissions(10) == pytest.approx({"car": 2.0, "train": 0.4})
    assert calc.get_eco_friendly_mode(10) == "train"
    with pytest.raises(UnknownModeError):
        calc.calculate_emissions(10, "bicycle")


def test_credits_ceiling(calc):
    kg = calc.config.kg_per_credit
    assert calc.get_carbon_credits_needed(0) == 0
    assert calc.get_carbon_credits_needed(0.001) == 1
    assert calc.get_carbon_credits_needed(kg) == 1
    assert calc.get_carbon_credits_needed(kg + 1) == 2
    assert isinstance(calc.get_carbon_credits_needed(kg), int)


def test_credits_follow_configured_size():
    calc = EmissionCalculator(CalculatorConfig(kg_per_credit=250))
    assert calc.get_carbon_credits_needed(1000) == 4
    assert calc.get_carbon_credits_needed(1001) == 5


@pytest.mark.parametrize("kg", [-0.5, math.nan, math.inf])
def test_credits_reject_bad_emissions(calc, kg):
    with pytest.raises(InvalidEmissionsError):
        calc.get_carbon_credits_needed(kg)


@pytest.mark.parametrize("n", [0, 1, 3, 17, 250])
def test_credit_cost_within_bounds_and_cents(calc, n):
    lo, hi = calc.config.price_range
    for _ in range(50):
        cost = calc.calculate_credit_cost(n)
        assert n * lo <= cost <= n * hi
        assert _two_decimals(cost)


def test_credit_cost_is_sampled_not_fixed():
    calc = EmissionCalculator(rng=random.Random(99))
    costs = {calc.calculate_credit_cost(10) for _ in range(20)}
    assert len(costs) > 1


def test_credit_cost_reproducible_with_seed():
    a = EmissionCalculator(rng=random.Random(7))
    b = EmissionCalculator(rng=random.Random(7))
    assert [a.calculate_credit_cost(3) for _ in range(5)] == [
        b.calculate_credit_cost(3) for _ in range(5)
    ]


def test_credit_cost_matches_injected_price():
    class FixedRng(random.Random):
        def uniform(self, a, b):
            return 100.005

    calc = EmissionCalculator(rng=FixedRng())
    # 100.005 rounds half-up to 100.01
    assert calc.calculate_credit_cost(1) == pytest.approx(100.01)
    assert calc.calculate_credit_cost(2) == pytest.approx(200.01)


def test_degenerate_price_range_is_fixed_price():
    calc = EmissionCalculator(CalculatorConfig(price_range=(80, 80)))
    assert calc.calculate_credit_cost(3) == 240.0


@pytest.mark.parametrize("n", [-1, 1.5, "2", True])
def test_credit_cost_rejects_bad_counts(calc, n):
    with pytest.raises(CalculationError):
        calc.calculate_credit_cost(n)


def test_sao_paulo_rio_by_car(calc, table):
    distance = table.find_distance("São Paulo, SP", "Rio de Janeiro, RJ")
    assert distance == 430
    emissions = calc.calculate_emissions(distance, "car")
    assert emissions == pytest.approx(51.6)
    est = calc.estimate_credits(emissions)
    assert est.credits_needed == 1
    assert 50 <= est.estimated_cost <= 150
    assert _two_decimals(est.estimated_cost)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"emission_factors": {}},
        {"emission_factors": {"car": -0.1}},
        {"emission_factors": {"car": math.nan}},
        {"kg_per_credit": 0},
        {"kg_per_credit": math.inf},
        {"price_range": (150, 50)},
        {"price_range": (-1, 50)},
    ],
)
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        CalculatorConfig(**kwargs)


def test_config_is_immutable():
    cfg = CalculatorConfig()
    with pytest.raises(ValueError):
        cfg.kg_per_credit = 1
