# services/emissions/emissions_factory.py
from __future__ import annotations
import logging
from functools import lru_cache

from config import calculator_config_from_settings
from .calculator import EmissionCalculator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_calculator() -> EmissionCalculator:
    """
    Return the process-wide calculator built from the environment.
    Unit prices are sampled from an unseeded generator.
    """
    config = calculator_config_from_settings()
    logger.info(
        "[emissions] modes=%s kg_per_credit=%s price_range=%s",
        ",".join(config.modes),
        config.kg_per_credit,
        config.price_range,
    )
    return EmissionCalculator(config)
