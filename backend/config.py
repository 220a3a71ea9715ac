# backend/config.py
from __future__ import annotations
import json
from pathlib import Path
import os
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from core.exceptions import ConfigurationError
from models.emissions import CalculatorConfig
from services.emissions.formatting import format_currency

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def get_data_dir() -> Path:
    # Fallback to backend/data when DATA_DIR is not set
    return Path(os.getenv("DATA_DIR", str(Path(__file__).with_name("data")))).resolve()


class Settings:
    """Snapshot of the environment at construction time."""

    def __init__(self) -> None:
        self.KG_PER_CREDIT: str = os.getenv("KG_PER_CREDIT", "1000")
        self.CREDIT_PRICE_MIN: str = os.getenv("CREDIT_PRICE_MIN", "50")
        self.CREDIT_PRICE_MAX: str = os.getenv("CREDIT_PRICE_MAX", "150")
        # JSON object, e.g. {"bicycle": 0, "car": 0.12}
        self.EMISSION_FACTORS: str = os.getenv("EMISSION_FACTORS", "")
        self.ROUTES_FILE: str = os.getenv("ROUTES_FILE", "")
        self.DISPLAY_LOCALE: str = os.getenv("DISPLAY_LOCALE", "pt-BR")
        self.CURRENCY: str = os.getenv("CURRENCY", "BRL")
        self.CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def routes_path(self) -> Optional[str]:
        """ROUTES_FILE resolved against DATA_DIR when relative; None for the built-in table."""
        if not self.ROUTES_FILE:
            return None
        p = Path(self.ROUTES_FILE)
        if not p.is_absolute():
            p = get_data_dir() / p
        return str(p)


def get_settings() -> Settings:
    return Settings()


def _parse_factors(raw: str) -> Optional[Dict[str, float]]:
    if not raw.strip():
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"EMISSION_FACTORS is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("EMISSION_FACTORS must be a JSON object of mode -> factor")
    return data


def calculator_config_from_settings(s: Optional[Settings] = None) -> CalculatorConfig:
    s = s or get_settings()
    kwargs = {}
    factors = _parse_factors(s.EMISSION_FACTORS)
    if factors is not None:
        kwargs["emission_factors"] = factors
    try:
        return CalculatorConfig(
            kg_per_credit=float(s.KG_PER_CREDIT),
            price_range=(float(s.CREDIT_PRICE_MIN), float(s.CREDIT_PRICE_MAX)),
            **kwargs,
        )
    except (ValueError, ValidationError) as e:
        raise ConfigurationError(f"Invalid calculator settings: {e}") from e


def check_display_settings(s: Optional[Settings] = None) -> None:
    """Raise ConfigurationError when DISPLAY_LOCALE is not one the formatter knows."""
    s = s or get_settings()
    try:
        format_currency(0, s.CURRENCY, s.DISPLAY_LOCALE)
    except ValueError as e:
        raise ConfigurationError(f"Invalid display settings: {e}") from e


settings = get_settings()
