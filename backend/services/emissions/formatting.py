# services/emissions/formatting.py
from __future__ import annotations
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Tuple

_NBSP = "\u00a0"

# locale -> (decimal separator, group separator, currency pattern)
_LOCALES: Dict[str, Tuple[str, str, str]] = {
    "pt-BR": (",", ".", "{symbol}" + _NBSP + "{number}"),
    "en-US": (".", ",", "{symbol}{number}"),
    "en-GB": (".", ",", "{symbol}{number}"),
    "de-DE": (",", ".", "{number}" + _NBSP + "{symbol}"),
}

_SYMBOLS: Dict[str, str] = {
    "BRL": "R$",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def _locale(locale: str) -> Tuple[str, str, str]:
    key = locale.strip().replace("_", "-").lower()
    for name, spec in _LOCALES.items():
        if name.lower() == key:
            return spec
    raise ValueError(f"Unsupported locale: {locale!r} (known: {', '.join(_LOCALES)})")


def _digits(value: float, decimals: int, dec_sep: str, group_sep: str) -> Tuple[str, bool]:
    """Returns the unsigned grouped digits and whether a minus sign is needed."""
    if decimals < 0:
        raise ValueError("decimals must be >= 0")
    if not math.isfinite(float(value)):
        raise ValueError(f"cannot format non-finite value {value!r}")
    q = Decimal(1).scaleb(-decimals)
    d = Decimal(repr(float(value))).quantize(q, rounding=ROUND_HALF_UP)
    s = f"{abs(d):,.{decimals}f}"
    s = s.replace(",", "\x00").replace(".", dec_sep).replace("\x00", group_sep)
    return s, d < 0


def format_number(value: float, decimals: int = 2, locale: str = "pt-BR") -> str:
    """Grouped number with exactly ``decimals`` fractional digits, e.g. 1.234,50 for pt-BR."""
    dec_sep, group_sep, _ = _locale(locale)
    body, negative = _digits(value, decimals, dec_sep, group_sep)
    return "-" + body if negative else body


def format_currency(value: float, currency: str = "BRL", locale: str = "pt-BR") -> str:
    dec_sep, group_sep, pattern = _locale(locale)
    body, negative = _digits(value, 2, dec_sep, group_sep)
    symbol = _SYMBOLS.get(currency.upper(), currency.upper())
    out = pattern.format(symbol=symbol, number=body)
    return "-" + out if negative else out
