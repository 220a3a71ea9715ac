from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class ConfigurationError(AppError):
    """Raised when settings or a data file cannot be turned into a valid config."""


class CalculationError(AppError):
    """Raised when a single emissions/credits calculation cannot be performed."""


class UnknownModeError(CalculationError, ValueError):
    """Exception raised when a transport mode is not in the configured set."""

    def __init__(self, mode: object, known: list[str] | None = None) -> None:
        self.mode = mode
        self.known = list(known or [])
        msg = f"Unknown transport mode: {mode!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class InvalidDistanceError(CalculationError, ValueError):
    """Exception raised when a distance is negative, NaN, infinite or not a number."""


class InvalidEmissionsError(CalculationError, ValueError):
    """Exception raised when an emissions amount is negative or not finite."""
