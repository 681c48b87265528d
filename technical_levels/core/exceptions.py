"""Core exception classes for the technical levels engine."""


class TechnicalLevelsError(Exception):
    """Base exception for technical levels operations."""

    pass


class DataValidationError(TechnicalLevelsError):
    """Raised when input validation fails at the engine boundary."""

    pass


class CandleValidationError(DataValidationError):
    """Raised when a candle record is malformed (missing, non-finite or inconsistent OHLCV)."""

    pass


class SettingsValidationError(DataValidationError):
    """Raised when level detection settings are out of range."""

    pass
