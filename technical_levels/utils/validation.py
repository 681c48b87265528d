"""Boundary validation for candle records and level settings.

The level pipeline assumes well-formed candles and positive settings. Callers
that receive raw payloads (market-data feeds, query parameters) convert them
here first so that malformed input fails with a project exception instead of
surfacing as a nonsensical result.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from technical_levels.core.config import get_settings
from technical_levels.core.exceptions import CandleValidationError, SettingsValidationError
from technical_levels.schemas.levels import Candle, LevelSettings


def parse_candles(records: Iterable[Mapping[str, Any]]) -> list[Candle]:
    """
    Validate raw candle records into Candle models.

    Records keep their order; the caller is responsible for supplying them
    oldest first.

    Args:
        records: Mappings with time, open, high, low, close and optional volume

    Returns:
        List of validated candles

    Raises:
        CandleValidationError: If a record has missing or non-finite prices,
            negative values, or high < low
    """
    candles: list[Candle] = []
    for index, record in enumerate(records):
        try:
            candles.append(Candle.model_validate(record))
        except ValidationError as e:
            raise CandleValidationError(f"Invalid candle at index {index}: {e}") from e
    return candles


def resolve_settings(settings: LevelSettings | None = None, **overrides: Any) -> LevelSettings:
    """
    Resolve effective level settings from configured defaults and caller input.

    Precedence, lowest to highest: configured defaults, fields explicitly set
    on ``settings``, then ``overrides``. Fields left unset on ``settings`` and
    overrides given as None fall back to the configured defaults, so every
    call path resolves unset fields the same way.

    Args:
        settings: Partial or complete LevelSettings
        overrides: Individual settings, snake_case or camelCase keys

    Returns:
        Fully resolved, immutable LevelSettings

    Raises:
        SettingsValidationError: If an override is out of range or unknown
    """
    defaults = LevelSettings.from_config(get_settings()).model_dump()
    explicit = (
        {name: getattr(settings, name) for name in settings.model_fields_set}
        if settings is not None
        else {}
    )
    provided = {key: value for key, value in overrides.items() if value is not None}

    try:
        overridden = LevelSettings.model_validate(provided).model_dump(exclude_unset=True)
    except ValidationError as e:
        raise SettingsValidationError(f"Invalid level settings: {e}") from e

    return LevelSettings(**{**defaults, **explicit, **overridden})


def parse_settings(options: Mapping[str, Any] | None = None) -> LevelSettings:
    """
    Resolve level settings from optional caller-supplied options.

    Keys may be snake_case (``swing_lookback``) or camelCase
    (``swingLookback``). Unset keys and keys explicitly set to None fall back
    to the configured defaults.

    Args:
        options: Partial settings mapping

    Returns:
        Fully resolved, immutable LevelSettings

    Raises:
        SettingsValidationError: If a value is out of range or an unknown key is given
    """
    return resolve_settings(None, **dict(options or {}))
