"""Shared pytest fixtures for the technical levels engine.

CRITICAL: Environment variables MUST be set before ANY imports.
"""
import os

# Override environment variables BEFORE importing any engine code
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Callable, Sequence

import pytest

from technical_levels.core.config import Settings
from technical_levels.core.config import get_settings
from technical_levels.schemas.levels import Candle
from technical_levels.utils.structured_logging import configure_structured_logging

CandleFactory = Callable[..., list[Candle]]


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings.

    Returns:
        Settings: Test configuration
    """
    return Settings(log_level="WARNING")


@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """Configure structured logging for tests.

    Args:
        test_settings: Test configuration
    """
    configure_structured_logging(log_level=test_settings.log_level)


@pytest.fixture
def clear_settings_cache():
    """Drop cached configuration so environment overrides made in a test apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_candles() -> CandleFactory:
    """Factory building a candle series from lows and highs.

    Highs default to low + 2.0. Open is the low and close is the high, so
    every candle is a consistent green bar. Time is the sequence index.
    """

    def _make(
        lows: Sequence[float],
        highs: Sequence[float] | None = None,
        volumes: Sequence[float | None] | None = None,
    ) -> list[Candle]:
        candles = []
        for i, low in enumerate(lows):
            high = highs[i] if highs is not None else low + 2.0
            candles.append(
                Candle(
                    time=i,
                    open=low,
                    high=high,
                    low=low,
                    close=high,
                    volume=volumes[i] if volumes is not None else None,
                )
            )
        return candles

    return _make


@pytest.fixture
def flat_candles() -> list[Candle]:
    """Twenty identical candles: no strict swing exists anywhere."""
    return [
        Candle(time=i, open=100.0, high=100.0, low=100.0, close=100.0, volume=1000.0)
        for i in range(20)
    ]


@pytest.fixture
def v_dip_candles(make_candles: CandleFactory) -> list[Candle]:
    """Single V-shaped dip bottoming at index 4 (strictly higher lows on both sides)."""
    return make_candles([110.0, 108.0, 106.0, 104.0, 100.0, 104.0, 106.0, 108.0, 110.0])


@pytest.fixture
def double_bottom_lows() -> list[float]:
    """Two dips to ~100 (indices 2 and 8) with a rally peaking at index 5.

    With lookback 2 this yields support pivots at 100.0 and 100.3 and a single
    resistance pivot at 117.0 (high of index 5).
    """
    return [110.0, 105.0, 100.0, 105.0, 110.0, 115.0, 110.0, 105.0, 100.3, 105.0, 110.0]
