"""
Pytest configuration and shared fixtures.
"""
import pytest

from price_trend.models.regression import Observation


@pytest.fixture
def linear_observations():
    """Observations on y = 3 + 2x at distinct x."""
    xs = [0.0, 1.0, 2.5, 4.0, 7.0, 10.0]
    return [Observation(x, 3.0 + 2.0 * x) for x in xs]


@pytest.fixture
def market_chart_payload():
    """Payload shaped like the CoinGecko market_chart response."""
    day_ms = 86_400_000
    start_ms = 1_700_000_000_000
    return {
        'prices': [
            [start_ms, 4.0],
            [start_ms + day_ms, 4.5],
            [start_ms + 2 * day_ms, 5.0],
            [start_ms + 3 * day_ms, 5.5],
        ],
        'market_caps': [],
        'total_volumes': [],
    }
