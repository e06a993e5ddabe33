"""Price series loading."""
from .config import FetchConfig, parse_days
from .loader import (
    MarketChartSource,
    parse_market_chart,
    load_payload_file,
    observations_to_frame,
)

__all__ = [
    'FetchConfig',
    'parse_days',
    'MarketChartSource',
    'parse_market_chart',
    'load_payload_file',
    'observations_to_frame',
]
