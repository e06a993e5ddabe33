"""Trend forecast engine."""
from .engine import TrendForecastEngine
from .result import ForecastResult

__all__ = [
    'TrendForecastEngine',
    'ForecastResult',
]
