"""Price Trend Forecast - linear trend over a coin's price history."""
from .exceptions import (
    PriceTrendError,
    ValidationError,
    InsufficientDataError,
    DegenerateInputError,
    PayloadError,
    FetchError,
)
from .utils import date_to_timestamp
from .models import Observation, RegressionModel, fit, predict, predict_at_date
from .data import FetchConfig, MarketChartSource
from .forecast import TrendForecastEngine, ForecastResult

__version__ = '1.0.0'
