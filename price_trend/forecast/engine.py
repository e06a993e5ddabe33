"""
Trend forecast engine: fetch a price series, fit a linear trend and
optionally predict the price on a given date.
"""
from typing import Iterable, Optional

from .result import ForecastResult
from ..data.loader import MarketChartSource
from ..models.base import TrendEstimator, LeastSquaresTrend
from ..utils.dates import date_to_timestamp


class TrendForecastEngine:
    """
    Runs the full forecast.

    Workflow:
    1. Download observations from the source
    2. Fit the trend estimator
    3. If a date is given, convert it to epoch seconds and predict
    """

    def __init__(
        self,
        source: Optional[MarketChartSource] = None,
        estimator: Optional[TrendEstimator] = None,
        verbose: bool = False
    ):
        """
        Initialize the engine.

        Args:
            source: Price series source (default: MarketChartSource())
            estimator: Trend estimator (default: LeastSquaresTrend())
            verbose: Print progress
        """
        self.source = source or MarketChartSource()
        self.estimator = estimator or LeastSquaresTrend()
        self.verbose = verbose

    def run(self, date_str: Optional[str] = None) -> ForecastResult:
        """
        Fetch prices and run the forecast.

        Args:
            date_str: Optional YYYYMMDD date to predict

        Returns:
            ForecastResult

        Raises:
            FetchError, PayloadError: If the series cannot be obtained
            ValidationError, InsufficientDataError, DegenerateInputError:
                From date parsing or the fit
        """
        if self.verbose:
            print(f"Fetching prices: {self.source}")
        observations = self.source.fetch_observations()
        if self.verbose:
            print(f"Fetched {len(observations)} observations")

        return self.run_on_observations(observations, date_str)

    def run_on_observations(
        self,
        observations: Iterable,
        date_str: Optional[str] = None
    ) -> ForecastResult:
        """
        Run the forecast on an already materialized series.

        Args:
            observations: (time, value) pairs with time in seconds
            date_str: Optional YYYYMMDD date to predict

        Returns:
            ForecastResult
        """
        observations = list(observations)

        # Validate the date before fitting so bad input fails fast
        target_time = date_to_timestamp(date_str) if date_str is not None else None

        model = self.estimator.fit(observations)
        if self.verbose:
            print(f"Fitted {model}")

        times = [obs[0] for obs in observations]
        result = ForecastResult(
            model=model,
            n_observations=len(observations),
            start_time=min(times),
            end_time=max(times),
            observations=observations,
        )

        if target_time is not None:
            result.target_date = date_str
            result.target_time = target_time
            result.predicted_price = self.estimator.predict(model, target_time)
            if self.verbose:
                print(f"Predicted price on {date_str}: {result.predicted_price:,.4f}")

        return result
