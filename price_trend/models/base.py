"""Trend estimator protocol and the default least-squares implementation."""
from typing import Iterable, Protocol, runtime_checkable

from .regression import RegressionModel, fit
from .predictor import predict


@runtime_checkable
class TrendEstimator(Protocol):
    """
    Interface the forecast engine relies on.

    A future multi-variable estimator can be substituted as long as it
    keeps these two methods.
    """

    def fit(self, observations: Iterable) -> RegressionModel:
        """
        Fit a model on (time, value) observations.

        Args:
            observations: Sequence of (time, value) pairs

        Returns:
            Immutable fitted model
        """
        ...

    def predict(self, model: RegressionModel, time: float) -> float:
        """Evaluate a fitted model at elapsed seconds ``time``."""
        ...


class LeastSquaresTrend:
    """Closed-form OLS estimator. Holds no state between calls."""

    def fit(self, observations: Iterable) -> RegressionModel:
        return fit(observations)

    def predict(self, model: RegressionModel, time: float) -> float:
        return predict(model, time)

    def __repr__(self) -> str:
        return "LeastSquaresTrend()"
