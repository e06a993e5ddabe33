"""
Single-predictor ordinary least squares.

Fits price = intercept + slope * time over (time, price) observations
using the closed-form solution. Mean-subtraction is the only centering
applied; it keeps the sums well conditioned for epoch-scale times.
"""
import numpy as np
from typing import Dict, Iterable, List, NamedTuple, Tuple
from dataclasses import dataclass

from ..exceptions import (
    ValidationError,
    InsufficientDataError,
    DegenerateInputError,
)

MIN_OBSERVATIONS = 2


class Observation(NamedTuple):
    """One (time, value) sample; time is elapsed seconds."""
    time: float
    value: float


@dataclass(frozen=True)
class RegressionModel:
    """Fitted linear trend."""
    intercept: float
    slope: float

    @property
    def parameters(self) -> List[Tuple[str, float]]:
        """Named coefficients, excluding the intercept."""
        return [('X1', self.slope)]

    def to_dict(self) -> Dict:
        return {
            'intercept': self.intercept,
            'parameters': self.parameters,
        }

    def get_model_info(self) -> Dict:
        """Return model metadata for logging."""
        return {
            'model_type': 'LinearTrend',
            'intercept': self.intercept,
            'slope': self.slope,
        }

    def __repr__(self) -> str:
        return f"RegressionModel(intercept={self.intercept:.6g}, slope={self.slope:.6g})"


def _as_array(observations: Iterable) -> np.ndarray:
    """Stack observations into an (n, 2) float array."""
    rows = list(observations)
    if not rows:
        return np.empty((0, 2), dtype=float)

    try:
        data = np.asarray(rows, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Observations must be numeric (time, value) pairs: {exc}") from exc

    if data.ndim != 2 or data.shape[1] != 2:
        raise ValidationError(
            f"Observations must be (time, value) pairs, got shape {data.shape}"
        )
    if not np.isfinite(data).all():
        raise ValidationError("Observations contain NaN or infinite values")

    return data


def fit(observations: Iterable) -> RegressionModel:
    """
    Fit a linear trend by ordinary least squares.

    Args:
        observations: Sequence of (time, value) pairs, e.g. Observation

    Returns:
        RegressionModel with intercept and slope

    Raises:
        ValidationError: If observations are not finite numeric pairs
        InsufficientDataError: If fewer than 2 observations are given
        DegenerateInputError: If all time values are identical
    """
    data = _as_array(observations)
    n = data.shape[0]
    if n < MIN_OBSERVATIONS:
        raise InsufficientDataError(
            f"Need at least {MIN_OBSERVATIONS} observations to fit a trend, got {n}"
        )

    x = data[:, 0]
    y = data[:, 1]

    if np.all(x == x[0]):
        raise DegenerateInputError(
            f"All {n} observations share time {x[0]!r}; slope is undefined"
        )

    # Extreme magnitudes can under/overflow; checked explicitly below
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        x_bar = x.mean()
        y_bar = y.mean()
        dx = x - x_bar
        dy = y - y_bar

        sxx = float(np.sum(dx * dx))
        sxy = float(np.sum(dx * dy))

    if sxx == 0.0:
        raise DegenerateInputError(
            f"Time spread of {n} observations underflows to zero; slope is undefined"
        )
    if not (np.isfinite(sxx) and np.isfinite(sxy)):
        raise ValidationError(
            "Observation magnitudes overflow double precision; cannot fit a trend"
        )

    slope = sxy / sxx
    intercept = float(y_bar) - slope * float(x_bar)

    if not (np.isfinite(slope) and np.isfinite(intercept)):
        raise ValidationError(
            f"Fit produced non-finite coefficients (intercept={intercept}, slope={slope})"
        )

    return RegressionModel(intercept=intercept, slope=slope)
