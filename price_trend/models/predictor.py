"""Evaluate a fitted trend at a point in time."""
from .regression import RegressionModel
from ..utils.dates import date_to_timestamp


def predict(model: RegressionModel, time: float) -> float:
    """Predicted price at elapsed seconds ``time``."""
    return model.intercept + model.slope * time


def predict_at_date(model: RegressionModel, date_str: str) -> float:
    """
    Predicted price at midnight UTC of a ``YYYYMMDD`` date.

    Raises:
        ValidationError: If date_str is malformed
    """
    return predict(model, date_to_timestamp(date_str))
