"""Trend models and prediction."""
from .regression import Observation, RegressionModel, fit
from .predictor import predict, predict_at_date
from .base import TrendEstimator, LeastSquaresTrend

__all__ = [
    'Observation',
    'RegressionModel',
    'fit',
    'predict',
    'predict_at_date',
    'TrendEstimator',
    'LeastSquaresTrend',
]
