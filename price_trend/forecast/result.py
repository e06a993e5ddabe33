"""Forecast result container."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models.regression import RegressionModel
from ..utils.dates import timestamp_to_date


@dataclass
class ForecastResult:
    """Fitted trend plus the optional prediction for a target date."""
    model: RegressionModel
    n_observations: int
    start_time: float
    end_time: float
    target_date: Optional[str] = None
    target_time: Optional[int] = None
    predicted_price: Optional[float] = None
    observations: List = field(default_factory=list, repr=False)

    @property
    def has_prediction(self) -> bool:
        return self.predicted_price is not None

    def to_summary_dict(self) -> Dict:
        """
        Convert to summary dictionary for display/JSON.

        Raises:
            ValidationError: If the series span cannot be written as
                YYYYMMDD dates
        """
        return {
            'intercept': self.model.intercept,
            'parameters': self.model.parameters,
            'n_observations': self.n_observations,
            'start_date': timestamp_to_date(self.start_time),
            'end_date': timestamp_to_date(self.end_time),
            'target_date': self.target_date,
            'target_time': self.target_time,
            'predicted_price': self.predicted_price,
        }
