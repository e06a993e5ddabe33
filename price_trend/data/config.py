"""Configuration for the market chart download."""
from dataclasses import dataclass, field
from typing import Dict, Union

from ..exceptions import ValidationError

MAX_DAYS = 'max'


def parse_days(value: Union[int, str]) -> Union[int, str]:
    """
    Normalize a lookback window: a positive day count or ``'max'``.

    Raises:
        ValidationError: For anything else
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text == MAX_DAYS:
            return MAX_DAYS
        if not (text.isascii() and text.isdigit()):
            raise ValidationError(f"days must be a positive integer or 'max': {value!r}")
        value = int(text)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"days must be a positive integer or 'max': {value!r}")
    return value


@dataclass
class FetchConfig:
    """Where and how to download the price series."""
    base_url: str = 'https://api.coingecko.com/api/v3'
    coin_id: str = 'internet-computer'
    vs_currency: str = 'usd'
    days: Union[int, str] = 365  # or 'max' for the full history
    user_agent: str = 'price_fetcher_canister'
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = 30.0

    def __post_init__(self):
        self.days = parse_days(self.days)
