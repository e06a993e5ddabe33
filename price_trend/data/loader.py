"""
Market chart loader.

Downloads a coin's price history from the CoinGecko ``market_chart``
endpoint and turns it into (seconds, price) observations.
"""
import json
import pandas as pd
import requests
from pathlib import Path
from typing import Dict, List, Optional

from .config import FetchConfig
from ..exceptions import FetchError, PayloadError, ValidationError
from ..models.regression import Observation

MS_PER_SECOND = 1000.0


def parse_market_chart(payload: Dict) -> List[Observation]:
    """
    Extract observations from a market chart payload.

    The payload holds ``prices`` as ``[[ms_timestamp, price], ...]``.
    Timestamps are converted to seconds; source order is kept.

    Raises:
        PayloadError: If ``prices`` is missing or an entry is malformed
    """
    if not isinstance(payload, dict) or 'prices' not in payload:
        raise PayloadError("Payload has no 'prices' field")

    prices = payload['prices']
    if not isinstance(prices, list):
        raise PayloadError(f"'prices' must be a list, got {type(prices).__name__}")

    observations = []
    for i, entry in enumerate(prices):
        if not isinstance(entry, (list, tuple)) or len(entry) < 2:
            raise PayloadError(f"Price entry {i} is not a [timestamp, price] pair: {entry!r}")
        try:
            time = float(entry[0]) / MS_PER_SECOND
            value = float(entry[1])
        except (TypeError, ValueError) as exc:
            raise PayloadError(f"Price entry {i} is not numeric: {entry!r}") from exc
        observations.append(Observation(time=time, value=value))

    return observations


def load_payload_file(path: Path) -> Dict:
    """Read a saved market chart payload from disk."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Payload not found: {path}")

    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise PayloadError(f"Invalid JSON in {path}: {exc}") from exc


def observations_to_frame(observations: List[Observation]) -> pd.DataFrame:
    """
    Convert observations to a DataFrame indexed by UTC date.

    Returns:
        DataFrame with 'Time' (seconds) and 'Price' columns, Date index

    Raises:
        ValidationError: If a time falls outside the pandas datetime range
    """
    df = pd.DataFrame(observations, columns=['Time', 'Price'])
    try:
        df.index = pd.to_datetime(df['Time'], unit='s', utc=True)
    except (ValueError, OverflowError) as exc:
        raise ValidationError(f"Observation times outside the datetime range: {exc}") from exc
    df.index.name = 'Date'
    return df


class MarketChartSource:
    """
    Fetches price history over HTTP.

    Key features:
    - Configurable coin, quote currency and lookback window
    - Custom request headers (User-Agent set by default)
    - Network and HTTP failures raised as FetchError
    """

    def __init__(self, config: Optional[FetchConfig] = None):
        """
        Initialize the source.

        Args:
            config: Download settings (defaults to FetchConfig())
        """
        self.config = config or FetchConfig()

    def build_url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/coins/{self.config.coin_id}/market_chart"

    def build_params(self) -> Dict[str, str]:
        return {
            'vs_currency': self.config.vs_currency,
            'days': str(self.config.days),
        }

    def build_headers(self) -> Dict[str, str]:
        headers = {'User-Agent': self.config.user_agent}
        headers.update(self.config.headers)
        return headers

    def fetch_payload(self) -> Dict:
        """
        Download the raw market chart payload.

        Raises:
            FetchError: On connection errors, timeouts, HTTP errors or a
                non-JSON body
        """
        url = self.build_url()
        try:
            response = requests.get(
                url,
                params=self.build_params(),
                headers=self.build_headers(),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch prices from {url}: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"Response from {url} is not JSON: {exc}") from exc

    def fetch_observations(self) -> List[Observation]:
        """Download and parse the price series."""
        return parse_market_chart(self.fetch_payload())

    def __repr__(self) -> str:
        return (
            f"MarketChartSource(coin={self.config.coin_id}, "
            f"vs={self.config.vs_currency}, days={self.config.days})"
        )
