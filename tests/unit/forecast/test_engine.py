"""
Unit tests for price_trend/forecast/engine.py and forecast/result.py
"""
import pytest

from price_trend.exceptions import (
    ValidationError,
    InsufficientDataError,
    FetchError,
)
from price_trend.forecast import TrendForecastEngine, ForecastResult
from price_trend.models import fit, predict
from price_trend.data.loader import parse_market_chart
from price_trend.utils.dates import date_to_timestamp


class StubSource:
    """Source returning a fixed series, or failing."""

    def __init__(self, observations=None, error=None):
        self.observations = observations
        self.error = error
        self.calls = 0

    def fetch_observations(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.observations


class TestRun:
    """Tests for TrendForecastEngine.run()."""

    @pytest.fixture
    def observations(self, market_chart_payload):
        return parse_market_chart(market_chart_payload)

    def test_fit_without_date(self, observations):
        engine = TrendForecastEngine(StubSource(observations))
        result = engine.run()

        assert isinstance(result, ForecastResult)
        assert result.model == fit(observations)
        assert result.predicted_price is None
        assert result.has_prediction is False

    def test_prediction_matches_direct_call(self, observations):
        engine = TrendForecastEngine(StubSource(observations))
        result = engine.run('20240101')

        expected_time = date_to_timestamp('20240101')
        assert result.target_time == expected_time
        assert result.predicted_price == predict(result.model, expected_time)

    def test_series_is_rising(self, observations):
        """Price rises 0.5 per day in the fixture."""
        result = TrendForecastEngine(StubSource(observations)).run()

        assert result.model.slope * 86400 == pytest.approx(0.5)

    def test_records_series_span(self, observations):
        result = TrendForecastEngine(StubSource(observations)).run()

        assert result.n_observations == 4
        assert result.start_time == 1_700_000_000.0
        assert result.end_time == 1_700_000_000.0 + 3 * 86400

    def test_fetch_error_propagates(self):
        engine = TrendForecastEngine(StubSource(error=FetchError("down")))

        with pytest.raises(FetchError):
            engine.run()

    def test_bad_date_fails_before_fit(self, observations):
        engine = TrendForecastEngine(StubSource(observations))

        with pytest.raises(ValidationError):
            engine.run('20241301')

    def test_insufficient_data(self):
        engine = TrendForecastEngine(StubSource([(1.0, 2.0)]))

        with pytest.raises(InsufficientDataError):
            engine.run()

    def test_verbose_prints_progress(self, observations, capsys):
        engine = TrendForecastEngine(StubSource(observations), verbose=True)
        engine.run('20240101')

        out = capsys.readouterr().out
        assert 'Fetched 4 observations' in out
        assert 'Predicted price on 20240101' in out


class TestRunOnObservations:
    """Tests for run_on_observations()."""

    def test_does_not_touch_source(self, linear_observations):
        source = StubSource(error=FetchError("should not be called"))
        engine = TrendForecastEngine(source)

        result = engine.run_on_observations(linear_observations)

        assert source.calls == 0
        assert result.model.slope == pytest.approx(2.0)


class TestForecastResult:
    """Tests for ForecastResult.to_summary_dict()."""

    def test_summary_keys(self, market_chart_payload):
        observations = parse_market_chart(market_chart_payload)
        result = TrendForecastEngine(StubSource(observations)).run('20240101')

        summary = result.to_summary_dict()

        assert summary['parameters'][0][0] == 'X1'
        assert summary['start_date'] == '20231114'
        assert summary['target_date'] == '20240101'
        assert summary['predicted_price'] == result.predicted_price

    def test_summary_outside_pandas_range(self):
        """Series dated before 1677 still summarizes."""
        start = date_to_timestamp('16000101')
        observations = [(start, 1.0), (start + 86400.0, 2.0)]
        result = TrendForecastEngine(StubSource(observations)).run()

        summary = result.to_summary_dict()

        assert summary['start_date'] == '16000101'
        assert summary['end_date'] == '16000102'

    def test_unformattable_span_raises_validation(self):
        """A span past year 9999 fails with a typed error, not a crash."""
        result = TrendForecastEngine(StubSource()).run_on_observations(
            [(0.0, 1.0), (1e12, 2.0)]
        )

        with pytest.raises(ValidationError, match="YYYYMMDD"):
            result.to_summary_dict()

    def test_keeps_observations(self, market_chart_payload):
        observations = parse_market_chart(market_chart_payload)
        result = TrendForecastEngine(StubSource(observations)).run()

        assert result.observations == observations
