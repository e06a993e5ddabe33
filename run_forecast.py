#!/usr/bin/env python3
"""
Fit a linear price trend and predict the price on a given date.

Usage:
    python run_forecast.py                          # Fit on the last 365 days of ICP/USD
    python run_forecast.py --date 20250101          # Also predict price on a date
    python run_forecast.py --coin bitcoin --days 90 # Different coin and window
    python run_forecast.py --days max               # Full available history
    python run_forecast.py --input chart.json       # Use a saved payload (no network)
    python run_forecast.py --output series.csv      # Save series with fitted values
"""
import argparse
import sys
from pathlib import Path

from price_trend.data import (
    FetchConfig,
    MarketChartSource,
    parse_days,
    parse_market_chart,
    load_payload_file,
    observations_to_frame,
)
from price_trend.exceptions import PriceTrendError, ValidationError
from price_trend.forecast import TrendForecastEngine


def days_arg(value):
    """Lookback window: a positive number of days or 'max'."""
    try:
        return parse_days(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def main():
    parser = argparse.ArgumentParser(description='Run linear trend forecast')
    parser.add_argument('--date', type=str, default=None,
                        help='Date to predict, YYYYMMDD')
    parser.add_argument('--coin', type=str, default=FetchConfig.coin_id,
                        help='CoinGecko coin id')
    parser.add_argument('--vs-currency', type=str, default=FetchConfig.vs_currency,
                        help='Quote currency')
    parser.add_argument('--days', type=days_arg, default=FetchConfig.days,
                        help='Lookback window in days, or "max" for full history')
    parser.add_argument('--timeout', type=float, default=FetchConfig.timeout,
                        help='HTTP timeout in seconds')
    parser.add_argument('--input', type=str, default=None,
                        help='Saved market chart JSON payload (skips download)')
    parser.add_argument('--output', type=str, default=None,
                        help='Output CSV path for series and fitted trend')

    args = parser.parse_args()

    config = FetchConfig(
        coin_id=args.coin,
        vs_currency=args.vs_currency,
        days=args.days,
        timeout=args.timeout,
    )
    engine = TrendForecastEngine(MarketChartSource(config), verbose=True)

    try:
        if args.input:
            print(f'Loading payload from {args.input}...')
            observations = parse_market_chart(load_payload_file(Path(args.input)))
            print(f'Series loaded: {len(observations)} observations')
            result = engine.run_on_observations(observations, args.date)
        else:
            result = engine.run(args.date)

        summary = result.to_summary_dict()
    except (PriceTrendError, FileNotFoundError) as exc:
        condition = getattr(exc, 'condition', 'file')
        print(f'Forecast failed [{condition}]: {exc}')
        return 1

    print('\n' + '=' * 60)
    print('TREND FORECAST')
    print('=' * 60)
    print(f'  Series:      {summary["start_date"]} to {summary["end_date"]} '
          f'({summary["n_observations"]} points)')
    print(f'  Intercept:   {result.model.intercept:.6f}')
    for name, coef in result.model.parameters:
        print(f'  {name + ":":<12} {coef:.6e} per second')
    print(f'  Per day:     {result.model.slope * 86400:+.6f} {args.vs_currency.upper()}')

    if result.has_prediction:
        print(f'\n  Predicted price on {result.target_date}: '
              f'{result.predicted_price:,.4f} {args.vs_currency.upper()}')

    if args.output:
        try:
            df = observations_to_frame(result.observations)
        except PriceTrendError as exc:
            print(f'Export failed [{exc.condition}]: {exc}')
            return 1
        df['Trend'] = result.model.intercept + result.model.slope * df['Time']
        df.to_csv(args.output)
        print(f'\nSeries saved to {args.output}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
