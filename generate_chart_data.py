"""Generate chart data JSON from a fresh snapshot."""
import argparse
import json
import logging

from mortgage_rate_dashboard.config import Settings, TimeRange
from mortgage_rate_dashboard.data.fred_fetcher import FredFetcher
from mortgage_rate_dashboard.indicators.loader import SnapshotLoader

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

parser = argparse.ArgumentParser(description="Write dashboard chart data to JSON")
parser.add_argument("--range", choices=[r.value for r in TimeRange], default=TimeRange.default().value)
parser.add_argument("--spread", type=float)
parser.add_argument("--output", default="chart_data.json")
args = parser.parse_args()

settings = Settings()
spread = args.spread if args.spread is not None else settings.default_spread
loader = SnapshotLoader(FredFetcher(settings))
snapshot = loader.load_sync(TimeRange(args.range), spread).snapshot
history = snapshot.history


def points(series):
    return None if series is None else [p.value for p in series]


output = {
    'spread': snapshot.spread,
    'dates': [d.isoformat() for d in history.labels],
    'treasury': [obs.value for obs in history.treasury_yield],
    'estimated_30': [obs.value for obs in history.estimated_mortgage],
    'estimated_15': [obs.value for obs in history.estimated_15_year_mortgage],
    'actual_30': points(history.actual_mortgage),
    'actual_15': points(history.actual_15_year_mortgage),
    'inflation': {
        'dates': [d.isoformat() for d in history.inflation_labels],
        'cpi': points(history.cpi),
        'core_pce': points(history.core_pce),
    },
}

with open(args.output, 'w') as f:
    json.dump(output, f)

print(f"Saved {len(output['dates'])} days of data to {args.output}")
