#!/usr/bin/env python3
"""
Profit-optimal contact thresholds for one or more campaign response models.
Usage:
  python scripts/optimize_threshold.py --in holdout_scores.csv --actual Response --models logit forest --out results/thresholds.json
"""
import argparse
import json
import logging
from pathlib import Path

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from campaign_profit import (
    CampaignConfig,
    ModelComparator,
    ModelFailure,
    ProfitThresholdError,
    as_actual_vector,
    best_model,
    encode_binary_labels,
    profit_curve_frame,
)

logger = logging.getLogger(__name__)


def load_scores(in_csv: Path, actual_col: str, model_cols):
    df = pd.read_csv(in_csv)
    missing = [c for c in [actual_col, *model_cols] if c not in df.columns]
    if missing:
        raise SystemExit(f'Columns not found in {in_csv}: {missing}')
    return df


def run(df: pd.DataFrame, actual_col: str, model_cols, cfg: CampaignConfig,
        positive_label=None):
    outcome = df[actual_col]
    if positive_label is None:
        y = as_actual_vector(outcome.to_numpy())
    elif is_numeric_dtype(outcome) and not is_bool_dtype(outcome):
        # compare in the column's dtype so '1' matches 1 and 1.0
        try:
            label = outcome.dtype.type(positive_label)
        except (TypeError, ValueError):
            raise SystemExit(f'Positive label {positive_label!r} is not a valid {outcome.dtype} value')
        y = encode_binary_labels(outcome, label)
    else:
        y = encode_binary_labels(outcome.astype(str), str(positive_label))

    comparator = ModelComparator(n_jobs=cfg.n_jobs)
    results = comparator.compare(
        {name: df[name].to_numpy() for name in model_cols},
        y,
        cfg.candidates(),
        cfg.cost_model(),
    )

    report = {'config': cfg.to_dict(), 'best_model': best_model(results), 'models': {}}
    for name, res in results.items():
        if isinstance(res, ModelFailure):
            report['models'][name] = {'status': 'failed', 'error_type': res.error_type, 'error': res.message}
        else:
            report['models'][name] = {'status': 'ok', **res.to_dict()}
    return report, results


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument('--in', dest='in_csv', required=True, help='CSV with model scores and observed outcomes')
    ap.add_argument('--actual', required=True, help='Outcome column name')
    ap.add_argument('--models', nargs='+', required=True, help='Score columns, one per model')
    ap.add_argument('--positive-label', default=None, help='Outcome value meaning a response (default: column is already 0/1)')
    ap.add_argument('--config', default=None, help='Optional JSON with cost and grid settings')
    ap.add_argument('--out', required=True, help='Where to write the JSON report')
    ap.add_argument('--curves', default=None, help='Optional CSV for profit curves')
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        cfg = CampaignConfig.from_json(args.config) if args.config else CampaignConfig()
        df = load_scores(Path(args.in_csv), args.actual, args.models)
        report, results = run(df, args.actual, args.models, cfg, args.positive_label)
    except ProfitThresholdError as e:
        raise SystemExit(f'Invalid input: {e}')

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, 'w') as f:
        json.dump(report, f, indent=2)
    print(f"Saved {out_path}")

    if args.curves:
        curves_path = Path(args.curves)
        curves_path.parent.mkdir(parents=True, exist_ok=True)
        profit_curve_frame(results).to_csv(curves_path)
        print(f"Saved {curves_path}")


if __name__ == '__main__':
    main()
