"""Tests for the optimize_threshold command-line script."""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from scripts.optimize_threshold import main


def write_scores(tmp_path: Path) -> Path:
    df = pd.DataFrame({
        "Response": ["Yes", "No", "No", "No", "Yes"],
        "forest": [0.8, 0.1, 0.6, 0.3, 0.9],
        "logit": [0.95, 0.4, 0.1, 0.2, 0.7],
    })
    path = tmp_path / "scores.csv"
    df.to_csv(path, index=False)
    return path


def write_config(tmp_path: Path) -> Path:
    path = tmp_path / "campaign.json"
    path.write_text(json.dumps({"threshold_start": 0.1, "threshold_stop": 0.9, "threshold_steps": 9}))
    return path


def test_cli_writes_report_and_curves(tmp_path: Path) -> None:
    out = tmp_path / "out" / "report.json"
    curves = tmp_path / "out" / "curves.csv"
    main([
        "--in", str(write_scores(tmp_path)),
        "--actual", "Response",
        "--positive-label", "Yes",
        "--models", "forest", "logit",
        "--config", str(write_config(tmp_path)),
        "--out", str(out),
        "--curves", str(curves),
    ])

    report = json.loads(out.read_text())
    # both models reach 16 on this grid; the first listed wins the tie
    assert report["best_model"] == "forest"
    assert report["models"]["forest"]["status"] == "ok"
    assert report["models"]["forest"]["threshold"] == 0.7
    assert report["models"]["logit"]["profit"] == 16.0
    assert report["config"]["threshold_steps"] == 9

    frame = pd.read_csv(curves, index_col="threshold")
    assert list(frame.columns) == ["forest", "logit"]
    assert len(frame) == 9


def test_cli_rejects_missing_column(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([
            "--in", str(write_scores(tmp_path)),
            "--actual", "Converted",
            "--models", "forest",
            "--out", str(tmp_path / "report.json"),
        ])


def test_cli_rejects_categorical_outcome_without_positive_label(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Invalid input"):
        main([
            "--in", str(write_scores(tmp_path)),
            "--actual", "Response",
            "--models", "forest",
            "--out", str(tmp_path / "report.json"),
        ])


def write_numeric_scores(tmp_path: Path) -> Path:
    df = pd.DataFrame({
        "Response": [1.0, 0.0, 0.0, 0.0, 1.0],
        "forest": [0.8, 0.1, 0.6, 0.3, 0.9],
    })
    path = tmp_path / "numeric_scores.csv"
    df.to_csv(path, index=False)
    return path


def test_cli_positive_label_on_float_outcome(tmp_path: Path) -> None:
    out = tmp_path / "report.json"
    main([
        "--in", str(write_numeric_scores(tmp_path)),
        "--actual", "Response",
        "--positive-label", "1",
        "--models", "forest",
        "--config", str(write_config(tmp_path)),
        "--out", str(out),
    ])

    report = json.loads(out.read_text())
    assert report["models"]["forest"]["status"] == "ok"
    assert report["models"]["forest"]["profit"] == 16.0
    assert report["models"]["forest"]["true_positives"] == 2


def test_cli_positive_label_absent_from_numeric_outcome(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="not present"):
        main([
            "--in", str(write_numeric_scores(tmp_path)),
            "--actual", "Response",
            "--positive-label", "2",
            "--models", "forest",
            "--out", str(tmp_path / "report.json"),
        ])


def test_cli_positive_label_not_parseable_for_numeric_outcome(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="not a valid"):
        main([
            "--in", str(write_numeric_scores(tmp_path)),
            "--actual", "Response",
            "--positive-label", "Yes",
            "--models", "forest",
            "--out", str(tmp_path / "report.json"),
        ])
