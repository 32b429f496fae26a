from __future__ import annotations

import json
from pathlib import Path

from image_train_launcher.adapters.right.metrics_jsonl import CompositeMetricsSink, JsonlFileMetricsSink


def test_jsonl_metrics_sink_writes_valid_lines(tmp_path) -> None:
    p = tmp_path / "logs" / "launch.jsonl"
    sink = JsonlFileMetricsSink(path=p)

    sink.log(step=0, metrics={"event": "run_start", "model_dir": Path("/models")})
    sink.log(step=0, metrics={"event": "run_complete", "elapsed_seconds": 1.5})

    text = p.read_text(encoding="utf-8").strip()
    lines = [ln for ln in text.splitlines() if ln.strip()]
    assert len(lines) == 2

    rec0 = json.loads(lines[0])
    assert rec0["step"] == 0
    assert rec0["metrics"]["event"] == "run_start"
    assert rec0["metrics"]["model_dir"] == "/models"

    rec1 = json.loads(lines[1])
    assert rec1["metrics"]["elapsed_seconds"] == 1.5


def test_composite_sink_tees_to_every_sink(tmp_path) -> None:
    a = JsonlFileMetricsSink(path=tmp_path / "a.jsonl")
    b = JsonlFileMetricsSink(path=tmp_path / "b.jsonl")

    CompositeMetricsSink(a, None, b).log(step=0, metrics={"event": "dry_run"})

    assert json.loads(a.path.read_text(encoding="utf-8"))["metrics"]["event"] == "dry_run"
    assert json.loads(b.path.read_text(encoding="utf-8"))["metrics"]["event"] == "dry_run"
