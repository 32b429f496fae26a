from __future__ import annotations

from image_train_launcher.adapters.right.metrics_stdout import StdoutMetricsSink


def test_stdout_sink_prints_event_then_fields(capsys) -> None:
    sink = StdoutMetricsSink()

    sink.log(step=0, metrics={"event": "run_complete", "returncode": 0, "log_dir": "train_output"})
    sink.log(step=0, metrics={"event": "dry_run"})
    sink.log(step=0, metrics={"event": "run_start", "python_loc": None, "num_gpus": 2})

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[launch] run_complete: returncode=0, log_dir=train_output",
        "[launch] dry_run",
        "[launch] run_start: num_gpus=2",
    ]
