from __future__ import annotations

from typing import Any

import typer

from image_train_launcher.core.ports.metrics_sink import MetricsSinkPort


class StdoutMetricsSink(MetricsSinkPort):
    """Human-readable run events, one line each: `[launch] <event>: k=v, ...`.

    Unset (None) fields are left out.
    """

    def __init__(self, *, prefix: str = "launch") -> None:
        self._prefix = prefix

    def log(self, *, step: int, metrics: dict[str, Any]) -> None:
        event = metrics.get("event", f"step {step}")
        items = ", ".join(f"{k}={v}" for k, v in metrics.items() if k != "event" and v is not None)
        typer.echo(f"[{self._prefix}] {event}: {items}" if items else f"[{self._prefix}] {event}")
