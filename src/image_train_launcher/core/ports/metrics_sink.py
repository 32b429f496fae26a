from __future__ import annotations

from typing import Any, Protocol


class MetricsSinkPort(Protocol):
    """Port for logging run events (stdout, JSONL, etc.)."""

    def log(self, *, step: int, metrics: dict[str, Any]) -> None:
        ...
