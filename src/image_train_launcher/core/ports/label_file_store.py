from __future__ import annotations

from pathlib import Path
from typing import Protocol


class LabelFileStorePort(Protocol):
    """Port for placing the label file next to the trainer.

    Adapters implement this (local filesystem, remote mounts, etc.).
    """

    def copy(self, *, source: Path, dest_dir: Path, dest_name: str, normalize_line_endings: bool) -> Path: ...
