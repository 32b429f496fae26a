from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TrainerInvocation:
    """A fully assembled trainer command.

    `working_dir` is the `L1` folder; the trainer is started from there and
    reads the label file copy by its bare name.
    """

    command_line: str
    working_dir: Path
    depth: int
    depth_overridden: bool = False


@dataclass(frozen=True)
class LaunchResult:
    invocation: TrainerInvocation
    dry_run: bool
    message: str
    returncode: int | None = None
    elapsed_seconds: float | None = None

    @property
    def succeeded(self) -> bool:
        return self.dry_run or self.returncode == 0
