from __future__ import annotations

from pathlib import Path
from typing import Protocol


class CommandRunnerPort(Protocol):
    """Port for running a shell command to completion.

    Returns the exit status untouched; failures are not translated.
    """

    def run(self, command_line: str, *, cwd: Path) -> int: ...
