from __future__ import annotations

import subprocess
from pathlib import Path

from image_train_launcher.core.ports.command_runner import CommandRunnerPort


class SubprocessCommandRunner(CommandRunnerPort):
    """Runs the command through the system shell and waits for it.

    The trainer's stdout/stderr are inherited so its progress stays visible.
    """

    def run(self, command_line: str, *, cwd: Path) -> int:
        completed = subprocess.run(command_line, shell=True, cwd=cwd, check=False)
        return completed.returncode
