from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable

from image_train_launcher.core.domain.commands.train import (
    DATA_INFO_FILENAME,
    L1_DIRNAME,
    TrainCommand,
)
from image_train_launcher.core.domain.entities.base import LaunchResult, TrainerInvocation
from image_train_launcher.core.domain.utils.architecture import resolve_depth
from image_train_launcher.core.domain.utils.command_line import build_command_line, needs_line_ending_rewrite
from image_train_launcher.core.domain.utils.runtime import completion_message
from image_train_launcher.core.ports.command_runner import CommandRunnerPort
from image_train_launcher.core.ports.label_file_store import LabelFileStorePort
from image_train_launcher.core.ports.metrics_sink import MetricsSinkPort


def _absolute(path: str) -> Path:
    return Path(os.path.abspath(os.path.expanduser(path)))


def _prefix(path: str) -> str:
    # The trainer concatenates file names onto the prefix, so a trailing separator is kept.
    path = os.path.expanduser(path)
    if os.path.isabs(path):
        return path
    return os.path.join(os.getcwd(), path)


class LaunchTrainingUseCase:
    def __init__(
        self,
        *,
        label_store: LabelFileStorePort,
        command_runner: CommandRunnerPort,
        metrics_sink: MetricsSinkPort | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._labels = label_store
        self._runner = command_runner
        self._metrics = metrics_sink
        self._clock = clock

    def _log(self, metrics: dict) -> None:
        if self._metrics:
            self._metrics.log(step=0, metrics=metrics)

    def prepare(self, command: TrainCommand) -> TrainerInvocation:
        """Resolve paths and depth and build the command line. No side effects."""

        # Relative paths are meant relative to the caller, not to L1.
        working_dir = _absolute(command.model_dir) / L1_DIRNAME
        path_prefix = _prefix(command.path_prefix)

        depth = resolve_depth(command.architecture, command.depth)
        return TrainerInvocation(
            command_line=build_command_line(command, depth=depth, path_prefix=path_prefix),
            working_dir=working_dir,
            depth=depth,
            depth_overridden=depth != command.depth,
        )

    def run(self, command: TrainCommand) -> LaunchResult:
        invocation = self.prepare(command)

        if invocation.depth_overridden:
            self._log(
                {
                    "event": "depth_overridden",
                    "architecture": command.architecture,
                    "requested_depth": command.depth,
                    "depth": invocation.depth,
                }
            )

        if command.print_cmd:
            self._log({"event": "dry_run"})
            return LaunchResult(invocation=invocation, dry_run=True, message=invocation.command_line)

        normalize = needs_line_ending_rewrite(command.os_name)
        copied = self._labels.copy(
            source=_absolute(command.data_info),
            dest_dir=invocation.working_dir,
            dest_name=DATA_INFO_FILENAME,
            normalize_line_endings=normalize,
        )
        self._log({"event": "label_file_copied", "path": str(copied), "normalized": normalize})

        start = self._clock()
        returncode = self._runner.run(invocation.command_line, cwd=invocation.working_dir)
        elapsed = self._clock() - start

        self._log(
            {
                "event": "run_complete" if returncode == 0 else "run_failed",
                "returncode": returncode,
                "elapsed_seconds": elapsed,
                "log_dir": command.log_dir_train,
            }
        )
        return LaunchResult(
            invocation=invocation,
            dry_run=False,
            message=completion_message(elapsed_seconds=elapsed, log_dir=command.log_dir_train),
            returncode=returncode,
            elapsed_seconds=elapsed,
        )
