from __future__ import annotations

import os
import shlex

from image_train_launcher.core.domain.commands.train import (
    DATA_INFO_FILENAME,
    RETRAIN_CHECKPOINT,
    TrainCommand,
)


def needs_line_ending_rewrite(os_name: str) -> bool:
    """Windows label files carry CRLF endings the trainer can't parse."""

    return os_name.lower().strip() == "windows"


def _path_token(value: str) -> str:
    # Quoting disables the shell's ~ and $VAR expansion, so expand them first.
    return shlex.quote(os.path.expandvars(os.path.expanduser(value)))


def build_command_line(command: TrainCommand, *, depth: int, path_prefix: str) -> str:
    """Assemble the shell command for `train.py`.

    Flag order is fixed; `--retrain_from` sits between `--delimiter` and
    `--num_classes` when retraining.
    """

    q = shlex.quote
    parts = [
        _path_token(f"{command.python_loc}python"),
        "train.py",
        "--architecture", q(command.architecture),
        "--depth", str(depth),
        "--path_prefix", _path_token(path_prefix),
        "--num_gpus", str(command.num_gpus),
        "--batch_size", str(command.batch_size),
        "--data_info", DATA_INFO_FILENAME,
        "--delimiter", q(command.delimiter),
    ]
    if command.retrain:
        parts += ["--retrain_from", RETRAIN_CHECKPOINT]
    parts += [
        "--num_classes", str(command.num_classes),
        "--log_dir", _path_token(command.log_dir_train),
    ]
    return " ".join(parts)
