from __future__ import annotations

import os
from dataclasses import dataclass, field

# Layout expected inside the model directory.
L1_DIRNAME = "L1"
DATA_INFO_FILENAME = "data_info_train.csv"

# Checkpoint the trainer resumes from when retraining.
RETRAIN_CHECKPOINT = "USDA182"


def _cwd_path(name: str) -> str:
    return os.path.join(os.getcwd(), name)


@dataclass(frozen=True)
class TrainCommand:
    """Intent to launch the external trainer."""

    path_prefix: str = field(default_factory=lambda: _cwd_path("images"))
    data_info: str = field(default_factory=lambda: _cwd_path("image_labels.csv"))
    model_dir: str = field(default_factory=os.getcwd)

    # Prepended verbatim to "python", so it usually ends with a separator.
    python_loc: str = "/anaconda2/bin/"
    os_name: str = "Mac"

    num_gpus: int = 2
    num_classes: int = 28
    delimiter: str = ","

    # Depth is ignored for architectures with a fixed layer count.
    architecture: str = "resnet"
    depth: int = 18
    batch_size: int = 128

    log_dir_train: str = "train_output"
    retrain: bool = True
    print_cmd: bool = False
