from __future__ import annotations

from dataclasses import asdict
from typing import Any, Optional

import inject
import typer

from image_train_launcher.adapters.left.inject_config import configure_injections
from image_train_launcher.adapters.right.command_runner_subprocess import SubprocessCommandRunner
from image_train_launcher.adapters.right.label_files_filesystem import FilesystemLabelFileStore
from image_train_launcher.adapters.right.metrics_jsonl import CompositeMetricsSink, JsonlFileMetricsSink
from image_train_launcher.adapters.right.metrics_stdout import StdoutMetricsSink
from image_train_launcher.core.domain.commands.train import TrainCommand
from image_train_launcher.core.use_cases.launch_training import LaunchTrainingUseCase

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main() -> None:
    """Launch the external image-classifier trainer (train.py in <model_dir>/L1)."""


@app.command()
def train(
    path_prefix: Optional[str] = typer.Option(None, help="Absolute path to the images (default: ./images)"),
    data_info: Optional[str] = typer.Option(
        None,
        help="Headerless label CSV: column 1 image file name, column 2 class index from 0 (default: ./image_labels.csv)",
    ),
    model_dir: Optional[str] = typer.Option(
        None,
        envvar="TRAIN_LAUNCHER_MODEL_DIR",
        help="Folder containing the L1 folder with train.py (default: current directory)",
    ),
    python_loc: str = typer.Option(
        "/anaconda2/bin/",
        envvar="TRAIN_LAUNCHER_PYTHON_LOC",
        help="Prefix prepended to 'python', e.g. /usr/bin/ (use '' to rely on PATH)",
    ),
    os_name: str = typer.Option("Mac", "--os", help="Operating system; 'Windows' rewrites label file line endings"),
    num_gpus: int = typer.Option(2, help="Number of GPUs available"),
    num_classes: int = typer.Option(28, help="Number of classes (species or groups) in the model"),
    delimiter: str = typer.Option(",", help="Label file delimiter"),
    architecture: str = typer.Option(
        "resnet",
        help="DNN architecture: resnet | densenet | alexnet | googlenet | nin | vgg",
    ),
    depth: int = typer.Option(
        18,
        help="Layers: resnet 18/34/50/101/152, densenet 121/161/169/201; fixed for the other architectures",
    ),
    batch_size: int = typer.Option(128, help="Images per training step (a multiple of 64)"),
    log_dir_train: str = typer.Option("train_output", help="Directory the trainer writes the model to"),
    retrain: bool = typer.Option(
        True,
        "--retrain/--no-retrain",
        help="Retrain from the USDA182 model instead of training from scratch",
    ),
    print_cmd: bool = typer.Option(False, "--print-cmd", help="Print the trainer command instead of running it"),
    log_path: str = typer.Option(
        "",
        help="If set, append run events as JSONL to this path (e.g. logs/launch.jsonl)",
    ),
) -> None:
    """Copy the label file next to the trainer and run (or print) the training command."""

    paths: dict[str, Any] = {
        k: v
        for k, v in {"path_prefix": path_prefix, "data_info": data_info, "model_dir": model_dir}.items()
        if v
    }
    cmd = TrainCommand(
        **paths,
        python_loc=python_loc,
        os_name=os_name,
        num_gpus=num_gpus,
        num_classes=num_classes,
        delimiter=delimiter,
        architecture=architecture,
        depth=depth,
        batch_size=batch_size,
        log_dir_train=log_dir_train,
        retrain=retrain,
        print_cmd=print_cmd,
    )

    stdout_metrics = StdoutMetricsSink()
    metrics = (
        CompositeMetricsSink(stdout_metrics, JsonlFileMetricsSink(path=log_path))
        if log_path
        else stdout_metrics
    )

    configure_injections(
        label_store=FilesystemLabelFileStore(),
        command_runner=SubprocessCommandRunner(),
        metrics_sink=metrics,
    )
    use_case = inject.instance(LaunchTrainingUseCase)

    metrics.log(step=0, metrics={"event": "run_start", "command": "train", **asdict(cmd)})

    result = use_case.run(cmd)
    typer.echo(result.message)

    if not result.succeeded:
        raise typer.Exit(code=result.returncode)
