from __future__ import annotations

from typing import Optional

import inject

from image_train_launcher.core.ports.command_runner import CommandRunnerPort
from image_train_launcher.core.ports.label_file_store import LabelFileStorePort
from image_train_launcher.core.ports.metrics_sink import MetricsSinkPort
from image_train_launcher.core.use_cases.launch_training import \
    LaunchTrainingUseCase


# pylint: disable=invalid-name
def get_dependencies_injection_config(
    *,
    label_store: LabelFileStorePort,
    command_runner: CommandRunnerPort,
    metrics_sink: Optional[MetricsSinkPort] = None,
):
    """Return an inject binder function.

    No imports occur inside the returned function.
    """

    def configure_dependencies_injection(binder: inject.Binder) -> None:
        binder.bind(LabelFileStorePort, label_store)
        binder.bind(CommandRunnerPort, command_runner)
        if metrics_sink is not None:
            binder.bind(MetricsSinkPort, metrics_sink)

        # Bind the use case as a fully-wired object.
        binder.bind(
            LaunchTrainingUseCase,
            LaunchTrainingUseCase(
                label_store=label_store,
                command_runner=command_runner,
                metrics_sink=metrics_sink,
            ),
        )

    return configure_dependencies_injection


def configure_injections(
    *,
    label_store: LabelFileStorePort,
    command_runner: CommandRunnerPort,
    metrics_sink: Optional[MetricsSinkPort] = None,
) -> None:
    """Configure inject with this app's runtime bindings.

    Safe to call multiple times (clears previous bindings).
    """

    config = get_dependencies_injection_config(
        label_store=label_store,
        command_runner=command_runner,
        metrics_sink=metrics_sink,
    )

    if inject.is_configured():
        inject.clear_and_configure(config)
    else:
        inject.configure(config)
