from __future__ import annotations

import pytest

from image_train_launcher.core.domain.utils.runtime import completion_message, format_runtime


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (12.0, (12.0, "secs")),
        (90.0, (1.5, "mins")),
        (5400.0, (1.5, "hours")),
        (172800.0, (2.0, "days")),
    ],
)
def test_format_runtime_picks_unit(seconds: float, expected: tuple[float, str]) -> None:
    assert format_runtime(seconds) == expected


def test_completion_message_names_output_dir() -> None:
    msg = completion_message(elapsed_seconds=90.0, log_dir="my_model")
    assert msg.startswith("training of model took 1.50 mins.")
    assert "my_model" in msg
