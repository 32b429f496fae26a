from __future__ import annotations

_MINUTE = 60.0
_HOUR = 60.0 * _MINUTE
_DAY = 24.0 * _HOUR


def format_runtime(seconds: float) -> tuple[float, str]:
    """Pick a readable unit for an elapsed duration.

    Returns (value, units) with units one of: secs, mins, hours, days.
    """

    seconds = abs(float(seconds))
    if seconds < _MINUTE:
        return seconds, "secs"
    if seconds < _HOUR:
        return seconds / _MINUTE, "mins"
    if seconds < _DAY:
        return seconds / _HOUR, "hours"
    return seconds / _DAY, "days"


def completion_message(*, elapsed_seconds: float, log_dir: str) -> str:
    value, units = format_runtime(elapsed_seconds)
    return (
        f"training of model took {value:.2f} {units}. "
        f"The trained model is in {log_dir}. "
        "Specify this directory as the log_dir when you classify images."
    )
