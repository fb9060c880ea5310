from functools import wraps
from pathlib import Path

import click

from .exceptions import ClickExceptionRed
from log_tracker.common.exceptions import LogTrackerException
from log_tracker.config import LOG_TRACKER_CONFIG, TrackerConfig


def opt_config(f):
    """Load the tracker config and pass it to ``f`` as ``config``."""

    @click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        envvar=LOG_TRACKER_CONFIG,
        help=f"Config file  [default: {TrackerConfig.DEFAULT_PATH}]",
    )
    @wraps(f)
    def wrapper(*args, config_path: Path | None, **kwds):
        try:
            config = TrackerConfig.load(config_path)
        except LogTrackerException as e:
            raise ClickExceptionRed(f"Failed to load config: {e}") from e

        return f(*args, **kwds, config=config)

    return wrapper
