import logging

import click

from .blocking import blocking
from .config import opt_config
from .exceptions import async_handle_exceptions
from .opt import opt_buffer_size, opt_filepath, opt_follow, opt_log_level, opt_number, opt_prefix, opt_version
from log_tracker.config import TrackerConfig
from log_tracker.tail import follow_mode, resolve_sources, standard_mode, stdin_is_piped

logger = logging.getLogger(__name__)


@click.command("log-tracker")
@click.argument("filepaths", nargs=-1, type=click.Path())
@opt_filepath
@opt_number
@opt_follow
@opt_buffer_size
@opt_prefix
@opt_log_level
@opt_version
@opt_config
@blocking
@async_handle_exceptions
async def log_tracker(
    filepaths: tuple[str, ...],
    config: TrackerConfig,
    filepath: str | None,
    number: int | None,
    follow: bool | None,
    buffer_size: int | None,
    prefix: bool | None,
):
    """Pretty version of the unix tail command.

    Prints the last lines of every FILEPATHS, or of standard input when data
    is piped in. With --follow, new lines of all files are printed as they
    are written, interleaved on stdout.
    """
    config = config.merge(filepath=filepath, number=number, follow=follow, buffer_size=buffer_size, prefix=prefix)

    stdin_piped = stdin_is_piped()
    if stdin_piped:
        logger.info("data is being piped to stdin")

    sources = resolve_sources(filepaths, config, stdin_piped)
    if config.follow:
        await follow_mode(sources, config)
    else:
        await standard_mode(sources, config)


if __name__ == "__main__":
    log_tracker()
