import logging
from functools import partial

import click
from rich import traceback
from rich.console import Console
from rich.logging import RichHandler


def _opt_log_level_callback(ctx, param, value):
    traceback.install()

    # stdout carries the tracked lines, keep diagnostics on stderr
    basicConfig = partial(logging.basicConfig, handlers=[RichHandler(console=Console(stderr=True))])
    if value:
        basicConfig(level=value.upper())
    else:
        basicConfig(level=logging.INFO)


opt_log_level = click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the log level",
    expose_value=False,
    callback=_opt_log_level_callback,
)

opt_filepath = click.option(
    "--filepath",
    "filepath",
    type=click.Path(),
    default=None,
    help="Filepath of file to be tailed",
)

opt_number = click.option(
    "-n",
    "--number",
    "number",
    type=click.IntRange(min=0),
    default=None,
    help="Number of lines to print from each file  [default: 10]",
)

opt_follow = click.option(
    "-f", "--follow", "follow", is_flag=True, default=None, help="Output to stdout as new lines are written"
)

opt_buffer_size = click.option(
    "--buffer-size",
    "buffer_size",
    type=click.IntRange(min=0),
    default=None,
    help="Number of lines buffered between the followed files and stdout, 0 hands lines off one by one",
)

opt_prefix = click.option(
    "--prefix/--no-prefix",
    "prefix",
    default=None,
    help="Prefix every line with the file it was read from",
)

opt_version = click.version_option(
    package_name="log-tracker",
    message="%(prog)s v%(version)s",
)
