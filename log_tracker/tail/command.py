import os
import shutil
import stat
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from log_tracker.common.exceptions import ArgumentError, ConfigurationError, FileNotFoundError
from log_tracker.config import TrackerConfig

STDIN_NAME = "stdin"


@dataclass(frozen=True)
class TailSource:
    """A file to tail, or standard input when path is None."""

    name: str
    path: Path | None = None

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> "TailSource":
        return cls(name=str(path), path=Path(path))

    @classmethod
    def stdin(cls) -> "TailSource":
        return cls(name=STDIN_NAME)


def build_tail_args(follow: bool, number: int, filepath: str | os.PathLike | None, tail: str = "tail") -> list[str]:
    result = [tail]
    if follow:
        result.append("-f")
    result += ["-n", str(number)]
    if filepath is not None:
        result.append(str(filepath))
    return result


def check_tail_available() -> str:
    if (tail := shutil.which("tail")) is None:
        raise ConfigurationError("no valid tail command found on the current system")
    return tail


def stdin_is_piped(stream: IO | None = None) -> bool:
    """Check if data is piped or redirected into standard input."""
    stream = stream if stream is not None else sys.stdin
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return False
    return not stat.S_ISCHR(mode)


def resolve_sources(args: Sequence[str], config: TrackerConfig, stdin_piped: bool = False) -> list[TailSource]:
    """Pick the sources to tail.

    Paths given as arguments take precedence over the configured filepath,
    standard input is only used when no path is given at all.
    """
    if args:
        paths = [Path(arg) for arg in args]
    elif config.filepath is not None:
        paths = [config.filepath]
    elif stdin_piped:
        return [TailSource.stdin()]
    else:
        raise ArgumentError("filepath not provided, can either be provided via --filepath or as an argument")

    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"('{path}') is not a valid filepath")

    return [TailSource.from_path(path) for path in paths]
