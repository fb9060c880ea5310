from .collector import Collector, LineSink
from .drain import LogLine, drain_lines, iter_lines
from .registry import Logger, LoggerKey, LoggerRegistry
from .tracker import LogTracker, StopHandle

__all__ = [
    "Collector",
    "LineSink",
    "LogLine",
    "LogTracker",
    "Logger",
    "LoggerKey",
    "LoggerRegistry",
    "StopHandle",
    "drain_lines",
    "iter_lines",
]
