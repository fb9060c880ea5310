from .tracker import Logger, LoggerKey, LogTracker, StopHandle

__all__ = ["LogTracker", "Logger", "LoggerKey", "StopHandle"]
