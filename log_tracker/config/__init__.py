from .env import LOG_TRACKER_CONFIG, LOG_TRACKER_ENV_PREFIX
from .tracker import TrackerConfig

__all__ = ["LOG_TRACKER_CONFIG", "LOG_TRACKER_ENV_PREFIX", "TrackerConfig"]
