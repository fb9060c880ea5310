LOG_TRACKER_ENV_PREFIX = "LOG_TRACKER_"
LOG_TRACKER_CONFIG = "LOG_TRACKER_CONFIG"
