from .main import log_tracker

__all__ = ["log_tracker"]
