from .command import TailSource, build_tail_args, check_tail_available, resolve_sources, stdin_is_piped
from .modes import follow_mode, standard_mode

__all__ = [
    "TailSource",
    "build_tail_args",
    "check_tail_available",
    "follow_mode",
    "resolve_sources",
    "standard_mode",
    "stdin_is_piped",
]
