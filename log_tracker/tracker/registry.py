import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from threading import RLock

from anyio.abc import ByteReceiveStream

from log_tracker.common.exceptions import DuplicateKeyError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggerKey:
    """Composite identity of a tracked reader, equal when both id and name match."""

    id: str
    name: str

    def __str__(self):
        return f"{self.name}/{self.id}"


@dataclass(frozen=True)
class Logger:
    """A byte stream tracked under a name and an id.

    The id may be left empty when passed to a tracker constructor, in which
    case the position of the entry is used instead.
    The stream is owned by the caller, the tracker never closes it.
    """

    stream: ByteReceiveStream = field(repr=False)
    name: str
    id: str = ""

    @property
    def key(self) -> LoggerKey:
        return LoggerKey(id=self.id, name=self.name)


class LoggerRegistry(Mapping[LoggerKey, Logger]):
    def __init__(self):
        self._loggers: dict[LoggerKey, Logger] = {}
        self._lock = RLock()

    @classmethod
    def from_loggers(cls, loggers: Iterable[Logger]) -> "LoggerRegistry":
        """Build a registry from an initial set of loggers.

        Entries without an id get their position in ``loggers`` as id.
        Entries sharing an explicit (id, name) overwrite each other, the last one wins.
        """
        registry = cls()
        for index, entry in enumerate(loggers):
            if not entry.name:
                raise ValidationError("logger name was empty, each tracked logger requires a name")
            if not entry.id:
                entry = Logger(stream=entry.stream, name=entry.name, id=str(index))
            registry._loggers[entry.key] = entry
        return registry

    def add(self, stream: ByteReceiveStream, name: str, id: str) -> Logger:
        if not id or not name:
            raise ValidationError("either id or name is empty, both must be populated")
        entry = Logger(stream=stream, name=name, id=id)
        with self._lock:
            if entry.key in self._loggers:
                raise DuplicateKeyError(f"logger with key ({entry.key}) already exists", key=entry.key)
            self._loggers[entry.key] = entry
        logger.debug("registered logger %s", entry.key)
        return entry

    def snapshot(self) -> dict[LoggerKey, Logger]:
        with self._lock:
            return dict(self._loggers)

    def __getitem__(self, key: LoggerKey) -> Logger:
        with self._lock:
            return self._loggers[key]

    def __iter__(self) -> Iterator[LoggerKey]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._loggers
