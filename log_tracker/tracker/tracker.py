import logging
from collections.abc import Iterable

import click
from anyio import TASK_STATUS_IGNORED, CancelScope, Event, create_memory_object_stream, create_task_group
from anyio.abc import ByteReceiveStream, TaskGroup, TaskStatus

from .collector import Collector, LineSink
from .drain import LogLine, drain_lines
from .registry import Logger, LoggerKey, LoggerRegistry
from log_tracker.common.exceptions import ValidationError

logger = logging.getLogger(__name__)


class StopHandle:
    """Stops a single run of a :class:`LogTracker`.

    Calling the handle stops the collector and cancels every drain of the
    run, calling it again is a no-op. Use :meth:`wait` to join the run.
    """

    def __init__(self, collector: Collector):
        self._collector = collector
        self._cancel_scope: CancelScope | None = None
        self._stop_requested = False
        self._finished = Event()

    def __call__(self):
        if self._stop_requested:
            return
        self._stop_requested = True
        logger.debug("stopping log tracker")
        self._collector.stop()
        if self._cancel_scope is not None:
            self._cancel_scope.cancel()

    @property
    def stopped(self) -> bool:
        return self._stop_requested

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    async def wait(self):
        """Wait until the collector and all drains of the run have exited."""
        await self._finished.wait()


class LogTracker:
    """Fan-in multiplexer printing lines of several byte streams to one sink.

    Usage:
        tracker = LogTracker([Logger(stream=process.stdout, name="app")])
        async with create_task_group() as tg:
            stop = await tracker.start(tg)
            ...
            stop()
            await stop.wait()
    """

    def __init__(
        self,
        loggers: Iterable[Logger] = (),
        *,
        sink: LineSink = click.echo,
        buffer_size: int = 0,
        prefix: bool = False,
    ):
        """Create a tracker from an initial set of loggers.

        Args:
            loggers: initial loggers, an empty id is replaced by the logger position
            sink: callable receiving every output line (default: ``click.echo``)
            buffer_size: capacity of the channel shared by the drains, 0 hands off lines one at a time
            prefix: prefix every line with the name of its logger

        Raises:
            ValidationError: a logger has an empty name
        """
        if buffer_size < 0:
            raise ValidationError("buffer_size must not be negative")
        self._registry = LoggerRegistry.from_loggers(loggers)
        self.sink = sink
        self.buffer_size = buffer_size
        self.prefix = prefix

    @property
    def loggers(self) -> dict[LoggerKey, Logger]:
        return self._registry.snapshot()

    def __len__(self):
        return len(self._registry)

    def __contains__(self, key):
        return key in self._registry

    def __getitem__(self, key: LoggerKey) -> Logger:
        return self._registry[key]

    def add_log_reader(self, stream: ByteReceiveStream, name: str, id: str) -> Logger:
        """Register one more stream, it is drained by the next run started.

        Raises:
            ValidationError: name or id is empty
            DuplicateKeyError: a logger with the same id and name is already registered
        """
        return self._registry.add(stream, name, id)

    async def start(self, task_group: TaskGroup) -> StopHandle:
        """Drain every registered logger in the background of ``task_group``.

        The registered loggers are captured when this is called, loggers added
        later are not part of the run.
        """
        loggers = self._registry.snapshot()
        handle = StopHandle(Collector(self.sink, prefix=self.prefix))
        logger.debug("starting log tracker with %d loggers", len(loggers))
        return await task_group.start(self._run, loggers, handle)

    async def _run(
        self,
        loggers: dict[LoggerKey, Logger],
        handle: StopHandle,
        *,
        task_status: TaskStatus[StopHandle] = TASK_STATUS_IGNORED,
    ):
        send_stream, receive_stream = create_memory_object_stream[LogLine](self.buffer_size)
        streams = [receive_stream]
        try:
            async with create_task_group() as tg:
                handle._cancel_scope = tg.cancel_scope
                tg.start_soon(handle._collector.run, receive_stream)
                async with send_stream:
                    for entry in loggers.values():
                        clone = send_stream.clone()
                        streams.append(clone)
                        tg.start_soon(drain_lines, entry, clone)
                task_status.started(handle)
        finally:
            # tasks cancelled before their first step never close their stream
            for stream in streams:
                stream.close()
            handle._finished.set()
            logger.debug("log tracker run finished")
