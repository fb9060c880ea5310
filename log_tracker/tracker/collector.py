import logging
from collections.abc import Callable

import click
from anyio.streams.memory import MemoryObjectReceiveStream

from .drain import LogLine

logger = logging.getLogger(__name__)

LineSink = Callable[[str], object]


class Collector:
    """Single consumer writing lines from every drain to one sink.

    Each line is written with a single sink call, so lines coming from
    different drains never interleave partially.
    """

    def __init__(self, sink: LineSink = click.echo, prefix: bool = False):
        self.sink = sink
        self.prefix = prefix
        self.lines_written = 0
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self):
        """Stop writing, lines received afterwards are dropped."""
        self._stopped = True

    def format(self, line: LogLine) -> str:
        if self.prefix:
            return f"[{line.key.name}] {line.text}"
        return line.text

    def write(self, line: LogLine):
        self.sink(self.format(line))
        self.lines_written += 1

    async def run(self, receive_stream: MemoryObjectReceiveStream[LogLine]):
        """Write received lines until all senders are closed or the collector is stopped."""
        async with receive_stream:
            async for line in receive_stream:
                if self._stopped:
                    break
                self.write(line)
        logger.debug("collector exited after %d lines", self.lines_written)
