import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from dataclasses import dataclass

from anyio.abc import ByteReceiveStream
from anyio.streams.memory import MemoryObjectSendStream

from .registry import Logger, LoggerKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogLine:
    key: LoggerKey
    text: str


def _decode(line: bytes) -> str:
    return line.removesuffix(b"\r").decode("utf-8", errors="replace")


async def iter_lines(stream: ByteReceiveStream) -> AsyncIterator[str]:
    """Split a byte stream into text lines.

    A trailing partial line without newline is yielded once the stream ends.
    """
    # pieces of the current line, joined once its newline arrives
    pending: list[bytes] = []
    async for chunk in stream:
        *lines, rest = chunk.split(b"\n")
        if lines:
            lines[0] = b"".join([*pending, lines[0]])
            pending.clear()
            for line in lines:
                yield _decode(line)
        if rest:
            pending.append(rest)
    if pending:
        yield _decode(b"".join(pending))


async def drain_lines(source: Logger, send_stream: MemoryObjectSendStream[LogLine]):
    """Forward every line of ``source`` into ``send_stream``, in order.

    Read errors end the drain without being raised, so a single broken
    stream never takes down the collector or the other drains.
    The send stream is closed on exit.
    """
    key = source.key
    logger.debug("drain for %s started", key)
    async with send_stream:
        try:
            async with aclosing(iter_lines(source.stream)) as lines:
                async for text in lines:
                    await send_stream.send(LogLine(key=key, text=text))
        except Exception as e:
            logger.warning("stopped reading logger %s: %s", key, e)
            return
    logger.debug("drain for %s reached end of stream", key)
