import logging

import pytest
from anyio import EndOfStream, create_memory_object_stream
from anyio.abc import ByteReceiveStream

from .drain import LogLine, drain_lines, iter_lines
from .registry import Logger, LoggerKey

pytestmark = pytest.mark.anyio


def byte_stream(*chunks: bytes):
    send, receive = create_memory_object_stream[bytes](len(chunks))
    with send:
        for chunk in chunks:
            send.send_nowait(chunk)
    return receive


class FailingStream(ByteReceiveStream):
    """Yields the given chunks, then fails like a broken pipe."""

    def __init__(self, *chunks: bytes):
        self._chunks = list(chunks)

    async def receive(self, max_bytes: int = 65536) -> bytes:
        if self._chunks:
            return self._chunks.pop(0)
        raise OSError("read failed")

    async def aclose(self):
        pass


async def collect(stream) -> list[str]:
    return [line async for line in iter_lines(stream)]


async def test_iter_lines():
    with byte_stream(b"first\nsecond\n") as stream:
        assert await collect(stream) == ["first", "second"]


async def test_iter_lines_joins_chunks():
    with byte_stream(b"fir", b"st\nsec", b"ond\nthi", b"rd\n") as stream:
        assert await collect(stream) == ["first", "second", "third"]


async def test_iter_lines_long_line_over_many_chunks():
    chunks = [b"x" * 1024] * 2000 + [b"\r", b"\nshort\n"]

    with byte_stream(*chunks) as stream:
        assert await collect(stream) == ["x" * 1024 * 2000, "short"]


async def test_iter_lines_newline_at_chunk_boundary():
    with byte_stream(b"first", b"\n", b"\nsecond", b"\n") as stream:
        assert await collect(stream) == ["first", "", "second"]


async def test_iter_lines_emits_trailing_partial_line():
    with byte_stream(b"first\nno newline") as stream:
        assert await collect(stream) == ["first", "no newline"]


async def test_iter_lines_keeps_empty_lines():
    with byte_stream(b"a\n\nb\n") as stream:
        assert await collect(stream) == ["a", "", "b"]


async def test_iter_lines_strips_carriage_return():
    with byte_stream(b"windows\r\nunix\n") as stream:
        assert await collect(stream) == ["windows", "unix"]


async def test_iter_lines_replaces_invalid_utf8():
    with byte_stream(b"caf\xc3\xa9 \xff\n") as stream:
        assert await collect(stream) == ["caf\u00e9 \ufffd"]


async def test_iter_lines_empty_stream():
    with byte_stream() as stream:
        assert await collect(stream) == []


async def test_drain_lines_forwards_in_order():
    send, receive = create_memory_object_stream[LogLine](10)
    source = byte_stream(b"one\ntwo\n", b"three")

    with source, receive:
        await drain_lines(Logger(stream=source, name="app", id="1"), send)

        key = LoggerKey(id="1", name="app")
        assert [receive.receive_nowait() for _ in range(3)] == [
            LogLine(key=key, text="one"),
            LogLine(key=key, text="two"),
            LogLine(key=key, text="three"),
        ]
        # the send stream is closed once the source is drained
        with pytest.raises(EndOfStream):
            await receive.receive()


async def test_drain_lines_stops_quietly_on_read_error(caplog):
    send, receive = create_memory_object_stream[LogLine](10)

    with receive, caplog.at_level(logging.WARNING):
        await drain_lines(Logger(stream=FailingStream(b"before\n"), name="app", id="1"), send)

        assert receive.receive_nowait() == LogLine(key=LoggerKey(id="1", name="app"), text="before")
        with pytest.raises(EndOfStream):
            await receive.receive()

    assert "stopped reading logger app/1: read failed" in caplog.text
