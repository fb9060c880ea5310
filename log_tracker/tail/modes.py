import logging
import subprocess
from collections.abc import Sequence
from contextlib import AsyncExitStack, suppress

import click
from anyio import create_task_group, open_process, run_process
from anyio.abc import Process

from .command import TailSource, build_tail_args, check_tail_available
from log_tracker.common.exceptions import TailError
from log_tracker.common.signal import wait_for_signal
from log_tracker.config import TrackerConfig
from log_tracker.tracker import Collector, LineSink, Logger, LogLine, LoggerKey, LogTracker, StopHandle

logger = logging.getLogger(__name__)


def _stdin_for(source: TailSource):
    # tail reads the inherited standard input when no path is given
    return None if source.path is None else subprocess.DEVNULL


async def standard_mode(sources: Sequence[TailSource], config: TrackerConfig, sink: LineSink = click.echo):
    """Print the last lines of every source, one source after the other."""
    tail = check_tail_available()
    collector = Collector(sink, prefix=config.prefix)

    logger.info("Printing last %d lines", config.number)
    for index, source in enumerate(sources):
        args = build_tail_args(False, config.number, source.path, tail=tail)
        logger.debug("running %s", args)
        try:
            result = await run_process(args, stdin=_stdin_for(source), stderr=subprocess.STDOUT)
        except subprocess.CalledProcessError as e:
            output = (e.output or b"").decode("utf-8", errors="replace")
            raise TailError(f"{e} : {output.strip()}", returncode=e.returncode, output=output) from None

        key = LoggerKey(id=str(index), name=source.name)
        for text in result.stdout.decode("utf-8", errors="replace").splitlines():
            collector.write(LogLine(key=key, text=text))


async def _open_tail(stack: AsyncExitStack, source: TailSource, config: TrackerConfig, tail: str) -> Process:
    args = build_tail_args(True, config.number, source.path, tail=tail)
    logger.debug("running %s", args)
    process = await open_process(args, stdin=_stdin_for(source), stderr=None)
    return await stack.enter_async_context(process)


async def _stop_on_signal(stop: StopHandle, followed: int):
    received = await wait_for_signal()
    if stop.stopped:
        return
    click.echo(f"{received.name} received, stopping {followed} followed source(s)", err=True)
    logger.info("%s received, stopping log tracker", received.name)
    stop()


async def follow_mode(
    sources: Sequence[TailSource],
    config: TrackerConfig,
    sink: LineSink = click.echo,
    handle_signals: bool = True,
):
    """Follow every source and print their lines interleaved on the sink.

    Returns once every tail process has ended, or after SIGINT/SIGTERM when
    ``handle_signals`` is set.

    Raises:
        TailError: a tail process exited with a non-zero status on its own
    """
    tail = check_tail_available()

    logger.info("Beginning follow mode")
    async with AsyncExitStack() as stack:
        processes = [await _open_tail(stack, source, config, tail) for source in sources]

        tracker = LogTracker(
            [
                Logger(stream=process.stdout, name=source.name, id=str(index))
                for index, (source, process) in enumerate(zip(sources, processes, strict=True))
            ],
            sink=sink,
            buffer_size=config.buffer_size,
            prefix=config.prefix,
        )

        async with create_task_group() as tg:
            stop = await tracker.start(tg)
            if handle_signals:
                tg.start_soon(_stop_on_signal, stop, len(sources))

            await stop.wait()

            # Cancel the signal handler after the tracker completes
            tg.cancel_scope.cancel()

        for process in processes:
            if process.returncode is None:
                with suppress(ProcessLookupError):
                    process.terminate()

        for source, process in zip(sources, processes, strict=True):
            returncode = await process.wait()
            # negative return codes mean the tail was killed by a signal
            if returncode > 0 and not stop.stopped:
                raise TailError(f"tail exited with status {returncode} for {source.name}", returncode=returncode)
