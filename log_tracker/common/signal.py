import logging
import signal

from anyio import open_signal_receiver

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


# Reference: https://github.com/agronholm/anyio/blob/4.9.0/docs/signals.rst
async def wait_for_signal(*signums: signal.Signals) -> signal.Signals:
    """Block until one of ``signums`` (SIGINT and SIGTERM by default) arrives and return it.

    The receiver is only installed while waiting, the default handlers are
    back in place once this returns.
    """
    with open_signal_receiver(*(signums or STOP_SIGNALS)) as signals:
        async for signum in signals:
            received = signal.Signals(signum)
            logger.debug("received %s", received.name)
            return received
