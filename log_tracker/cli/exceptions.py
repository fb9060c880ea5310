from functools import wraps

import click

from log_tracker.common.exceptions import LogTrackerException


class ClickExceptionRed(click.ClickException):
    def format_message(self) -> str:
        return click.style(self.message, fg="red")


def async_handle_exceptions(func):
    """Decorator to handle exceptions in async functions, including those wrapped in BaseExceptionGroup."""

    @wraps(func)
    async def wrapped(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except BaseExceptionGroup as eg:
            # Handle exceptions wrapped in ExceptionGroup (e.g., from task groups)
            for exc in leaf_exceptions(eg):
                if isinstance(exc, LogTrackerException):
                    raise ClickExceptionRed(str(exc)) from None
                elif isinstance(exc, click.ClickException):
                    raise exc from None
            # If no handled exceptions, re-raise the original group
            raise eg
        except LogTrackerException as e:
            raise ClickExceptionRed(str(e)) from None

    return wrapped


# https://peps.python.org/pep-0654/
def leaf_exceptions(group: BaseExceptionGroup) -> list[BaseException]:
    """Return a flat list of all 'leaf' exceptions of a possibly nested group."""
    result = []
    for exc in group.exceptions:
        if isinstance(exc, BaseExceptionGroup):
            result.extend(leaf_exceptions(exc))
        else:
            result.append(exc)
    return result
