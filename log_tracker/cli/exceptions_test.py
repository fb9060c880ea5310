import click
import pytest

from .blocking import blocking
from .exceptions import ClickExceptionRed, async_handle_exceptions, leaf_exceptions
from log_tracker.common.exceptions import DuplicateKeyError, TailError


def run(exc: BaseException):
    @blocking
    @async_handle_exceptions
    async def command():
        raise exc

    return command()


def test_log_tracker_exception_becomes_click_exception():
    with pytest.raises(ClickExceptionRed, match="tail exited"):
        run(TailError("tail exited with status 1"))


def test_exception_group_is_unwrapped():
    group = ExceptionGroup("task group", [ValueError("other"), ExceptionGroup("inner", [DuplicateKeyError("dup")])])

    with pytest.raises(ClickExceptionRed, match="dup"):
        run(group)


def test_click_exception_in_group_is_reraised():
    with pytest.raises(click.BadParameter):
        run(ExceptionGroup("task group", [click.BadParameter("bad")]))


def test_unhandled_exceptions_are_reraised():
    with pytest.raises(ExceptionGroup):
        run(ExceptionGroup("task group", [ValueError("boom")]))

    with pytest.raises(KeyError):
        run(KeyError("boom"))


def test_leaf_exceptions():
    a, b, c = ValueError("a"), KeyError("b"), TypeError("c")

    assert leaf_exceptions(ExceptionGroup("outer", [a, ExceptionGroup("inner", [b, c])])) == [a, b, c]


def test_click_exception_red_message():
    assert ClickExceptionRed("failed").format_message() == click.style("failed", fg="red")
