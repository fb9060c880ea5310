from .exceptions import DuplicateKeyError, FileNotFoundError, LogTrackerException, TailError, ValidationError


def test_message():
    assert str(ValidationError("logger name was empty")) == "logger name was empty"


def test_message_with_cause():
    try:
        try:
            raise OSError("permission denied")
        except OSError as e:
            raise FileNotFoundError("config file 'a.yaml' not found") from e
    except LogTrackerException as e:
        assert str(e) == "config file 'a.yaml' not found (Caused by: permission denied)"


def test_file_not_found_is_builtin_subclass():
    assert issubclass(FileNotFoundError, OSError)
    assert issubclass(FileNotFoundError, LogTrackerException)


def test_extra_attributes():
    assert DuplicateKeyError("duplicate", key="app/1").key == "app/1"

    error = TailError("failed", returncode=2, output="tail: boom")
    assert error.returncode == 2
    assert error.output == "tail: boom"
