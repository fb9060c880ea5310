class LogTrackerException(Exception):
    """Base class for log-tracker specific errors.

    This class should not be raised directly, but should be used as a base
    class for all log-tracker specific errors.
    It handles the __cause__ attribute so the errors could be raised as

    .. code-block:: python

        raise SomeError("message") from original_exception
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        if self.__cause__:
            return f"{self.message} (Caused by: {self.__cause__})"
        return f"{self.message}"


class ValidationError(LogTrackerException):
    """Raised when a logger is registered with an empty name or id."""

    pass


class DuplicateKeyError(LogTrackerException):
    """Raised when a logger with the same (id, name) is already registered."""

    def __init__(self, message: str, key=None):
        super().__init__(message)
        self.key = key


class ConfigurationError(LogTrackerException):
    """Raised when a configuration error exists."""

    pass


class ArgumentError(LogTrackerException):
    """Raised when a cli argument is not valid."""

    pass


class FileNotFoundError(LogTrackerException, FileNotFoundError):
    """Raised when a file is not found."""

    pass


class TailError(LogTrackerException):
    """Raised when a tail process exits with a non-zero status."""

    def __init__(self, message: str, returncode: int | None = None, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output
