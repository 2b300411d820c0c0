"""Error reporting interface."""

from typing import Protocol


class ErrorReporter(Protocol):
    """Interface for reporting errors the directory recovers from."""

    def capture_exception(self, error: BaseException) -> None:
        """Report an exception."""
        ...
