"""Logging error reporter."""

import logging

logger = logging.getLogger(__name__)


class LoggingErrorReporter:
    """
    Reports errors to the log with their traceback.

    Implements ErrorReporter protocol.
    """

    def __init__(self, environment: str = "production"):
        self.environment = environment

    def capture_exception(self, error: BaseException) -> None:
        logger.error(f"[{self.environment}] {type(error).__name__}: {error}", exc_info=error)
