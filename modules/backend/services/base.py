"""
Base Service.

Services hold the business rules between the HTTP layer and the
repositories. They raise ApplicationError subclasses and never build
responses themselves.
"""

from typing import Any

from modules.backend.core.logging import get_logger


class BaseService:
    """Gives each service a logger named after its module."""

    def __init__(self) -> None:
        self._logger = get_logger(type(self).__module__)

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Info-level record of a completed state change, tagged with the service name."""
        self._logger.info(operation, extra={"service": type(self).__name__, **context})
