"""Centralized error handling utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from decimoney.exceptions.base import MoneyError

if TYPE_CHECKING:
    from logging import Logger


class ErrorHandler:
    """Centralized error handling utilities."""

    @staticmethod
    def handle_error(
        error: Exception,
        logger: Logger,
        reraise: bool = False,
        context: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Log an exception with its context and optionally re-raise it.

        Returns:
            The structured error data that was logged
        """
        if isinstance(error, MoneyError):
            error_data = error.to_dict()
            error_data["context"] = {**error.context, **(context or {})}
        else:
            error_data = {
                "error_type": type(error).__name__,
                "message": str(error),
                "context": context or {},
            }
        logger.error(f"Error handled: {error_data}")
        if reraise:
            raise error
        return error_data
