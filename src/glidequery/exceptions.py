"""Exceptions raised by glidequery.

Every error is a caller mistake detected synchronously while building a
query. All of them derive from `GlideQueryError`, which carries a
human-readable message plus optional key/value details.
"""

from typing import Any, Dict


class GlideQueryError(Exception):
    """Base exception for all glidequery errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., operator, expected, found)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class QueryMissingFieldError(GlideQueryError):
    """Raised when a condition is added before any field was selected.

    Example:
        >>> raise QueryMissingFieldError("A field must be selected before adding a condition.", operator="LIKE")
    """


class QueryTypeError(GlideQueryError, TypeError):
    """Raised when an operand does not match the types an operator accepts.

    Also a builtin `TypeError`, so generic handlers keep working.

    Example:
        >>> raise QueryTypeError("Invalid type passed. Expected: string, found: number", expected="string")
    """


class QueryEmptyError(GlideQueryError):
    """Raised when `build` is called on a builder with nothing accumulated.

    Example:
        >>> raise QueryEmptyError("At least one condition is required in query.")
    """
