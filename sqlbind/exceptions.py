from typing import Any, Optional

__all__ = (
    "ExtraParameterError",
    "ImproperConfigurationError",
    "LiteralRenderError",
    "MissingParameterError",
    "ParameterError",
    "SQLBindError",
    "SQLBuilderError",
    "UnresolvedPredicateError",
)


class SQLBindError(Exception):
    """Base exception class from which all sqlbind exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBindError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLBindError):
    """Improper Configuration error.

    Raised when a dialect or parameter style cannot be resolved.
    """


class SQLBuilderError(SQLBindError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class UnresolvedPredicateError(SQLBuilderError):
    """Raised when a condition references a predicate id that was never defined."""

    predicate_id: str

    def __init__(self, predicate_id: str) -> None:
        super().__init__(f"Predicate {predicate_id!r} is not registered with this builder")
        self.predicate_id = predicate_id


# -- SQL Parameter Errors --
class ParameterError(SQLBindError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when the SQL holds more placeholders than bound values."""


class ExtraParameterError(ParameterError):
    """Raised when more values are bound than the SQL has placeholders."""


class LiteralRenderError(ParameterError):
    """Raised when a value has no SQL literal form and cannot be inlined."""
