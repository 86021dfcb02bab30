"""Dialect policies.

A dialect knows how to quote an identifier, which spans of SQL text can never
hold a marker, which marker a clause emits while a statement is assembled, how
each marker is finally rendered, and how a value is written as literal text.
The builders never special-case a database product.
"""

from typing import Any, ClassVar, Final, Optional, Union

from sqlglot import exp

from sqlbind.exceptions import ImproperConfigurationError
from sqlbind.parameters.converter import format_placeholder
from sqlbind.parameters.literals import to_literal
from sqlbind.parameters.types import GENERIC_PLACEHOLDER, ParameterStyle
from sqlbind.parameters.validator import (
    BACKSLASH_DOUBLE_QUOTED,
    BACKSLASH_SINGLE_QUOTED,
    BACKTICK_QUOTED,
    BRACKET_QUOTED,
    DOLLAR_QUOTED,
    DOUBLE_QUOTED,
    HASH_COMMENT,
    SINGLE_QUOTED,
    ScanRules,
)

__all__ = (
    "DIALECTS",
    "AnsiDialect",
    "Dialect",
    "MSSQLDialect",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
)

WILDCARD: Final = "*"


class Dialect:
    """Base dialect policy: ANSI double-quoted identifiers and ``?`` markers."""

    name: ClassVar[str] = "ansi"
    sqlglot_dialect: ClassVar[Optional[str]] = None
    parameter_style: ClassVar[ParameterStyle] = ParameterStyle.QMARK
    scan_rules: ClassVar[ScanRules] = ScanRules()

    __slots__ = ()

    def quote_identifier(self, name: str) -> str:
        """Quote an identifier, one dotted part at a time.

        ``*`` parts are left bare so ``t.*`` stays a wildcard.

        Returns:
            The quoted identifier.
        """
        return ".".join(
            part if part == WILDCARD else exp.to_identifier(part, quoted=True).sql(dialect=self.sqlglot_dialect)
            for part in name.split(".")
        )

    def placeholder(self) -> str:
        """Marker emitted by clauses before renumbering."""
        return GENERIC_PLACEHOLDER

    def canonical_placeholder(self) -> str:
        """Marker the literal-inlining pass searches for."""
        return GENERIC_PLACEHOLDER

    def render_placeholder(self, ordinal: int) -> str:
        """Final marker for the parameter at ``ordinal`` (zero based)."""
        return format_placeholder(self.parameter_style, ordinal)

    def render_literal(self, value: Any) -> str:
        """Literal text for an inlined value."""
        return to_literal(value, self.sqlglot_dialect)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash((type(self), self.name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, parameter_style={self.parameter_style!r})"


class AnsiDialect(Dialect):
    """Standard SQL."""


class SQLiteDialect(Dialect):
    """SQLite: accepts double quotes, backticks and brackets around identifiers."""

    name = "sqlite"
    sqlglot_dialect = "sqlite"
    scan_rules = ScanRules(skipped=(SINGLE_QUOTED, DOUBLE_QUOTED, BACKTICK_QUOTED, BRACKET_QUOTED))


class PostgresDialect(Dialect):
    """PostgreSQL: ``$1, $2, ...`` markers."""

    name = "postgres"
    sqlglot_dialect = "postgres"
    parameter_style = ParameterStyle.NUMERIC
    scan_rules = ScanRules(skipped=(SINGLE_QUOTED, DOUBLE_QUOTED, DOLLAR_QUOTED), question_operators=True)


class MySQLDialect(Dialect):
    """MySQL: backtick identifiers and ``%s`` markers."""

    name = "mysql"
    sqlglot_dialect = "mysql"
    parameter_style = ParameterStyle.POSITIONAL_PYFORMAT
    scan_rules = ScanRules(skipped=(BACKSLASH_SINGLE_QUOTED, BACKSLASH_DOUBLE_QUOTED, BACKTICK_QUOTED, HASH_COMMENT))


class OracleDialect(Dialect):
    """Oracle: ``:1, :2, ...`` markers."""

    name = "oracle"
    sqlglot_dialect = "oracle"
    parameter_style = ParameterStyle.POSITIONAL_COLON


class MSSQLDialect(Dialect):
    """SQL Server: bracketed identifiers and ``?`` markers."""

    name = "mssql"
    sqlglot_dialect = "tsql"
    scan_rules = ScanRules(skipped=(SINGLE_QUOTED, DOUBLE_QUOTED, BRACKET_QUOTED))


DIALECTS: Final[dict[str, Dialect]] = {
    "ansi": AnsiDialect(),
    "sqlite": SQLiteDialect(),
    "postgres": PostgresDialect(),
    "postgresql": PostgresDialect(),
    "mysql": MySQLDialect(),
    "oracle": OracleDialect(),
    "mssql": MSSQLDialect(),
    "tsql": MSSQLDialect(),
}


def get_dialect(dialect: Union[str, Dialect, None] = None) -> Dialect:
    """Resolve a dialect name or instance.

    Args:
        dialect: Dialect instance, registered name (case-insensitive) or None for ANSI.

    Raises:
        ImproperConfigurationError: If the name is not registered.

    Returns:
        The dialect policy.
    """
    if dialect is None:
        return DIALECTS["ansi"]
    if isinstance(dialect, Dialect):
        return dialect
    try:
        return DIALECTS[dialect.lower()]
    except KeyError:
        msg = f"Unknown dialect {dialect!r}. Available dialects: {', '.join(sorted(DIALECTS))}"
        raise ImproperConfigurationError(msg) from None
