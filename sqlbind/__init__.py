"""sqlbind: dialect-aware SQL statement assembly with positional parameters."""

from sqlbind.builder import ASC, DESC, Builder, Column, Operator, PredicateRegistry, Statement, table
from sqlbind.config import BuilderConfig
from sqlbind.dialects import (
    AnsiDialect,
    Dialect,
    MSSQLDialect,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    SQLiteDialect,
    get_dialect,
)
from sqlbind.exceptions import (
    ExtraParameterError,
    ImproperConfigurationError,
    LiteralRenderError,
    MissingParameterError,
    ParameterError,
    SQLBindError,
    SQLBuilderError,
    UnresolvedPredicateError,
)
from sqlbind.parameters import ParameterStyle, Raw
from sqlbind.typing import Empty

__all__ = (
    "ASC",
    "DESC",
    "AnsiDialect",
    "Builder",
    "BuilderConfig",
    "Column",
    "Dialect",
    "Empty",
    "ExtraParameterError",
    "ImproperConfigurationError",
    "LiteralRenderError",
    "MSSQLDialect",
    "MissingParameterError",
    "MySQLDialect",
    "Operator",
    "OracleDialect",
    "ParameterError",
    "ParameterStyle",
    "PostgresDialect",
    "PredicateRegistry",
    "Raw",
    "SQLBindError",
    "SQLBuilderError",
    "SQLiteDialect",
    "Statement",
    "UnresolvedPredicateError",
    "get_dialect",
    "table",
)
