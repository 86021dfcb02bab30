"""Shared builder state and the fluent configuration API.

A builder is a reusable statement definition: table, projections,
conditions, ordering and paging. Each ``for_*`` generator renders that
definition into a :class:`Statement` with a fresh parameter list, so one
builder can be rendered many times and in several shapes.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Final, Optional, Union

from typing_extensions import Self

from sqlbind.builder._conditions import ConditionStream, check_raw_values
from sqlbind.builder._predicates import Operator, PredicateRegistry
from sqlbind.config import BuilderConfig
from sqlbind.dialects import Dialect, get_dialect
from sqlbind.exceptions import SQLBuilderError
from sqlbind.parameters.core import ParameterCollector, ParameterProcessor
from sqlbind.typing import Empty, LimitValue
from sqlbind.utils.logging import get_logger, log_with_context

__all__ = ("ASC", "DESC", "Column", "QueryBuilder", "Statement")

logger = get_logger("builder")

ASC: Final = "ASC"
DESC: Final = "DESC"
_DIRECTIONS: Final = frozenset({ASC, DESC})


@dataclass(frozen=True)
class Column:
    """A projected column.

    ``quote=False`` writes ``name`` verbatim, for wildcards and expressions.
    """

    name: str
    quote: bool = True


WILDCARD: Final = Column("*", quote=False)


@dataclass
class Statement:
    """A rendered statement.

    Unpacks as ``sql, parameters``. When parameters were inlined into the text,
    ``parameters`` is empty.
    """

    sql: str
    parameters: list[Any] = field(default_factory=list)
    dialect: str = "ansi"

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.parameters

    def __str__(self) -> str:
        return self.sql


class QueryBuilder:
    """Base class holding the statement definition."""

    def __init__(
        self,
        table: Optional[str] = None,
        *,
        dialect: Union[str, Dialect, None] = None,
        config: Optional[BuilderConfig] = None,
    ) -> None:
        config = config or BuilderConfig()
        if dialect is not None:
            config = replace(config, dialect=dialect)
        self.config = config
        self.dialect = get_dialect(config.dialect)
        self._processor = ParameterProcessor()
        self.reset()
        if table is not None:
            self.from_(table)

    def reset(self) -> Self:
        """Clear the definition back to an empty statement.

        Configuration and dialect are kept.

        Returns:
            The current builder instance for method chaining.
        """
        self._table: Optional[str] = None
        self._columns: list[Column] = [WILDCARD]
        self.conditions = ConditionStream()
        self.predicates = PredicateRegistry()
        self._orders: dict[str, str] = {}
        self._parameters: list[Any] = []
        self._limit: LimitValue = Empty
        self._offset: LimitValue = Empty
        self._group = ""
        return self

    # -- configuration --
    def set_dialect(self, dialect: Union[str, Dialect]) -> Self:
        self.config = replace(self.config, dialect=dialect)
        self.dialect = get_dialect(dialect)
        return self

    def inline(self, enabled: bool = True) -> Self:
        """Render parameter values into the SQL text as literals."""
        self.config = replace(self.config, inline_parameters=enabled)
        return self

    def renumber(self, enabled: bool = True) -> Self:
        """Rewrite generic markers into the dialect's final marker form."""
        self.config = replace(self.config, renumber_placeholders=enabled)
        return self

    # -- statement definition --
    def from_(self, table: str) -> Self:
        if not table:
            msg = "Table name must not be empty"
            raise SQLBuilderError(msg)
        self._table = table
        return self

    def select(self, *columns: Union[str, Column]) -> Self:
        """Replace the projection list.

        Strings are quoted identifiers, except ``"*"``. Calling with no columns
        restores the ``*`` projection.

        Returns:
            The current builder instance for method chaining.
        """
        projections: list[Column] = []
        for column in columns:
            if isinstance(column, Column):
                projections.append(column)
            elif column == WILDCARD.name:
                projections.append(WILDCARD)
            elif column:
                projections.append(Column(column))
            else:
                msg = "Column name must not be empty"
                raise SQLBuilderError(msg)
        self._columns = projections or [WILDCARD]
        return self

    def order_by(self, field: str, direction: str = ASC) -> Self:
        """Order by ``field``.

        Fields render in the order they were first added; ordering an existing
        field again only changes its direction.

        Raises:
            SQLBuilderError: If the direction is not ASC or DESC.

        Returns:
            The current builder instance for method chaining.
        """
        normalized = direction.upper()
        if normalized not in _DIRECTIONS:
            msg = f"Invalid order direction {direction!r}, expected ASC or DESC"
            raise SQLBuilderError(msg)
        self._orders[field] = normalized
        return self

    def limit(self, limit: Optional[int]) -> Self:
        """Set the LIMIT, or clear it with None. Zero is a valid limit."""
        self._limit = self._paging_value("limit", limit)
        return self

    def offset(self, offset: Optional[int]) -> Self:
        """Set the OFFSET, or clear it with None. Zero is a valid offset."""
        self._offset = self._paging_value("offset", offset)
        return self

    def group(self, fragment: str) -> Self:
        """Set free-text grouping SQL, e.g. ``"GROUP BY age"``, written after ORDER BY."""
        self._group = fragment.strip()
        return self

    @staticmethod
    def _paging_value(name: str, value: Optional[int]) -> LimitValue:
        if value is None:
            return Empty
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"{name} must be an integer, got {type(value).__name__}"
            raise SQLBuilderError(msg)
        if value < 0:
            msg = f"{name} must not be negative, got {value}"
            raise SQLBuilderError(msg)
        return value

    # -- condition stream --
    def add_predicate(self, predicate_id: str) -> Self:
        """Reference a predicate defined in :attr:`predicates`."""
        self.conditions.add_predicate(predicate_id)
        return self

    def add_raw(self, fragment: str, *values: Any) -> Self:
        """Append raw SQL to the conditions; ``values`` bind to its own markers.

        Raises:
            SQLBuilderError: If a value is ``Raw``; put SQL text in ``fragment`` instead.

        Returns:
            The current builder instance for method chaining.
        """
        self.conditions.add_raw(fragment, *values)
        return self

    def begin_group(self) -> Self:
        self.conditions.begin_group()
        return self

    def end_group(self) -> Self:
        self.conditions.end_group()
        return self

    def and_(self) -> Self:
        self.conditions.and_()
        return self

    def or_(self) -> Self:
        self.conditions.or_()
        return self

    def group_where(self, callback: Callable[[Self], Any]) -> Self:
        """Bracket the conditions ``callback`` appends between ``(`` and ``)``.

        Example:
            ``b.group_where(lambda g: g.where("a", "=", 1).and_where("b", "=", 2)).or_where("c", "=", 3)``
            renders ``("a" = ? AND "b" = ?) OR "c" = ?``.

        Returns:
            The current builder instance for method chaining.
        """
        self.conditions.begin_group()
        callback(self)
        self.conditions.end_group()
        return self

    def and_group(self, callback: Callable[[Self], Any]) -> Self:
        self._connect(self.conditions.and_)
        return self.group_where(callback)

    def or_group(self, callback: Callable[[Self], Any]) -> Self:
        self._connect(self.conditions.or_)
        return self.group_where(callback)

    def where(self, field: str, operator: Union[str, Operator], value: Any = None) -> Self:
        """Define a predicate and append a reference to it.

        No connective is added; see :meth:`and_where` and :meth:`or_where`.

        Returns:
            The current builder instance for method chaining.
        """
        self.conditions.add_predicate(self.predicates.define(field, operator, value))
        return self

    def and_where(self, field: str, operator: Union[str, Operator], value: Any = None) -> Self:
        self._connect(self.conditions.and_)
        return self.where(field, operator, value)

    def or_where(self, field: str, operator: Union[str, Operator], value: Any = None) -> Self:
        self._connect(self.conditions.or_)
        return self.where(field, operator, value)

    def where_raw(self, fragment: str, *values: Any) -> Self:
        """Like :meth:`add_raw`, joined to a preceding condition with AND."""
        check_raw_values(values)
        self._connect(self.conditions.and_)
        return self.add_raw(fragment, *values)

    def _connect(self, connective: Callable[[], None]) -> None:
        if self.conditions.needs_connective():
            connective()

    # -- rendering helpers --
    @property
    def parameters(self) -> list[Any]:
        """Values bound by the most recent render, including inlined ones."""
        return list(self._parameters)

    def quoted_table_name(self) -> str:
        if self._table is None:
            msg = "No table set; call from_() first"
            raise SQLBuilderError(msg)
        return self.dialect.quote_identifier(self._table)

    def quoted_columns(self) -> list[str]:
        return [self.dialect.quote_identifier(c.name) if c.quote else c.name for c in self._columns]

    def _begin_render(self) -> ParameterCollector:
        self._parameters = []
        return ParameterCollector(self.dialect)

    def _where_clause(self, collector: ParameterCollector) -> str:
        if not self.conditions:
            return ""
        return " WHERE " + self.conditions.render(self.predicates, collector)

    def _order_clause(self) -> str:
        if not self._orders:
            return ""
        return " ORDER BY " + ", ".join(f"{name} {direction}" for name, direction in self._orders.items())

    def _paging_clause(self, collector: ParameterCollector) -> str:
        sql = ""
        if self._limit is not Empty:
            sql += " LIMIT " + collector.bind(self._limit)
        if self._offset is not Empty:
            sql += " OFFSET " + collector.bind(self._offset)
        return sql

    def _finish(self, kind: str, sql: str, collector: ParameterCollector) -> Statement:
        final_sql, parameters = self._processor.process(
            sql,
            collector.parameters,
            self.dialect,
            renumber=self.config.renumber_placeholders,
            inline=self.config.inline_parameters,
        )
        self._parameters = list(collector.parameters)
        log_with_context(
            logger,
            logging.DEBUG,
            f"Rendered {kind} statement",
            statement=kind,
            dialect=self.dialect.name,
            parameter_count=len(collector),
            inlined=self.config.inline_parameters,
        )
        return Statement(sql=final_sql, parameters=parameters, dialect=self.dialect.name)
