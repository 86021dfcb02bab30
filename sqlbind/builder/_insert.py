"""INSERT generation."""

from collections.abc import Mapping, Sequence
from typing import Any, Union

from sqlbind.builder._base import QueryBuilder, Statement
from sqlbind.exceptions import SQLBuilderError

__all__ = ("InsertMixin",)


class InsertMixin(QueryBuilder):
    """Renders multi-row ``INSERT INTO <table>(<fields>) VALUES (...), (...)``."""

    def for_insert(self, rows: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]) -> Statement:
        """Build an INSERT statement.

        The field list comes from the first row's keys. Values of every row are
        taken in that field order, so rows may list their keys in any order but
        must supply exactly the same fields.

        Args:
            rows: One mapping or a sequence of mappings of field to value.

        Raises:
            SQLBuilderError: If no table is set, there are no rows or fields, or a row's fields differ from the first row's.

        Returns:
            Statement: The SQL and its parameters.
        """
        collector = self._begin_render()
        table = self.quoted_table_name()
        if isinstance(rows, Mapping):
            rows = [rows]
        if not rows:
            msg = "INSERT requires at least one row"
            raise SQLBuilderError(msg)

        fields = list(rows[0])
        if not fields:
            msg = "INSERT rows must supply at least one field"
            raise SQLBuilderError(msg)

        tuples = []
        for index, row in enumerate(rows):
            if row.keys() != set(fields):
                msg = f"Row {index} fields {sorted(row)} do not match the first row's fields {sorted(fields)}"
                raise SQLBuilderError(msg)
            tuples.append("(" + ", ".join(collector.bind(row[name]) for name in fields) + ")")

        columns = ", ".join(self.dialect.quote_identifier(name) for name in fields)
        sql = f"INSERT INTO {table}({columns}) VALUES {', '.join(tuples)}"
        return self._finish("INSERT", sql, collector)
