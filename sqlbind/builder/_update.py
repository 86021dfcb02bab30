"""UPDATE generation."""

from collections.abc import Iterable, Mapping
from typing import Any, Union

from sqlbind.builder._base import QueryBuilder, Statement
from sqlbind.exceptions import SQLBuilderError

__all__ = ("UpdateMixin",)


class UpdateMixin(QueryBuilder):
    """Renders ``UPDATE <table> SET <field>=?, ... [WHERE] [LIMIT] [OFFSET]``."""

    def for_update(self, assignments: Union[Mapping[str, Any], Iterable[tuple[str, Any]]]) -> Statement:
        """Build an UPDATE statement.

        SET values are bound before any WHERE values. Fields are written in the
        mapping's iteration order.

        Args:
            assignments: Mapping of field to new value, or ``(field, value)`` pairs.

        Raises:
            SQLBuilderError: If no table is set or there is nothing to assign.

        Returns:
            Statement: The SQL and its parameters.
        """
        collector = self._begin_render()
        table = self.quoted_table_name()
        pairs = list(assignments.items()) if isinstance(assignments, Mapping) else list(assignments)
        if not pairs:
            msg = "UPDATE requires at least one assignment"
            raise SQLBuilderError(msg)

        sets = ", ".join(f"{self.dialect.quote_identifier(name)}={collector.bind(value)}" for name, value in pairs)
        sql = f"UPDATE {table} SET {sets}"
        sql += self._where_clause(collector)
        sql += self._paging_clause(collector)
        return self._finish("UPDATE", sql, collector)
