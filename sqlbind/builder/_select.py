"""SELECT generation."""

from sqlbind.builder._base import QueryBuilder, Statement

__all__ = ("SelectMixin",)


class SelectMixin(QueryBuilder):
    """Renders ``SELECT <columns> FROM <table> [WHERE] [ORDER BY] [group] [LIMIT] [OFFSET]``."""

    def for_select(self) -> Statement:
        """Build a SELECT statement.

        Raises:
            SQLBuilderError: If no table is set.
            UnresolvedPredicateError: If a condition references an unknown predicate.

        Returns:
            Statement: The SQL and its parameters.
        """
        collector = self._begin_render()
        sql = f"SELECT {', '.join(self.quoted_columns())} FROM {self.quoted_table_name()}"
        sql += self._where_clause(collector)
        sql += self._order_clause()
        if self._group:
            sql += f" {self._group}"
        sql += self._paging_clause(collector)
        return self._finish("SELECT", sql, collector)
