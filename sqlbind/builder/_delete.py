"""DELETE generation."""

from sqlbind.builder._base import QueryBuilder, Statement

__all__ = ("DeleteMixin",)


class DeleteMixin(QueryBuilder):
    """Renders ``DELETE FROM <table> [WHERE] [LIMIT] [OFFSET]``."""

    def for_delete(self) -> Statement:
        """Build a DELETE statement.

        An empty condition stream deletes every row; no WHERE clause is written.

        Raises:
            SQLBuilderError: If no table is set.

        Returns:
            Statement: The SQL and its parameters.
        """
        collector = self._begin_render()
        sql = f"DELETE FROM {self.quoted_table_name()}"
        sql += self._where_clause(collector)
        sql += self._paging_clause(collector)
        return self._finish("DELETE", sql, collector)
