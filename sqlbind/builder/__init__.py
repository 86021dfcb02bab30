"""Statement builders.

Example:
    >>> from sqlbind.builder import Builder
    >>> b = Builder("users", dialect="postgres").select("id", "name").where("age", ">", 18).limit(10)
    >>> b.for_select().sql
    'SELECT "id", "name" FROM "users" WHERE "age" > $1 LIMIT $2'
"""

from typing import Optional, Union

from sqlbind.builder._base import ASC, DESC, Column, QueryBuilder, Statement
from sqlbind.builder._conditions import ConditionStream, ConditionToken, TokenType
from sqlbind.builder._delete import DeleteMixin
from sqlbind.builder._insert import InsertMixin
from sqlbind.builder._predicates import Operator, Predicate, PredicateRegistry
from sqlbind.builder._select import SelectMixin
from sqlbind.builder._update import UpdateMixin
from sqlbind.config import BuilderConfig
from sqlbind.dialects import Dialect

__all__ = (
    "ASC",
    "DESC",
    "Builder",
    "Column",
    "ConditionStream",
    "ConditionToken",
    "Operator",
    "Predicate",
    "PredicateRegistry",
    "QueryBuilder",
    "Statement",
    "TokenType",
    "table",
)


class Builder(SelectMixin, DeleteMixin, InsertMixin, UpdateMixin):
    """Builds SELECT, DELETE, INSERT and UPDATE statements from one definition."""


def table(
    name: str,
    dialect: Union[str, Dialect, None] = None,
    *,
    renumber_placeholders: bool = True,
    inline_parameters: bool = False,
) -> Builder:
    """Create a builder targeting ``name``.

    Args:
        name: Table name; dotted names are quoted part by part.
        dialect: Dialect name or instance, ANSI when omitted.
        renumber_placeholders: Rewrite markers into the dialect's final form.
        inline_parameters: Render values into the SQL text as literals.

    Returns:
        Builder: A new builder for the table.
    """
    config = BuilderConfig(renumber_placeholders=renumber_placeholders, inline_parameters=inline_parameters)
    return Builder(name, dialect=dialect, config=config)
