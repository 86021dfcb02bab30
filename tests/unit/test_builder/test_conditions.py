"""Tests for the condition stream and WHERE rendering."""

import pytest

from sqlbind import Raw, SQLBuilderError, table
from sqlbind.builder import ConditionStream, PredicateRegistry, TokenType
from sqlbind.dialects import get_dialect
from sqlbind.parameters import ParameterCollector


def test_grouping_renders_parenthesized_and_or() -> None:
    builder = table("t")
    a = builder.predicates.define("a", "=", 1)
    b = builder.predicates.define("b", "=", 2)
    c = builder.predicates.define("c", "=", 3)

    builder.begin_group().add_predicate(a).and_().add_predicate(b).end_group().or_().add_predicate(c)
    sql, parameters = builder.for_select()

    assert sql == 'SELECT * FROM "t" WHERE ("a" = ? AND "b" = ?) OR "c" = ?'
    assert parameters == [1, 2, 3]


def test_group_where_callback() -> None:
    builder = table("t").group_where(lambda g: g.where("a", "=", 1).or_where("b", "=", 2)).and_where("c", ">", 3)

    assert builder.for_select().sql == 'SELECT * FROM "t" WHERE ("a" = ? OR "b" = ?) AND "c" > ?'


def test_nested_groups() -> None:
    builder = (
        table("t")
        .where("a", "=", 1)
        .or_group(lambda g: g.where("b", "=", 2).and_group(lambda h: h.where("c", "=", 3).or_where("d", "=", 4)))
    )

    sql, parameters = builder.for_select()

    assert sql == 'SELECT * FROM "t" WHERE "a" = ? OR ("b" = ? AND ("c" = ? OR "d" = ?))'
    assert parameters == [1, 2, 3, 4]


def test_connective_skipped_after_group_open_and_at_start() -> None:
    builder = table("t").and_where("a", "=", 1).group_where(lambda g: g.or_where("b", "=", 2))

    tokens = [token.type for token in builder.conditions]

    assert tokens == [
        TokenType.PREDICATE,
        TokenType.GROUP_BEGIN,
        TokenType.PREDICATE,
        TokenType.GROUP_END,
    ]


def test_raw_fragment_binds_its_own_values_in_order() -> None:
    builder = table("t", "postgres").where("a", "=", 1).where_raw("b BETWEEN ? AND ?", 5, 9).and_where("c", "=", 3)

    sql, parameters = builder.for_select()

    assert sql == 'SELECT * FROM "t" WHERE "a" = $1 AND b BETWEEN $2 AND $3 AND "c" = $4'
    assert parameters == [1, 5, 9, 3]


def test_stream_preserves_append_order() -> None:
    stream = ConditionStream()
    registry = PredicateRegistry()
    dialect = get_dialect()
    stream.or_()
    stream.add_predicate(registry.define("x", "=", 1))
    stream.end_group()

    collector = ParameterCollector(dialect)

    assert stream.render(registry, collector) == ' OR "x" = ?)'
    assert collector.parameters == [1]


def test_unbalanced_groups_are_rendered_as_is() -> None:
    builder = table("t").begin_group().where("a", "=", 1)

    assert builder.for_select().sql == 'SELECT * FROM "t" WHERE ("a" = ?'


def test_raw_sql_value_for_raw_fragment_is_refused() -> None:
    builder = table("t").where("a", "=", 1)

    with pytest.raises(SQLBuilderError, match="NOW"):
        builder.where_raw("b < ?", Raw("NOW()"))
    with pytest.raises(SQLBuilderError):
        builder.add_raw("b < ?", Raw("NOW()"))

    assert [token.type for token in builder.conditions] == [TokenType.PREDICATE]
    assert builder.for_select().sql == 'SELECT * FROM "t" WHERE "a" = ?'


def test_raw_sql_belongs_in_the_fragment() -> None:
    sql, parameters = table("t").where_raw("b < NOW() AND c = ?", 2).for_select()

    assert sql == 'SELECT * FROM "t" WHERE b < NOW() AND c = ?'
    assert parameters == [2]
