"""Tests for the output formatter and parameter alignment."""

import pytest

from sqlbind import ExtraParameterError, LiteralRenderError, MissingParameterError, Raw, table
from sqlbind.dialects import get_dialect
from sqlbind.parameters import ParameterCollector, ParameterProcessor


@pytest.fixture
def processor() -> ParameterProcessor:
    return ParameterProcessor()


def test_parameterized_mode_returns_values(processor: ParameterProcessor) -> None:
    sql, parameters = processor.process("SELECT ? , ?", [1, 2], get_dialect("postgres"))

    assert sql == "SELECT $1 , $2"
    assert parameters == [1, 2]


def test_inline_mode_substitutes_literals(processor: ParameterProcessor) -> None:
    sql, parameters = processor.process(
        "INSERT INTO t VALUES (?, ?, ?, ?, ?)", ["it's", 3, 1.5, None, True], get_dialect(), inline=True
    )

    assert sql == "INSERT INTO t VALUES ('it''s', 3, 1.5, NULL, TRUE)"
    assert parameters == []


def test_markers_inside_quotes_and_comments_are_ignored(processor: ParameterProcessor) -> None:
    sql, _ = processor.process("SELECT '?', \"a?\" -- ?\nWHERE x = ? /* ? */", [1], get_dialect("postgres"))

    assert sql == "SELECT '?', \"a?\" -- ?\nWHERE x = $1 /* ? */"


def test_json_operators_are_not_markers(processor: ParameterProcessor) -> None:
    sql, _ = processor.process("SELECT data ?| ARRAY[?] FROM t", ["k"], get_dialect("postgres"))

    assert sql == "SELECT data ?| ARRAY[$1] FROM t"


def test_missing_values(processor: ParameterProcessor) -> None:
    with pytest.raises(MissingParameterError):
        processor.process("SELECT ?, ?", [1], get_dialect())


def test_extra_values(processor: ParameterProcessor) -> None:
    with pytest.raises(ExtraParameterError):
        processor.process("SELECT ?", [1, 2], get_dialect())


def test_raw_fragment_with_wrong_value_count_fails() -> None:
    with pytest.raises(MissingParameterError):
        table("t").where_raw("a = ? OR b = ?", 1).for_select()


def test_collector_binds_raw_verbatim() -> None:
    collector = ParameterCollector(get_dialect())

    assert collector.bind(Raw("NOW()")) == "NOW()"
    assert collector.bind(5) == "?"
    assert collector.parameters == [5]
    assert len(collector) == 1


class TestInlineBuilder:
    """Literal-inlining through the builder."""

    def test_inline_select(self) -> None:
        builder = table("users").where("name", "=", "O'Brien").limit(10).offset(0).inline()

        result = builder.for_select()

        assert result.sql == """SELECT * FROM "users" WHERE "name" = 'O''Brien' LIMIT 10 OFFSET 0"""
        assert result.parameters == []
        assert builder.parameters == ["O'Brien", 10, 0]

    def test_inline_ignores_renumbering(self) -> None:
        result = table("users", "postgres", inline_parameters=True).where("id", "IN", [1, 2]).for_select()

        assert result.sql == 'SELECT * FROM "users" WHERE "id" IN (1, 2)'

    def test_inline_rejects_non_literal_value(self) -> None:
        builder = table("users").where("payload", "=", b"\x00").inline()

        with pytest.raises(LiteralRenderError):
            builder.for_select()

    def test_inline_rejects_non_finite_float(self) -> None:
        with pytest.raises(LiteralRenderError):
            table("t").inline().for_update({"score": float("nan")})

    def test_failed_inline_render_reports_no_parameters(self) -> None:
        builder = table("users").where("id", "=", 1)
        builder.for_select()
        builder.and_where("payload", "=", b"\x00").inline()

        with pytest.raises(LiteralRenderError):
            builder.for_select()

        assert builder.parameters == []


def test_failed_alignment_reports_no_parameters() -> None:
    builder = table("t").where("id", "=", 1)
    assert builder.for_select().parameters == [1]

    builder.where_raw("a = ? OR b = ?", 2)

    with pytest.raises(MissingParameterError):
        builder.for_select()
    assert builder.parameters == []
