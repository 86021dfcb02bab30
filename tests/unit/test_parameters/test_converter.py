"""Tests for placeholder scanning and renumbering."""

import pytest

from sqlbind import ImproperConfigurationError, ParameterStyle
from sqlbind.dialects import get_dialect
from sqlbind.parameters import ParameterConverter, ParameterValidator, format_placeholder


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (ParameterStyle.QMARK, ["?", "?"]),
        (ParameterStyle.NUMERIC, ["$1", "$2"]),
        (ParameterStyle.POSITIONAL_COLON, [":1", ":2"]),
        (ParameterStyle.POSITIONAL_PYFORMAT, ["%s", "%s"]),
    ],
)
def test_format_placeholder(style: ParameterStyle, expected: list) -> None:
    assert [format_placeholder(style, ordinal) for ordinal in range(2)] == expected


def test_format_placeholder_rejects_unknown_style() -> None:
    with pytest.raises(ImproperConfigurationError):
        format_placeholder("named", 0)  # type: ignore[arg-type]


def test_extract_parameters_positions() -> None:
    info = ParameterValidator().extract_parameters("a = ? AND b = '?' AND c = ?")

    assert [(p.position, p.ordinal, p.placeholder_text) for p in info] == [(4, 0, "?"), (26, 1, "?")]


@pytest.mark.parametrize(
    ("dialect", "sql", "expected"),
    [
        ("ansi", "SELECT \"a\\\" = ? AND \"b\" = ?", 2),
        ("ansi", "SELECT \"say \"\"?\"\"\" FROM t WHERE x = ?", 1),
        ("ansi", "SELECT 'it''s ?' FROM t WHERE x = ?", 1),
        ("ansi", "a = ?||?", 2),
        ("ansi", "SELECT `a?`, [b?] FROM t", 2),
        ("postgres", "SELECT $$ ? $$, $fn$ ? $fn$, ?", 1),
        ("postgres", "SELECT data ?? 'k', data ?& ARRAY[?]", 1),
        ("sqlite", "SELECT `a?`, [b?], \"c?\" FROM t WHERE d = ?", 1),
        ("mysql", "SELECT `a?`, 'x\\'?' FROM t WHERE b = ? # trailing ?", 1),
        ("mysql", "a = ?||?", 2),
        ("mssql", "SELECT [a?], [b]]?] FROM [t] WHERE c = ?", 1),
        ("oracle", "SELECT \"a?\" FROM t -- c = ?\nWHERE d = ? /* ? */", 1),
    ],
)
def test_quoted_text_is_skipped_per_dialect(dialect: str, sql: str, expected: int) -> None:
    info = ParameterValidator().extract_parameters(sql, get_dialect(dialect).scan_rules)

    assert len(info) == expected


def test_default_rules_treat_question_operators_as_markers() -> None:
    assert len(ParameterValidator().extract_parameters("data ?| ARRAY[?]")) == 2


def test_convert_for_oracle() -> None:
    converter = ParameterConverter()

    assert converter.convert_placeholders("x = ? AND y = ?", get_dialect("oracle")) == "x = :1 AND y = :2"


def test_convert_without_markers_is_identity() -> None:
    assert ParameterConverter().convert_placeholders("SELECT 1", get_dialect("postgres")) == "SELECT 1"
