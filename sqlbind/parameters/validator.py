"""Placeholder marker extraction.

Markers inside quoted strings, quoted identifiers and comments are ignored.
What counts as quoted text differs between databases, so each dialect carries
a :class:`ScanRules` describing its own quoting, and the scanner compiles one
pattern per rule set.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Optional

from sqlbind.parameters.types import GENERIC_PLACEHOLDER, ParameterInfo

__all__ = (
    "BACKSLASH_DOUBLE_QUOTED",
    "BACKSLASH_SINGLE_QUOTED",
    "BACKTICK_QUOTED",
    "BRACKET_QUOTED",
    "DOLLAR_QUOTED",
    "DOUBLE_QUOTED",
    "HASH_COMMENT",
    "SINGLE_QUOTED",
    "ParameterValidator",
    "ScanRules",
)

# Standard SQL: a quote character is escaped by doubling it.
SINGLE_QUOTED: Final = r"'(?:[^']|'')*'"
DOUBLE_QUOTED: Final = r'"(?:[^"]|"")*"'
# MySQL also accepts backslash escapes inside both quote styles.
BACKSLASH_SINGLE_QUOTED: Final = r"'(?:[^'\\]|\\.|'')*'"
BACKSLASH_DOUBLE_QUOTED: Final = r'"(?:[^"\\]|\\.|"")*"'
BACKTICK_QUOTED: Final = r"`(?:[^`]|``)*`"
BRACKET_QUOTED: Final = r"\[(?:[^\]]|\]\])*\]"
# $tag$...$tag$ or $$...$$, the tag is back-referenced
DOLLAR_QUOTED: Final = r"\$(?P<dollar_tag>\w*)\$[\s\S]*?\$(?P=dollar_tag)\$"
HASH_COMMENT: Final = r"#[^\r\n]*"

_LINE_COMMENT: Final = r"--[^\r\n]*"
_BLOCK_COMMENT: Final = r"/\*[\s\S]*?\*/"
# PostgreSQL JSONB operators ??, ?|, ?&
_QUESTION_OPERATORS: Final = r"\?\?|\?\||\?&"


@dataclass(frozen=True)
class ScanRules:
    """Which spans of SQL text can never hold a marker.

    Attributes:
        skipped: Regular expressions for quoted strings, quoted identifiers and
            dialect-specific comments. Standard ``--`` and ``/* */`` comments are
            always skipped.
        question_operators: Treat ``??``, ``?|`` and ``?&`` as operators rather
            than markers.
    """

    skipped: tuple[str, ...] = (SINGLE_QUOTED, DOUBLE_QUOTED)
    question_operators: bool = False


DEFAULT_SCAN_RULES: Final = ScanRules()


@lru_cache(maxsize=None)
def _compile(rules: ScanRules) -> "re.Pattern[str]":
    skipped = [*rules.skipped, _LINE_COMMENT, _BLOCK_COMMENT]
    if rules.question_operators:
        skipped.append(_QUESTION_OPERATORS)
    return re.compile("|".join(f"(?:{pattern})" for pattern in skipped) + r"|(?P<qmark>\?)")


class ParameterValidator:
    """Locates generic placeholder markers in assembled SQL."""

    __slots__ = ()

    def extract_parameters(self, sql: str, rules: Optional[ScanRules] = None) -> list[ParameterInfo]:
        """Extract placeholder information from SQL string.

        Args:
            sql: SQL string to analyze
            rules: Quoting rules of the target dialect, ANSI rules when omitted

        Returns:
            List of ParameterInfo objects, sorted by position
        """
        pattern = _compile(rules or DEFAULT_SCAN_RULES)
        parameters: list[ParameterInfo] = []
        for match in pattern.finditer(sql):
            if match.group("qmark") is None:
                continue
            parameters.append(
                ParameterInfo(
                    position=match.start("qmark"), ordinal=len(parameters), placeholder_text=GENERIC_PLACEHOLDER
                )
            )
        return parameters
