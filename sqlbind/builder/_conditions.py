"""Condition stream and WHERE rendering.

The stream is a flat, ordered list of tokens that encodes a boolean expression.
It is rendered left to right exactly as appended; grouping balance is not
checked, so unbalanced groups produce invalid SQL.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Optional

from sqlbind.exceptions import SQLBuilderError
from sqlbind.parameters.literals import Raw

if TYPE_CHECKING:
    from sqlbind.builder._predicates import PredicateRegistry
    from sqlbind.parameters.core import ParameterCollector

__all__ = ("ConditionStream", "ConditionToken", "TokenType", "check_raw_values")


class TokenType(Enum):
    PREDICATE = auto()
    RAW = auto()
    GROUP_BEGIN = auto()
    GROUP_END = auto()
    AND = auto()
    OR = auto()


@dataclass(frozen=True)
class ConditionToken:
    """One structural token of the stream."""

    type: TokenType
    predicate_id: Optional[str] = None
    fragment: Optional[str] = None
    values: tuple[Any, ...] = ()


_LITERAL_TOKENS = {
    TokenType.GROUP_BEGIN: "(",
    TokenType.GROUP_END: ")",
    TokenType.AND: " AND ",
    TokenType.OR: " OR ",
}

# tokens after which an expression has just been completed
_OPERAND_ENDINGS = frozenset({TokenType.PREDICATE, TokenType.RAW, TokenType.GROUP_END})


def check_raw_values(values: tuple[Any, ...]) -> None:
    """Refuse ``Raw`` values for a raw fragment; SQL text belongs in the fragment itself.

    Raises:
        SQLBuilderError: If a value is a ``Raw`` SQL fragment.
    """
    for value in values:
        if isinstance(value, Raw):
            msg = f"Raw SQL {value.sql!r} cannot be bound to a raw fragment marker; write it into the fragment"
            raise SQLBuilderError(msg)


class ConditionStream:
    """Ordered sequence of condition tokens."""

    __slots__ = ("_tokens",)

    def __init__(self) -> None:
        self._tokens: list[ConditionToken] = []

    def add_predicate(self, predicate_id: str) -> None:
        self._tokens.append(ConditionToken(TokenType.PREDICATE, predicate_id=predicate_id))

    def add_raw(self, fragment: str, *values: Any) -> None:
        """Append caller-supplied SQL.

        The fragment carries its own markers; ``values`` are bound to them in order.
        SQL text belongs in the fragment itself, so ``Raw`` values are refused.

        Raises:
            SQLBuilderError: If a value is a ``Raw`` SQL fragment.
        """
        check_raw_values(values)
        self._tokens.append(ConditionToken(TokenType.RAW, fragment=fragment, values=values))

    def begin_group(self) -> None:
        self._tokens.append(ConditionToken(TokenType.GROUP_BEGIN))

    def end_group(self) -> None:
        self._tokens.append(ConditionToken(TokenType.GROUP_END))

    def and_(self) -> None:
        self._tokens.append(ConditionToken(TokenType.AND))

    def or_(self) -> None:
        self._tokens.append(ConditionToken(TokenType.OR))

    def needs_connective(self) -> bool:
        """Whether the last token completes an operand, so a new one must be joined by AND/OR."""
        return bool(self._tokens) and self._tokens[-1].type in _OPERAND_ENDINGS

    def render(self, registry: "PredicateRegistry", collector: "ParameterCollector") -> str:
        """Render the WHERE body (without the ``WHERE`` keyword).

        Predicate values and raw fragment values are appended to ``collector``
        in textual order.

        Raises:
            UnresolvedPredicateError: If a token references an unknown predicate.

        Returns:
            The rendered condition text.
        """
        parts: list[str] = []
        for token in self._tokens:
            if token.type is TokenType.PREDICATE:
                fragment, values = registry.render(token.predicate_id, collector.dialect)  # type: ignore[arg-type]
                parts.append(fragment)
                collector.extend(values)
            elif token.type is TokenType.RAW:
                parts.append(token.fragment)  # type: ignore[arg-type]
                collector.extend(token.values)
            else:
                parts.append(_LITERAL_TOKENS[token.type])
        return "".join(parts)

    def __iter__(self) -> Iterator[ConditionToken]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)
