"""Predicate definitions and the per-builder predicate registry.

A predicate is one comparison (field, operator, value). The condition stream
only ever stores predicate ids; the registry resolves them when a WHERE clause
is rendered.
"""

from collections.abc import Iterator, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Optional, Union

from sqlbind.exceptions import SQLBuilderError, UnresolvedPredicateError
from sqlbind.parameters.core import ParameterCollector

if TYPE_CHECKING:
    from sqlbind.dialects import Dialect

__all__ = ("Operator", "Predicate", "PredicateRegistry", "parse_operator")


class Operator(str, Enum):
    """Comparison operators a predicate can use."""

    EQ = "="
    NE = "!="
    LT_GT = "<>"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IN = "IN"
    NOT_IN = "NOT IN"
    BETWEEN = "BETWEEN"
    NOT_BETWEEN = "NOT BETWEEN"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"

    def __str__(self) -> str:
        return self.value


NULL_OPERATORS: Final = frozenset({Operator.IS_NULL, Operator.IS_NOT_NULL})
MEMBERSHIP_OPERATORS: Final = frozenset({Operator.IN, Operator.NOT_IN})
RANGE_OPERATORS: Final = frozenset({Operator.BETWEEN, Operator.NOT_BETWEEN})


def parse_operator(operator: Union[str, Operator]) -> Operator:
    """Normalize an operator spelling such as ``"not  in"`` to :class:`Operator`.

    Raises:
        SQLBuilderError: If the operator is not supported.

    Returns:
        The operator member.
    """
    if isinstance(operator, Operator):
        return operator
    try:
        return Operator(" ".join(operator.upper().split()))
    except ValueError:
        msg = f"Unsupported operator: {operator!r}"
        raise SQLBuilderError(msg) from None


@dataclass(frozen=True)
class Predicate:
    """One atomic comparison usable inside a WHERE clause."""

    field: str
    operator: Operator
    value: Any = None

    def __post_init__(self) -> None:
        if not self.field:
            msg = "Predicate field must not be empty"
            raise SQLBuilderError(msg)
        if self.operator in MEMBERSHIP_OPERATORS:
            if isinstance(self.value, (str, bytes)) or not isinstance(self.value, (Sequence, Set)):
                msg = f"{self.operator} expects a collection of values, got {type(self.value).__name__}"
                raise SQLBuilderError(msg)
            object.__setattr__(self, "value", tuple(self.value))
        elif self.operator in RANGE_OPERATORS:
            if isinstance(self.value, (str, bytes)) or not isinstance(self.value, Sequence) or len(self.value) != 2:
                msg = f"{self.operator} expects a (low, high) pair"
                raise SQLBuilderError(msg)
            object.__setattr__(self, "value", tuple(self.value))

    def render(self, dialect: "Dialect") -> tuple[str, list[Any]]:
        """Render the predicate for ``dialect``.

        Returns:
            The SQL fragment and the values its markers bind, in order.
        """
        collector = ParameterCollector(dialect)
        column = dialect.quote_identifier(self.field)
        operator = self.operator

        if operator in NULL_OPERATORS:
            return f"{column} {operator.value}", []
        if operator in MEMBERSHIP_OPERATORS:
            if not self.value:
                # empty IN matches nothing, empty NOT IN matches everything
                return ("1 = 0" if operator is Operator.IN else "1 = 1"), []
            markers = ", ".join(collector.bind(item) for item in self.value)
            return f"{column} {operator.value} ({markers})", collector.parameters
        if operator in RANGE_OPERATORS:
            low, high = self.value
            return f"{column} {operator.value} {collector.bind(low)} AND {collector.bind(high)}", collector.parameters
        return f"{column} {operator.value} {collector.bind(self.value)}", collector.parameters


class PredicateRegistry:
    """Predicates defined for one builder, keyed by id."""

    __slots__ = ("_counter", "_predicates")

    def __init__(self) -> None:
        self._predicates: dict[str, Predicate] = {}
        self._counter = 0

    def define(
        self, field: str, operator: Union[str, Operator], value: Any = None, *, predicate_id: Optional[str] = None
    ) -> str:
        """Register a predicate and return its id.

        An existing id is overwritten.

        Args:
            field: Column the predicate compares.
            operator: Comparison operator.
            value: Compared value; a collection for ``IN``, a pair for ``BETWEEN``, ignored for ``IS NULL``.
            predicate_id: Explicit id; generated when omitted.

        Returns:
            The predicate id.
        """
        return self.add(Predicate(field, parse_operator(operator), value), predicate_id)

    def add(self, predicate: Predicate, predicate_id: Optional[str] = None) -> str:
        if predicate_id is None:
            predicate_id = self._next_id()
        self._predicates[predicate_id] = predicate
        return predicate_id

    def get(self, predicate_id: str) -> Predicate:
        """Look up a predicate.

        Raises:
            UnresolvedPredicateError: If the id was never defined.

        Returns:
            The predicate.
        """
        try:
            return self._predicates[predicate_id]
        except KeyError:
            raise UnresolvedPredicateError(predicate_id) from None

    def render(self, predicate_id: str, dialect: "Dialect") -> tuple[str, list[Any]]:
        return self.get(predicate_id).render(dialect)

    def clear(self) -> None:
        self._predicates.clear()
        self._counter = 0

    def _next_id(self) -> str:
        while True:
            predicate_id = f"p{self._counter}"
            self._counter += 1
            if predicate_id not in self._predicates:
                return predicate_id

    def __contains__(self, predicate_id: object) -> bool:
        return predicate_id in self._predicates

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)
