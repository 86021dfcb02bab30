"""SQL literal rendering for inlined parameters.

Only a closed set of Python values has a literal form: ``str``, ``int``,
``float``, ``bool``, ``None`` and :class:`Raw`. Text is escaped by sqlglot for
the target dialect, ``Raw`` is emitted verbatim and is the caller's
responsibility.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union

from sqlglot import exp
from typing_extensions import TypeAlias, TypeGuard

from sqlbind.exceptions import LiteralRenderError

__all__ = ("LiteralValue", "Raw", "is_literal_value", "to_literal")


@dataclass(frozen=True)
class Raw:
    """Trusted SQL text that is written into a statement instead of being bound.

    Example:
        ``builder.for_update({"updated_at": Raw("CURRENT_TIMESTAMP")})``
    """

    sql: str

    def __str__(self) -> str:
        return self.sql


LiteralValue: TypeAlias = Union[str, int, float, bool, None, Raw]


def is_literal_value(value: Any) -> "TypeGuard[LiteralValue]":
    """Check whether ``value`` has a SQL literal form.

    Returns:
        True for members of the literal sum type.
    """
    if value is None or isinstance(value, (str, bool, int, Raw)):
        return True
    return isinstance(value, float) and math.isfinite(value)


def to_literal(value: Any, dialect: Optional[str] = None) -> str:
    """Render ``value`` as SQL literal text.

    Args:
        value: The value to render.
        dialect: sqlglot dialect name used for escaping.

    Raises:
        LiteralRenderError: If the value has no literal form.

    Returns:
        The literal text.
    """
    if isinstance(value, Raw):
        return value.sql
    if not is_literal_value(value):
        msg = f"Cannot render value of type {type(value).__name__} as a SQL literal: {value!r}"
        raise LiteralRenderError(msg)

    expression: exp.Expression
    if value is None:
        expression = exp.null()
    elif isinstance(value, bool):
        expression = exp.true() if value else exp.false()
    elif isinstance(value, (int, float)):
        expression = exp.Literal.number(value)
    else:
        expression = exp.Literal.string(value)
    return expression.sql(dialect=dialect)
