from enum import Enum
from typing import Any, Final, Literal, Union

from typing_extensions import TypeAlias

__all__ = ("Empty", "EmptyEnum", "EmptyType", "LimitValue", "OrderDirection", "StatementParameters")


class EmptyEnum(Enum):
    """A sentinel enum used as placeholder."""

    EMPTY = 0


EmptyType: TypeAlias = Literal[EmptyEnum.EMPTY]
Empty: Final = EmptyEnum.EMPTY

OrderDirection: TypeAlias = Literal["ASC", "DESC", "asc", "desc"]
"""Sort direction accepted by ``Builder.order_by``."""

StatementParameters: TypeAlias = list[Any]
"""Positional parameter list aligned with the placeholder markers of a statement."""

LimitValue: TypeAlias = Union[int, EmptyType]
