"""Core parameter types used throughout sqlbind."""

from enum import Enum
from typing import Final

__all__ = ("GENERIC_PLACEHOLDER", "ParameterInfo", "ParameterStyle")

GENERIC_PLACEHOLDER: Final = "?"
"""Marker every clause emits before the renumbering pass runs."""


class ParameterStyle(str, Enum):
    """Positional parameter style enumeration with string values."""

    QMARK = "qmark"
    NUMERIC = "numeric"
    POSITIONAL_COLON = "positional_colon"
    POSITIONAL_PYFORMAT = "pyformat_positional"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


class ParameterInfo:
    """Immutable placeholder information."""

    __slots__ = ("ordinal", "placeholder_text", "position")

    def __init__(self, position: int, ordinal: int, placeholder_text: str) -> None:
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    def __repr__(self) -> str:
        """String representation compatible with dataclass.__repr__."""
        return f"{type(self).__name__}(ordinal={self.ordinal!r}, placeholder_text={self.placeholder_text!r}, position={self.position!r})"
