"""Configuration for statement rendering."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from sqlbind.dialects import Dialect

__all__ = ("DEFAULT_DIALECT", "BuilderConfig")

DEFAULT_DIALECT = "ansi"


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for builder rendering behavior.

    Attributes:
        dialect: Dialect name or instance used for quoting and placeholders.
        renumber_placeholders: Rewrite generic markers into the dialect's final marker form.
        inline_parameters: Substitute bound values into the SQL text as literals.
    """

    dialect: Union[str, "Dialect"] = DEFAULT_DIALECT
    renumber_placeholders: bool = True
    inline_parameters: bool = False
