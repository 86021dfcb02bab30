"""Placeholder renumbering.

Clauses emit the generic ``?`` marker while a statement is assembled. Once the
text is complete, each marker is rewritten, left to right, into the final form
the target dialect expects.
"""

import logging
from typing import TYPE_CHECKING, Optional

from sqlbind.exceptions import ImproperConfigurationError
from sqlbind.parameters.types import ParameterInfo, ParameterStyle
from sqlbind.parameters.validator import ParameterValidator
from sqlbind.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from sqlbind.dialects import Dialect

__all__ = ("ParameterConverter", "format_placeholder")

logger = get_logger("parameters.converter")


def format_placeholder(style: ParameterStyle, ordinal: int) -> str:
    """Render the marker for the parameter at ``ordinal`` (zero based).

    Raises:
        ImproperConfigurationError: If the style has no positional form.

    Returns:
        The marker text.
    """
    if style == ParameterStyle.QMARK:
        return "?"
    if style == ParameterStyle.NUMERIC:
        return f"${ordinal + 1}"
    if style == ParameterStyle.POSITIONAL_COLON:
        return f":{ordinal + 1}"
    if style == ParameterStyle.POSITIONAL_PYFORMAT:
        return "%s"
    msg = f"Unsupported parameter style: {style}"
    raise ImproperConfigurationError(msg)


class ParameterConverter:
    """Rewrites generic markers into a dialect's marker form."""

    __slots__ = ("validator",)

    def __init__(self, validator: Optional[ParameterValidator] = None) -> None:
        self.validator = validator or ParameterValidator()

    def convert_placeholders(
        self, sql: str, dialect: "Dialect", parameter_info: Optional[list[ParameterInfo]] = None
    ) -> str:
        """Convert SQL placeholders to the dialect's marker form.

        Args:
            sql: The SQL string with generic placeholders
            dialect: The dialect that renders each final marker
            parameter_info: Optional list of parameter info (will be extracted if not provided)

        Returns:
            SQL string with converted placeholders
        """
        if parameter_info is None:
            parameter_info = self.validator.extract_parameters(sql, dialect.scan_rules)

        if not parameter_info:
            return sql

        result_parts = []
        current_pos = 0
        for param in parameter_info:
            result_parts.append(sql[current_pos : param.position])
            result_parts.append(dialect.render_placeholder(param.ordinal))
            current_pos = param.position + len(param.placeholder_text)
        result_parts.append(sql[current_pos:])

        log_with_context(
            logger,
            logging.DEBUG,
            "Renumbered placeholders",
            dialect=dialect.name,
            parameter_style=str(dialect.parameter_style),
            parameter_count=len(parameter_info),
        )
        return "".join(result_parts)
