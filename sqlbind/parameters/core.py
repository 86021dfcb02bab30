"""Parameter collection and output formatting."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional

from sqlbind.exceptions import ExtraParameterError, MissingParameterError
from sqlbind.parameters.converter import ParameterConverter
from sqlbind.parameters.literals import Raw
from sqlbind.parameters.types import ParameterInfo
from sqlbind.parameters.validator import ParameterValidator

if TYPE_CHECKING:
    from sqlbind.dialects import Dialect

__all__ = ("ParameterCollector", "ParameterProcessor")


class ParameterCollector:
    """Collects bound values for a single render.

    Every call to :meth:`bind` emits exactly one marker and appends exactly one
    value, which keeps the parameter list aligned with the SQL text. ``Raw``
    values are written verbatim and never bound.
    """

    __slots__ = ("dialect", "parameters")

    def __init__(self, dialect: "Dialect") -> None:
        self.dialect = dialect
        self.parameters: list[Any] = []

    def bind(self, value: Any) -> str:
        if isinstance(value, Raw):
            return value.sql
        self.parameters.append(value)
        return self.dialect.placeholder()

    def extend(self, values: Iterable[Any]) -> None:
        self.parameters.extend(values)

    def __len__(self) -> int:
        return len(self.parameters)


class ParameterProcessor:
    """Turns assembled SQL and its values into the final output.

    Two modes are supported: parameterized output returns the SQL with markers
    (renumbered when requested) and the values; literal inlining substitutes each
    value into the SQL text and returns no separate values.
    """

    __slots__ = ("converter", "validator")

    def __init__(self) -> None:
        self.validator = ParameterValidator()
        self.converter = ParameterConverter(self.validator)

    def process(
        self, sql: str, parameters: list[Any], dialect: "Dialect", *, renumber: bool = True, inline: bool = False
    ) -> tuple[str, list[Any]]:
        """Validate marker alignment and format the statement.

        Args:
            sql: SQL text containing generic markers.
            parameters: Values in marker order.
            dialect: Target dialect.
            renumber: Rewrite markers into the dialect's final form.
            inline: Substitute values as literals instead of returning them.

        Returns:
            The final SQL and the values still to be bound.
        """
        parameter_info = self.validator.extract_parameters(sql, dialect.scan_rules)
        self._check_alignment(sql, parameter_info, parameters)
        if inline:
            return self.inline_parameters(sql, parameters, dialect, parameter_info), []
        if renumber:
            sql = self.converter.convert_placeholders(sql, dialect, parameter_info)
        return sql, list(parameters)

    def inline_parameters(
        self,
        sql: str,
        parameters: list[Any],
        dialect: "Dialect",
        parameter_info: Optional[list[ParameterInfo]] = None,
    ) -> str:
        """Replace each marker, left to right, with its value as literal text.

        Returns:
            SQL with no remaining markers.
        """
        if parameter_info is None:
            parameter_info = self.validator.extract_parameters(sql, dialect.scan_rules)
        self._check_alignment(sql, parameter_info, parameters)

        result_parts = []
        current_pos = 0
        for param, value in zip(parameter_info, parameters):
            result_parts.append(sql[current_pos : param.position])
            result_parts.append(dialect.render_literal(value))
            current_pos = param.position + len(param.placeholder_text)
        result_parts.append(sql[current_pos:])
        return "".join(result_parts)

    @staticmethod
    def _check_alignment(sql: str, parameter_info: list[ParameterInfo], parameters: list[Any]) -> None:
        if len(parameter_info) > len(parameters):
            msg = f"SQL has {len(parameter_info)} placeholders but only {len(parameters)} values were bound"
            raise MissingParameterError(msg, sql)
        if len(parameter_info) < len(parameters):
            msg = f"{len(parameters)} values were bound but SQL has only {len(parameter_info)} placeholders"
            raise ExtraParameterError(msg, sql)
