"""Parameter handling: marker scanning, renumbering and literal inlining."""

from sqlbind.parameters.converter import ParameterConverter, format_placeholder
from sqlbind.parameters.core import ParameterCollector, ParameterProcessor
from sqlbind.parameters.literals import LiteralValue, Raw, is_literal_value, to_literal
from sqlbind.parameters.types import GENERIC_PLACEHOLDER, ParameterInfo, ParameterStyle
from sqlbind.parameters.validator import ParameterValidator, ScanRules

__all__ = (
    "GENERIC_PLACEHOLDER",
    "LiteralValue",
    "ParameterCollector",
    "ParameterConverter",
    "ParameterInfo",
    "ParameterProcessor",
    "ParameterStyle",
    "ParameterValidator",
    "Raw",
    "ScanRules",
    "format_placeholder",
    "is_literal_value",
    "to_literal",
)
