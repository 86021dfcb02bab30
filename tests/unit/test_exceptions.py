from sqlbind.exceptions import (
    ExtraParameterError,
    ImproperConfigurationError,
    LiteralRenderError,
    MissingParameterError,
    ParameterError,
    SQLBindError,
    SQLBuilderError,
    UnresolvedPredicateError,
)


def test_exception_hierarchy() -> None:
    """Test exception classes inherit correctly."""
    assert issubclass(SQLBuilderError, SQLBindError)
    assert issubclass(UnresolvedPredicateError, SQLBuilderError)
    assert issubclass(MissingParameterError, ParameterError)
    assert issubclass(ExtraParameterError, ParameterError)
    assert issubclass(LiteralRenderError, ParameterError)
    assert issubclass(ParameterError, SQLBindError)
    assert issubclass(ImproperConfigurationError, SQLBindError)


def test_builder_error_default_message() -> None:
    assert str(SQLBuilderError()) == "Issues building SQL statement."


def test_parameter_error_includes_sql() -> None:
    exc = MissingParameterError("Missing value", "SELECT ?")

    assert exc.sql == "SELECT ?"
    assert "SQL: SELECT ?" in str(exc)
    assert repr(exc).startswith("MissingParameterError - Missing value")


def test_unresolved_predicate_message() -> None:
    exc = UnresolvedPredicateError("p7")

    assert exc.predicate_id == "p7"
    assert "'p7'" in str(exc)
