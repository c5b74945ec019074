import pytest
from sql2enums.errors import (
    SQL2EnumsError,
    SQLReadError,
    CodeGenerationError,
    ConfigurationError,
)


def test_base_error():
    """Test the base SQL2EnumsError class."""
    error = SQL2EnumsError("Base error message")
    assert str(error) == "Base error message"
    assert isinstance(error, Exception)


def test_read_error_basic():
    error = SQLReadError("read")
    assert str(error) == "read failed"
    assert isinstance(error, SQL2EnumsError)


def test_read_error_with_cause_and_file():
    cause = OSError("permission denied")
    error = SQLReadError("open", cause, file_name="schema.sql")
    assert str(error) == "open failed on file 'schema.sql': permission denied"
    assert error.operation == "open"
    assert error.cause is cause


def test_code_generation_error_basic():
    error = CodeGenerationError("Failed to render")
    assert str(error) == "Failed to render"


def test_code_generation_error_with_details():
    error = CodeGenerationError("Enum value normalizes to an empty identifier", type_name="Mood", value="")
    assert str(error) == "Enum value normalizes to an empty identifier for type 'Mood' with value ''"
    assert error.type_name == "Mood"
    assert error.value == ""


def test_configuration_error_is_base_error():
    with pytest.raises(SQL2EnumsError):
        raise ConfigurationError("bad option")
