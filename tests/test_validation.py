import pytest

from plagiarism_checker.core.validation import (
    FileValidationError,
    FileValidator,
    ParameterValidationError,
    ParameterValidator,
    ValidationError,
    handle_exceptions,
    validate_inputs,
)


def test_positive_integer_coercion():
    assert ParameterValidator.validate_positive_integer("7", "n") == 7
    assert ParameterValidator.validate_positive_integer(5.0, "n") == 5


def test_positive_integer_bounds():
    with pytest.raises(ParameterValidationError) as excinfo:
        ParameterValidator.validate_positive_integer(0, "min_match_length")
    assert excinfo.value.field == "min_match_length"
    assert excinfo.value.value == 0

    with pytest.raises(ParameterValidationError):
        ParameterValidator.validate_positive_integer(11, "n", max_value=10)


def test_validate_text():
    assert ParameterValidator.validate_text("", "doc") == ""
    with pytest.raises(ParameterValidationError):
        ParameterValidator.validate_text(["a"], "doc")
    with pytest.raises(ParameterValidationError):
        ParameterValidator.validate_text("abcdef", "doc", max_length=5)


def test_validate_filename():
    assert FileValidator.validate_filename("Essay.TXT") == "Essay.TXT"
    with pytest.raises(FileValidationError):
        FileValidator.validate_filename("")
    with pytest.raises(FileValidationError):
        FileValidator.validate_filename("x" * 300 + ".txt")


def test_errors_are_value_errors():
    assert issubclass(ValidationError, ValueError)
    assert issubclass(FileValidationError, ValidationError)


def test_validate_inputs_wraps_unexpected_errors():
    @validate_inputs(count=lambda x: int(x))
    def repeat(word, count=1):
        return word * count

    assert repeat("ab", count="3") == "ababab"
    with pytest.raises(ParameterValidationError) as excinfo:
        repeat("ab", count="three")
    assert excinfo.value.field == "count"


def test_handle_exceptions_logs_and_reraises(caplog):
    @handle_exceptions()
    def broken():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        broken()
    assert "Unhandled exception in broken: boom" in caplog.text


def test_handle_exceptions_default_return():
    @handle_exceptions(default_return=[])
    def broken():
        raise RuntimeError("boom")

    assert broken() == []


def test_handle_exceptions_passes_validation_errors_through():
    @handle_exceptions(default_return=[])
    def invalid():
        raise ParameterValidationError("bad", field="x")

    with pytest.raises(ParameterValidationError):
        invalid()
