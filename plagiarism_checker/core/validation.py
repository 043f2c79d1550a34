"""
Input validation and error handling for the plagiarism checker.

This module provides the exception hierarchy raised on invalid input,
small validation helpers, and decorators that apply them before any
matching work begins.
"""

import inspect
import logging
from functools import wraps
from pathlib import Path
from typing import Any, Optional, Union


# Custom Exception Classes
class ValidationError(ValueError):
    """Base class for validation errors."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)


class FileValidationError(ValidationError):
    """Exception raised for file-related validation errors."""
    pass


class ParameterValidationError(ValidationError):
    """Exception raised for invalid arguments (non-text documents, bad lengths, unknown algorithms)."""
    pass


# Validation Utilities
class FileValidator:
    """Validation for uploaded and on-disk text documents."""

    ALLOWED_TEXT_EXTENSIONS = {'.txt'}
    MAX_FILE_SIZE_MB = 5
    MAX_FILENAME_LENGTH = 255

    @staticmethod
    def validate_filename(filename: str,
                          allowed_extensions: Optional[set] = None) -> str:
        """
        Check an uploaded file name.

        Args:
            filename: Name reported by the uploader
            allowed_extensions: Set of allowed file extensions

        Returns:
            The file name

        Raises:
            FileValidationError: If validation fails
        """
        if not filename:
            raise FileValidationError("File name cannot be empty", field="filename", value=filename)

        if len(filename) > FileValidator.MAX_FILENAME_LENGTH:
            raise FileValidationError(
                f"File name too long: {len(filename)} characters (max: {FileValidator.MAX_FILENAME_LENGTH})",
                field="filename",
                value=filename
            )

        allowed = allowed_extensions or FileValidator.ALLOWED_TEXT_EXTENSIONS
        suffix = Path(filename).suffix.lower()
        if suffix not in allowed:
            raise FileValidationError(
                f"File extension not allowed. Allowed: {sorted(allowed)}, got: {suffix or '(none)'}",
                field="filename",
                value=filename
            )

        return filename

    @staticmethod
    def validate_size(size_bytes: int, field: str = "file", max_size_mb: Optional[float] = None) -> int:
        """Reject payloads larger than the configured limit."""
        limit = FileValidator.MAX_FILE_SIZE_MB if max_size_mb is None else max_size_mb
        size_mb = size_bytes / (1024 * 1024)
        if size_mb > limit:
            raise FileValidationError(
                f"File too large: {size_mb:.1f}MB (max: {limit}MB)",
                field=field,
                value=size_bytes
            )
        return size_bytes

    @staticmethod
    def validate_file_path(file_path: Union[str, Path],
                           max_size_mb: Optional[float] = None) -> Path:
        """
        Validate a text file on disk.

        Args:
            file_path: Path to the file
            max_size_mb: Maximum file size in MB

        Returns:
            Path object

        Raises:
            FileValidationError: If validation fails
        """
        if not file_path:
            raise FileValidationError("File path cannot be empty", field="file_path", value=file_path)

        path = Path(file_path)

        if not path.exists():
            raise FileValidationError(f"File does not exist: {file_path}", field="file_path", value=file_path)

        if not path.is_file():
            raise FileValidationError(f"Path is not a file: {file_path}", field="file_path", value=file_path)

        FileValidator.validate_filename(path.name)
        FileValidator.validate_size(path.stat().st_size, field="file_path", max_size_mb=max_size_mb)

        return path


class ParameterValidator:
    """Parameter validation utilities."""

    @staticmethod
    def validate_positive_integer(value: Any, field: str, min_value: int = 1, max_value: Optional[int] = None) -> int:
        """Validate positive integer parameter."""
        if isinstance(value, bool):
            raise ParameterValidationError(
                f"{field} must be an integer, got bool",
                field=field,
                value=value
            )

        if isinstance(value, float) and not value.is_integer():
            raise ParameterValidationError(
                f"{field} must be a whole number, got {value}",
                field=field,
                value=value
            )

        if not isinstance(value, int):
            try:
                value = int(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be an integer, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        if value < min_value:
            raise ParameterValidationError(
                f"{field} must be >= {min_value}, got {value}",
                field=field,
                value=value
            )

        if max_value is not None and value > max_value:
            raise ParameterValidationError(
                f"{field} must be <= {max_value}, got {value}",
                field=field,
                value=value
            )

        return value

    @staticmethod
    def validate_text(value: Any, field: str, max_length: Optional[int] = None) -> str:
        """Validate a document body. Empty strings are legal."""
        if not isinstance(value, str):
            raise ParameterValidationError(
                f"{field} must be a string, got {type(value).__name__}",
                field=field,
                value=value
            )

        if max_length is not None and len(value) > max_length:
            raise ParameterValidationError(
                f"{field} must be at most {max_length} characters, got {len(value)}",
                field=field,
                value=len(value)
            )

        return value


# Decorators for validation
def validate_inputs(**validators):
    """
    Decorator to validate function inputs.

    Args:
        **validators: Dict mapping parameter names to validation functions
    """
    def decorator(func):
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name, validator in validators.items():
                if param_name in bound_args.arguments:
                    value = bound_args.arguments[param_name]
                    try:
                        bound_args.arguments[param_name] = validator(value)
                    except ValidationError:
                        raise
                    except Exception as e:
                        raise ParameterValidationError(
                            f"Validation failed for {param_name}: {str(e)}",
                            field=param_name,
                            value=value
                        ) from e

            return func(*bound_args.args, **bound_args.kwargs)
        return wrapper
    return decorator


def handle_exceptions(default_return=None, reraise_types=None):
    """
    Decorator to log unexpected exceptions.

    Args:
        default_return: Value to return instead of re-raising, if not None
        reraise_types: List of exception types re-raised without logging
    """
    if reraise_types is None:
        reraise_types = [ValidationError]

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except tuple(reraise_types):
                raise
            except Exception as e:
                logger = logging.getLogger(func.__module__)
                logger.error(f"Unhandled exception in {func.__name__}: {str(e)}", exc_info=True)

                if default_return is not None:
                    return default_return
                raise
        return wrapper
    return decorator
