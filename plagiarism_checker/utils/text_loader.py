"""Loading of plain-text documents from uploads and from disk."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.validation import FileValidator, handle_exceptions

logger = logging.getLogger(__name__)


def decode_uploaded_text(data: bytes, filename: str, max_size_mb: Optional[float] = None) -> str:
    """
    Decode an uploaded ``.txt`` payload.

    UTF-8 with or without a byte order mark is expected; undecodable
    bytes are replaced and a warning is logged.

    Raises:
        FileValidationError: wrong extension or payload too large
    """
    FileValidator.validate_filename(filename)
    FileValidator.validate_size(len(data), field="filename", max_size_mb=max_size_mb)

    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        logger.warning(f"{filename} is not valid UTF-8 ({e.reason} at byte {e.start}); replacing invalid bytes")
        return data.decode('utf-8-sig', errors='replace')


@handle_exceptions()
def load_text_file(file_path: Union[str, Path], max_size_mb: Optional[float] = None) -> str:
    """Read and decode a ``.txt`` document from disk."""
    path = FileValidator.validate_file_path(file_path, max_size_mb=max_size_mb)
    logger.debug(f"Loading document {path}", extra={'file_path': str(path)})
    return decode_uploaded_text(path.read_bytes(), path.name, max_size_mb=max_size_mb)
