from pathlib import Path
from typing import BinaryIO

from app.api.exceptions import InvalidUploadError
from app.extraction.exceptions import UnsupportedFileTypeError
from app.extraction.text_extractor import SUPPORTED_EXTENSIONS, normalize_extension

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# extension -> media types a client may declare for it
MEDIA_TYPES_BY_EXTENSION: dict[str, frozenset[str]] = {
    "pdf": frozenset({"application/pdf"}),
    "doc": frozenset({"application/msword"}),
    "docx": frozenset({DOCX_MEDIA_TYPE}),
}

_READ_CHUNK_BYTES = 64 * 1024


def check_file_type(filename: str, media_type: str | None) -> None:
    """Reject uploads whose extension is not pdf/doc/docx or whose media type does not match it.

    Raises:
        UnsupportedFileTypeError: if the filename extension is not supported.
        InvalidUploadError: if the declared media type does not belong to the extension.
    """
    extension = normalize_extension(Path(filename).suffix)
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileTypeError(extension or "(none)")
    declared = (media_type or "").split(";")[0].strip().lower()
    if declared not in MEDIA_TYPES_BY_EXTENSION.get(extension, frozenset()):
        raise InvalidUploadError(
            f"Media type '{declared}' does not match a .{extension} file"
        )


def read_limited(stream: BinaryIO, max_bytes: int) -> bytes:
    """Read a whole upload stream, failing once it grows past max_bytes.

    Raises:
        InvalidUploadError: if the stream holds more than max_bytes.
    """
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = stream.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise InvalidUploadError(
                f"File too large. Maximum size is {max_bytes} bytes"
            )
        chunks.append(chunk)
    return b"".join(chunks)
