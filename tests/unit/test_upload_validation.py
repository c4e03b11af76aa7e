import io

import pytest

from app.api.exceptions import InvalidUploadError
from app.api.upload_validation import DOCX_MEDIA_TYPE, check_file_type, read_limited
from app.extraction.exceptions import UnsupportedFileTypeError


class TestCheckFileType:
    @pytest.mark.parametrize(
        ("filename", "media_type"),
        [
            ("cv.pdf", "application/pdf"),
            ("CV.PDF", "application/pdf"),
            ("cv.doc", "application/msword"),
            (
                "cv.docx",
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            ),
        ],
    )
    def test_accepts_supported_uploads(self, filename: str, media_type: str) -> None:
        check_file_type(filename, media_type)

    @pytest.mark.parametrize("filename", ["resume.txt", "resume", "resume.pdf.exe"])
    def test_rejects_unsupported_extension(self, filename: str) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            check_file_type(filename, "application/pdf")

    def test_rejects_unsupported_media_type(self) -> None:
        with pytest.raises(InvalidUploadError, match="text/plain"):
            check_file_type("cv.pdf", "text/plain")

    @pytest.mark.parametrize(
        ("filename", "media_type"),
        [
            ("resume.pdf", "application/msword"),
            ("resume.docx", "application/pdf"),
            ("resume.doc", DOCX_MEDIA_TYPE),
        ],
    )
    def test_rejects_media_type_of_another_extension(self, filename: str, media_type: str) -> None:
        with pytest.raises(InvalidUploadError, match="does not match"):
            check_file_type(filename, media_type)

    def test_ignores_media_type_parameters(self) -> None:
        check_file_type("cv.pdf", "application/pdf; charset=binary")

    def test_rejects_missing_media_type(self) -> None:
        with pytest.raises(InvalidUploadError):
            check_file_type("cv.pdf", None)


class TestReadLimited:
    def test_reads_whole_stream(self) -> None:
        data = b"a" * 200_000
        assert read_limited(io.BytesIO(data), 200_000) == data

    def test_rejects_stream_over_limit(self) -> None:
        with pytest.raises(InvalidUploadError, match="too large"):
            read_limited(io.BytesIO(b"a" * 101), 100)
