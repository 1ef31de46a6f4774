"""
Sycamore Backend — Documentation Service Unit Tests
=====================================================

What we test:
    ✅ Full file content returned unchanged (including CRLF line endings)
    ✅ Invalid UTF-8 bytes are replaced with U+FFFD, not treated as missing
    ✅ Missing file / directory path raise DocumentationNotFoundError
    ✅ Read failures classified into NOT_FOUND / UNREADABLE / UNKNOWN
"""

import pytest

from app.exceptions import DocumentationNotFoundError, DocumentationReadFailure
from app.services.documentation_service import DocumentationService, classify_read_error


class TestDocumentationRead:

    @pytest.mark.asyncio
    async def test_read_returns_full_content(self, tmp_path):
        doc = tmp_path / "API_DOCUMENTATION.md"
        doc.write_text("# API\n\n## GET /api/docs\nReturns this file.\n", encoding="utf-8")

        content = await DocumentationService(doc).read()

        assert content == "# API\n\n## GET /api/docs\nReturns this file.\n"

    @pytest.mark.asyncio
    async def test_read_preserves_line_endings(self, tmp_path):
        doc = tmp_path / "API_DOCUMENTATION.md"
        doc.write_bytes("Überblick\r\nzweite Zeile\r\n".encode("utf-8"))

        content = await DocumentationService(doc).read()

        assert content == "Überblick\r\nzweite Zeile\r\n"

    @pytest.mark.asyncio
    async def test_empty_file_is_served(self, tmp_path):
        doc = tmp_path / "API_DOCUMENTATION.md"
        doc.write_text("", encoding="utf-8")

        assert await DocumentationService(doc).read() == ""

    @pytest.mark.asyncio
    async def test_missing_file_raises_not_found(self, tmp_path):
        service = DocumentationService(tmp_path / "missing.md")

        with pytest.raises(DocumentationNotFoundError) as exc_info:
            await service.read()

        assert exc_info.value.reason is DocumentationReadFailure.NOT_FOUND
        assert exc_info.value.message == "Documentation not found."

    @pytest.mark.asyncio
    async def test_directory_path_raises_not_found(self, tmp_path):
        with pytest.raises(DocumentationNotFoundError) as exc_info:
            await DocumentationService(tmp_path).read()

        assert exc_info.value.reason is DocumentationReadFailure.NOT_FOUND

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_replaced(self, tmp_path):
        doc = tmp_path / "API_DOCUMENTATION.md"
        doc.write_bytes(b"caf\xe9 menu\n")

        content = await DocumentationService(doc).read()

        assert content == "caf\ufffd menu\n"

    @pytest.mark.asyncio
    async def test_relative_path_resolves_against_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "API_DOCUMENTATION.md").write_text("from cwd", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert await DocumentationService("API_DOCUMENTATION.md").read() == "from cwd"


class TestClassifyReadError:

    def test_permission_error_is_unreadable(self):
        assert classify_read_error(PermissionError("denied")) is DocumentationReadFailure.UNREADABLE

    def test_file_not_found_is_not_found(self):
        assert classify_read_error(FileNotFoundError()) is DocumentationReadFailure.NOT_FOUND

    def test_generic_os_error_is_unknown(self):
        assert classify_read_error(OSError("I/O error")) is DocumentationReadFailure.UNKNOWN
