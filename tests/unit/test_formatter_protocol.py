"""Tests that formatter implementations satisfy the IOutputFormatter protocol."""

from __future__ import annotations

import pytest

from medscribe.formatters.protocols import IOutputFormatter
from medscribe.formatters.text_formatter import TextFormatter


class TestTextFormatterSatisfiesProtocol:
    def test_isinstance_check(self) -> None:
        assert isinstance(TextFormatter(), IOutputFormatter)

    def test_has_content_type_property(self) -> None:
        assert hasattr(TextFormatter, "content_type")


class TestPDFFormatterSatisfiesProtocol:
    @pytest.fixture(autouse=True)
    def _skip_if_no_reportlab(self) -> None:
        pytest.importorskip("reportlab")

    def test_isinstance_check(self) -> None:
        from medscribe.formatters.pdf_formatter import PDFFormatter

        assert isinstance(PDFFormatter(), IOutputFormatter)

    def test_content_type(self) -> None:
        from medscribe.formatters.pdf_formatter import PDFFormatter

        assert PDFFormatter().content_type == "application/pdf"


class TestDocxFormatterSatisfiesProtocol:
    @pytest.fixture(autouse=True)
    def _skip_if_no_docx(self) -> None:
        pytest.importorskip("docx")

    def test_isinstance_check(self) -> None:
        from medscribe.formatters.docx_formatter import DocxFormatter

        assert isinstance(DocxFormatter(), IOutputFormatter)

    def test_content_type(self) -> None:
        from medscribe.formatters.docx_formatter import DocxFormatter

        assert DocxFormatter().content_type.endswith("wordprocessingml.document")


class TestLazyExports:
    def test_package_attributes(self) -> None:
        import medscribe.formatters as formatters

        assert formatters.PDFFormatter.__name__ == "PDFFormatter"
        assert formatters.DocxFormatter.__name__ == "DocxFormatter"

    def test_unknown_attribute(self) -> None:
        import medscribe.formatters as formatters

        with pytest.raises(AttributeError):
            formatters.NoSuchFormatter  # noqa: B018
