import pytest

from docproc.pdf.exceptions import RasterizationError
from docproc.pdf.pdfplumber_adapter import PdfPlumberAdapter

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestPdfPlumberAdapter:
    def test_rasterize_single_page(self, sample_pdf_bytes: bytes) -> None:
        pages = PdfPlumberAdapter(dpi=72).rasterize(sample_pdf_bytes)
        assert len(pages) == 1
        assert pages[0].startswith(_PNG_SIGNATURE)

    def test_rasterize_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        pages = PdfPlumberAdapter(dpi=72).rasterize(multi_page_pdf_bytes)
        assert len(pages) == 2

    def test_rasterize_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(RasterizationError):
            PdfPlumberAdapter().rasterize(b"not a pdf")
