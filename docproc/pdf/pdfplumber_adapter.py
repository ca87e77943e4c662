import io

import pdfplumber
from pdfplumber.page import Page

from docproc.pdf.base import BaseRasterizer
from docproc.pdf.exceptions import RasterizationError


class PdfPlumberAdapter(BaseRasterizer):
    """Renders PDF pages using pdfplumber's page images."""

    def __init__(self, dpi: int = 150) -> None:
        self._dpi = dpi

    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [self._render(page) for page in pdf.pages]
        except Exception as exc:
            raise RasterizationError(f"pdfplumber rasterization failed: {exc}") from exc

    def _render(self, page: Page) -> bytes:
        buffer = io.BytesIO()
        page.to_image(resolution=self._dpi).original.save(buffer, format="PNG")
        return buffer.getvalue()
