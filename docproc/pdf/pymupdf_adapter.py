import pymupdf

from docproc.pdf.base import BaseRasterizer
from docproc.pdf.exceptions import RasterizationError


class PyMuPdfAdapter(BaseRasterizer):
    """Renders PDF pages in-process using PyMuPDF."""

    def __init__(self, dpi: int = 150) -> None:
        self._dpi = dpi

    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_pixmap(dpi=self._dpi).tobytes("png") for page in doc]
        except Exception as exc:
            raise RasterizationError(f"pymupdf rasterization failed: {exc}") from exc
