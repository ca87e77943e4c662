from docproc.config.settings import Settings
from docproc.pdf.base import BaseRasterizer
from docproc.pdf.imagemagick_adapter import ImageMagickAdapter
from docproc.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docproc.pdf.pymupdf_adapter import PyMuPdfAdapter


class RasterizerFactory:
    """Creates the correct PDF rasterizer based on settings."""

    ENGINES = ("imagemagick", "pymupdf", "pdfplumber")

    @classmethod
    def create(cls, settings: Settings) -> BaseRasterizer:
        engine = settings.pdf_engine.lower()
        if engine == "imagemagick":
            return ImageMagickAdapter(
                command=settings.imagemagick_command,
                timeout_seconds=settings.rasterizer_timeout_seconds,
            )
        if engine == "pymupdf":
            return PyMuPdfAdapter(dpi=settings.rasterizer_dpi)
        if engine == "pdfplumber":
            return PdfPlumberAdapter(dpi=settings.rasterizer_dpi)
        raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}")
