from abc import ABC, abstractmethod


class BaseRasterizer(ABC):
    """Contract for all PDF-to-image adapters."""

    @abstractmethod
    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        """Render every page of a PDF to a PNG image.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PNG bytes per page, in page order. May be empty.

        Raises:
            RasterizationError: if conversion fails for any reason.
        """
