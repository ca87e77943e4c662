from abc import ABC, abstractmethod

from docproc.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for image analyzers used by the extraction workflow."""

    @abstractmethod
    def analyze(self, image_bytes: bytes, mime_type: str) -> AnalysisResult:
        """Describe one image: summary, literal text and free-form metadata.

        Args:
            image_bytes: Raw image content.
            mime_type: MIME type of the image, e.g. ``image/png``.

        Returns:
            AnalysisResult, best-effort even when the response is malformed.

        Raises:
            UpstreamError: when the endpoint fails or retries are exhausted.
        """

    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        """Return only the literal text of the image (summary if none found)."""
        return self.analyze(image_bytes, mime_type).text
