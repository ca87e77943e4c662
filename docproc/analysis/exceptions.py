class AnalyzerError(Exception):
    """Raised when image analysis fails."""


class UpstreamError(AnalyzerError):
    """Raised when the analyzer endpoint fails or exhausts its retries.

    ``status_code`` is the HTTP status of the failing response, or ``None``
    when the failure happened at the transport level.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.status_code is None or self.status_code >= 500
