"""Vision-model image analyzer with bounded retry."""

import base64
import time

from docproc.analysis.base import BaseAnalyzer
from docproc.analysis.client_base import BaseAnalyzerClient
from docproc.analysis.exceptions import UpstreamError
from docproc.analysis.models import AnalysisResult
from docproc.analysis.parser import parse_analysis
from docproc.analysis.prompt_loader import load_prompt
from docproc.logging.logger import Log


def image_data_uri(image_bytes: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class Analyzer(BaseAnalyzer):
    """Sends one image per request to a multimodal model and parses the reply.

    Transport errors and 5xx responses are retried up to ``max_retries`` times
    with linear backoff (``backoff_seconds`` × attempt number). Any other
    failure status is final after the first attempt.
    """

    def __init__(
        self,
        *,
        client: BaseAnalyzerClient,
        model: str,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
        max_tokens: int = 4000,
        prompt: str | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_retries = max(0, max_retries)
        self._backoff_seconds = backoff_seconds
        self._max_tokens = max_tokens
        self._prompt = prompt if prompt is not None else load_prompt()

    def analyze(self, image_bytes: bytes, mime_type: str) -> AnalysisResult:
        raw = self._call_with_retry(image_data_uri(image_bytes, mime_type))
        Log.debug(f"Analyzer raw response:\n{raw}")
        return parse_analysis(raw)

    def _call_with_retry(self, image_url: str) -> str:
        attempts = self._max_retries + 1
        attempt = 0
        while True:
            try:
                return self._client.create_chat_completion(
                    model=self._model,
                    prompt=self._prompt,
                    image_url=image_url,
                    max_tokens=self._max_tokens,
                )
            except UpstreamError as exc:
                if not exc.retryable:
                    raise
                attempt += 1
                Log.warning(
                    f"Analyzer attempt {attempt}/{attempts} failed: {exc}",
                    status_code=exc.status_code,
                )
                if attempt >= attempts:
                    raise UpstreamError(
                        f"Analyzer failed after {attempts} attempts: {exc}",
                        status_code=exc.status_code,
                    ) from exc
            time.sleep(self._backoff_seconds * attempt)
