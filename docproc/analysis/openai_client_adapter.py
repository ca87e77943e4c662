import httpx
import openai

from docproc.analysis.client_base import BaseAnalyzerClient
from docproc.analysis.exceptions import UpstreamError


class OpenAIClientAdapter(BaseAnalyzerClient):
    """Analyzer client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        # Retries are owned by Analyzer; the SDK must surface every failure.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_url: str,
        max_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    }
                ],
            )
        except openai.APIStatusError as exc:
            raise UpstreamError(
                f"Analyzer API error: {exc.status_code}", status_code=exc.status_code
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise UpstreamError(f"Analyzer network error: {exc}") from exc
        except openai.APIError as exc:
            raise UpstreamError(f"Analyzer API error: {exc}") from exc

        if not response.choices:
            raise UpstreamError("Analyzer returned no choices", status_code=200)
        content = response.choices[0].message.content
        if content is None:
            raise UpstreamError("Analyzer returned empty response", status_code=200)
        return content
