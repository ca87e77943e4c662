from abc import ABC, abstractmethod


class BaseAnalyzerClient(ABC):
    """Contract for provider-specific multimodal completion clients.

    One call is one attempt: implementations must not retry on their own and
    must raise UpstreamError (with the HTTP status when there is one) on any
    failure.
    """

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_url: str,
        max_tokens: int,
    ) -> str:
        """Return the completion text for a prompt plus one image data URI."""
