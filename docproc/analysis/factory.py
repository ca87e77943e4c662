from docproc.analysis.analyzer import Analyzer
from docproc.analysis.base import BaseAnalyzer
from docproc.analysis.client_base import BaseAnalyzerClient
from docproc.analysis.example_client_adapter import ExampleClientAdapter
from docproc.analysis.openai_client_adapter import OpenAIClientAdapter
from docproc.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer."""

    PROVIDERS = ("openai", "openai_compatible", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create an analyzer from application settings."""
        return Analyzer(
            client=cls._create_client(settings),
            model=settings.openai_model_name,
            max_retries=settings.openai_max_retries,
            backoff_seconds=settings.openai_retry_backoff_seconds,
            max_tokens=settings.openai_max_tokens,
        )

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseAnalyzerClient:
        provider = settings.analyzer_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=settings.openai_base_url or None,
            )
        if provider == "openai_compatible":
            base_url = settings.openai_base_url.strip()
            if not base_url:
                raise ValueError(
                    "openai_base_url is required for analyzer_provider=openai_compatible"
                )
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=base_url,
            )
        raise ValueError(
            f"Unknown analyzer provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
