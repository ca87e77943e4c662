from unittest.mock import patch

import pytest

from docproc.analysis.analyzer import Analyzer
from docproc.analysis.example_client_adapter import ExampleClientAdapter
from docproc.analysis.factory import AnalyzerFactory
from docproc.analysis.openai_client_adapter import OpenAIClientAdapter
from docproc.config.settings import Settings


class TestAnalyzerFactory:
    def test_creates_example_analyzer(self) -> None:
        settings = Settings(analyzer_provider="example")

        analyzer = AnalyzerFactory.create(settings)

        assert isinstance(analyzer, Analyzer)
        assert isinstance(analyzer._client, ExampleClientAdapter)

    def test_passes_retry_settings(self) -> None:
        settings = Settings(
            analyzer_provider="example",
            openai_model_name="vision-x",
            openai_max_retries=5,
            openai_retry_backoff_seconds=0.25,
            openai_max_tokens=900,
        )

        analyzer = AnalyzerFactory.create(settings)

        assert isinstance(analyzer, Analyzer)
        assert analyzer._model == "vision-x"
        assert analyzer._max_retries == 5
        assert analyzer._backoff_seconds == 0.25
        assert analyzer._max_tokens == 900

    def test_creates_openai_analyzer(self) -> None:
        settings = Settings(analyzer_provider="openai", openai_api_key="k")
        with patch("docproc.analysis.openai_client_adapter.openai.OpenAI") as mock_openai:
            analyzer = AnalyzerFactory.create(settings)

        assert isinstance(analyzer._client, OpenAIClientAdapter)
        assert mock_openai.call_args.kwargs["base_url"] == "https://api.openai.com/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(analyzer_provider="openai_compatible", openai_base_url=" ")
        with pytest.raises(ValueError, match="openai_base_url is required"):
            AnalyzerFactory.create(settings)

    def test_openai_compatible_uses_base_url(self) -> None:
        settings = Settings(
            analyzer_provider="openai_compatible",
            openai_base_url="http://localhost:11434/v1",
        )
        with patch("docproc.analysis.openai_client_adapter.openai.OpenAI") as mock_openai:
            AnalyzerFactory.create(settings)

        assert mock_openai.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_provider_is_case_insensitive(self) -> None:
        settings = Settings(analyzer_provider="EXAMPLE")

        analyzer = AnalyzerFactory.create(settings)

        assert isinstance(analyzer._client, ExampleClientAdapter)

    def test_raises_for_unknown_provider(self) -> None:
        settings = Settings(analyzer_provider="nonexistent")
        with pytest.raises(ValueError, match="Unknown analyzer provider 'nonexistent'"):
            AnalyzerFactory.create(settings)
