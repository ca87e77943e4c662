"""Example analyzer client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalyzerClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from docproc.analysis.client_base import BaseAnalyzerClient


class ExampleClientAdapter(BaseAnalyzerClient):
    """Example adapter that returns a fixed, well-formed analysis.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example analysis",
        "metadata": {
            "image_type/category": "Example",
            "raw_text_content": "Example text",
        },
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_url: str,
        max_tokens: int,
    ) -> str:
        _ = model, prompt, image_url, max_tokens
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE) + "\n```"
