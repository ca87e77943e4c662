from dataclasses import dataclass, field

RAW_TEXT_KEY = "raw_text_content"
RAW_RESPONSE_KEY = "raw_response"


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one analyzer call for a single image or page.

    ``metadata`` is open-ended LLM output; when ``extracted_text`` is
    non-empty it is also present under ``metadata[RAW_TEXT_KEY]``.
    """

    summary: str
    extracted_text: str = ""
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Literal text of the unit, falling back to the summary."""
        if RAW_TEXT_KEY in self.metadata:
            return self.metadata[RAW_TEXT_KEY]
        return self.summary
