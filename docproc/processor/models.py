from dataclasses import dataclass
from enum import StrEnum


class DocumentStatus(StrEnum):
    """Lifecycle states of a document."""

    PENDING = "pending"
    PROCESSING = "processing"
    PROCESSED = "processed"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractedContent:
    """What a workflow run persisted onto the document."""

    content: str
    summary: str
    metadata: dict[str, str] | None = None
