from abc import ABC, abstractmethod
from dataclasses import dataclass

from docproc.database.models import DocumentRecord


@dataclass(slots=True)
class ExtractionContext:
    document: DocumentRecord
    raw_bytes: bytes = b""
    content: str = ""
    summary: str = ""
    metadata: dict[str, str] | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: ExtractionContext) -> ExtractionContext:
        raise NotImplementedError
