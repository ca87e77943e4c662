from dataclasses import dataclass
from datetime import datetime

from docproc.processor.models import DocumentStatus


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    filename: str
    file_type: str
    file_path: str
    status: DocumentStatus = DocumentStatus.PENDING
    owner_id: str | None = None
    content: str | None = None
    summary: str | None = None
    metadata: dict[str, str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
