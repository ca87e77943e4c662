from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from docproc.database.models import DocumentRecord
from docproc.processor.models import DocumentStatus


class ApiModel(BaseModel):
    """Response base: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(ApiModel):
    error: str


class HealthResponse(ApiModel):
    status: str = "ok"
    service: str = "document-processing"


class ProcessResponse(ApiModel):
    message: str = "Document processing started"
    document_id: str
    filename: str


class StatusResponse(ApiModel):
    status: DocumentStatus


class DocumentSummary(ApiModel):
    id: str
    filename: str
    file_type: str
    summary: str | None = None
    metadata: dict[str, str] | None = None
    status: DocumentStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: DocumentRecord) -> "DocumentSummary":
        return cls(
            id=record.id,
            filename=record.filename,
            file_type=record.file_type,
            summary=record.summary,
            metadata=record.metadata,
            status=record.status,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class DocumentListResponse(ApiModel):
    documents: list[DocumentSummary]
    total: int


class DeleteResponse(ApiModel):
    message: str = "Document deleted successfully"
    document_id: str
