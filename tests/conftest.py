import io
import threading
from dataclasses import replace

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docproc.database.models import DocumentRecord
from docproc.processor.exceptions import AlreadyProcessingError, DocumentNotFoundError
from docproc.processor.models import DocumentStatus


class InMemoryDocumentsRepository:
    """Thread-safe stand-in for DocumentsRepository used by lifecycle tests."""

    def __init__(self) -> None:
        self.rows: dict[str, DocumentRecord] = {}
        self.status_history: list[tuple[str, DocumentStatus]] = []
        self._lock = threading.Lock()

    def find_by_id(self, document_id: str) -> DocumentRecord:
        with self._lock:
            row = self.rows.get(document_id)
            if row is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            return replace(row)

    def create(self, document: DocumentRecord) -> None:
        with self._lock:
            existing = self.rows.get(document.id)
            if existing is not None and existing.status == DocumentStatus.PROCESSING:
                raise AlreadyProcessingError(
                    f"Document {document.id} is already being processed"
                )
            self.rows[document.id] = replace(document)

    def update_status(self, document_id: str, status: DocumentStatus) -> None:
        self._update(document_id, status=status)
        self.status_history.append((document_id, status))

    def update_content(self, document_id: str, content: str) -> None:
        self._update(document_id, content=content)

    def update_summary(self, document_id: str, summary: str) -> None:
        self._update(document_id, summary=summary)

    def update_metadata(self, document_id: str, metadata: dict[str, str]) -> None:
        self._update(document_id, metadata=dict(metadata))

    def delete(self, document_id: str) -> None:
        with self._lock:
            if self.rows.pop(document_id, None) is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")

    def list_documents(
        self,
        status: DocumentStatus | None = DocumentStatus.PROCESSED,
        limit: int = 500,
        offset: int = 0,
    ) -> list[DocumentRecord]:
        with self._lock:
            rows = [r for r in self.rows.values() if status is None or r.status == status]
        return rows[offset : offset + limit]

    def _update(self, document_id: str, **fields: object) -> None:
        with self._lock:
            row = self.rows.get(document_id)
            if row is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            self.rows[document_id] = replace(row, **fields)


@pytest.fixture()
def memory_repo() -> InMemoryDocumentsRepository:
    return InMemoryDocumentsRepository()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()
