from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from docproc.database.connection import get_connection
from docproc.database.models import DocumentRecord
from docproc.processor.exceptions import AlreadyProcessingError, DocumentNotFoundError
from docproc.processor.models import DocumentStatus

_COLUMNS = """
    id, filename, file_type, file_path, owner_id, content, summary,
    metadata, status, created_at, updated_at
"""


def _to_record(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=row["id"],
        filename=row["filename"],
        file_type=row["file_type"],
        file_path=row["file_path"],
        status=DocumentStatus(row["status"]),
        owner_id=row["owner_id"],
        content=row["content"],
        summary=row["summary"],
        metadata=row["metadata"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class DocumentsRepository:
    """Database operations for the documents table.

    Every write is a single independent statement; there is no transactional
    grouping across fields.
    """

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _to_record(row)

    def create(self, document: DocumentRecord) -> None:
        """Insert a document, or reset an existing one to the new upload.

        An existing row keeps its id and created_at; file attributes and
        status are replaced and previous results are left for the next run
        to overwrite. A row that is currently processing is left untouched.

        Raises:
            AlreadyProcessingError: if the existing row is processing.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO documents
                        (id, filename, file_type, file_path, owner_id, status,
                         created_at, updated_at)
                    VALUES (%s, %s, %s, %s, %s, %s, NOW(), NOW())
                    ON CONFLICT (id) DO UPDATE
                    SET filename = EXCLUDED.filename,
                        file_type = EXCLUDED.file_type,
                        file_path = EXCLUDED.file_path,
                        owner_id = EXCLUDED.owner_id,
                        status = EXCLUDED.status,
                        updated_at = NOW()
                    WHERE documents.status <> %s
                    """,
                    (
                        document.id,
                        document.filename,
                        document.file_type,
                        document.file_path,
                        document.owner_id,
                        str(document.status),
                        str(DocumentStatus.PROCESSING),
                    ),
                )
                if cur.rowcount == 0:
                    raise AlreadyProcessingError(
                        f"Document {document.id} is already being processed"
                    )
            conn.commit()

    def update_status(self, document_id: str, status: DocumentStatus) -> None:
        """Set the lifecycle status.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        self._update_column(document_id, "status", str(status))

    def update_content(self, document_id: str, content: str) -> None:
        """Persist extracted text.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        self._update_column(document_id, "content", content)

    def update_summary(self, document_id: str, summary: str) -> None:
        """Persist the short description.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        self._update_column(document_id, "summary", summary)

    def update_metadata(self, document_id: str, metadata: dict[str, str]) -> None:
        """Persist the analyzer metadata mapping as JSONB.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        self._update_column(document_id, "metadata", Jsonb(metadata))

    def delete(self, document_id: str) -> None:
        """Hard-delete a document.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM documents WHERE id = %s", (document_id,))
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()

    def list_documents(
        self,
        status: DocumentStatus | None = DocumentStatus.PROCESSED,
        limit: int = 500,
        offset: int = 0,
    ) -> list[DocumentRecord]:
        """List documents newest first, optionally filtered by status."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM documents
                    WHERE (%s::text IS NULL OR status = %s::text)
                    ORDER BY created_at DESC
                    LIMIT %s OFFSET %s
                    """,
                    (
                        str(status) if status else None,
                        str(status) if status else None,
                        limit,
                        offset,
                    ),
                )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]

    def _update_column(self, document_id: str, column: str, value: object) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"UPDATE documents SET {column} = %s, updated_at = NOW() WHERE id = %s",
                    (value, document_id),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()
