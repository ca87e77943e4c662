"""Document lifecycle: pending -> processing -> processed | failed."""

from pathlib import PurePosixPath

from docproc.database.models import DocumentRecord
from docproc.database.repositories.documents_repository import DocumentsRepository
from docproc.logging.logger import Log
from docproc.processor.exceptions import (
    AlreadyProcessingError,
    DocumentNotFoundError,
    DocumentValidationError,
)
from docproc.processor.file_types import file_type_for
from docproc.processor.models import DocumentStatus
from docproc.storage.blob_store import BlobStore
from docproc.worker.job_runner import JobRunner
from docproc.worker.worker import Worker

BLOB_PREFIX = "documents"


def blob_path_for(filename: str) -> str:
    """Blob-store key for an uploaded file: ``documents/<basename>``."""
    return f"{BLOB_PREFIX}/{filename}"


def _basename(filename: str) -> str:
    return PurePosixPath(filename.replace("\\", "/")).name


class DocumentLifecycleManager:
    """Owns status transitions and hands accepted documents to the worker.

    The only guard against duplicate processing is the ``processing`` status
    check at start time. Two concurrent starts for the same document can both
    pass it; nothing at the store level prevents that.
    """

    def __init__(
        self,
        doc_repo: DocumentsRepository,
        blob_store: BlobStore,
        job_runner: JobRunner,
        worker: Worker,
    ) -> None:
        self._doc_repo = doc_repo
        self._blob_store = blob_store
        self._job_runner = job_runner
        self._worker = worker

    def start_processing(self, document_id: str) -> None:
        """Mark a document as processing and schedule its extraction.

        Raises:
            DocumentNotFoundError: if the document does not exist.
            AlreadyProcessingError: if the document is currently processing.
            RuntimeError: if the job cannot be scheduled. The document is
                marked failed first.
        """
        document = self._doc_repo.find_by_id(document_id)
        if document.status == DocumentStatus.PROCESSING:
            raise AlreadyProcessingError(f"Document {document_id} is already being processed")

        self._doc_repo.update_status(document_id, DocumentStatus.PROCESSING)
        document.status = DocumentStatus.PROCESSING
        try:
            self._worker.submit(document_id, lambda: self._job_runner.run(document))
        except Exception:
            Log.exception("Failed to schedule extraction job", document_id=document_id)
            self._doc_repo.update_status(document_id, DocumentStatus.FAILED)
            raise
        Log.info("Document processing started", document_id=document_id)

    def start_processing_with_upload(
        self,
        document_id: str,
        file_bytes: bytes,
        filename: str,
        declared_mime_type: str,
        owner_id: str | None = None,
    ) -> None:
        """Validate and store an upload, create its record, then start processing.

        The duplicate check against an existing record happens before the
        upload. The blob is written before ``start_processing`` runs its own
        check, so a start that loses a race still leaves the new blob behind.

        Raises:
            DocumentValidationError: on a missing id/filename or a MIME type
                outside the allow-list. Nothing is written in that case.
            AlreadyProcessingError: if the document is currently processing.
            StorageError: if the blob or record cannot be written.
        """
        if not document_id:
            raise DocumentValidationError("documentId is required")
        name = _basename(filename or "")
        if not name:
            raise DocumentValidationError("filename is required")
        file_type = file_type_for(declared_mime_type)
        if file_type is None:
            raise DocumentValidationError(f"unsupported file type: {declared_mime_type}")

        self._ensure_not_processing(document_id)

        file_path = blob_path_for(name)
        self._blob_store.put(file_path, file_bytes, declared_mime_type)
        self._doc_repo.create(
            DocumentRecord(
                id=document_id,
                filename=name,
                file_type=file_type,
                file_path=file_path,
                status=DocumentStatus.PENDING,
                owner_id=owner_id,
            )
        )
        self.start_processing(document_id)

    def get_status(self, document_id: str) -> DocumentStatus:
        """Return the current status.

        Raises:
            DocumentNotFoundError: if the document does not exist.
        """
        return self._doc_repo.find_by_id(document_id).status

    def list_documents(
        self,
        status: DocumentStatus | None = DocumentStatus.PROCESSED,
        limit: int = 500,
        offset: int = 0,
    ) -> list[DocumentRecord]:
        """List documents newest first."""
        return self._doc_repo.list_documents(status=status, limit=limit, offset=offset)

    def delete_document(self, document_id: str) -> None:
        """Hard-delete a document record. The stored blob is left in place.

        Raises:
            DocumentNotFoundError: if the document does not exist.
        """
        self._doc_repo.delete(document_id)
        Log.info("Document deleted", document_id=document_id)

    def _ensure_not_processing(self, document_id: str) -> None:
        try:
            existing = self._doc_repo.find_by_id(document_id)
        except DocumentNotFoundError:
            return
        if existing.status == DocumentStatus.PROCESSING:
            raise AlreadyProcessingError(f"Document {document_id} is already being processed")
