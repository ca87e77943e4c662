from docproc.database.models import DocumentRecord
from docproc.database.repositories.documents_repository import DocumentsRepository
from docproc.logging.logger import Log
from docproc.processor.models import DocumentStatus
from docproc.processor.workflow import ExtractionWorkflow


class JobRunner:
    """Run one extraction job and resolve the document's terminal status.

    Never raises: this is the outermost frame of a background thread.
    """

    def __init__(self, workflow: ExtractionWorkflow, doc_repo: DocumentsRepository) -> None:
        self._workflow = workflow
        self._doc_repo = doc_repo

    def run(self, document: DocumentRecord) -> None:
        """Execute the workflow, then mark the document processed or failed."""
        Log.info("Running extraction job", document_id=document.id)
        try:
            result = self._workflow.run(document)
            self._doc_repo.update_status(document.id, DocumentStatus.PROCESSED)
        except Exception as exc:
            self._handle_failure(document, exc)
            return
        Log.info(
            "Document processed successfully",
            document_id=document.id,
            chars=len(result.content),
        )

    def _handle_failure(self, document: DocumentRecord, exc: Exception) -> None:
        Log.exception(f"Failed to process document: {exc}", document_id=document.id)
        try:
            self._doc_repo.update_status(document.id, DocumentStatus.FAILED)
        except Exception as status_exc:
            Log.error(
                f"Failed to mark document as failed: {status_exc}",
                document_id=document.id,
            )
