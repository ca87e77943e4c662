import uvicorn

from docproc.api.app import create_app
from docproc.config.settings import Settings
from docproc.database.connection import close_pool, ensure_schema, init_pool
from docproc.database.repositories.documents_repository import DocumentsRepository
from docproc.logging.logger import Log
from docproc.processor.workflow import build_workflow
from docproc.storage.blob_store import BlobStore
from docproc.worker.job_runner import JobRunner
from docproc.worker.lifecycle import DocumentLifecycleManager
from docproc.worker.worker import Worker

SHUTDOWN_GRACE_SECONDS = 30.0


def build_manager(settings: Settings, worker: Worker) -> DocumentLifecycleManager:
    """Wire repository, blob store, workflow and runner into a lifecycle manager."""
    doc_repo = DocumentsRepository()
    blob_store = BlobStore.from_settings(settings)
    workflow = build_workflow(settings, doc_repo, blob_store)
    job_runner = JobRunner(workflow, doc_repo)
    return DocumentLifecycleManager(doc_repo, blob_store, job_runner, worker)


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)
    worker = Worker()

    try:
        ensure_schema()
        app = create_app(build_manager(settings, worker))
        Log.info("Starting server", port=settings.server_port)
        uvicorn.run(app, host=settings.server_host, port=settings.server_port)
    finally:
        if not worker.join(timeout=SHUTDOWN_GRACE_SECONDS):
            Log.warning(
                "Shutting down with extraction jobs still running",
                in_flight=worker.in_flight,
            )
        close_pool()
        Log.info("Server exited")


if __name__ == "__main__":
    main()
