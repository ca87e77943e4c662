from docproc.analysis.factory import AnalyzerFactory
from docproc.config.settings import Settings
from docproc.database.models import DocumentRecord
from docproc.database.repositories.documents_repository import DocumentsRepository
from docproc.logging.logger import Log
from docproc.pdf.factory import RasterizerFactory
from docproc.processor.models import ExtractedContent
from docproc.processor.pipeline import ExtractionContext, PipelineStep
from docproc.processor.steps import (
    ExtractStep,
    LoadBlobStep,
    PersistContentStep,
    PersistMetadataStep,
    PersistSummaryStep,
)
from docproc.storage.blob_store import BlobStore


class ExtractionWorkflow:
    """Runs the extraction steps for one document, in order.

    Pipeline: load blob -> extract -> persist content -> persist summary
    -> persist metadata. A failing step stops the run; fields persisted by
    earlier steps are kept. Status transitions belong to the caller.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def run(self, document: DocumentRecord) -> ExtractedContent:
        Log.info("Extracting document", document_id=document.id, file_type=document.file_type)
        context = ExtractionContext(document=document)
        for step in self._steps:
            context = step.run(context)
        return ExtractedContent(
            content=context.content,
            summary=context.summary,
            metadata=context.metadata,
        )


def build_workflow(
    settings: Settings,
    doc_repo: DocumentsRepository,
    blob_store: BlobStore,
) -> ExtractionWorkflow:
    """Build an ExtractionWorkflow with the configured analyzer and rasterizer."""
    analyzer = AnalyzerFactory.create(settings)
    rasterizer = RasterizerFactory.create(settings)
    return ExtractionWorkflow(
        steps=[
            LoadBlobStep(blob_store),
            ExtractStep(analyzer=analyzer, rasterizer=rasterizer),
            PersistContentStep(doc_repo),
            PersistSummaryStep(doc_repo),
            PersistMetadataStep(doc_repo),
        ]
    )
