from docproc.analysis.base import BaseAnalyzer
from docproc.analysis.models import RAW_TEXT_KEY
from docproc.database.repositories.documents_repository import DocumentsRepository
from docproc.logging.logger import Log
from docproc.pdf.base import BaseRasterizer
from docproc.pdf.exceptions import RasterizationError
from docproc.processor.exceptions import ExtractionError, UnsupportedFileTypeError
from docproc.processor.file_types import image_mime_type, is_image, is_pdf
from docproc.processor.pipeline import ExtractionContext, PipelineStep
from docproc.storage.blob_store import BlobStore

PDF_PAGE_MIME_TYPE = "image/png"
PAGE_SEPARATOR = "\n\n"


class LoadBlobStep(PipelineStep):
    def __init__(self, blob_store: BlobStore) -> None:
        self._blob_store = blob_store

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.raw_bytes = self._blob_store.get(context.document.file_path)
        Log.info(
            f"Loaded {len(context.raw_bytes)} bytes",
            document_id=context.document.id,
            path=context.document.file_path,
        )
        return context


class ExtractStep(PipelineStep):
    """Dispatches on file type: one analysis per image, one per PDF page."""

    def __init__(self, analyzer: BaseAnalyzer, rasterizer: BaseRasterizer) -> None:
        self._analyzer = analyzer
        self._rasterizer = rasterizer

    def run(self, context: ExtractionContext) -> ExtractionContext:
        file_type = context.document.file_type
        if is_image(file_type):
            self._extract_image(context)
        elif is_pdf(file_type):
            self._extract_pdf(context)
        else:
            raise UnsupportedFileTypeError(f"Unsupported file type: {file_type}")
        Log.info(
            f"Extracted {len(context.content)} chars",
            document_id=context.document.id,
            file_type=file_type,
        )
        return context

    def _extract_image(self, context: ExtractionContext) -> None:
        analysis = self._analyzer.analyze(
            context.raw_bytes, image_mime_type(context.document.file_type)
        )
        context.summary = analysis.summary
        context.content = analysis.metadata.get(RAW_TEXT_KEY, analysis.summary)
        context.metadata = dict(analysis.metadata)

    def _extract_pdf(self, context: ExtractionContext) -> None:
        try:
            pages = self._rasterizer.rasterize(context.raw_bytes)
        except RasterizationError as exc:
            raise ExtractionError(f"Failed to convert PDF to images: {exc}") from exc

        texts: list[str] = []
        for number, page in enumerate(pages, start=1):
            try:
                text = self._analyzer.extract_text(page, PDF_PAGE_MIME_TYPE)
            except Exception as exc:
                Log.warning(
                    f"Failed to extract text from PDF page {number}/{len(pages)}: {exc}",
                    document_id=context.document.id,
                )
                continue
            if text:
                texts.append(text)

        if pages and not texts:
            Log.warning("No usable pages in PDF", document_id=context.document.id)
        context.content = PAGE_SEPARATOR.join(texts)
        context.summary = context.content


class PersistContentStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: ExtractionContext) -> ExtractionContext:
        self._doc_repo.update_content(context.document.id, context.content)
        return context


class PersistSummaryStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: ExtractionContext) -> ExtractionContext:
        self._doc_repo.update_summary(context.document.id, context.summary)
        return context


class PersistMetadataStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: ExtractionContext) -> ExtractionContext:
        if context.metadata is None:
            return context
        self._doc_repo.update_metadata(context.document.id, context.metadata)
        return context
