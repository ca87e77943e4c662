from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile

from docproc.api.schemas import (
    DeleteResponse,
    DocumentListResponse,
    DocumentSummary,
    ErrorResponse,
    HealthResponse,
    ProcessResponse,
    StatusResponse,
)
from docproc.processor.exceptions import DocumentValidationError
from docproc.processor.models import DocumentStatus
from docproc.worker.lifecycle import DocumentLifecycleManager

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_manager(request: Request) -> DocumentLifecycleManager:
    return request.app.state.manager


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


# Plain ``def`` endpoints: the manager blocks on the database and blob store,
# so FastAPI runs them in its threadpool.
@router.post("/process", response_model=ProcessResponse, responses=_ERRORS)
def process_document(
    document_id: str = Form("", alias="documentId"),
    user_id: str = Form("", alias="userId"),
    file: UploadFile | None = File(None),
    manager: DocumentLifecycleManager = Depends(get_manager),
) -> ProcessResponse:
    if not document_id or not user_id:
        raise DocumentValidationError("documentId and userId are required")
    if file is None or not file.filename:
        raise DocumentValidationError("file is required")

    manager.start_processing_with_upload(
        document_id,
        file.file.read(),
        file.filename,
        file.content_type or "",
        owner_id=user_id,
    )
    return ProcessResponse(document_id=document_id, filename=file.filename)


@router.get("/process/{document_id}/status", response_model=StatusResponse, responses=_ERRORS)
def get_processing_status(
    document_id: str,
    manager: DocumentLifecycleManager = Depends(get_manager),
) -> StatusResponse:
    return StatusResponse(status=manager.get_status(document_id))


@router.get("/documents", response_model=DocumentListResponse, responses=_ERRORS)
def list_documents(
    status: DocumentStatus | None = Query(DocumentStatus.PROCESSED),
    limit: int = Query(500, ge=1, le=500),
    offset: int = Query(0, ge=0),
    manager: DocumentLifecycleManager = Depends(get_manager),
) -> DocumentListResponse:
    records = manager.list_documents(status=status, limit=limit, offset=offset)
    documents = [DocumentSummary.from_record(record) for record in records]
    return DocumentListResponse(documents=documents, total=len(documents))


@router.delete("/documents/{document_id}", response_model=DeleteResponse, responses=_ERRORS)
def delete_document(
    document_id: str,
    manager: DocumentLifecycleManager = Depends(get_manager),
) -> DeleteResponse:
    manager.delete_document(document_id)
    return DeleteResponse(document_id=document_id)
