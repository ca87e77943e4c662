from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docproc.api.routes import router
from docproc.logging.logger import Log
from docproc.processor.exceptions import (
    AlreadyProcessingError,
    DocumentNotFoundError,
    DocumentValidationError,
    ProcessorError,
)
from docproc.worker.lifecycle import DocumentLifecycleManager

_STATUS_BY_ERROR: tuple[tuple[type[ProcessorError], int], ...] = (
    (DocumentValidationError, status.HTTP_400_BAD_REQUEST),
    (AlreadyProcessingError, status.HTTP_409_CONFLICT),
    (DocumentNotFoundError, status.HTTP_404_NOT_FOUND),
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(manager: DocumentLifecycleManager) -> FastAPI:
    """Build the HTTP application around an already-wired lifecycle manager."""
    app = FastAPI(title="Document Processing Service")
    app.state.manager = manager

    @app.exception_handler(ProcessorError)
    async def processor_error_handler(request: Request, exc: ProcessorError) -> JSONResponse:
        for error_type, status_code in _STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                return _error(status_code, str(exc))
        Log.error(f"Request failed: {exc}", path=request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return _error(status.HTTP_400_BAD_REQUEST, messages)

    app.include_router(router, prefix="/api/v1")
    return app
