class ProcessorError(Exception):
    """Base exception for all document processing errors."""


class DocumentValidationError(ProcessorError):
    """Raised when request input is missing or invalid (user-correctable)."""


class AlreadyProcessingError(ProcessorError):
    """Raised when a document is already mid-pipeline."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document cannot be found in the database."""


class ExtractionError(ProcessorError):
    """Raised when extraction fails in a way that aborts the whole document."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when a document's file type has no extraction path."""


class StorageError(ProcessorError):
    """Raised on record-store or blob-store I/O failure."""
