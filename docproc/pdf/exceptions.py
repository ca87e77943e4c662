class RasterizationError(Exception):
    """Raised when a PDF cannot be converted into page images."""
