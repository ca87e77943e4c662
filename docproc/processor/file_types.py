"""Fixed MIME type table for accepted uploads."""

CONTENT_TYPE_TO_FILE_TYPE: dict[str, str] = {
    "application/pdf": "pdf",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/webp": "webp",
    "image/tiff": "tiff",
}

PDF_FILE_TYPE = "pdf"
IMAGE_FILE_TYPES = frozenset({"jpeg", "jpg", "png", "gif", "bmp", "webp", "tiff"})


def file_type_for(content_type: str) -> str | None:
    """Return the file-type tag for an allowed content type, else ``None``."""
    return CONTENT_TYPE_TO_FILE_TYPE.get(content_type)


def is_image(file_type: str) -> bool:
    return file_type.lower() in IMAGE_FILE_TYPES


def is_pdf(file_type: str) -> bool:
    return file_type.lower() == PDF_FILE_TYPE


def image_mime_type(file_type: str) -> str:
    """MIME type sent to the analyzer for an image file-type tag."""
    tag = file_type.lower()
    if tag in ("jpg", "jpeg"):
        return "image/jpeg"
    return f"image/{tag}"
