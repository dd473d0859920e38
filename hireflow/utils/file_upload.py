"""
File Upload Utility - validate resume uploads before parsing.

Supported formats:
- PDF (.pdf) - text runs extracted from the PDF
- Word (.doc, .docx) - best-effort text salvage, not truly parsed
- Plain Text (.txt)

Max file size comes from settings (10MB by default).
"""

from typing import Tuple

from fastapi import HTTPException, UploadFile

from hireflow.core.config import get_settings
from hireflow.services.text_extraction import get_file_extension

ALLOWED_EXTENSIONS = {'.pdf', '.doc', '.docx', '.txt'}

FORMAT_NAMES = {
    '.pdf': ("PDF", True),
    '.doc': ("Word Document (legacy)", False),
    '.docx': ("Word Document", False),
    '.txt': ("Plain Text", True),
}


def validate_upload(filename: str, content: bytes) -> None:
    """
    Check name, type and size of an uploaded resume.

    Raises:
        HTTPException on validation errors
    """
    settings = get_settings()

    if not filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = get_file_extension(filename)
    suffix = f".{ext}" if ext else ""
    if suffix not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '{suffix}'. Allowed: PDF, DOC, DOCX, TXT"
        )

    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {settings.max_upload_size_mb}MB"
        )


async def read_upload(file: UploadFile) -> Tuple[bytes, str]:
    """Read and validate an uploaded file. Returns (content, filename)."""
    content = await file.read()
    validate_upload(file.filename or "", content)
    return content, file.filename


def get_supported_formats() -> dict:
    """Get info about supported file formats."""
    return {
        "supportedFormats": [
            {"extension": ext, "name": name, "parsed": parsed}
            for ext, (name, parsed) in FORMAT_NAMES.items()
        ],
        "maxSizeMb": get_settings().max_upload_size_mb
    }
