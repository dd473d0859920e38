"""
Text Extraction - turn an uploaded resume file into plain text.

Dispatch is by file extension only:
- .pdf  -> text runs pulled out of the PDF page structure (PyPDF2)
- .txt  -> UTF-8 decode, invalid bytes replaced
- other -> binary salvage (printable ASCII scraped from the raw bytes).
           .doc/.docx land here too; they are not truly parsed.

Only PDF parsing can fail; it surfaces as ExtractionError. TXT and binary
salvage never raise.
"""

import asyncio
import io
import logging
import re
from typing import List, Optional
from urllib.parse import unquote

from PyPDF2 import PdfReader

from hireflow.core.config import get_settings
from hireflow.core.errors import ExtractionError

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_TEXT = "Text extraction failed"

_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n\r\t]")
_WHITESPACE = re.compile(r"\s+")


def get_file_extension(file_name: str) -> str:
    """Lowercase suffix after the last dot, without the dot ('' if none)."""
    if not file_name or "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1].lower()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def is_usable_text(text: str) -> bool:
    """True if text has content and is not the extraction sentinel."""
    return bool(text and text.strip()) and text != EXTRACTION_FAILED_TEXT


def salvage_binary_text(content: bytes, max_bytes: Optional[int] = None, max_chars: Optional[int] = None) -> str:
    """
    Best-effort text from arbitrary bytes.

    Only a bounded prefix is decoded, so huge binaries stay cheap.
    Returns EXTRACTION_FAILED_TEXT instead of an empty string.
    """
    settings = get_settings()
    if max_bytes is None:
        max_bytes = settings.binary_salvage_max_bytes
    if max_chars is None:
        max_chars = settings.extracted_text_max_chars

    text = bytes(content or b"")[:max_bytes].decode("utf-8", errors="replace")
    text = collapse_whitespace(_NON_PRINTABLE.sub(" ", text))[:max_chars]
    return text or EXTRACTION_FAILED_TEXT


def _decode_run(run: str) -> str:
    try:
        return unquote(run, errors="strict")
    except UnicodeDecodeError:
        return run


def extract_pdf_text(content: bytes) -> str:
    """
    Concatenate every text run on every page, in document order.

    Raises ExtractionError if the PDF can't be read or has no text.
    """
    try:
        reader = PdfReader(io.BytesIO(content))
        runs: List[str] = []

        def collect_run(text, cm, tm, font_dict, font_size):
            if text:
                runs.append(_decode_run(text))

        for page in reader.pages:
            page.extract_text(visitor_text=collect_run)
    except Exception as e:
        raise ExtractionError("pdf", f"Error reading PDF: {e}") from e

    text = collapse_whitespace(" ".join(runs))
    if not text:
        raise ExtractionError("pdf", "No text could be extracted from PDF")
    return text


def extract_txt_text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def extract_text(content: bytes, file_name: str) -> str:
    """
    Extract text from a resume file.

    Args:
        content: Raw file bytes
        file_name: Original file name, used only for its extension

    Returns:
        Extracted text (may be EXTRACTION_FAILED_TEXT for salvaged binaries)

    Raises:
        ExtractionError naming file_name, for PDF failures
    """
    ext = get_file_extension(file_name)

    try:
        if ext == "pdf":
            text = extract_pdf_text(content)
        elif ext == "txt":
            text = extract_txt_text(content)
        else:
            text = salvage_binary_text(content)
    except ExtractionError as e:
        raise ExtractionError(file_name, e.reason) from e

    logger.info("Extracted %d characters from %s", len(text), file_name)
    return text


async def extract_text_async(content: bytes, file_name: str) -> str:
    """extract_text() on a worker thread; PDF parsing is CPU-bound."""
    return await asyncio.to_thread(extract_text, content, file_name)
