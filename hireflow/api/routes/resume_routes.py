"""
Resume Routes

POST /resume/upload - Upload and parse a resume (PDF/DOC/DOCX/TXT)
GET /resume/formats - Get supported formats
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from hireflow.core.errors import ResumeParsingError
from hireflow.schemas.schemas import (
    ErrorResponse,
    ParseSource,
    ResumeUploadResponse,
    SupportedFormatsResponse,
)
from hireflow.services.ai_parsing_service import ResumeParsingService, get_resume_parser
from hireflow.utils.file_upload import get_supported_formats, read_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["Resume"])

_MESSAGES = {
    ParseSource.ai: "Resume uploaded and parsed successfully",
    ParseSource.fallback: "Resume uploaded; AI parsing unavailable, partial data extracted",
    ParseSource.mock: "Resume uploaded; AI parsing not configured, sample data returned",
}


def resume_parser_dependency() -> ResumeParsingService:
    """Fresh parser per request; each request owns and closes its provider client."""
    return get_resume_parser()


@router.post(
    "/upload",
    response_model=ResumeUploadResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid file"},
        413: {"model": ErrorResponse, "description": "File too large"},
        422: {"model": ErrorResponse, "description": "Resume could not be parsed"},
    },
)
async def upload_resume(
    resume: UploadFile = File(..., description="Resume file (PDF, DOC, DOCX or TXT)"),
    parser: ResumeParsingService = Depends(resume_parser_dependency),
):
    """
    Upload and parse resume using AI.

    Process:
    1. Validate file type and size
    2. Extract text from file
    3. AI structures it into name, contact, skills, experience, education...
    4. Falls back to keyword extraction if AI parsing fails
    """
    try:
        content, filename = await read_upload(resume)
        result = await parser.parse(content, filename)
    except ResumeParsingError as e:
        logger.error("Resume upload failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    finally:
        await parser.aclose()

    return ResumeUploadResponse(
        success=True,
        message=_MESSAGES[result.source],
        file_name=filename,
        file_size=len(content),
        result=result,
    )


@router.get("/formats", response_model=SupportedFormatsResponse)
async def resume_formats():
    """Get supported resume file formats."""
    return get_supported_formats()
