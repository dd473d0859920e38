"""
Services module - extraction, AI structuring, sanitization, fallback.
"""
from hireflow.services.ai_parsing_service import ResumeParsingService, get_resume_parser

__all__ = ["ResumeParsingService", "get_resume_parser"]
