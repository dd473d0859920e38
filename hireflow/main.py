"""
HireFlow Resume Parser - Main Application

FastAPI backend with:
- Resume text extraction (PDF / TXT / binary salvage)
- AI structuring via Google Gemini or DeepSeek
- Keyword fallback and mock mode when AI is unavailable

Run: uvicorn hireflow.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hireflow.api.routes import api_router
from hireflow.core.config import get_settings
from hireflow.services.providers.factory import provider_api_key

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="HireFlow Resume Parser",
    description="""
    Resume upload and AI-assisted parsing for the HireFlow job board.

    ## Features
    - **Upload**: PDF, DOC, DOCX, TXT (max 10MB)
    - **AI parsing**: Gemini or DeepSeek turn resume text into structured JSON
    - **Fallback**: email, phone and skills scraped with regex if AI fails
    - **Mock mode**: sample data when no API key is configured
    """,
    version="1.0.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check with the configured AI provider."""
    provider = settings.resume_provider
    return {
        "status": "healthy",
        "provider": provider,
        "mock_mode": not provider_api_key(settings, provider),
    }
