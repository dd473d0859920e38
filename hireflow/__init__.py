"""
HireFlow Resume Parser
Resume text extraction and AI structuring for the HireFlow job board.

Architecture:
- Text extraction: PDF text runs, UTF-8 text, binary salvage
- AI structuring: one provider interface, Gemini and DeepSeek implementations
- Sanitization + fallback: always a fully shaped StructuredResume
"""

__version__ = "1.0.0"
