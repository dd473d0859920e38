#!/usr/bin/env python3
"""
Resume Parsing Script

Parses a local resume file through the full pipeline and prints the result:
1. Text extraction
2. AI structuring (Gemini or DeepSeek)
3. Keyword fallback / mock mode when AI is unavailable

Without an API key in .env the result is the fixed sample record.

Run: python scripts/parse_resume.py path/to/resume.pdf [--provider deepseek]
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, '.')

from hireflow.core.config import get_settings
from hireflow.core.errors import ResumeParsingError
from hireflow.services.ai_parsing_service import ResumeParsingService
from hireflow.services.providers.factory import available_providers, create_provider


async def parse_file(path: Path, provider_name: str) -> int:
    settings = get_settings()
    provider = create_provider(settings, provider_name)
    parser = ResumeParsingService(settings, provider=provider)

    print("=" * 60)
    print(f"PARSING {path.name}")
    print(f"Provider: {provider_name} ({'mock mode' if parser.mock_mode else 'live'})")
    print("=" * 60)

    try:
        result = await parser.parse(path.read_bytes(), path.name)
    except ResumeParsingError as e:
        print(f"\n❌ Parsing failed: {e}")
        return 1
    finally:
        await parser.aclose()

    data = result.structured_data
    print(f"\nSource: {result.source.value}")
    if result.error:
        print(f"Fallback cause: {result.error}")
    if result.truncated:
        print("⚠️  Resume text was truncated before sending to the model")
    print(f"Name: {data.name}")
    print(f"Email: {data.email}")
    print(f"Skills ({len(data.skills)}): {data.skills}")
    print(f"Experience entries: {len(data.experience)}")
    print(f"Education entries: {len(data.education)}")

    print("\n📋 Full result:")
    print(json.dumps(result.model_dump(by_alias=True, mode="json"), indent=2))
    return 0


def main() -> int:
    arg_parser = argparse.ArgumentParser(description="Parse a resume file")
    arg_parser.add_argument("file", type=Path)
    arg_parser.add_argument(
        "--provider",
        choices=available_providers(),
        default=get_settings().resume_provider,
    )
    args = arg_parser.parse_args()

    if not args.file.is_file():
        print(f"❌ File not found: {args.file}")
        return 1

    logging.basicConfig(level=get_settings().log_level.upper())
    return asyncio.run(parse_file(args.file, args.provider))


if __name__ == "__main__":
    sys.exit(main())
