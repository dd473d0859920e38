"""Test helpers: sample data, a scripted provider and a tiny PDF builder."""

import io
from typing import List, Optional, Sequence, Union

from hireflow.core.errors import ProviderError
from hireflow.services.providers.base import ResumeStructuringProvider


SAMPLE_RESUME_JSON = {
    "name": "Priya Sharma",
    "email": "priya.sharma@example.com",
    "phone": "+91-9876543210",
    "summary": "Software engineer with 2 years of full-stack experience.",
    "skills": ["Python", "React", "PostgreSQL"],
    "experience": [
        {
            "title": "Software Engineer",
            "company": "TechCorp Solutions",
            "startDate": "2022-06",
            "endDate": None,
            "current": True,
            "description": "Built REST APIs with FastAPI.",
        }
    ],
    "education": [
        {
            "degree": "B.Tech",
            "institution": "IIT Delhi",
            "fieldOfStudy": "Computer Science",
            "startDate": "2018",
            "endDate": "2022",
            "current": False,
        }
    ],
    "certifications": [{"name": "AWS Certified Developer", "issuer": "Amazon", "date": "2023"}],
    "languages": [{"language": "English", "proficiency": "Fluent"}],
}

SAMPLE_RESUME_TEXT = (
    "PRIYA SHARMA\n"
    "Email: priya.sharma@example.com | Phone: +91-9876543210\n"
    "SKILLS: Python, React, PostgreSQL, Docker\n"
)


Reply = Union[str, Exception]


class FakeProvider(ResumeStructuringProvider):
    """Provider whose completions come from a scripted list of replies."""

    name = "fake"

    def __init__(self, replies: Sequence[Reply] = (), **kwargs):
        kwargs.setdefault("model", "fake-primary")
        kwargs.setdefault("fallback_model", "fake-fallback")
        super().__init__(api_key="test-key", **kwargs)
        self.replies: List[Reply] = list(replies)
        self.calls: List[dict] = []
        self.closed = False

    async def _complete(self, system_prompt: str, prompt: str, model: str) -> str:
        self.calls.append({"system": system_prompt, "prompt": prompt, "model": model})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def aclose(self) -> None:
        self.closed = True


def model_not_found(model: str = "fake-primary") -> ProviderError:
    return ProviderError("fake", ProviderError.KIND_MODEL_NOT_FOUND, "model not found", model)


def make_pdf(lines: Optional[Sequence[str]] = None) -> bytes:
    """
    Build a one-page PDF by hand. With lines, each is drawn as a text run;
    without, the page only holds a line drawing (no text at all).
    """
    if lines:
        runs = " ".join(f"({line}) Tj 0 -16 Td" for line in lines)
        operations = f"BT /F1 12 Tf 72 720 Td {runs} ET"
    else:
        operations = "0 0 m 200 200 l S"
    stream = operations.encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Length %d >>\nstream\n%s\nendstream" % (len(stream), stream),
    ]

    buffer = io.BytesIO()
    buffer.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(buffer.tell())
        buffer.write(b"%d 0 obj\n%s\nendobj\n" % (number, body))

    xref_at = buffer.tell()
    buffer.write(b"xref\n0 %d\n" % (len(objects) + 1))
    buffer.write(b"0000000000 65535 f \n")
    for offset in offsets:
        buffer.write(b"%010d 00000 n \n" % offset)
    buffer.write(b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1))
    buffer.write(b"startxref\n%d\n%%%%EOF\n" % xref_at)
    return buffer.getvalue()
