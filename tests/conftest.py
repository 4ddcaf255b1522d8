"""
Pytest fixtures and configuration for SEO Text Analyzer tests.
"""

import pytest

from seo_text_analyzer.models import OracleEntity, OraclePayload, OracleTopic
from seo_text_analyzer.oracle import OracleError


class FakeOracle:
    """Extraction oracle double that returns a fixed payload or raises."""

    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else OraclePayload()
        self.error = error
        self.calls = []

    async def extract(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def make_oracle():
    """Factory for FakeOracle instances."""
    return FakeOracle


@pytest.fixture
def paris_payload() -> OraclePayload:
    """Payload where an entity and a topic share the same text."""
    return OraclePayload(
        entities=[OracleEntity(entity_id="Paris", relevance_score=0.9)],
        topics=[OracleTopic(label="paris", score=0.6)],
    )


@pytest.fixture
def fake_oracle(paris_payload):
    """Oracle that always answers with the Paris payload."""
    return FakeOracle(payload=paris_payload)


@pytest.fixture
def failing_oracle():
    """Oracle that always fails."""
    return FakeOracle(error=OracleError("TextRazor request timed out after 10.0s"))


@pytest.fixture
def seo_article() -> str:
    """100-word text mentioning SEO three times, in 10 sentences."""
    sentences = [
        "SEO helps pages rank much higher in search results today",
        "Writers should plan every article around one clear main topic",
        "Good structure makes long content much easier for busy readers",
        "Search engines reward pages that answer real questions from users",
        "Teams often review drafts carefully before they publish them online",
        "A focused SEO strategy keeps the message clear and consistent",
        "Short paragraphs really improve scanning on small mobile phone screens",
        "Fresh updates signal that the page is still actively maintained",
        "Useful examples make abstract advice much more concrete for everyone",
        "Measure results and refine your SEO plan every single month",
    ]
    return ". ".join(sentences) + "."


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TextRazor environment variables."""
    for name in ("TEXTRAZOR_API_KEY", "TEXTRAZOR_API_URL", "TEXTRAZOR_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
