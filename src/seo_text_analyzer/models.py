"""
Data models for SEO Text Analyzer.

This module defines the core data structures passed between the keyword
aggregator, the scoring functions and the HTTP/CLI layers.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, matching browser-side Math.round."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class CandidateKind(Enum):
    """Source of a raw keyword candidate."""
    ENTITY = "entity"
    TOPIC = "topic"


@dataclass
class RawCandidate:
    """A keyword candidate as produced by the extraction oracle."""
    text: str
    score: float  # Entity relevance or topic score, 0-1
    kind: CandidateKind


@dataclass(frozen=True)
class Keyword:
    """A ranked keyword with integer relevance (0-100)."""
    text: str
    relevance: int

    @classmethod
    def from_candidate(cls, candidate: RawCandidate) -> "Keyword":
        """Create a keyword, converting the 0-1 score to a 0-100 relevance."""
        return cls(
            text=candidate.text,
            relevance=int(round_half_up(candidate.score * 100)),
        )

    @property
    def key(self) -> str:
        """Case-insensitive identity used for deduplication."""
        return self.text.lower()

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "relevance": self.relevance}


@dataclass
class AnalysisReport:
    """Scoring bundle for a piece of text."""
    readability_score: int
    keyword_density: float
    word_count: int
    improvement_tips: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys consumers expect."""
        return {
            "readabilityScore": self.readability_score,
            "keywordDensity": self.keyword_density,
            "wordCount": self.word_count,
            "improvementTips": list(self.improvement_tips),
        }


@dataclass
class AnalysisResult:
    """Keywords plus analysis report, returned once per request."""
    keywords: list[Keyword]
    analysis: AnalysisReport

    @property
    def primary_keyword(self) -> Optional[Keyword]:
        """The highest-ranked keyword, if any."""
        return self.keywords[0] if self.keywords else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "keywords": [kw.to_dict() for kw in self.keywords],
            "analysis": self.analysis.to_dict(),
        }


# =============================================================================
# Extraction oracle payload
# =============================================================================


def _coerce_score(value: Any) -> Optional[float]:
    """Return value as float, or None if it is not a usable number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        score = float(value)
    except OverflowError:
        return None
    if not math.isfinite(score):
        return None
    return score


def _as_list(value: Any) -> list:
    """Return value if it is a list, otherwise an empty list."""
    return value if isinstance(value, list) else []


@dataclass
class OracleEntity:
    """A named entity returned by the extraction oracle."""
    entity_id: str
    relevance_score: float


@dataclass
class OracleTopic:
    """A topic label returned by the extraction oracle."""
    label: str
    score: float


@dataclass
class OraclePayload:
    """
    Entity/topic extraction result.

    Both collections default to empty so a payload with missing fields
    simply yields fewer keyword candidates.
    """
    entities: list[OracleEntity] = field(default_factory=list)
    topics: list[OracleTopic] = field(default_factory=list)

    @classmethod
    def from_response(cls, body: dict[str, Any]) -> "OraclePayload":
        """
        Build a payload from a TextRazor-style JSON body.

        Entries without text or without a finite numeric score are skipped,
        as are collections that are not lists.

        Args:
            body: Decoded JSON object, expected to carry a "response" key.

        Returns:
            OraclePayload with whatever entities and topics were usable.
        """
        response = body.get("response") or {}
        if not isinstance(response, dict):
            response = {}

        entities = []
        for item in _as_list(response.get("entities")):
            if not isinstance(item, dict):
                continue
            entity_id = item.get("entityId")
            score = _coerce_score(item.get("relevanceScore"))
            if not entity_id or score is None:
                continue
            entities.append(OracleEntity(entity_id=str(entity_id), relevance_score=score))

        topics = []
        for item in _as_list(response.get("topics")):
            if not isinstance(item, dict):
                continue
            label = item.get("label")
            score = _coerce_score(item.get("score"))
            if not label or score is None:
                continue
            topics.append(OracleTopic(label=str(label), score=score))

        return cls(entities=entities, topics=topics)

    def candidates(self) -> list[RawCandidate]:
        """Flatten into raw candidates, entities first."""
        result = [
            RawCandidate(text=e.entity_id, score=e.relevance_score, kind=CandidateKind.ENTITY)
            for e in self.entities
        ]
        result.extend(
            RawCandidate(text=t.label, score=t.score, kind=CandidateKind.TOPIC)
            for t in self.topics
        )
        return result
