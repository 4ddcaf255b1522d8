"""
Keyword aggregation module.

Merges entity and topic candidates from the extraction oracle into a
deduplicated keyword list ranked by relevance.
"""

from typing import Iterable, Optional

from .models import CandidateKind, Keyword, OraclePayload, RawCandidate

DEFAULT_RELEVANCE_THRESHOLD = 0.5
DEFAULT_MAX_KEYWORDS = 10


def aggregate_keywords(
    candidates: Optional[Iterable[RawCandidate]],
    threshold: float = DEFAULT_RELEVANCE_THRESHOLD,
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
) -> list[Keyword]:
    """
    Build a ranked keyword list from raw candidates.

    Entities are considered before topics, so when both kinds yield the same
    text (compared case-insensitively) the entity and its casing win.

    Args:
        candidates: Raw candidates; None is treated as empty.
        threshold: Candidates must score strictly above this value.
        max_keywords: Maximum number of keywords returned.

    Returns:
        Keywords sorted by relevance, highest first. Ties keep the order in
        which they were encountered.
    """
    candidates = list(candidates or [])
    keywords: list[Keyword] = []
    seen: set[str] = set()

    for kind in (CandidateKind.ENTITY, CandidateKind.TOPIC):
        for candidate in candidates:
            if candidate.kind != kind or not candidate.score > threshold:
                continue
            keyword = Keyword.from_candidate(candidate)
            if keyword.key in seen:
                continue
            seen.add(keyword.key)
            keywords.append(keyword)

    # sorted() is stable, including with reverse=True
    ranked = sorted(keywords, key=lambda kw: kw.relevance, reverse=True)
    return ranked[:max_keywords]


def keywords_from_payload(
    payload: Optional[OraclePayload],
    threshold: float = DEFAULT_RELEVANCE_THRESHOLD,
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
) -> list[Keyword]:
    """Aggregate keywords straight from an oracle payload."""
    if payload is None:
        return []
    return aggregate_keywords(payload.candidates(), threshold, max_keywords)
