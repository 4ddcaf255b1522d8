"""Tests for data models and oracle payload parsing."""

import pytest

from seo_text_analyzer.models import (
    AnalysisReport,
    AnalysisResult,
    CandidateKind,
    Keyword,
    OraclePayload,
    RawCandidate,
)


class TestKeyword:
    """Tests for the Keyword model."""

    def test_from_candidate_converts_score(self):
        candidate = RawCandidate(text="Paris", score=0.9, kind=CandidateKind.ENTITY)

        assert Keyword.from_candidate(candidate) == Keyword("Paris", 90)

    def test_is_immutable(self):
        kw = Keyword("SEO", 50)

        with pytest.raises(AttributeError):
            kw.relevance = 60

    def test_key_is_case_insensitive(self):
        assert Keyword("Paris", 90).key == Keyword("PARIS", 10).key


class TestAnalysisResultSerialization:
    """Tests for the camelCase result dictionary."""

    def test_to_dict_shape(self):
        result = AnalysisResult(
            keywords=[Keyword("SEO", 90)],
            analysis=AnalysisReport(
                readability_score=75,
                keyword_density=1.25,
                word_count=400,
                improvement_tips=["Tip"],
            ),
        )

        assert result.to_dict() == {
            "keywords": [{"text": "SEO", "relevance": 90}],
            "analysis": {
                "readabilityScore": 75,
                "keywordDensity": 1.25,
                "wordCount": 400,
                "improvementTips": ["Tip"],
            },
        }

    def test_primary_keyword(self):
        report = AnalysisReport(readability_score=0, keyword_density=0, word_count=1)

        assert AnalysisResult(keywords=[], analysis=report).primary_keyword is None
        assert AnalysisResult(
            keywords=[Keyword("a", 2), Keyword("b", 1)], analysis=report
        ).primary_keyword == Keyword("a", 2)


class TestOraclePayloadFromResponse:
    """Tests for parsing TextRazor response bodies."""

    def test_full_response(self):
        body = {
            "ok": True,
            "response": {
                "entities": [
                    {"entityId": "Paris", "relevanceScore": 0.9, "confidenceScore": 5.2},
                    {"entityId": "France", "relevanceScore": 0.4},
                ],
                "topics": [{"label": "Tourism", "score": 0.8}],
            },
        }

        payload = OraclePayload.from_response(body)

        assert [e.entity_id for e in payload.entities] == ["Paris", "France"]
        assert payload.entities[0].relevance_score == 0.9
        assert [(t.label, t.score) for t in payload.topics] == [("Tourism", 0.8)]

    @pytest.mark.parametrize("body", [
        {},
        {"response": None},
        {"response": {}},
        {"response": {"entities": None, "topics": None}},
        {"response": "unexpected"},
        {"response": {"entities": 5, "topics": "Tourism"}},
        {"response": {"entities": {"entityId": "Paris"}, "topics": True}},
    ])
    def test_missing_collections_are_empty(self, body):
        payload = OraclePayload.from_response(body)

        assert payload.entities == []
        assert payload.topics == []

    def test_unusable_entries_skipped(self):
        body = {
            "response": {
                "entities": [
                    {"relevanceScore": 0.9},
                    {"entityId": "", "relevanceScore": 0.9},
                    {"entityId": "NoScore"},
                    {"entityId": "BadScore", "relevanceScore": "high"},
                    "not a dict",
                    {"entityId": "Good", "relevanceScore": 1},
                ],
                "topics": [
                    {"label": "NoScore"},
                    {"score": 0.7},
                    {"label": "Flag", "score": True},
                    {"label": "Good topic", "score": 0.7},
                ],
            }
        }

        payload = OraclePayload.from_response(body)

        assert [e.entity_id for e in payload.entities] == ["Good"]
        assert [t.label for t in payload.topics] == ["Good topic"]

    def test_non_finite_scores_skipped(self):
        """Test that infinite, NaN and overflowing scores are dropped."""
        body = {
            "response": {
                "entities": [
                    {"entityId": "Inf", "relevanceScore": float("inf")},
                    {"entityId": "NaN", "relevanceScore": float("nan")},
                    {"entityId": "Huge", "relevanceScore": 10 ** 400},
                    {"entityId": "Paris", "relevanceScore": 0.9},
                ],
                "topics": [{"label": "Negative inf", "score": float("-inf")}],
            }
        }

        payload = OraclePayload.from_response(body)

        assert [e.entity_id for e in payload.entities] == ["Paris"]
        assert payload.topics == []

    def test_candidates_entities_first(self, paris_payload):
        candidates = paris_payload.candidates()

        assert [(c.text, c.kind) for c in candidates] == [
            ("Paris", CandidateKind.ENTITY),
            ("paris", CandidateKind.TOPIC),
        ]
