"""Tests for the TextRazor extraction client."""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from seo_text_analyzer.analyzer import SEOAnalyzer
from seo_text_analyzer.config import AnalyzerConfig
from seo_text_analyzer.oracle import OracleError, TextRazorClient


def make_client(handler, api_key="test-key", **config_kwargs) -> TextRazorClient:
    config = AnalyzerConfig(api_key=api_key, **config_kwargs)
    return TextRazorClient(config=config, transport=httpx.MockTransport(handler))


def run(coro):
    return asyncio.run(coro)


class TestTextRazorClient:
    """Tests for TextRazorClient.extract."""

    def test_sends_form_request_with_key(self):
        """Test the request method, URL, headers and form fields."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["key"] = request.headers.get("x-textrazor-key")
            captured["content_type"] = request.headers.get("content-type")
            captured["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"response": {}})

        run(make_client(handler).extract("Hello Paris"))

        assert captured["method"] == "POST"
        assert captured["url"] == "https://api.textrazor.com/"
        assert captured["key"] == "test-key"
        assert captured["content_type"] == "application/x-www-form-urlencoded"
        assert captured["form"]["text"] == ["Hello Paris"]
        assert captured["form"]["extractors"] == [
            "entities,topics,words,phrases,relations,entailments,senses"
        ]

    def test_parses_entities_and_topics(self):
        def handler(request):
            return httpx.Response(200, json={
                "response": {
                    "entities": [{"entityId": "Paris", "relevanceScore": 0.9}],
                    "topics": [{"label": "paris", "score": 0.6}],
                }
            })

        payload = run(make_client(handler).extract("Paris"))

        assert payload.entities[0].entity_id == "Paris"
        assert payload.topics[0].label == "paris"

    def test_missing_fields_are_not_an_error(self):
        """Test that a JSON object without response data gives an empty payload."""
        payload = run(make_client(lambda request: httpx.Response(200, json={"ok": True})).extract("x"))

        assert payload.entities == []
        assert payload.topics == []

    def test_missing_api_key(self, clean_env):
        client = TextRazorClient(config=AnalyzerConfig())

        assert client.is_available is False
        with pytest.raises(OracleError, match="API key"):
            run(client.extract("text"))

    def test_explicit_api_key_overrides_config(self):
        client = TextRazorClient(api_key="explicit", config=AnalyzerConfig())

        assert client.api_key == "explicit"
        assert client.is_available is True

    def test_non_success_status(self):
        def handler(request):
            return httpx.Response(401, json={"error": "Invalid key"})

        with pytest.raises(OracleError, match="HTTP 401"):
            run(make_client(handler).extract("text"))

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(OracleError, match="timed out"):
            run(make_client(handler, timeout=0.5).extract("text"))

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(OracleError, match="request failed"):
            run(make_client(handler).extract("text"))

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, text="<html>not json</html>")

        with pytest.raises(OracleError, match="invalid JSON"):
            run(make_client(handler).extract("text"))

    def test_non_object_json(self):
        def handler(request):
            return httpx.Response(200, json=["entities"])

        with pytest.raises(OracleError, match="not a JSON object"):
            run(make_client(handler).extract("text"))

    def test_custom_url(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={})

        run(make_client(handler, api_url="https://textrazor.test/v2").extract("text"))

        assert seen == ["https://textrazor.test/v2"]


class TestMalformedResponses:
    """Tests that odd but parseable bodies still produce a full report."""

    @pytest.mark.parametrize("content", [
        b'{"response": {"entities": 5}}',
        b'{"response": {"entities": "Paris", "topics": {"label": "x"}}}',
        b'{"response": {"entities": [{"entityId": "Paris", "relevanceScore": Infinity}]}}',
        b'{"response": {"topics": [{"label": "paris", "score": NaN}]}}',
    ])
    def test_analysis_completes(self, content):
        def handler(request):
            return httpx.Response(200, content=content, headers={"content-type": "application/json"})

        analyzer = SEOAnalyzer(oracle=make_client(handler))

        result = run(analyzer.analyze("Paris is nice."))

        assert result.keywords == []
        assert result.analysis.word_count == 3
        assert result.analysis.keyword_density == 0
