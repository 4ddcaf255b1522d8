"""
Extraction oracle clients.

The analyzer depends only on the ExtractionOracle protocol: a single async
extract(text) call that returns an OraclePayload or raises OracleError.
TextRazorClient is the production implementation.
"""

import logging
from typing import Optional, Protocol

import httpx

from .config import AnalyzerConfig
from .models import OraclePayload

logger = logging.getLogger(__name__)


class OracleError(Exception):
    """Raised when the extraction oracle cannot produce a result."""
    pass


class ExtractionOracle(Protocol):
    """Anything that can extract entities and topics from text."""

    async def extract(self, text: str) -> OraclePayload:
        ...


class TextRazorClient:
    """
    Client for the TextRazor entity/topic extraction API.

    Makes exactly one request per call with a bounded timeout. Every failure
    (missing key, timeout, transport error, non-2xx status, unparseable
    body) is reported as OracleError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[AnalyzerConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the TextRazor client.

        Args:
            api_key: TextRazor API key. Falls back to the config's key.
            config: Analyzer configuration; read from the environment if None.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config or AnalyzerConfig.from_env()
        self.api_key = api_key or self.config.api_key
        self._transport = transport

    @property
    def is_available(self) -> bool:
        """Check if the client has an API key to call TextRazor with."""
        return bool(self.api_key)

    async def extract(self, text: str) -> OraclePayload:
        """
        Send text to TextRazor and parse the entities and topics.

        Args:
            text: Text to analyze.

        Returns:
            OraclePayload; missing collections in the response are empty.

        Raises:
            OracleError: If the request fails for any reason.
        """
        if not self.is_available:
            raise OracleError("TextRazor API key not set. Set the TEXTRAZOR_API_KEY environment variable.")

        headers = {"x-textrazor-key": self.api_key}
        data = {
            "text": text,
            "extractors": ",".join(self.config.extractors),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.config.api_url, data=data, headers=headers)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise OracleError(f"TextRazor request timed out after {self.config.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise OracleError(f"TextRazor returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise OracleError(f"TextRazor request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise OracleError(f"TextRazor returned invalid JSON: {e}") from e

        if not isinstance(body, dict):
            raise OracleError("TextRazor response is not a JSON object")

        payload = OraclePayload.from_response(body)
        logger.debug(
            f"TextRazor returned {len(payload.entities)} entities and {len(payload.topics)} topics"
        )
        return payload
