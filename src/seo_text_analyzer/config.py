# -*- coding: utf-8 -*-
"""
Centralized configuration for SEO Text Analyzer.

This module provides the configuration dataclass that controls keyword
aggregation, the extraction oracle connection, and the fallback keyword
set used when the oracle cannot be reached.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .models import Keyword


# Generic SEO terms reported when no extraction result is available
FALLBACK_KEYWORDS: tuple[Keyword, ...] = (
    Keyword("SEO optimization", 95),
    Keyword("content marketing", 88),
    Keyword("search engine", 82),
    Keyword("keyword research", 78),
    Keyword("digital marketing", 75),
    Keyword("web content", 70),
)

DEFAULT_TEXTRAZOR_URL = "https://api.textrazor.com/"

# Extraction facets requested from TextRazor
DEFAULT_EXTRACTORS: tuple[str, ...] = (
    "entities",
    "topics",
    "words",
    "phrases",
    "relations",
    "entailments",
    "senses",
)


@dataclass
class AnalyzerConfig:
    """
    Configuration for text analysis.

    Attributes:
        relevance_threshold: Candidates must score strictly above this (0-1)
            to become keywords.
        max_keywords: Maximum number of ranked keywords in a result.

        api_key: TextRazor API key. None means the oracle is not configured
            and every analysis uses the fallback keyword set.
        api_url: TextRazor endpoint.
        timeout: Oracle request timeout in seconds. A single attempt is made.
        extractors: Extraction facets requested from the oracle.

        fallback_keywords: Keywords reported when the oracle is unavailable.
    """

    # Keyword aggregation
    relevance_threshold: float = 0.5
    max_keywords: int = 10

    # Extraction oracle
    api_key: Optional[str] = None
    api_url: str = DEFAULT_TEXTRAZOR_URL
    timeout: float = 10.0
    extractors: tuple[str, ...] = DEFAULT_EXTRACTORS

    # Fallback path
    fallback_keywords: tuple[Keyword, ...] = field(default=FALLBACK_KEYWORDS)

    @property
    def has_api_key(self) -> bool:
        """Check if an oracle API key is configured."""
        return bool(self.api_key)

    @classmethod
    def from_env(cls, **overrides) -> "AnalyzerConfig":
        """
        Build a config from environment variables.

        Reads TEXTRAZOR_API_KEY, TEXTRAZOR_API_URL and TEXTRAZOR_TIMEOUT.
        Keyword arguments override both the environment and the defaults.
        """
        values: dict = {
            "api_key": os.environ.get("TEXTRAZOR_API_KEY") or None,
            "api_url": os.environ.get("TEXTRAZOR_API_URL") or DEFAULT_TEXTRAZOR_URL,
        }
        timeout = os.environ.get("TEXTRAZOR_TIMEOUT")
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError:
                raise ValueError(f"TEXTRAZOR_TIMEOUT must be a number, got {timeout!r}")
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
