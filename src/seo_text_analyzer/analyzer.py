"""
Analysis orchestration.

Combines keyword aggregation, readability, density and tip generation into
a single AnalysisResult. When the extraction oracle is missing or fails,
the same scoring pipeline runs over the configured fallback keywords, so a
caller always receives a well-formed report.
"""

import asyncio
import logging
from typing import Optional, Sequence

from .config import AnalyzerConfig
from .keywords import keywords_from_payload
from .metrics import count_sentences, count_words, keyword_density, readability_score
from .models import AnalysisReport, AnalysisResult, Keyword
from .oracle import ExtractionOracle, OracleError
from .tips import generate_improvement_tips

logger = logging.getLogger(__name__)


class MissingTextError(ValueError):
    """Raised when analysis is requested for empty text."""
    pass


def compose_analysis(text: str, keywords: Sequence[Keyword]) -> AnalysisResult:
    """
    Score text against an already ranked keyword list.

    Args:
        text: Original text (non-empty).
        keywords: Ranked keywords; the first one is treated as primary.

    Returns:
        AnalysisResult with the keywords and the computed report.
    """
    word_count = count_words(text)
    sentence_count = count_sentences(text)

    readability = readability_score(word_count, sentence_count)
    density = keyword_density(text, keywords, word_count=word_count)
    tips = generate_improvement_tips(readability, word_count, density, text)

    return AnalysisResult(
        keywords=list(keywords),
        analysis=AnalysisReport(
            readability_score=readability,
            keyword_density=density,
            word_count=word_count,
            improvement_tips=tips,
        ),
    )


class SEOAnalyzer:
    """
    Analyzes text for SEO using an injectable extraction oracle.

    The oracle is called once per analysis with no retry. Any OracleError
    switches the request to the fallback keyword set.
    """

    def __init__(
        self,
        oracle: Optional[ExtractionOracle] = None,
        config: Optional[AnalyzerConfig] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            oracle: Extraction oracle. None means every analysis is a fallback.
            config: Analyzer configuration; defaults are used if None.
        """
        self.oracle = oracle
        self.config = config or AnalyzerConfig()

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze text, extracting keywords through the oracle when possible.

        Args:
            text: Text to analyze.

        Returns:
            AnalysisResult; identical in shape for live and fallback paths.

        Raises:
            MissingTextError: If text is empty.
        """
        if not text:
            raise MissingTextError("Text is required")

        if self.oracle is None:
            logger.info("No extraction oracle configured, using fallback keywords")
            return self.fallback_analysis(text)

        try:
            payload = await self.oracle.extract(text)
        except OracleError as e:
            logger.warning(f"Extraction oracle failed, using fallback keywords: {e}")
            return self.fallback_analysis(text)

        keywords = keywords_from_payload(
            payload,
            threshold=self.config.relevance_threshold,
            max_keywords=self.config.max_keywords,
        )
        result = compose_analysis(text, keywords)
        logger.info(
            f"Analyzed {result.analysis.word_count} words: "
            f"{len(keywords)} keywords, readability {result.analysis.readability_score}"
        )
        return result

    def fallback_analysis(self, text: str) -> AnalysisResult:
        """Run the scoring pipeline over the fixed fallback keyword set."""
        return compose_analysis(text, self.config.fallback_keywords)


def analyze_text(
    text: str,
    oracle: Optional[ExtractionOracle] = None,
    config: Optional[AnalyzerConfig] = None,
) -> AnalysisResult:
    """
    Synchronous convenience wrapper around SEOAnalyzer.analyze.

    Must not be called from inside a running event loop.
    """
    analyzer = SEOAnalyzer(oracle=oracle, config=config)
    return asyncio.run(analyzer.analyze(text))
