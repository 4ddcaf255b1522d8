"""
SEO Text Analyzer

Deterministic SEO feedback for a draft:
- Extracts ranked keywords from TextRazor entities and topics
- Scores readability, keyword density and content length
- Produces ordered improvement tips
- Inserts chosen keywords into preview text
"""

__version__ = "1.0.0"
__author__ = "SEO Text Analyzer Team"

from .config import AnalyzerConfig, FALLBACK_KEYWORDS

from .models import (
    CandidateKind,
    RawCandidate,
    Keyword,
    AnalysisReport,
    AnalysisResult,
    OracleEntity,
    OracleTopic,
    OraclePayload,
)

from .keywords import aggregate_keywords, keywords_from_payload

from .metrics import (
    count_words,
    count_sentences,
    readability_score,
    keyword_density,
)

from .tips import generate_improvement_tips

from .inserter import insert_keyword

from .oracle import ExtractionOracle, OracleError, TextRazorClient

from .analyzer import (
    MissingTextError,
    SEOAnalyzer,
    analyze_text,
    compose_analysis,
)

__all__ = [
    # Configuration
    "AnalyzerConfig",
    "FALLBACK_KEYWORDS",
    # Models
    "CandidateKind",
    "RawCandidate",
    "Keyword",
    "AnalysisReport",
    "AnalysisResult",
    "OracleEntity",
    "OracleTopic",
    "OraclePayload",
    # Keyword aggregation
    "aggregate_keywords",
    "keywords_from_payload",
    # Metrics
    "count_words",
    "count_sentences",
    "readability_score",
    "keyword_density",
    # Tips
    "generate_improvement_tips",
    # Keyword insertion
    "insert_keyword",
    # Extraction oracle
    "ExtractionOracle",
    "OracleError",
    "TextRazorClient",
    # Analysis
    "MissingTextError",
    "SEOAnalyzer",
    "analyze_text",
    "compose_analysis",
]
