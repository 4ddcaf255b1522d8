"""
Display grades for analysis metrics.

Maps raw report numbers onto the labels shown next to them in result views.
"""

from typing import Literal

ScoreClass = Literal["excellent", "good", "average", "poor"]
DensityClass = Literal["good", "warning"]

# Density range considered healthy for the primary keyword (percent)
GOOD_DENSITY_MIN = 0.5
GOOD_DENSITY_MAX = 2.5

KEYWORD_USAGE_TIPS = [
    "Use keywords naturally in your content",
    "Include keywords in headings where appropriate",
    "Aim for 1-2% keyword density for primary keywords",
    "Incorporate related terms and synonyms",
]


def score_class(score: int) -> ScoreClass:
    """Classify a readability score."""
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "average"
    return "poor"


def readability_label(score: int) -> str:
    """Human-readable description of a readability score."""
    if score >= 80:
        return "Very Easy to Read"
    if score >= 60:
        return "Easy to Read"
    if score >= 40:
        return "Fairly Difficult"
    return "Difficult to Read"


def density_class(density: float) -> DensityClass:
    """Classify primary keyword density."""
    if GOOD_DENSITY_MIN <= density <= GOOD_DENSITY_MAX:
        return "good"
    return "warning"


def content_length_label(word_count: int) -> str:
    """Describe what a piece of content of this length is suited for."""
    if word_count < 300:
        return "Too short for most SEO purposes"
    if word_count < 600:
        return "Good for social media"
    if word_count < 1200:
        return "Good for blog posts"
    return "Excellent for in-depth articles"
