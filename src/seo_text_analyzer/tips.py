"""
Improvement tip generation.

Rules are independent checks evaluated in a fixed order; every rule that
matches appends its tip. When none match, a single positive tip is returned
so the list is never empty.
"""

# Tip text is part of the report contract and must not change
TIP_SHORTEN_SENTENCES = "Consider using shorter sentences to improve readability."
TIP_TOO_SHORT = "Content is quite short. Adding more relevant content may improve SEO."
TIP_TOO_LONG = "Content is quite long. Consider breaking it into smaller sections with headings."
TIP_LOW_DENSITY = "Consider increasing the use of primary keywords (aim for 1-2%)."
TIP_KEYWORD_STUFFING = "Keyword density is too high, which may be seen as keyword stuffing."
TIP_ADD_HEADINGS = "Consider adding proper headings (H1, H2) to structure your content."
TIP_ADD_LINKS = "Adding relevant internal and external links can improve SEO."
TIP_LOOKS_GOOD = "Your content looks good! Keep focusing on quality and relevance."

MIN_READABILITY = 60
MIN_WORD_COUNT = 300
MAX_WORD_COUNT = 2000
MIN_KEYWORD_DENSITY = 0.5
MAX_KEYWORD_DENSITY = 3


def generate_improvement_tips(
    readability_score: int,
    word_count: int,
    keyword_density: float,
    text: str,
) -> list[str]:
    """
    Produce ordered improvement suggestions for a piece of content.

    Threshold comparisons are strict: a density of exactly 0.5 or 3.0
    triggers neither density tip.

    Args:
        readability_score: Score from 0-100.
        word_count: Number of words in the text.
        keyword_density: Primary keyword density as a percentage.
        text: Original text, checked for heading and link markup.

    Returns:
        List of tips, always at least one.
    """
    tips: list[str] = []

    if readability_score < MIN_READABILITY:
        tips.append(TIP_SHORTEN_SENTENCES)

    if word_count < MIN_WORD_COUNT:
        tips.append(TIP_TOO_SHORT)
    elif word_count > MAX_WORD_COUNT:
        tips.append(TIP_TOO_LONG)

    if keyword_density < MIN_KEYWORD_DENSITY:
        tips.append(TIP_LOW_DENSITY)
    elif keyword_density > MAX_KEYWORD_DENSITY:
        tips.append(TIP_KEYWORD_STUFFING)

    if not _has_headings(text):
        tips.append(TIP_ADD_HEADINGS)

    if not _has_links(text):
        tips.append(TIP_ADD_LINKS)

    if not tips:
        tips.append(TIP_LOOKS_GOOD)

    return tips


def _has_headings(text: str) -> bool:
    return "<h1>" in text or "<h2>" in text


def _has_links(text: str) -> bool:
    return "http" in text or "<a" in text
