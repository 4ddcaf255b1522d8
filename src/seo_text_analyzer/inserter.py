"""
Keyword insertion for preview text.

A sentence-level heuristic, not grammar-aware: the keyword is spliced as a
whole word into the first sentence that is long enough and does not already
mention it.
"""

SENTENCE_SEPARATOR = ". "
MIN_WORDS_FOR_INSERTION = 6
MAX_INSERT_POSITION = 3


def insert_keyword(text: str, keyword: str) -> str:
    """
    Insert a keyword into the first eligible sentence of the text.

    A sentence is eligible when it does not already contain the keyword
    (case-insensitive substring check) and has more than 5 space-separated
    words. The keyword goes in at word index min(3, word_count // 3). At most
    one insertion is made per call.

    Args:
        text: Current preview text.
        keyword: Keyword to insert.

    Returns:
        Updated text, or the original text if no sentence is eligible.
    """
    if not keyword or not keyword.strip():
        return text

    sentences = text.split(SENTENCE_SEPARATOR)
    keyword_lower = keyword.lower()
    inserted = False

    for i, sentence in enumerate(sentences):
        if inserted:
            break
        if keyword_lower in sentence.lower():
            continue

        words = sentence.split(" ")
        if len(words) < MIN_WORDS_FOR_INSERTION:
            continue

        position = min(MAX_INSERT_POSITION, len(words) // 3)
        words.insert(position, keyword)
        sentences[i] = " ".join(words)
        inserted = True

    if not inserted:
        return text
    return SENTENCE_SEPARATOR.join(sentences)
