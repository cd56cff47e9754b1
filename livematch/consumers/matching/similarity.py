"""Token-set similarity for team and league names."""

from livematch.consumers.matching.normalizer import normalize_name


def similarity(a: str | None, b: str | None) -> float:
    """Jaccard similarity of the word sets of two names.

    Both inputs are normalized first. Identical names score 1.0,
    two empty names score 0.0.

    Returns:
        Score in [0, 1], symmetric in its arguments
    """
    a_norm = normalize_name(a)
    b_norm = normalize_name(b)

    if not a_norm and not b_norm:
        return 0.0
    if a_norm == b_norm:
        return 1.0

    a_words = set(a_norm.split())
    b_words = set(b_norm.split())
    union = a_words | b_words
    if not union:
        return 0.0
    return len(a_words & b_words) / len(union)
