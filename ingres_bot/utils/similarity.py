"""String similarity measures used for fuzzy keyword and location matching."""

from rapidfuzz.distance import Levenshtein


def levenshtein_similarity(a: str, b: str) -> float:
    """1 - edit_distance / max(len(a), len(b)).

    Two empty strings are identical (1.0); one empty string scores 0.0.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    distance = Levenshtein.distance(a, b)
    return 1.0 - distance / max(len(a), len(b))


def jaccard_char_similarity(a: str, b: str) -> float:
    """Jaccard index over the distinct characters of both strings."""
    chars_a, chars_b = set(a), set(b)
    union = chars_a | chars_b
    if not union:
        return 0.0
    return len(chars_a & chars_b) / len(union)


def length_ratio_similarity(a: str, b: str) -> float:
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - abs(len(a) - len(b)) / longest


def combined_similarity(a: str, b: str) -> float:
    """Weighted blend: 0.6 Levenshtein + 0.3 character Jaccard + 0.1 length ratio."""
    return (
        0.6 * levenshtein_similarity(a, b)
        + 0.3 * jaccard_char_similarity(a, b)
        + 0.1 * length_ratio_similarity(a, b)
    )
