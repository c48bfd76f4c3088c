"""Confidence scoring for names and endpoint paths."""

# Per-segment scores used by path_similarity()
EXACT_SEGMENT_SCORE = 1.0
PARAMETER_SEGMENT_SCORE = 0.8
SIMILAR_SEGMENT_SCORE = 0.6
SIMILAR_SEGMENT_THRESHOLD = 0.7


def levenshtein_distance(s: str, t: str) -> int:
    """Standard Levenshtein distance between two strings."""
    m, n = len(s), len(t)
    if m == 0:
        return n
    if n == 0:
        return m

    # Space-optimized DP (two rows)
    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,  # deletion
                curr[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev, curr = curr, prev

    return prev[n]


def string_similarity(a: str, b: str) -> float:
    """Case-insensitive similarity of two strings in [0, 1].

    Args:
        a: First string
        b: Second string

    Returns:
        1.0 for identical strings, 0.0 when either is empty, otherwise one
        minus the edit distance normalized by the longer length
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    distance = levenshtein_distance(a.lower(), b.lower())
    return 1.0 - distance / max(len(a), len(b))


def is_parameter_segment(segment: str) -> bool:
    """Check if a path segment is a template placeholder such as ``{id}``."""
    return segment.startswith("{") and segment.endswith("}")


def path_similarity(path1: str, path2: str) -> float:
    """Similarity of two endpoint path templates in [0, 1].

    Paths are compared segment by segment over the longer of the two.
    Equal segments score 1.0, two placeholders score 0.8, and segments whose
    string similarity exceeds 0.7 score 0.6. The sum is averaged over the
    longer segment count.

    Example:
        >>> path_similarity("/users/{id}", "/users/{userId}")
        0.9
    """
    segments1 = [s for s in path1.split("/") if s]
    segments2 = [s for s in path2.split("/") if s]

    if not segments1 and not segments2:
        return 1.0

    max_length = max(len(segments1), len(segments2))
    score = 0.0

    for i in range(max_length):
        seg1 = segments1[i] if i < len(segments1) else ""
        seg2 = segments2[i] if i < len(segments2) else ""

        if seg1 == seg2:
            score += EXACT_SEGMENT_SCORE
        elif is_parameter_segment(seg1) and is_parameter_segment(seg2):
            score += PARAMETER_SEGMENT_SCORE
        elif string_similarity(seg1, seg2) > SIMILAR_SEGMENT_THRESHOLD:
            score += SIMILAR_SEGMENT_SCORE

    return score / max_length
