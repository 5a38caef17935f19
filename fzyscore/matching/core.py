"""
Public scoring operations: subsequence test, score and match positions.

Scores are floats. ``MIN_SCORE`` (negative infinity) means "no usable match"
and ``MAX_SCORE`` (positive infinity) marks a case-normalized exact match;
every other score is finite and falls between ``get_score_floor`` and
``get_score_ceiling``. Positions are one-based haystack indices.
"""

from typing import List, Tuple

from fzyscore.matching.configuration import MatchConfiguration
from fzyscore.matching.matrix import MAX_SCORE, MIN_SCORE, compute
from fzyscore.matching.units import Text, as_units, fold_case


def has_match(config: MatchConfiguration, needle: Text, haystack: Text) -> bool:
    """
    Check whether ``needle`` is a subsequence of ``haystack``.

    Cheap enough to run over every candidate before paying for ``score`` or
    ``positions``.
    """
    needle = fold_case(config, as_units(needle))
    haystack = fold_case(config, as_units(haystack))

    offset = 0
    for char in needle:
        offset = haystack.find(char, offset) + 1
        if offset == 0:
            return False
    return True


def is_perfect_match(config: MatchConfiguration, needle: Text, haystack: Text) -> bool:
    """Check whether needle and haystack are equal after case folding."""
    return fold_case(config, as_units(needle)) == fold_case(config, as_units(haystack))


def _is_degenerate(config: MatchConfiguration, n: int, m: int) -> bool:
    return n == 0 or m == 0 or m > config.max_match_length or n > m


def score(config: MatchConfiguration, needle: Text, haystack: Text) -> float:
    """
    Score how well ``needle`` matches ``haystack``; higher is better.

    Returns ``MIN_SCORE`` for empty inputs, haystacks longer than
    ``max_match_length`` and needles longer than the haystack, and
    ``MAX_SCORE`` for an exact match. Callers should check ``has_match``
    first when the needle may not be a subsequence of the haystack.
    """
    needle = as_units(needle)
    haystack = as_units(haystack)
    n, m = len(needle), len(haystack)

    if _is_degenerate(config, n, m):
        return MIN_SCORE
    if is_perfect_match(config, needle, haystack):
        return MAX_SCORE

    _, M = compute(config, needle, haystack)
    return float(M[n - 1, m - 1])


def positions(config: MatchConfiguration, needle: Text, haystack: Text) -> Tuple[List[int], float]:
    """
    Find the haystack position matched by each needle character.

    Args:
        config: Score weights.
        needle: Query string.
        haystack: Candidate string.

    Returns:
        Tuple of (positions, score). ``positions`` holds one strictly
        increasing one-based index per needle character, or is empty when
        there is no match, in which case the score is ``MIN_SCORE``.
    """
    needle = as_units(needle)
    haystack = as_units(haystack)
    n, m = len(needle), len(haystack)

    if _is_degenerate(config, n, m):
        return [], MIN_SCORE
    if is_perfect_match(config, needle, haystack):
        return list(range(1, n + 1)), MAX_SCORE

    D, M = compute(config, needle, haystack)
    final_score = float(M[n - 1, m - 1])
    if final_score == MIN_SCORE:
        return [], MIN_SCORE

    consecutive = config.consecutive_match_score

    matched = [0] * n
    match_required = False
    j = m - 1
    for i in range(n - 1, -1, -1):
        # Rightmost position first; once inside a consecutive run any valid D entry continues it
        while j >= 0:
            if D[i, j] != MIN_SCORE and (match_required or D[i, j] == M[i, j]):
                match_required = (
                    i > 0 and j > 0
                    and M[i, j] == D[i - 1, j - 1] + consecutive
                )
                matched[i] = j + 1
                j -= 1
                break
            j -= 1

    return matched, final_score


def get_min_score() -> float:
    return MIN_SCORE


def get_max_score() -> float:
    return MAX_SCORE


def get_max_length(config: MatchConfiguration) -> int:
    return config.max_match_length


def get_score_floor(config: MatchConfiguration) -> float:
    """Lowest finite score a haystack of ``max_match_length`` characters can get."""
    return config.max_match_length * config.gap_inner_score


def get_score_ceiling(config: MatchConfiguration) -> float:
    """Highest finite score a haystack of ``max_match_length`` characters can get."""
    return config.max_match_length * config.consecutive_match_score
