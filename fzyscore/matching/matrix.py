"""
The dynamic-programming core of the scorer.

Two ``n x m`` matrices are filled row by row, one row per needle character:

* ``D[i, j]`` is the best score of an alignment of ``needle[:i+1]`` whose last
  character is matched exactly at ``haystack[j]`` (``MIN_SCORE`` if there is
  none).
* ``M[i, j]`` is the best score of an alignment of ``needle[:i+1]`` that only
  uses haystack positions up to ``j``.

Both are contiguous row-major float64 arrays. The traceback in
``fzyscore.matching.core`` compares their entries for exact equality, so the
recurrence below must not be reordered.
"""

from typing import Tuple

import numpy as np

from fzyscore.matching.bonus import precompute_bonus
from fzyscore.matching.configuration import MatchConfiguration
from fzyscore.matching.units import Text, as_units, fold_case

MIN_SCORE = float('-inf')
MAX_SCORE = float('inf')


def compute(config: MatchConfiguration, needle: Text, haystack: Text) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the ``(D, M)`` score matrices for ``needle`` against ``haystack``.

    Bonuses are taken from the original-case haystack; character comparison
    happens after case folding.

    Returns:
        Tuple of (D, M), each of shape ``(len(needle), len(haystack))``.
    """
    needle = as_units(needle)
    haystack = as_units(haystack)
    n, m = len(needle), len(haystack)

    bonus = precompute_bonus(config, haystack)
    needle = fold_case(config, needle)
    haystack = fold_case(config, haystack)

    D = np.full((n, m), MIN_SCORE, dtype=np.float64)
    M = np.full((n, m), MIN_SCORE, dtype=np.float64)
    if n == 0 or m == 0:
        return D, M

    bonus = np.asarray(bonus, dtype=np.float64)
    haystack_chars = np.array(list(haystack))
    leading = np.arange(m) * config.gap_leading_score + bonus

    for i in range(n):
        matches = haystack_chars == needle[i]
        gap_score = config.gap_trailing_score if i == n - 1 else config.gap_inner_score

        if i == 0:
            candidates = leading
        else:
            # Column 0 has nothing to extend from once past the first needle character
            candidates = np.full(m, MIN_SCORE, dtype=np.float64)
            candidates[1:] = np.maximum(
                M[i - 1, :-1] + bonus[1:],
                D[i - 1, :-1] + config.consecutive_match_score,
            )
        D[i] = np.where(matches, candidates, MIN_SCORE)

        # The running best decays by the gap penalty one step at a time, left to right
        prev_score = MIN_SCORE
        m_row = M[i]
        for j, score in enumerate(D[i].tolist()):
            prev_score = max(score, prev_score + gap_score)
            m_row[j] = prev_score

    return D, M
