"""
Positional bonuses for haystack characters.

A match earns a bonus when it starts a path component, a word, a file
extension or a camelCase hump. The bonus for each position depends only on
the character before it, looked up on the original-case haystack.
"""

from typing import List

from fzyscore.matching.configuration import MatchConfiguration
from fzyscore.matching.units import Text, as_units, is_lower, is_upper

SLASH_SEPARATORS = frozenset('/\\')
WORD_SEPARATORS = frozenset('-_ ')
DOT_SEPARATORS = frozenset('.')


def precompute_bonus(config: MatchConfiguration, haystack: Text) -> List[float]:
    """
    Compute the bonus earned by a match at each haystack position.

    The position before the first character is treated as a '/', so a match
    at the very start of the haystack always gets the slash bonus.

    Args:
        config: Score weights.
        haystack: Candidate string, in its original case.

    Returns:
        One bonus per haystack character.
    """
    haystack = as_units(haystack)
    bonus = []
    last_char = '/'

    for char in haystack:
        if last_char in SLASH_SEPARATORS:
            bonus.append(config.slash_match_score)
        elif last_char in WORD_SEPARATORS:
            bonus.append(config.word_match_score)
        elif last_char in DOT_SEPARATORS:
            bonus.append(config.dot_match_score)
        elif is_lower(last_char) and is_upper(char):
            bonus.append(config.capital_match_score)
        else:
            bonus.append(0.0)
        last_char = char

    return bonus
