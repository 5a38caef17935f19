"""
fzy-style fuzzy matching: scores and match positions for a needle against
candidate strings.

This package provides the configuration model, the scoring engine and the
batch filtering helpers built on top of it.
"""

from .configuration import InvalidConfiguration, MatchConfiguration, create_configuration, is_configuration
from .bonus import precompute_bonus
from .matrix import MAX_SCORE, MIN_SCORE, compute
from .core import (
    get_max_length,
    get_max_score,
    get_min_score,
    get_score_ceiling,
    get_score_floor,
    has_match,
    is_perfect_match,
    positions,
    score,
)
from .filtering import FilterResult, filter_haystacks, rank

__all__ = [
    "InvalidConfiguration",
    "MatchConfiguration",
    "create_configuration",
    "is_configuration",
    "precompute_bonus",
    "compute",
    "MIN_SCORE",
    "MAX_SCORE",
    "has_match",
    "is_perfect_match",
    "score",
    "positions",
    "get_min_score",
    "get_max_score",
    "get_max_length",
    "get_score_floor",
    "get_score_ceiling",
    "FilterResult",
    "filter_haystacks",
    "rank",
]
