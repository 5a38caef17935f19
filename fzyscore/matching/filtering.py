"""
Batch helpers that run the scorer over many candidate strings.
"""

import logging
from typing import Iterable, List

from pydantic import BaseModel, Field

from fzyscore.matching.configuration import MatchConfiguration
from fzyscore.matching.core import has_match, positions
from fzyscore.matching.units import Text

logger = logging.getLogger(__name__)


class FilterResult(BaseModel):
    """A candidate that matched the needle."""
    index: int = Field(..., ge=1, description="One-based index of the candidate in the input sequence.")
    positions: List[int] = Field(default_factory=list, description="One-based haystack index matched by each needle character.")
    score: float = Field(..., description="Score of the match, as returned by score().")


def filter_haystacks(config: MatchConfiguration, needle: Text, haystacks: Iterable[Text]) -> List[FilterResult]:
    """
    Keep the haystacks that contain ``needle`` as a subsequence.

    Results are returned in input order, each with its match positions and
    score.
    """
    results = []
    total = 0
    for index, haystack in enumerate(haystacks, start=1):
        total += 1
        if not has_match(config, needle, haystack):
            continue
        matched, match_score = positions(config, needle, haystack)
        results.append(FilterResult(index=index, positions=matched, score=match_score))

    logger.debug(f"Filtered {total} haystack(s) for {needle!r}: {len(results)} matched")
    return results


def rank(config: MatchConfiguration, needle: Text, haystacks: Iterable[Text]) -> List[FilterResult]:
    """Like filter_haystacks, but best score first; ties keep their input order."""
    return sorted(filter_haystacks(config, needle, haystacks), key=lambda result: -result.score)
