"""
Score weights and limits shared by every matching call.

A MatchConfiguration is built once (usually through create_configuration),
validated at construction time and never mutated afterwards, so a single
instance can be shared by any number of scoring calls.
"""

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

SCORE_FIELDS = (
    'consecutive_match_score',
    'gap_leading_score',
    'gap_inner_score',
    'gap_trailing_score',
    'slash_match_score',
    'word_match_score',
    'capital_match_score',
    'dot_match_score',
)


class InvalidConfiguration(ValueError):
    """Raised when configuration overrides are malformed or have the wrong types."""


class MatchConfiguration(BaseModel):
    """Tunable score constants and the haystack length limit."""

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    case_sensitive: StrictBool = Field(False, description="Compare characters without ASCII case folding.")
    consecutive_match_score: float = Field(1.0, description="Flat bonus for extending a run of adjacent matches.")
    gap_leading_score: float = Field(-0.005, description="Penalty per haystack character skipped before the first match.")
    gap_inner_score: float = Field(-0.01, description="Penalty per haystack character skipped between matches.")
    gap_trailing_score: float = Field(-0.005, description="Penalty per haystack character left after the last match.")
    slash_match_score: float = Field(0.9, description="Bonus for a match right after '/' or '\\'.")
    word_match_score: float = Field(0.8, description="Bonus for a match right after '-', '_' or a space.")
    capital_match_score: float = Field(0.7, description="Bonus for an uppercase match right after a lowercase letter.")
    dot_match_score: float = Field(0.6, description="Bonus for a match right after '.'.")
    max_match_length: StrictInt = Field(1024, ge=1, description="Haystacks longer than this never match.")

    @field_validator(*SCORE_FIELDS, mode="before")
    @classmethod
    def check_score_is_number(cls, v):
        # Only real numbers; no bool or numeric strings
        if isinstance(v, bool) or not isinstance(v, Real):
            raise ValueError(f"score must be a number, got {type(v).__name__}")
        return v


def create_configuration(partial: Optional[Any] = None, **overrides) -> MatchConfiguration:
    """
    Build a MatchConfiguration from a partial set of overrides.

    Keys may use either snake_case (``gap_inner_score``) or camelCase
    (``gapInnerScore``); anything left out takes its default value.

    Args:
        partial: Mapping of overrides, an existing MatchConfiguration, or None.
        **overrides: Extra overrides applied on top of ``partial``.

    Returns:
        A fully populated, frozen MatchConfiguration.

    Raises:
        InvalidConfiguration: If ``partial`` is not a mapping or any value
            fails validation (for example a non-boolean ``case_sensitive``).
    """
    if isinstance(partial, MatchConfiguration) and not overrides:
        return partial

    if partial is None:
        values = {}
    elif isinstance(partial, MatchConfiguration):
        values = partial.model_dump()
    elif isinstance(partial, Mapping):
        values = dict(partial)
    else:
        raise InvalidConfiguration(
            f"Configuration overrides must be a mapping, got {type(partial).__name__}"
        )
    values.update(overrides)

    try:
        config = MatchConfiguration.model_validate(values)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid matching configuration: {e}") from e

    logger.debug(f"Created matching configuration: {config.model_dump()}")
    return config


def _lookup(value: Mapping, field_name: str):
    for key in (field_name, to_camel(field_name)):
        if key in value:
            return True, value[key]
    return False, None


def is_configuration(value: Any) -> bool:
    """Check that ``value`` carries all ten configuration fields with the right types."""
    if isinstance(value, MatchConfiguration):
        return True
    if not isinstance(value, Mapping):
        return False

    found, case_sensitive = _lookup(value, 'case_sensitive')
    if not found or not isinstance(case_sensitive, bool):
        return False

    for field_name in SCORE_FIELDS:
        found, score = _lookup(value, field_name)
        if not found or isinstance(score, bool) or not isinstance(score, Real):
            return False

    found, max_match_length = _lookup(value, 'max_match_length')
    if not found or isinstance(max_match_length, bool) or not isinstance(max_match_length, int):
        return False

    return True
