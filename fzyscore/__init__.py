"""
fzyscore: fuzzy subsequence scoring and match positions, in the style of fzy.

Top-level symbols are resolved lazily via ``__getattr__`` so that importing
the package (for example to read ``__version__``) does not pull in numpy or
configure logging.
"""

import importlib
from typing import Any

from ._version import __version__

__all__ = [
    "InvalidConfiguration",
    "MatchConfiguration",
    "create_configuration",
    "is_configuration",
    "has_match",
    "is_perfect_match",
    "score",
    "positions",
    "filter_haystacks",
    "rank",
    "FilterResult",
    "compute",
    "precompute_bonus",
    "MIN_SCORE",
    "MAX_SCORE",
    "get_min_score",
    "get_max_score",
    "get_max_length",
    "get_score_floor",
    "get_score_ceiling",
    "__version__",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - trivial lazy loader
    if name in __all__ and name != "__version__":
        return getattr(importlib.import_module(".matching", __name__), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
