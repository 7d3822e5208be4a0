"""Shared helpers for twobody.

Provides the domain checks applied to concrete formula inputs.
"""

from twobody.utils._validation import (
    require_non_negative,
    require_nonzero,
    require_positive,
)

__all__ = [
    "require_non_negative",
    "require_nonzero",
    "require_positive",
]
