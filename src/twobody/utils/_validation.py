"""Domain checks for concrete formula inputs.

JAX cannot branch on traced values, so every check here is skipped when
its argument is a tracer (inside ``jax.jit``, ``jax.vmap`` or
``jax.grad``). Concrete scalars and arrays are checked element-wise and
fail if any element is out of domain.
"""

from __future__ import annotations

from typing import Callable

import jax
import jax.numpy as jnp
from jax import Array

from twobody.errors import DomainError


def _is_traced(x) -> bool:
    return isinstance(x, jax.core.Tracer)


def _check(x: Array, name: str, violated: Callable[[Array], Array], condition: str) -> None:
    if _is_traced(x):
        return
    if bool(jnp.any(violated(x))):
        raise DomainError(f"{name} must be {condition}, got {x}")


def require_positive(x: Array, name: str) -> None:
    """Raise :class:`DomainError` unless every element of *x* is ``> 0``.

    Args:
        x (Array): Value to check.
        name (str): Argument name used in the error message.

    Raises:
        DomainError: If any element is zero, negative or NaN.
    """
    _check(x, name, lambda v: ~(v > 0.0), "strictly positive")


def require_non_negative(x: Array, name: str) -> None:
    """Raise :class:`DomainError` unless every element of *x* is ``>= 0``.

    Args:
        x (Array): Value to check.
        name (str): Argument name used in the error message.

    Raises:
        DomainError: If any element is negative or NaN.
    """
    _check(x, name, lambda v: ~(v >= 0.0), "non-negative")


def require_nonzero(x: Array, name: str) -> None:
    """Raise :class:`DomainError` if any element of *x* is zero.

    Args:
        x (Array): Value to check.
        name (str): Argument name used in the error message.

    Raises:
        DomainError: If any element is zero or NaN.
    """
    _check(x, name, lambda v: ~(v != 0.0), "nonzero")
