import jax.numpy as jnp
import pytest

from twobody.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch precision (e.g. test_config.py) would otherwise leak
    their dtype into later tests running in the same process.
    """
    set_dtype(jnp.float64)
