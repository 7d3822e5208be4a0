"""Tests for the twobody.config module."""

import logging

import jax
import jax.numpy as jnp
import pytest

from twobody.config import get_dtype, set_dtype
from twobody.constants import GM_EARTH, R_EARTH
from twobody.two_body import compute_circular_velocity, compute_kepler_mean_motion

# Relative agreement expected from each float dtype
_REL_TOL = {
    jnp.float64: 1e-12,
    jnp.float32: 1e-5,
}


@pytest.fixture(autouse=True)
def reset_dtype():
    """Restore the float64 default after each test."""
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_x64_enabled_by_default(self):
        assert jax.config.jax_enable_x64 is True

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float64")

    def test_dtype_change_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="twobody.config")
        set_dtype(jnp.float32)
        assert "float64 to float32" in caplog.text

    def test_same_dtype_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="twobody.config")
        set_dtype(jnp.float64)
        assert not [r for r in caplog.records if r.name == "twobody.config"]


class TestFormulaDtypes:
    def test_float64_output(self):
        v = compute_circular_velocity(R_EARTH, GM_EARTH)
        assert v.dtype == jnp.float64

    def test_float32_output(self):
        set_dtype(jnp.float32)
        v = compute_circular_velocity(R_EARTH, GM_EARTH)
        assert v.dtype == jnp.float32

    def test_float32_matches_float64(self):
        """Single precision agrees with double precision within its tolerance."""
        n64 = compute_kepler_mean_motion(4.2164e7, GM_EARTH)
        set_dtype(jnp.float32)
        n32 = compute_kepler_mean_motion(4.2164e7, GM_EARTH)
        assert abs(float(n32) - float(n64)) / float(n64) < _REL_TOL[jnp.float32]

    @pytest.mark.parametrize("dtype", [jnp.float32, jnp.float64])
    def test_circular_velocity_within_dtype_tolerance(self, dtype):
        """Each precision reproduces the float64 circular velocity to its tolerance."""
        v64 = float(compute_circular_velocity(R_EARTH, GM_EARTH))
        set_dtype(dtype)
        v = compute_circular_velocity(R_EARTH, GM_EARTH)
        assert v.dtype == dtype
        assert abs(float(v) - v64) / v64 < _REL_TOL[dtype]
