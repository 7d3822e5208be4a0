"""
twobody is a small library of closed-form two-body orbital mechanics formulas implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    GRAVITATIONAL_CONSTANT,
    R_EARTH,
    GM_EARTH,
    M_EARTH,
    GM_SUN,
    GM_MOON,
)

from .config import set_dtype, get_dtype
from .errors import DomainError

from .two_body import (
    compute_kepler_mean_motion,
    compute_kepler_orbital_period,
    compute_semi_major_axis,
    compute_circular_velocity,
    compute_escape_velocity,
    compute_vis_viva_velocity,
    compute_specific_orbital_energy,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "GRAVITATIONAL_CONSTANT",
    "R_EARTH",
    "GM_EARTH",
    "M_EARTH",
    "GM_SUN",
    "GM_MOON",
    # Config
    "set_dtype",
    "get_dtype",
    # Errors
    "DomainError",
    # Two-body formulas
    "compute_kepler_mean_motion",
    "compute_kepler_orbital_period",
    "compute_semi_major_axis",
    "compute_circular_velocity",
    "compute_escape_velocity",
    "compute_vis_viva_velocity",
    "compute_specific_orbital_energy",
]
