"""Closed-form two-body orbital mechanics formulas.

This module evaluates single algebraic results of the Keplerian two-body
problem from scalar (or array) inputs: mean motion, orbital period,
circular, escape and vis-viva velocities, semi-major axis and specific
orbital energy. Unlike a propagator, nothing here integrates or stores
state; each call is a pure function of its arguments.

All functions use JAX operations and are compatible with ``jax.jit``,
``jax.vmap``, and ``jax.grad``. Inputs are coerced to the configured
float dtype (see :func:`twobody.config.set_dtype`).

Concrete inputs outside the physical domain of a formula raise
:class:`twobody.errors.DomainError`. Traced inputs cannot be inspected, so
under ``jax.jit`` the checks are skipped and invalid inputs propagate as
``inf`` or ``nan``.

References:
    1. D. Vallado, and W. McClain, *Fundamentals of Astrodynamics and
       Applications (2nd Ed.)*, Kluwer Academic Publishers, 2004.
    2. J. R. Wertz, *Mission Geometry: Orbit and Constellation Design and
       Management*, Microcosm Press, 2001.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from twobody.config import get_dtype
from twobody.constants import DEG2RAD, GRAVITATIONAL_CONSTANT, RAD2DEG
from twobody.utils import (
    require_non_negative,
    require_nonzero,
    require_positive,
)


def _total_gravitational_parameter(gravitational_parameter: Array, secondary_mass: Array) -> Array:
    # mu of the primary plus G * m of the orbiting body (reduced two-body problem)
    require_non_negative(gravitational_parameter, "gravitational_parameter")
    require_non_negative(secondary_mass, "secondary_mass")
    return gravitational_parameter + GRAVITATIONAL_CONSTANT * secondary_mass


# ──────────────────────────────────────────────
# Mean motion and period
# ──────────────────────────────────────────────


def compute_kepler_mean_motion(
    distance: ArrayLike,
    gravitational_parameter: ArrayLike,
    secondary_mass: ArrayLike = 0.0,
    use_degrees: bool = False,
) -> Array:
    """Compute the Kepler mean motion of a body on an orbit of given size.

    The gravitational parameter of the primary is combined with the mass of
    the orbiting body, ``mu_total = mu + G * m``, and the mean motion is
    ``n = sqrt(mu_total / a^3)``.

    Args:
        distance: Semi-major axis, or orbital radius for a circular orbit.
            Units: *m*
        gravitational_parameter: Gravitational parameter of the primary body.
            Units: *m^3/s^2*
        secondary_mass: Mass of the orbiting body. Units: *kg*
        use_degrees: If ``True``, return mean motion in degrees per second.

    Returns:
        Mean motion. Units: *rad/s* or *deg/s*

    Raises:
        DomainError: If ``distance <= 0``, or if the gravitational parameter
            or secondary mass is negative.

    Examples:
        ```python
        from twobody.constants import GM_EARTH
        from twobody import compute_kepler_mean_motion
        n = compute_kepler_mean_motion(4.2164e7, GM_EARTH, 1.0e3)
        ```
    """
    a = jnp.asarray(distance, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())
    m = jnp.asarray(secondary_mass, dtype=get_dtype())

    require_positive(a, "distance")
    mu_total = _total_gravitational_parameter(mu, m)

    n = jnp.sqrt(mu_total / a**3)
    return n * jnp.where(use_degrees, RAD2DEG, 1.0)


def compute_kepler_orbital_period(
    semi_major_axis: ArrayLike,
    gravitational_parameter: ArrayLike,
    secondary_mass: ArrayLike = 0.0,
) -> Array:
    """Compute the Kepler orbital period.

    Args:
        semi_major_axis: Semi-major axis. Units: *m*
        gravitational_parameter: Gravitational parameter of the primary body.
            Units: *m^3/s^2*
        secondary_mass: Mass of the orbiting body. Units: *kg*

    Returns:
        Orbital period. Units: *s*

    Raises:
        DomainError: If ``semi_major_axis <= 0``, if the combined
            gravitational parameter is zero, or if either input parameter
            is negative.

    Examples:
        ```python
        from twobody.constants import GM_EARTH, R_EARTH
        from twobody import compute_kepler_orbital_period
        T = compute_kepler_orbital_period(R_EARTH + 500e3, GM_EARTH)
        ```
    """
    a = jnp.asarray(semi_major_axis, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())
    m = jnp.asarray(secondary_mass, dtype=get_dtype())

    require_positive(a, "semi_major_axis")
    mu_total = _total_gravitational_parameter(mu, m)
    require_positive(mu_total, "gravitational_parameter")

    return 2.0 * jnp.pi * jnp.sqrt(a**3 / mu_total)


def compute_semi_major_axis(
    mean_motion: ArrayLike,
    gravitational_parameter: ArrayLike,
    secondary_mass: ArrayLike = 0.0,
    use_degrees: bool = False,
) -> Array:
    """Compute the semi-major axis that corresponds to a mean motion.

    Inverse of :func:`compute_kepler_mean_motion`.

    Args:
        mean_motion: Mean motion. Units: *rad/s* or *deg/s*
        gravitational_parameter: Gravitational parameter of the primary body.
            Units: *m^3/s^2*
        secondary_mass: Mass of the orbiting body. Units: *kg*
        use_degrees: If ``True``, interpret ``mean_motion`` as degrees per second.

    Returns:
        Semi-major axis. Units: *m*

    Raises:
        DomainError: If ``mean_motion <= 0``, or if the gravitational
            parameter or secondary mass is negative.

    Examples:
        ```python
        from twobody.constants import GM_EARTH
        from twobody import compute_semi_major_axis
        a = compute_semi_major_axis(7.2921e-5, GM_EARTH)
        ```
    """
    n = jnp.asarray(mean_motion, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())
    m = jnp.asarray(secondary_mass, dtype=get_dtype())

    require_positive(n, "mean_motion")
    mu_total = _total_gravitational_parameter(mu, m)

    n_rad = n * jnp.where(use_degrees, DEG2RAD, 1.0)
    return (mu_total / n_rad**2) ** (1.0 / 3.0)


# ──────────────────────────────────────────────
# Velocities
# ──────────────────────────────────────────────


def compute_circular_velocity(radius: ArrayLike, gravitational_parameter: ArrayLike) -> Array:
    """Compute the speed of a circular orbit.

    Evaluates ``v = sqrt(mu / r)``.

    Args:
        radius: Orbital radius. Units: *m*
        gravitational_parameter: Gravitational parameter of the central body.
            Units: *m^3/s^2*

    Returns:
        Circular velocity. Units: *m/s*

    Raises:
        DomainError: If ``radius`` is zero (or negative), or if the
            gravitational parameter is negative.

    Examples:
        ```python
        from twobody.constants import GM_EARTH, R_EARTH
        from twobody import compute_circular_velocity
        v = compute_circular_velocity(R_EARTH + 500e3, GM_EARTH)
        ```
    """
    r = jnp.asarray(radius, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())

    require_positive(r, "radius")
    require_non_negative(mu, "gravitational_parameter")

    return jnp.sqrt(mu / r)


def compute_escape_velocity(radius: ArrayLike, gravitational_parameter: ArrayLike) -> Array:
    """Compute the escape velocity at a given distance from the central body.

    Args:
        radius: Distance from the centre of the central body. Units: *m*
        gravitational_parameter: Gravitational parameter of the central body.
            Units: *m^3/s^2*

    Returns:
        Escape velocity. Units: *m/s*

    Raises:
        DomainError: If ``radius <= 0`` or the gravitational parameter is
            negative.
    """
    r = jnp.asarray(radius, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())

    require_positive(r, "radius")
    require_non_negative(mu, "gravitational_parameter")

    return jnp.sqrt(2.0 * mu / r)


def compute_vis_viva_velocity(
    radius: ArrayLike,
    semi_major_axis: ArrayLike,
    gravitational_parameter: ArrayLike,
) -> Array:
    """Compute orbital speed from the vis-viva equation.

    Evaluates ``v = sqrt(mu * (2/r - 1/a))``. A negative semi-major axis
    describes a hyperbolic orbit and is accepted.

    Args:
        radius: Current distance from the central body. Units: *m*
        semi_major_axis: Semi-major axis of the orbit. Units: *m*
        gravitational_parameter: Gravitational parameter of the central body.
            Units: *m^3/s^2*

    Returns:
        Orbital speed. Units: *m/s*

    Raises:
        DomainError: If ``radius <= 0``, ``semi_major_axis == 0``, the
            gravitational parameter is negative, or ``radius > 2 *
            semi_major_axis`` on a bound orbit.

    Examples:
        ```python
        from twobody.constants import GM_EARTH, R_EARTH
        from twobody import compute_vis_viva_velocity
        a = R_EARTH + 500e3
        vp = compute_vis_viva_velocity(a * 0.9, a, GM_EARTH)
        ```
    """
    r = jnp.asarray(radius, dtype=get_dtype())
    a = jnp.asarray(semi_major_axis, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())

    require_positive(r, "radius")
    require_nonzero(a, "semi_major_axis")
    require_non_negative(mu, "gravitational_parameter")

    # negative past apoapsis of a bound orbit (r > 2a)
    v_sq_over_mu = 2.0 / r - 1.0 / a
    require_non_negative(v_sq_over_mu, "2 / radius - 1 / semi_major_axis")

    return jnp.sqrt(mu * v_sq_over_mu)


# ──────────────────────────────────────────────
# Energy
# ──────────────────────────────────────────────


def compute_specific_orbital_energy(semi_major_axis: ArrayLike, gravitational_parameter: ArrayLike) -> Array:
    """Compute the specific orbital energy, ``-mu / (2a)``.

    Args:
        semi_major_axis: Semi-major axis. Units: *m*
        gravitational_parameter: Gravitational parameter of the central body.
            Units: *m^3/s^2*

    Returns:
        Specific orbital energy. Negative for bound orbits. Units: *J/kg*

    Raises:
        DomainError: If ``semi_major_axis == 0`` or the gravitational
            parameter is negative.
    """
    a = jnp.asarray(semi_major_axis, dtype=get_dtype())
    mu = jnp.asarray(gravitational_parameter, dtype=get_dtype())

    require_nonzero(a, "semi_major_axis")
    require_non_negative(mu, "gravitational_parameter")

    return -mu / (2.0 * a)
