"""
The `constants` module defines the physical constants used by the two-body formulas.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Physical Constants
"""
Newtonian constant of gravitation. Units: *m^3/(kg s^2)*

References:

1. E. Tiesinga et al., *CODATA Recommended Values of the Fundamental
Physical Constants: 2018*, Rev. Mod. Phys. 93, 025010, 2021.
"""
GRAVITATIONAL_CONSTANT = 6.67430e-11  # [m^3/(kg s^2)] CODATA 2018

# Earth Constants
"""
Earth's equatorial radius. Units: *m*

References:

1. J. R. Wertz, *Mission Geometry: Orbit and Constellation Design and
Management*, Microcosm Press, 2001.
"""
R_EARTH = 6378136.0  # [m]

"""
Earth's gravitational parameter. Units: *m^3/s^2*

References:

1. J. R. Wertz, *Mission Geometry: Orbit and Constellation Design and
Management*, Microcosm Press, 2001.
"""
GM_EARTH = 3.98600441e14  # [m^3/s^2]

"""
Earth's mass. Units: *kg*

References:

1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2010
"""
M_EARTH = 5.9742e24  # [kg]

# Sun Constants
"""
Gravitational constant of the Sun. Units: *m^3/s^2*

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
Applications*, 2012.
"""
GM_SUN = 132712440041.939400 * 1e9

# Celestial Constants - from JPL DE430 Ephemerides
"""
Gravitational constant of the Moon. Units: *m^3/s^2*

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
Applications*, 2012.
"""
GM_MOON = 4902.800066 * 1e9
