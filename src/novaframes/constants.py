"""
The `constants` module defines the angular, temporal and frame-bias constants
shared by the precession-nutation engine.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Full circle in radians. Units: *rad*
"""
D2PI = 2.0 * PI

"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
Constant to convert milliarcseconds to radians. Units: *rad/mas*
"""
MAS2RAD = 1e-3 * AS2RAD

"""
One hour of right ascension in radians. Units: *rad/h*
"""
HOURANGLE = PI / 12.0

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD_J2000 = 2451545.0

"""
Julian Date of the Besselian epoch B1950.0. Units: *days*
"""
JD_B1950 = 2433282.42345905

"""
Julian Date of the Besselian epoch B1900.0. Units: *days*
"""
JD_B1900 = 2415020.3135

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5

"""
Days in a Julian century. Units: *days*
"""
JULIAN_CENTURY_DAYS = 36525.0

"""
Seconds in a day. Units: *s*
"""
DAY = 86400.0

"""
Hours in a day. Units: *h*
"""
DAY_HOURS = 24.0

# Reference Frame Constants

"""
Mean obliquity of the ecliptic at J2000.0, IAU 2006 value. Units: *as*

References:

1. N. Capitaine et al., *Astronomy and Astrophysics 412*, 2003, eq. (37).
"""
OBLIQUITY_J2000 = 84381.406

"""
ICRS frame bias in the x direction, xi_0. Units: *as*

References:

1. IERS Conventions (2003), Chapter 5.
"""
FRAME_BIAS_XI0 = -0.0166170

"""
ICRS frame bias in the y direction, eta_0. Units: *as*
"""
FRAME_BIAS_ETA0 = -0.0068192

"""
ICRS frame bias in right ascension of the J2000 equinox, d_alpha_0. Units: *as*
"""
FRAME_BIAS_DA0 = -0.01460
