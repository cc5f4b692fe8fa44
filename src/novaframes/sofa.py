"""IAU SOFA routines used by the Earth-orientation stages.

The small closed-form kernels (Earth Rotation Angle, TIO locator, polar
motion matrix, celestial-to-intermediate matrix) are written in JAX. The
long trigonometric series (IAU 2006/2000A and IAU 2000B nutation, CIP X, Y
and CIO locator s) are evaluated by ``pyerfa``, the ERFA binding of the
SOFA library. Uses routines and computations derived from software provided
by SOFA under license to the user. Does not itself constitute software
provided by and/or endorsed by SOFA.
"""

from __future__ import annotations

import erfa
import jax.numpy as jnp
from jax import Array

from novaframes._types import Accuracy, check_enum
from novaframes.config import get_dtype
from novaframes.constants import AS2RAD, D2PI, JD_J2000, JULIAN_CENTURY_DAYS, RAD2AS
from novaframes.rotations import Rx, Ry, Rz

# ---------------------------------------------------------------------------
# Earth Rotation Angle
# ---------------------------------------------------------------------------


def era00(dj1: Array, dj2: Array) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    The fractional days of both parts are summed before scaling, which keeps
    full precision when one part carries the integer days.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Earth Rotation Angle in radians, in [0, 2*pi).
    """
    dtype = get_dtype()
    dj1 = jnp.asarray(dj1, dtype=dtype)
    dj2 = jnp.asarray(dj2, dtype=dtype)

    # Days since J2000.0
    t = dj1 + dj2 - JD_J2000

    # Fractional part of dj1 + dj2
    f = jnp.fmod(dj1, 1.0) + jnp.fmod(dj2, 1.0)

    theta = jnp.mod(f + 0.7790572732640 + 0.00273781191135448 * t, 1.0) * D2PI
    return jnp.where(theta >= D2PI, theta - D2PI, theta)


# ---------------------------------------------------------------------------
# TIO locator s'
# ---------------------------------------------------------------------------


def sp00(date1: Array, date2: Array) -> Array:
    """TIO locator s', positioning the Terrestrial Intermediate Origin.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        TIO locator s' in radians.
    """
    t = ((date1 - JD_J2000) + date2) / JULIAN_CENTURY_DAYS
    return -47e-6 * t * AS2RAD


# ---------------------------------------------------------------------------
# Polar motion matrix
# ---------------------------------------------------------------------------


def pom00(xp: Array, yp: Array, sp: Array) -> Array:
    """Form the polar motion matrix (TIRS -> ITRS).

    The matrix is ``Rx(-yp) @ Ry(-xp) @ Rz(sp)``.

    Args:
        xp: Polar motion x-component (radians, positive towards Greenwich).
        yp: Polar motion y-component (radians, positive towards 270E).
        sp: TIO locator s' (radians).

    Returns:
        3x3 polar motion matrix.
    """
    return Rx(-yp) @ Ry(-xp) @ Rz(sp)


# ---------------------------------------------------------------------------
# CIP to celestial-to-intermediate matrix
# ---------------------------------------------------------------------------


def c2ixys(x: Array, y: Array, s: Array) -> Array:
    """Form the celestial-to-intermediate matrix given CIP X, Y and CIO locator s.

    Uses ``Rz(-(e+s)) @ Ry(d) @ Rz(e)`` where
    ``d = arctan(sqrt((x^2 + y^2) / (1 - x^2 - y^2)))`` and ``e = atan2(y, x)``.

    Args:
        x: CIP x coordinate.
        y: CIP y coordinate.
        s: CIO locator.

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    r2 = x * x + y * y
    e = jnp.where(r2 > 0.0, jnp.arctan2(y, x), 0.0)
    d = jnp.arctan(jnp.sqrt(r2 / (1.0 - r2)))

    return Rz(-(e + s)) @ Ry(d) @ Rz(e)


# ---------------------------------------------------------------------------
# Series evaluated by ERFA
# ---------------------------------------------------------------------------


def nutation_angles(t: float, accuracy: Accuracy = Accuracy.FULL) -> tuple[Array, Array]:
    """Nutation in longitude and obliquity.

    Args:
        t: TDB Julian centuries since J2000.0.
        accuracy: ``FULL`` for IAU 2006/2000A, ``REDUCED`` for IAU 2000B.

    Returns:
        ``(dpsi, deps)`` in arcseconds.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "nutation_angles", "accuracy")
    series = erfa.nut06a if accuracy == Accuracy.FULL else erfa.nut00b
    dpsi, deps = series(JD_J2000, float(t) * JULIAN_CENTURY_DAYS)
    dtype = get_dtype()
    return jnp.asarray(dpsi * RAD2AS, dtype=dtype), jnp.asarray(deps * RAD2AS, dtype=dtype)


def cip_xys(jd_tt: float, accuracy: Accuracy = Accuracy.FULL) -> tuple[Array, Array, Array]:
    """CIP coordinates X, Y and CIO locator s in the GCRS.

    Args:
        jd_tt: TT Julian Date.
        accuracy: ``FULL`` for IAU 2006/2000A, ``REDUCED`` for IAU 2000B.

    Returns:
        ``(x, y, s)`` in radians.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "cip_xys", "accuracy")
    series = erfa.xys06a if accuracy == Accuracy.FULL else erfa.xys00b
    x, y, s = series(JD_J2000, float(jd_tt) - JD_J2000)
    dtype = get_dtype()
    return jnp.asarray(x, dtype=dtype), jnp.asarray(y, dtype=dtype), jnp.asarray(s, dtype=dtype)
