"""Earth rotation and polar motion.

Provides the Earth Rotation Angle, Greenwich sidereal time (mean or
apparent, from either rotation convention) and the polar motion correction
between the terrestrial intermediate frames (TIRS, PEF) and the ITRS.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes._types import (
    Accuracy,
    EarthRotationMeasure,
    EquinoxType,
    WobbleDirection,
    check_enum,
)
from novaframes.constants import AS2RAD, DAY, DAY_HOURS, JD_J2000, JULIAN_CENTURY_DAYS, RAD2DEG
from novaframes.equinox import e_tilt, ira_equinox
from novaframes.rotations import as_vector
from novaframes.sofa import era00, pom00, sp00
from novaframes.utils import ieee_remainder


def era(jd_ut1_high: float, jd_ut1_low: float = 0.0) -> Array:
    """Earth Rotation Angle.

    Args:
        jd_ut1_high (float): High-order part of the UT1 Julian Date.
        jd_ut1_low (float): Low-order part of the UT1 Julian Date.

    Returns:
        Array: Earth Rotation Angle [deg] in [0, 360).
    """
    return era00(jd_ut1_high, jd_ut1_low) * RAD2DEG


def sidereal_time(
    jd_ut1_high: float,
    jd_ut1_low: float,
    ut1_to_tt: float,
    gst_type: EquinoxType | int,
    erot: EarthRotationMeasure | int,
    accuracy: Accuracy | int,
) -> Array:
    """Greenwich mean or apparent sidereal time.

    With ``EarthRotationMeasure.ERA`` the sidereal time is the Earth Rotation
    Angle minus the intermediate right ascension of the equinox. With
    ``EarthRotationMeasure.GST`` it is the IAU 2006 polynomial in time added
    to the Earth Rotation Angle, plus the equation of the equinoxes for
    apparent time. Both agree to well below a microarcsecond.

    Args:
        jd_ut1_high (float): High-order part of the UT1 Julian Date.
        jd_ut1_low (float): Low-order part of the UT1 Julian Date.
        ut1_to_tt (float): TT - UT1 [s].
        gst_type (EquinoxType | int): ``MEAN`` or ``TRUE`` (apparent).
        erot (EarthRotationMeasure | int): Computation method.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.

    Returns:
        Array: Greenwich sidereal time [h] in [0, 24).

    Raises:
        InvalidArgumentError: If *accuracy* is invalid (code 1), *erot* is
            invalid (code 2) or *gst_type* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "sidereal_time", "accuracy", code=1)
    erot = check_enum(EarthRotationMeasure, erot, "sidereal_time", "Earth rotation measure", code=2)
    gst_type = check_enum(EquinoxType, gst_type, "sidereal_time", "equinox type")

    # TDB = TT is adequate here, the difference is below 2 ms
    jd_tdb = float(jd_ut1_high) + float(jd_ut1_low) + ut1_to_tt / DAY
    t = (jd_tdb - JD_J2000) / JULIAN_CENTURY_DAYS

    theta = era(jd_ut1_high, jd_ut1_low)

    if erot == EarthRotationMeasure.ERA:
        gst = theta / 15.0 - ira_equinox(jd_tdb, gst_type, accuracy)
    else:
        # Arcseconds
        eqeq = 0.0
        if gst_type == EquinoxType.TRUE:
            eqeq = e_tilt(jd_tdb, accuracy).equation_of_equinoxes * 15.0

        st = eqeq + 0.014506 + (
            (((-0.0000000368 * t - 0.000029956) * t - 0.00000044) * t + 1.3915817) * t + 4612.156534
        ) * t
        gst = ieee_remainder(st / 3600.0 + theta, 360.0) / 15.0

    gst = jnp.mod(gst, DAY_HOURS)
    return jnp.where(gst >= DAY_HOURS, gst - DAY_HOURS, gst)


def wobble(
    jd_tt: float,
    direction: WobbleDirection | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Apply polar motion between a terrestrial intermediate frame and the ITRS.

    Directions involving the TIRS include the TIO locator s'; those involving
    the PEF omit it.

    Args:
        jd_tt (float): TT Julian Date.
        direction (WobbleDirection | int): Direction of the correction.
        xp (float): Polar motion x [arcsec].
        yp (float): Polar motion y [arcsec].
        pos (ArrayLike): Input vector.

    Returns:
        Array: Corrected vector.

    Raises:
        InvalidArgumentError: If *direction* is invalid or *pos* is not a
            3-vector.
    """
    direction = check_enum(WobbleDirection, direction, "wobble", "direction")
    v = as_vector(pos, "wobble")

    if direction in (WobbleDirection.ITRS_TO_TIRS, WobbleDirection.TIRS_TO_ITRS):
        sp = sp00(float(jd_tt), 0.0)
    else:
        sp = 0.0

    w = pom00(xp * AS2RAD, yp * AS2RAD, sp)

    if direction in (WobbleDirection.TIRS_TO_ITRS, WobbleDirection.PEF_TO_ITRS):
        return w @ v
    return w.T @ v
