"""Orientation of the Earth's axis: obliquity, nutation angles and the equation of the equinoxes.

:func:`e_tilt` gathers everything the equinox-based transforms need for
one epoch into an :class:`~novaframes._types.EarthTilt`. The standing
celestial pole offsets of :mod:`novaframes.pole` are added to the modelled
nutation angles.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from novaframes._types import Accuracy, EarthTilt, EquinoxType, check_enum
from novaframes.constants import AS2RAD, DEG2RAD, JD_J2000, JULIAN_CENTURY_DAYS
from novaframes.obliquity import ee_ct, mean_obliq
from novaframes.pole import PoleOffsets, current_pole_offsets
from novaframes.sofa import nutation_angles


def e_tilt(jd_tdb: float, accuracy: Accuracy | int, pole: PoleOffsets | None = None) -> EarthTilt:
    """Compute quantities related to the orientation of the Earth's rotation axis.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pole (PoleOffsets | None): Pole offsets to add to the nutation
            angles. Default: the offsets active in the current context.

    Returns:
        EarthTilt: Mean and true obliquity [deg], equation of the equinoxes
        [s], nutation in longitude and obliquity [arcsec].

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "e_tilt", "accuracy")
    if pole is None:
        pole = current_pole_offsets()

    t = (float(jd_tdb) - JD_J2000) / JULIAN_CENTURY_DAYS

    dpsi, deps = nutation_angles(t, accuracy)
    dpsi = dpsi + pole.dpsi
    deps = deps + pole.deps

    mean_ob = mean_obliq(jd_tdb) / 3600.0

    # Seconds of time, including the complementary terms
    eqeq = (dpsi * jnp.cos(mean_ob * DEG2RAD) + ee_ct(jd_tdb, 0.0, accuracy) / AS2RAD) / 15.0

    true_ob = mean_ob + deps / 3600.0

    return EarthTilt(
        mean_obliquity=mean_ob,
        true_obliquity=true_ob,
        equation_of_equinoxes=eqeq,
        dpsi=dpsi,
        deps=deps,
    )


def ira_equinox(
    jd_tdb: float,
    equinox: EquinoxType | int,
    accuracy: Accuracy | int,
    pole: PoleOffsets | None = None,
) -> Array:
    """Intermediate right ascension of the mean or true equinox.

    Uses the analytical accumulated precession in right ascension of
    Capitaine et al. (2003), eq. (42). For the true equinox the result is the
    equation of the origins.

    Any *accuracy* other than ``REDUCED`` is evaluated as ``FULL``.

    Args:
        jd_tdb (float): TDB Julian Date.
        equinox (EquinoxType | int): ``MEAN`` or ``TRUE``.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pole (PoleOffsets | None): Pole offsets for the true equinox.
            Default: the offsets active in the current context.

    Returns:
        Array: Intermediate right ascension of the equinox [h].

    Raises:
        InvalidArgumentError: If *equinox* is invalid.
    """
    equinox = check_enum(EquinoxType, equinox, "ira_equinox", "equinox type")

    t = (float(jd_tdb) - JD_J2000) / JULIAN_CENTURY_DAYS

    # Seconds of time
    prec_ra = (
        0.014506
        + ((((-0.0000000368 * t - 0.000029956) * t - 0.00000044) * t + 1.3915817) * t + 4612.156534) * t
    ) / 15.0

    if equinox == EquinoxType.TRUE:
        if accuracy != Accuracy.REDUCED:
            accuracy = Accuracy.FULL
        prec_ra = prec_ra + e_tilt(jd_tdb, accuracy, pole).equation_of_equinoxes

    return jnp.asarray(-prec_ra / 3600.0)
