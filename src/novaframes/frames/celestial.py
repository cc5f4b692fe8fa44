"""Transformations between celestial equatorial frames.

Chains the frame tie, precession, nutation and CIO stages between

- **GCRS**: Geocentric Celestial Reference System (ICRS axes),
- **J2000**: dynamical mean equator and equinox of J2000.0,
- **MOD**: mean equator and equinox of date,
- **TOD**: true equator and equinox of date,
- **CIRS**: Celestial Intermediate Reference System (true equator, CIO).

Dates are TDB Julian Dates; TT may be used in their place, since the
difference (under 2 ms) does not matter at the accuracy of these
transformations. When a stage fails, its error is forwarded with the name
of the calling function prepended to its ``trace``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes._types import (
    Accuracy,
    DynamicalFrame,
    FrameTieDirection,
    NutationDirection,
    check_enum,
)
from novaframes.cio import cio_basis, cio_location, cio_ra
from novaframes.constants import DAY_HOURS, JD_J2000
from novaframes.errors import NovaFramesError, propagate, record_error
from novaframes.frame_tie import frame_tie
from novaframes.nutation import nutation
from novaframes.precession import precession
from novaframes.rotations import as_vector, radec_to_vector, spin, vdot, vector_to_radec
from novaframes.utils import ieee_remainder

# ---------------------------------------------------------------------------
# GCRS <-> J2000 <-> MOD <-> TOD
# ---------------------------------------------------------------------------


def gcrs_to_j2000(pos: ArrayLike) -> Array:
    """Transform a GCRS vector to the dynamical J2000 frame."""
    with propagate("gcrs_to_j2000"):
        return frame_tie(pos, FrameTieDirection.ICRS_TO_J2000)


def j2000_to_gcrs(pos: ArrayLike) -> Array:
    """Transform a dynamical J2000 vector to the GCRS."""
    with propagate("j2000_to_gcrs"):
        return frame_tie(pos, FrameTieDirection.J2000_TO_ICRS)


def gcrs_to_mod(jd_tdb: float, pos: ArrayLike) -> Array:
    """Transform a GCRS vector to the mean equator and equinox of date.

    Args:
        jd_tdb (float): TDB Julian Date.
        pos (ArrayLike): GCRS vector.

    Returns:
        Array: MOD vector.
    """
    with propagate("gcrs_to_mod"):
        v = frame_tie(pos, FrameTieDirection.ICRS_TO_J2000)
        return precession(JD_J2000, v, jd_tdb)


def mod_to_gcrs(jd_tdb: float, pos: ArrayLike) -> Array:
    """Transform a vector from the mean equator and equinox of date to the GCRS.

    Args:
        jd_tdb (float): TDB Julian Date.
        pos (ArrayLike): MOD vector.

    Returns:
        Array: GCRS vector.
    """
    with propagate("mod_to_gcrs"):
        v = precession(jd_tdb, pos, JD_J2000)
        return frame_tie(v, FrameTieDirection.J2000_TO_ICRS)


def j2000_to_tod(jd_tdb: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Precess and nutate a dynamical J2000 vector to the true equator and equinox of date.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): J2000 vector.

    Returns:
        Array: TOD vector.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "j2000_to_tod", "accuracy")
    with propagate("j2000_to_tod"):
        v = precession(JD_J2000, pos, jd_tdb)
        return nutation(jd_tdb, NutationDirection.MEAN_TO_TRUE, accuracy, v)


def tod_to_j2000(jd_tdb: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Transform a true-of-date vector to the dynamical J2000 frame.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): TOD vector.

    Returns:
        Array: J2000 vector.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "tod_to_j2000", "accuracy")
    with propagate("tod_to_j2000"):
        v = nutation(jd_tdb, NutationDirection.TRUE_TO_MEAN, accuracy, pos)
        return precession(jd_tdb, v, JD_J2000)


def gcrs_to_tod(jd_tdb: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Transform a GCRS vector to the true equator and equinox of date.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): GCRS vector.

    Returns:
        Array: TOD vector.
    """
    with propagate("gcrs_to_tod"):
        v = frame_tie(pos, FrameTieDirection.ICRS_TO_J2000)
        return j2000_to_tod(jd_tdb, accuracy, v)


def tod_to_gcrs(jd_tdb: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Transform a true-of-date vector to the GCRS.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): TOD vector.

    Returns:
        Array: GCRS vector.
    """
    with propagate("tod_to_gcrs"):
        v = tod_to_j2000(jd_tdb, accuracy, pos)
        return frame_tie(v, FrameTieDirection.J2000_TO_ICRS)


# ---------------------------------------------------------------------------
# GCRS <-> CIRS <-> TOD
# ---------------------------------------------------------------------------


def gcrs_to_cirs(jd_tdb: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Transform a GCRS vector to the Celestial Intermediate Reference System.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): GCRS vector.

    Returns:
        Array: CIRS vector.

    Raises:
        InvalidArgumentError: If *pos* is not a 3-vector.
        NovaFramesError: CIO location failures, forwarded as is, or CIO
            basis failures, with codes offset by 10.
    """
    v = as_vector(pos, "gcrs_to_cirs")

    with propagate("gcrs_to_cirs"):
        loc = cio_location(jd_tdb, accuracy)
    with propagate("gcrs_to_cirs", 10):
        basis = cio_basis(jd_tdb, loc.ra_cio, loc.system, accuracy)

    return jnp.stack([vdot(basis.x, v), vdot(basis.y, v), vdot(basis.z, v)])


def cirs_to_gcrs(jd_tdb: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Transform a CIRS vector to the GCRS.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): CIRS vector.

    Returns:
        Array: GCRS vector.

    Raises:
        InvalidArgumentError: If *pos* is not a 3-vector.
        NovaFramesError: CIO location failures, forwarded as is, or CIO
            basis failures, with codes offset by 10.
    """
    v = as_vector(pos, "cirs_to_gcrs")

    with propagate("cirs_to_gcrs"):
        loc = cio_location(jd_tdb, accuracy)
    with propagate("cirs_to_gcrs", 10):
        basis = cio_basis(jd_tdb, loc.ra_cio, loc.system, accuracy)

    return v[0] * basis.x + v[1] * basis.y + v[2] * basis.z


def cirs_to_tod(jd_tt: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Rotate a CIRS vector to the true equator and equinox of date.

    Args:
        jd_tt (float): TT Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): CIRS vector.

    Returns:
        Array: TOD vector.
    """
    with propagate("cirs_to_tod"):
        ra_cio = cio_ra(jd_tt, accuracy)
        return spin(-15.0 * ra_cio, pos)


def tod_to_cirs(jd_tt: float, accuracy: Accuracy | int, pos: ArrayLike) -> Array:
    """Rotate a true-of-date vector to the CIRS.

    Args:
        jd_tt (float): TT Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): TOD vector.

    Returns:
        Array: CIRS vector.
    """
    with propagate("tod_to_cirs"):
        ra_cio = cio_ra(jd_tt, accuracy)
        return spin(15.0 * ra_cio, pos)


def _shift_ra(where: str, jd_tt: float, accuracy: Accuracy | int, ra: float, sign: float):
    try:
        ra_cio = cio_ra(jd_tt, accuracy)
    except NovaFramesError as err:
        return record_error(where, str(err))

    ra = ieee_remainder(ra + sign * ra_cio, DAY_HOURS)
    return jnp.where(ra < 0.0, ra + DAY_HOURS, ra)


def cirs_to_app_ra(jd_tt: float, accuracy: Accuracy | int, ra: float) -> Array | float:
    """Convert a CIRS right ascension to an apparent (true equinox) right ascension.

    Args:
        jd_tt (float): TT Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        ra (float): CIRS right ascension [h].

    Returns:
        Apparent right ascension [h] in [0, 24), or ``nan`` if the CIO
        right ascension could not be computed (see
        :func:`~novaframes.errors.last_error`).
    """
    return _shift_ra("cirs_to_app_ra", jd_tt, accuracy, ra, 1.0)


def app_to_cirs_ra(jd_tt: float, accuracy: Accuracy | int, ra: float) -> Array | float:
    """Convert an apparent (true equinox) right ascension to a CIRS right ascension.

    Args:
        jd_tt (float): TT Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        ra (float): Apparent right ascension [h].

    Returns:
        CIRS right ascension [h] in [0, 24), or ``nan`` if the CIO right
        ascension could not be computed.
    """
    return _shift_ra("app_to_cirs_ra", jd_tt, accuracy, ra, -1.0)


# ---------------------------------------------------------------------------
# Spherical coordinates
# ---------------------------------------------------------------------------


def gcrs_to_equ(
    jd_tt: float,
    frame: DynamicalFrame | int,
    accuracy: Accuracy | int,
    ra: float,
    dec: float,
) -> tuple[Array, Array]:
    """Convert GCRS right ascension and declination to an equatorial system of date.

    Args:
        jd_tt (float): TT Julian Date.
        frame (DynamicalFrame | int): ``MOD``, ``TOD`` or ``CIRS``.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        ra (float): GCRS right ascension [h].
        dec (float): GCRS declination [deg].

    Returns:
        tuple: ``(ra, dec)`` in *frame*, [h] and [deg].

    Raises:
        InvalidArgumentError: If *frame* is invalid.
        NovaFramesError: CIRS stage failures, with codes offset by 10.
    """
    frame = check_enum(DynamicalFrame, frame, "gcrs_to_equ", "dynamical system type")

    # TDB = TT to within 2 ms
    pos = radec_to_vector(ra, dec)

    if frame == DynamicalFrame.MOD:
        with propagate("gcrs_to_equ"):
            v = gcrs_to_mod(jd_tt, pos)
    elif frame == DynamicalFrame.TOD:
        with propagate("gcrs_to_equ"):
            v = gcrs_to_tod(jd_tt, accuracy, pos)
    else:
        with propagate("gcrs_to_equ", 10):
            v = gcrs_to_cirs(jd_tt, accuracy, pos)

    with propagate("gcrs_to_equ"):
        return vector_to_radec(v)
