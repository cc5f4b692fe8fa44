"""Precession of the mean equator and equinox between epochs.

Implements the IAU 2006 four-angle formulation: the matrix carrying the
mean equator and equinox of J2000.0 to that of date is
``R3(chi_A) R1(-omega_A) R3(-psi_A) R1(eps_0)`` (Capitaine et al. 2003,
eqs. (4), (37) and (39)). The angles are polynomials in time from J2000, so
precession between two arbitrary epochs always passes through J2000.

Each direction owns a per-thread single-slot cache of its matrix, keyed by
the exact time offset in days and the active dtype.

References:

    1. N. Capitaine et al., *Astronomy and Astrophysics 412*, 2003, pp. 567-586.
    2. J. L. Hilton et al., *Celestial Mechanics 94*, 2006, pp. 351-367.
    3. *Explanatory Supplement to the Astronomical Almanac*, pp. 103-104.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes.config import get_dtype, get_time_eq_tolerance
from novaframes.constants import AS2RAD, JD_J2000, JULIAN_CENTURY_DAYS, OBLIQUITY_J2000
from novaframes.rotations import Rx, Rz, as_vector
from novaframes.utils.caching import SingleSlotCache

logger = logging.getLogger(__name__)

_from_j2000_cache = SingleSlotCache("precession[from J2000]")
_to_j2000_cache = SingleSlotCache("precession[to J2000]")


def precession_matrix(dt: float) -> Array:
    """Precession matrix from J2000.0 to an epoch *dt* days later.

    Args:
        dt (float): TDB days since J2000.0.

    Returns:
        Array: 3x3 rotation matrix, mean J2000 to mean of date.
    """
    t = dt / JULIAN_CENTURY_DAYS

    psia = ((((-0.0000000951 * t + 0.000132851) * t - 0.00114045) * t - 1.0790069) * t + 5038.481507) * t
    omegaa = ((((+0.0000003337 * t - 0.000000467) * t - 0.00772503) * t + 0.0512623) * t - 0.025754) * t + OBLIQUITY_J2000
    chia = ((((-0.0000000560 * t + 0.000170663) * t - 0.00121197) * t - 2.3814292) * t + 10.556403) * t

    return (
        Rz(chia * AS2RAD)
        @ Rx(-omegaa * AS2RAD)
        @ Rz(-psia * AS2RAD)
        @ Rx(OBLIQUITY_J2000 * AS2RAD)
    )


def _cached_matrix(cache: SingleSlotCache, dt: float) -> Array:
    key = (dt, get_dtype())
    hit, p = cache.lookup(key)
    if not hit:
        p = cache.store(key, precession_matrix(dt))
    return p


def _precess_from(dt: float, v: Array) -> Array:
    return _cached_matrix(_from_j2000_cache, dt) @ v


def _precess_to(dt: float, v: Array) -> Array:
    return _cached_matrix(_to_j2000_cache, dt).T @ v


def precess_from_j2000(jd_tdb: float, pos: ArrayLike) -> Array:
    """Precess a vector from the mean equator and equinox of J2000.0 to that of date.

    Args:
        jd_tdb (float): TDB Julian Date of the output epoch.
        pos (ArrayLike): Vector referred to the mean equator of J2000.0.

    Returns:
        Array: Vector referred to the mean equator of *jd_tdb*.
    """
    v = as_vector(pos, "precess_from_j2000")
    return _precess_from(float(jd_tdb) - JD_J2000, v)


def precess_to_j2000(jd_tdb: float, pos: ArrayLike) -> Array:
    """Precess a vector from the mean equator and equinox of date to that of J2000.0.

    Args:
        jd_tdb (float): TDB Julian Date of the input epoch.
        pos (ArrayLike): Vector referred to the mean equator of *jd_tdb*.

    Returns:
        Array: Vector referred to the mean equator of J2000.0.
    """
    v = as_vector(pos, "precess_to_j2000")
    return _precess_to(float(jd_tdb) - JD_J2000, v)


def precess_via_j2000(jd_tdb_in: float, pos: ArrayLike, jd_tdb_out: float) -> Array:
    """Precess between two arbitrary epochs through J2000.0.

    Args:
        jd_tdb_in (float): TDB Julian Date of the input epoch.
        pos (ArrayLike): Vector referred to the mean equator of *jd_tdb_in*.
        jd_tdb_out (float): TDB Julian Date of the output epoch.

    Returns:
        Array: Vector referred to the mean equator of *jd_tdb_out*.
    """
    return precess_from_j2000(jd_tdb_out, precess_to_j2000(jd_tdb_in, pos))


def precession(jd_tdb_in: float, pos: ArrayLike, jd_tdb_out: float) -> Array:
    """Precess equatorial rectangular coordinates from one epoch to another.

    Works for any pair of epochs. Identical epochs return an exact copy of
    the input. When neither epoch is J2000.0 (within
    :func:`~novaframes.config.get_time_eq_tolerance`) the call is split into
    two precessions through J2000.0.

    Args:
        jd_tdb_in (float): TDB Julian Date of the input epoch.
        pos (ArrayLike): Vector referred to the mean equator and equinox of
            *jd_tdb_in*.
        jd_tdb_out (float): TDB Julian Date of the output epoch.

    Returns:
        Array: Vector referred to the mean equator and equinox of *jd_tdb_out*.

    Raises:
        InvalidArgumentError: If *pos* is not a 3-vector.

    Examples:
        ```python
        from novaframes.constants import JD_B1950, JD_J2000
        from novaframes.precession import precession

        v = precession(JD_B1950, [1.0, 0.0, 0.0], JD_J2000)
        ```
    """
    v = as_vector(pos, "precession")
    jd_tdb_in = float(jd_tdb_in)
    jd_tdb_out = float(jd_tdb_out)

    if jd_tdb_in == jd_tdb_out:
        return v

    tol = get_time_eq_tolerance()
    if abs(jd_tdb_in - JD_J2000) > tol and abs(jd_tdb_out - JD_J2000) > tol:
        logger.debug("precession: %.9f -> %.9f via J2000", jd_tdb_in, jd_tdb_out)
        return precess_via_j2000(jd_tdb_in, v, jd_tdb_out)

    if jd_tdb_out == JD_J2000:
        return _precess_to(jd_tdb_in - jd_tdb_out, v)
    return _precess_from(jd_tdb_out - jd_tdb_in, v)
