"""Celestial Intermediate Origin: its location and the intermediate system axes.

The Celestial Intermediate Reference System (CIRS) has its pole at the
CIP (the true pole of date) and its origin of right ascension at the CIO.
Its axes, expressed in the GCRS, are found either from the right ascension
of the CIO measured from the true equinox (equinox-based) or from the GCRS
origin (derived from the IAU 2006/2000A CIP X, Y and CIO locator s).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes._types import (
    Accuracy,
    CioBasis,
    CioLocation,
    CioSystem,
    EquinoxType,
    FrameTieDirection,
    NutationDirection,
    check_enum,
)
from novaframes.constants import DEG2RAD, HOURANGLE, JD_J2000
from novaframes.equinox import ira_equinox
from novaframes.errors import propagate
from novaframes.frame_tie import frame_tie
from novaframes.nutation import nutation
from novaframes.precession import precession
from novaframes.rotations import vdot
from novaframes.sofa import c2ixys, cip_xys


def _tod_to_gcrs(jd_tdb: float, accuracy: Accuracy, pos: ArrayLike) -> Array:
    v = nutation(jd_tdb, NutationDirection.TRUE_TO_MEAN, accuracy, pos)
    v = precession(jd_tdb, v, JD_J2000)
    return frame_tie(v, FrameTieDirection.J2000_TO_ICRS)


def cio_location(
    jd_tdb: float,
    accuracy: Accuracy | int,
    system: CioSystem | int = CioSystem.TRUE_EQUINOX,
) -> CioLocation:
    """Right ascension of the CIO.

    Args:
        jd_tdb (float): TDB Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        system (CioSystem | int): Origin to measure the right ascension from.
            Default: ``CioSystem.TRUE_EQUINOX``.

    Returns:
        CioLocation: Right ascension of the CIO [h] and its origin.

    Raises:
        InvalidArgumentError: If *accuracy* or *system* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "cio_location", "accuracy")
    system = check_enum(CioSystem, system, "cio_location", "reference system")

    if system == CioSystem.TRUE_EQUINOX:
        ra_cio = -ira_equinox(jd_tdb, EquinoxType.TRUE, accuracy)
    else:
        x, y, s = cip_xys(jd_tdb, accuracy)
        c2i = c2ixys(x, y, s)
        ra_cio = jnp.arctan2(c2i[0, 1], c2i[0, 0]) / HOURANGLE

    return CioLocation(ra_cio=ra_cio, system=system)


def cio_basis(
    jd_tdb: float,
    ra_cio: float,
    system: CioSystem | int,
    accuracy: Accuracy | int,
) -> CioBasis:
    """Unit vectors of the celestial intermediate system, in the GCRS.

    The z axis is the true pole of date. The x axis points to the CIO, and
    ``y = z x x`` completes the right-handed system.

    Args:
        jd_tdb (float): TDB Julian Date.
        ra_cio (float): Right ascension of the CIO [h].
        system (CioSystem | int): Origin *ra_cio* is measured from.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.

    Returns:
        CioBasis: The ``x``, ``y`` and ``z`` axes.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid, or *system* is
            invalid (code 1).
    """
    accuracy = check_enum(Accuracy, accuracy, "cio_basis", "accuracy")
    system = check_enum(CioSystem, system, "cio_basis", "reference system", code=1)

    z = _tod_to_gcrs(jd_tdb, accuracy, [0.0, 0.0, 1.0])

    ra = ra_cio * 15.0 * DEG2RAD
    c, s = jnp.cos(ra), jnp.sin(ra)

    if system == CioSystem.GCRS:
        x = jnp.array([z[2] * c, z[2] * s, -z[0] * c - z[1] * s])
        x = x / jnp.linalg.norm(x)
    else:
        x = _tod_to_gcrs(jd_tdb, accuracy, jnp.array([c, s, 0.0]))

    y = jnp.cross(z, x)
    return CioBasis(x=x, y=y, z=z)


def cio_ra(jd_tt: float, accuracy: Accuracy | int) -> Array:
    """Right ascension of the CIO with respect to the true equinox of date.

    Args:
        jd_tt (float): TT Julian Date.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.

    Returns:
        Array: Right ascension of the CIO [h].

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
        NovaFramesError: Location failures forwarded with codes offset by
            10, basis failures offset by 20.
    """
    accuracy = check_enum(Accuracy, accuracy, "cio_ra", "accuracy")

    # TDB = TT to within 2 ms
    with propagate("cio_ra", 10):
        loc = cio_location(jd_tt, accuracy)
    with propagate("cio_ra", 20):
        basis = cio_basis(jd_tt, loc.ra_cio, loc.system, accuracy)

    # True equinox of date, in the GCRS
    eq = _tod_to_gcrs(jd_tt, accuracy, [1.0, 0.0, 0.0])

    az = jnp.arctan2(vdot(eq, basis.y), vdot(eq, basis.x))
    return -az / HOURANGLE
