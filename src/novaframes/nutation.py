"""Nutation between the mean and true equator and equinox of date.

The rotation is ``R1(-eps_true) R3(-dpsi) R1(eps_mean)`` (mean to true),
built from the angles of :func:`~novaframes.equinox.e_tilt`.

References:

    1. *Explanatory Supplement to the Astronomical Almanac*, pp. 114-115.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from novaframes._types import Accuracy, EarthTilt, NutationDirection, check_enum
from novaframes.constants import AS2RAD, DEG2RAD
from novaframes.equinox import e_tilt
from novaframes.pole import PoleOffsets
from novaframes.rotations import Rx, Rz, as_vector


def nutation_matrix(tilt: EarthTilt) -> Array:
    """Mean-to-true nutation matrix for the given axis orientation.

    Args:
        tilt (EarthTilt): Output of :func:`~novaframes.equinox.e_tilt`.

    Returns:
        Array: 3x3 rotation matrix, mean of date to true of date.
    """
    return (
        Rx(-tilt.true_obliquity * DEG2RAD)
        @ Rz(-tilt.dpsi * AS2RAD)
        @ Rx(tilt.mean_obliquity * DEG2RAD)
    )


def nutation(
    jd_tdb: float,
    direction: NutationDirection | int,
    accuracy: Accuracy | int,
    pos: ArrayLike,
    pole: PoleOffsets | None = None,
) -> Array:
    """Nutate equatorial rectangular coordinates.

    Args:
        jd_tdb (float): TDB Julian Date.
        direction (NutationDirection | int): ``MEAN_TO_TRUE`` or ``TRUE_TO_MEAN``.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        pos (ArrayLike): Input vector, referred to the mean (or true) equator
            and equinox of date.
        pole (PoleOffsets | None): Pole offsets. Default: the offsets active in
            the current context.

    Returns:
        Array: Vector referred to the true (or mean) equator and equinox of
        date.

    Raises:
        InvalidArgumentError: If *direction* or *accuracy* is invalid, or
            *pos* is not a 3-vector.
    """
    direction = check_enum(NutationDirection, direction, "nutation", "direction")
    v = as_vector(pos, "nutation")

    n = nutation_matrix(e_tilt(jd_tdb, accuracy, pole))

    if direction == NutationDirection.MEAN_TO_TRUE:
        return n @ v
    return n.T @ v
