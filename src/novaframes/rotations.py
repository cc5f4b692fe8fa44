"""Elementary rotations and vector helpers.

``Rx``, ``Ry`` and ``Rz`` rotate the coordinate *frame* counter-clockwise
about an axis, so ``Rz(a) @ v`` lowers the longitude of ``v`` by ``a``. All
composite transforms in novaframes are products of these three matrices.

Vectors are plain 3-element ``jnp`` arrays. Every function returns a new
array, so a caller may pass the same array as input to several stages or
overwrite its input with the result without corrupting anything.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes.config import get_dtype
from novaframes.constants import DEG2RAD, HOURANGLE, RAD2DEG
from novaframes.errors import InvalidArgumentError


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix for a frame rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.
    """
    if use_degrees:
        angle = angle * DEG2RAD

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]], dtype=get_dtype())


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix for a frame rotation about the y-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.
    """
    if use_degrees:
        angle = angle * DEG2RAD

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   -s],
                      [0.0, +1.0,  0.0],
                      [ +s,  0.0,   +c]], dtype=get_dtype())


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix for a frame rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.
    """
    if use_degrees:
        angle = angle * DEG2RAD

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]], dtype=get_dtype())


def as_vector(pos, where: str = "as_vector") -> Array:
    """Validate and convert a position-like input to a 3-vector.

    Args:
        pos: Array-like of 3 floats.
        where: Calling function, for the error message.

    Returns:
        Array: New ``(3,)`` array of the configured dtype.

    Raises:
        InvalidArgumentError: If *pos* is ``None`` or not a 3-vector.
    """
    if pos is None:
        raise InvalidArgumentError(f"{where}: input vector is None", stage=where)
    v = jnp.asarray(pos, dtype=get_dtype())
    if v.shape != (3,):
        raise InvalidArgumentError(
            f"{where}: expected a 3-vector, got shape {v.shape}", stage=where
        )
    return jnp.array(v)


def spin(angle: ArrayLike, pos: ArrayLike) -> Array:
    """Rotate the frame about the z-axis by *angle* degrees.

    Args:
        angle (ArrayLike): Rotation angle [deg].
        pos (ArrayLike): Input vector.

    Returns:
        Array: Vector expressed in the rotated frame.
    """
    return Rz(angle, use_degrees=True) @ as_vector(pos, "spin")


def tiny_rotate(pos: ArrayLike, ax: float, ay: float, az: float) -> Array:
    """Apply a small rotation, accurate to second order in the angles.

    Rotates *pos* right-handedly about the rotation vector
    ``a = (ax, ay, az)`` [rad], using ``v + a x v + (a (a . v) - |a|^2 v) / 2``.
    For a single axis this equals the frame rotation by the negated angle,
    e.g. ``tiny_rotate(v, 0, 0, az) ~ Rz(-az) @ v``. The error is of order
    ``|a|^3``, far below double precision for milliarcsecond-scale biases.

    Args:
        pos (ArrayLike): Input vector.
        ax (float): Rotation about x [rad].
        ay (float): Rotation about y [rad].
        az (float): Rotation about z [rad].

    Returns:
        Array: Rotated vector.
    """
    v = as_vector(pos, "tiny_rotate")
    a = jnp.array([ax, ay, az], dtype=get_dtype())
    return v + jnp.cross(a, v) + 0.5 * (a * jnp.dot(a, v) - jnp.dot(a, a) * v)


def vdot(u: ArrayLike, v: ArrayLike) -> Array:
    """Dot product of two 3-vectors."""
    return jnp.dot(as_vector(u, "vdot"), as_vector(v, "vdot"))


def vector_to_radec(pos: ArrayLike) -> tuple[Array, Array]:
    """Convert an equatorial vector to right ascension and declination.

    Args:
        pos (ArrayLike): Position vector, any length unit.

    Returns:
        tuple: ``(ra, dec)``, right ascension [h] in [0, 24) and declination
        [deg]. At the poles the right ascension is 0.

    Raises:
        InvalidArgumentError: If *pos* is the zero vector.
    """
    v = as_vector(pos, "vector_to_radec")
    xy2 = v[0] * v[0] + v[1] * v[1]
    if float(xy2 + v[2] * v[2]) == 0.0:
        raise InvalidArgumentError("vector_to_radec: zero vector", code=1, stage="vector_to_radec")

    if float(xy2) == 0.0:
        ra = jnp.asarray(0.0, dtype=get_dtype())
        dec = jnp.where(v[2] < 0.0, -90.0, 90.0)
        return ra, dec

    ra = jnp.arctan2(v[1], v[0]) / HOURANGLE
    ra = jnp.where(ra < 0.0, ra + 24.0, ra)
    dec = jnp.arctan2(v[2], jnp.sqrt(xy2)) * RAD2DEG
    return ra, dec


def radec_to_vector(ra: ArrayLike, dec: ArrayLike, dist: ArrayLike = 1.0) -> Array:
    """Convert right ascension and declination to an equatorial vector.

    Args:
        ra (ArrayLike): Right ascension [h].
        dec (ArrayLike): Declination [deg].
        dist (ArrayLike): Length of the result. Default: ``1.0``

    Returns:
        Array: Position vector.
    """
    a = ra * HOURANGLE
    d = dec * DEG2RAD
    cd = jnp.cos(d)
    return dist * jnp.array([cd * jnp.cos(a), cd * jnp.sin(a), jnp.sin(d)], dtype=get_dtype())
