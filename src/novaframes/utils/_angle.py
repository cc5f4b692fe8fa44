"""Angle normalization helpers.

``norm_ang`` maps onto [0, 2pi) the way the fundamental arguments are
reported; ``principal_angle`` is the IEEE-754 ``remainder`` operation,
which rounds the quotient to the nearest integer and therefore maps onto
[-pi, pi]. ``jnp.remainder`` is a floor modulo and is not a substitute.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes.constants import D2PI


def ieee_remainder(x: ArrayLike, y: ArrayLike) -> Array:
    """IEEE-754 remainder of *x* by *y*: ``x - n*y`` with ``n = round(x/y)``.

    Args:
        x (ArrayLike): Dividend.
        y (ArrayLike): Divisor.

    Returns:
        Remainder in [-|y|/2, |y|/2].
    """
    x = jnp.asarray(x)
    return x - y * jnp.round(x / y)


def principal_angle(angle: ArrayLike) -> Array:
    """Reduce an angle in radians to [-pi, pi].

    Args:
        angle (ArrayLike): Angle [rad].

    Returns:
        Equivalent angle in [-pi, pi].
    """
    return ieee_remainder(angle, D2PI)


def norm_ang(angle: ArrayLike) -> Array:
    """Reduce an angle in radians to [0, 2pi).

    Args:
        angle (ArrayLike): Angle [rad].

    Returns:
        Equivalent angle in [0, 2pi).
    """
    a = ieee_remainder(angle, D2PI)
    return jnp.where(a < 0.0, a + D2PI, a)
