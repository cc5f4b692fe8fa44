"""Frame tie between the ICRS and the dynamical mean equator and equinox of J2000.0.

The frame bias is a fixed rotation of a few tens of milliarcseconds,
applied here to second order in the bias angles.

References:

    1. IERS Conventions (2003), Chapter 5.
    2. G. Kaplan, *USNO/AA Technical Note 2003-03*, 2003.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from novaframes._types import FrameTieDirection, check_enum
from novaframes.constants import AS2RAD, FRAME_BIAS_DA0, FRAME_BIAS_ETA0, FRAME_BIAS_XI0
from novaframes.rotations import tiny_rotate

_XI0 = FRAME_BIAS_XI0 * AS2RAD
_ETA0 = FRAME_BIAS_ETA0 * AS2RAD
_DA0 = FRAME_BIAS_DA0 * AS2RAD


def frame_tie(pos: ArrayLike, direction: FrameTieDirection | int) -> Array:
    """Transform a vector between the ICRS and the dynamical J2000 system.

    Args:
        pos (ArrayLike): Input vector.
        direction (FrameTieDirection | int): ``ICRS_TO_J2000`` or ``J2000_TO_ICRS``.

    Returns:
        Array: Transformed vector.

    Raises:
        InvalidArgumentError: If *direction* is invalid or *pos* is not a
            3-vector.
    """
    direction = check_enum(FrameTieDirection, direction, "frame_tie", "direction")

    if direction == FrameTieDirection.J2000_TO_ICRS:
        return tiny_rotate(pos, -_ETA0, _XI0, _DA0)
    return tiny_rotate(pos, _ETA0, -_XI0, -_DA0)
