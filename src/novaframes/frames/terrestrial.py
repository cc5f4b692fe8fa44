"""Transformations between celestial frames and the ITRS.

Two conventions are supported and are never mixed:

- **ERA** (IAU 2006, CIO based): GCRS -> CIRS -> (Earth Rotation Angle) ->
  TIRS -> (polar motion with s') -> ITRS.
- **GST** (equinox based): GCRS -> TOD -> (apparent sidereal time) ->
  PEF -> (polar motion) -> ITRS.

:func:`cel2ter` and :func:`ter2cel` take the celestial frame explicitly: the
GCRS works with either convention, the CIRS only with ERA and TOD only with
GST. The named converters below them cover the common pairs.

Dates are split UT1 Julian Dates for the generalized entry points, or split
TT Julian Dates for the named converters. TT is derived from UT1 with
``ut1_to_tt`` (TT - UT1, in seconds), and TDB is taken equal to TT.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from novaframes._types import (
    Accuracy,
    CelestialFrame,
    EarthRotationMeasure,
    EquinoxType,
    WobbleDirection,
    check_enum,
)
from novaframes.constants import DAY
from novaframes.earth import era, sidereal_time, wobble
from novaframes.errors import InvalidArgumentError, propagate
from novaframes.frames.celestial import cirs_to_gcrs, gcrs_to_cirs, gcrs_to_tod, tod_to_gcrs
from novaframes.rotations import as_vector, spin

_ALLOWED_FRAMES = {
    EarthRotationMeasure.ERA: (CelestialFrame.GCRS, CelestialFrame.CIRS),
    EarthRotationMeasure.GST: (CelestialFrame.GCRS, CelestialFrame.TOD),
}


def _check_args(where: str, accuracy, erot, frame) -> tuple[Accuracy, EarthRotationMeasure, CelestialFrame]:
    accuracy = check_enum(Accuracy, accuracy, where, "accuracy", code=1)
    erot = check_enum(EarthRotationMeasure, erot, where, "Earth rotation measure type", code=2)
    frame = check_enum(CelestialFrame, frame, where, "celestial frame")
    if frame not in _ALLOWED_FRAMES[erot]:
        raise InvalidArgumentError(
            f"{where}: {frame.name} cannot be used with the {erot.name} rotation measure",
            stage=where,
        )
    return accuracy, erot, frame


def cel2ter(
    jd_ut1_high: float,
    jd_ut1_low: float,
    ut1_to_tt: float,
    erot: EarthRotationMeasure | int,
    accuracy: Accuracy | int,
    frame: CelestialFrame | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Rotate a vector from a celestial frame to the ITRS.

    Args:
        jd_ut1_high (float): High-order part of the UT1 Julian Date.
        jd_ut1_low (float): Low-order part of the UT1 Julian Date.
        ut1_to_tt (float): TT - UT1 [s].
        erot (EarthRotationMeasure | int): ``ERA`` or ``GST``.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        frame (CelestialFrame | int): Frame of *pos*: ``GCRS``, or ``CIRS``
            with ``ERA``, or ``TOD`` with ``GST``.
        xp (float): Polar motion x [arcsec].
        yp (float): Polar motion y [arcsec].
        pos (ArrayLike): Input vector.

    Returns:
        Array: ITRS vector.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid (code 1), *erot* is
            invalid (code 2), or *frame* does not match *erot*.
        NovaFramesError: Celestial-stage failures, with codes offset by 10.

    Examples:
        ```python
        from novaframes import Accuracy, CelestialFrame, EarthRotationMeasure
        from novaframes.frames import cel2ter

        itrs = cel2ter(2460000.5, 0.25, 69.2, EarthRotationMeasure.ERA,
                       Accuracy.FULL, CelestialFrame.GCRS, 0.1, 0.3, [1.0, 0.0, 0.0])
        ```
    """
    v = as_vector(pos, "cel2ter")
    accuracy, erot, frame = _check_args("cel2ter", accuracy, erot, frame)

    jd_tt = float(jd_ut1_high) + float(jd_ut1_low) + ut1_to_tt / DAY

    if erot == EarthRotationMeasure.ERA:
        if frame == CelestialFrame.GCRS:
            with propagate("cel2ter", 10):
                v = gcrs_to_cirs(jd_tt, accuracy, v)
        v = spin(era(jd_ut1_high, jd_ut1_low), v)
        return wobble(jd_tt, WobbleDirection.TIRS_TO_ITRS, xp, yp, v)

    if frame == CelestialFrame.GCRS:
        with propagate("cel2ter", 10):
            v = gcrs_to_tod(jd_tt, accuracy, v)
    with propagate("cel2ter"):
        gast = sidereal_time(jd_ut1_high, jd_ut1_low, ut1_to_tt, EquinoxType.TRUE, erot, accuracy)
    v = spin(15.0 * gast, v)
    if xp or yp:
        v = wobble(jd_tt, WobbleDirection.PEF_TO_ITRS, xp, yp, v)
    return v


def ter2cel(
    jd_ut1_high: float,
    jd_ut1_low: float,
    ut1_to_tt: float,
    erot: EarthRotationMeasure | int,
    accuracy: Accuracy | int,
    frame: CelestialFrame | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Rotate an ITRS vector to a celestial frame.

    The exact reverse of :func:`cel2ter`.

    Args:
        jd_ut1_high (float): High-order part of the UT1 Julian Date.
        jd_ut1_low (float): Low-order part of the UT1 Julian Date.
        ut1_to_tt (float): TT - UT1 [s].
        erot (EarthRotationMeasure | int): ``ERA`` or ``GST``.
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        frame (CelestialFrame | int): Output frame: ``GCRS``, or ``CIRS``
            with ``ERA``, or ``TOD`` with ``GST``.
        xp (float): Polar motion x [arcsec].
        yp (float): Polar motion y [arcsec].
        pos (ArrayLike): ITRS vector.

    Returns:
        Array: Vector in *frame*.

    Raises:
        InvalidArgumentError: If *accuracy* is invalid (code 1), *erot* is
            invalid (code 2), or *frame* does not match *erot*.
        NovaFramesError: Celestial-stage failures, with codes offset by 10.
    """
    v = as_vector(pos, "ter2cel")
    accuracy, erot, frame = _check_args("ter2cel", accuracy, erot, frame)

    jd_tt = float(jd_ut1_high) + float(jd_ut1_low) + ut1_to_tt / DAY

    if erot == EarthRotationMeasure.ERA:
        v = wobble(jd_tt, WobbleDirection.ITRS_TO_TIRS, xp, yp, v)
        v = spin(-era(jd_ut1_high, jd_ut1_low), v)
        if frame == CelestialFrame.GCRS:
            with propagate("ter2cel", 10):
                v = cirs_to_gcrs(jd_tt, accuracy, v)
        return v

    if xp or yp:
        v = wobble(jd_tt, WobbleDirection.ITRS_TO_PEF, xp, yp, v)
    with propagate("ter2cel"):
        gast = sidereal_time(jd_ut1_high, jd_ut1_low, ut1_to_tt, EquinoxType.TRUE, erot, accuracy)
    v = spin(-15.0 * gast, v)
    if frame == CelestialFrame.GCRS:
        with propagate("ter2cel", 10):
            v = tod_to_gcrs(jd_tt, accuracy, v)
    return v


# ---------------------------------------------------------------------------
# Named converters (TT-based dates)
# ---------------------------------------------------------------------------


def _ut1_low(jd_tt_low: float, ut1_to_tt: float) -> float:
    return jd_tt_low - ut1_to_tt / DAY


def cirs_to_itrs(
    jd_tt_high: float,
    jd_tt_low: float,
    ut1_to_tt: float,
    accuracy: Accuracy | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Rotate a CIRS vector to the ITRS.

    Args:
        jd_tt_high (float): High-order part of the TT Julian Date.
        jd_tt_low (float): Low-order part of the TT Julian Date.
        ut1_to_tt (float): TT - UT1 [s].
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        xp (float): Polar motion x [arcsec].
        yp (float): Polar motion y [arcsec].
        pos (ArrayLike): CIRS vector.

    Returns:
        Array: ITRS vector.
    """
    with propagate("cirs_to_itrs"):
        return cel2ter(jd_tt_high, _ut1_low(jd_tt_low, ut1_to_tt), ut1_to_tt, EarthRotationMeasure.ERA,
                       accuracy, CelestialFrame.CIRS, xp, yp, pos)


def itrs_to_cirs(
    jd_tt_high: float,
    jd_tt_low: float,
    ut1_to_tt: float,
    accuracy: Accuracy | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Rotate an ITRS vector to the CIRS. See :func:`cirs_to_itrs` for arguments."""
    with propagate("itrs_to_cirs"):
        return ter2cel(jd_tt_high, _ut1_low(jd_tt_low, ut1_to_tt), ut1_to_tt, EarthRotationMeasure.ERA,
                       accuracy, CelestialFrame.CIRS, xp, yp, pos)


def tod_to_itrs(
    jd_tt_high: float,
    jd_tt_low: float,
    ut1_to_tt: float,
    accuracy: Accuracy | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Rotate a true-of-date vector to the ITRS. See :func:`cirs_to_itrs` for arguments."""
    with propagate("tod_to_itrs"):
        return cel2ter(jd_tt_high, _ut1_low(jd_tt_low, ut1_to_tt), ut1_to_tt, EarthRotationMeasure.GST,
                       accuracy, CelestialFrame.TOD, xp, yp, pos)


def itrs_to_tod(
    jd_tt_high: float,
    jd_tt_low: float,
    ut1_to_tt: float,
    accuracy: Accuracy | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
) -> Array:
    """Rotate an ITRS vector to the true equator and equinox of date."""
    with propagate("itrs_to_tod"):
        return ter2cel(jd_tt_high, _ut1_low(jd_tt_low, ut1_to_tt), ut1_to_tt, EarthRotationMeasure.GST,
                       accuracy, CelestialFrame.TOD, xp, yp, pos)


def gcrs_to_itrs(
    jd_tt_high: float,
    jd_tt_low: float,
    ut1_to_tt: float,
    accuracy: Accuracy | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
    erot: EarthRotationMeasure | int = EarthRotationMeasure.ERA,
) -> Array:
    """Rotate a GCRS vector to the ITRS.

    Args:
        jd_tt_high (float): High-order part of the TT Julian Date.
        jd_tt_low (float): Low-order part of the TT Julian Date.
        ut1_to_tt (float): TT - UT1 [s].
        accuracy (Accuracy | int): ``FULL`` or ``REDUCED``.
        xp (float): Polar motion x [arcsec].
        yp (float): Polar motion y [arcsec].
        pos (ArrayLike): GCRS vector.
        erot (EarthRotationMeasure | int): Convention. Default: ``ERA``.

    Returns:
        Array: ITRS vector.
    """
    with propagate("gcrs_to_itrs"):
        return cel2ter(jd_tt_high, _ut1_low(jd_tt_low, ut1_to_tt), ut1_to_tt, erot,
                       accuracy, CelestialFrame.GCRS, xp, yp, pos)


def itrs_to_gcrs(
    jd_tt_high: float,
    jd_tt_low: float,
    ut1_to_tt: float,
    accuracy: Accuracy | int,
    xp: float,
    yp: float,
    pos: ArrayLike,
    erot: EarthRotationMeasure | int = EarthRotationMeasure.ERA,
) -> Array:
    """Rotate an ITRS vector to the GCRS. See :func:`gcrs_to_itrs` for arguments."""
    with propagate("itrs_to_gcrs"):
        return ter2cel(jd_tt_high, _ut1_low(jd_tt_low, ut1_to_tt), ut1_to_tt, erot,
                       accuracy, CelestialFrame.GCRS, xp, yp, pos)
