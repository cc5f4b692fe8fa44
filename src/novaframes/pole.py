"""Celestial pole offsets.

Observed deviations of the celestial pole from the IAU 2006/2000A model, as
published in the IERS bulletins, can be folded into the true equator of
date. They are expressed either as d-psi / d-epsilon (ecliptic longitude
and obliquity, relative to the precession-nutation model) or as dx / dy
(GCRS pole coordinates). Internally they are always held as d-psi and
d-epsilon in arcseconds.

A process-wide :class:`PoleOffsets` instance is active by default. Any
context (a thread, an asyncio task, a block of code) can substitute its own
with :func:`using_pole_offsets`, so sessions that use different Earth
orientation data never see each other's corrections.

Example:
    ```python
    from novaframes.pole import PoleOffsets, using_pole_offsets
    from novaframes._types import PoleOffsetType

    eop = PoleOffsets()
    eop.set(2460000.5, PoleOffsetType.X_Y, 0.12, -0.05)   # mas

    with using_pole_offsets(eop):
        ...  # e_tilt, nutation, sidereal_time see the offsets
    ```
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

import jax.numpy as jnp
from jax import Array

from novaframes._types import FrameTieDirection, PoleOffsetType, check_enum
from novaframes.config import get_dtype
from novaframes.constants import AS2RAD, JD_J2000, JULIAN_CENTURY_DAYS, MAS2RAD
from novaframes.frame_tie import frame_tie
from novaframes.obliquity import mean_obliq
from novaframes.precession import precession

logger = logging.getLogger(__name__)


def polar_dxdy_to_dpsideps(jd_tt: float, dx: float, dy: float) -> tuple[Array, Array]:
    """Convert GCRS pole offsets dx, dy to d-psi, d-epsilon of date.

    Uses eqs. (7)-(9) of Kaplan (2003): a linear model of the pole trajectory
    in the GCRS gives the z offset, and the offset vector is carried to the
    mean equator of date with the frame tie and precession.

    Args:
        jd_tt (float): TT Julian Date.
        dx (float): GCRS pole offset dx [mas].
        dy (float): GCRS pole offset dy [mas].

    Returns:
        tuple: ``(dpsi, deps)`` [arcsec].

    References:

        1. G. Kaplan, *USNO/AA Technical Note 2003-03*, 2003.
    """
    t = (jd_tt - JD_J2000) / JULIAN_CENTURY_DAYS

    x = (2004.190 * t) * AS2RAD
    dz = -(x + 0.5 * x * x * x) * dx

    dp = jnp.array([dx, dy, dz], dtype=get_dtype()) * MAS2RAD
    dp = frame_tie(dp, FrameTieDirection.ICRS_TO_J2000)
    dp = precession(JD_J2000, dp, jd_tt)

    sin_e = jnp.sin(mean_obliq(jd_tt) * AS2RAD)
    return (dp[0] / sin_e) / AS2RAD, dp[1] / AS2RAD


@dataclass
class PoleOffsets:
    """Standing celestial pole offsets applied to the true equator of date.

    Attributes:
        dpsi: Offset in ecliptic longitude [arcsec].
        deps: Offset in obliquity [arcsec].
    """

    dpsi: float = 0.0
    deps: float = 0.0

    def set(self, jd_tt: float, kind: PoleOffsetType | int, dpole1: float, dpole2: float) -> PoleOffsets:
        """Set the offsets from published values.

        Args:
            jd_tt (float): TT Julian Date, used only to convert ``X_Y`` offsets.
            kind (PoleOffsetType | int): Meaning of *dpole1* and *dpole2*.
            dpole1 (float): d-psi or dx [mas].
            dpole2 (float): d-epsilon or dy [mas].

        Returns:
            PoleOffsets: ``self``.

        Raises:
            InvalidArgumentError: If *kind* is invalid (code 1). The offsets
                are left unchanged.
        """
        kind = check_enum(PoleOffsetType, kind, "cel_pole", "polar offset type", code=1)

        if kind == PoleOffsetType.DPSI_DEPS:
            dpsi, deps = 1e-3 * dpole1, 1e-3 * dpole2
        else:
            dpsi, deps = polar_dxdy_to_dpsideps(jd_tt, dpole1, dpole2)

        self.dpsi = float(dpsi)
        self.deps = float(deps)
        logger.info("Celestial pole offsets set to dpsi=%.6f as, deps=%.6f as", self.dpsi, self.deps)
        return self

    def reset(self) -> None:
        """Zero both offsets."""
        self.dpsi = 0.0
        self.deps = 0.0


_default = PoleOffsets()
_active: contextvars.ContextVar[PoleOffsets | None] = contextvars.ContextVar(
    "novaframes_pole_offsets", default=None
)


def get_pole_offsets() -> PoleOffsets:
    """Return the process-wide default offsets."""
    return _default


def current_pole_offsets() -> PoleOffsets:
    """Return the offsets active in the current context.

    Returns:
        PoleOffsets: The innermost :func:`using_pole_offsets` instance, or the
        process-wide default.
    """
    offsets = _active.get()
    return _default if offsets is None else offsets


@contextmanager
def using_pole_offsets(offsets: PoleOffsets) -> Iterator[PoleOffsets]:
    """Make *offsets* the active pole offsets for the enclosed block.

    Args:
        offsets (PoleOffsets): Offsets to activate.

    Yields:
        PoleOffsets: *offsets*.
    """
    token = _active.set(offsets)
    try:
        yield offsets
    finally:
        _active.reset(token)


def cel_pole(
    jd_tt: float,
    kind: PoleOffsetType | int,
    dpole1: float,
    dpole2: float,
    offsets: PoleOffsets | None = None,
) -> PoleOffsets:
    """Set celestial pole offsets for the true equator of date.

    Args:
        jd_tt (float): TT Julian Date, used only for ``X_Y`` offsets.
        kind (PoleOffsetType | int): ``DPSI_DEPS`` or ``X_Y``.
        dpole1 (float): d-psi or dx [mas].
        dpole2 (float): d-epsilon or dy [mas].
        offsets (PoleOffsets | None): Instance to update. Default: the
            offsets active in the current context.

    Returns:
        PoleOffsets: The updated instance.

    Raises:
        InvalidArgumentError: If *kind* is invalid (code 1).
    """
    if offsets is None:
        offsets = current_pole_offsets()
    return offsets.set(jd_tt, kind, dpole1, dpole2)
