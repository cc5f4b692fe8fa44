"""Type definitions for frame-transformation selectors and results.

Selectors are :class:`enum.IntEnum` subclasses whose values follow the
classic NOVAS C enumerations, so integer arguments coming from legacy code
keep their meaning. :func:`check_enum` converts such arguments and raises
:class:`~novaframes.errors.InvalidArgumentError` for anything outside the
enumeration; selectors are never silently normalized.

Multi-valued results are :class:`~typing.NamedTuple` subclasses, which JAX
treats as pytrees.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, TypeVar

from jax import Array

from novaframes.errors import InvalidArgumentError


class Accuracy(enum.IntEnum):
    """Accuracy of the series evaluations.

    Attributes:
        FULL: Complete IAU 2006/2000A series.
        REDUCED: Truncated series, about 1 milliarcsecond.
    """

    FULL = 0
    REDUCED = 1


class PoleOffsetType(enum.IntEnum):
    """Kind of celestial pole offsets passed to :func:`~novaframes.pole.cel_pole`.

    Attributes:
        DPSI_DEPS: Offsets in longitude and obliquity (d-psi, d-epsilon).
        X_Y: GCRS pole offsets dx, dy as published by the IERS.
    """

    DPSI_DEPS = 1
    X_Y = 2


class NutationDirection(enum.IntEnum):
    """Direction of the nutation rotation."""

    MEAN_TO_TRUE = 0
    TRUE_TO_MEAN = -1


class FrameTieDirection(enum.IntEnum):
    """Direction of the ICRS / dynamical J2000 frame tie."""

    J2000_TO_ICRS = -1
    ICRS_TO_J2000 = 0


class EquinoxType(enum.IntEnum):
    """Mean or true equinox of date."""

    MEAN = 0
    TRUE = 1


class EarthRotationMeasure(enum.IntEnum):
    """Convention for the Earth rotation between celestial and terrestrial frames.

    Attributes:
        ERA: IAU 2006 Earth Rotation Angle about the CIP, from the CIO.
        GST: Legacy Greenwich apparent sidereal time, from the true equinox.
    """

    ERA = 0
    GST = 1


class WobbleDirection(enum.IntEnum):
    """Direction of the polar motion correction.

    PEF (pseudo Earth-fixed) directions omit the TIO locator s'; TIRS
    directions include it.
    """

    ITRS_TO_PEF = 0
    ITRS_TO_TIRS = 1
    TIRS_TO_ITRS = 2
    PEF_TO_ITRS = 3


class CioSystem(enum.IntEnum):
    """Reference system in which a CIO right ascension is expressed.

    Attributes:
        GCRS: Right ascension measured from the GCRS origin.
        TRUE_EQUINOX: Right ascension measured from the true equinox of date.
    """

    GCRS = 1
    TRUE_EQUINOX = 2


class CelestialFrame(enum.IntEnum):
    """Celestial side of a celestial <-> terrestrial conversion.

    Attributes:
        GCRS: Geocentric Celestial Reference System (either convention).
        CIRS: Celestial Intermediate Reference System (ERA convention only).
        TOD: True equator and equinox of date (GST convention only).
    """

    GCRS = 0
    CIRS = 1
    TOD = 2


class DynamicalFrame(enum.IntEnum):
    """Equatorial systems of date reachable from the GCRS."""

    MOD = 0
    TOD = 1
    CIRS = 2


class Planet(enum.IntEnum):
    """Major solar-system body identifiers."""

    SSB = 0
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    PLUTO = 9
    SUN = 10
    MOON = 11


E = TypeVar("E", bound=enum.IntEnum)


def check_enum(enum_type: type[E], value, where: str, what: str, code: int = -1) -> E:
    """Convert *value* to *enum_type* or raise.

    Args:
        enum_type: Target enumeration.
        value: Member or integer value.
        where: Calling function, for the error message.
        what: Argument description, for the error message.
        code: Status code carried by the error.

    Returns:
        The enumeration member.

    Raises:
        InvalidArgumentError: If *value* is not a member of *enum_type*.
    """
    try:
        return enum_type(value)
    except (ValueError, TypeError):
        raise InvalidArgumentError(
            f"{where}: invalid {what}: {value!r}", code=code, stage=where
        ) from None


class DelaunayArgs(NamedTuple):
    """Fundamental (Delaunay) arguments of the Moon and Sun.

    Attributes:
        l: Mean anomaly of the Moon [rad].
        l1: Mean anomaly of the Sun [rad].
        F: Mean argument of latitude of the Moon [rad].
        D: Mean elongation of the Moon from the Sun [rad].
        Omega: Mean longitude of the Moon's ascending node [rad].
    """

    l: Array  # noqa: E741
    l1: Array
    F: Array
    D: Array
    Omega: Array


class EarthTilt(NamedTuple):
    """Orientation of the Earth's rotation axis at one epoch.

    Attributes:
        mean_obliquity: Mean obliquity of the ecliptic [deg].
        true_obliquity: True obliquity of the ecliptic [deg].
        equation_of_equinoxes: Equation of the equinoxes [s of time].
        dpsi: Nutation in longitude, including pole offsets [arcsec].
        deps: Nutation in obliquity, including pole offsets [arcsec].
    """

    mean_obliquity: Array
    true_obliquity: Array
    equation_of_equinoxes: Array
    dpsi: Array
    deps: Array


class CioLocation(NamedTuple):
    """Right ascension of the CIO and the system it is measured in.

    Attributes:
        ra_cio: Right ascension of the CIO [h].
        system: Origin of the right ascension.
    """

    ra_cio: Array
    system: CioSystem


class CioBasis(NamedTuple):
    """GCRS unit vectors of the celestial intermediate system axes."""

    x: Array
    y: Array
    z: Array
