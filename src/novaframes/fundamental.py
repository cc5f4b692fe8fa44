"""Fundamental arguments of the Sun, Moon and planets.

Mean elements of Simon et al. (1994), used as arguments of the nutation and
equation-of-the-equinoxes series. All functions take ``t``, the TDB time in
Julian centuries since J2000.0, and are plain ``jnp`` kernels.

References:

    1. J. L. Simon et al., *Astronomy and Astrophysics 282*, 1994, pp. 663-683.
    2. IERS Conventions (2003), Chapter 5.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes._types import DelaunayArgs, Planet
from novaframes.config import get_dtype
from novaframes.constants import AS2RAD
from novaframes.errors import record_error
from novaframes.utils import norm_ang, principal_angle

# Mean longitudes (rad) at J2000 and rates (rad/cy), Mercury through Neptune
_PLANET_LONGITUDES = {
    Planet.MERCURY: (4.402608842461, 2608.790314157421),
    Planet.VENUS: (3.176146696956, 1021.328554621099),
    Planet.EARTH: (1.753470459496, 628.307584999142),
    Planet.MARS: (6.203476112911, 334.061242669982),
    Planet.JUPITER: (0.599547105074, 52.969096264064),
    Planet.SATURN: (0.874016284019, 21.329910496032),
    Planet.URANUS: (5.481293871537, 7.478159856729),
    Planet.NEPTUNE: (5.311886286677, 3.813303563778),
}


def _arcsec_quartic(t: Array, c0: float, c1: float, c2: float, c3: float, c4: float) -> Array:
    return norm_ang((c0 + t * (c1 + t * (c2 + t * (c3 + t * c4)))) * AS2RAD)


def fund_args(t: ArrayLike) -> DelaunayArgs:
    """Compute the Delaunay arguments of the Sun and Moon.

    Args:
        t (ArrayLike): TDB Julian centuries since J2000.0.

    Returns:
        DelaunayArgs: ``l, l1, F, D, Omega`` in radians, each in [0, 2pi).

    Examples:
        ```python
        from novaframes.fundamental import fund_args

        args = fund_args(0.0)
        args.Omega  # ~2.1824 rad, longitude of the lunar node
        ```
    """
    t = jnp.asarray(t, dtype=get_dtype())
    return DelaunayArgs(
        l=_arcsec_quartic(t, 485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470),
        l1=_arcsec_quartic(t, 1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149),
        F=_arcsec_quartic(t, 335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417),
        D=_arcsec_quartic(t, 1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169),
        Omega=_arcsec_quartic(t, 450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939),
    )


def accum_prec(t: ArrayLike) -> Array:
    """General accumulated precession in longitude.

    Equivalent to 5028.8200 arcsec/cy at J2000.

    Args:
        t (ArrayLike): TDB Julian centuries since J2000.0.

    Returns:
        Array: Accumulated precession [rad] in [-pi, pi].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    return principal_angle((0.024380407358 + 0.000005391235 * t) * t)


def planet_lon(t: ArrayLike, planet: Planet | int) -> Array | float:
    """Mean longitude of a major planet, with high-order terms omitted.

    The longitude is referred to the mean dynamical ecliptic and equinox of
    J2000.

    Args:
        t (ArrayLike): TDB Julian centuries since J2000.0.
        planet (Planet | int): ``Planet.MERCURY`` through ``Planet.NEPTUNE``.

    Returns:
        Mean longitude [rad] in [-pi, pi], or ``nan`` when *planet* is out of
        range, in which case an ``EINVAL`` record is left for
        :func:`~novaframes.errors.last_error`.
    """
    try:
        coeffs = _PLANET_LONGITUDES.get(Planet(planet))
    except ValueError:
        coeffs = None
    if coeffs is None:
        return record_error("planet_lon", f"invalid planet number: {planet}")

    t = jnp.asarray(t, dtype=get_dtype())
    return principal_angle(coeffs[0] + coeffs[1] * t)
