"""Mean obliquity of the ecliptic and complementary terms of the equation of the equinoxes.

References:

    1. N. Capitaine et al., *Astronomy and Astrophysics 412*, 2003, pp. 567-586.
    2. N. Capitaine, P. T. Wallace and D. D. McCarthy, *Astronomy and
       Astrophysics 406*, 2003, pp. 1135-1149, Table 3.
    3. IERS Conventions (2010), Chapter 5, Table 5.2e.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from novaframes._types import Accuracy, Planet, check_enum
from novaframes.config import get_dtype
from novaframes.constants import AS2RAD, JD_J2000, JULIAN_CENTURY_DAYS
from novaframes.fundamental import accum_prec, fund_args, planet_lon
from novaframes.utils.caching import SingleSlotCache

# Multipliers of the 14 arguments for the t^0 terms. Columns: l, l', F, D,
# Omega, mean longitudes of Mercury through Neptune, general precession.
_KE0 = jnp.array([
    [0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, -1, 1, 0, -8, 12, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, -2, 2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, -1],
    [0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [2, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 4, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 2, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, -2, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0],
], dtype=jnp.float64)

# Sine and cosine amplitudes of the t^0 terms [arcsec]
_SE0 = jnp.array([
    [+2640.96e-6, -0.39e-6],
    [+63.52e-6, -0.02e-6],
    [+11.75e-6, +0.01e-6],
    [+11.21e-6, +0.01e-6],
    [-4.55e-6, +0.00e-6],
    [+2.02e-6, +0.00e-6],
    [+1.98e-6, +0.00e-6],
    [-1.72e-6, +0.00e-6],
    [-1.41e-6, -0.01e-6],
    [-1.26e-6, -0.01e-6],
    [-0.63e-6, +0.00e-6],
    [-0.63e-6, +0.00e-6],
    [+0.46e-6, +0.00e-6],
    [+0.45e-6, +0.00e-6],
    [+0.36e-6, +0.00e-6],
    [-0.24e-6, -0.12e-6],
    [+0.32e-6, +0.00e-6],
    [+0.28e-6, +0.00e-6],
    [+0.27e-6, +0.00e-6],
    [+0.26e-6, +0.00e-6],
    [-0.21e-6, +0.00e-6],
    [+0.19e-6, +0.00e-6],
    [+0.18e-6, +0.00e-6],
    [-0.10e-6, +0.05e-6],
    [+0.15e-6, +0.00e-6],
    [-0.14e-6, +0.00e-6],
    [+0.14e-6, +0.00e-6],
    [-0.14e-6, +0.00e-6],
    [+0.14e-6, +0.00e-6],
    [+0.13e-6, +0.00e-6],
    [-0.11e-6, +0.00e-6],
    [+0.11e-6, +0.00e-6],
    [+0.11e-6, +0.00e-6],
], dtype=jnp.float64)

# Sine amplitude of the single t^1 term, argument Omega [arcsec]
_SE1 = -0.87e-6

_ee_ct_cache = SingleSlotCache("ee_ct")


def mean_obliq(jd_tdb: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic.

    Uses eq. (39) of Capitaine et al. (2003) with the J2000.0 obliquity of
    eq. (37).

    Args:
        jd_tdb (ArrayLike): TDB Julian Date.

    Returns:
        Array: Mean obliquity [arcsec].
    """
    t = (jnp.asarray(jd_tdb, dtype=get_dtype()) - JD_J2000) / JULIAN_CENTURY_DAYS
    return (
        (((-0.0000000434 * t - 0.000000576) * t + 0.00200340) * t - 0.0001831) * t
        - 46.836769
    ) * t + 84381.406


def _ee_ct_full(t: float) -> Array:
    delaunay = fund_args(t)
    planets = [planet_lon(t, p) for p in range(Planet.MERCURY, Planet.NEPTUNE + 1)]
    fa = jnp.stack([*delaunay, *planets, accum_prec(t)]).astype(jnp.float64)

    a = _KE0 @ fa
    s0 = jnp.sum(_SE0[:, 0] * jnp.sin(a) + _SE0[:, 1] * jnp.cos(a))
    s1 = _SE1 * jnp.sin(delaunay.Omega)
    return (s0 + s1 * t) * AS2RAD


def _ee_ct_reduced(t: float) -> Array:
    fa = fund_args(t)
    two_f_d = 2.0 * fa.F - 2.0 * fa.D
    return (
        2640.96e-6 * jnp.sin(fa.Omega)
        + 63.52e-6 * jnp.sin(2.0 * fa.Omega)
        + 11.75e-6 * jnp.sin(two_f_d + 3.0 * fa.Omega)
        + 11.21e-6 * jnp.sin(two_f_d + fa.Omega)
        - 4.55e-6 * jnp.sin(two_f_d + 2.0 * fa.Omega)
        + 2.02e-6 * jnp.sin(2.0 * fa.F + 3.0 * fa.Omega)
        + 1.98e-6 * jnp.sin(2.0 * fa.F + fa.Omega)
        - 1.72e-6 * jnp.sin(3.0 * fa.Omega)
        - 0.87e-6 * t * jnp.sin(fa.Omega)
    ) * AS2RAD


def ee_ct(jd_tt_high: float, jd_tt_low: float, accuracy: Accuracy | int) -> Array:
    """Complementary terms of the equation of the equinoxes.

    The full series has 33 terms in t^0 over 14 arguments (Delaunay
    arguments, planetary mean longitudes and general precession) plus one
    term in t^1. The reduced series keeps the 9 terms above 2 microarcseconds.

    The most recent result is remembered per thread, keyed by the exact date
    ``jd_tt_high + jd_tt_low``, the accuracy and the active dtype.

    Args:
        jd_tt_high (float): High-order part of the TT Julian Date.
        jd_tt_low (float): Low-order part of the TT Julian Date.
        accuracy (Accuracy | int): Series to evaluate.

    Returns:
        Array: Complementary terms [rad].

    Raises:
        InvalidArgumentError: If *accuracy* is invalid.
    """
    accuracy = check_enum(Accuracy, accuracy, "ee_ct", "accuracy")

    key = (float(jd_tt_high) + float(jd_tt_low), accuracy, get_dtype())
    hit, ee = _ee_ct_cache.lookup(key)
    if hit:
        return ee

    t = ((float(jd_tt_high) - JD_J2000) + float(jd_tt_low)) / JULIAN_CENTURY_DAYS
    if accuracy == Accuracy.FULL:
        ee = _ee_ct_full(t)
    else:
        ee = _ee_ct_reduced(t)

    return _ee_ct_cache.store(key, ee.astype(get_dtype()))
