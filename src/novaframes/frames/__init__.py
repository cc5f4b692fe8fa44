"""Frame transformations.

This sub-module provides the composite conversions between equatorial
reference frames:

- **Celestial transformations**: GCRS, dynamical J2000, mean (MOD) and true
  (TOD) equator and equinox of date, and the CIO-based CIRS.
- **Terrestrial transformations**: celestial frames to and from the ITRS,
  through either the Earth Rotation Angle (CIRS/TIRS) or Greenwich apparent
  sidereal time (TOD/PEF), with polar motion.
"""

from .celestial import (
    app_to_cirs_ra,
    cirs_to_app_ra,
    cirs_to_gcrs,
    cirs_to_tod,
    gcrs_to_cirs,
    gcrs_to_equ,
    gcrs_to_j2000,
    gcrs_to_mod,
    gcrs_to_tod,
    j2000_to_gcrs,
    j2000_to_tod,
    mod_to_gcrs,
    tod_to_cirs,
    tod_to_gcrs,
    tod_to_j2000,
)
from .terrestrial import (
    cel2ter,
    cirs_to_itrs,
    gcrs_to_itrs,
    itrs_to_cirs,
    itrs_to_gcrs,
    itrs_to_tod,
    ter2cel,
    tod_to_itrs,
)

__all__ = [
    # Celestial frames
    "gcrs_to_j2000",
    "j2000_to_gcrs",
    "gcrs_to_mod",
    "mod_to_gcrs",
    "j2000_to_tod",
    "tod_to_j2000",
    "gcrs_to_tod",
    "tod_to_gcrs",
    "gcrs_to_cirs",
    "cirs_to_gcrs",
    "cirs_to_tod",
    "tod_to_cirs",
    "cirs_to_app_ra",
    "app_to_cirs_ra",
    "gcrs_to_equ",
    # Celestial <-> terrestrial
    "cel2ter",
    "ter2cel",
    "cirs_to_itrs",
    "itrs_to_cirs",
    "tod_to_itrs",
    "itrs_to_tod",
    "gcrs_to_itrs",
    "itrs_to_gcrs",
]
