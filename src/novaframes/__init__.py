"""
novaframes is a reference-frame transformation engine for positional astronomy, implemented in JAX.
"""

from .constants import (
    D2PI,
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    MAS2RAD,
    HOURANGLE,
    JD_J2000,
    JD_B1950,
    JD_B1900,
    JD_MJD_OFFSET,
    JULIAN_CENTURY_DAYS,
    DAY,
    DAY_HOURS,
    OBLIQUITY_J2000,
)

from ._types import (
    Accuracy,
    PoleOffsetType,
    NutationDirection,
    FrameTieDirection,
    EquinoxType,
    EarthRotationMeasure,
    WobbleDirection,
    CioSystem,
    CelestialFrame,
    DynamicalFrame,
    Planet,
    DelaunayArgs,
    EarthTilt,
    CioLocation,
    CioBasis,
)

from .config import set_dtype, get_dtype

from .errors import (
    NovaFramesError,
    InvalidArgumentError,
    TransformError,
    ErrorRecord,
    last_error,
    clear_error,
)

from .rotations import (
    Rx,
    Ry,
    Rz,
    spin,
    vector_to_radec,
    radec_to_vector,
)

from .fundamental import fund_args, accum_prec, planet_lon
from .obliquity import mean_obliq, ee_ct
from .pole import (
    PoleOffsets,
    cel_pole,
    current_pole_offsets,
    get_pole_offsets,
    polar_dxdy_to_dpsideps,
    using_pole_offsets,
)
from .equinox import e_tilt, ira_equinox
from .precession import precession, precess_to_j2000, precess_from_j2000, precess_via_j2000
from .nutation import nutation
from .frame_tie import frame_tie
from .earth import era, sidereal_time, wobble
from .cio import cio_location, cio_basis, cio_ra

from .frames import (
    gcrs_to_j2000,
    j2000_to_gcrs,
    gcrs_to_mod,
    mod_to_gcrs,
    j2000_to_tod,
    tod_to_j2000,
    gcrs_to_tod,
    tod_to_gcrs,
    gcrs_to_cirs,
    cirs_to_gcrs,
    cirs_to_tod,
    tod_to_cirs,
    cirs_to_app_ra,
    app_to_cirs_ra,
    gcrs_to_equ,
    cel2ter,
    ter2cel,
    cirs_to_itrs,
    itrs_to_cirs,
    tod_to_itrs,
    itrs_to_tod,
    gcrs_to_itrs,
    itrs_to_gcrs,
)

from .utils.caching import clear_all as clear_caches

__all__ = [
    # Constants
    "D2PI",
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "MAS2RAD",
    "HOURANGLE",
    "JD_J2000",
    "JD_B1950",
    "JD_B1900",
    "JD_MJD_OFFSET",
    "JULIAN_CENTURY_DAYS",
    "DAY",
    "DAY_HOURS",
    "OBLIQUITY_J2000",
    # Types
    "Accuracy",
    "PoleOffsetType",
    "NutationDirection",
    "FrameTieDirection",
    "EquinoxType",
    "EarthRotationMeasure",
    "WobbleDirection",
    "CioSystem",
    "CelestialFrame",
    "DynamicalFrame",
    "Planet",
    "DelaunayArgs",
    "EarthTilt",
    "CioLocation",
    "CioBasis",
    # Config
    "set_dtype",
    "get_dtype",
    # Errors
    "NovaFramesError",
    "InvalidArgumentError",
    "TransformError",
    "ErrorRecord",
    "last_error",
    "clear_error",
    # Rotations
    "Rx",
    "Ry",
    "Rz",
    "spin",
    "vector_to_radec",
    "radec_to_vector",
    # Series
    "fund_args",
    "accum_prec",
    "planet_lon",
    "mean_obliq",
    "ee_ct",
    # Pole offsets
    "PoleOffsets",
    "cel_pole",
    "current_pole_offsets",
    "get_pole_offsets",
    "polar_dxdy_to_dpsideps",
    "using_pole_offsets",
    # Earth orientation
    "e_tilt",
    "ira_equinox",
    "precession",
    "precess_to_j2000",
    "precess_from_j2000",
    "precess_via_j2000",
    "nutation",
    "frame_tie",
    "era",
    "sidereal_time",
    "wobble",
    "cio_location",
    "cio_basis",
    "cio_ra",
    # Frames
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
    "cel2ter",
    "ter2cel",
    "cirs_to_itrs",
    "itrs_to_cirs",
    "tod_to_itrs",
    "itrs_to_tod",
    "gcrs_to_itrs",
    "itrs_to_gcrs",
    # Caches
    "clear_caches",
]
