"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout novaframes.  The default is ``jnp.float64``: the precession and
nutation series are only meaningful at sub-milliarcsecond level, which
32-bit floats cannot represent for vectors of unit length.  Importing this
module therefore enables JAX's 64-bit mode (``jax_enable_x64``).

``jnp.float32`` remains selectable for throughput experiments, with the
understanding that results degrade to roughly 0.1 arcsecond.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float32, jnp.float64)

jax.config.update("jax_enable_x64", True)

_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for novaframes.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is (re-)enabled via
    ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: ``jnp.float32`` or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_time_eq_tolerance() -> float:
    """Return the tolerance, in days, for deciding that two epochs coincide.

    Used when checking whether an epoch is J2000 for the precession
    decomposition. Cache keys never use this tolerance.

    - ``float64``: 1e-10 d (about 9 microseconds)
    - ``float32``: 1e-5 d (about 1 second)

    Returns:
        float: Tolerance in days.
    """
    if _dtype == jnp.float64:
        return 1e-10
    return 1e-5
