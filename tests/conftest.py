import jax.numpy as jnp
import pytest

from novaframes import clear_caches, clear_error, get_pole_offsets
from novaframes.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision and start every test from empty caches.

    Caches and error records are per thread, and the pole offsets are
    process-wide, so each test resets all three before it runs.
    """
    set_dtype(jnp.float64)
    clear_caches()
    clear_error()
    get_pole_offsets().reset()
    yield
    get_pole_offsets().reset()
