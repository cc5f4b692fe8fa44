"""Shared utility functions for novaframes.

Provides angle normalization helpers and the per-thread result caches.
"""

from novaframes.utils._angle import ieee_remainder, norm_ang, principal_angle
from novaframes.utils.caching import CacheStats, SingleSlotCache, clear_all

__all__ = [
    "CacheStats",
    "SingleSlotCache",
    "clear_all",
    "ieee_remainder",
    "norm_ang",
    "principal_angle",
]
