"""Tests for the mean obliquity and the complementary terms of the equation of the equinoxes."""

import erfa
import jax.numpy as jnp
import pytest

from novaframes._types import Accuracy
from novaframes.config import set_dtype
from novaframes.constants import AS2RAD, JD_J2000
from novaframes.errors import InvalidArgumentError
from novaframes.obliquity import _ee_ct_cache, ee_ct, mean_obliq

_DATES = [2415020.5, 2451545.0, 2454195.500754444444, 2460310.5, 2488069.5]


class TestMeanObliq:
    def test_j2000_value(self):
        assert float(mean_obliq(JD_J2000)) == 84381.406

    @pytest.mark.parametrize("jd", _DATES)
    def test_matches_erfa(self, jd):
        expected = erfa.obl06(JD_J2000, jd - JD_J2000) / AS2RAD
        assert abs(float(mean_obliq(jd)) - expected) < 1e-8

    def test_decreasing(self):
        assert float(mean_obliq(2460310.5)) < float(mean_obliq(JD_J2000))


class TestEeCt:
    @pytest.mark.parametrize("jd", _DATES)
    def test_full_matches_erfa(self, jd):
        """The full series agrees with iauEect00."""
        expected = erfa.eect00(JD_J2000, jd - JD_J2000)
        assert abs(float(ee_ct(jd, 0.0, Accuracy.FULL)) - expected) < 1e-11

    @pytest.mark.parametrize("jd", _DATES)
    def test_reduced_close_to_full(self, jd):
        full = float(ee_ct(jd, 0.0, Accuracy.FULL))
        reduced = float(ee_ct(jd, 0.0, Accuracy.REDUCED))
        assert abs(full - reduced) < 2e-5 * AS2RAD

    def test_split_date(self):
        a = float(ee_ct(2460310.0, 0.5, Accuracy.FULL))
        b = float(ee_ct(2460310.5, 0.0, Accuracy.FULL))
        assert abs(a - b) < 1e-18

    def test_accepts_int_accuracy(self):
        assert float(ee_ct(2460310.5, 0.0, 1)) == float(ee_ct(2460310.5, 0.0, Accuracy.REDUCED))

    @pytest.mark.parametrize("accuracy", [2, -1, "full"])
    def test_invalid_accuracy(self, accuracy):
        with pytest.raises(InvalidArgumentError, match="ee_ct: invalid accuracy"):
            ee_ct(2460310.5, 0.0, accuracy)


class TestEeCtCache:
    def test_repeat_call_hits(self):
        first = ee_ct(2460310.5, 0.0, Accuracy.FULL)
        second = ee_ct(2460310.5, 0.0, Accuracy.FULL)
        assert float(first) == float(second)
        assert _ee_ct_cache.stats() == (1, 1)

    def test_accuracy_is_part_of_key(self):
        full = ee_ct(2460310.5, 0.0, Accuracy.FULL)
        reduced = ee_ct(2460310.5, 0.0, Accuracy.REDUCED)
        assert _ee_ct_cache.stats().hits == 0
        assert float(full) != float(reduced)

    def test_never_stale(self):
        """A slot refilled with another date never answers for the first one."""
        a1 = float(ee_ct(2460310.5, 0.0, Accuracy.FULL))
        ee_ct(2460310.5, 0.0, Accuracy.FULL)
        b = float(ee_ct(2460311.5, 0.0, Accuracy.FULL))
        a2 = float(ee_ct(2460310.5, 0.0, Accuracy.FULL))
        assert a1 == a2
        assert a1 != b
        assert _ee_ct_cache.stats() == (1, 3)

    def test_dtype_is_part_of_key(self):
        ee_ct(2460310.5, 0.0, Accuracy.FULL)
        set_dtype(jnp.float32)
        ee = ee_ct(2460310.5, 0.0, Accuracy.FULL)
        assert ee.dtype == jnp.float32
        assert _ee_ct_cache.stats() == (0, 2)
