"""Tests for the Earth Rotation Angle, sidereal time and polar motion."""

import erfa
import jax.numpy as jnp
import numpy as np
import pytest

from novaframes._types import Accuracy, EarthRotationMeasure, EquinoxType, WobbleDirection
from novaframes.constants import AS2RAD, DAY, HOURANGLE, RAD2DEG
from novaframes.earth import era, sidereal_time, wobble
from novaframes.errors import InvalidArgumentError

# SOFA Example 5.5 reference date: 2007 April 5, 12h UTC
_UT1 = (2454195.5, -0.072073685 / DAY)
_UT1_TO_TT = 65.184 + 0.072073685
_TT = 2454195.5 + (_UT1[1] + _UT1_TO_TT / DAY)
_XP, _YP = 0.0349282, 0.4833163

_V = jnp.array([0.3, -0.7, 0.6480740698407860])


def _hour_diff(a, b):
    return (float(a) - float(b) + 12.0) % 24.0 - 12.0


class TestEra:
    def test_matches_erfa(self):
        assert abs(float(era(*_UT1)) - erfa.era00(*_UT1) * RAD2DEG) < 1e-9

    def test_default_low_part(self):
        assert float(era(2460310.75)) == float(era(2460310.75, 0.0))

    def test_range(self):
        for jd in (2415020.5, 2451545.0, 2460310.123):
            assert 0.0 <= float(era(jd)) < 360.0


class TestSiderealTime:
    @pytest.mark.parametrize("erot", [EarthRotationMeasure.ERA, EarthRotationMeasure.GST])
    def test_apparent_matches_erfa(self, erot):
        """GAST agrees with iauGst06a to a few microarcseconds."""
        expected = erfa.gst06a(*_UT1, _TT, 0.0) / HOURANGLE
        gast = sidereal_time(*_UT1, _UT1_TO_TT, EquinoxType.TRUE, erot, Accuracy.FULL)
        assert abs(_hour_diff(gast, expected)) < 2e-9

    @pytest.mark.parametrize("erot", [EarthRotationMeasure.ERA, EarthRotationMeasure.GST])
    def test_mean_matches_erfa(self, erot):
        expected = erfa.gmst06(*_UT1, _TT, 0.0) / HOURANGLE
        gmst = sidereal_time(*_UT1, _UT1_TO_TT, EquinoxType.MEAN, erot, Accuracy.FULL)
        assert abs(_hour_diff(gmst, expected)) < 1e-10

    @pytest.mark.parametrize("gst_type", [EquinoxType.MEAN, EquinoxType.TRUE])
    @pytest.mark.parametrize("accuracy", [Accuracy.FULL, Accuracy.REDUCED])
    def test_methods_agree(self, gst_type, accuracy):
        a = sidereal_time(2460310.5, 0.3, 69.184, gst_type, EarthRotationMeasure.ERA, accuracy)
        b = sidereal_time(2460310.5, 0.3, 69.184, gst_type, EarthRotationMeasure.GST, accuracy)
        assert abs(_hour_diff(a, b)) < 1e-11

    def test_range(self):
        for jd in (2415020.5, 2451545.0, 2460310.999):
            gst = float(sidereal_time(jd, 0.0, 69.184, EquinoxType.TRUE, EarthRotationMeasure.GST, Accuracy.FULL))
            assert 0.0 <= gst < 24.0

    def test_invalid_accuracy_code(self):
        with pytest.raises(InvalidArgumentError) as info:
            sidereal_time(*_UT1, _UT1_TO_TT, EquinoxType.TRUE, EarthRotationMeasure.ERA, 2)
        assert info.value.code == 1

    def test_invalid_erot_code(self):
        with pytest.raises(InvalidArgumentError, match="invalid Earth rotation measure") as info:
            sidereal_time(*_UT1, _UT1_TO_TT, EquinoxType.TRUE, 5, Accuracy.FULL)
        assert info.value.code == 2

    def test_invalid_gst_type(self):
        with pytest.raises(InvalidArgumentError, match="invalid equinox type"):
            sidereal_time(*_UT1, _UT1_TO_TT, 3, EarthRotationMeasure.ERA, Accuracy.FULL)


class TestWobble:
    def test_tirs_to_itrs_matches_erfa(self):
        w = erfa.pom00(_XP * AS2RAD, _YP * AS2RAD, erfa.sp00(_TT, 0.0))
        out = wobble(_TT, WobbleDirection.TIRS_TO_ITRS, _XP, _YP, _V)
        assert np.allclose(np.asarray(out), w @ np.asarray(_V), rtol=0.0, atol=1e-15)

    def test_pef_omits_tio_locator(self):
        w = erfa.pom00(_XP * AS2RAD, _YP * AS2RAD, 0.0)
        out = wobble(_TT, WobbleDirection.PEF_TO_ITRS, _XP, _YP, _V)
        assert np.allclose(np.asarray(out), w @ np.asarray(_V), rtol=0.0, atol=1e-15)

    @pytest.mark.parametrize(
        "forward, backward",
        [
            (WobbleDirection.TIRS_TO_ITRS, WobbleDirection.ITRS_TO_TIRS),
            (WobbleDirection.PEF_TO_ITRS, WobbleDirection.ITRS_TO_PEF),
        ],
    )
    def test_roundtrip(self, forward, backward):
        out = wobble(_TT, backward, _XP, _YP, wobble(_TT, forward, _XP, _YP, _V))
        assert jnp.allclose(out, _V, rtol=0.0, atol=1e-15)

    def test_zero_polar_motion_pef_is_identity(self):
        out = wobble(_TT, WobbleDirection.ITRS_TO_PEF, 0.0, 0.0, _V)
        assert jnp.allclose(out, _V, rtol=0.0, atol=1e-16)

    def test_invalid_direction(self):
        with pytest.raises(InvalidArgumentError, match="wobble: invalid direction"):
            wobble(_TT, 4, _XP, _YP, _V)
