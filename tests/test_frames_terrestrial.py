"""Tests for celestial <-> ITRS transformations.

Reference date and Earth orientation from IAU SOFA Tools for Earth
Attitude, Example 5.5: 2007 April 5, 12:00:00 UTC.
"""

import erfa
import jax.numpy as jnp
import numpy as np
import pytest

import novaframes.frames.celestial as celestial
from novaframes._types import Accuracy, CelestialFrame, EarthRotationMeasure, EquinoxType, WobbleDirection
from novaframes.constants import AS2RAD, DAY
from novaframes.earth import era, sidereal_time, wobble
from novaframes.errors import InvalidArgumentError, TransformError
from novaframes.frames import (
    cel2ter,
    cirs_to_itrs,
    gcrs_to_itrs,
    itrs_to_cirs,
    itrs_to_gcrs,
    itrs_to_tod,
    ter2cel,
    tod_to_itrs,
)
from novaframes.rotations import spin

_UT1 = (2454195.5, -0.072073685 / DAY)
_UT1_TO_TT = 65.184 + 0.072073685
_TT = (2454195.5, _UT1[1] + _UT1_TO_TT / DAY)
_XP, _YP = 0.0349282, 0.4833163

_V = jnp.array([0.3, -0.7, 0.6480740698407860])

_COMBOS = [
    (EarthRotationMeasure.ERA, CelestialFrame.GCRS),
    (EarthRotationMeasure.ERA, CelestialFrame.CIRS),
    (EarthRotationMeasure.GST, CelestialFrame.GCRS),
    (EarthRotationMeasure.GST, CelestialFrame.TOD),
]


def _c2t():
    return erfa.c2t06a(*_TT, *_UT1, _XP * AS2RAD, _YP * AS2RAD)


def _fail(*args, **kwargs):
    raise TransformError("bad basis", code=1, stage="stub")


class TestCel2Ter:
    @pytest.mark.parametrize("erot", [EarthRotationMeasure.ERA, EarthRotationMeasure.GST])
    def test_gcrs_matches_erfa(self, erot):
        """Both conventions reproduce the IAU 2006/2000A celestial-to-terrestrial matrix."""
        out = cel2ter(*_UT1, _UT1_TO_TT, erot, Accuracy.FULL, CelestialFrame.GCRS, _XP, _YP, _V)
        assert np.allclose(np.asarray(out), _c2t() @ np.asarray(_V), rtol=0.0, atol=1e-9)

    def test_conventions_agree(self):
        era_out = cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL,
                          CelestialFrame.GCRS, _XP, _YP, _V)
        gst_out = cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.GST, Accuracy.FULL,
                          CelestialFrame.GCRS, _XP, _YP, _V)
        assert jnp.allclose(era_out, gst_out, rtol=0.0, atol=1e-9)

    def test_cirs_input(self):
        """From the CIRS only the Earth rotation and polar motion are applied."""
        out = cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL,
                      CelestialFrame.CIRS, _XP, _YP, _V)
        jd_tt = sum(_TT)
        expected = wobble(jd_tt, WobbleDirection.TIRS_TO_ITRS, _XP, _YP, spin(era(*_UT1), _V))
        assert jnp.allclose(out, expected, rtol=0.0, atol=1e-15)

    def test_tod_input_without_polar_motion(self):
        out = cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.GST, Accuracy.FULL,
                      CelestialFrame.TOD, 0.0, 0.0, _V)
        gast = sidereal_time(*_UT1, _UT1_TO_TT, EquinoxType.TRUE, EarthRotationMeasure.GST, Accuracy.FULL)
        assert jnp.allclose(out, spin(15.0 * gast, _V), rtol=0.0, atol=1e-15)

    def test_era_always_applies_tio_locator(self):
        """Zero polar motion under ERA still applies s', which is not the identity."""
        out = cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL,
                      CelestialFrame.CIRS, 0.0, 0.0, _V)
        rotated = spin(era(*_UT1), _V)
        assert not jnp.array_equal(out, rotated)
        assert jnp.allclose(out, rotated, rtol=0.0, atol=1e-10)

    def test_accepts_ints(self):
        a = cel2ter(*_UT1, _UT1_TO_TT, 1, 0, 2, _XP, _YP, _V)
        b = cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.GST, Accuracy.FULL,
                    CelestialFrame.TOD, _XP, _YP, _V)
        assert jnp.array_equal(a, b)


class TestTer2Cel:
    @pytest.mark.parametrize("xp, yp", [(_XP, _YP), (0.0, 0.0)])
    @pytest.mark.parametrize("erot, frame", _COMBOS)
    def test_inverse(self, erot, frame, xp, yp):
        itrs = cel2ter(*_UT1, _UT1_TO_TT, erot, Accuracy.FULL, frame, xp, yp, _V)
        back = ter2cel(*_UT1, _UT1_TO_TT, erot, Accuracy.FULL, frame, xp, yp, itrs)
        assert jnp.allclose(back, _V, rtol=0.0, atol=1e-14)

    @pytest.mark.parametrize("erot", [EarthRotationMeasure.ERA, EarthRotationMeasure.GST])
    def test_gcrs_matches_erfa(self, erot):
        out = ter2cel(*_UT1, _UT1_TO_TT, erot, Accuracy.FULL, CelestialFrame.GCRS, _XP, _YP, _V)
        assert np.allclose(np.asarray(out), _c2t().T @ np.asarray(_V), rtol=0.0, atol=1e-9)


class TestArgumentChecks:
    @pytest.mark.parametrize("func", [cel2ter, ter2cel])
    def test_invalid_accuracy(self, func):
        with pytest.raises(InvalidArgumentError, match="invalid accuracy") as info:
            func(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, 2, CelestialFrame.GCRS, _XP, _YP, _V)
        assert info.value.code == 1

    @pytest.mark.parametrize("func", [cel2ter, ter2cel])
    def test_invalid_erot(self, func):
        with pytest.raises(InvalidArgumentError, match="invalid Earth rotation measure") as info:
            func(*_UT1, _UT1_TO_TT, 2, Accuracy.FULL, CelestialFrame.GCRS, _XP, _YP, _V)
        assert info.value.code == 2

    @pytest.mark.parametrize(
        "erot, frame",
        [
            (EarthRotationMeasure.ERA, CelestialFrame.TOD),
            (EarthRotationMeasure.GST, CelestialFrame.CIRS),
        ],
    )
    @pytest.mark.parametrize("func", [cel2ter, ter2cel])
    def test_mismatched_frame(self, func, erot, frame):
        with pytest.raises(InvalidArgumentError, match="cannot be used with") as info:
            func(*_UT1, _UT1_TO_TT, erot, Accuracy.FULL, frame, _XP, _YP, _V)
        assert info.value.code == -1

    def test_invalid_frame(self):
        with pytest.raises(InvalidArgumentError, match="invalid celestial frame"):
            cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL, 7, _XP, _YP, _V)

    def test_missing_vector(self):
        with pytest.raises(InvalidArgumentError, match="ter2cel: input vector is None"):
            ter2cel(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL,
                    CelestialFrame.GCRS, _XP, _YP, None)

    def test_celestial_stage_offset(self, monkeypatch):
        monkeypatch.setattr(celestial, "cio_basis", _fail)
        with pytest.raises(TransformError) as info:
            cel2ter(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL,
                    CelestialFrame.GCRS, _XP, _YP, _V)
        assert info.value.code == 21
        assert info.value.trace == ("cel2ter", "gcrs_to_cirs", "stub")

    def test_celestial_stage_offset_reverse(self, monkeypatch):
        monkeypatch.setattr(celestial, "cio_location", _fail)
        with pytest.raises(TransformError) as info:
            ter2cel(*_UT1, _UT1_TO_TT, EarthRotationMeasure.ERA, Accuracy.FULL,
                    CelestialFrame.GCRS, _XP, _YP, _V)
        assert info.value.code == 11


class TestNamedConverters:
    def test_gcrs_to_itrs_matches_erfa(self):
        out = gcrs_to_itrs(*_TT, _UT1_TO_TT, Accuracy.FULL, _XP, _YP, _V)
        assert np.allclose(np.asarray(out), _c2t() @ np.asarray(_V), rtol=0.0, atol=1e-9)

    def test_gcrs_to_itrs_gst(self):
        a = gcrs_to_itrs(*_TT, _UT1_TO_TT, Accuracy.FULL, _XP, _YP, _V, erot=EarthRotationMeasure.GST)
        b = cel2ter(_TT[0], _TT[1] - _UT1_TO_TT / DAY, _UT1_TO_TT, EarthRotationMeasure.GST,
                    Accuracy.FULL, CelestialFrame.GCRS, _XP, _YP, _V)
        assert jnp.array_equal(a, b)

    @pytest.mark.parametrize(
        "forward, backward",
        [
            (cirs_to_itrs, itrs_to_cirs),
            (tod_to_itrs, itrs_to_tod),
            (gcrs_to_itrs, itrs_to_gcrs),
        ],
    )
    def test_roundtrip(self, forward, backward):
        itrs = forward(*_TT, _UT1_TO_TT, Accuracy.FULL, _XP, _YP, _V)
        back = backward(*_TT, _UT1_TO_TT, Accuracy.FULL, _XP, _YP, itrs)
        assert jnp.allclose(back, _V, rtol=0.0, atol=1e-14)

    def test_cirs_to_itrs_matches_cel2ter(self):
        a = cirs_to_itrs(*_TT, _UT1_TO_TT, Accuracy.FULL, _XP, _YP, _V)
        b = cel2ter(_TT[0], _TT[1] - _UT1_TO_TT / DAY, _UT1_TO_TT, EarthRotationMeasure.ERA,
                    Accuracy.FULL, CelestialFrame.CIRS, _XP, _YP, _V)
        assert jnp.array_equal(a, b)

    def test_errors_carry_converter_name(self):
        with pytest.raises(InvalidArgumentError) as info:
            tod_to_itrs(*_TT, _UT1_TO_TT, 5, _XP, _YP, _V)
        assert info.value.code == 1
        assert info.value.trace[:2] == ("tod_to_itrs", "cel2ter")
