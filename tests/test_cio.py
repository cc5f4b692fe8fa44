"""Tests for the CIO location, the intermediate basis and the CIO right ascension."""

import erfa
import jax.numpy as jnp
import numpy as np
import pytest

import novaframes.cio
from novaframes._types import Accuracy, CioSystem, EquinoxType
from novaframes.cio import cio_basis, cio_location, cio_ra
from novaframes.constants import HOURANGLE, JD_J2000
from novaframes.equinox import ira_equinox
from novaframes.errors import InvalidArgumentError, TransformError
from novaframes.rotations import vdot

_JD = 2460310.5


class TestCioLocation:
    def test_true_equinox_is_negated_ira(self):
        loc = cio_location(_JD, Accuracy.FULL)
        assert loc.system is CioSystem.TRUE_EQUINOX
        assert float(loc.ra_cio) == -float(ira_equinox(_JD, EquinoxType.TRUE, Accuracy.FULL))

    def test_gcrs_matches_erfa(self):
        """The GCRS right ascension of the CIO is the azimuth of the first row of C2I."""
        c2i = erfa.c2i06a(JD_J2000, _JD - JD_J2000)
        expected = np.arctan2(c2i[0, 1], c2i[0, 0]) / HOURANGLE
        loc = cio_location(_JD, Accuracy.FULL, CioSystem.GCRS)
        assert loc.system is CioSystem.GCRS
        assert abs(float(loc.ra_cio) - expected) < 1e-12

    def test_invalid_system(self):
        with pytest.raises(InvalidArgumentError, match="invalid reference system"):
            cio_location(_JD, Accuracy.FULL, 3)

    def test_invalid_accuracy(self):
        with pytest.raises(InvalidArgumentError, match="cio_location: invalid accuracy"):
            cio_location(_JD, 2)


class TestCioBasis:
    @pytest.mark.parametrize("system", [CioSystem.TRUE_EQUINOX, CioSystem.GCRS])
    def test_orthonormal(self, system):
        loc = cio_location(_JD, Accuracy.FULL, system)
        basis = cio_basis(_JD, loc.ra_cio, loc.system, Accuracy.FULL)
        m = jnp.stack([basis.x, basis.y, basis.z])
        assert jnp.allclose(m @ m.T, jnp.eye(3), rtol=0.0, atol=1e-14)
        assert float(jnp.linalg.det(m)) == pytest.approx(1.0, abs=1e-14)

    @pytest.mark.parametrize("system", [CioSystem.TRUE_EQUINOX, CioSystem.GCRS])
    def test_matches_erfa_c2i(self, system):
        """The basis vectors are the rows of the IAU 2006/2000A C2I matrix."""
        c2i = erfa.c2i06a(JD_J2000, _JD - JD_J2000)
        loc = cio_location(_JD, Accuracy.FULL, system)
        basis = cio_basis(_JD, loc.ra_cio, loc.system, Accuracy.FULL)
        for row, axis in zip(c2i, basis):
            assert np.allclose(np.asarray(axis), row, rtol=0.0, atol=1e-9)

    def test_systems_agree(self):
        a = cio_location(_JD, Accuracy.FULL, CioSystem.TRUE_EQUINOX)
        b = cio_location(_JD, Accuracy.FULL, CioSystem.GCRS)
        basis_a = cio_basis(_JD, a.ra_cio, a.system, Accuracy.FULL)
        basis_b = cio_basis(_JD, b.ra_cio, b.system, Accuracy.FULL)
        assert jnp.allclose(basis_a.x, basis_b.x, rtol=0.0, atol=1e-9)
        assert jnp.array_equal(basis_a.z, basis_b.z)

    def test_invalid_system_code(self):
        with pytest.raises(InvalidArgumentError) as info:
            cio_basis(_JD, 0.0, 5, Accuracy.FULL)
        assert info.value.code == 1


class TestCioRa:
    @pytest.mark.parametrize("jd", [2451545.0, 2454195.500754444444, _JD])
    def test_is_negated_equation_of_origins(self, jd):
        expected = -erfa.eo06a(JD_J2000, jd - JD_J2000) / HOURANGLE
        assert abs(float(cio_ra(jd, Accuracy.FULL)) - expected) < 2e-9

    def test_agrees_with_location(self):
        loc = cio_location(_JD, Accuracy.FULL)
        assert float(cio_ra(_JD, Accuracy.FULL)) == pytest.approx(float(loc.ra_cio), abs=1e-12)

    def test_azimuth_uses_vdot(self, monkeypatch):
        calls = []

        def counting_vdot(u, v):
            calls.append(1)
            return vdot(u, v)

        expected = cio_ra(_JD, Accuracy.FULL)
        monkeypatch.setattr(novaframes.cio, "vdot", counting_vdot)
        assert float(cio_ra(_JD, Accuracy.FULL)) == float(expected)
        assert len(calls) == 2

    def test_invalid_accuracy(self):
        with pytest.raises(InvalidArgumentError, match="cio_ra: invalid accuracy"):
            cio_ra(_JD, 4)

    def test_location_failure_offset(self, monkeypatch):
        def fail(*args, **kwargs):
            raise TransformError("no CIO data", code=1, stage="cio_location")

        monkeypatch.setattr(novaframes.cio, "cio_location", fail)
        with pytest.raises(TransformError) as info:
            cio_ra(_JD, Accuracy.FULL)
        assert info.value.code == 11
        assert info.value.trace == ("cio_ra", "cio_location")

    def test_basis_failure_offset(self, monkeypatch):
        def fail(*args, **kwargs):
            raise TransformError("bad basis", code=1, stage="cio_basis")

        monkeypatch.setattr(novaframes.cio, "cio_basis", fail)
        with pytest.raises(TransformError) as info:
            cio_ra(_JD, Accuracy.FULL)
        assert info.value.code == 21
