"""Tests for ellipsoid and tolerance parsing."""

import math

import numpy as np
import pytest

from seispos import GeodesicForward
from seispos.position import (
    DEFAULT_TOLERANCE,
    WGS84_A_KM,
    WGS84_F,
    check_tolerance,
    parse_ellipsoid,
)
from seispos.exceptions import (
    InvalidEllipsoidException,
    InvalidToleranceException,
)


class TestParseEllipsoid:
    """Equatorial radius (km) and flattening."""

    def test_default_is_wgs84(self):
        """No ellipsoid means WGS-84, radius converted to meters."""
        a, f = parse_ellipsoid(None)
        assert a == pytest.approx(6378137.0)
        assert f == pytest.approx(1 / 298.257223563)

    def test_sphere(self):
        """A flattening of zero describes a sphere."""
        assert parse_ellipsoid([6371, 0]) == (6371000.0, 0.0)

    def test_accepts_arrays_and_tuples(self):
        """Any array-like of two numbers is accepted."""
        assert parse_ellipsoid(np.array([WGS84_A_KM, WGS84_F])) == \
            parse_ellipsoid((WGS84_A_KM, WGS84_F))

    @pytest.mark.parametrize("f", [1, 1.5, 1 - 1e-17])
    def test_flattening_not_below_one(self, f):
        """Flattening must be strictly smaller than one."""
        with pytest.raises(InvalidEllipsoidException):
            parse_ellipsoid([6378.137, f])

    @pytest.mark.parametrize("bad", [
        [6378.137],
        [6378.137, 0.003, 1],
        [np.nan, 0.003],
        [6378.137, np.inf],
        ["a", "b"],
        "wgs84",
        [0, 0.003],
        [-6378.137, 0.003],
        ["6378.137", "0.0033"],
        [True, False],
        [6378.137 + 1j, 0.003],
    ])
    def test_invalid(self, bad):
        """Anything but two finite numbers and a positive radius fails."""
        with pytest.raises(InvalidEllipsoidException):
            parse_ellipsoid(bad)

    def test_solver_rejects(self):
        """The solver validates the ellipsoid when created."""
        with pytest.raises(InvalidEllipsoidException):
            GeodesicForward(ellipsoid=[6378.137, 1])


class TestCheckTolerance:
    """Convergence threshold in radians."""

    def test_default(self):
        """No tolerance means 1e-12."""
        assert check_tolerance(None) == DEFAULT_TOLERANCE == 1e-12

    @pytest.mark.parametrize("tol", [0, 1e-8, math.pi, np.float32(1e-3)])
    def test_valid(self, tol):
        """Values from 0 to PI are accepted."""
        assert check_tolerance(tol) == pytest.approx(float(tol))

    @pytest.mark.parametrize("tol", [
        -1e-12,
        4,
        np.nan,
        np.inf,
        [1e-12, 1e-10],
        "small",
        "1e-6",
        True,
        1e-6 + 0j,
    ])
    def test_invalid(self, tol):
        """Values outside 0 to PI, non-scalars and non-numbers fail."""
        with pytest.raises(InvalidToleranceException):
            check_tolerance(tol)

    def test_solver_rejects(self):
        """The solver validates the tolerance when created."""
        with pytest.raises(InvalidToleranceException):
            GeodesicForward(tolerance=-1)
