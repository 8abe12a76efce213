#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reference ellipsoid and tolerance handling.
"""
from math import pi
import numpy as np
from seispos.exceptions import InvalidEllipsoidException
from seispos.exceptions import InvalidToleranceException
from seispos.position._expansion import is_real_numeric

__all__ = ['WGS84_A_KM', 'WGS84_F', 'DEFAULT_TOLERANCE',
           'parse_ellipsoid', 'check_tolerance']

WGS84_A_KM = 6378.137
WGS84_F = 1 / 298.257223563
# roughly 0.01mm on the WGS-84 ellipsoid
DEFAULT_TOLERANCE = 1e-12



def parse_ellipsoid(ellipsoid=None):
    """ 
    Converts the ellipsoid parameters to those used internally
    
    Parameters
    ----------
    ellipsoid : array-like of shape (2,), optional
        Equatorial radius (in km) and flattening of the reference ellipsoid,
        i.e., the same convention as the Matlab Mapping Toolbox `almanac`. 
        If `None`, the WGS-84 reference ellipsoid is used
        
    Returns
    -------
    a : float
        Equatorial radius (in m)
        
    f : float
        Flattening
        
    Raises
    ------
    InvalidEllipsoidException
        If the input does not consist of two finite numbers, if the
        flattening is not smaller than 1, or if the equatorial radius is not
        positive
    """
    if ellipsoid is None:
        return WGS84_A_KM * 1000, WGS84_F
    try:
        params = np.asarray(ellipsoid)
    except (TypeError, ValueError):
        raise InvalidEllipsoidException(repr(ellipsoid))
    if not is_real_numeric(params):
        raise InvalidEllipsoidException(repr(ellipsoid))
    params = params.astype(float)
    if params.size != 2 or not np.all(np.isfinite(params)):
        raise InvalidEllipsoidException(repr(ellipsoid))
    a_km, f = params.ravel()
    if f >= 1:
        raise InvalidEllipsoidException('Flattening: %r'%f)
    if a_km <= 0:
        raise InvalidEllipsoidException('Equatorial radius: %r'%a_km)
    return a_km * 1000, f


def check_tolerance(tolerance=None):
    """ 
    Validates the convergence threshold (in radians)
    
    Parameters
    ----------
    tolerance : float, optional
        If `None`, :data:`DEFAULT_TOLERANCE` is returned
        
    Returns
    -------
    tolerance : float
    
    Raises
    ------
    InvalidToleranceException
        If the tolerance is not a finite scalar in the range 0 to PI
    """
    if tolerance is None:
        return DEFAULT_TOLERANCE
    try:
        tol = np.asarray(tolerance)
    except (TypeError, ValueError):
        raise InvalidToleranceException(repr(tolerance))
    if not is_real_numeric(tol):
        raise InvalidToleranceException(repr(tolerance))
    tol = tol.astype(float)
    if tol.size != 1 or not np.isfinite(tol).all():
        raise InvalidToleranceException(repr(tolerance))
    tol = float(tol.ravel()[0])
    if tol < 0 or tol > pi:
        raise InvalidToleranceException('Tolerance: %r'%tol)
    return tol
