#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scalar expansion of the inputs to the geodetic routines.

A single starting point may be paired with several distance-azimuths, and
several starting points may be paired with a single distance-azimuth. Any
other combination must consist of arrays of exactly the same shape (no
further broadcasting is attempted).
"""
import numpy as np
from seispos.exceptions import EmptyInputException
from seispos.exceptions import NonNumericInputException
from seispos.exceptions import ShapeMismatchException



def is_real_numeric(arr):
    """ `True` if the dtype of `arr` is numeric, but neither boolean nor
    complex"""
    return (np.issubdtype(arr.dtype, np.number)
            and not np.issubdtype(arr.dtype, np.complexfloating))


def _as_numeric(x, name):
    try:
        arr = np.asarray(x)
    except (TypeError, ValueError):
        raise NonNumericInputException('%s: %r'%(name, x))
    if not is_real_numeric(arr):
        raise NonNumericInputException('%s: dtype %s'%(name, arr.dtype))
    if arr.size == 0:
        raise EmptyInputException('%s is empty'%name)
    return arr.astype(float)


def _replicate(x, shape):
    return np.array(np.broadcast_to(x.reshape(x.shape[-1:]), shape))


def expand_scalar_pair(x, y, names=('x', 'y')):
    """
    Scalar expansion of two arrays describing the same entity, e.g., the
    latitudes and longitudes of the starting points

    Parameters
    ----------
    x, y : float or array-like

    names : tuple of str
        Used in the error messages

    Returns
    -------
    x, y : ndarray
        Arrays of equal shape. If one of the inputs consisted of a single
        element, this is replicated to match the shape of the other

    Raises
    ------
    NonNumericInputException, EmptyInputException, ShapeMismatchException
    """
    x = _as_numeric(x, names[0])
    y = _as_numeric(y, names[1])
    if x.size == 1:
        x = np.full(y.shape, x.item())
    if y.size == 1:
        y = np.full(x.shape, y.item())
    if x.shape != y.shape:
        raise ShapeMismatchException('%s: %s, %s: %s'%(names[0], x.shape,
                                                       names[1], y.shape))
    return x, y


def expand_pairs(starts, offsets):
    """
    Resolves the shape of the calculation from the starting points and the
    distance-azimuth pairs

    Parameters
    ----------
    starts : array-like of shape (2,) or (..., 2)
        Starting points (latitude, longitude)

    offsets : array-like of shape (2,) or (..., 2)
        Distance-azimuth pairs

    Returns
    -------
    starts, offsets : ndarray of shape (..., 2)
        Arrays having the same shape

    shape : tuple
        Shape of the calculation, i.e., `starts.shape[:-1]`

    Raises
    ------
    NonNumericInputException, EmptyInputException

    ShapeMismatchException
        If the last dimension of the inputs is not 2, or if after the scalar
        expansion the two inputs still differ in shape
    """
    starts = _as_numeric(starts, 'starts')
    offsets = _as_numeric(offsets, 'offsets')
    for name, arr in zip(['starts', 'offsets'], [starts, offsets]):
        if arr.ndim == 0 or arr.shape[-1] != 2:
            raise ShapeMismatchException('%s must have shape (..., 2), got %s'%(
                    name, arr.shape))

    # if both are single pairs, the offsets decide the shape
    if starts.size == 2:
        starts = _replicate(starts, offsets.shape)
    elif offsets.size == 2:
        offsets = _replicate(offsets, starts.shape)
    if starts.shape != offsets.shape:
        raise ShapeMismatchException('starts: %s, offsets: %s'%(
                starts.shape[:-1], offsets.shape[:-1]))
    return starts, offsets, starts.shape[:-1]
