#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by the geodetic routines of :mod:`seispos`.
"""

__all__ = ['InvalidEllipsoidException',
           'InvalidToleranceException',
           'EmptyInputException',
           'ShapeMismatchException',
           'LatitudeOutOfRangeException',
           'NonNumericInputException',
           'ConvergenceException']



class _SeisPosException(Exception):
    
    default_message = ''

    def __init__(self, *args, message=None):
        if message is not None:
            self.message = message
        else:
            self.message = self.default_message
        for arg in args:
            self.message += '\n%s'%arg
        super().__init__(self.message)

    def __str__(self):
        return self.message


class InvalidEllipsoidException(_SeisPosException):
    """
    Exception raised when the ellipsoid is not given as the two finite 
    values [equatorial_radius, flattening], with flattening < 1.
    """
    default_message = 'Ellipsoid must be a 2 element vector specifying:'
    default_message += ' [equatorial_radius flattening(<1)]'


class InvalidToleranceException(_SeisPosException):
    """
    Exception raised when the tolerance is not a finite scalar in the range
    0 to PI (radians).
    """
    default_message = 'Tolerance must be a finite scalar in the range 0 to PI'
    default_message += ' (radians).'


class EmptyInputException(_SeisPosException):
    """
    Exception raised when one of the location inputs is an empty array.
    """
    default_message = 'Location inputs must be nonempty arrays.'


class ShapeMismatchException(_SeisPosException):
    """
    Exception raised when, after scalar expansion, the starting points and 
    the distance-azimuth pairs do not have the same shape.
    """
    default_message = 'Input arrays need to be scalar or have equal size.'


class LatitudeOutOfRangeException(_SeisPosException):
    """
    Exception raised when a starting latitude falls outside -90 to 90.
    """
    default_message = 'Starting latitude out of range (-90 to 90).'


class NonNumericInputException(_SeisPosException):
    """
    Exception raised when the coordinates, distances, or azimuths are not
    numeric.
    """
    default_message = 'All inputs must be numeric.'


class ConvergenceException(_SeisPosException):
    """
    Exception raised when the angular distance on the auxiliary sphere does
    not converge within the maximum number of iterations.
    """
    default_message = 'The geodesic did not converge.'
