#!/usr/bin/env python3
# -*- coding: utf-8 -*-
r"""
Direct geodetic problem
=======================

Given a starting point on the reference ellipsoid, a distance and a forward
azimuth, the destination point and the back azimuth are found following the
formulation of Vincenty (1975). The angular distance :math:`\sigma` on the
auxiliary sphere is obtained by iterating

.. math::
    \sigma = \frac{s}{bA} + \Delta\sigma(\sigma),

starting from :math:`\sigma = s / bA`, until two successive estimates differ
by less than the chosen tolerance (in radians). Each pair in the batch is
iterated until it has converged on its own; the loop terminates once all
pairs have converged.

Latitudes are geodetic (range -90 to 90), longitudes are returned in the
range -180 < lon <= 180, and azimuths in the range 0 <= az < 360. All
angles are in degrees, distances in km.

"""
import numpy as np
from seispos.exceptions import ConvergenceException
from seispos.exceptions import LatitudeOutOfRangeException
from seispos.position.ellipsoid import parse_ellipsoid, check_tolerance
from seispos.position._expansion import expand_pairs, expand_scalar_pair

__all__ = ['GeodesicForward', 'vincenty_forward']



class GeodesicForward:
    """
    Destination points and back azimuths on a reference ellipsoid


    Parameters
    ----------
    ellipsoid : array-like of shape (2,), optional
        Equatorial radius (in km) and flattening. If `None`, the WGS-84
        reference ellipsoid is used

    tolerance : float, optional
        Convergence threshold (in radians) of the angular distance on the
        auxiliary sphere. Should be in the range 0 to PI. If `None`, 1e-12 is
        used (roughly 0.01 mm on the WGS-84 ellipsoid)

    max_iter : int
        Maximum number of iterations before a :class:`ConvergenceException`
        is raised. Default is 1000

    verbose : bool
        If `True`, information on the convergence is printed after each
        calculation. Default is `False`


    Attributes
    ----------
    a, b : float
        Equatorial and polar radius (in m)

    f : float
        Flattening

    tolerance : float

    max_iter : int

    verbose : bool


    Examples
    --------
    St. Louis, MO USA, to a point 5000 km away at azimuth -30°

    >>> from seispos import GeodesicForward
    >>> geod = GeodesicForward()
    >>> (lat2, lon2), baz = geod.solve([38.649, -90.305], [5000, -30])

    A single starting point paired with several distance-azimuths

    >>> destinations, baz = geod.solve([0, 0], [[100, 0], [100, 90], [100, 180]])
    >>> destinations.shape, baz.shape
    ((3, 2), (3,))
    """

    def __init__(self, ellipsoid=None, tolerance=None, max_iter=1000,
                 verbose=False):
        self.a, self.f = parse_ellipsoid(ellipsoid)
        self.b = self.a - self.a*self.f
        self.tolerance = check_tolerance(tolerance)
        self.max_iter = int(max_iter)
        self.verbose = verbose


    def __str__(self):
        string = '-------------------------------------\n'
        string += 'REFERENCE ELLIPSOID\n'
        string += 'Equatorial radius : %.3f m\n'%self.a
        string += 'Polar radius : %.3f m\n'%self.b
        string += 'Flattening : 1/%.9f\n'%(1/self.f) if self.f else 'Flattening : 0\n'
        string += 'Tolerance : %.1e rad\n'%self.tolerance
        string += '-------------------------------------'
        return string


    def __repr__(self):
        return str(self)


    @property
    def ellipsoid(self):
        """ Equatorial radius (in m) and flattening"""
        return self.a, self.f


    def solve(self, starts, offsets):
        """ Finds the destination points and back azimuths

        The reference ellipsoid and the tolerance are those passed to the
        constructor; create a new :class:`GeodesicForward` (or call
        :func:`vincenty_forward`) to use different ones.

        Parameters
        ----------
        starts : array-like of shape (2,) or (..., 2)
            Starting points (latitude, longitude), in degrees

        offsets : array-like of shape (2,) or (..., 2)
            Distances (in km) and forward azimuths (in degrees, clockwise
            from north). A single starting point can be paired with several
            offsets, and vice versa; otherwise, the shapes of `starts` and
            `offsets` should be identical


        Returns
        -------
        destinations : ndarray of shape (..., 2)
            Latitudes and longitudes of the destination points

        baz : float or ndarray of shape (...)
            Back azimuths, i.e., from the destinations to the starting points


        Raises
        ------
        EmptyInputException, NonNumericInputException, ShapeMismatchException
            See :func:`seispos.position.expand_pairs`

        LatitudeOutOfRangeException
            If any starting latitude falls outside -90 to 90

        ConvergenceException
            If some pairs have not converged after `max_iter` iterations
        """
        starts, offsets, shape = expand_pairs(starts, offsets)
        lat2, lon2, baz = self._forward(starts[..., 0].ravel(),
                                        starts[..., 1].ravel(),
                                        offsets[..., 0].ravel(),
                                        offsets[..., 1].ravel())
        destinations = np.column_stack((lat2, lon2)).reshape(shape + (2,))
        baz = baz.reshape(shape)
        return destinations, (float(baz) if not shape else baz)


    def _forward(self, lat1, lon1, dist, az):
        if np.any(np.abs(lat1) > 90):
            raise LatitudeOutOfRangeException(
                    'Latitudes: %s'%lat1[np.abs(lat1) > 90])
        a, b, f = self.a, self.b, self.f
        lon1 = np.mod(lon1, 360)
        az = np.radians(az)
        dist = dist * 1000

        # reduced latitude
        tanU1 = (1-f) * np.tan(np.radians(lat1))
        cosU1 = 1 / np.sqrt(1 + tanU1**2)
        sinU1 = tanU1 * cosU1

        a2 = a**2
        b2 = b**2
        sinalpha1 = np.sin(az)
        cosalpha1 = np.cos(az)
        sigma1 = np.arctan2(tanU1, cosalpha1)
        sinalpha = cosU1 * sinalpha1
        sin2alpha = sinalpha**2
        cos2alpha = 1 - sin2alpha
        u2 = cos2alpha * (a2-b2) / b2
        A = 1 + u2/16384 * (4096 + u2*(-768 + u2*(320 - 175*u2)))
        B = u2/1024 * (256 + u2*(-128 + u2*(74 - 47*u2)))
        sigma = self._iterate_sigma(dist / (b*A), sigma1, B)

        cossigma = np.cos(sigma)
        sinsigma = np.sin(sigma)
        cos2sigmam = np.cos(2*sigma1 + sigma)
        lat2 = np.degrees(np.arctan2(
                sinU1*cossigma + cosU1*sinsigma*cosalpha1,
                (1-f) * np.sqrt(sin2alpha
                                + (sinU1*sinsigma - cosU1*cossigma*cosalpha1)**2)
                ))
        lambda_ = np.arctan2(sinsigma * sinalpha1,
                             cosU1*cossigma - sinU1*sinsigma*cosalpha1)
        C = f/16 * cos2alpha * (4 + f*(4 - 3*cos2alpha))
        L = lambda_ - (1-C) * f * sinalpha * (sigma + C*sinsigma*(
                cos2sigmam + C*cossigma*(-1 + 2*cos2sigmam**2)))
        lon2 = np.mod(lon1 + np.degrees(L), 360)
        lon2[lon2 > 180] -= 360

        baz = np.mod(180 + np.degrees(np.arctan2(
                sinalpha, -sinU1*sinsigma + cosU1*cossigma*cosalpha1)), 360)
        # np.mod may round tiny negative angles up to 360
        baz[baz >= 360] -= 360
        return lat2, lon2, baz


    def _iterate_sigma(self, sigma0, sigma1, B):
        """ Fixed-point iteration of the angular distance on the auxiliary
        sphere. Each element stops being updated once it has converged
        """
        sigma = sigma0.copy()
        left = np.arange(sigma.size)
        niter = 0
        while left.size: # forces at least one iteration
            if niter == self.max_iter:
                raise ConvergenceException(
                        '%d of %d pairs did not converge after %d iterations'%(
                        left.size, sigma.size, niter))
            niter += 1
            sigma_prev = sigma[left]
            Bl = B[left]
            cos2sigmam = np.cos(2*sigma1[left] + sigma_prev)
            sinsigma = np.sin(sigma_prev)
            deltasigma = Bl * sinsigma * (cos2sigmam + Bl/4 * (
                    np.cos(sigma_prev) * (-1 + 2*cos2sigmam**2)
                    - Bl/6 * cos2sigmam * (-3 + 4*sinsigma**2)
                    * (-3 + 4*cos2sigmam**2)))
            sigma[left] = sigma0[left] + deltasigma
            left = left[np.abs(sigma[left] - sigma_prev) > self.tolerance]
        if self.verbose:
            print('SIGMA CONVERGED AFTER %d ITERATIONS (%d PAIRS)'%(niter,
                                                                   sigma.size))
        return sigma



def vincenty_forward(lat1, lon1, dist, az, ellipsoid=None, tolerance=None):
    """
    Finds destination points on an ellipsoid relative to starting points

    Parameters
    ----------
    lat1, lon1 : float or array-like
        Geodetic latitudes and longitudes of the starting points (in
        degrees). If one of them is scalar, it is paired with each element
        of the other

    dist, az : float or array-like
        Distances (in km) and forward azimuths (in degrees). If one of them
        is scalar, it is paired with each element of the other

    ellipsoid : array-like of shape (2,), optional
        Equatorial radius (in km) and flattening. If `None`, the WGS-84
        reference ellipsoid is used

    tolerance : float, optional
        Convergence threshold (in radians). If `None`, 1e-12 is used

    Returns
    -------
    lat2, lon2, baz : float or ndarray
        Latitudes and longitudes of the destination points and back azimuths
        (in degrees)

    Examples
    --------
    St. Louis, MO USA to ???

    >>> lat2, lon2, baz = vincenty_forward(38.649, -90.305, 5000, -30)

    Notes
    -----
    A single starting point can be paired with several distance-azimuths
    and several starting points can be paired with a single distance-azimuth.
    Otherwise, all inputs should have the same shape. See
    :class:`GeodesicForward` for the exceptions raised.
    """
    geod = GeodesicForward(ellipsoid=ellipsoid, tolerance=tolerance)
    lat1, lon1 = expand_scalar_pair(lat1, lon1, names=('lat1', 'lon1'))
    dist, az = expand_scalar_pair(dist, az, names=('dist', 'az'))
    destinations, baz = geod.solve(np.stack((lat1, lon1), axis=-1),
                                   np.stack((dist, az), axis=-1))
    lat2 = destinations[..., 0]
    lon2 = destinations[..., 1]
    if np.ndim(baz) == 0:
        return float(lat2), float(lon2), baz
    return lat2, lon2, baz
