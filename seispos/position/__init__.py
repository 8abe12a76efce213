r"""
===========================================
Geodetic Positioning (:mod:`seispos.position`)
===========================================

This module locates points on the Earth's surface relative to other 
points, e.g., the position of a receiver lying at a given distance and 
azimuth from an epicenter. Calculations are carried out on a reference 
ellipsoid (WGS-84 by default) and are vectorized, so that:

- a single starting point can be paired with many distance-azimuths

- many starting points can be paired with a single distance-azimuth

- many starting points can be paired, element-wise, with as many 
  distance-azimuths

The destination points and back azimuths are obtained from the direct 
(forward) solution of [1]_, see 
:class:`seispos.position.vincenty.GeodesicForward`.

.. [1] Vincenty 1975, Direct and Inverse Solutions of Geodesics on the 
    Ellipsoid with Application of Nested Equations, Survey Review
"""
from .ellipsoid import *
from ._expansion import expand_pairs, expand_scalar_pair
from .vincenty import *
