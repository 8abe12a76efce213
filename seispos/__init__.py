#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
=======
SeisPos
=======
"""

from .__version__ import __version__
from .position.vincenty import GeodesicForward
from .position.vincenty import vincenty_forward
from . import exceptions
from . import position
