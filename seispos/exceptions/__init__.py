"""
===========================================
Exceptions (:mod:`seispos.exceptions`)
===========================================

Errors raised by :mod:`seispos` while validating the input of a
calculation or while solving it. Any of them aborts the whole batch.

"""
from .exceptions import *
