"""
Runtime support for sigverify.

Error model and one-time initialization primitives.
"""

from .errors import *
from .once import Once, OnceState, LazyInstance
