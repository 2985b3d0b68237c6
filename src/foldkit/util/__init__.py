"""
Utilities for *foldkit*.
"""

from ._repr import *
