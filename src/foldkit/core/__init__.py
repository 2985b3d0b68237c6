"""
Core classes used internally by *foldkit*.

These classes will usually not be directly used by end-users, but are documented
here to provide a complete overview of the *foldkit* architecture.
"""

from ._stage import *
