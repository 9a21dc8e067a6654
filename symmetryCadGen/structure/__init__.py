"""
structure Subpackage

Data structures holding space groups and the sources they are read from.
"""

# Collect submodules into unified module namespace.

from .symmetry import SpaceGroupRecord, SymmetryOperation
from .sources import GemmiSource, SpaceGroupSource, SymoplibSource
