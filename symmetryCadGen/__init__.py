"""
symmetryCadGen

Export crystallographic space group operators as OpenSCAD source.
"""

__version__ = '0.1'
