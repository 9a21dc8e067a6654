"""
filemanagers subpackage

Writers for the file formats produced from space group data.
"""

from .scadfile import *
