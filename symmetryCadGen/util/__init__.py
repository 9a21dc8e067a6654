"""
util subpackage

Tracing and exception definitions shared by the rest of the package.
"""
