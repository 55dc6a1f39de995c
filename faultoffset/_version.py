"""
Exposes the version of faultoffset
"""
# Read by setup.py; keep the 'vX.Y.Z' form
__version__ = 'v0.1.0'

__all__ = ['__version__']
