"""
Exposes the version of geonav
"""

__version__ = 'v0.1.0'

__all__ = ['__version__']
