"""
Data loading and parsing module.

This package handles all file and network I/O and enrollment parsing.
"""

from .loader import CatalogError, CatalogLoader
from .parser import EnrollmentParser

__all__ = ["CatalogError", "CatalogLoader", "EnrollmentParser"]
