"""
Generator Package Module
========================

The generator package data model and the loader that builds it from disk.
"""

from .loader import load_package, read_manifest
from .models import GeneratorPackage

__all__ = [
    "GeneratorPackage",
    "load_package",
    "read_manifest",
]
