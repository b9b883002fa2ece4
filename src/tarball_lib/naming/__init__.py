# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Normalization of cross-compiled binary names.

This module provides the `Normalizer` class, which maps build artifacts
named `{project}_{os}_{arch}` to their bare project name.
"""

from .normalizer import Normalizer

__all__ = [
    "Normalizer",
]
