# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Discovery of files bundled alongside archive targets.

This module provides the `Scanner` class, which lists the top-level files
of a directory, and the `AuxiliaryMatcher` class, which recognizes
README- and LICENSE-style files among them.
"""

from .matcher import AuxiliaryMatcher
from .scanner import Scanner

__all__ = [
    "AuxiliaryMatcher",
    "Scanner",
]
