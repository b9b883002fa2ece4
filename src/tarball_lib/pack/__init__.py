# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Creation of gzip-compressed tar archives.

This module provides the `Packer` class, which writes an archive target and
its auxiliary files into `<target>.tar.gz`, together with the `ArchiveTarget`
and `ArchiveEntry` value types and the `PackState` lifecycle.
"""

from .entry import ArchiveEntry, ArchiveTarget
from .packer import Packer
from .states import PackState

__all__ = [
    "ArchiveEntry",
    "ArchiveTarget",
    "Packer",
    "PackState",
]
