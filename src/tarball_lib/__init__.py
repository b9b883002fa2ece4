# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the tarball command-line tool.

This package packs build outputs into gzip-compressed tar archives. Each
archive holds the requested file together with the README and LICENSE files
found next to it, and cross-compiled binaries named `{project}_{os}_{arch}`
are stored under their bare project name.
"""

from .tarball import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "core",
    "naming",
    "pack",
    "scan",
]
