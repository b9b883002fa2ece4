# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for tarball.

This module collects the configuration, error types, logging and
help-formatting helpers shared by the rest of the tarball codebase.
"""
