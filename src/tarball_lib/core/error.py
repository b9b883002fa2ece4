# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout tarball.

Every expected failure of tarball derives from `TarballError` and carries
the exit code reported by the command-line interface.
"""

from tarball_lib.core.config import CFG


class TarballError(Exception):
    """Common exception type for all expected tarball errors."""

    exit_code = CFG.exit_codes.default


class FilesystemError(TarballError):
    """Raised when a file cannot be opened, inspected, created or removed."""

    pass


class EncodingError(TarballError):
    """Raised when the tar or gzip layer fails to write an entry."""

    pass


class ScanError(TarballError):
    """Raised when the working directory cannot be listed."""

    pass
