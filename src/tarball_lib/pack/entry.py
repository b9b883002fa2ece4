# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ArchiveTarget:
    """
    A requested archive, identified by the path of the file to pack.
    """

    # Path to the file to pack.
    path: Path
    # Suffix appended to the path to form the archive name.
    suffix: str

    @property
    def output(self) -> Path:
        """Path of the produced archive."""
        return self.path.parent / f"{self.path.name}{self.suffix}"


@dataclass(frozen=True)
class ArchiveEntry:
    """
    A single file written into an archive.

    The content is read from `source` while the tar header is written under `name`.
    """

    # Path to the file on disk.
    source: Path
    # Name stored in the tar header.
    name: str

    @property
    def normalized(self) -> bool:
        """Whether the header name differs from the name on disk."""
        return self.name != self.source.name
