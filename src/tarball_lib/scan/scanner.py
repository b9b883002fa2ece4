# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable, Iterator
from pathlib import Path

from tarball_lib.core.error import ScanError
from tarball_lib.core.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """
    Lists the files located directly in a directory.

    Subdirectories are pruned and never descended into.
    """

    def __init__(self, directory: Path):
        """
        Initialize the Scanner.

        Args:
            directory (Path): The directory to scan.
        """
        self._directory = directory

    def scan(self) -> Iterator[Path]:
        """
        Lazily yield the top-level files of the directory.

        Every file is yielded exactly once, in the order reported by the
        filesystem. Directories (including symlinks to directories), broken
        symlinks and special files such as FIFOs or sockets are skipped.

        Yields:
            Path: Path to a file in the directory.

        Raises:
            ScanError: If the directory cannot be listed or an entry cannot be inspected.
        """
        try:
            for entry in self._directory.iterdir():
                if entry.is_dir():
                    logger.debug(f"Skipping directory '{entry}'.")
                    continue
                if not entry.is_file():
                    logger.debug(f"Skipping special file '{entry}'.")
                    continue
                yield entry
        except OSError as e:
            raise ScanError(f"Could not scan directory '{self._directory}': {e}.") from e

    def collect(self, predicate: Callable[[str], bool]) -> list[Path]:
        """
        Collect the top-level files whose names satisfy a predicate.

        Args:
            predicate (Callable[[str], bool]): Function receiving the base name of a file.

        Returns:
            list[Path]: Matching files in scan order.

        Raises:
            ScanError: If the directory cannot be listed.
        """
        files = [f for f in self.scan() if predicate(f.name)]
        logger.debug(f"Files collected from '{self._directory}': {files}.")
        return files
