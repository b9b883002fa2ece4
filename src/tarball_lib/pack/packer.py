# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import gzip
import tarfile
import zlib
from collections.abc import Iterable
from pathlib import Path

from tarball_lib.core.config import CFG, ArchiveSettings
from tarball_lib.core.error import EncodingError, FilesystemError, TarballError
from tarball_lib.core.logger import get_logger
from tarball_lib.naming import Normalizer
from tarball_lib.scan import AuxiliaryMatcher, Scanner

from .entry import ArchiveEntry, ArchiveTarget
from .states import PackState

logger = get_logger(__name__)


class Packer:
    """
    Packs files into gzip-compressed tar archives.

    Each archive contains the requested target followed by all auxiliary files
    (README, LICENSE, ...) found directly in the working directory. Build artifacts
    named `{project}_{os}_{arch}` are stored under their bare project name.
    """

    def __init__(
        self,
        directory: Path = Path(),
        matcher: AuxiliaryMatcher | None = None,
        normalizer: Normalizer | None = None,
        settings: ArchiveSettings = CFG.archive,
    ):
        """
        Initialize the Packer.

        Args:
            directory (Path): The working directory. Targets are resolved relative to it
                and auxiliary files are collected from it. Defaults to the current directory.
            matcher (AuxiliaryMatcher | None): Matcher recognizing auxiliary files.
                Defaults to a matcher built from the global configuration.
            normalizer (Normalizer | None): Normalizer of build artifact names.
                Defaults to a normalizer built from the global configuration.
            settings (ArchiveSettings): Archive output settings.

        Raises:
            TarballError: If the gzip compression level is not between 0 and 9.
        """
        if not 0 <= settings.compress_level <= 9:
            raise TarballError(
                f"Invalid gzip compression level '{settings.compress_level}': expected a value between 0 and 9."
            )

        self._directory = directory
        self._matcher = matcher or AuxiliaryMatcher()
        self._normalizer = normalizer or Normalizer()
        self._settings = settings
        self._state = PackState.CREATED

    @property
    def state(self) -> PackState:
        """State of the most recently processed archive."""
        return self._state

    def packAll(self, targets: Iterable[str]) -> list[Path]:
        """
        Pack every target into its own archive, strictly in order.

        Processing stops at the first failing target.

        Args:
            targets (Iterable[str]): Paths of the files to pack.

        Returns:
            list[Path]: Paths of the produced archives.

        Raises:
            TarballError: If any target cannot be packed.
        """
        return [self.pack(target) for target in targets]

    def pack(self, target: str) -> Path:
        """
        Pack a single target together with the auxiliary files into `<target>.tar.gz`.

        Args:
            target (str): Path of the file to pack, relative to the working directory.

        Returns:
            Path: Path of the produced archive.

        Raises:
            FilesystemError: If the target is missing or any file operation fails.
            ScanError: If the working directory cannot be listed.
            EncodingError: If the tar or gzip layer fails.
        """
        archive_target = ArchiveTarget(self._directory / target, self._settings.suffix)
        self._setState(PackState.CREATED)
        logger.info(f"Packing '{archive_target.output}'.")

        try:
            entries = self._collectEntries(archive_target)
        except TarballError:
            self._setState(PackState.FAILED)
            raise
        logger.debug(f"Archive entries: {entries}.")

        self._writeArchive(archive_target.output, entries)

        if self._settings.remove_normalized:
            Packer._removeNormalized(entries)

        return archive_target.output

    def _collectEntries(self, target: ArchiveTarget) -> list[ArchiveEntry]:
        """
        Build the ordered list of entries for an archive: the target first,
        then the auxiliary files in scan order.

        Args:
            target (ArchiveTarget): The requested archive.

        Returns:
            list[ArchiveEntry]: Entries to write.

        Raises:
            FilesystemError: If the target is not an existing file.
            ScanError: If the working directory cannot be listed.
        """
        if not target.path.is_file():
            raise FilesystemError(
                f"Archive target '{target.path}' does not exist or is not a file."
            )

        target_resolved = target.path.resolve()
        auxiliaries = [
            f
            for f in Scanner(self._directory).collect(self._matcher.matches)
            # the target itself may look like an auxiliary file
            if f.resolve() != target_resolved
        ]

        return [self._makeEntry(f) for f in [target.path, *auxiliaries]]

    def _makeEntry(self, path: Path) -> ArchiveEntry:
        """
        Create an archive entry with a normalized header name.

        Args:
            path (Path): Path to the file.

        Returns:
            ArchiveEntry: The entry to write.
        """
        return ArchiveEntry(path, self._normalizer.normalize(path.name))

    def _writeArchive(self, output: Path, entries: list[ArchiveEntry]) -> None:
        """
        Write entries into a gzip-compressed tar archive.

        The output file, the gzip stream and the tar stream are always closed
        in reverse order of opening, even if writing an entry fails.

        Args:
            output (Path): Path of the archive to create.
            entries (list[ArchiveEntry]): Entries to write, in order.

        Raises:
            FilesystemError: If a file operation fails.
            EncodingError: If the tar or gzip layer fails.
        """
        try:
            with (
                output.open("wb") as file,
                gzip.GzipFile(
                    fileobj=file,
                    mode="wb",
                    compresslevel=self._settings.compress_level,
                ) as compressed,
                tarfile.open(fileobj=compressed, mode="w") as tar,
            ):
                self._setState(PackState.OPEN)
                for entry in entries:
                    self._setState(PackState.WRITING)
                    Packer._addEntry(tar, entry)
                self._setState(PackState.FINALIZING)
        except TarballError:
            self._setState(PackState.FAILED)
            raise
        except (tarfile.TarError, zlib.error, ValueError) as e:
            self._setState(PackState.FAILED)
            raise EncodingError(f"Could not encode archive '{output}': {e}.") from e
        except OSError as e:
            self._setState(PackState.FAILED)
            raise FilesystemError(f"Could not write archive '{output}': {e}.") from e

        self._setState(PackState.CLOSED)

    @staticmethod
    def _addEntry(tar: tarfile.TarFile, entry: ArchiveEntry) -> None:
        """
        Write the header and the full content of a single file into the archive.

        Args:
            tar (tarfile.TarFile): The open tar stream.
            entry (ArchiveEntry): The entry to write.

        Raises:
            FilesystemError: If the file cannot be read.
            EncodingError: If the header cannot be created or written.
        """
        logger.debug(f"Adding '{entry.source}' as '{entry.name}'.")
        try:
            with entry.source.open("rb") as file:
                info = tar.gettarinfo(arcname=entry.name, fileobj=file)
                if info is None:
                    raise FilesystemError(
                        f"Could not add '{entry.source}': not a regular file."
                    )
                tar.addfile(info, file)
        except (tarfile.TarError, ValueError) as e:
            raise EncodingError(
                f"Could not write '{entry.source}' into the archive: {e}."
            ) from e
        except OSError as e:
            raise FilesystemError(f"Could not read '{entry.source}': {e}.") from e

    @staticmethod
    def _removeNormalized(entries: Iterable[ArchiveEntry]) -> None:
        """
        Remove the source files of entries stored under a normalized name.

        Args:
            entries (Iterable[ArchiveEntry]): Entries of a completed archive.

        Raises:
            FilesystemError: If a file cannot be removed.
        """
        for entry in entries:
            if not entry.normalized:
                continue

            logger.debug(f"Removing normalized build artifact '{entry.source}'.")
            try:
                entry.source.unlink()
            except OSError as e:
                raise FilesystemError(
                    f"Could not remove '{entry.source}': {e}."
                ) from e

    def _setState(self, state: PackState) -> None:
        logger.debug(f"Packer state: {self._state} -> {state}.")
        self._state = state
