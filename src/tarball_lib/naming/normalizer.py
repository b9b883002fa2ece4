# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable

from tarball_lib.core.config import CFG
from tarball_lib.core.logger import get_logger

logger = get_logger(__name__)


class Normalizer:
    """
    Computes canonical names of cross-compiled build artifacts.

    Multi-platform build tools name their outputs `{project}_{os}_{arch}`,
    e.g. `myapp_linux_amd64` or `myapp_windows_386.exe`. Such names are
    normalized to the bare project name. The filesystem is never touched.
    """

    def __init__(
        self,
        os_tokens: Iterable[str] = CFG.naming.os_tokens,
        arch_tokens: Iterable[str] = CFG.naming.arch_tokens,
        delimiter: str = CFG.naming.delimiter,
    ):
        """
        Initialize the Normalizer.

        Args:
            os_tokens (Iterable[str]): Recognized operating system tokens.
            arch_tokens (Iterable[str]): Recognized architecture tokens.
            delimiter (str): Delimiter separating the segments of an artifact name.
        """
        self._os_tokens = frozenset(os_tokens)
        self._arch_tokens = frozenset(arch_tokens)
        self._delimiter = delimiter

    def isArtifact(self, name: str) -> bool:
        """
        Check whether a name follows the `{project}_{os}_{arch}` convention.

        Args:
            name (str): Base name of the file.

        Returns:
            bool: True if the name has exactly three segments, a non-empty project,
                a known os token and a known architecture token.
        """
        segments = name.split(self._delimiter)
        if len(segments) != 3:
            return False

        project, os_token, arch_token = segments
        return (
            bool(project)
            and os_token in self._os_tokens
            and arch_token in self._arch_tokens
        )

    def normalize(self, name: str) -> str:
        """
        Return the canonical name for a file.

        Args:
            name (str): Base name of the file.

        Returns:
            str: The project segment for build artifacts, otherwise `name` unchanged.
        """
        if not self.isArtifact(name):
            return name

        canonical = name.split(self._delimiter, maxsplit=1)[0]
        logger.debug(f"Normalized build artifact '{name}' to '{canonical}'.")
        return canonical
