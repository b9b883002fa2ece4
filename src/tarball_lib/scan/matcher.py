# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
from collections.abc import Iterable

from tarball_lib.core.config import CFG
from tarball_lib.core.logger import get_logger

logger = get_logger(__name__)


class AuxiliaryMatcher:
    """
    Decides whether a file should be bundled as an auxiliary file (README, LICENSE, ...).

    A file matches if its extension is one of the allowed extensions and its
    extension-stripped name, lower-cased, is one of the recognized names.
    """

    def __init__(
        self,
        names: Iterable[str] = CFG.auxiliary.names,
        extensions: Iterable[str] = CFG.auxiliary.extensions,
    ):
        """
        Initialize the AuxiliaryMatcher.

        Args:
            names (Iterable[str]): Recognized base names. Compared case-insensitively.
            extensions (Iterable[str]): Allowed extensions, compared exactly.
                An empty string allows files without an extension.
        """
        self._names = frozenset(name.lower() for name in names)
        self._extensions = frozenset(extensions)

    def matches(self, name: str) -> bool:
        """
        Check whether a file name identifies an auxiliary file.

        Args:
            name (str): Base name of the file.

        Returns:
            bool: True if the file should be bundled, else False.
        """
        stem, extension = os.path.splitext(name)
        if extension not in self._extensions:
            return False

        return stem.lower() in self._names
