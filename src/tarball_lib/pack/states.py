# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum


class PackState(Enum):
    """
    Lifecycle of a single archive produced by the Packer.

    CREATED -> OPEN -> WRITING -> FINALIZING -> CLOSED,
    with FAILED reached from OPEN, WRITING or FINALIZING.
    """

    CREATED = 1
    OPEN = 2
    WRITING = 3
    FINALIZING = 4
    CLOSED = 5
    FAILED = 6

    def __str__(self) -> str:
        """
        Return the lowercase string representation of the enum variant.

        Returns:
            str: The name of the state in lowercase.
        """
        return self.name.lower()
