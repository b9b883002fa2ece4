# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from tarball_lib.pack.entry import ArchiveEntry, ArchiveTarget
from tarball_lib.pack.states import PackState


def test_archive_target_output_appends_suffix():
    target = ArchiveTarget(Path("dist/app"), ".tar.gz")
    assert target.output == Path("dist/app.tar.gz")


def test_archive_target_output_keeps_existing_extension():
    target = ArchiveTarget(Path("myapp_windows_amd64.exe"), ".tar.gz")
    assert target.output == Path("myapp_windows_amd64.exe.tar.gz")


def test_archive_entry_normalized():
    assert ArchiveEntry(Path("dist/proj_linux_amd64"), "proj").normalized
    assert not ArchiveEntry(Path("dist/README.md"), "README.md").normalized


def test_pack_state_str():
    assert str(PackState.FINALIZING) == "finalizing"
