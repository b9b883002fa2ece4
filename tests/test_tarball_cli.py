# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import tarfile
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tarball_lib.core.config import CFG
from tarball_lib.core.error import EncodingError
from tarball_lib.pack.packer import Packer
from tarball_lib.tarball import __version__, cli


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "app").write_bytes(b"binary")
    (tmp_path / "README.md").write_text("readme")
    (tmp_path / "LICENSE").write_text("license")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("guide")
    return tmp_path


def test_cli_packs_target(workdir):
    runner = CliRunner()
    result = runner.invoke(cli, ["app"])

    assert result.exit_code == 0
    with tarfile.open(workdir / "app.tar.gz", "r:gz") as tar:
        assert sorted(tar.getnames()) == ["LICENSE", "README.md", "app"]


def test_cli_packs_multiple_targets(workdir):
    (workdir / "myapp_linux_amd64").write_bytes(b"linux binary")

    runner = CliRunner()
    result = runner.invoke(cli, ["app", "myapp_linux_amd64"])

    assert result.exit_code == 0
    assert (workdir / "app.tar.gz").is_file()
    with tarfile.open(workdir / "myapp_linux_amd64.tar.gz", "r:gz") as tar:
        assert tar.getnames()[0] == "myapp"


def test_cli_missing_target_fails(workdir):
    runner = CliRunner()
    result = runner.invoke(cli, ["app", "missing", "other"])

    assert result.exit_code == CFG.exit_codes.default
    assert (workdir / "app.tar.gz").is_file()
    assert not (workdir / "missing.tar.gz").exists()


def test_cli_tarball_error_uses_its_exit_code(workdir):
    runner = CliRunner()
    with patch.object(Packer, "packAll", side_effect=EncodingError("bad header")):
        result = runner.invoke(cli, ["app"])

    assert result.exit_code == EncodingError.exit_code


def test_cli_unexpected_error(workdir):
    runner = CliRunner()
    with patch.object(Packer, "packAll", side_effect=RuntimeError("boom")):
        result = runner.invoke(cli, ["app"])

    assert result.exit_code == CFG.exit_codes.unexpected_error


def test_cli_requires_target(workdir):
    runner = CliRunner()
    result = runner.invoke(cli, [])

    assert result.exit_code == CFG.exit_codes.usage
    assert not list(workdir.glob("*.tar.gz"))


def test_cli_version(workdir):
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_cli_help(workdir, flag):
    runner = CliRunner()
    result = runner.invoke(cli, [flag])

    assert result.exit_code == 0
    assert "TARGET" in result.output
    assert not list(workdir.glob("*.tar.gz"))
