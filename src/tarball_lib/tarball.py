# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click

from tarball_lib.core.click_format import GNUHelpColorsCommand
from tarball_lib.core.config import CFG
from tarball_lib.core.error import TarballError
from tarball_lib.core.logger import get_logger
from tarball_lib.pack import Packer

__version__ = "0.1.0"

logger = get_logger(__name__)

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(__version__)
    ctx.exit(0)


@click.command(
    help=f"""Pack each TARGET into `TARGET{CFG.archive.suffix}`.

Every archive also contains the README and LICENSE files found in the current directory.
Cross-compiled binaries named `project_os_arch` are stored under the bare project name.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help=f"Print the current version of {CFG.binary_name} and exit.",
)
@click.argument("targets", nargs=-1, required=True, metavar="TARGET...")
def cli(targets: tuple[str, ...]) -> NoReturn:
    """
    Pack the specified targets in the current directory.
    """
    try:
        packer = Packer(Path())
        packer.packAll(targets)
        sys.exit(0)
    except TarballError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
