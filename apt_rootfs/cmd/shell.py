"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import logging

import click
from rich.logging import RichHandler

from apt_rootfs.cmd.install import install
from apt_rootfs.cmd.install_file import install_file
from apt_rootfs.cmd import pass_state_context
from apt_rootfs.cmd.run import run
from apt_rootfs import constants


def setup_log(debug=False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group(
    help="Install Debian packages into a target root filesystem.")
@click.version_option(version=constants.VERSION)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Increase verbosity.")
@pass_state_context
def cli(state, debug):
    state.debug = debug
    setup_log(debug)


cli.add_command(run)
cli.add_command(install)
cli.add_command(install_file)


def main():
    cli(prog_name="apt-rootfs")
