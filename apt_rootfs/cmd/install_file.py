"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import errno
import os
import sys

import click

from apt_rootfs.actions.apt_file import AptFileAction
from apt_rootfs.chroot import ChrootCommand
from apt_rootfs.cmd.options import add_origin_option
from apt_rootfs.cmd.options import packages_option
from apt_rootfs.cmd.options import recommends_option
from apt_rootfs.cmd.options import rootfs_option
from apt_rootfs.cmd.options import unauthenticated_option
from apt_rootfs.cmd import pass_state_context
from apt_rootfs import exceptions


@click.command(
    name="install-file",
    help="Install Debian package files into a target rootfs.")
@pass_state_context
@rootfs_option
@add_origin_option
@click.option(
    "--origin",
    help="Named origin holding the packages. "
         "Defaults to the recipe directory.",
    default=None)
@click.option(
    "--recipe-dir",
    help="Directory package patterns are relative to.",
    type=click.Path(exists=True, file_okay=False),
    default=os.getcwd)
@recommends_option
@unauthenticated_option
@packages_option
def install_file(state,
                 rootfs,
                 add_origin,
                 origin,
                 recipe_dir,
                 recommends,
                 unauthenticated,
                 packages):
    try:
        context = state.context(recipe_dir)
        action = AptFileAction(
            state.reporter,
            description="install-file",
            origin=origin,
            recommends=recommends,
            unauthenticated=unauthenticated,
            packages=packages)
        action.run(context, ChrootCommand(context))
    except exceptions.AptError as error:
        sys.exit(f"error - {error}")
    except KeyboardInterrupt:
        click.secho("\n" + ("Exiting at your request."))
        sys.exit(130)
    except BrokenPipeError:
        sys.exit()
    except OSError as error:
        if error.errno == errno.ENOSPC:
            sys.exit("error - No space left on device.")
        sys.exit(f"error - {error}")
