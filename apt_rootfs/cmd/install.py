"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import errno
import os
import sys

import click

from apt_rootfs.actions.apt import AptAction
from apt_rootfs.chroot import ChrootCommand
from apt_rootfs.cmd.options import packages_option
from apt_rootfs.cmd.options import recommends_option
from apt_rootfs.cmd.options import rootfs_option
from apt_rootfs.cmd.options import unauthenticated_option
from apt_rootfs.cmd import pass_state_context
from apt_rootfs import exceptions


@click.command(
    help="Install Debian packages from the target's repositories.")
@pass_state_context
@rootfs_option
@recommends_option
@unauthenticated_option
@packages_option
def install(state,
            rootfs,
            recommends,
            unauthenticated,
            packages):
    try:
        context = state.context(os.getcwd())
        action = AptAction(
            state.reporter,
            description="install",
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
