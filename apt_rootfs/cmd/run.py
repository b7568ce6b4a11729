"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import errno
import sys

import click

from apt_rootfs.chroot import ChrootCommand
from apt_rootfs.cmd.options import add_origin_option
from apt_rootfs.cmd.options import rootfs_option
from apt_rootfs.cmd import pass_state_context
from apt_rootfs import exceptions
from apt_rootfs.recipe import load_recipe


@click.command(help="Run the actions of a YAML recipe against a rootfs.")
@pass_state_context
@rootfs_option
@add_origin_option
@click.argument(
    "recipe",
    type=click.Path(exists=True, dir_okay=False),
    nargs=1
)
def run(state, rootfs, add_origin, recipe):
    try:
        recipe = load_recipe(recipe, state.reporter)
        context = state.context(recipe.recipe_dir)
        recipe.run(context, chroot_factory=ChrootCommand)
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
