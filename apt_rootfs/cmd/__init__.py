"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import click

from apt_rootfs.context import Context
from apt_rootfs.reporter import Reporter


class State:
    """Options shared by all commands."""

    def __init__(self):
        self.debug = False
        self.rootfs = None
        self.origins = {}
        self.reporter = Reporter()

    def context(self, recipe_dir):
        return Context(
            self.rootfs,
            recipe_dir,
            origins=self.origins,
            debug=self.debug)


pass_state_context = click.make_pass_decorator(State, ensure=True)
