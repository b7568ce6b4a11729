"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
import contextlib
import logging

from apt_rootfs import constants
from apt_rootfs.packages import BindMount
from apt_rootfs import utils

LOG = logging.getLogger(__name__)


class ChrootCommand:
    """Run commands with the target rootfs as their root, using bwrap.

    Bind mounts only exist in the sandbox of the command being run, so
    nothing is left mounted once a command exits.
    """

    def __init__(self, context, runner=utils.run_command):
        self.rootdir = context.rootdir
        self.runner = runner
        self.env = {}
        self.mounts = []

    def add_env(self, value):
        name, value = utils.parse_assignment(value)
        self.env[name] = value

    def add_bind_mount(self, source, target=None):
        mount = BindMount(source, target)
        self.mounts.append(mount)
        return mount

    @contextlib.contextmanager
    def bind_mounts(self, mounts):
        """Keep mounts active for the commands run inside the block."""
        mounts = list(mounts)
        self.mounts.extend(mounts)
        try:
            yield self
        finally:
            for mount in mounts:
                self.mounts.remove(mount)

    def command(self, args):
        cmd = ["bwrap", "--bind", self.rootdir, "/"]
        for option, path in constants.SANDBOX_BINDS:
            cmd += [option, path]
        for path in constants.SANDBOX_HOST_BINDS:
            cmd += ["--bind", path, path]
        for mount in self.mounts:
            cmd += mount.args()
        cmd += ["--die-with-parent", "--chdir", "/"]
        cmd += list(args)
        return cmd

    def run(self, label, *args):
        LOG.info("%s | %s", label, " ".join(args))
        return self.runner(self.command(args), env=self.env)
