"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

Install packages from .deb files and their dependencies to the target rootfs
with apt.

Dependencies are satisfied first from the package list and then from the
target's configured apt repositories. Downgrading an installed package is
refused by apt.

Recipe syntax:

  - action: apt-file
    origin: name
    recommends: bool
    unauthenticated: bool
    packages:
      - pkgs/bmap-tools_*_all.deb

origin defaults to the recipe directory. When it names a single file (for
example a package fetched by an earlier step) the package list is ignored.

"""
import logging

from apt_rootfs import constants
from apt_rootfs import exceptions
from apt_rootfs.origins import resolve_origin
from apt_rootfs import packages as pkgs_mod

LOG = logging.getLogger(__name__)


class AptFileAction:
    kind = "apt-file"
    fields = {
        "description": str,
        "origin": str,
        "recommends": bool,
        "unauthenticated": bool,
        "packages": list,
    }

    def __init__(self, reporter, description=None, origin=None,
                 recommends=False, unauthenticated=False, packages=None):
        self.reporter = reporter
        self.description = description
        self.origin = origin
        self.recommends = recommends
        self.unauthenticated = unauthenticated
        self.packages = list(packages or [])

    def resolve(self, context):
        """Return the chroot-relative package paths and required mounts."""
        origin = resolve_origin(context, self.origin)
        pkgs = pkgs_mod.expand_packages(origin, self.packages)
        pkgs_mod.check_duplicates(pkgs)
        return pkgs_mod.plan_bind_mounts(pkgs, context.rootdir)

    def run(self, context, chroot):
        self.reporter.log_start(self)
        pkgs, mounts = self.resolve(context)
        for mount in mounts:
            LOG.debug("Bind mounting %s", mount.source)

        chroot.add_env(constants.APT_ENV)

        self._step(chroot, "update", constants.APT_GET_UPDATE)
        cmd = pkgs_mod.apt_install_command(
            pkgs,
            recommends=self.recommends,
            unauthenticated=self.unauthenticated)
        with chroot.bind_mounts(mounts):
            self._step(chroot, "install", cmd)
        self._step(chroot, "clean", constants.APT_GET_CLEAN)

    def _step(self, chroot, step, cmd):
        run_step(self.reporter, chroot, self.kind, step, cmd)


def run_step(reporter, chroot, label, step, cmd):
    """Run one apt step, labelling a failure with the step name."""
    with reporter.status(f"apt {step}..."):
        try:
            chroot.run(label, *cmd)
        except exceptions.CommandError as e:
            raise exceptions.ExternalCommandFailed(step, str(e)) from e
