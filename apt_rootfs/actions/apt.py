"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

Install packages and their dependencies to the target rootfs with apt-get.

Recipe syntax:

  - action: apt
    recommends: bool
    unauthenticated: bool
    packages:
      - package1
      - package2

"""
from apt_rootfs import constants
from apt_rootfs import exceptions
from apt_rootfs.actions.apt_file import run_step
from apt_rootfs import packages as pkgs_mod


class AptAction:
    kind = "apt"
    fields = {
        "description": str,
        "recommends": bool,
        "unauthenticated": bool,
        "packages": list,
    }

    def __init__(self, reporter, description=None, recommends=False,
                 unauthenticated=False, packages=None):
        self.reporter = reporter
        self.description = description
        self.recommends = recommends
        self.unauthenticated = unauthenticated
        self.packages = list(packages or [])

    def validate(self):
        if not self.packages:
            raise exceptions.NoPackagesDefined()
        for pkg in self.packages:
            # Packages are installed by name only, use apt-file for files.
            if "://" in pkg:
                raise exceptions.ConfigError(
                    f"Package URIs are not supported: {pkg}")

    def run(self, context, chroot):
        self.reporter.log_start(self)
        self.validate()

        chroot.add_env(constants.APT_ENV)

        self._step(chroot, "update", constants.APT_GET_UPDATE)
        self._step(chroot, "install", pkgs_mod.apt_install_command(
            self.packages,
            recommends=self.recommends,
            unauthenticated=self.unauthenticated,
            base=constants.APT_OPTIONS))
        self._step(chroot, "clean", constants.APT_GET_CLEAN)

    def _step(self, chroot, step, cmd):
        run_step(self.reporter, chroot, self.kind, step, cmd)
