"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
import glob
import logging
import os

from apt_rootfs import constants
from apt_rootfs import exceptions

LOG = logging.getLogger(__name__)


class BindMount:
    """Request to expose a host path inside the chroot."""

    def __init__(self, source, target=None, readonly=True):
        self.source = source
        # An empty target means the same path inside the chroot.
        self.target = target or source
        self.readonly = readonly

    def _key(self):
        return (self.source, self.target, self.readonly)

    def __eq__(self, other):
        if not isinstance(other, BindMount):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"BindMount({self.source!r}, {self.target!r})"

    def args(self):
        return ["--ro-bind" if self.readonly else "--bind",
                self.source, self.target]


def expand_packages(origin, packages):
    """Create the list of package files to install from an origin.

    A single-file origin (e.g. a downloaded package) is the only package and
    the configured list is ignored. For a directory each entry is a glob
    pattern relative to the origin; matches are returned in entry order.
    """
    if not origin.is_dir:
        if packages:
            LOG.debug("Origin %s is a file, ignoring package list.",
                      origin.path)
        return [origin.path]

    if not packages:
        raise exceptions.NoPackagesDefined()

    base = glob.escape(origin.path)
    pkgs = []
    for pkg in packages:
        source = os.path.normpath(os.path.join(base, pkg.lstrip(os.sep)))
        matches = sorted(glob.glob(source))
        if not matches:
            raise exceptions.PatternNotFound(pkg)
        LOG.debug("%s matched %d file(s)", pkg, len(matches))
        pkgs.extend(matches)
    return pkgs


def check_duplicates(pkgs):
    """Reject a package list naming the same file twice."""
    for idx, pkg in enumerate(pkgs):
        if pkg in pkgs[idx + 1:]:
            raise exceptions.DuplicatePackage(pkg)


def is_under(path, rootdir):
    root = rootdir.rstrip(os.sep)
    return path.startswith(root + os.sep)


def plan_bind_mounts(pkgs, rootdir):
    """Rewrite package paths relative to the chroot root.

    Packages already inside the rootfs are referenced directly. Anything
    else gets a bind mount at the same path inside the chroot. Returns the
    rewritten paths (same order) and the bind mounts to request.
    """
    root = rootdir.rstrip(os.sep)
    chroot_pkgs = []
    mounts = []
    for pkg in pkgs:
        if is_under(pkg, rootdir):
            pkg = pkg[len(root):]
        else:
            mounts.append(BindMount(pkg))
        chroot_pkgs.append("." + pkg)
    return chroot_pkgs, mounts


def apt_options(base, recommends=False, unauthenticated=False):
    options = list(base)
    if not recommends:
        options.append(constants.NO_RECOMMENDS)
    if unauthenticated:
        options.append(constants.ALLOW_UNAUTHENTICATED)
    return options


def apt_install_command(pkgs, recommends=False, unauthenticated=False,
                        base=constants.APT_FILE_OPTIONS):
    """Return the apt command line installing pkgs."""
    cmd = apt_options(base, recommends, unauthenticated)
    cmd.append("install")
    cmd.extend(pkgs)
    return cmd
