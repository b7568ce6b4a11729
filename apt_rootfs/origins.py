"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
import logging
import os
import stat

from apt_rootfs import exceptions

LOG = logging.getLogger(__name__)


class Origin:
    """A resolved origin: a single package file or a directory of them."""

    def __init__(self, name, path, is_dir):
        self.name = name
        self.path = path
        self.is_dir = is_dir

    def __repr__(self):
        kind = "directory" if self.is_dir else "file"
        return f"Origin({self.name!r}, {self.path!r}, {kind})"


def resolve_origin(context, name=None):
    """Resolve an origin name, or the recipe directory when none is given.

    An unknown name raises OriginNotFound before the filesystem is touched.
    A path that does not exist raises the error from os.stat.
    """
    if name:
        try:
            path = context.origins[name]
        except KeyError:
            raise exceptions.OriginNotFound(name)
    else:
        path = context.recipe_dir

    st = os.stat(path)
    origin = Origin(name, path, stat.S_ISDIR(st.st_mode))
    LOG.debug("Resolved origin %r", origin)
    return origin
