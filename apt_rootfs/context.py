"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
import os
import types

from apt_rootfs import constants


def normalize_dir(path):
    """Absolute path without a trailing separator."""
    return os.path.normpath(os.path.abspath(os.fspath(path)))


class Context:
    """State shared by the actions of one pipeline run.

    The origin registry maps symbolic names to absolute paths. It is filled
    in when the context is created and exposed read-only to actions.
    """

    def __init__(self, rootdir, recipe_dir, origins=None, debug=False):
        self.rootdir = normalize_dir(rootdir)
        self.recipe_dir = normalize_dir(recipe_dir)
        self.debug = debug

        registry = {
            constants.RECIPE_ORIGIN: self.recipe_dir,
            constants.FILESYSTEM_ORIGIN: self.rootdir,
        }
        for name, path in (origins or {}).items():
            if not os.path.isabs(os.fspath(path)):
                path = os.path.join(self.recipe_dir, path)
            registry[name] = os.path.normpath(os.fspath(path))
        self._origins = registry

    @property
    def origins(self):
        return types.MappingProxyType(self._origins)

    def with_origins(self, origins):
        """Return a new context with additional origins registered."""
        merged = dict(self._origins)
        merged.update(origins)
        return Context(self.rootdir, self.recipe_dir,
                       origins=merged, debug=self.debug)
