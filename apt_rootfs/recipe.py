"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
import logging
import os

import yaml

from apt_rootfs.actions import create_action
from apt_rootfs.chroot import ChrootCommand
from apt_rootfs import exceptions


class Recipe:
    def __init__(self, path, actions, origins=None):
        self.logging = logging.getLogger(__name__)
        self.path = path
        self.recipe_dir = os.path.dirname(os.path.abspath(path))
        self.actions = actions
        self.origins = origins or {}

    def run(self, context, chroot_factory=ChrootCommand):
        """Run every action in order, stopping at the first failure."""
        # Origins given by the caller take precedence over the recipe's.
        origins = {name: path for name, path in self._origins().items()
                   if name not in context.origins}
        context = context.with_origins(origins)
        for action in self.actions:
            action.run(context, chroot_factory(context))
        self.logging.info(f"Recipe {self.path} completed.")

    def _origins(self):
        origins = {}
        for name, path in self.origins.items():
            if not os.path.isabs(path):
                path = os.path.join(self.recipe_dir, path)
            origins[name] = path
        return origins


def load_recipe(path, reporter):
    """Parse a YAML recipe."""
    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise exceptions.ConfigError(f"Unable to read recipe {path}: {e}")
    except yaml.YAMLError as exc:
        if hasattr(exc, 'problem_mark'):
            mark = exc.problem_mark
            line = mark.line+1
            col = mark.column+1
            msg = f"Error in {path} at ({line}:{col})"
            raise exceptions.ConfigError(msg)
        msg = f"Failed to parse recipe yaml {exc}"
        raise exceptions.ConfigError(msg)

    if not isinstance(config, dict):
        raise exceptions.ConfigError(f"Recipe {path} must be a mapping.")

    actions = config.get("actions", None)
    if not actions or not isinstance(actions, list):
        raise exceptions.ConfigError(
            f"Error reading {path}. Actions section missing.")

    origins = config.get("origins", None) or {}
    if not isinstance(origins, dict) or not all(
            isinstance(v, str) for v in origins.values()):
        raise exceptions.ConfigError(
            "Origins must map names to paths.")

    return Recipe(
        path,
        [create_action(entry, reporter) for entry in actions],
        origins={str(k): v for k, v in origins.items()})
