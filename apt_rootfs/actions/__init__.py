"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
from apt_rootfs import exceptions
from apt_rootfs.actions.apt import AptAction
from apt_rootfs.actions.apt_file import AptFileAction

ACTIONS = {
    AptAction.kind: AptAction,
    AptFileAction.kind: AptFileAction,
}


def create_action(config, reporter):
    """Create an action from its recipe entry."""
    if not isinstance(config, dict):
        raise exceptions.ConfigError(
            f"Action must be a mapping, got {type(config).__name__}")
    config = dict(config)
    kind = config.pop("action", None)
    if kind is None:
        raise exceptions.ConfigError("Action kind missing.")
    cls = ACTIONS.get(kind)
    if cls is None:
        raise exceptions.ConfigError(f"Unknown action '{kind}'")

    for key, value in config.items():
        expected = cls.fields.get(key)
        if expected is None:
            raise exceptions.ConfigError(
                f"Unknown property '{key}' for action {kind}")
        if not isinstance(value, expected):
            raise exceptions.ConfigError(
                f"Property '{key}' of action {kind} must be "
                f"{expected.__name__}")
    for pkg in config.get("packages", []):
        if not isinstance(pkg, str):
            raise exceptions.ConfigError(
                f"Packages of action {kind} must be strings: {pkg!r}")

    return cls(reporter, **config)
