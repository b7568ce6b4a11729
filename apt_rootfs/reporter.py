"""
Copyright (c) 2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""
import logging

from rich.console import Console


class Reporter:
    """Progress reporting handed to actions."""

    def __init__(self, console=None):
        self.logging = logging.getLogger("apt_rootfs.actions")
        self.console = console or Console(stderr=True)

    def log_start(self, action):
        msg = f"Running {action.kind} action"
        if action.description:
            msg += f": {action.description}"
        self.logging.info(msg)

    def status(self, message):
        return self.console.status(message)
