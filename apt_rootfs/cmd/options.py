"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import click

from apt_rootfs.cmd import State
from apt_rootfs import exceptions
from apt_rootfs.utils import parse_assignment


def rootfs_option(f):
    """--rootfs option"""
    def callback(ctxt, param, value):
        state = ctxt.ensure_object(State)
        state.rootfs = value
        return value
    return click.option(
        "--rootfs",
        help="Path to the target root filesystem.",
        required=True,
        type=click.Path(exists=True, file_okay=False),
        callback=callback
    )(f)


def add_origin_option(f):
    """--add-origin option"""
    def callback(ctxt, param, value):
        state = ctxt.ensure_object(State)
        for item in value:
            try:
                name, path = parse_assignment(item)
            except exceptions.ConfigError as e:
                raise click.BadParameter(str(e))
            state.origins[name] = path
        return value
    return click.option(
        "--add-origin",
        help="Register a named origin as NAME=PATH.",
        multiple=True,
        metavar="NAME=PATH",
        callback=callback
    )(f)


def recommends_option(f):
    """--recommends option"""
    return click.option(
        "--recommends",
        help="Install recommended packages.",
        is_flag=True,
        default=False
    )(f)


def unauthenticated_option(f):
    """--unauthenticated option"""
    return click.option(
        "--unauthenticated",
        help="Allow unauthenticated packages.",
        is_flag=True,
        default=False
    )(f)


def packages_option(f):
    """packages argument"""
    return click.argument(
        "packages",
        nargs=-1
    )(f)
