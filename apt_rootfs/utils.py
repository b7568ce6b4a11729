"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

import logging
import os
import subprocess

from apt_rootfs import exceptions

LOG = logging.getLogger(__name__)


def parse_subprocess_result(result):
    """Extracting info from subprocess.run() output for logging"""

    msg = "Results:\n"

    # If RC == 0, no need to log it
    if result.returncode:
        msg += f"==> RETURN_CODE: {result.returncode} \n"

    if result.stdout:
        msg += f"==> STDOUT: \n {_decode(result.stdout)} \n"

    if result.stderr:
        msg += f"==> STDERR: \n {_decode(result.stderr)} \n"

    return msg


def _decode(output):
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def run_command(cmd,
                stdin=None,
                stdout=None,
                stderr=None,
                check=True,
                env=None,
                cwd=None):
    """Run a command, raising CommandError when it cannot complete."""
    _env = os.environ.copy()
    if env:
        _env.update(env)
    LOG.debug("Running: %s", " ".join(cmd))
    try:
        subprocess_result = subprocess.run(
            cmd,
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            env=_env,
            cwd=cwd,
            check=check,
        )

        LOG.debug(parse_subprocess_result(subprocess_result))

        return subprocess_result

    except FileNotFoundError:
        msg = "%s is not found in $PATH" % cmd[0]
        LOG.error(msg)
        raise exceptions.CommandError(msg)

    except subprocess.CalledProcessError as e:
        msg = "SHELL EXECUTION ERROR:\n" + parse_subprocess_result(e)
        LOG.error(msg)
        raise exceptions.CommandError(msg)


def parse_assignment(value, separator="="):
    """Split a NAME=VALUE pair."""
    name, sep, rest = value.partition(separator)
    name = name.strip()
    if not sep or not name:
        raise exceptions.ConfigError(
            f"Expected NAME{separator}VALUE, got '{value}'")
    return name, rest.strip()
