"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""


class AptError(Exception):
    """Base class for apt-rootfs exceptions."""

    def __init__(self, message=None):
        super(AptError, self).__init__(message)
        self.message = message

    def __str__(self):
        return self.message or ""


class ConfigError(AptError):
    """Configuration file error."""
    pass


class OriginNotFound(ConfigError):
    """Named origin is not registered."""

    def __init__(self, name):
        super(OriginNotFound, self).__init__(f"Origin not found '{name}'")
        self.name = name


class CommandError(AptError):
    """Command execution error."""
    pass


class ExternalCommandFailed(CommandError):
    """An apt step failed inside the chroot."""

    def __init__(self, step, message=None):
        msg = f"apt {step} failed"
        if message:
            msg += f": {message}"
        super(ExternalCommandFailed, self).__init__(msg)
        self.step = step


class PackageError(AptError):
    """Package operation error."""
    pass


class NoPackagesDefined(PackageError):
    def __init__(self):
        super(NoPackagesDefined, self).__init__("No packages defined")


class PatternNotFound(PackageError):
    def __init__(self, pattern):
        super(PatternNotFound, self).__init__(
            f"File(s) not found after globbing: {pattern}")
        self.pattern = pattern


class DuplicatePackage(PackageError):
    def __init__(self, path):
        super(DuplicatePackage, self).__init__(
            f"Duplicate package found: {path}")
        self.path = path
