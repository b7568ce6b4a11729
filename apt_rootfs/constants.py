"""
Copyright (c) 2023-2026 Wind River Systems, Inc.

SPDX-License-Identifier: Apache-2.0

"""

VERSION = "0.1"

# Origins every pipeline run knows about.
RECIPE_ORIGIN = "recipe"
FILESYSTEM_ORIGIN = "filesystem"

APT_ENV = "DEBIAN_FRONTEND=noninteractive"

APT_GET_UPDATE = ["apt-get", "update"]
APT_GET_CLEAN = ["apt-get", "clean"]

# apt-file installs through apt so local .deb paths are accepted.
APT_FILE_OPTIONS = ["apt", "-oDpkg::Progress-Fancy=0", "--yes"]
APT_OPTIONS = ["apt-get", "-y"]

NO_RECOMMENDS = "--no-install-recommends"
ALLOW_UNAUTHENTICATED = "--allow-unauthenticated"

# Host filesystems made available to every chroot command.
SANDBOX_BINDS = [
    ("--proc", "/proc"),
    ("--dev", "/dev"),
]
SANDBOX_HOST_BINDS = ["/sys"]
