import contextlib

import pytest

from apt_rootfs.context import Context
from apt_rootfs import exceptions


class FakeReporter:
    def __init__(self):
        self.started = []

    def log_start(self, action):
        self.started.append(action.kind)

    def status(self, message):
        return contextlib.nullcontext()


class FakeChroot:
    """Records commands with the bind mounts active when each one ran."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.calls = []
        self.env = []
        self.mounts = []

    def add_env(self, value):
        self.env.append(value)

    @contextlib.contextmanager
    def bind_mounts(self, mounts):
        mounts = list(mounts)
        self.mounts.extend(mounts)
        try:
            yield self
        finally:
            for mount in mounts:
                self.mounts.remove(mount)

    def run(self, label, *args):
        self.calls.append((label, list(args), list(self.mounts)))
        if self.fail_on in args:
            raise exceptions.CommandError(f"{self.fail_on} exploded")

    @property
    def commands(self):
        return [args for _, args, _ in self.calls]


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"!<arch>\n")
    return path


@pytest.fixture()
def reporter():
    return FakeReporter()


@pytest.fixture()
def chroot():
    return FakeChroot()


@pytest.fixture()
def rootfs(tmp_path):
    path = tmp_path / "rootfs"
    path.mkdir()
    return path


@pytest.fixture()
def recipe_dir(tmp_path):
    path = tmp_path / "recipe"
    touch(path / "pkgs" / "a_1.0_all.deb")
    touch(path / "pkgs" / "b_2.0_amd64.deb")
    touch(path / "pkgs" / "c_3.0_all.deb")
    return path


@pytest.fixture()
def context(rootfs, recipe_dir):
    return Context(rootfs, recipe_dir)


@pytest.fixture()
def make_chroot():
    return FakeChroot


@pytest.fixture()
def make_file():
    return touch
