import pytest

from apt_rootfs import exceptions
from apt_rootfs.origins import Origin
from apt_rootfs import packages
from apt_rootfs.packages import BindMount


class TestExpandPackages:

    @pytest.fixture()
    def origin(self, recipe_dir):
        return Origin(None, str(recipe_dir), True)

    def test_single_file_ignores_package_list(self, tmp_path, make_file):
        deb = make_file(tmp_path / "dl.deb")
        origin = Origin("dl", str(deb), False)
        assert packages.expand_packages(origin, ["nope/*.deb"]) == [str(deb)]
        assert packages.expand_packages(origin, []) == [str(deb)]

    def test_no_packages(self, origin):
        with pytest.raises(exceptions.NoPackagesDefined):
            packages.expand_packages(origin, [])

    def test_glob(self, origin, recipe_dir):
        assert packages.expand_packages(origin, ["pkgs/*_all.deb"]) == [
            str(recipe_dir / "pkgs" / "a_1.0_all.deb"),
            str(recipe_dir / "pkgs" / "c_3.0_all.deb"),
        ]

    def test_reference_order_is_kept(self, origin, recipe_dir):
        pkgs = packages.expand_packages(
            origin, ["pkgs/c_*.deb", "pkgs/?_[12].0_*.deb"])
        assert pkgs == [
            str(recipe_dir / "pkgs" / "c_3.0_all.deb"),
            str(recipe_dir / "pkgs" / "a_1.0_all.deb"),
            str(recipe_dir / "pkgs" / "b_2.0_amd64.deb"),
        ]

    def test_plain_name(self, origin, recipe_dir):
        assert packages.expand_packages(origin, ["pkgs/b_2.0_amd64.deb"]) == [
            str(recipe_dir / "pkgs" / "b_2.0_amd64.deb")]

    def test_leading_slash_stays_in_origin(self, origin, recipe_dir):
        assert packages.expand_packages(origin, ["/pkgs/a_*.deb"]) == [
            str(recipe_dir / "pkgs" / "a_1.0_all.deb")]

    def test_pattern_not_found(self, origin):
        with pytest.raises(exceptions.PatternNotFound) as e:
            packages.expand_packages(origin, ["pkgs/a_*.deb", "pkgs/z_*.deb"])
        assert e.value.pattern == "pkgs/z_*.deb"
        assert "pkgs/z_*.deb" in str(e.value)

    def test_origin_with_glob_characters(self, tmp_path, make_file):
        deb = make_file(tmp_path / "out[1]" / "x_1_all.deb")
        origin = Origin(None, str(tmp_path / "out[1]"), True)
        assert packages.expand_packages(origin, ["*.deb"]) == [str(deb)]


class TestCheckDuplicates:

    def test_unique(self):
        packages.check_duplicates(["/a.deb", "/b.deb", "/c.deb"])

    def test_duplicate(self):
        with pytest.raises(exceptions.DuplicatePackage) as e:
            packages.check_duplicates(["/a.deb", "/b.deb", "/a.deb"])
        assert e.value.path == "/a.deb"
        assert str(e.value) == "Duplicate package found: /a.deb"


class TestPlanBindMounts:

    def test_inside_rootfs(self):
        pkgs, mounts = packages.plan_bind_mounts(
            ["/build/rootfs/var/cache/a.deb"], "/build/rootfs")
        assert pkgs == ["./var/cache/a.deb"]
        assert mounts == []

    def test_outside_rootfs(self):
        pkgs, mounts = packages.plan_bind_mounts(
            ["/srv/debs/a.deb"], "/build/rootfs")
        assert pkgs == ["./srv/debs/a.deb"]
        assert mounts == [BindMount("/srv/debs/a.deb")]

    def test_sibling_with_common_prefix_is_outside(self):
        pkgs, mounts = packages.plan_bind_mounts(
            ["/build/rootfs2/a.deb"], "/build/rootfs")
        assert pkgs == ["./build/rootfs2/a.deb"]
        assert mounts == [BindMount("/build/rootfs2/a.deb")]

    def test_trailing_separator_on_rootfs(self):
        pkgs, mounts = packages.plan_bind_mounts(
            ["/build/rootfs/a.deb"], "/build/rootfs/")
        assert pkgs == ["./a.deb"]
        assert mounts == []

    def test_mixed_keeps_order(self):
        pkgs, mounts = packages.plan_bind_mounts(
            ["/srv/a.deb", "/build/rootfs/b.deb", "/srv/c.deb"],
            "/build/rootfs")
        assert pkgs == ["./srv/a.deb", "./b.deb", "./srv/c.deb"]
        assert mounts == [BindMount("/srv/a.deb"), BindMount("/srv/c.deb")]


class TestBindMount:

    def test_default_target(self):
        mount = BindMount("/srv/a.deb")
        assert mount.target == "/srv/a.deb"
        assert mount.args() == ["--ro-bind", "/srv/a.deb", "/srv/a.deb"]

    def test_writable(self):
        mount = BindMount("/srv", "/mnt", readonly=False)
        assert mount.args() == ["--bind", "/srv", "/mnt"]


class TestAptInstallCommand:

    def test_defaults(self):
        assert packages.apt_install_command(["./a.deb", "./b.deb"]) == [
            "apt", "-oDpkg::Progress-Fancy=0", "--yes",
            "--no-install-recommends", "install", "./a.deb", "./b.deb"]

    def test_recommends(self):
        cmd = packages.apt_install_command(["./a.deb"], recommends=True)
        assert "--no-install-recommends" not in cmd

    def test_unauthenticated(self):
        cmd = packages.apt_install_command(
            ["./a.deb"], recommends=False, unauthenticated=True)
        assert cmd == [
            "apt", "-oDpkg::Progress-Fancy=0", "--yes",
            "--no-install-recommends", "--allow-unauthenticated",
            "install", "./a.deb"]
