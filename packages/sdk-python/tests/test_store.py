"""Tests for the installed generator store."""

import shutil

import pytest

from demiurgos_common import InstallError, NotFoundError
from demiurgos_sdk import GeneratorStore


@pytest.fixture
def store(tmp_path):
    return GeneratorStore(tmp_path / "store")


class TestInstall:
    def test_first_install_copies_tree(self, store, make_generator):
        root = make_generator(name="rest-api", version="1.0.0", templates={"a.tpl": "A"}, files={"x.txt": "x"})
        (root / ".git").mkdir()
        (root / ".git" / "HEAD").write_text("ref: main")

        result = store.install(root)

        assert result.created is True
        assert result.path == store.root / "rest-api" / "1.0.0"
        assert (result.path / "Generator.yaml").is_file()
        assert (result.path / "templates" / "a.tpl").read_text() == "A"
        assert (result.path / "files" / "x.txt").read_text() == "x"
        assert not (result.path / ".git").exists()

    def test_second_install_is_a_noop(self, store, make_generator):
        root = make_generator(name="rest-api", templates={"a.tpl": "original"})
        store.install(root)
        (root / "templates" / "a.tpl").write_text("changed")

        result = store.install(root)

        assert result.created is False
        assert (result.path / "templates" / "a.tpl").read_text() == "original"

    def test_force_replaces_entry(self, store, make_generator):
        root = make_generator(name="rest-api", templates={"a.tpl": "original", "old.tpl": "old"})
        store.install(root)
        (root / "templates" / "a.tpl").write_text("changed")
        (root / "templates" / "old.tpl").unlink()

        result = store.install(root, force=True)

        assert result.created is True
        assert (result.path / "templates" / "a.tpl").read_text() == "changed"
        assert not (result.path / "templates" / "old.tpl").exists()

    def test_versions_live_side_by_side(self, store, make_generator):
        store.install(make_generator("v1", name="rest-api", version="1.0.0"))
        store.install(make_generator("v2", name="rest-api", version="2.0.0"))
        assert store.versions("rest-api") == ["1.0.0", "2.0.0"]

    def test_missing_manifest(self, store, tmp_path):
        staged = tmp_path / "empty"
        staged.mkdir()
        with pytest.raises(InstallError, match="Cannot install"):
            store.install(staged)
        assert not store.root.exists()


class TestLookup:
    def test_get_latest_by_semver(self, store, make_generator):
        for version in ["1.2.0", "1.10.0", "1.10.0-rc.1", "1.9.3"]:
            store.install(make_generator(version, name="rest-api", version=version))

        assert store.versions("rest-api") == ["1.2.0", "1.9.3", "1.10.0-rc.1", "1.10.0"]
        assert store.latest("rest-api") == "1.10.0"
        assert store.get("rest-api").version == "1.10.0"
        assert store.get("rest-api", "1.2.0").version == "1.2.0"

    def test_get_missing_name(self, store):
        with pytest.raises(NotFoundError, match="not installed"):
            store.get("nope")

    def test_get_missing_version(self, store, make_generator):
        store.install(make_generator(name="rest-api", version="1.0.0"))
        with pytest.raises(NotFoundError, match="rest-api 9.9.9"):
            store.get("rest-api", "9.9.9")

    def test_exists(self, store, make_generator):
        store.install(make_generator(name="rest-api", version="1.0.0"))
        assert store.exists("rest-api", "1.0.0")
        assert not store.exists("rest-api", "2.0.0")

    def test_list(self, store, make_generator):
        assert store.list() == []
        store.install(make_generator("b", name="beta", version="0.1.0"))
        store.install(make_generator("a", name="alpha", version="2.0.0"))
        store.install(make_generator("a1", name="alpha", version="1.0.0"))

        entries = [(e.name, e.version) for e in store.list()]
        assert entries == [("alpha", "1.0.0"), ("alpha", "2.0.0"), ("beta", "0.1.0")]


class TestUninstall:
    def test_removes_entry_and_empty_name_dir(self, store, make_generator):
        store.install(make_generator(name="rest-api", version="1.0.0"))
        store.uninstall("rest-api", "1.0.0")
        assert not (store.root / "rest-api").exists()

    def test_keeps_other_versions(self, store, make_generator):
        store.install(make_generator("v1", name="rest-api", version="1.0.0"))
        store.install(make_generator("v2", name="rest-api", version="2.0.0"))
        store.uninstall("rest-api", "1.0.0")
        assert store.versions("rest-api") == ["2.0.0"]

    def test_missing_entry(self, store):
        with pytest.raises(NotFoundError):
            store.uninstall("rest-api", "1.0.0")


class TestInstallFailures:
    def test_uncreatable_destination(self, tmp_path, make_generator):
        occupied = tmp_path / "occupied"
        occupied.write_text("not a directory")
        store = GeneratorStore(occupied)

        with pytest.raises(InstallError, match="Cannot create install directory"):
            store.install(make_generator(name="rest-api"))

    def test_copy_failure_removes_partial_entry(self, store, make_generator, monkeypatch):
        root = make_generator(name="rest-api", version="1.0.0", templates={"a.tpl": "A"})

        def broken_copytree(src, dst, **kwargs):
            (dst / "Generator.yaml").write_text("half written")
            raise OSError("disk full")

        monkeypatch.setattr(shutil, "copytree", broken_copytree)

        with pytest.raises(InstallError, match="disk full"):
            store.install(root)

        assert not store.exists("rest-api", "1.0.0")
        assert not (store.root / "rest-api" / "1.0.0").exists()
