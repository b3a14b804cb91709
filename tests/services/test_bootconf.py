"""Tests for BootConfService — loader directory operations."""

import logging
from pathlib import Path

import pytest

from sdbootconf.domain.entry import Entry
from sdbootconf.services.bootconf import BootConfService, entry_detail, entry_summary

AOSC_ENTRY = (
    "title AOSC OS x86_64 (5.12.0-aosc-main)\n"
    "version 5.12.0-aosc-main\n"
    "linux /EFI/linux/vmlinux-5.12.0-aosc-main\n"
    "initrd /EFI/linux/initramfs-5.12.0-aosc-main.img\n"
    "options root=/dev/sda1 rw quiet\n"
)


@pytest.fixture
def service(loader_root: Path) -> BootConfService:
    return BootConfService(loader_root)


class TestEntryViews:
    def test_summary(self) -> None:
        entry = Entry.parse(AOSC_ENTRY)
        entry.id = "5.12.0-aosc-main"
        assert entry_summary(entry) == {
            "id": "5.12.0-aosc-main",
            "title": "AOSC OS x86_64 (5.12.0-aosc-main)",
            "version": "5.12.0-aosc-main",
            "linux": "/EFI/linux/vmlinux-5.12.0-aosc-main",
        }

    def test_summary_of_empty_entry(self) -> None:
        assert entry_summary(Entry("x")) == {"id": "x", "title": None, "version": None, "linux": None}

    def test_detail_lists_tokens_in_order(self) -> None:
        detail = entry_detail(Entry.parse(AOSC_ENTRY))
        assert [t["keyword"] for t in detail["tokens"]] == [
            "title",
            "version",
            "linux",
            "initrd",
            "options",
        ]
        assert detail["tokens"][-1] == {"keyword": "options", "value": "root=/dev/sda1 rw quiet"}


class TestShow:
    def test_show(self, service: BootConfService, loader_root: Path) -> None:
        result = service.show()
        assert result.ok
        assert result.op == "show"
        assert result.data["working_dir"] == str(loader_root)
        assert result.data["default"] == "5.12.0-aosc-main.conf"
        assert result.data["timeout"] == 5
        assert result.data["count"] == 2
        assert [i["id"] for i in result.data["items"]] == ["5.10.0-aosc-lts", "5.12.0-aosc-main"]
        assert result.warnings == []

    def test_dangling_default_warns(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").write_text("default gone.conf\n")
        result = service.show()
        assert result.ok
        assert len(result.warnings) == 1
        assert "gone.conf" in result.warnings[0]

    def test_default_without_suffix_warns(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").write_text("default 5.12.0-aosc-main\n")
        result = service.show()
        assert result.ok
        assert len(result.warnings) == 1
        assert ".conf" in result.warnings[0]
        resolved = service.get_default()
        assert resolved.error is not None
        assert resolved.error.code == "INVALID_FILENAME"

    def test_unset_fields(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").write_text("")
        result = service.show()
        assert result.data["default"] is None
        assert result.data["timeout"] is None
        assert result.warnings == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = BootConfService(tmp_path / "nope").show()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail["path"] == str(tmp_path / "nope" / "loader.conf")

    def test_parse_error(self, service: BootConfService, loader_root: Path) -> None:
        bad = loader_root / "entries" / "bad.conf"
        bad.write_text("title Bad\nsort-key x\n")
        result = service.show()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail == {"path": str(bad), "lineno": 2}
        assert "invalid token sort-key" in result.error.message

    def test_loader_conf_parse_error(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").write_text("timeout\n")
        result = service.show()
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"

    def test_stray_file(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "entries" / "README").write_text("")
        result = service.show()
        assert result.error is not None
        assert result.error.code == "INVALID_FILENAME"

    def test_entries_is_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "loader.conf").write_text("")
        (tmp_path / "entries").write_text("")
        result = BootConfService(tmp_path).show()
        assert result.error is not None
        assert result.error.code == "IO_ERROR"


class TestListEntries:
    def test_list(self, service: BootConfService) -> None:
        result = service.list_entries()
        assert result.ok
        assert result.op == "list_entries"
        assert result.data["count"] == 2
        assert result.data["items"][1]["version"] == "5.12.0-aosc-main"
        assert result.data["items"][0]["version"] is None

    def test_empty(self, tmp_path: Path) -> None:
        (tmp_path / "loader.conf").write_text("")
        (tmp_path / "entries").mkdir()
        result = BootConfService(tmp_path).list_entries()
        assert result.ok
        assert result.data == {"count": 0, "items": []}

    def test_unsorted_has_same_entries(self, loader_root: Path) -> None:
        result = BootConfService(loader_root, sort_entries=False).list_entries()
        assert sorted(i["id"] for i in result.data["items"]) == [
            "5.10.0-aosc-lts",
            "5.12.0-aosc-main",
        ]


class TestGetEntry:
    @pytest.mark.parametrize("entry_id", ["5.12.0-aosc-main", "5.12.0-aosc-main.conf"])
    def test_get(self, service: BootConfService, loader_root: Path, entry_id: str) -> None:
        result = service.get_entry(entry_id)
        assert result.ok
        assert result.data["id"] == "5.12.0-aosc-main"
        assert len(result.data["tokens"]) == 5
        assert result.meta == {"path": str(loader_root / "entries" / "5.12.0-aosc-main.conf")}

    def test_missing(self, service: BootConfService) -> None:
        result = service.get_entry("nope")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_does_not_need_loader_conf(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").unlink()
        assert service.get_entry("5.10.0-aosc-lts").ok


class TestGetDefault:
    def test_resolves(self, service: BootConfService) -> None:
        result = service.get_default()
        assert result.ok
        assert result.data["default"] == "5.12.0-aosc-main.conf"
        assert result.data["id"] == "5.12.0-aosc-main"
        assert result.data["title"] == "AOSC OS x86_64 (5.12.0-aosc-main)"

    def test_unset(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").write_text("timeout 3\n")
        result = service.get_default()
        assert result.ok
        assert result.data == {"default": None}

    def test_dangling(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "loader.conf").write_text("default gone.conf\n")
        result = service.get_default()
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestSetDefault:
    def test_set(self, service: BootConfService, loader_root: Path) -> None:
        result = service.set_default("5.10.0-aosc-lts")
        assert result.ok
        assert result.data == {
            "default": "5.10.0-aosc-lts.conf",
            "id": "5.10.0-aosc-lts",
            "title": "AOSC OS x86_64 (5.10.0-aosc-lts)",
        }
        assert (loader_root / "loader.conf").read_text() == (
            "default 5.10.0-aosc-lts.conf\ntimeout 5\n"
        )

    def test_accepts_suffix(self, service: BootConfService, loader_root: Path) -> None:
        assert service.set_default("5.10.0-aosc-lts.conf").ok
        assert service.get_default().data["id"] == "5.10.0-aosc-lts"

    def test_missing_entry_leaves_loader_conf(
        self, service: BootConfService, loader_root: Path
    ) -> None:
        before = (loader_root / "loader.conf").read_bytes()
        result = service.set_default("nope")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert (loader_root / "loader.conf").read_bytes() == before

    def test_bad_entry_rejected(self, service: BootConfService, loader_root: Path) -> None:
        (loader_root / "entries" / "bad.conf").write_text("linux\n")
        result = service.set_default("bad")
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"

    def test_logs(
        self, service: BootConfService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="sdbootconf"):
            service.set_default("5.10.0-aosc-lts")
        assert "5.10.0-aosc-lts.conf" in caplog.text


class TestSetTimeout:
    def test_set(self, service: BootConfService, loader_root: Path) -> None:
        result = service.set_timeout(0)
        assert result.ok
        assert result.data == {"timeout": 0}
        assert (loader_root / "loader.conf").read_text() == (
            "default 5.12.0-aosc-main.conf\ntimeout 0\n"
        )

    def test_missing_loader_conf(self, tmp_path: Path) -> None:
        result = BootConfService(tmp_path).set_timeout(3)
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert not (tmp_path / "loader.conf").exists()
