"""Tests for the filesystem application and its open dispatch."""

from __future__ import annotations

import os
import socket
import tempfile
import unittest
from pathlib import Path

from dirnav.application import FilesystemApplication
from dirnav.entries import Entry
from dirnav.errors import NotFound, UnsupportedEntry
from dirnav.settings import Settings


class RecordingTarget:
    def __init__(self) -> None:
        self.opened: list[Path] = []
        self.navigated: list[Path] = []

    def open_file(self, path: Path) -> None:
        self.opened.append(path)

    def navigate(self, path: Path) -> None:
        self.navigated.append(path)


class OpenDispatchTests(unittest.TestCase):
    def test_directory_navigates_and_file_opens(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "notes.txt").write_text("hi", encoding="utf-8")
            app = FilesystemApplication()
            target = RecordingTarget()

            app.open(Entry.of(root / "sub"), target)
            app.open(Entry.of(root / "notes.txt"), target)

            self.assertEqual(target.navigated, [Entry.of(root / "sub").path])
            self.assertEqual(target.opened, [Entry.of(root / "notes.txt").path])

    def test_symlinks_dispatch_on_their_target_kind(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "file").write_text("", encoding="utf-8")
            (root / "to-dir").symlink_to(root / "sub")
            (root / "to-file").symlink_to(root / "file")
            app = FilesystemApplication()
            target = RecordingTarget()

            app.open(Entry.of(root / "to-dir"), target)
            app.open(Entry.of(root / "to-file"), target)

            self.assertEqual(target.navigated, [Entry.of(root / "to-dir").path])
            self.assertEqual(target.opened, [Entry.of(root / "to-file").path])

    def test_dangling_symlink_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            link = Path(tmp) / "dangling"
            link.symlink_to(Path(tmp) / "nowhere")
            with self.assertRaises(NotFound):
                FilesystemApplication().open(Entry.of(link), RecordingTarget())

    @unittest.skipUnless(hasattr(socket, "AF_UNIX"), "unix sockets unavailable")
    def test_other_kinds_are_not_opened(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "s")
            server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                server.bind(path)
                target = RecordingTarget()
                with self.assertRaises(UnsupportedEntry) as ctx:
                    FilesystemApplication().open(Entry.of(path), target)
                self.assertEqual(ctx.exception.kind, "other")
                self.assertEqual((target.opened, target.navigated), ([], []))
            finally:
                server.close()


class ApplicationConfigurationTests(unittest.TestCase):
    def test_settings_drive_listing_and_columns(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".hidden").write_text("", encoding="utf-8")
            (root / "big.bin").write_bytes(b"x" * 2000)
            settings = Settings(active_columns=("name", "size"), size_flavor="decimal", show_hidden=False)
            app = FilesystemApplication(settings)

            entries = app.list_children(Entry.of(root))

            self.assertEqual([app.display_name(entry) for entry in entries], ["big.bin"])
            self.assertEqual([cell.text for cell in app.entity_to_columns(entries[0])], ["big.bin", "2k"])
            self.assertEqual([header.title for header in app.header_spec()], ["Name", "Size"])

    def test_active_columns_can_be_replaced(self) -> None:
        app = FilesystemApplication()
        app.set_active_columns(["modes", "name"])
        self.assertEqual(app.active_columns(), ("modes", "name"))
        self.assertEqual(len(app.header_spec()), 2)

    def test_delete_recursive_is_per_call(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            folder = Path(tmp) / "tree"
            folder.mkdir()
            (folder / "leaf").write_text("", encoding="utf-8")
            calls = []
            app = FilesystemApplication()

            refused = app.delete([Entry.of(folder)])
            self.assertFalse(refused.ok)
            self.assertTrue(folder.exists())

            result = app.delete([Entry.of(folder)], calls.append, recursive=True)

            self.assertTrue(result.ok)
            self.assertEqual(calls, [result])
            self.assertFalse(folder.exists())

    def test_parent_of_returns_containing_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            app = FilesystemApplication()
            self.assertEqual(app.parent_of(Entry.of(Path(tmp) / "child")), Entry.of(tmp))


if __name__ == "__main__":
    unittest.main()
