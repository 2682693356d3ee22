"""Tests for file printing and the $EDITOR launcher."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirnav.editor import launch_editor
from dirnav.viewer import highlight_source, print_file, read_text, sanitize_terminal_text


class ViewerTests(unittest.TestCase):
    def test_sanitize_escapes_controls_but_keeps_whitespace(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\n"), "a\tb\n")
        self.assertEqual(sanitize_terminal_text("x\x1b[2Jy"), "x\\x1b[2Jy")

    def test_read_text_falls_back_to_latin_1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "legacy.txt"
            target.write_bytes(b"caf\xe9")
            self.assertEqual(read_text(target), "café")

    def test_highlight_python_source_emits_ansi(self) -> None:
        rendered = highlight_source("def f():\n    return 1\n", Path("module.py"))
        self.assertIn("\x1b[", rendered)

    def test_unknown_extension_falls_back_to_text_lexer(self) -> None:
        rendered = highlight_source("just text\n", Path("notes.unknownext"))
        self.assertIn("just text", rendered)

    def test_print_file_without_color_writes_sanitized_source(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "bell.txt"
            target.write_text("ring\x07\n", encoding="utf-8")
            stream = io.StringIO()
            print_file(target, no_color=True, stream=stream)
            self.assertEqual(stream.getvalue(), "ring\\x07\n")


class LaunchEditorTests(unittest.TestCase):
    def test_missing_editor_is_reported(self) -> None:
        with mock.patch.dict("os.environ", {"EDITOR": ""}):
            self.assertEqual(launch_editor(Path("x")), "Cannot edit: $EDITOR is not set.")

    def test_editor_command_is_split_and_run(self) -> None:
        with mock.patch.dict("os.environ", {"EDITOR": "vim -u NONE"}), mock.patch("dirnav.editor.subprocess.run") as run:
            self.assertIsNone(launch_editor(Path("/tmp/file.txt")))
        run.assert_called_once_with(["vim", "-u", "NONE", "/tmp/file.txt"], check=False)

    def test_launch_failure_is_reported(self) -> None:
        with mock.patch.dict("os.environ", {"EDITOR": "missing-editor"}), mock.patch(
            "dirnav.editor.subprocess.run", side_effect=FileNotFoundError("missing-editor")
        ):
            message = launch_editor(Path("x"))
        self.assertTrue(message.startswith("Failed to launch editor:"))


if __name__ == "__main__":
    unittest.main()
