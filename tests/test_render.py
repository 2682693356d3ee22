"""Tests for the plain-text table renderer and theme lookup."""

from __future__ import annotations

import unittest

from dirnav.columns import Cell, HeaderSpec
from dirnav.render import render_table
from dirnav.theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, resolve_theme


class RenderTableTests(unittest.TestCase):
    def test_pads_to_header_width_and_right_aligns(self) -> None:
        header = (HeaderSpec("Size", 5, True, True), HeaderSpec("Name", 8))
        rows = [(Cell("10B", "dirnav-size"), Cell("a.txt", "dirnav-name"))]

        lines = render_table(header, rows)

        self.assertEqual(lines[0], " Size Name")
        self.assertEqual(lines[1], "----- --------")
        self.assertEqual(lines[2], "  10B a.txt")

    def test_zero_width_columns_size_to_content(self) -> None:
        header = (HeaderSpec("x", 0), HeaderSpec("Name", 4))
        rows = [(Cell("longer", None), Cell("n", None))]

        lines = render_table(header, rows)

        self.assertEqual(lines[0], "x      Name")
        self.assertEqual(lines[2], "longer n")

    def test_fixed_width_column_widens_for_long_cells(self) -> None:
        header = (HeaderSpec("Name", 6), HeaderSpec("Size", 5, True, True))
        rows = [
            (Cell("short", None), Cell("1K", None)),
            (Cell("a-much-longer-name", None), Cell("20K", None)),
        ]

        lines = render_table(header, rows)

        self.assertEqual(lines[0], "Name                Size")
        self.assertEqual(lines[2], "short                 1K")
        self.assertEqual(lines[3], "a-much-longer-name   20K")
        self.assertEqual(len({len(line) for line in lines}), 1)

    def test_widths_measure_sanitized_text(self) -> None:
        header = (HeaderSpec("Name", 4), HeaderSpec("Ext", 3))
        rows = [(Cell("x\x07y", None), Cell("md", None))]

        lines = render_table(header, rows)

        self.assertEqual(lines[2], "x\\x07y md")
        self.assertEqual(lines[2].index("md"), lines[0].index("Ext"))

    def test_empty_listing_renders_header_only(self) -> None:
        lines = render_table((HeaderSpec("Name", 4),), [])
        self.assertEqual(lines, ["Name", "----"])

    def test_control_bytes_in_names_are_escaped(self) -> None:
        lines = render_table((HeaderSpec("Name", 4),), [(Cell("bad\x07name", None),)])
        self.assertEqual(lines[2], "bad\\x07name")

    def test_theme_colors_cells_by_style(self) -> None:
        header = (HeaderSpec("Name", 4),)
        lines = render_table(header, [(Cell("a", "dirnav-name"),)], DEFAULT_THEME)
        self.assertEqual(lines[2], f"{DEFAULT_THEME.name_cell}a{DEFAULT_THEME.reset}")


class ThemeTests(unittest.TestCase):
    def test_resolve_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(resolve_theme("OCEAN").name, "ocean")
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_color_for_unknown_style_is_empty(self) -> None:
        self.assertEqual(DEFAULT_THEME.color_for(None), "")
        self.assertEqual(DEFAULT_THEME.color_for("dirnav-unknown"), "")
        self.assertEqual(DEFAULT_THEME.color_for("dirnav-modification-time"), DEFAULT_THEME.time)


if __name__ == "__main__":
    unittest.main()
