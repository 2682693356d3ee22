"""Command-line front door for dirnav.

Parses options, loads persisted settings, and lists, opens, or deletes entries
through ``FilesystemApplication``. Listings print as a plain-text table.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from .application import FilesystemApplication
from .attributes import ID_FORMATS, SIZE_FLAVORS
from .columns import COLUMN_IDS
from .editor import launch_editor
from .entries import SORT_ORDERS, Entry, parent_of
from .errors import DirnavError
from .mutation import DeleteResult
from .render import render_table
from .session import NavigationSession
from .settings import Settings, load_settings, save_settings
from .theme import PLAIN_THEME, ListingTheme, available_theme_names, resolve_theme
from .viewer import print_file, sanitize_terminal_text

logger = logging.getLogger(__name__)


def _column_list(value: str) -> tuple[str, ...]:
    """argparse type for comma-separated column ids."""
    columns = tuple(part.strip() for part in value.split(",") if part.strip())
    if not columns:
        raise argparse.ArgumentTypeError("at least one column is required")
    unknown = [column for column in columns if column not in COLUMN_IDS]
    if unknown:
        raise argparse.ArgumentTypeError(
            f"unknown column(s): {', '.join(unknown)} (choose from {', '.join(COLUMN_IDS)})"
        )
    return columns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List directories with formatted file attributes.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("--columns", type=_column_list, default=None, help=f"Comma-separated columns ({', '.join(COLUMN_IDS)}).")
    parser.add_argument("--size-flavor", choices=SIZE_FLAVORS, default=None, help="Human-readable size units.")
    parser.add_argument("--time-format", default=None, help="strftime pattern for timestamp columns.")
    parser.add_argument("--id-format", choices=ID_FORMATS, default=None, help="Show owner/group as ids or names.")
    parser.add_argument("--sort", choices=SORT_ORDERS, default=None, help="Listing order.")
    parser.add_argument("--hide-hidden", action="store_true", help="Skip dot-files.")
    parser.add_argument("--theme", default=None, help=f"Table theme ({', '.join(available_theme_names())}).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--open", metavar="PATH", help="Open PATH: list directories, edit files with $EDITOR.")
    parser.add_argument("--print", dest="print_files", action="store_true", help="With --open, print files instead of editing.")
    parser.add_argument("--delete", metavar="PATH", nargs="+", help="Delete the given paths.")
    parser.add_argument("--recursive", action="store_true", help="With --delete, remove non-empty directories.")
    parser.add_argument("--save-settings", action="store_true", help="Persist the given options as defaults.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    return base.updated(
        active_columns=args.columns,
        size_flavor=args.size_flavor,
        time_format=args.time_format,
        id_format=args.id_format,
        sort_order=args.sort,
        show_hidden=False if args.hide_hidden else None,
        theme=args.theme,
    )


def print_listing(session: NavigationSession, theme: ListingTheme) -> None:
    rows = [row for _entry, row in session.rows()]
    for line in render_table(session.header(), rows, theme):
        sys.stdout.write(line + "\n")


def report_deletions(result: DeleteResult, theme: ListingTheme = PLAIN_THEME) -> None:
    """Print one line per deleted entry and one error line per failure."""
    for entry in result.deleted:
        sys.stdout.write(f"deleted {entry}\n")
    for failure in result.failed:
        line = sanitize_terminal_text(f"dirnav: {failure}")
        if theme.error:
            line = f"{theme.error}{line}{theme.reset}"
        sys.stderr.write(line + "\n")


def _edit_file(path: Path) -> None:
    error = launch_editor(path)
    if error is not None:
        raise SystemExit(error)


def _print_file(no_color: bool) -> Callable[[Path], None]:
    def handler(path: Path) -> None:
        print_file(path, no_color=no_color)

    return handler


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list, open, or delete.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed.
    """
    parser = build_parser()
    args = parser.parse_args()
    if args.print_files and args.open is None:
        parser.error("--print requires --open")
    if args.recursive and not args.delete:
        parser.error("--recursive requires --delete")
    configure_logging(args.verbose)

    settings = settings_from_args(args, load_settings())
    if args.save_settings:
        save_settings(settings)
    application = FilesystemApplication(settings)
    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(settings.theme, no_color=no_color)

    try:
        if args.delete:
            error_theme = resolve_theme(settings.theme, no_color=args.no_color or not sys.stderr.isatty())
            result = application.delete(
                [Entry.of(path) for path in args.delete],
                lambda done: report_deletions(done, error_theme),
                recursive=args.recursive,
            )
            if not result.ok:
                raise SystemExit(1)
            return

        if args.open is not None:
            target = Entry.of(args.open)
            file_handler = _print_file(no_color) if args.print_files else _edit_file
            session = NavigationSession(application, parent_of(target), open_file=file_handler)
            session.open(target)
            if session.directory == target:
                print_listing(session, theme)
            return

        if default_path is None:
            default_path = Path.cwd()
        session = NavigationSession(application, args.path or default_path)
        print_listing(session, theme)
    except DirnavError as exc:
        logger.debug("command failed", exc_info=True)
        raise SystemExit(f"dirnav: {exc}") from exc


if __name__ == "__main__":
    main()
