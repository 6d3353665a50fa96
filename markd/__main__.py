"""Entry point for the markd CLI."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import MarkdConfig, load_config
from .errors import MarkdError
from .log import logger, setup_logging
from .output import Printer
from .persistence import BookmarkFile, migrate
from .prompt import confirm_update
from .resolver import resolve_path
from .shell import SNIPPETS, snippet
from .store import BookmarkStore

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markd",
        description="Bookmark directories for easy directory-hopping",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"markd {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )
    _add_mark_args(parser)

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    mark = sub.add_parser("mark", help="Bookmark a directory (the default)")
    _add_mark_args(mark)

    ls = sub.add_parser("list", help="List bookmarks")
    ls.add_argument("--filter", "-f", help="Only names containing TEXT", metavar="TEXT")
    ls.add_argument("--start", "-s", help="Only names starting with PREFIX", metavar="PREFIX")
    ls.add_argument("--end", "-e", help="Only names ending with SUFFIX", metavar="SUFFIX")
    ls.add_argument(
        "--by-path",
        "-p",
        action="store_true",
        help="Sort by path instead of name",
    )
    ls.add_argument(
        "--plain",
        action="store_true",
        help="Print 'name: path' lines instead of a table",
    )

    sub.add_parser("purge", help="Remove bookmarks whose directory no longer exists")

    get = sub.add_parser("get", help="Print the path of a bookmark")
    get.add_argument("name", nargs="?", default=None, help="Bookmark name (default: the clip)")
    get.add_argument(
        "--safe",
        "-s",
        action="store_true",
        help="Print the current directory instead of failing when NAME is unknown",
    )

    clip = sub.add_parser("clip", help="Save a directory to the quick-access slot")
    clip.add_argument("path", nargs="?", default=None, help="Directory (default: cwd)")

    remove = sub.add_parser("remove", help="Remove a bookmark")
    remove.add_argument("name", help="Bookmark name")

    shell = sub.add_parser("shell", help="Print shell integration code")
    shell.add_argument("dialect", choices=sorted(SNIPPETS), help="Shell to integrate with")

    sub.add_parser("migrate", help="Convert the legacy JSON bookmarks file to TOML")

    return parser


def _add_mark_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--path", "-p", help="Directory to bookmark (default: cwd)")
    parser.add_argument("--alias", "-a", help="Bookmark name (default: directory name)")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_mark(args, store: BookmarkStore, printer: Printer) -> None:
    path = resolve_path(args.path)
    name, outcome = store.mark(path, args.alias)
    printer.marked(name, outcome)


def _cmd_clip(args, store: BookmarkStore, printer: Printer) -> None:
    path = resolve_path(args.path)
    name, outcome = store.mark(path, quick=True)
    printer.marked(name, outcome)


def _cmd_list(args, store: BookmarkStore, printer: Printer) -> None:
    entries = store.list_bookmarks(
        contains=args.filter,
        start=args.start,
        end=args.end,
        sort_by="path" if args.by_path else "name",
    )
    stale = set() if args.plain else {name for name, _ in store.stale()}
    printer.bookmarks(entries, stale=stale, plain=args.plain)


def _cmd_purge(args, store: BookmarkStore, printer: Printer) -> None:
    printer.purged(store.purge())


def _cmd_get(args, store: BookmarkStore, printer: Printer) -> None:
    printer.path(store.get(args.name, failsafe=args.safe))


def _cmd_remove(args, store: BookmarkStore, printer: Printer) -> None:
    path = store.remove(args.name)
    printer.removed(args.name.lower(), path)


_STORE_COMMANDS = {
    None: _cmd_mark,
    "mark": _cmd_mark,
    "clip": _cmd_clip,
    "list": _cmd_list,
    "purge": _cmd_purge,
    "get": _cmd_get,
    "remove": _cmd_remove,
}


def run(args: argparse.Namespace, config: MarkdConfig, printer: Printer) -> None:
    """Execute the parsed command. Raises :class:`MarkdError` on failure."""
    if args.command == "shell":
        printer.text(snippet(args.dialect))
        return

    if args.command == "migrate":
        bookmarks = migrate(config.legacy_path, config.bookmarks_path)
        printer.migrated(len(bookmarks), config.legacy_path, config.bookmarks_path)
        return

    store = BookmarkStore.load(
        BookmarkFile(config.bookmarks_path),
        confirm=lambda name, old, new: confirm_update(name, old, new, printer.out),
    )
    _STORE_COMMANDS[args.command](args, store, printer)


def main(argv: list[str] | None = None) -> None:
    """Run markd."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = load_config()
    printer = Printer(color=config.color)

    try:
        run(args, config, printer)
    except KeyboardInterrupt:
        sys.exit(130)
    except MarkdError as exc:
        logger.debug("command failed", exc_info=True)
        printer.error(exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
