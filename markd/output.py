"""Terminal presentation for markd commands."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .store import MarkOutcome


def cause_chain(exc: BaseException) -> list[str]:
    """Messages of every ``__cause__`` below *exc*, outermost first."""
    causes: list[str] = []
    seen = {id(exc)}
    cause = exc.__cause__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        causes.append(str(cause) or type(cause).__name__)
        cause = cause.__cause__
    return causes


class Printer:
    """Writes command results to stdout and failures to stderr."""

    def __init__(
        self,
        color: bool = True,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self.out = out or Console(no_color=not color, highlight=False, soft_wrap=True)
        self.err = err or Console(
            stderr=True, no_color=not color, highlight=False, soft_wrap=True
        )

    # -- status lines ---------------------------------------------------------

    def marked(self, name: str, outcome: MarkOutcome) -> None:
        if outcome is MarkOutcome.CANCELLED:
            label = "[bold yellow]info:[/bold yellow]"
        else:
            label = "[bold green]Success:[/bold green]"
        self.out.print(f"{label} [magenta]{escape(name)}[/magenta] {outcome.value}")

    def removed(self, name: str, path: str) -> None:
        self.out.print(
            f"[bold green]Success:[/bold green] [red]{escape(name)}[/red] "
            f"removed from bookmarks ({escape(path)})"
        )

    def migrated(self, count: int, source: object, dest: object) -> None:
        self.out.print(
            f"[bold green]Success:[/bold green] migrated {count} bookmark(s) "
            f"from {escape(str(source))} to {escape(str(dest))}"
        )

    def info(self, message: str) -> None:
        self.out.print(f"[bold yellow]info:[/bold yellow] {escape(message)}")

    def error(self, exc: BaseException) -> None:
        self.err.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        causes = cause_chain(exc)
        if causes:
            self.err.print("\nCaused by:")
            for i, message in enumerate(causes):
                self.err.print(f"    {i}: {escape(message)}")

    # -- listings -------------------------------------------------------------

    def bookmarks(
        self,
        entries: list[tuple[str, str]],
        stale: set[str] | None = None,
        plain: bool = False,
    ) -> None:
        """Print *entries* as a table, or ``name: path`` lines with *plain*."""
        stale = stale or set()
        if plain:
            for name, path in entries:
                self.out.print(f"{name}: {path}", markup=False, emoji=False)
            return

        if not entries:
            self.info("no bookmarks found")
            return

        table = Table(box=box.ROUNDED, title="Bookmarked dirs", title_style="bold green")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="magenta")
        table.add_column("Path")
        for i, (name, path) in enumerate(entries):
            style = "dim strike" if name in stale else None
            table.add_row(str(i), escape(name), escape(path), style=style)
        self.out.print(table)

    def purged(self, entries: list[tuple[str, str]]) -> None:
        if not entries:
            self.info("nothing to purge")
            return
        self.out.print("[bold magenta]Purged entries:[/bold magenta]")
        for i, (name, path) in enumerate(entries, 1):
            self.out.print(f"[{i}] {name}: {path}", markup=False, emoji=False)

    def path(self, path: str) -> None:
        """Print *path* alone with no trailing newline, for ``$(...)``."""
        self.out.print(path, end="", markup=False, emoji=False)

    def text(self, text: str) -> None:
        self.out.print(text, markup=False, emoji=False)
