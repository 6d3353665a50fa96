"""Interactive confirmation for overwriting an existing bookmark."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_AFFIRMATIVE = ("y", "yes")


def confirm_update(
    name: str, old_path: str, new_path: str, console: Console | None = None
) -> bool:
    """Ask on stdout whether *name* should be repointed; read the answer from stdin.

    Only ``y`` and ``yes`` (exactly, after trimming) confirm.
    """
    console = console or Console()
    console.print(
        f"[bold yellow]info:[/bold yellow] [magenta]{escape(name)}[/magenta] "
        f"already exists in bookmarks ({escape(old_path)}).\n"
        f"Would you like to update it to {escape(new_path)}?\n"
        "Type y/yes to update or anything else to cancel"
    )
    try:
        answer = console.input()
    except EOFError:
        return False
    return answer.strip() in _AFFIRMATIVE
