"""Tests for presentation helpers and shell snippets."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from markd.errors import PersistenceError
from markd.output import Printer, cause_chain
from markd.shell import SNIPPETS, snippet
from markd.store import MarkOutcome


def _printer() -> tuple[Printer, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    printer = Printer(
        out=Console(file=out, no_color=True, width=200),
        err=Console(file=err, no_color=True, width=200),
    )
    return printer, out, err


class TestCauseChain:
    def test_walks_explicit_causes(self):
        try:
            try:
                try:
                    raise OSError("disk full")
                except OSError as exc:
                    raise PersistenceError("failed to write x") from exc
            except PersistenceError as exc:
                raise PersistenceError("could not save") from exc
        except PersistenceError as exc:
            assert cause_chain(exc) == ["failed to write x", "disk full"]

    def test_no_cause(self):
        assert cause_chain(ValueError("x")) == []


class TestPrinter:
    def test_error_lists_causes(self):
        printer, _, err = _printer()
        exc = PersistenceError("failed to parse /b.toml")
        exc.__cause__ = ValueError("bad key")
        printer.error(exc)
        lines = err.getvalue().splitlines()
        assert lines[0] == "error: failed to parse /b.toml"
        assert "Caused by:" in lines
        assert lines[-1] == "    0: bad key"

    def test_marked_outcomes(self):
        printer, out, _ = _printer()
        printer.marked("proj", MarkOutcome.CREATED)
        printer.marked("proj", MarkOutcome.CANCELLED)
        assert out.getvalue().splitlines() == [
            "Success: proj bookmarked",
            "info: proj bookmark operation cancelled",
        ]

    def test_markup_in_names_is_literal(self):
        printer, out, _ = _printer()
        printer.marked("[bold]x", MarkOutcome.CREATED)
        assert "[bold]x" in out.getvalue()

    def test_path_has_no_newline(self):
        printer, out, _ = _printer()
        printer.path("/home/u/[proj]")
        assert out.getvalue() == "/home/u/[proj]"

    def test_table_marks_stale_rows(self):
        printer, out, _ = _printer()
        printer.bookmarks([("a", "/a"), ("b", "/b")], stale={"b"})
        text = out.getvalue()
        assert "/a" in text and "/b" in text

    def test_purged_numbering(self):
        printer, out, _ = _printer()
        printer.purged([("a", "/a"), ("b", "/b")])
        assert out.getvalue().splitlines()[1:] == ["[1] a: /a", "[2] b: /b"]


class TestShellSnippets:
    @pytest.mark.parametrize("dialect", sorted(SNIPPETS))
    def test_every_snippet_calls_get_safe(self, dialect):
        assert "markd get --safe" in snippet(dialect)

    def test_unknown_dialect(self):
        with pytest.raises(ValueError, match="unsupported shell"):
            snippet("tcsh")
