"""CLI presentation helpers for human and JSON output modes."""

from __future__ import annotations

import json
from typing import Any, Mapping

import click

from mplus_source.domain.models import ChapterPages, ChapterSeries, SeriesSearchResult
from mplus_source.errors import SourceError


class CliPresenter:
    """Render command outputs for human and machine-readable modes."""

    def __init__(self, *, json_output: bool, quiet: bool) -> None:
        """Store output-mode flags for rendering decisions."""
        self.json_output = json_output
        self.quiet = quiet

    @property
    def emits_human_output(self) -> bool:
        """Return whether human-readable output should be emitted."""
        return not self.json_output and not self.quiet

    def emit_intro(self, intro: str) -> None:
        """Emit a styled intro banner when human output is enabled."""
        if self.emits_human_output:
            click.echo(click.style(intro, fg="blue"))

    def emit_notice(self, message: str) -> None:
        """Emit one human-readable informational message."""
        if self.emits_human_output:
            click.echo(message)

    def emit_search_result(self, result: SeriesSearchResult) -> None:
        """Emit ranked search candidates."""
        if self.json_output:
            self.emit_json(result.as_dict())
            return
        if not self.emits_human_output:
            return
        if not len(result):
            click.echo("No titles found.")
            return
        for candidate in result:
            click.echo(
                f"{candidate.rank:>2}. {click.style(candidate.name, bold=True)} "
                f"[{candidate.identifier}]"
            )

    def emit_chapters(self, chapters: ChapterSeries) -> None:
        """Emit the chapter list of a series."""
        if self.json_output:
            self.emit_json(chapters.as_dict())
            return
        if not self.emits_human_output:
            return
        for chapter in chapters:
            published = chapter.published_at.date().isoformat() if chapter.published_at else "-"
            click.echo(f"{chapter.number:>6}  {published}  {chapter.title} [{chapter.identifier}]")
        click.echo(f"{len(chapters)} chapter(s)")

    def emit_pages(self, pages: ChapterPages) -> None:
        """Emit resolved page URLs and keys."""
        if self.json_output:
            self.emit_json(pages.as_dict())
            return
        if not self.emits_human_output:
            return
        for index, page in enumerate(pages):
            click.echo(f"{index:>3}. {page.high_url}")
            click.echo(f"     key={page.high_key or '-'}")
        click.echo(f"{len(pages)} page(s)")

    def emit_error(self, error: SourceError, exit_code: int) -> None:
        """Emit a failure in the current render mode."""
        if self.json_output:
            self.emit_json(
                {
                    "status": "error",
                    "error": type(error).__name__,
                    "message": str(error),
                    "exit_code": exit_code,
                }
            )
            return
        click.echo(click.style(f"{type(error).__name__}: {error}", fg="red"), err=True)

    def emit_json(self, payload: Mapping[str, Any]) -> None:
        """Emit one machine-readable JSON object to stdout."""
        click.echo(json.dumps(payload, sort_keys=True))
