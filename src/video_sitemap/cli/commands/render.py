"""CLI commands for rendering and auditing video sitemap documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table

from video_sitemap.config.settings import Settings
from video_sitemap.models.video import GoogleVideo
from video_sitemap.services.loader import VideoDocumentError, load_videos
from video_sitemap.services.renderer import render_video
from video_sitemap.utils.validation import AuditResult, check_video


class RenderExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1
    AUDIT_FAILED = 2
    OUTPUT_ERROR = 3


def register(app: typer.Typer, console: Console, settings: Settings) -> None:
    """Register the ``render`` and ``check`` commands."""

    def load_or_exit(path: Path) -> List[GoogleVideo]:
        try:
            return load_videos(path)
        except VideoDocumentError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=RenderExitCode.INVALID_INPUT) from exc

    @app.command("render")
    def render(
        path: Path = typer.Argument(..., dir_okay=False, help="YAML or JSON document describing videos"),
        strict: Optional[bool] = typer.Option(
            None, "--strict/--no-strict", help="Fail when documented vocabularies are not respected"
        ),
        output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write fragments to a file"),
    ) -> None:
        """Print one <video:video> fragment per entry."""

        videos = load_or_exit(path)
        if strict is None:
            strict = settings.strict

        if strict:
            results = [check_video(video) for video in videos]
            if not all(result.passed for result in results):
                console.print(_build_issue_table(videos, results))
                raise typer.Exit(code=RenderExitCode.AUDIT_FAILED)

        text = "\n".join(render_video(video) for video in videos)

        if output is None:
            typer.echo(text)
            return

        try:
            output.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            console.print(f"[red]Error:[/red] Cannot write {output}: {exc}")
            raise typer.Exit(code=RenderExitCode.OUTPUT_ERROR) from exc
        console.print(f"[green]Wrote {len(videos)} video fragment(s) to {output}[/green]")

    @app.command("check")
    def check(
        path: Path = typer.Argument(..., dir_okay=False, help="YAML or JSON document describing videos"),
        json_output: bool = typer.Option(False, "--json", help="Output audit results as JSON"),
    ) -> None:
        """Audit entries against Google's documented vocabularies."""

        videos = load_or_exit(path)
        results = [check_video(video) for video in videos]

        if json_output:
            payload = [
                {"index": index, "title": video.title, "passed": result.passed, "issues": result.issues}
                for index, (video, result) in enumerate(zip(videos, results))
            ]
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            console.print(_build_issue_table(videos, results))

        if not all(result.passed for result in results):
            raise typer.Exit(code=RenderExitCode.AUDIT_FAILED)


def _build_issue_table(videos: Sequence[GoogleVideo], results: Sequence[AuditResult]) -> Table:
    table = Table(title="Video Audit")
    table.add_column("#", justify="right")
    table.add_column("Title", overflow="fold")
    table.add_column("Status")
    table.add_column("Issues", overflow="fold")

    for index, (video, result) in enumerate(zip(videos, results)):
        table.add_row(
            str(index),
            video.title,
            "[green]ok[/green]" if result.passed else "[red]failed[/red]",
            "\n".join(result.issues) or "-",
        )
    return table


__all__ = ["RenderExitCode", "register"]
