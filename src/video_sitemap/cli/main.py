"""CLI entry point and application wiring."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from video_sitemap.cli.commands import register_commands
from video_sitemap.cli.commands.render import RenderExitCode
from video_sitemap.config.settings import Settings, get_settings


class CLIApplication:
    """Central orchestrator for the video sitemap Typer application."""

    def __init__(self, console: Optional[Console] = None, settings: Optional[Settings] = None) -> None:
        self.console = console or Console(stderr=True)
        self.settings = settings or get_settings()
        self._app = typer.Typer(add_completion=False, rich_markup_mode="rich")
        register_commands(self._app, self.console, self.settings)

    @property
    def app(self) -> typer.Typer:
        """Return the underlying Typer application instance."""

        return self._app

    def run(self, *, prog_name: Optional[str] = None, args: Optional[list[str]] = None) -> None:
        """Invoke the Typer application with optional overrides."""

        self._app(prog_name=prog_name, args=args)


def create_app(console: Optional[Console] = None, settings: Optional[Settings] = None) -> typer.Typer:
    """Factory helper that returns the configured Typer application."""

    return CLIApplication(console=console, settings=settings).app


def main() -> None:
    """Console script entry point for the installed ``video-sitemap`` command."""

    console = Console(stderr=True)
    try:
        settings = get_settings()
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(exc))}")
        raise SystemExit(RenderExitCode.INVALID_INPUT) from exc

    CLIApplication(console=console, settings=settings).run(prog_name="video-sitemap")


__all__ = ["CLIApplication", "create_app", "main"]
