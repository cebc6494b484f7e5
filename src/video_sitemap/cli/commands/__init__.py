"""Command registration utilities for the video sitemap CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from video_sitemap.cli.commands import render
from video_sitemap.config.settings import Settings


def configure_logging(console: Console, level: str) -> None:
    """Route library logging through a rich handler bound to ``console``."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def register_commands(app: typer.Typer, console: Console, settings: Settings) -> None:
    """Attach commands to the provided Typer application."""

    render.register(app, console, settings)

    @app.callback()
    def main_callback() -> None:
        """Render and check Google video sitemap entries."""

        configure_logging(console, settings.log_level)


__all__ = ["configure_logging", "register_commands"]
