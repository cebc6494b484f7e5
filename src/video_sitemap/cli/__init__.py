"""Command-line interface package for video sitemap tooling."""

from video_sitemap.cli.main import CLIApplication, create_app, main

__all__ = ["CLIApplication", "create_app", "main"]
