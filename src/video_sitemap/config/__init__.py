"""Configuration package for video sitemap tooling."""

from video_sitemap.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
