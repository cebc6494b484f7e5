"""Service layer for rendering and loading video sitemap entries."""

from video_sitemap.services.loader import VideoDocumentError, load_videos, parse_videos
from video_sitemap.services.renderer import render_video

__all__ = ["VideoDocumentError", "load_videos", "parse_videos", "render_video"]
