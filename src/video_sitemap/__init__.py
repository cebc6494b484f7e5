"""Google video sitemap entries: validation and XML rendering."""

from video_sitemap.models.video import (
    GoogleVideo,
    GoogleVideoError,
    GoogleVideoTagError,
    VideoOptions,
    VideoPrice,
    VideoSitemapError,
)
from video_sitemap.services.renderer import render_video

__all__ = [
    "GoogleVideo",
    "GoogleVideoError",
    "GoogleVideoTagError",
    "VideoOptions",
    "VideoPrice",
    "VideoSitemapError",
    "render_video",
]
