"""Domain models for video sitemap entries."""

from video_sitemap.models.base import SitemapBaseModel
from video_sitemap.models.video import (
    GoogleVideo,
    GoogleVideoError,
    GoogleVideoTagError,
    VideoOptions,
    VideoPrice,
    VideoSitemapError,
)

__all__ = [
    "GoogleVideo",
    "GoogleVideoError",
    "GoogleVideoTagError",
    "SitemapBaseModel",
    "VideoOptions",
    "VideoPrice",
    "VideoSitemapError",
]
