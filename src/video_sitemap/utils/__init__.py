"""Utility helpers shared across video sitemap modules."""

from video_sitemap.utils.xml import cdata, encode, format_attributes

__all__ = ["cdata", "encode", "format_attributes"]
