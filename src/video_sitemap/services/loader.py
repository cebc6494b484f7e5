"""Load video entries from YAML or JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Sequence

import yaml

from video_sitemap.models.video import GoogleVideo, VideoOptions, VideoSitemapError

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("thumbnail_location", "title", "description")


class VideoDocumentError(ValueError):
    """Raised when a video document cannot be read or describes an invalid entry."""


def _build_video(index: int, entry: Any) -> GoogleVideo:
    if not isinstance(entry, Mapping):
        raise VideoDocumentError(f"Entry {index}: expected a mapping, got {type(entry).__name__}")

    missing = [key for key in _REQUIRED_KEYS if key not in entry]
    if missing:
        raise VideoDocumentError(f"Entry {index}: missing required key(s) {', '.join(missing)}")

    try:
        video = GoogleVideo.create(
            entry["thumbnail_location"],
            entry["title"],
            entry["description"],
            VideoOptions.from_mapping(entry),
        )
        tags = entry.get("tags") or []
        prices = entry.get("prices") or []
        for key, value in (("tags", tags), ("prices", prices)):
            if not isinstance(value, list):
                raise VideoDocumentError(f"Entry {index}: '{key}' must be a list")
        for tag in tags:
            video.add_tag(tag)
        for price in prices:
            if not isinstance(price, Mapping):
                raise VideoDocumentError(f"Entry {index}: each price must be a mapping")
            video.add_price(
                price.get("amount"),
                price.get("currency"),
                price.get("type"),
                price.get("resolution"),
            )
    except VideoSitemapError as exc:
        raise VideoDocumentError(f"Entry {index}: {exc}") from exc
    return video


def parse_videos(data: Any) -> List[GoogleVideo]:
    """Build entries from decoded document data.

    A document is either a mapping with a ``videos`` list or a single video mapping.
    """

    if isinstance(data, Mapping) and "videos" in data:
        entries = data["videos"] or []
    elif isinstance(data, Mapping):
        entries = [data]
    else:
        raise VideoDocumentError("Document must be a mapping with a 'videos' list or a single video mapping")

    if not isinstance(entries, Sequence) or isinstance(entries, str):
        raise VideoDocumentError("'videos' must be a list")

    return [_build_video(index, entry) for index, entry in enumerate(entries)]


def load_videos(path: Path) -> List[GoogleVideo]:
    """Read ``path`` (YAML, or JSON by suffix) and build its video entries."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise VideoDocumentError(f"Cannot read {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise VideoDocumentError(f"Cannot parse {path}: {exc}") from exc

    videos = parse_videos(data)
    logger.debug("Loaded %d video entr%s from %s", len(videos), "y" if len(videos) == 1 else "ies", path)
    return videos


__all__ = ["VideoDocumentError", "load_videos", "parse_videos"]
