"""Shared fixtures for video sitemap tests."""

from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest
from rich.console import Console

from video_sitemap.models.video import GoogleVideo

THUMBNAIL = "http://x/t.jpg"
CONTENT = "http://x/v.mp4"


@pytest.fixture
def video() -> GoogleVideo:
    return GoogleVideo.create(THUMBNAIL, "T", "D", {"content_location": CONTENT})


@pytest.fixture
def published_at() -> datetime:
    return datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200)
