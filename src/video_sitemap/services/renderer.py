"""Serialise :class:`GoogleVideo` entries into ``<video:video>`` XML fragments.

The element order follows Google's video sitemap schema and is relied upon by consumers
comparing output byte for byte:

- required fields: thumbnail, title, description
- simple optional fields, then the two dates
- player location, restrictions, gallery, tags, prices, uploader, platform
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional

from video_sitemap.models.video import GoogleVideo, VideoPrice
from video_sitemap.utils.xml import cdata, encode, format_attributes

logger = logging.getLogger(__name__)


def _is_present(value: object) -> bool:
    """Return ``False`` for values that suppress an optional element: ``None``, empty, or zero."""

    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    if isinstance(value, (int, float)):
        return value != 0
    return True


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_date(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def _element(name: str, text: str, attributes: Optional[Dict[str, object]] = None) -> str:
    return f"<video:{name}{format_attributes(attributes or {})}>{text}</video:{name}>"


def _price_element(price: VideoPrice) -> str:
    attributes: Dict[str, object] = {}
    for name in ("currency", "type", "resolution"):
        value = getattr(price, name)
        if _is_present(value):
            attributes[name] = value
    return _element("price", _format_number(price.amount), attributes)


def render_video(video: GoogleVideo) -> str:
    """Return the ``<video:video>`` fragment for ``video``.

    Rendering is pure: the entry is only read, and rendering the same entry twice yields
    identical output.
    """

    parts: List[str] = ["<video:video>"]

    parts.append(_element("thumbnail_loc", encode(video.thumbnail_location)))
    parts.append(_element("title", cdata(video.title)))
    parts.append(_element("description", cdata(video.description)))

    if _is_present(video.category):
        parts.append(_element("category", cdata(video.category)))
    if _is_present(video.content_location):
        parts.append(_element("content_loc", encode(video.content_location)))
    if _is_present(video.duration):
        parts.append(_element("duration", str(video.duration)))
    if _is_present(video.rating):
        parts.append(_element("rating", _format_number(video.rating)))
    if _is_present(video.view_count):
        parts.append(_element("view_count", str(video.view_count)))
    if _is_present(video.family_friendly):
        parts.append(_element("family_friendly", video.family_friendly))
    if _is_present(video.requires_subscription):
        parts.append(_element("requires_subscription", video.requires_subscription))
    if _is_present(video.live):
        parts.append(_element("live", video.live))

    if video.expiration_date is not None:
        parts.append(_element("expiration_date", _format_date(video.expiration_date)))
    if video.publication_date is not None:
        parts.append(_element("publication_date", _format_date(video.publication_date)))

    if _is_present(video.player_location):
        attributes: Dict[str, object] = {}
        if _is_present(video.player_location_allow_embed):
            attributes["allow_embed"] = encode(video.player_location_allow_embed)
        if _is_present(video.player_location_autoplay):
            attributes["autoplay"] = encode(video.player_location_autoplay)
        parts.append(_element("player_loc", encode(video.player_location), attributes))

    if video.restriction_allow:
        parts.append(_element("restriction", " ".join(video.restriction_allow), {"relationship": "allow"}))
    if video.restriction_deny:
        parts.append(_element("restriction", " ".join(video.restriction_deny), {"relationship": "deny"}))

    if _is_present(video.gallery_location):
        attributes = {}
        if _is_present(video.gallery_location_title):
            attributes["title"] = encode(video.gallery_location_title)
        parts.append(_element("gallery_loc", encode(video.gallery_location), attributes))

    parts.extend(_element("tag", cdata(tag)) for tag in video.tags)
    parts.extend(_price_element(price) for price in video.prices)

    if _is_present(video.uploader):
        # Uploader text and info are written as supplied.
        attributes = {}
        if _is_present(video.uploader_info):
            attributes["info"] = video.uploader_info
        parts.append(_element("uploader", str(video.uploader), attributes))

    if video.platforms:
        parts.append(
            _element("platform", " ".join(video.platforms), {"relationship": video.platform_relationship})
        )

    parts.append("</video:video>")
    fragment = "".join(parts)
    logger.debug("Rendered video entry %r (%d characters)", video.title, len(fragment))
    return fragment


__all__ = ["render_video"]
