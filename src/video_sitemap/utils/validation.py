"""Strict audit of video entries against Google's documented vocabularies.

The entry model only rejects values Google's sitemap processing cannot accept at all. Several
fields are documented as enumerations but stored as given; this module reports those without
changing how entries are built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from video_sitemap.models.video import (
    NO,
    PLATFORM_MOBILE,
    PLATFORM_TV,
    PLATFORM_WEB,
    PRICE_RESOLUTION_HD,
    PRICE_RESOLUTION_SD,
    PRICE_TYPE_OWN,
    PRICE_TYPE_RENT,
    RELATIONSHIP_ALLOW,
    RELATIONSHIP_DENY,
    YES,
    GoogleVideo,
)

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")
_COUNTRY_PATTERN = re.compile(r"^[A-Z]{2}$")

_PLATFORMS = {PLATFORM_WEB, PLATFORM_MOBILE, PLATFORM_TV}
_RELATIONSHIPS = {RELATIONSHIP_ALLOW, RELATIONSHIP_DENY}
_PRICE_TYPES = {PRICE_TYPE_RENT, PRICE_TYPE_OWN}
_PRICE_RESOLUTIONS = {PRICE_RESOLUTION_HD, PRICE_RESOLUTION_SD}


@dataclass
class AuditResult:
    """Aggregated result of the strict audit."""

    passed: bool
    issues: list[str] = field(default_factory=list)


def audit_countries(countries: list[str], relationship: str) -> list[str]:
    """Check restriction entries are two-letter upper-case country codes."""

    return [
        f"Restriction ({relationship}) {i}: '{code}' is not an ISO 3166 country code"
        for i, code in enumerate(countries)
        if not _COUNTRY_PATTERN.fullmatch(code)
    ]


def audit_platforms(video: GoogleVideo) -> list[str]:
    issues: list[str] = []
    for platform in video.platforms:
        if platform not in _PLATFORMS:
            issues.append(f"Platform '{platform}' is not one of {', '.join(sorted(_PLATFORMS))}")
    if video.platform_relationship is not None and video.platform_relationship not in _RELATIONSHIPS:
        issues.append(f"Platform relationship '{video.platform_relationship}' must be allow or deny")
    return issues


def audit_prices(video: GoogleVideo) -> list[str]:
    """Check currency codes, price types and resolutions.

    Returns:
        List of issue strings, one per offending attribute.
    """
    issues: list[str] = []
    for i, price in enumerate(video.prices):
        if not _CURRENCY_PATTERN.fullmatch(price.currency):
            issues.append(f"Price {i}: currency '{price.currency}' is not an ISO 4217 code")
        if price.type and price.type not in _PRICE_TYPES:
            issues.append(f"Price {i}: type '{price.type}' must be rent or own")
        if price.resolution and price.resolution not in _PRICE_RESOLUTIONS:
            issues.append(f"Price {i}: resolution '{price.resolution}' must be HD or SD")
    return issues


def audit_video(video: GoogleVideo) -> list[str]:
    """Run every strict check on ``video``.

    Returns:
        List of issue strings (empty = all documented vocabularies respected).
    """
    issues: list[str] = []

    if video.live is not None and video.live not in {YES, NO}:
        issues.append(f"Live '{video.live}' must be yes or no")
    if video.view_count is not None and video.view_count < 0:
        issues.append(f"View count {video.view_count} must not be negative")

    issues.extend(audit_countries(video.restriction_allow, RELATIONSHIP_ALLOW))
    issues.extend(audit_countries(video.restriction_deny, RELATIONSHIP_DENY))
    issues.extend(audit_platforms(video))
    issues.extend(audit_prices(video))
    return issues


def check_video(video: GoogleVideo) -> AuditResult:
    """Audit ``video`` and wrap the issues in an :class:`AuditResult`."""

    issues = audit_video(video)
    return AuditResult(passed=len(issues) == 0, issues=issues)


__all__ = ["AuditResult", "audit_countries", "audit_platforms", "audit_prices", "audit_video", "check_video"]
