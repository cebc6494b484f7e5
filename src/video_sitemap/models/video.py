"""Pydantic model describing one entry of the Google video sitemap extension."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from video_sitemap.models.base import SitemapBaseModel

logger = logging.getLogger(__name__)

GOOGLE_VIDEO_DOCS_URL = "http://support.google.com/webmasters/bin/answer.py?hl=en&answer=80472#4"

YES = "yes"
NO = "no"

RELATIONSHIP_ALLOW = "allow"
RELATIONSHIP_DENY = "deny"

PRICE_TYPE_RENT = "rent"
PRICE_TYPE_OWN = "own"
PRICE_RESOLUTION_HD = "HD"
PRICE_RESOLUTION_SD = "SD"

PLATFORM_WEB = "web"
PLATFORM_MOBILE = "mobile"
PLATFORM_TV = "tv"

MAX_DURATION_SECONDS = 28800
MAX_RATING = 5
MAX_CATEGORY_LENGTH = 256
TAG_ITEMS_LIMIT = 32

YesNo = Literal["yes", "no"]


class VideoSitemapError(Exception):
    """Base exception for video sitemap entries."""


class GoogleVideoError(VideoSitemapError, ValueError):
    """Raised when a field of a video entry violates Google's documented constraints."""

    def __init__(self, field: Optional[str], value: object, message: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"The parameter {value!r} must be a valid {field}. See {GOOGLE_VIDEO_DOCS_URL}")


class GoogleVideoTagError(VideoSitemapError, RuntimeError):
    """Raised when a tag is added to an entry that already holds the maximum number of tags."""

    def __init__(self, limit: int = TAG_ITEMS_LIMIT) -> None:
        self.limit = limit
        super().__init__(f"The tags limit of {limit} items is exceeded.")


def _as_video_error(exc: ValidationError) -> GoogleVideoError:
    """Collapse a pydantic ``ValidationError`` into the first offending field."""

    first = exc.errors()[0]
    original = (first.get("ctx") or {}).get("error")
    if isinstance(original, GoogleVideoError):
        return original

    field = ".".join(str(part) for part in first.get("loc", ())) or None
    value = first.get("input")
    return GoogleVideoError(
        field,
        value,
        f"The parameter {value!r} must be a valid {field} ({first['msg']}). See {GOOGLE_VIDEO_DOCS_URL}",
    )


class VideoPrice(SitemapBaseModel):
    """Single ``<video:price>`` entry; currency, type and resolution are stored as given."""

    amount: float
    currency: str
    type: Optional[str] = None
    resolution: Optional[str] = None


class VideoOptions(BaseModel):
    """Named optional parameters accepted when creating a :class:`GoogleVideo`.

    Values are carried untouched; every constraint is enforced by the entry itself so that an
    option supplied here is validated exactly like one applied later through a setter. Keys that
    are not listed are ignored.
    """

    content_location: Any = None
    player_location: Any = None
    player_location_allow_embed: Any = None
    player_location_autoplay: Any = None
    duration: Any = None
    expiration_date: Any = None
    rating: Any = None
    view_count: Any = None
    publication_date: Any = None
    family_friendly: Any = None
    category: Any = None
    restriction_allow: Any = None
    restriction_deny: Any = None
    gallery_location: Any = None
    gallery_location_title: Any = None
    requires_subscription: Any = None
    uploader: Any = None
    uploader_info: Any = None
    platforms: Any = None
    platform_relationship: Any = None
    live: Any = None

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_mapping(cls, parameters: Mapping[str, Any]) -> "VideoOptions":
        """Build options from a plain mapping, dropping unrecognised keys."""

        return cls.model_validate({key: value for key, value in parameters.items() if isinstance(key, str)})

    def supplied(self) -> dict[str, Any]:
        """Return only the options that were explicitly provided."""

        return self.model_dump(exclude_unset=True)


class GoogleVideo(SitemapBaseModel):
    """One ``<video:video>`` record attached to a sitemap URL.

    Build instances with :meth:`create`, then refine them with the fluent ``set_*`` and ``add_*``
    methods. Every mutation is validated; a rejected value leaves the entry as it was.
    """

    thumbnail_location: str
    title: str
    description: str

    content_location: Optional[str] = None
    player_location: Optional[str] = None
    player_location_allow_embed: Optional[YesNo] = None
    player_location_autoplay: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0, le=MAX_DURATION_SECONDS)
    expiration_date: Optional[AwareDatetime] = None
    rating: Optional[float] = Field(default=None, ge=0, le=MAX_RATING)
    view_count: Optional[int] = None
    publication_date: Optional[AwareDatetime] = None
    family_friendly: Optional[YesNo] = None
    category: Optional[str] = Field(default=None, max_length=MAX_CATEGORY_LENGTH)
    restriction_allow: List[str] = Field(default_factory=list)
    restriction_deny: List[str] = Field(default_factory=list)
    gallery_location: Optional[str] = None
    gallery_location_title: Optional[str] = None
    requires_subscription: Optional[YesNo] = None
    uploader: Optional[str] = None
    uploader_info: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    platform_relationship: Optional[str] = None
    live: Optional[str] = None
    prices: List[VideoPrice] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list, max_length=TAG_ITEMS_LIMIT)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _as_video_error(exc) from None
        # Locations are only required at construction; later setters may clear them.
        if not self.content_location and not self.player_location:
            raise GoogleVideoError(
                "content_location",
                None,
                "The parameter content_location or player_location is required",
            )

    @classmethod
    def create(
        cls,
        thumbnail_location: str,
        title: str,
        description: str,
        parameters: Union[Mapping[str, Any], VideoOptions, None] = None,
    ) -> "GoogleVideo":
        """Create an entry from its required fields and optional named parameters.

        Raises
        ------
        GoogleVideoError
            If a parameter is invalid, neither ``content_location`` nor ``player_location`` is
            given, or ``platforms`` is set without ``platform_relationship``.
        """

        if isinstance(parameters, VideoOptions):
            options = parameters
        else:
            options = VideoOptions.from_mapping(parameters or {})

        return cls(
            **options.supplied(),
            thumbnail_location=thumbnail_location,
            title=title,
            description=description,
        )

    @field_validator("family_friendly", mode="before")
    @classmethod
    def _default_family_friendly(cls, value: object) -> object:
        return YES if value is None or value == "" else value

    @field_validator("restriction_allow", "restriction_deny", "platforms", mode="before")
    @classmethod
    def _listify(cls, value: object) -> object:
        if isinstance(value, (set, frozenset, tuple)):
            return list(value)
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> "GoogleVideo":
        if self.platforms and not self.platform_relationship:
            raise GoogleVideoError(
                "platform_relationship",
                self.platform_relationship,
                "The parameter platform_relationship is required when platforms is set",
            )
        return self

    # ------------------------------------------------------------------ #
    # Mutators                                                           #
    # ------------------------------------------------------------------ #
    def _assign(self, field: str, value: object) -> "GoogleVideo":
        previous = self.__dict__.get(field)
        try:
            setattr(self, field, value)
        except ValidationError as exc:
            # Entry-level checks run after the new value is stored.
            self.__dict__[field] = previous
            raise _as_video_error(exc) from None
        return self

    def set_thumbnail_location(self, location: str) -> "GoogleVideo":
        return self._assign("thumbnail_location", location)

    def set_title(self, title: str) -> "GoogleVideo":
        return self._assign("title", title)

    def set_description(self, description: str) -> "GoogleVideo":
        return self._assign("description", description)

    def set_content_location(self, location: Optional[str]) -> "GoogleVideo":
        return self._assign("content_location", location)

    def set_player_location(self, location: Optional[str]) -> "GoogleVideo":
        return self._assign("player_location", location)

    def set_player_location_allow_embed(self, embed: str) -> "GoogleVideo":
        """Set whether Google may embed the player; must be ``yes`` or ``no``."""

        return self._assign("player_location_allow_embed", embed)

    def set_player_location_autoplay(self, autoplay: Optional[str]) -> "GoogleVideo":
        return self._assign("player_location_autoplay", autoplay)

    def set_duration(self, duration: int) -> "GoogleVideo":
        """Set the duration in seconds, between 0 and 28800 inclusive."""

        return self._assign("duration", duration)

    def set_expiration_date(self, expiration_date: Any) -> "GoogleVideo":
        return self._assign("expiration_date", expiration_date)

    def set_rating(self, rating: float) -> "GoogleVideo":
        """Set the rating, between 0 and 5 inclusive."""

        return self._assign("rating", rating)

    def set_view_count(self, view_count: Optional[int]) -> "GoogleVideo":
        return self._assign("view_count", view_count)

    def set_publication_date(self, publication_date: Any) -> "GoogleVideo":
        return self._assign("publication_date", publication_date)

    def set_family_friendly(self, family_friendly: Optional[str] = None) -> "GoogleVideo":
        """Set the family friendly flag; omitting the value means ``yes``."""

        return self._assign("family_friendly", family_friendly)

    def set_category(self, category: Optional[str]) -> "GoogleVideo":
        """Set the category, at most 256 characters long."""

        return self._assign("category", category)

    def set_restriction_allow(self, countries: Iterable[str]) -> "GoogleVideo":
        return self._assign("restriction_allow", countries)

    def set_restriction_deny(self, countries: Iterable[str]) -> "GoogleVideo":
        return self._assign("restriction_deny", countries)

    def set_gallery_location(self, location: Optional[str]) -> "GoogleVideo":
        return self._assign("gallery_location", location)

    def set_gallery_location_title(self, title: Optional[str]) -> "GoogleVideo":
        return self._assign("gallery_location_title", title)

    def set_requires_subscription(self, requires_subscription: str) -> "GoogleVideo":
        """Set the subscription flag; must be ``yes`` or ``no``."""

        return self._assign("requires_subscription", requires_subscription)

    def set_uploader(self, uploader: Optional[str]) -> "GoogleVideo":
        return self._assign("uploader", uploader)

    def set_uploader_info(self, uploader_info: Optional[str]) -> "GoogleVideo":
        return self._assign("uploader_info", uploader_info)

    def set_platforms(self, platforms: Iterable[str]) -> "GoogleVideo":
        """Replace the platform list; ``platform_relationship`` must already be set."""

        return self._assign("platforms", platforms)

    def set_platform_relationship(self, relationship: Optional[str]) -> "GoogleVideo":
        return self._assign("platform_relationship", relationship)

    def set_live(self, live: Optional[str]) -> "GoogleVideo":
        return self._assign("live", live)

    def add_price(
        self,
        amount: float,
        currency: str,
        price_type: Optional[str] = None,
        resolution: Optional[str] = None,
    ) -> "GoogleVideo":
        """Append a price; currency, type and resolution are not checked."""

        try:
            price = VideoPrice(amount=amount, currency=currency, type=price_type, resolution=resolution)
        except ValidationError as exc:
            raise _as_video_error(exc) from None
        return self._assign("prices", [*self.prices, price])

    def add_tag(self, tag: str) -> "GoogleVideo":
        """Append a tag.

        Raises
        ------
        GoogleVideoTagError
            If the entry already holds ``TAG_ITEMS_LIMIT`` tags.
        """

        if len(self.tags) >= TAG_ITEMS_LIMIT:
            logger.debug("Rejected tag %r: entry %r already has %d tags", tag, self.title, TAG_ITEMS_LIMIT)
            raise GoogleVideoTagError(TAG_ITEMS_LIMIT)
        return self._assign("tags", [*self.tags, tag])

    def to_xml(self) -> str:
        """Render this entry as a ``<video:video>`` fragment."""

        from video_sitemap.services.renderer import render_video

        return render_video(self)


__all__ = [
    "GOOGLE_VIDEO_DOCS_URL",
    "GoogleVideo",
    "GoogleVideoError",
    "GoogleVideoTagError",
    "MAX_CATEGORY_LENGTH",
    "MAX_DURATION_SECONDS",
    "MAX_RATING",
    "NO",
    "PLATFORM_MOBILE",
    "PLATFORM_TV",
    "PLATFORM_WEB",
    "PRICE_RESOLUTION_HD",
    "PRICE_RESOLUTION_SD",
    "PRICE_TYPE_OWN",
    "PRICE_TYPE_RENT",
    "RELATIONSHIP_ALLOW",
    "RELATIONSHIP_DENY",
    "TAG_ITEMS_LIMIT",
    "VideoOptions",
    "VideoPrice",
    "VideoSitemapError",
    "YES",
]
