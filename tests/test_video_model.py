"""Tests for GoogleVideo construction, setters and invariants."""

from __future__ import annotations

from datetime import datetime

import pytest

from video_sitemap.models.video import (
    TAG_ITEMS_LIMIT,
    GoogleVideo,
    GoogleVideoError,
    GoogleVideoTagError,
    VideoOptions,
    VideoPrice,
)


class TestCreate:
    def test_content_location_only(self):
        v = GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": "http://x/v.mp4"})
        assert v.thumbnail_location == "http://x/t.jpg"
        assert v.title == "T"
        assert v.description == "D"
        assert v.content_location == "http://x/v.mp4"
        assert v.player_location is None

    def test_player_location_only(self):
        v = GoogleVideo.create("http://x/t.jpg", "T", "D", {"player_location": "http://x/p"})
        assert v.player_location == "http://x/p"

    def test_both_locations(self):
        v = GoogleVideo.create(
            "http://x/t.jpg", "T", "D", {"content_location": "http://x/v.mp4", "player_location": "http://x/p"}
        )
        assert v.content_location and v.player_location

    def test_missing_locations_fails(self):
        with pytest.raises(GoogleVideoError) as exc_info:
            GoogleVideo.create("http://x/t.jpg", "T", "D")
        assert exc_info.value.field == "content_location"

    def test_empty_location_counts_as_missing(self):
        with pytest.raises(GoogleVideoError):
            GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": ""})

    def test_unknown_keys_ignored(self):
        v = GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": "http://x/v", "colour": "red"})
        assert not hasattr(v, "colour")

    def test_options_object(self):
        options = VideoOptions(content_location="http://x/v", duration=60, rating=4.5)
        v = GoogleVideo.create("http://x/t.jpg", "T", "D", options)
        assert v.duration == 60
        assert v.rating == 4.5

    def test_options_validated_like_setters(self):
        with pytest.raises(GoogleVideoError) as exc_info:
            GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": "http://x/v", "duration": 28801})
        assert exc_info.value.field == "duration"
        assert exc_info.value.value == 28801

    def test_required_fields_must_be_strings(self):
        with pytest.raises(GoogleVideoError) as exc_info:
            GoogleVideo.create("http://x/t.jpg", None, "D", {"content_location": "http://x/v"})
        assert exc_info.value.field == "title"

    def test_platforms_without_relationship_fails(self):
        with pytest.raises(GoogleVideoError) as exc_info:
            GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": "http://x/v", "platforms": ["web"]})
        assert exc_info.value.field == "platform_relationship"

    def test_platforms_with_relationship(self):
        v = GoogleVideo.create(
            "http://x/t.jpg",
            "T",
            "D",
            {"content_location": "http://x/v", "platforms": ["web"], "platform_relationship": "allow"},
        )
        assert v.platforms == ["web"]
        assert v.platform_relationship == "allow"

    def test_explicit_family_friendly_none_defaults_to_yes(self):
        v = GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": "http://x/v", "family_friendly": None})
        assert v.family_friendly == "yes"

    def test_family_friendly_absent_stays_unset(self, video):
        assert video.family_friendly is None

    def test_restrictions_accept_tuples(self):
        v = GoogleVideo.create(
            "http://x/t.jpg", "T", "D", {"content_location": "http://x/v", "restriction_allow": ("FR", "DE")}
        )
        assert v.restriction_allow == ["FR", "DE"]


class TestDurationAndRating:
    @pytest.mark.parametrize("duration", [0, 1, 120, 28800])
    def test_valid_duration(self, video, duration):
        assert video.set_duration(duration).duration == duration

    @pytest.mark.parametrize("duration", [-1, 28801])
    def test_invalid_duration(self, video, duration):
        with pytest.raises(GoogleVideoError) as exc_info:
            video.set_duration(duration)
        assert exc_info.value.field == "duration"

    @pytest.mark.parametrize("rating", [0, 2.5, 5])
    def test_valid_rating(self, video, rating):
        assert video.set_rating(rating).rating == rating

    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    def test_invalid_rating(self, video, rating):
        with pytest.raises(GoogleVideoError):
            video.set_rating(rating)

    def test_failed_setter_keeps_previous_value(self, video):
        video.set_duration(100)
        with pytest.raises(GoogleVideoError):
            video.set_duration(99999)
        assert video.duration == 100

    def test_entry_usable_after_failure(self, video):
        with pytest.raises(GoogleVideoError):
            video.set_rating(7)
        video.set_category("Sports")
        assert video.category == "Sports"
        assert video.rating is None


class TestEnumeratedFields:
    @pytest.mark.parametrize("value", ["yes", "no"])
    def test_allow_embed(self, video, value):
        assert video.set_player_location_allow_embed(value).player_location_allow_embed == value

    def test_allow_embed_rejects_other_values(self, video):
        with pytest.raises(GoogleVideoError) as exc_info:
            video.set_player_location_allow_embed("maybe")
        assert exc_info.value.field == "player_location_allow_embed"
        assert exc_info.value.value == "maybe"

    def test_family_friendly_default(self, video):
        assert video.set_family_friendly().family_friendly == "yes"

    def test_family_friendly_no(self, video):
        assert video.set_family_friendly("no").family_friendly == "no"

    def test_family_friendly_rejects_other_values(self, video):
        with pytest.raises(GoogleVideoError):
            video.set_family_friendly("sometimes")

    def test_requires_subscription(self, video):
        assert video.set_requires_subscription("no").requires_subscription == "no"
        with pytest.raises(GoogleVideoError):
            video.set_requires_subscription("perhaps")

    def test_live_is_not_validated(self, video):
        assert video.set_live("whenever").live == "whenever"

    def test_platform_members_are_not_validated(self, video):
        video.set_platform_relationship("deny").set_platforms(["web", "smart-fridge"])
        assert video.platforms == ["web", "smart-fridge"]


class TestCategory:
    def test_max_length_accepted(self, video):
        assert len(video.set_category("c" * 256).category) == 256

    def test_too_long_rejected(self, video):
        with pytest.raises(GoogleVideoError) as exc_info:
            video.set_category("c" * 257)
        assert exc_info.value.field == "category"


class TestDates:
    def test_aware_datetime(self, video, published_at):
        assert video.set_publication_date(published_at).publication_date == published_at

    def test_iso_string_with_offset(self, video):
        video.set_expiration_date("2024-01-15T10:00:00+02:00")
        assert video.expiration_date.utcoffset().total_seconds() == 7200

    def test_naive_datetime_rejected(self, video):
        with pytest.raises(GoogleVideoError) as exc_info:
            video.set_expiration_date(datetime(2024, 1, 15, 10, 0))
        assert exc_info.value.field == "expiration_date"


class TestPlatformInvariant:
    def test_platforms_require_relationship(self, video):
        with pytest.raises(GoogleVideoError):
            video.set_platforms(["web"])
        assert video.platforms == []

    def test_relationship_cannot_be_cleared_while_platforms_set(self, video):
        video.set_platform_relationship("allow").set_platforms(["tv"])
        with pytest.raises(GoogleVideoError):
            video.set_platform_relationship(None)
        assert video.platform_relationship == "allow"

    def test_platforms_replaced(self, video):
        video.set_platform_relationship("allow").set_platforms(["web"]).set_platforms(["mobile", "tv"])
        assert video.platforms == ["mobile", "tv"]

    def test_platforms_bare_string_rejected(self, video):
        video.set_platform_relationship("allow")
        with pytest.raises(GoogleVideoError) as exc_info:
            video.set_platforms("web")
        assert exc_info.value.field == "platforms"
        assert video.platforms == []


class TestRestrictions:
    def test_allow_and_deny_coexist(self, video):
        video.set_restriction_allow(["FR"]).set_restriction_deny(["US", "CA"])
        assert video.restriction_allow == ["FR"]
        assert video.restriction_deny == ["US", "CA"]

    def test_country_codes_not_checked(self, video):
        assert video.set_restriction_allow(["france"]).restriction_allow == ["france"]

    @pytest.mark.parametrize("setter", ["set_restriction_allow", "set_restriction_deny"])
    def test_bare_string_rejected(self, video, setter):
        with pytest.raises(GoogleVideoError) as exc_info:
            getattr(video, setter)("US")
        assert exc_info.value.field in {"restriction_allow", "restriction_deny"}
        assert video.restriction_allow == []
        assert video.restriction_deny == []

    def test_bare_string_rejected_through_options(self):
        with pytest.raises(GoogleVideoError):
            GoogleVideo.create("http://x/t.jpg", "T", "D", {"content_location": "http://x/v", "restriction_deny": "US"})

    def test_sets_accepted(self, video):
        assert video.set_restriction_deny({"US"}).restriction_deny == ["US"]


class TestPricesAndTags:
    def test_add_price(self, video):
        video.add_price(10.0, "USD", "rent", "HD").add_price(5.0, "EUR")
        assert video.prices == [
            VideoPrice(amount=10.0, currency="USD", type="rent", resolution="HD"),
            VideoPrice(amount=5.0, currency="EUR"),
        ]

    def test_price_attributes_not_checked(self, video):
        video.add_price(3, "euros", "lease", "4K")
        assert video.prices[0].type == "lease"

    def test_tags_in_insertion_order(self, video):
        for i in range(TAG_ITEMS_LIMIT):
            video.add_tag(f"tag-{i}")
        assert video.tags == [f"tag-{i}" for i in range(TAG_ITEMS_LIMIT)]

    def test_tag_limit(self, video):
        for i in range(TAG_ITEMS_LIMIT):
            video.add_tag(f"tag-{i}")
        with pytest.raises(GoogleVideoTagError) as exc_info:
            video.add_tag("one too many")
        assert exc_info.value.limit == 32
        assert not isinstance(exc_info.value, GoogleVideoError)
        assert len(video.tags) == TAG_ITEMS_LIMIT


class TestFluentSetters:
    def test_setters_return_entry(self, video):
        result = (
            video.set_title("New")
            .set_description("Desc")
            .set_view_count(12)
            .set_gallery_location("http://x/g")
            .set_gallery_location_title("Gallery")
            .set_uploader("Ann")
            .set_uploader_info("http://x/ann")
            .set_player_location_autoplay("ap=1")
            .set_thumbnail_location("http://x/t2.jpg")
        )
        assert result is video
        assert video.title == "New"
        assert video.uploader_info == "http://x/ann"

    def test_locations_checked_at_construction_only(self):
        v = GoogleVideo.create("http://x/t.jpg", "T", "D", {"player_location": "http://x/p"})
        v.set_player_location(None)
        assert v.player_location is None
        assert v.content_location is None

