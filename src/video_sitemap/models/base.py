"""Shared base model definitions for sitemap domain objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SitemapBaseModel(BaseModel):
    """Base model configured for sitemap-wide defaults."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


__all__ = ["SitemapBaseModel"]
