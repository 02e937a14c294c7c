# -*- coding: utf-8 -*-
"""
Pydantic data models for the API.
"""
from typing import Any

from pydantic import BaseModel, Field


class HeadingResponse(BaseModel):
    """Table of contents entry."""

    level: int = Field(..., ge=1, le=3)
    text: str
    id: str


class ContentListResponse(BaseModel):
    """Normalized CMS entries. Empty when nothing matched or the CMS was unreachable."""

    locale: str
    data: list[dict[str, Any]] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)


class ArticleDetailResponse(BaseModel):
    """One article with its rendered body and derived metadata."""

    locale: str
    article: dict[str, Any]
    html: str = ""
    headings: list[HeadingResponse] = Field(default_factory=list)
    reading_time: int = 0
    reading_time_label: str = ""
    excerpt: str = ""
    image_url: str
    published_on: str | None = None


class CategoryGlimpseResponse(BaseModel):
    """A category with up to two of its articles."""

    category: str
    articles: list[dict[str, Any]] = Field(default_factory=list)


class UIStringsResponse(BaseModel):
    """UI string table for a locale."""

    locale: str
    strings: dict[str, str]


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str
    cms_url: str
