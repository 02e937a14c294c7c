# -*- coding: utf-8 -*-
"""
Strapi CMS client for articles and categories.

Every fetch is soft-fail: transport errors, non-2xx responses and undecodable
bodies are logged and turned into an empty result, so a page can render with
a missing section instead of breaking. Callers cannot tell "no content" from
"fetch failed".
"""
import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config import settings
from .i18n import resolve_locale
from .normalizer import normalize_response

logger = logging.getLogger(__name__)

# Relations always expanded on article queries
ARTICLE_POPULATE = ("coverImage", "heroImage", "category")


class CMSResponseError(Exception):
    """Non-success HTTP status from the CMS."""

    def __init__(self, status_code: int, path: str):
        super().__init__(f"API error: {status_code} on {path}")
        self.status_code = status_code
        self.path = path


def empty_result() -> dict[str, Any]:
    return {"data": [], "meta": {}}


def _as_list(data: Any) -> list:
    if isinstance(data, list):
        return data
    if data:
        return [data]
    return []


def _filter_key(field_path: str) -> str:
    """``category.slug`` -> ``filters[category][slug][$eq]``."""
    parts = "".join(f"[{part}]" for part in field_path.split("."))
    return f"filters{parts}[$eq]"


def _filter_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_article_params(
        locale: str,
        filters: Mapping[str, Any] | None = None,
        sort: str | None = "publishedAt:desc",
        page_size: int = 50,
) -> list[tuple[str, str]]:
    """
    Build the bracketed query parameters for an article query.

    Args:
        locale: Content locale (unknown values fall back to the default locale)
        filters: Field -> value equality filters; dotted keys address relations
        sort: ``field:asc|desc`` or None
        page_size: Maximum number of entries

    Returns:
        Ordered list of query parameter pairs
    """
    params: list[tuple[str, str]] = [("locale", resolve_locale(locale))]
    if sort:
        params.append(("sort", sort))
    params.append(("pagination[pageSize]", str(page_size)))

    for relation in ARTICLE_POPULATE:
        params.append((f"populate[{relation}]", "true"))

    for key, value in (filters or {}).items():
        if value is None:
            continue
        params.append((_filter_key(key), _filter_value(value)))

    return params


class StrapiClient:
    """
    Async read-only client for the Strapi REST API.

    Holds one ``httpx.AsyncClient``; pass ``client`` to inject a configured or
    mocked one.
    """

    def __init__(
            self,
            base_url: str | None = None,
            timeout: float | None = None,
            client: httpx.AsyncClient | None = None,
    ):
        self.base_url = (base_url or settings.STRAPI_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.STRAPI_TIMEOUT
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
            )
        return self._client

    async def aclose(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """GET a collection endpoint and return the normalized ``{data, meta}``."""
        response = await self.client.get(path, params=params)
        if not response.is_success:
            raise CMSResponseError(response.status_code, path)

        normalized = normalize_response(response.json())
        return {"data": _as_list(normalized["data"]), "meta": normalized["meta"] or {}}

    async def fetch_articles(
            self,
            locale: str = "en",
            filters: Mapping[str, Any] | None = None,
            sort: str = "publishedAt:desc",
            page_size: int | None = None,
    ) -> dict[str, Any]:
        """
        Fetch articles, newest first by default.

        Returns:
            ``{"data": [article, ...], "meta": {...}}``; empty on any failure.
        """
        params = build_article_params(
            locale, filters, sort, page_size or settings.DEFAULT_PAGE_SIZE
        )
        try:
            return await self._get("/api/articles", params)
        except (httpx.HTTPError, CMSResponseError, ValueError) as e:
            logger.error(
                "Failed to fetch articles",
                extra={"error": str(e), "locale": locale, "filters": dict(filters or {})},
            )
            return empty_result()

    async def fetch_article(self, slug: str, locale: str = "en") -> dict[str, Any] | None:
        """Fetch the first article whose slug matches, or None."""
        params = build_article_params(locale, {"slug": slug}, sort=None, page_size=1)
        try:
            result = await self._get("/api/articles", params)
        except (httpx.HTTPError, CMSResponseError, ValueError) as e:
            logger.error(
                "Failed to fetch article",
                extra={"error": str(e), "slug": slug, "locale": locale},
            )
            return None

        return result["data"][0] if result["data"] else None

    async def fetch_article_by_slug(self, slug: str, locale: str = "en") -> dict[str, Any] | None:
        return await self.fetch_article(slug, locale)

    async def fetch_editorial_picks(self, locale: str = "en") -> dict[str, Any]:
        return await self.fetch_articles(locale, {"editorialPick": True})

    async def fetch_featured_articles(self, locale: str = "en") -> dict[str, Any]:
        return await self.fetch_articles(locale, {"featured": True})

    async def fetch_deep_dive_articles(self, locale: str = "en") -> dict[str, Any]:
        return await self.fetch_articles(locale, {"deepDive": True})

    async def fetch_articles_by_category(self, category_slug: str, locale: str = "en") -> dict[str, Any]:
        return await self.fetch_articles(locale, {"category.slug": category_slug})

    async def fetch_categories(self, locale: str = "en") -> dict[str, Any]:
        """Fetch all categories in their configured display order."""
        params = [
            ("locale", resolve_locale(locale)),
            ("sort", "order:asc"),
            ("pagination[pageSize]", str(settings.CATEGORY_PAGE_SIZE)),
        ]
        try:
            return await self._get("/api/categories", params)
        except (httpx.HTTPError, CMSResponseError, ValueError) as e:
            logger.error(
                "Failed to fetch categories",
                extra={"error": str(e), "locale": locale},
            )
            return empty_result()

    async def _category_glimpse(self, category_slug: str, locale: str) -> dict[str, Any]:
        result = await self.fetch_articles(
            locale,
            {"category.slug": category_slug, "featured": True},
            "publishedAt:desc",
            settings.GLIMPSE_PAGE_SIZE,
        )

        # No featured article: fall back to the latest ones
        if not result["data"]:
            result = await self.fetch_articles(
                locale,
                {"category.slug": category_slug},
                "publishedAt:desc",
                settings.GLIMPSE_PAGE_SIZE,
            )

        return {
            "category": category_slug,
            "articles": result["data"][: settings.GLIMPSE_ARTICLE_LIMIT],
        }

    async def fetch_category_glimpses(
            self, locale: str = "en", categories: list[str] | None = None
    ) -> list[dict[str, Any]]:
        """
        Fetch a couple of articles per home page category.

        Featured articles are preferred; categories without one show their
        latest articles. Categories are fetched concurrently and returned in
        configured order.
        """
        categories = categories or settings.GLIMPSE_CATEGORIES
        glimpses = await asyncio.gather(
            *(self._category_glimpse(slug, locale) for slug in categories)
        )
        by_category = {glimpse["category"]: glimpse for glimpse in glimpses}
        return [by_category[slug] for slug in categories]


def get_strapi_image_url(
        path: str | None = None,
        fallback: str | None = None,
        base_url: str | None = None,
) -> str:
    """
    Resolve a Strapi media path to a usable URL.

    Absolute URLs are returned unchanged, relative paths are prefixed with the
    CMS base URL, and a missing path yields the placeholder image.
    """
    if not path:
        return fallback if fallback is not None else settings.PLACEHOLDER_IMAGE
    if path.startswith("http"):
        return path
    return f"{(base_url or settings.STRAPI_URL).rstrip('/')}{path}"


def _media_url(article: Mapping, field_name: str) -> str | None:
    """Media URL from a normalized, half-normalized or raw Strapi article."""
    media = article.get(field_name)
    if isinstance(media, Mapping):
        url = media.get("url") or (media.get("attributes") or {}).get("url")
        if url:
            return url

    attributes = article.get("attributes")
    if isinstance(attributes, Mapping):
        wrapper = attributes.get(field_name)
        if isinstance(wrapper, Mapping) and isinstance(wrapper.get("data"), Mapping):
            return (wrapper["data"].get("attributes") or {}).get("url")

    return None


def get_article_image_url(article: Mapping | None) -> str:
    """Cover image URL of an article, else its hero image, else the placeholder."""
    if not isinstance(article, Mapping):
        return get_strapi_image_url(None)
    return get_strapi_image_url(
        _media_url(article, "coverImage") or _media_url(article, "heroImage")
    )


# Global client instance
strapi_client = StrapiClient()
