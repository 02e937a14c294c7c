# -*- coding: utf-8 -*-
"""
FastAPI read-only API over the CMS content layer.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from . import __version__
from .config import settings
from .i18n import format_date, resolve_locale, t, ui_strings
from .logging_config import setup_logging
from .markdown_parser import render_article
from .middleware import RequestContextMiddleware
from .models import (
    ArticleDetailResponse,
    CategoryGlimpseResponse,
    ContentListResponse,
    HeadingResponse,
    HealthResponse,
    UIStringsResponse,
)
from .strapi_client import get_article_image_url, strapi_client

# Setup structured logging
setup_logging()
logger = logging.getLogger(__name__)


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifecycle management."""
    logger.info(
        "Starting content service",
        extra={"version": __version__, "cms_url": settings.STRAPI_URL},
    )

    yield

    logger.info("Shutting down content service")
    await strapi_client.aclose()


app = FastAPI(
    title="Genryu Content Service",
    description="Normalized Strapi content, rendered Markdown and UI strings for the Genryu Japan site",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
)

# Middleware stack (order matters: last added = first executed)
app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service health endpoint."""
    return HealthResponse(status="healthy", version=__version__, cms_url=settings.STRAPI_URL)


@app.get("/{locale}/articles", response_model=ContentListResponse)
async def list_articles(
        locale: str,
        category: str | None = None,
        featured: bool | None = None,
        editorial_pick: bool | None = None,
        deep_dive: bool | None = None,
        sort: str = "publishedAt:desc",
        page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
) -> ContentListResponse:
    """
    List articles for a locale.

    - **category**: category slug
    - **featured** / **editorial_pick** / **deep_dive**: flag filters
    - **sort**: ``field:asc`` or ``field:desc``
    """
    locale = resolve_locale(locale)
    filters = {
        "category.slug": category,
        "featured": featured,
        "editorialPick": editorial_pick,
        "deepDive": deep_dive,
    }
    result = await strapi_client.fetch_articles(locale, filters, sort, page_size)
    return ContentListResponse(locale=locale, data=result["data"], meta=result["meta"])


@app.get("/{locale}/articles/{slug}", response_model=ArticleDetailResponse)
async def get_article(locale: str, slug: str) -> ArticleDetailResponse:
    """Fetch one article and render its Markdown body."""
    locale = resolve_locale(locale)
    article = await strapi_client.fetch_article(slug, locale)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")

    rendered = render_article(article.get("content") or "", locale)
    published_at = article.get("publishedAt")

    logger.info(
        "Article rendered",
        extra={"slug": slug, "locale": locale, "headings": len(rendered.headings)},
    )

    return ArticleDetailResponse(
        locale=locale,
        article=article,
        html=rendered.html,
        headings=[HeadingResponse(level=h.level, text=h.text, id=h.id) for h in rendered.headings],
        reading_time=rendered.reading_time,
        reading_time_label=f"{rendered.reading_time} {t(locale, 'article.readTime')}",
        excerpt=article.get("excerpt") or rendered.excerpt,
        image_url=get_article_image_url(article),
        published_on=format_date(published_at, locale) if published_at else None,
    )


@app.get("/{locale}/categories", response_model=ContentListResponse)
async def list_categories(locale: str) -> ContentListResponse:
    """List categories in display order."""
    locale = resolve_locale(locale)
    result = await strapi_client.fetch_categories(locale)
    return ContentListResponse(locale=locale, data=result["data"], meta=result["meta"])


@app.get("/{locale}/glimpses", response_model=list[CategoryGlimpseResponse])
async def list_category_glimpses(locale: str) -> list[CategoryGlimpseResponse]:
    """Home page category glimpses: up to two articles per category."""
    glimpses = await strapi_client.fetch_category_glimpses(resolve_locale(locale))
    return [CategoryGlimpseResponse(**glimpse) for glimpse in glimpses]


@app.get("/{locale}/ui", response_model=UIStringsResponse)
async def get_ui_strings(locale: str) -> UIStringsResponse:
    """UI string table for a locale."""
    locale = resolve_locale(locale)
    return UIStringsResponse(locale=locale, strings=ui_strings(locale))
