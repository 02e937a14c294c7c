# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from genryu_content.api import app
from genryu_content.strapi_client import StrapiClient

CMS_URL = "http://cms.test"


def strapi_entity(entity_id, **attributes):
    """Build a Strapi-shaped ``{id, attributes}`` record."""
    return {"id": entity_id, "attributes": attributes}


def relation(payload):
    """Wrap a payload the way Strapi wraps relation and media fields."""
    return {"data": payload}


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sample_article():
    """Raw Strapi article with media and category relations."""
    return strapi_entity(
        1,
        title="Tea Ceremony",
        slug="tea-ceremony",
        content="# Tea\n\n## Origins\n\nSome text.\n\n## Origins",
        publishedAt="2024-01-05T09:00:00.000Z",
        featured=True,
        coverImage=relation(strapi_entity(10, url="/uploads/tea.jpg")),
        heroImage=relation(None),
        category=relation(strapi_entity(3, name="Culture", slug="culture")),
    )


@pytest.fixture
def cms_response(sample_article):
    """Strapi list response carrying one article."""
    return {
        "data": [sample_article],
        "meta": {"pagination": {"page": 1, "pageSize": 50, "total": 1}},
    }


@pytest.fixture
def make_strapi_client():
    """Build a StrapiClient whose requests are answered by ``handler``."""

    def factory(handler):
        http_client = httpx.AsyncClient(base_url=CMS_URL, transport=httpx.MockTransport(handler))
        return StrapiClient(base_url=CMS_URL, client=http_client)

    return factory
