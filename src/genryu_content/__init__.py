# -*- coding: utf-8 -*-
"""
Genryu Content - Strapi content layer, Markdown rendering and i18n for Genryu Japan.
"""
__version__ = "1.0.0"

from .markdown_parser import (  # noqa: E402
    calculate_reading_time,
    extract_headings,
    generate_excerpt,
    render_markdown,
)
from .normalizer import normalize, normalize_response  # noqa: E402
from .strapi_client import StrapiClient, get_strapi_image_url  # noqa: E402

__all__ = [
    "StrapiClient",
    "calculate_reading_time",
    "extract_headings",
    "generate_excerpt",
    "get_strapi_image_url",
    "normalize",
    "normalize_response",
    "render_markdown",
    "__version__",
]
