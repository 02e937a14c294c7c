# -*- coding: utf-8 -*-
"""
Locale helpers: supported locales, UI string lookup and date formatting.
"""
import re
from datetime import date, datetime
from urllib.parse import urlparse

from .translations import DATE_FORMATS, MONTHS, UI

LOCALES: tuple[str, ...] = ("en", "ja", "es", "fr", "th", "id", "zh", "de")
DEFAULT_LOCALE = "en"

# Offset between the Gregorian and Thai Buddhist Era calendars
BUDDHIST_ERA_OFFSET = 543

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_valid_locale(locale: str | None) -> bool:
    return locale in LOCALES


def resolve_locale(locale: str | None) -> str:
    """Return ``locale`` if supported, else the default locale."""
    return locale if is_valid_locale(locale) else DEFAULT_LOCALE


def t(locale: str, key: str) -> str:
    """
    Look up a UI string.

    Falls back to the default locale's table, then to the key itself.
    """
    table = UI[resolve_locale(locale)]
    return table.get(key) or UI[DEFAULT_LOCALE].get(key, key)


def ui_strings(locale: str) -> dict[str, str]:
    """Full UI table for a locale, with default-locale values for missing keys."""
    return {**UI[DEFAULT_LOCALE], **UI[resolve_locale(locale)]}


def _parse_date(value: str | date | datetime) -> date | None:
    if isinstance(value, (date, datetime)):
        return value
    try:
        # A bare YYYY-MM-DD is a calendar date, never shifted through UTC
        if _DATE_ONLY.match(value):
            return date.fromisoformat(value)
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: str | date | datetime, locale: str) -> str:
    """
    Long-form, locale-specific date (``January 5, 2024``, ``2024年1月5日``).

    Unparseable strings are returned unchanged.
    """
    parsed = _parse_date(value)
    if parsed is None:
        return str(value)

    locale = resolve_locale(locale)
    year = parsed.year + BUDDHIST_ERA_OFFSET if locale == "th" else parsed.year
    month_names = MONTHS.get(locale)

    return DATE_FORMATS[locale].format(
        year=year,
        month=parsed.month,
        day=parsed.day,
        month_name=month_names[parsed.month - 1] if month_names else "",
    )


def get_locale_from_url(url: str) -> str:
    """Locale from the first path segment of a URL, else the default locale."""
    segments = [segment for segment in urlparse(url).path.split("/") if segment]
    return resolve_locale(segments[0] if segments else None)
