# -*- coding: utf-8 -*-
"""
Strapi response normalization.

Strapi wraps every record as ``{"id": ..., "attributes": {...}}`` and every
relation or media field as ``{"data": <record> | [<record>, ...] | None}``.
This module flattens that graph into plain nested dicts:

    {"id": 1, "attributes": {"title": "A", "category": {"data": {"id": 2, "attributes": {"slug": "food"}}}}}
    -> {"id": 1, "title": "A", "category": {"id": 2, "slug": "food"}}

Anything that is not a wrapped record (already-flat dicts, components,
dynamic-zone blocks, scalars) is returned as-is, so ``normalize`` is safe to
apply to values of unknown shape and is idempotent.
"""
from collections.abc import Mapping
from enum import Enum
from typing import Any


class Shape(Enum):
    """Discriminant for values found in a Strapi payload."""

    ENTITY = "entity"
    RELATION = "relation"
    PASSTHROUGH = "passthrough"


def classify(value: Any) -> Shape:
    """Tell wrapped records and relation envelopes apart from everything else."""
    if isinstance(value, Mapping):
        if "id" in value and "attributes" in value:
            return Shape.ENTITY
        if "data" in value:
            return Shape.RELATION
    return Shape.PASSTHROUGH


def _unwrap_relation(wrapper: Mapping) -> Any:
    payload = wrapper["data"]
    if payload is None:
        return None
    if isinstance(payload, list):
        return [normalize(item) for item in payload]
    return normalize(payload)


def normalize(value: Any) -> Any:
    """
    Flatten a Strapi record and, recursively, the relations it carries.

    Args:
        value: A Strapi entity, an already-normalized dict, or any other value.

    Returns:
        ``{"id": ..., **attributes}`` with every relation wrapper replaced by
        ``None``, a normalized record, or a list of normalized records.
        Non-entity values are returned unchanged.
    """
    if value is None:
        return None

    if classify(value) is not Shape.ENTITY:
        return value

    attributes = value.get("attributes")
    if not isinstance(attributes, Mapping):
        attributes = {}

    normalized = {"id": value["id"], **attributes}

    for key, field_value in normalized.items():
        if classify(field_value) is Shape.RELATION:
            normalized[key] = _unwrap_relation(field_value)

    return normalized


def normalize_response(response: Any) -> dict[str, Any]:
    """
    Normalize a Strapi ``{"data", "meta"}`` response.

    A list payload stays a list and a single payload stays single.
    """
    if not isinstance(response, Mapping):
        return {"data": None, "meta": None}

    data = response.get("data")
    if isinstance(data, list):
        normalized = [normalize(item) for item in data]
    else:
        normalized = normalize(data)

    return {"data": normalized, "meta": response.get("meta")}
