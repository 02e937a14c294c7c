# -*- coding: utf-8 -*-
"""
Tests for Strapi response normalization.
"""
from conftest import relation, strapi_entity

from genryu_content.normalizer import Shape, classify, normalize, normalize_response


class TestClassify:
    """Tests for shape classification."""

    def test_entity(self):
        assert classify(strapi_entity(1, title="A")) is Shape.ENTITY

    def test_relation(self):
        assert classify(relation(None)) is Shape.RELATION

    def test_flat_object_passes_through(self):
        assert classify({"id": 1, "title": "A"}) is Shape.PASSTHROUGH

    def test_scalars_pass_through(self):
        assert classify("text") is Shape.PASSTHROUGH
        assert classify([1, 2]) is Shape.PASSTHROUGH
        assert classify(None) is Shape.PASSTHROUGH


class TestNormalize:
    """Tests for normalize."""

    def test_flattens_attributes(self):
        """Should merge attributes next to the id."""
        result = normalize(strapi_entity(1, title="Tea", slug="tea"))

        assert result == {"id": 1, "title": "Tea", "slug": "tea"}

    def test_single_relation(self):
        """Should replace a single relation with the normalized target."""
        entity = strapi_entity(1, category=relation(strapi_entity(3, slug="food")))

        assert normalize(entity)["category"] == {"id": 3, "slug": "food"}

    def test_null_relation(self):
        """A relation wrapper with data=None should become None."""
        entity = strapi_entity(1, heroImage=relation(None))

        assert normalize(entity)["heroImage"] is None

    def test_list_relation_keeps_order(self):
        """Three sub-entities should give three flat objects in the same order."""
        tags = [strapi_entity(i, name=f"tag-{i}") for i in (7, 3, 5)]
        result = normalize(strapi_entity(1, tags=relation(tags)))

        assert result["tags"] == [
            {"id": 7, "name": "tag-7"},
            {"id": 3, "name": "tag-3"},
            {"id": 5, "name": "tag-5"},
        ]

    def test_nested_relations(self):
        """Should normalize relations of related entities recursively."""
        category = strapi_entity(3, slug="art", parent=relation(strapi_entity(2, slug="culture")))
        result = normalize(strapi_entity(1, category=relation(category)))

        assert result["category"]["parent"] == {"id": 2, "slug": "culture"}
        assert "data" not in result["category"]["parent"]

    def test_missing_attributes_treated_as_empty(self):
        assert normalize({"id": 4, "attributes": None}) == {"id": 4}

    def test_idempotent(self):
        """Normalizing an already-flat entity should return it unchanged."""
        flat = normalize(strapi_entity(1, title="Tea", category=relation(strapi_entity(3, slug="food"))))

        assert normalize(flat) == flat
        assert normalize(flat) is flat

    def test_component_passes_through(self):
        """Component / dynamic-zone blocks should be kept as-is."""
        block = {"__component": "shared.quote", "body": "Hello"}
        result = normalize(strapi_entity(1, blocks=[block]))

        assert result["blocks"] == [block]

    def test_non_entities_returned_unchanged(self):
        assert normalize(None) is None
        assert normalize(42) == 42
        assert normalize(["a", "b"]) == ["a", "b"]

    def test_does_not_mutate_input(self):
        entity = strapi_entity(1, category=relation(strapi_entity(3, slug="food")))
        normalize(entity)

        assert entity["attributes"]["category"] == relation(strapi_entity(3, slug="food"))


class TestNormalizeResponse:
    """Tests for normalize_response."""

    def test_list_in_list_out(self, cms_response):
        result = normalize_response(cms_response)

        assert isinstance(result["data"], list)
        assert result["data"][0]["slug"] == "tea-ceremony"
        assert result["data"][0]["category"]["slug"] == "culture"
        assert result["meta"] == cms_response["meta"]

    def test_single_in_single_out(self, sample_article):
        result = normalize_response({"data": sample_article, "meta": {}})

        assert isinstance(result["data"], dict)
        assert result["data"]["coverImage"] == {"id": 10, "url": "/uploads/tea.jpg"}

    def test_malformed_response(self):
        assert normalize_response("oops") == {"data": None, "meta": None}
        assert normalize_response({}) == {"data": None, "meta": None}
