"""Tests for catalog loading and the record/category helpers."""

import json

import pytest

from app.config.settings import settings
from app.models.content import (
    Category,
    ContentRecord,
    get_category_value,
    set_category_value,
)
from app.services.content_canon import (
    CATEGORY_DEFINITIONS,
    HISTORICAL_CONTENT,
    CatalogError,
    default_catalog,
    get_catalog,
    load_catalog,
    load_configured_catalog,
    parse_catalog,
)


CATALOG = {
    "categories": {
        "fileType": {"options": ["PDF", "Web"], "description": "Final delivery format"},
        "accessLevel": {"options": ["Public", "Premium"]},
    },
    "corpus": [
        {"title": "Budget template", "description": "Yearly budget", "fileType": "PDF", "tags": ["#Money"]},
        {"title": "Blog post", "description": "Weekly notes", "fileType": "Scroll", "accessLevel": "Public"},
    ],
}


class TestCategory:
    """Test category metadata and accessors."""

    def test_labels(self):
        assert Category.DISTRIBUTION_CHANNEL.label == "Distribution Channel"
        assert Category.FILE_TYPE.label == "File Type"

    def test_accessors_cover_every_category(self):
        record = ContentRecord()
        for category in Category:
            updated = set_category_value(record, category, "value")
            assert get_category_value(updated, category) == "value"
            assert get_category_value(record, category) == ""

    def test_record_dict_round_trip_uses_category_keys(self):
        data = HISTORICAL_CONTENT[1].to_dict()
        assert data["contentType"] == "QUICK TAKE"
        assert ContentRecord.from_dict(data) == HISTORICAL_CONTENT[1]


class TestCatalog:
    """Test embedded and file-based catalogs."""

    def test_default_catalog(self):
        catalog = default_catalog()
        assert list(catalog.definitions) == list(Category)
        assert catalog.definitions is CATEGORY_DEFINITIONS
        assert len(catalog.corpus) == 2
        assert catalog.is_valid_option(Category.CONTENT_TYPE, "LONG FORM")
        assert not catalog.is_valid_option(Category.CONTENT_TYPE, "")

    def test_load_catalog_from_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")

        catalog = load_catalog(path)
        assert list(catalog.definitions) == [Category.FILE_TYPE, Category.ACCESS_LEVEL]
        assert catalog.definitions[Category.FILE_TYPE].options == ("PDF", "Web")
        assert catalog.corpus[0].file_type == "PDF"
        assert catalog.corpus[0].tags == ["#Money"]
        # undeclared values are kept but are not valid options
        assert catalog.corpus[1].file_type == "Scroll"
        assert not catalog.is_valid_option(Category.FILE_TYPE, "Scroll")

    def test_load_configured_catalog_with_explicit_path(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")
        assert len(load_configured_catalog(str(path)).corpus) == 2

    def test_get_catalog_reads_catalog_path_setting(self, tmp_path, monkeypatch):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")
        monkeypatch.setattr(settings, "CATALOG_PATH", f"  {path}  ")
        get_catalog.cache_clear()
        try:
            assert settings.effective_catalog_path == str(path)
            catalog = get_catalog()
            assert list(catalog.definitions) == [Category.FILE_TYPE, Category.ACCESS_LEVEL]
            assert get_catalog() is catalog
        finally:
            get_catalog.cache_clear()

    def test_get_catalog_defaults_to_embedded(self, monkeypatch):
        monkeypatch.setattr(settings, "CATALOG_PATH", "")
        get_catalog.cache_clear()
        try:
            assert get_catalog().corpus == HISTORICAL_CONTENT
        finally:
            get_catalog.cache_clear()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_bytes(b'{"corpus": ["\xff\xfe"]}')
        with pytest.raises(CatalogError):
            load_catalog(path)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"categories": {"colour": {"options": ["Red"]}}},
            {"categories": {"fileType": {"description": "no options"}}},
            {"categories": {}, "corpus": {"title": "not a list"}},
            {"categories": {}, "corpus": ["not an object"]},
            {"categories": {}, "corpus": [{"title": "x", "tags": "#AINews"}]},
        ],
    )
    def test_malformed_catalogs(self, data):
        with pytest.raises(CatalogError):
            parse_catalog(data)
