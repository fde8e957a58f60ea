"""
Reference data for the categorizer: category definitions and historical corpus.

The embedded catalog below is used unless CATALOG_PATH points at a JSON file of
the shape::

    {
      "categories": {"contentType": {"options": [...], "description": "..."}, ...},
      "corpus": [{"title": "...", "description": "...", "contentType": "...", "tags": [...]}, ...]
    }

Both are read-only once loaded.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from app.config.logger import app_logger
from app.config.settings import settings
from app.models.content import (
    Category,
    CategoryDefinition,
    ContentRecord,
    get_category_value,
)


class CatalogError(ValueError):
    """Raised when a catalog file is missing or malformed."""


CATEGORY_DEFINITIONS: Dict[Category, CategoryDefinition] = {
    Category.DISTRIBUTION_CHANNEL: CategoryDefinition(
        options=("Social Media", "Newsletter", "Website", "Premium Content"),
        description="Where the content will be primarily distributed",
    ),
    Category.ACCESS_LEVEL: CategoryDefinition(
        options=("Public", "Members Only", "Premium"),
        description="Who can access this content",
    ),
    Category.CONTENT_TYPE: CategoryDefinition(
        options=("LONG FORM", "MEDIUM FORM", "QUICK TAKE", "VISUAL/INTERACTIVE"),
        description="The primary format of the content",
    ),
    Category.WRITTEN_FORMAT: CategoryDefinition(
        options=("Feature Article", "Standard Article", "Brief Article", "Technical Framework"),
        description="Specific written content structure",
    ),
    Category.FILE_TYPE: CategoryDefinition(
        options=("PDF", "Excel", "Web"),
        description="Final delivery format",
    ),
    Category.VISUAL_FORMAT: CategoryDefinition(
        options=("Image Analysis", "Quote Card", "Carousel", "Infographic", "Video", "Reel/Story"),
        description="Visual elements included",
    ),
    Category.INTERACTIVE_FORMAT: CategoryDefinition(
        options=("Poll", "Thread", "Template", "Framework", "Dashboard", "Checklist"),
        description="Interactive elements included",
    ),
}


HISTORICAL_CONTENT: Tuple[ContentRecord, ...] = (
    ContentRecord(
        title="Advanced AI Implementation Guide",
        description="Comprehensive guide for implementing AI systems with focus on human-centered design",
        distribution_channel="Premium Content",
        access_level="Premium",
        content_type="LONG FORM",
        written_format="Technical Framework",
        file_type="PDF",
        visual_format="Infographic",
        interactive_format="Framework",
        tags=["#HumanFirstDesign", "#AIFoundations", "#ResponsibleScale"],
    ),
    ContentRecord(
        title="Quick Social Media Updates on AI News",
        description="Daily updates on AI developments for social sharing",
        distribution_channel="Social Media",
        access_level="Public",
        content_type="QUICK TAKE",
        written_format="Brief Article",
        file_type="Web",
        visual_format="Quote Card",
        interactive_format="Thread",
        tags=["#AINews", "#AIBreakthroughs"],
    ),
)


@dataclass(frozen=True)
class ContentCatalog:
    """Category definitions plus the historical corpus they classify."""

    definitions: Mapping[Category, CategoryDefinition]
    corpus: Tuple[ContentRecord, ...]

    def is_valid_option(self, category: Category, value: str) -> bool:
        definition = self.definitions.get(category)
        return definition is not None and value in definition.options


def _parse_definitions(raw: Any) -> Dict[Category, CategoryDefinition]:
    if not isinstance(raw, dict):
        raise CatalogError("'categories' must be an object keyed by category")

    definitions: Dict[Category, CategoryDefinition] = {}
    for key, entry in raw.items():
        try:
            category = Category(key)
        except ValueError as exc:
            raise CatalogError(f"Unknown category '{key}'") from exc
        if not isinstance(entry, dict) or not isinstance(entry.get("options"), list):
            raise CatalogError(f"Category '{key}' needs an 'options' list")
        definitions[category] = CategoryDefinition(
            options=tuple(str(option) for option in entry["options"]),
            description=str(entry.get("description") or ""),
        )
    return definitions


def _parse_corpus(raw: Any) -> Tuple[ContentRecord, ...]:
    if not isinstance(raw, list):
        raise CatalogError("'corpus' must be a list of records")
    records = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CatalogError(f"Corpus entry {index} is not an object")
        if "tags" in entry and not isinstance(entry["tags"], list):
            raise CatalogError(f"Corpus entry {index} 'tags' must be a list")
        records.append(ContentRecord.from_dict(entry))
    return tuple(records)


def _warn_unknown_values(catalog: ContentCatalog) -> None:
    # Records with undeclared values are kept; they just never vote for that category.
    for record in catalog.corpus:
        for category in catalog.definitions:
            value = get_category_value(record, category)
            if value and not catalog.is_valid_option(category, value):
                app_logger.warning(
                    f"Corpus record '{record.title}' has undeclared {category.key} value '{value}'"
                )


def parse_catalog(data: Dict[str, Any]) -> ContentCatalog:
    """Build a ContentCatalog from its JSON-decoded representation."""
    if not isinstance(data, dict):
        raise CatalogError("Catalog root must be an object")
    catalog = ContentCatalog(
        definitions=_parse_definitions(data.get("categories", {})),
        corpus=_parse_corpus(data.get("corpus", [])),
    )
    _warn_unknown_values(catalog)
    return catalog


def load_catalog(path: str | Path) -> ContentCatalog:
    """Load a catalog JSON file."""
    path = Path(path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found at {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Catalog file {path} could not be read: {exc}") from exc

    catalog = parse_catalog(data)
    app_logger.info(
        f"Loaded catalog from {path}: {len(catalog.definitions)} categories, {len(catalog.corpus)} records"
    )
    return catalog


def default_catalog() -> ContentCatalog:
    return ContentCatalog(definitions=CATEGORY_DEFINITIONS, corpus=HISTORICAL_CONTENT)


def load_configured_catalog(path: Optional[str] = None) -> ContentCatalog:
    """Load the catalog at `path`, the configured CATALOG_PATH, or the embedded one."""
    catalog_path = path if path is not None else settings.effective_catalog_path
    if catalog_path:
        return load_catalog(catalog_path)
    catalog = default_catalog()
    app_logger.info(
        f"Using embedded catalog: {len(catalog.definitions)} categories, {len(catalog.corpus)} records"
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> ContentCatalog:
    """Return the process-wide catalog, loaded once from settings."""
    return load_configured_catalog()
