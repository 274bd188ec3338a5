"""
YAML serialization for keyword catalogs.

Format:

    categories:
      - id: food_drink
        merchant: [starbucks, ...]
        product: [...]
        general: [...]
        negative: [...]
    priority_rules:
      - name: fuel
        triggers: [benzin, ...]
        suppressors: [latte, ...]
        boosted: [transport]
        penalized: [food_drink]
        boost: 5
    instrument_rules:
      - name: utts
        category_id: transport
        keywords: [utts, ...]
        patterns: ['\\d+[.,]\\d+\\s*LT\\b']
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import CatalogError
from .model import CategoryDefinition, InstrumentRule, KeywordCatalog, PriorityRule

logger = logging.getLogger(__name__)

_KEYWORD_LISTS = ("merchant", "product", "general", "negative")


def _string_tuple(data: dict, key: str, owner: str) -> tuple[str, ...]:
    values = data.get(key) or []
    if not isinstance(values, list):
        raise CatalogError(f"{owner}: '{key}' must be a list, got {type(values).__name__}")
    return tuple(str(v) for v in values)


def catalog_from_dict(data: dict[str, Any]) -> KeywordCatalog:
    """Build a catalog from its dictionary form."""
    if not isinstance(data, dict):
        raise CatalogError("Catalog document must be a mapping")

    raw_categories = data.get("categories")
    if not raw_categories:
        raise CatalogError("Catalog must define at least one category")

    categories = []
    for entry in raw_categories:
        if not isinstance(entry, dict) or not entry.get("id"):
            raise CatalogError(f"Category entry without id: {entry!r}")
        owner = f"category '{entry['id']}'"
        categories.append(
            CategoryDefinition(
                id=str(entry["id"]),
                **{key: _string_tuple(entry, key, owner) for key in _KEYWORD_LISTS},
            )
        )

    priority_rules = []
    for entry in data.get("priority_rules") or []:
        owner = f"priority rule '{entry.get('name')}'"
        priority_rules.append(
            PriorityRule(
                name=str(entry["name"]),
                triggers=_string_tuple(entry, "triggers", owner),
                suppressors=_string_tuple(entry, "suppressors", owner),
                boosted=_string_tuple(entry, "boosted", owner),
                penalized=_string_tuple(entry, "penalized", owner),
                boost=int(entry.get("boost", 5)),
            )
        )

    instrument_rules = []
    for entry in data.get("instrument_rules") or []:
        owner = f"instrument rule '{entry.get('name')}'"
        instrument_rules.append(
            InstrumentRule(
                name=str(entry["name"]),
                category_id=str(entry["category_id"]),
                keywords=_string_tuple(entry, "keywords", owner),
                patterns=_string_tuple(entry, "patterns", owner),
            )
        )

    return KeywordCatalog(
        categories,
        priority_rules=priority_rules,
        instrument_rules=instrument_rules,
    )


def catalog_to_dict(catalog: KeywordCatalog) -> dict[str, Any]:
    """Serialize a catalog to its dictionary form."""
    return {
        "categories": [
            {
                "id": category.id,
                **{key: list(getattr(category, key)) for key in _KEYWORD_LISTS},
            }
            for category in catalog
        ],
        "priority_rules": [
            {
                "name": rule.name,
                "triggers": list(rule.triggers),
                "suppressors": list(rule.suppressors),
                "boosted": list(rule.boosted),
                "penalized": list(rule.penalized),
                "boost": rule.boost,
            }
            for rule in catalog.priority_rules
        ],
        "instrument_rules": [
            {
                "name": rule.name,
                "category_id": rule.category_id,
                "keywords": list(rule.keywords),
                "patterns": list(rule.patterns),
            }
            for rule in catalog.instrument_rules
        ],
    }


def load_catalog(path: Path) -> KeywordCatalog:
    """
    Load a keyword catalog from a YAML file.

    Raises:
        CatalogError: If the file is missing or malformed
    """
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in catalog {path}: {e}") from e

    try:
        catalog = catalog_from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogError(f"Malformed catalog {path}: {e}") from e

    logger.info("Loaded keyword catalog from %s (%d categories)", path, len(catalog))
    return catalog


def dump_catalog(catalog: KeywordCatalog, path: Path) -> None:
    """Write a catalog to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(catalog_to_dict(catalog), f, allow_unicode=True, sort_keys=False)
