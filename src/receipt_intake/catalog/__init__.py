"""
Keyword catalog module.

Static category definitions with weighted keyword sets, conflict priority
rules and payment-instrument rules. Catalogs are immutable values built once
by the caller.
"""

from .keywords import DEFAULT_CATEGORIES, default_catalog
from .loader import catalog_from_dict, catalog_to_dict, dump_catalog, load_catalog
from .model import (
    GENERAL_WEIGHT,
    MERCHANT_WEIGHT,
    NEGATIVE_WEIGHT,
    OTHER_CATEGORY_ID,
    PRODUCT_ITEMS_ZONE_WEIGHT,
    PRODUCT_WEIGHT,
    CategoryDefinition,
    InstrumentRule,
    KeywordCatalog,
    PriorityRule,
)

__all__ = [
    "CategoryDefinition",
    "PriorityRule",
    "InstrumentRule",
    "KeywordCatalog",
    "DEFAULT_CATEGORIES",
    "default_catalog",
    "load_catalog",
    "dump_catalog",
    "catalog_from_dict",
    "catalog_to_dict",
    "MERCHANT_WEIGHT",
    "PRODUCT_WEIGHT",
    "PRODUCT_ITEMS_ZONE_WEIGHT",
    "GENERAL_WEIGHT",
    "NEGATIVE_WEIGHT",
    "OTHER_CATEGORY_ID",
]
