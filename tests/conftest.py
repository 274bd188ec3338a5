"""Test fixtures and utilities."""

from pathlib import Path

import pytest

from receipt_intake.catalog import CategoryDefinition, KeywordCatalog, default_catalog
from receipt_intake.intake import ReceiptIntake

# Sample OCR output for testing (top to bottom, as recognized)
SAMPLE_COFFEE_LINES = [
    "STARBUCKS",
    "28.12.2024",
    "85,00 TL",
]

SAMPLE_MARKET_LINES = [
    "MİGROS TİCARET A.Ş.",
    "ATATÜRK MAH. CUMHURİYET CAD. NO:12",
    "FİŞ NO: 0042",
    "EKMEK                    12,50",
    "SÜT 1L                   34,90",
    "YOĞURT                   45,00",
    "TOPLAM                  92,40",
    "KDV %1                   0,91",
    "KREDİ KARTI             92,40",
    "15/01/2025 18:42",
]

SAMPLE_FUEL_LINES = [
    "SHELL",
    "İSTASYON",
    "28.12.2024",
    "BENZİN 40,12 LT",
    "TOPLAM 1.500,00",
    "KREDİ KARTI",
]


@pytest.fixture(scope="session")
def catalog() -> KeywordCatalog:
    """Default keyword catalog, built once."""
    return default_catalog()


@pytest.fixture(scope="session")
def intake(catalog) -> ReceiptIntake:
    """Pipeline over the default catalog."""
    return ReceiptIntake(catalog)


@pytest.fixture
def small_catalog() -> KeywordCatalog:
    """Two-category catalog with unambiguous keywords for weight tests."""
    return KeywordCatalog(
        [
            CategoryDefinition(
                id="coffee",
                merchant=("beanery",),
                product=("espresso",),
                general=("cafe",),
                negative=("fuel",),
            ),
            CategoryDefinition(
                id="gas",
                merchant=("gasco",),
                product=("diesel",),
                general=("station",),
                negative=("espresso",),
            ),
        ]
    )


@pytest.fixture
def coffee_lines() -> list[str]:
    """Single-signal coffee receipt."""
    return list(SAMPLE_COFFEE_LINES)


@pytest.fixture
def market_lines() -> list[str]:
    """Turkish supermarket receipt."""
    return list(SAMPLE_MARKET_LINES)


@pytest.fixture
def fuel_lines() -> list[str]:
    """Fuel station receipt with a volume line."""
    return list(SAMPLE_FUEL_LINES)


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Temporary config path for testing."""
    return tmp_path / "config.yaml"
