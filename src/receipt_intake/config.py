"""
Configuration management (SSOT).

This module defines ALL configuration for the receipt intake pipeline.
All config keys are defined here; no other module should invent config keys.

Key invariants:
- The review threshold is NOT configurable; it belongs to the scorer
- reference_currency is an ISO 4217 code used when a receipt shows none
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigValidationError

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class IntakeConfig:
    """Intake pipeline configuration (SSOT).

    All configuration is centralized here. No other module should define
    configuration keys or defaults.
    """

    # Currency for fingerprints and display when the receipt shows none
    reference_currency: str = "TRY"
    # Optional YAML keyword catalog replacing the built-in one
    catalog_path: Optional[Path] = None
    # Number of top lines forming the merchant zone
    merchant_zone_lines: int = 5
    # Log level for configure_logging()
    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not _CURRENCY_RE.match(self.reference_currency or ""):
            errors.append(
                f"reference_currency must be a 3-letter ISO 4217 code, got: {self.reference_currency!r}"
            )

        if self.merchant_zone_lines < 1:
            errors.append("merchant_zone_lines must be >= 1")

        if self.catalog_path is not None and not self.catalog_path.exists():
            errors.append(f"catalog_path does not exist: {self.catalog_path}")

        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            errors.append(f"log_level is not a logging level: {self.log_level!r}")

        return errors

    def require_valid(self) -> "IntakeConfig":
        """Raise if validation fails, otherwise return self."""
        errors = self.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))
        return self


def load_config(config_path: Path) -> IntakeConfig:
    """
    Load configuration from YAML file.

    Environment variables can override config values:
    - RECEIPT_INTAKE_CURRENCY
    - RECEIPT_INTAKE_CATALOG
    - RECEIPT_INTAKE_MERCHANT_ZONE_LINES
    - RECEIPT_INTAKE_LOG_LEVEL
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    currency = os.environ.get("RECEIPT_INTAKE_CURRENCY", data.get("reference_currency", "TRY"))

    catalog = os.environ.get("RECEIPT_INTAKE_CATALOG", data.get("catalog_path"))

    zone_lines = data.get("merchant_zone_lines", 5)
    zone_lines_env = os.environ.get("RECEIPT_INTAKE_MERCHANT_ZONE_LINES", "")
    if zone_lines_env:
        try:
            zone_lines = int(zone_lines_env)
        except ValueError:
            pass  # Keep file/default value

    return IntakeConfig(
        reference_currency=str(currency).upper(),
        catalog_path=Path(catalog) if catalog else None,
        merchant_zone_lines=int(zone_lines),
        log_level=os.environ.get("RECEIPT_INTAKE_LOG_LEVEL", data.get("log_level", "INFO")),
    )


def configure_logging(config: IntakeConfig) -> None:
    """Configure root logging for applications embedding the pipeline."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Receipt intake pipeline configuration
#
# The review threshold (0.8) is fixed by the category scorer and cannot be
# configured here.

# ISO 4217 code used when the receipt shows no currency
reference_currency: "TRY"

# Optional YAML keyword catalog replacing the built-in categories
catalog_path: null

# Number of top lines that form the merchant zone
merchant_zone_lines: 5

# DEBUG, INFO, WARNING, ERROR
log_level: "INFO"
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
