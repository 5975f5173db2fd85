"""
Configuration loading.

Settings come from a YAML file; the bank-holiday calendar can additionally be
pointed at its own YAML file so it can be refreshed each year without a code
change.
"""

import logging
import os
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml

from pathway_kernel.models.config import KernelConfig

logger = logging.getLogger(__name__)

BUNDLED_HOLIDAYS_PATH = Path(__file__).resolve().parent / "data" / "bank_holidays.yaml"


def read_holiday_file(path: Path) -> List[date]:
    """Read a holiday YAML file: either a bare list of dates or a mapping with a `dates` key."""
    with open(path) as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get("dates", [])

    holidays = []
    for entry in data:
        if isinstance(entry, date):
            holidays.append(entry)
        else:
            holidays.append(date.fromisoformat(str(entry)))
    return sorted(holidays)


def bundled_holidays() -> List[date]:
    """The England and Wales calendar shipped with the package."""
    return read_holiday_file(BUNDLED_HOLIDAYS_PATH)


def load_config(path: Optional[str] = None) -> KernelConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to the
            PATHWAY_KERNEL_CONFIG env variable or 'config.yaml' in the
            current directory. A PATHWAY_KERNEL_HOLIDAYS env variable, or a
            `holidays_file` key in the config, replaces the bank-holiday list.
    """

    config_path = path or os.getenv("PATHWAY_KERNEL_CONFIG", "config.yaml")
    data = {}
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded kernel config from %s", config_path)

    holidays_file = os.getenv("PATHWAY_KERNEL_HOLIDAYS") or data.pop("holidays_file", None)
    if holidays_file:
        data["bank_holidays"] = read_holiday_file(Path(holidays_file))
        logger.info("Loaded bank holidays from %s", holidays_file)

    config = KernelConfig(**data)
    if config.bank_holidays:
        logger.debug(
            "Holiday calendar covers %s to %s",
            min(config.bank_holidays), max(config.bank_holidays),
        )
    return config
