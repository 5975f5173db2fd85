"""Pathway catalog: versioned escalation templates per body type and nation."""

from pathway_kernel.catalog.ombudsmen import EscalationBody, ombudsman_step
from pathway_kernel.catalog.registry import (
    CATALOG_VERSION,
    DEFAULT_CATALOG,
    FALLBACK_KEY,
    CatalogIntegrityError,
    PathwayCatalog,
    build_default_catalog,
)

__all__ = [
    "CATALOG_VERSION",
    "CatalogIntegrityError",
    "DEFAULT_CATALOG",
    "EscalationBody",
    "FALLBACK_KEY",
    "PathwayCatalog",
    "build_default_catalog",
    "ombudsman_step",
]
