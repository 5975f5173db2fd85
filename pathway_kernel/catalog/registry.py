"""
Pathway Catalog — the versioned set of escalation templates.

Behavioral Contract:
- Every template is validated when the catalog is built; a broken catalog
  never serves a lookup
- Keys are unique across all regions
- Lookups are read-only and return the shared template object; sessions
  clone via PathwayTemplate.instantiate()
"""

import logging
from typing import Dict, Iterable, List, Optional

from pathway_kernel.catalog import england, northern_ireland, scotland, uk_wide, wales
from pathway_kernel.models.pathway import PathwayInvariantError, PathwayTemplate

logger = logging.getLogger(__name__)

CATALOG_VERSION = "2025.1"
FALLBACK_KEY = "other_gov"

# Suffixes used for nation-specific variants of a base body type.
NATION_SUFFIXES = ("_scotland", "_wales", "_ni")


class CatalogIntegrityError(ValueError):
    """Raised when the catalog violates its structural invariants."""
    pass


class PathwayCatalog:
    """
    Immutable registry of pathway templates keyed by template key.
    """

    def __init__(self, templates: Iterable[PathwayTemplate], version: str = CATALOG_VERSION):
        self.version = version
        self._templates: Dict[str, PathwayTemplate] = {}

        for template in templates:
            if template.key in self._templates:
                raise CatalogIntegrityError(f"Duplicate pathway key '{template.key}'")
            self._check_template(template)
            self._templates[template.key] = template

        if FALLBACK_KEY not in self._templates:
            raise CatalogIntegrityError(f"Catalog has no '{FALLBACK_KEY}' fallback pathway")

        logger.debug("Built pathway catalog %s with %d templates", version, len(self._templates))

    @staticmethod
    def _check_template(template: PathwayTemplate) -> None:
        # Templates validate themselves on construction; a model_construct()ed
        # template skips that, so the invariants are re-checked here.
        if not template.steps:
            raise CatalogIntegrityError(f"Pathway '{template.key}' has no steps")
        defaults = sum(1 for s in template.steps if s.is_default_current)
        if defaults != 1:
            raise CatalogIntegrityError(
                f"Pathway '{template.key}' has {defaults} default steps, expected exactly 1"
            )
        try:
            template.instantiate()
        except PathwayInvariantError as e:
            raise CatalogIntegrityError(str(e)) from e

    def get(self, key: str) -> Optional[PathwayTemplate]:
        return self._templates.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def keys(self) -> List[str]:
        """Every template key, in catalog order."""
        return list(self._templates.keys())

    def templates(self) -> List[PathwayTemplate]:
        return list(self._templates.values())

    def supported_body_types(self) -> List[str]:
        """Base body types, i.e. keys that are not nation variants."""
        return [k for k in self._templates if not k.endswith(NATION_SUFFIXES)]

    @property
    def fallback(self) -> PathwayTemplate:
        return self._templates[FALLBACK_KEY]


def build_default_catalog() -> PathwayCatalog:
    """Assemble the bundled catalog from the regional modules."""
    return PathwayCatalog(
        england.TEMPLATES
        + uk_wide.TEMPLATES
        + scotland.TEMPLATES
        + wales.TEMPLATES
        + northern_ireland.TEMPLATES
    )


DEFAULT_CATALOG = build_default_catalog()
