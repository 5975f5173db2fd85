"""
Pathway Resolver — selects the escalation template for a set of facts.

Behavioral Contract:
- Pure and deterministic: the same inputs always return the same template
- DWP decision/service complaints route to their dedicated pathway in every nation
- Devolved nations get their nation-specific variant where the catalog has one
- Unknown body types fall back to the generic government pathway
- Never raises for unknown or missing input
"""

import logging
from typing import Optional, Union

from pathway_kernel.catalog import DEFAULT_CATALOG, PathwayCatalog
from pathway_kernel.models.facts import ComplaintType, ExtractedFacts, Nation
from pathway_kernel.models.pathway import PathwayTemplate

logger = logging.getLogger(__name__)

NATION_KEY_SUFFIX = {
    Nation.SCOTLAND: "scotland",
    Nation.WALES: "wales",
    Nation.NORTHERN_IRELAND: "ni",
}

# UK-wide bodies whose route depends on what is being challenged.
COMPLAINT_TYPE_ROUTES = {
    ("dwp", ComplaintType.DECISION): "dwp_decision",
    ("dwp", ComplaintType.SERVICE): "dwp_service",
}


def _as_complaint_type(value) -> Optional[ComplaintType]:
    if value is None or isinstance(value, ComplaintType):
        return value
    try:
        return ComplaintType(str(value).strip().lower())
    except ValueError:
        return None


def _as_nation(value) -> Optional[Nation]:
    if value is None or isinstance(value, Nation):
        return value
    wanted = str(value).strip().lower()
    for nation in Nation:
        if nation.value.lower() == wanted:
            return nation
    return None


def resolve_pathway(
    body_type: Optional[str],
    complaint_type: Union[ComplaintType, str, None] = None,
    nation: Union[Nation, str, None] = None,
    catalog: Optional[PathwayCatalog] = None,
) -> PathwayTemplate:
    """
    Return the catalog template for (body_type, complaint_type, nation).

    Resolution order: complaint-type route, nation variant, base template,
    then the fallback pathway.
    """
    catalog = catalog or DEFAULT_CATALOG
    body = str(body_type).strip().lower() if body_type else ""
    kind = _as_complaint_type(complaint_type)
    where = _as_nation(nation)

    routed = COMPLAINT_TYPE_ROUTES.get((body, kind))
    if routed and routed in catalog:
        logger.debug("Routed %s/%s to %s", body, kind.value, routed)
        return catalog.get(routed)

    suffix = NATION_KEY_SUFFIX.get(where)
    if body and suffix:
        variant = catalog.get(f"{body}_{suffix}")
        if variant is not None:
            return variant

    template = catalog.get(body) if body else None
    if template is not None:
        return template

    logger.info("No pathway for body type %r; using %s", body_type, catalog.fallback.key)
    return catalog.fallback


def resolve_for_facts(facts: ExtractedFacts, catalog: Optional[PathwayCatalog] = None) -> PathwayTemplate:
    return resolve_pathway(facts.body_type, facts.complaint_type, facts.nation, catalog)
