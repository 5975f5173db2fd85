"""Tests for the pathway catalog."""

import pytest

from pathway_kernel.catalog import (
    CATALOG_VERSION,
    DEFAULT_CATALOG,
    FALLBACK_KEY,
    CatalogIntegrityError,
    PathwayCatalog,
    build_default_catalog,
    ombudsman_step,
)
from pathway_kernel.catalog.ombudsmen import IOPC, PHSO
from pathway_kernel.catalog.uk_wide import OTHER_GOV
from pathway_kernel.models.pathway import PathwayTemplate, StepTemplate


def _make_template(key: str) -> PathwayTemplate:
    return PathwayTemplate(
        key=key,
        title=key.title(),
        description="",
        steps=[
            StepTemplate(
                name="Only step",
                description="",
                timeline_text="20 working days",
                is_default_current=True,
            )
        ],
    )


class TestDefaultCatalog:
    def test_size_and_version(self):
        assert len(DEFAULT_CATALOG) == 26
        assert DEFAULT_CATALOG.version == CATALOG_VERSION

    def test_every_template_has_one_default_step(self):
        for template in DEFAULT_CATALOG.templates():
            assert template.steps, template.key
            assert sum(1 for s in template.steps if s.is_default_current) == 1, template.key

    def test_keys_are_unique(self):
        keys = DEFAULT_CATALOG.keys()
        assert len(keys) == len(set(keys))

    def test_fallback_present(self):
        assert FALLBACK_KEY in DEFAULT_CATALOG
        assert DEFAULT_CATALOG.fallback.key == "other_gov"

    def test_supported_body_types_exclude_variants(self):
        body_types = DEFAULT_CATALOG.supported_body_types()
        assert "nhs_trust" in body_types
        assert "dwp_decision" in body_types
        assert "nhs_trust_scotland" not in body_types
        assert "police_ni" not in body_types
        assert len(body_types) == 11

    def test_lookup_returns_shared_object(self):
        assert DEFAULT_CATALOG.get("gp") is DEFAULT_CATALOG.get("gp")

    def test_unknown_key(self):
        assert DEFAULT_CATALOG.get("unknown") is None
        assert "unknown" not in DEFAULT_CATALOG

    def test_rebuild_is_equivalent(self):
        rebuilt = build_default_catalog()
        assert rebuilt.keys() == DEFAULT_CATALOG.keys()


class TestTemplateContent:
    def test_police_ni_single_step(self):
        template = DEFAULT_CATALOG.get("police_ni")
        assert len(template.steps) == 1
        assert template.steps[0].is_default_current

    def test_northern_ireland_six_month_window(self):
        for key in ("nhs_trust_ni", "gp_ni", "council_ni", "social_care_ni"):
            assert DEFAULT_CATALOG.get(key).submission_months == 6, key

    def test_dwp_decision_one_month_window(self):
        assert DEFAULT_CATALOG.get("dwp_decision").submission_months == 1

    def test_school_has_no_window(self):
        assert DEFAULT_CATALOG.get("school").submission_months is None

    def test_police_scotland_ends_at_pirc(self):
        final = DEFAULT_CATALOG.get("police_scotland").steps[-1]
        assert "PIRC" in final.name

    def test_police_england_ends_at_iopc(self):
        final = DEFAULT_CATALOG.get("police").steps[-1]
        assert "IOPC" in final.name
        assert final.acknowledgment_timeline_text == "15 working days"


class TestOmbudsmanStep:
    def test_stamps_contact_details(self):
        step = ombudsman_step(PHSO, description="Escalate", info_needed=["Final response"])
        assert step.name == PHSO.name
        assert step.portal_url == PHSO.portal_url
        assert step.postal_address == PHSO.postal_address
        assert step.acknowledgment_timeline_text == "5 working days"
        assert step.escalation_trigger == PHSO.final_stage
        assert step.is_default_current is False

    def test_steps_are_independent(self):
        a = ombudsman_step(IOPC, description="A", info_needed=[])
        b = ombudsman_step(IOPC, description="B", info_needed=[])
        assert a is not b
        assert a.description != b.description


class TestCatalogIntegrity:
    def test_duplicate_key_rejected(self):
        with pytest.raises(CatalogIntegrityError):
            PathwayCatalog([OTHER_GOV, _make_template("gp"), _make_template("gp")])

    def test_missing_fallback_rejected(self):
        with pytest.raises(CatalogIntegrityError):
            PathwayCatalog([_make_template("gp")])

    def test_unvalidated_template_rejected(self):
        broken = PathwayTemplate.model_construct(
            key="broken",
            title="Broken",
            description="",
            steps=[
                StepTemplate(name="A", description="", timeline_text="", is_default_current=True),
                StepTemplate(name="B", description="", timeline_text="", is_default_current=True),
            ],
        )
        with pytest.raises(CatalogIntegrityError):
            PathwayCatalog([OTHER_GOV, broken])

    def test_empty_template_rejected(self):
        broken = PathwayTemplate.model_construct(key="empty", title="Empty", description="", steps=[])
        with pytest.raises(CatalogIntegrityError):
            PathwayCatalog([OTHER_GOV, broken])

    def test_custom_catalog(self):
        catalog = PathwayCatalog([OTHER_GOV, _make_template("gp")], version="test")
        assert catalog.version == "test"
        assert catalog.keys() == ["other_gov", "gp"]
