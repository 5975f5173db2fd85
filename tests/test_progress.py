"""Tests for progress inference from "steps already taken" text."""

import pytest

from pathway_kernel.catalog import DEFAULT_CATALOG
from pathway_kernel.progress.inference import (
    DEFAULT_PROGRESS_RULES,
    ProgressRule,
    apply_progress,
    infer_step_index,
)


def _current_index(key: str, text):
    return apply_progress(DEFAULT_CATALOG.get(key), text).current_index


class TestInferStepIndex:
    def setup_method(self):
        self.nhs = DEFAULT_CATALOG.get("nhs_trust")

    def test_formal_complaint(self):
        assert infer_step_index(self.nhs, "I made a formal complaint") == (1, "formal")

    def test_informal_contact(self):
        assert infer_step_index(self.nhs, "I spoke to someone on the ward") == (1, "informal")

    def test_ombudsman(self):
        assert infer_step_index(self.nhs, "Already went to the Ombudsman") == (2, "ombudsman")

    @pytest.mark.parametrize("text", ["none", "None", "  no ", "not yet", "", None])
    def test_nothing_done_uses_default(self, text):
        assert infer_step_index(self.nhs, text) == (0, None)

    def test_unrecognised_text_uses_first_step(self):
        assert infer_step_index(self.nhs, "I am very unhappy") == (0, None)

    def test_rule_order_wins(self):
        # Mentions both a formal complaint and the ombudsman.
        index, rule = infer_step_index(self.nhs, "complained formally, then wrote to the ombudsman")
        assert (index, rule) == (2, "ombudsman")

    def test_custom_rules(self):
        rules = [ProgressRule(name="any", keywords=("letter",), target=lambda n: n - 1)]
        assert infer_step_index(self.nhs, "sent a letter", rules=rules) == (2, "any")
        assert infer_step_index(self.nhs, "formal complaint", rules=rules) == (0, None)

    def test_target_clamped_to_range(self):
        rules = [ProgressRule(name="far", keywords=("far",), target=lambda n: n + 5)]
        assert infer_step_index(self.nhs, "went far", rules=rules) == (2, "far")


class TestApplyProgress:
    def test_single_step_pathway(self):
        assert _current_index("police_ni", "complained to the ombudsman") == 0
        assert _current_index("police_ni", "formal complaint") == 0
        assert _current_index("police_ni", "spoke to an officer") == 0

    def test_council_formal_is_second_step(self):
        assert _current_index("council", "formal complaint") == 1

    def test_council_ombudsman_is_last_step(self):
        assert _current_index("council", "went to the LGSCO") == 3

    def test_template_not_mutated(self):
        template = DEFAULT_CATALOG.get("gp")
        before = template.model_dump()
        apply_progress(template, "ombudsman")
        assert template.model_dump() == before
        assert template.steps[0].is_default_current

    def test_instances_are_independent(self):
        template = DEFAULT_CATALOG.get("gp")
        a = apply_progress(template, "none")
        b = apply_progress(template, "ombudsman")
        assert a.current_index == 0
        assert b.current_index == len(template.steps) - 1

    @pytest.mark.parametrize("text", [
        None, "", "none", "nothing yet", "formal complaint", "spoke to PALS",
        "ombudsman", "stage 2", "tier 2 review", "random words", "pirc",
    ])
    def test_exactly_one_current_step(self, text):
        for template in DEFAULT_CATALOG.templates():
            instance = apply_progress(template, text)
            assert sum(1 for s in instance.steps if s.current) == 1, template.key


class TestDefaultRules:
    def test_rule_names_in_order(self):
        assert [r.name for r in DEFAULT_PROGRESS_RULES] == ["ombudsman", "formal", "informal"]

    def test_rules_are_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_PROGRESS_RULES[0].name = "changed"
