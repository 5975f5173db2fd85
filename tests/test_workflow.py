"""Tests for the session workflow, safeguarding gate, letter prompts and session store."""

from datetime import date

import pytest

from pathway_kernel.catalog import DEFAULT_CATALOG
from pathway_kernel.deadlines.holidays import HolidayCalendar
from pathway_kernel.models.config import KernelConfig
from pathway_kernel.models.facts import ExtractedFacts, SafeguardingConcern
from pathway_kernel.models.workflow import (
    SafeguardingSeverity,
    TransitionVerdict,
    WorkflowEvent,
    WorkflowStatus,
)
from pathway_kernel.session.store import SessionStore
from pathway_kernel.workflow.letter_prompt import LETTER_SYSTEM_PROMPT, build_letter_prompt
from pathway_kernel.workflow.machine import SessionBusyError, SessionWorkflow
from pathway_kernel.workflow.safeguarding import (
    SIGNPOSTS,
    SafeguardingGate,
    classify_concern,
    signpost_for,
)


def _make_facts(**kwargs) -> ExtractedFacts:
    kwargs.setdefault("body_type", "nhs_trust")
    kwargs.setdefault("date_specific", "2025-03-10")
    kwargs.setdefault("steps_taken", "formal complaint")
    kwargs.setdefault("issue", "Missed diagnosis")
    return ExtractedFacts(**kwargs)


def _make_session() -> SessionWorkflow:
    return SessionWorkflow(session_id="s-1", calendar=HolidayCalendar(KernelConfig().bank_holidays))


def _in_summary(**kwargs) -> SessionWorkflow:
    session = _make_session()
    session.submit_facts(_make_facts(**kwargs))
    assert session.status == WorkflowStatus.SUMMARY
    return session


# ============================================================
# Safeguarding gate
# ============================================================

class TestSafeguardingGate:
    def setup_method(self):
        self.gate = SafeguardingGate()

    @pytest.mark.parametrize("concern", [
        SafeguardingConcern.EMERGENCY,
        SafeguardingConcern.CRIME,
        SafeguardingConcern.CHILD_SAFEGUARDING,
        SafeguardingConcern.ADULT_SAFEGUARDING,
    ])
    def test_serious_concern_diverts(self, concern):
        for acknowledged in (False, True):
            decision = self.gate.evaluate(_make_facts(safeguarding_concern=concern), acknowledged)
            assert decision.verdict == TransitionVerdict.DIVERTED
            assert decision.severity == SafeguardingSeverity.SERIOUS
            assert decision.reason == f"safeguarding_{concern.value}"

    def test_regulatory_requires_acknowledgment(self):
        decision = self.gate.evaluate(_make_facts(safeguarding_concern="regulatory"))
        assert decision.verdict == TransitionVerdict.REJECTED
        assert decision.reason == "acknowledgment_required"
        assert decision.requires_acknowledgment

    def test_regulatory_acknowledged(self):
        decision = self.gate.evaluate(_make_facts(safeguarding_concern="regulatory"), acknowledged=True)
        assert decision.verdict == TransitionVerdict.APPROVED

    def test_no_concern(self):
        decision = self.gate.evaluate(_make_facts())
        assert decision.verdict == TransitionVerdict.APPROVED
        assert decision.severity == SafeguardingSeverity.NONE
        assert not decision.requires_acknowledgment

    def test_every_concern_classified(self):
        for concern in SafeguardingConcern:
            assert classify_concern(concern) in SafeguardingSeverity

    def test_signposts(self):
        assert signpost_for(SafeguardingConcern.NONE) is None
        assert "999" in signpost_for(SafeguardingConcern.EMERGENCY).headline
        assert set(SIGNPOSTS) == set(SafeguardingConcern) - {SafeguardingConcern.NONE}


# ============================================================
# Session workflow
# ============================================================

class TestIntake:
    def setup_method(self):
        self.session = _make_session()

    def test_starts_in_intake(self):
        assert self.session.status == WorkflowStatus.INTAKE
        assert self.session.history == []

    def test_complete_facts_move_to_summary(self):
        decision = self.session.submit_facts(_make_facts())
        assert decision.verdict == TransitionVerdict.APPROVED
        assert decision.from_status == WorkflowStatus.INTAKE
        assert decision.to_status == WorkflowStatus.SUMMARY
        assert self.session.status == WorkflowStatus.SUMMARY

    def test_incomplete_facts_stay_in_intake(self):
        decision = self.session.submit_facts(ExtractedFacts(issue="Something happened"))
        assert decision.verdict == TransitionVerdict.REJECTED
        assert decision.reason == "facts_incomplete"
        assert self.session.status == WorkflowStatus.INTAKE
        assert self.session.facts.issue == "Something happened"

    def test_confirm_out_of_order(self):
        decision = self.session.confirm_summary()
        assert decision.verdict == TransitionVerdict.REJECTED
        assert decision.reason == "invalid_transition"
        assert self.session.status == WorkflowStatus.INTAKE

    def test_letter_out_of_order(self):
        decision = self.session.request_letter()
        assert decision.reason == "invalid_transition"

    def test_every_attempt_recorded(self):
        self.session.confirm_summary()
        self.session.submit_facts(_make_facts())
        assert [d.event for d in self.session.history] == [
            WorkflowEvent.CONFIRM_SUMMARY,
            WorkflowEvent.FACTS_COMPLETE,
        ]
        assert all(d.session_id == "s-1" for d in self.session.history)


class TestSummary:
    def test_amend_facts(self):
        session = _in_summary()
        decision = session.submit_facts(_make_facts(body_type="gp"))
        assert decision.verdict == TransitionVerdict.APPROVED
        assert decision.reason == "facts_updated"
        assert session.facts.body_type == "gp"
        assert session.status == WorkflowStatus.SUMMARY

    def test_incomplete_amendment_ignored(self):
        session = _in_summary()
        decision = session.submit_facts(ExtractedFacts())
        assert decision.verdict == TransitionVerdict.REJECTED
        assert session.facts.body_type == "nhs_trust"

    def test_confirm_resolves_pathway(self):
        session = _in_summary()
        decision = session.confirm_summary(today=date(2025, 3, 20))
        assert decision.verdict == TransitionVerdict.APPROVED
        assert session.status == WorkflowStatus.PATHWAY
        assert session.pathway.key == "nhs_trust"
        assert session.pathway.current_index == 1
        assert session.deadlines.submit_by == date(2026, 3, 10)

    def test_confirm_without_event_date(self):
        session = _in_summary(date_specific=None)
        session.confirm_summary(today=date(2025, 3, 20))
        assert session.status == WorkflowStatus.PATHWAY
        assert session.deadlines is None

    def test_default_calendar_skips_bank_holidays(self):
        session = SessionWorkflow()
        session.submit_facts(_make_facts())
        session.confirm_summary(today=date(2025, 4, 17))
        assert session.deadlines.acknowledgment_by == date(2025, 4, 24)

    def test_pathway_is_session_copy(self):
        session = _in_summary()
        session.confirm_summary(today=date(2025, 3, 20))
        session.pathway.set_current(2)
        assert DEFAULT_CATALOG.get("nhs_trust").default_index == 0


class TestSafeguardingFlow:
    @pytest.mark.parametrize("concern", ["emergency", "crime", "child_safeguarding", "adult_safeguarding"])
    def test_serious_concern_signposts(self, concern):
        session = _in_summary(safeguarding_concern=concern)
        decision = session.confirm_summary()
        assert decision.verdict == TransitionVerdict.DIVERTED
        assert session.status == WorkflowStatus.SIGNPOSTED
        assert session.signposted_concern == SafeguardingConcern(concern)
        assert session.pathway is None
        assert session.deadlines is None

    def test_acknowledging_does_not_unblock_crime(self):
        session = _in_summary(safeguarding_concern="crime")
        assert session.acknowledge_notice().reason == "no_notice_pending"
        assert session.confirm_summary().verdict == TransitionVerdict.DIVERTED

    def test_signposted_is_terminal(self):
        session = _in_summary(safeguarding_concern="crime")
        session.confirm_summary()
        assert session.submit_facts(_make_facts()).reason == "facts_locked"
        assert session.confirm_summary().reason == "invalid_transition"
        assert session.request_letter().reason == "invalid_transition"
        assert session.letter_prompt() is None
        assert session.status == WorkflowStatus.SIGNPOSTED

    def test_regulatory_blocks_until_acknowledged(self):
        session = _in_summary(safeguarding_concern="regulatory")
        assert session.acknowledgment_pending

        decision = session.confirm_summary()
        assert decision.verdict == TransitionVerdict.REJECTED
        assert decision.reason == "acknowledgment_required"
        assert session.status == WorkflowStatus.SUMMARY

        assert session.acknowledge_notice().verdict == TransitionVerdict.APPROVED
        assert not session.acknowledgment_pending
        assert session.confirm_summary().verdict == TransitionVerdict.APPROVED
        assert session.status == WorkflowStatus.PATHWAY

    def test_acknowledgment_reset_by_new_facts(self):
        session = _in_summary(safeguarding_concern="regulatory")
        session.acknowledge_notice()
        session.submit_facts(_make_facts(safeguarding_concern="regulatory", issue="Amended"))
        assert session.acknowledgment_pending
        assert session.confirm_summary().verdict == TransitionVerdict.REJECTED

    def test_acknowledgment_used_once(self):
        session = _in_summary(safeguarding_concern="regulatory")
        session.acknowledge_notice()
        session.confirm_summary()
        session.restart()
        session.submit_facts(_make_facts(safeguarding_concern="regulatory"))
        assert session.confirm_summary().verdict == TransitionVerdict.REJECTED

    def test_acknowledge_outside_summary(self):
        session = _make_session()
        assert session.acknowledge_notice().reason == "invalid_transition"


class TestPathwayAndLetter:
    def setup_method(self):
        self.session = _in_summary(third_party=True, third_party_name="My father")
        self.session.confirm_summary(today=date(2025, 3, 20))

    def test_facts_locked(self):
        decision = self.session.submit_facts(_make_facts(body_type="gp"))
        assert decision.reason == "facts_locked"
        assert self.session.facts.body_type == "nhs_trust"

    def test_request_letter(self):
        decision = self.session.request_letter()
        assert decision.verdict == TransitionVerdict.APPROVED
        assert self.session.status == WorkflowStatus.LETTER
        assert self.session.letter_prompt() is not None

    def test_letter_prompt_contents(self):
        payload = self.session.letter_prompt()
        assert payload.system_prompt == LETTER_SYSTEM_PROMPT
        assert payload.pathway_key == "nhs_trust"
        assert payload.directed_to == "Formal Complaint to the Trust"
        assert "The complaint is directed to: Formal Complaint to the Trust" in payload.user_prompt
        assert "Issue: Missed diagnosis" in payload.user_prompt
        assert "Complaining on behalf of: My father" in payload.user_prompt
        assert "Legislation:" in payload.user_prompt

    def test_no_prompt_before_pathway(self):
        assert _in_summary().letter_prompt() is None


class TestRestart:
    def test_restart_clears_state(self):
        session = _in_summary()
        session.confirm_summary(today=date(2025, 3, 20))
        history_length = len(session.history)

        decision = session.restart()
        assert decision.to_status == WorkflowStatus.INTAKE
        assert session.facts is None
        assert session.pathway is None
        assert session.deadlines is None
        assert session.epoch == 1
        assert len(session.history) == history_length + 1

    def test_restart_leaves_signposted(self):
        session = _in_summary(safeguarding_concern="crime")
        session.confirm_summary()
        session.restart()
        assert session.status == WorkflowStatus.INTAKE
        assert session.signposted_concern is None
        assert session.submit_facts(_make_facts()).verdict == TransitionVerdict.APPROVED


class TestExternalCalls:
    def setup_method(self):
        self.session = _make_session()

    def test_busy_session_rejects_input(self):
        self.session.begin_external_call()
        assert self.session.busy
        with pytest.raises(SessionBusyError):
            self.session.submit_facts(_make_facts())
        with pytest.raises(SessionBusyError):
            self.session.begin_external_call()

    def test_result_applied(self):
        token = self.session.begin_external_call()
        decision = self.session.complete_external_call(token, _make_facts())
        assert decision.verdict == TransitionVerdict.APPROVED
        assert not self.session.busy
        assert self.session.status == WorkflowStatus.SUMMARY

    def test_stale_result_discarded(self):
        token = self.session.begin_external_call()
        self.session.restart()
        assert not self.session.busy
        assert self.session.complete_external_call(token, _make_facts()) is None
        assert self.session.facts is None
        assert self.session.status == WorkflowStatus.INTAKE

    def test_call_without_result(self):
        token = self.session.begin_external_call()
        assert self.session.complete_external_call(token) is None
        assert not self.session.busy


class TestSessionView:
    def test_view_snapshot(self):
        session = _in_summary(safeguarding_concern="regulatory")
        view = session.to_view()
        assert view.session_id == "s-1"
        assert view.status == WorkflowStatus.SUMMARY
        assert view.acknowledgment_pending
        assert len(view.history) == 1

    def test_view_serializes(self):
        session = _in_summary()
        session.confirm_summary(today=date(2025, 3, 20))
        data = session.to_view().model_dump(mode="json")
        assert data["status"] == "pathway"
        assert data["deadlines"]["submit_by"] == "2026-03-10"
        assert data["pathway"]["steps"][1]["current"] is True


# ============================================================
# Letter prompt builder
# ============================================================

class TestLetterPrompt:
    def test_defaults_for_missing_fields(self):
        instance = DEFAULT_CATALOG.get("council").instantiate()
        payload = build_letter_prompt(ExtractedFacts(body_type="council"), instance)
        assert "Steps already taken: None" in payload.user_prompt
        assert "Personal impact: Not specified" in payload.user_prompt
        assert "Public body: Not specified" in payload.user_prompt
        assert "Severity: Not specified" in payload.user_prompt
        assert "When it happened: Not specified" in payload.user_prompt
        assert "Public body: None" not in payload.user_prompt
        assert "Reference numbers" not in payload.user_prompt

    def test_specific_date_shown_without_range(self):
        instance = DEFAULT_CATALOG.get("council").instantiate()
        payload = build_letter_prompt(
            ExtractedFacts(body_type="council", date_specific="14/03/2025"), instance
        )
        assert "When it happened: 14/03/2025" in payload.user_prompt
        assert payload.directed_to == instance.steps[0].name

    def test_contact_preference(self):
        instance = DEFAULT_CATALOG.get("council").instantiate()
        stated = build_letter_prompt(
            ExtractedFacts(body_type="council", contact_preference="email"), instance
        )
        unstated = build_letter_prompt(
            ExtractedFacts(body_type="council", contact_preference="not_stated"), instance
        )
        assert "Preferred contact method: email" in stated.user_prompt
        assert "Preferred contact method" not in unstated.user_prompt


# ============================================================
# Session store
# ============================================================

class TestSessionStore:
    def setup_method(self):
        self.store = SessionStore(config=KernelConfig(urgent_threshold_days=10))

    def test_create_and_get(self):
        session = self.store.create()
        assert self.store.get(session.session_id) is session
        assert len(self.store) == 1
        assert self.store.list_ids() == [session.session_id]

    def test_sessions_share_calendar_and_catalog(self):
        a = self.store.create()
        b = self.store.create()
        assert a.session_id != b.session_id
        assert a.calendar is b.calendar is self.store.calendar
        assert a.catalog is b.catalog
        assert a.urgent_threshold_days == 10

    def test_sessions_isolated(self):
        a = self.store.create()
        b = self.store.create()
        a.submit_facts(_make_facts())
        assert b.status == WorkflowStatus.INTAKE
        assert b.facts is None

    def test_missing_session(self):
        assert self.store.get("nope") is None
        assert self.store.delete("nope") is False

    def test_delete(self):
        session = self.store.create()
        assert self.store.delete(session.session_id) is True
        assert self.store.get(session.session_id) is None
