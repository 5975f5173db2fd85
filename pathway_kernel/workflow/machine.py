"""
Session Workflow — the state machine one user's complaint moves through.

Behavioral Contract:
- States move forward only: intake → summary → pathway → letter
- Serious safeguarding concerns divert to the terminal signposted state;
  only restart leaves it
- Every attempted transition returns a TransitionDecision and is recorded
  in the session history; refusals are decisions, not exceptions
- A busy session refuses new facts (SessionBusyError) until the outstanding
  external call completes; results from before a restart are discarded
- Each session owns its pathway instance; the catalog is never mutated
"""

import logging
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Tuple, Union
from uuid import uuid4

from pathway_kernel.catalog import DEFAULT_CATALOG, PathwayCatalog
from pathway_kernel.deadlines.calculator import DEFAULT_URGENT_THRESHOLD_DAYS, compute_deadlines
from pathway_kernel.deadlines.holidays import HolidayCalendar, default_calendar
from pathway_kernel.models.deadlines import DeadlineSet
from pathway_kernel.models.facts import ExtractedFacts, SafeguardingConcern
from pathway_kernel.models.pathway import PathwayInstance
from pathway_kernel.models.workflow import (
    LetterPromptPayload,
    SessionView,
    TransitionDecision,
    TransitionVerdict,
    WorkflowEvent,
    WorkflowStatus,
)
from pathway_kernel.progress.inference import apply_progress
from pathway_kernel.router.resolver import resolve_for_facts
from pathway_kernel.workflow.letter_prompt import build_letter_prompt
from pathway_kernel.workflow.safeguarding import SafeguardingGate

logger = logging.getLogger(__name__)

# Forward transitions. Guards are applied by the event handlers.
TRANSITIONS: Dict[Tuple[WorkflowStatus, WorkflowEvent], WorkflowStatus] = {
    (WorkflowStatus.INTAKE, WorkflowEvent.FACTS_COMPLETE): WorkflowStatus.SUMMARY,
    (WorkflowStatus.SUMMARY, WorkflowEvent.CONFIRM_SUMMARY): WorkflowStatus.PATHWAY,
    (WorkflowStatus.PATHWAY, WorkflowEvent.REQUEST_LETTER): WorkflowStatus.LETTER,
}

# Once a pathway is resolved the facts it was built from are fixed.
FACTS_LOCKED = {WorkflowStatus.PATHWAY, WorkflowStatus.LETTER, WorkflowStatus.SIGNPOSTED}


class SessionBusyError(RuntimeError):
    """Raised when input arrives while an external call is outstanding."""
    pass


class SessionWorkflow:
    """
    One complaint session.

    Collaborators (catalog, calendar, gate) are injected so sessions can be
    built against a test catalog or a fixed holiday list.
    """

    def __init__(
        self,
        session_id: Optional[str] = None,
        catalog: Optional[PathwayCatalog] = None,
        calendar: Optional[HolidayCalendar] = None,
        gate: Optional[SafeguardingGate] = None,
        urgent_threshold_days: int = DEFAULT_URGENT_THRESHOLD_DAYS,
    ):
        self.session_id = session_id or str(uuid4())
        self.catalog = catalog or DEFAULT_CATALOG
        self.calendar = calendar or default_calendar()
        self.gate = gate or SafeguardingGate()
        self.urgent_threshold_days = urgent_threshold_days

        self.status = WorkflowStatus.INTAKE
        self.facts: Optional[ExtractedFacts] = None
        self.pathway: Optional[PathwayInstance] = None
        self.deadlines: Optional[DeadlineSet] = None
        self.busy = False
        self.epoch = 0
        self.history: List[TransitionDecision] = []
        self.signposted_concern: Optional[SafeguardingConcern] = None
        self._acknowledged = False

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------

    def _decide(
        self,
        event: WorkflowEvent,
        verdict: TransitionVerdict,
        to_status: Optional[WorkflowStatus] = None,
        reason: Optional[str] = None,
        detail: Optional[str] = None,
        concern: Optional[SafeguardingConcern] = None,
    ) -> TransitionDecision:
        from_status = self.status
        if to_status is not None:
            self.status = to_status

        decision = TransitionDecision(
            id=str(uuid4()),
            session_id=self.session_id,
            event=event,
            from_status=from_status,
            to_status=self.status,
            verdict=verdict,
            reason=reason,
            detail=detail,
            safeguarding_concern=concern,
            evaluated_at=datetime.now(timezone.utc),
        )
        self.history.append(decision)
        logger.info(
            "Session %s %s: %s -> %s (%s%s)",
            self.session_id, event.value, from_status.value, self.status.value,
            verdict.value, f", {reason}" if reason else "",
        )
        return decision

    def _reject_out_of_order(self, event: WorkflowEvent) -> TransitionDecision:
        return self._decide(
            event,
            TransitionVerdict.REJECTED,
            reason="invalid_transition",
            detail=f"'{event.value}' is not valid in state '{self.status.value}'",
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def submit_facts(self, facts: ExtractedFacts) -> TransitionDecision:
        """
        Store a facts record from the extraction layer.

        In intake a complete record moves the session to summary; in summary
        the record is amended in place. Any update invalidates an earlier
        acknowledgment of the safeguarding notice.
        """
        if self.busy:
            raise SessionBusyError(f"Session {self.session_id} is waiting on an external call")
        return self._apply_facts(facts)

    def _apply_facts(self, facts: ExtractedFacts) -> TransitionDecision:
        event = WorkflowEvent.FACTS_COMPLETE
        if self.status in FACTS_LOCKED:
            return self._decide(
                event,
                TransitionVerdict.REJECTED,
                reason="facts_locked",
                detail="Facts cannot change once a pathway is resolved; restart to begin again",
            )

        if self.status == WorkflowStatus.SUMMARY:
            if not facts.is_complete:
                return self._decide(
                    event,
                    TransitionVerdict.REJECTED,
                    reason="facts_incomplete",
                    detail="The amended record has no body type",
                )
            self.facts = facts
            self._acknowledged = False
            return self._decide(event, TransitionVerdict.APPROVED, reason="facts_updated")

        self.facts = facts
        self._acknowledged = False
        if not facts.is_complete:
            return self._decide(
                event,
                TransitionVerdict.REJECTED,
                reason="facts_incomplete",
                detail="A body type is needed before the summary can be shown",
            )
        return self._decide(event, TransitionVerdict.APPROVED, to_status=TRANSITIONS[(self.status, event)])

    def acknowledge_notice(self) -> TransitionDecision:
        """Record that the user has read the regulatory notice."""
        event = WorkflowEvent.ACKNOWLEDGE_NOTICE
        if self.status != WorkflowStatus.SUMMARY:
            return self._reject_out_of_order(event)

        concern = self.facts.safeguarding_concern
        if concern != SafeguardingConcern.REGULATORY:
            return self._decide(
                event,
                TransitionVerdict.REJECTED,
                reason="no_notice_pending",
                concern=concern,
            )

        self._acknowledged = True
        return self._decide(event, TransitionVerdict.APPROVED, reason="notice_acknowledged", concern=concern)

    def confirm_summary(self, today: Union[date, datetime, None] = None) -> TransitionDecision:
        """
        The user confirms the summary. The safeguarding gate rules first;
        on approval the pathway is resolved, progress applied and deadlines
        computed.
        """
        event = WorkflowEvent.CONFIRM_SUMMARY
        if self.status != WorkflowStatus.SUMMARY:
            return self._reject_out_of_order(event)

        ruling = self.gate.evaluate(self.facts, acknowledged=self._acknowledged)

        if ruling.verdict == TransitionVerdict.DIVERTED:
            self.signposted_concern = ruling.concern
            return self._decide(
                event,
                TransitionVerdict.DIVERTED,
                to_status=WorkflowStatus.SIGNPOSTED,
                reason=ruling.reason,
                detail="Serious concern: signposted, not processed as a complaint",
                concern=ruling.concern,
            )

        if ruling.verdict == TransitionVerdict.REJECTED:
            return self._decide(
                event,
                TransitionVerdict.REJECTED,
                reason=ruling.reason,
                detail="The regulatory notice must be acknowledged first",
                concern=ruling.concern,
            )

        template = resolve_for_facts(self.facts, self.catalog)
        self.pathway = apply_progress(template, self.facts.steps_taken)
        self.deadlines = compute_deadlines(
            self.facts,
            self.pathway,
            today=today,
            calendar=self.calendar,
            urgent_threshold_days=self.urgent_threshold_days,
        )
        # One-time gate: the acknowledgment is spent on this transition.
        self._acknowledged = False
        return self._decide(
            event,
            TransitionVerdict.APPROVED,
            to_status=TRANSITIONS[(self.status, event)],
            detail=f"Resolved {template.key} at step '{self.pathway.current_step.name}'",
            concern=ruling.concern,
        )

    def request_letter(self) -> TransitionDecision:
        event = WorkflowEvent.REQUEST_LETTER
        if self.status != WorkflowStatus.PATHWAY:
            return self._reject_out_of_order(event)
        if self.pathway is None:
            return self._decide(event, TransitionVerdict.REJECTED, reason="pathway_missing")
        return self._decide(event, TransitionVerdict.APPROVED, to_status=TRANSITIONS[(self.status, event)])

    def restart(self) -> TransitionDecision:
        """Return to intake from any state, discarding everything but the history."""
        self.facts = None
        self.pathway = None
        self.deadlines = None
        self.signposted_concern = None
        self._acknowledged = False
        self.busy = False
        self.epoch += 1
        return self._decide(WorkflowEvent.RESTART, TransitionVerdict.APPROVED, to_status=WorkflowStatus.INTAKE)

    # ------------------------------------------------------------------
    # External calls
    # ------------------------------------------------------------------

    def begin_external_call(self) -> int:
        """Mark the session busy. Returns the epoch token to complete with."""
        if self.busy:
            raise SessionBusyError(f"Session {self.session_id} already has an external call outstanding")
        self.busy = True
        return self.epoch

    def complete_external_call(
        self, token: int, facts: Optional[ExtractedFacts] = None
    ) -> Optional[TransitionDecision]:
        """
        Finish an external call. A stale token (the session restarted in the
        meantime) is discarded and returns None.
        """
        if token != self.epoch:
            logger.info(
                "Discarding stale result for session %s (token %d, epoch %d)",
                self.session_id, token, self.epoch,
            )
            return None
        self.busy = False
        if facts is None:
            return None
        return self._apply_facts(facts)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def acknowledgment_pending(self) -> bool:
        return (
            self.status == WorkflowStatus.SUMMARY
            and self.facts is not None
            and self.facts.safeguarding_concern == SafeguardingConcern.REGULATORY
            and not self._acknowledged
        )

    def letter_prompt(self) -> Optional[LetterPromptPayload]:
        """The drafting payload, once a pathway has been resolved."""
        if self.pathway is None or self.status not in (WorkflowStatus.PATHWAY, WorkflowStatus.LETTER):
            return None
        return build_letter_prompt(self.facts, self.pathway)

    def to_view(self) -> SessionView:
        return SessionView(
            session_id=self.session_id,
            status=self.status,
            facts=self.facts,
            pathway=self.pathway,
            deadlines=self.deadlines,
            busy=self.busy,
            epoch=self.epoch,
            acknowledgment_pending=self.acknowledgment_pending,
            signposted_concern=self.signposted_concern,
            history=list(self.history),
        )
