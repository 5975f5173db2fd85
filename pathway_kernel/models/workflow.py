"""Workflow models — session status, transition events and decisions."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from pathway_kernel.models.deadlines import DeadlineSet
from pathway_kernel.models.facts import ExtractedFacts, SafeguardingConcern
from pathway_kernel.models.pathway import PathwayInstance


class WorkflowStatus(str, Enum):
    INTAKE = "intake"
    SUMMARY = "summary"
    PATHWAY = "pathway"
    LETTER = "letter"
    SIGNPOSTED = "signposted"   # Terminal: serious concern, signposted not processed


class WorkflowEvent(str, Enum):
    FACTS_COMPLETE = "facts_complete"
    ACKNOWLEDGE_NOTICE = "acknowledge_notice"
    CONFIRM_SUMMARY = "confirm_summary"
    REQUEST_LETTER = "request_letter"
    RESTART = "restart"


class TransitionVerdict(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"
    DIVERTED = "diverted"


class SafeguardingSeverity(str, Enum):
    NONE = "none"
    REGULATORY = "regulatory"   # Proceed only after the notice is acknowledged
    SERIOUS = "serious"         # Never proceed; signpost elsewhere


class GateDecision(BaseModel):
    """The safeguarding gate's ruling on a summary confirmation."""

    verdict: TransitionVerdict
    concern: SafeguardingConcern
    severity: SafeguardingSeverity
    reason: Optional[str] = None            # Machine-readable
    requires_acknowledgment: bool = False


class TransitionDecision(BaseModel):
    """Structured outcome of every attempted workflow transition."""

    id: str
    session_id: str
    event: WorkflowEvent
    from_status: WorkflowStatus
    to_status: WorkflowStatus
    verdict: TransitionVerdict
    reason: Optional[str] = None            # Machine-readable
    detail: Optional[str] = None            # Human-readable, for logs and operators
    safeguarding_concern: Optional[SafeguardingConcern] = None
    evaluated_at: datetime


class LetterPromptPayload(BaseModel):
    """Everything the text-generation collaborator needs to draft a letter."""

    system_prompt: str
    user_prompt: str
    pathway_key: str
    pathway_title: str
    legislation: str
    directed_to: str                        # Name of the current step


class SessionView(BaseModel):
    """Read-only snapshot of a session for the presentation layer."""

    session_id: str
    status: WorkflowStatus
    facts: Optional[ExtractedFacts] = None
    pathway: Optional[PathwayInstance] = None
    deadlines: Optional[DeadlineSet] = None
    busy: bool = False
    epoch: int = 0
    acknowledgment_pending: bool = False
    signposted_concern: Optional[SafeguardingConcern] = None    # Set only when signposted
    history: List[TransitionDecision] = []
