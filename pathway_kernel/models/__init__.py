"""Pathway Kernel data models."""

from pathway_kernel.models.config import KernelConfig
from pathway_kernel.models.deadlines import DeadlineSet
from pathway_kernel.models.facts import (
    BodyType,
    ComplaintType,
    ExtractedFacts,
    Nation,
    SafeguardingConcern,
)
from pathway_kernel.models.pathway import (
    PathwayInstance,
    PathwayInvariantError,
    PathwayStep,
    PathwayTemplate,
    StepTemplate,
    TimingRule,
    TimingUnit,
    parse_submission_months,
    parse_timing_rule,
)
from pathway_kernel.models.workflow import (
    GateDecision,
    LetterPromptPayload,
    SafeguardingSeverity,
    SessionView,
    TransitionDecision,
    TransitionVerdict,
    WorkflowEvent,
    WorkflowStatus,
)

__all__ = [
    "BodyType",
    "ComplaintType",
    "DeadlineSet",
    "ExtractedFacts",
    "GateDecision",
    "KernelConfig",
    "LetterPromptPayload",
    "Nation",
    "PathwayInstance",
    "PathwayInvariantError",
    "PathwayStep",
    "PathwayTemplate",
    "SafeguardingConcern",
    "SafeguardingSeverity",
    "SessionView",
    "StepTemplate",
    "TimingRule",
    "TimingUnit",
    "TransitionDecision",
    "TransitionVerdict",
    "WorkflowEvent",
    "WorkflowStatus",
    "parse_submission_months",
    "parse_timing_rule",
]
