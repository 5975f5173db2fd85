"""Pathway Templates and Instances — the escalation routes a complaint can take."""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class PathwayInvariantError(ValueError):
    """Raised when a pathway breaks its step invariants."""
    pass


class TimingUnit(str, Enum):
    WORKING_DAYS = "working_days"
    MONTHS = "months"


class TimingRule(BaseModel):
    """Canonical timing rule derived from a human timeline string."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=1)
    unit: TimingUnit
    source_text: str


_WORKING_DAYS_PATTERN = re.compile(r"(\d+)\s+working\s+days?", re.IGNORECASE)
_MONTHS_PATTERN = re.compile(r"(\d+)\s+months?", re.IGNORECASE)
_SUBMISSION_PATTERN = re.compile(r"\b(1|6|12)\s+months?\b", re.IGNORECASE)


def parse_timing_rule(text: Optional[str]) -> Optional[TimingRule]:
    """
    Derive a canonical rule from timing text such as "3-5 working days".

    Working-day mentions win over month mentions. When a text carries several
    figures ("acknowledgement within 3 working days; response within 10-25
    working days") the last one is the outer commitment and is used.
    """
    if not text:
        return None

    matches = _WORKING_DAYS_PATTERN.findall(text)
    if matches and int(matches[-1]) > 0:
        return TimingRule(amount=int(matches[-1]), unit=TimingUnit.WORKING_DAYS, source_text=text)

    matches = _MONTHS_PATTERN.findall(text)
    if matches and int(matches[-1]) > 0:
        return TimingRule(amount=int(matches[-1]), unit=TimingUnit.MONTHS, source_text=text)

    return None


def parse_submission_months(time_limit: Optional[str]) -> Optional[int]:
    """Match a "1 month", "6 months" or "12 months" submission window."""
    if not time_limit:
        return None
    match = _SUBMISSION_PATTERN.search(time_limit)
    return int(match.group(1)) if match else None


class StepTemplate(BaseModel):
    """One stage in a pathway, as published in the catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    timeline_text: str
    acknowledgment_timeline_text: Optional[str] = None
    escalation_trigger: str = ""
    portal_url: Optional[str] = None        # Opaque, never validated
    postal_address: Optional[str] = None    # May contain [Placeholders]
    contact_email: Optional[str] = None
    info_needed: List[str] = []
    is_default_current: bool = False

    @computed_field
    @property
    def timing_rule(self) -> Optional[TimingRule]:
        return parse_timing_rule(self.timeline_text)

    @computed_field
    @property
    def acknowledgment_rule(self) -> Optional[TimingRule]:
        return parse_timing_rule(self.acknowledgment_timeline_text)


class PathwayStep(StepTemplate):
    """A step inside a session's pathway instance. Carries the current marker."""

    model_config = ConfigDict(frozen=False)

    current: bool = False


class _PathwayBase(BaseModel):
    key: str                                # e.g., "nhs_trust", "police_scotland"
    title: str
    description: str
    time_limit: str = ""
    time_limit_detail: str = ""
    pre_requirements: List[str] = []
    evidence_guidance: List[str] = []
    warnings: List[str] = []
    tips: List[str] = []
    legislation: str = ""

    @computed_field
    @property
    def submission_months(self) -> Optional[int]:
        return parse_submission_months(self.time_limit)


class PathwayTemplate(_PathwayBase):
    """
    Immutable catalog entry for one (body type, nation) combination.

    Invariant: at least one step, and exactly one step flagged as the
    default entry point.
    """

    model_config = ConfigDict(frozen=True)

    steps: List[StepTemplate]

    @model_validator(mode="after")
    def _check_steps(self) -> "PathwayTemplate":
        if not self.steps:
            raise PathwayInvariantError(f"Pathway '{self.key}' has no steps")
        defaults = sum(1 for s in self.steps if s.is_default_current)
        if defaults != 1:
            raise PathwayInvariantError(
                f"Pathway '{self.key}' has {defaults} default steps, expected exactly 1"
            )
        return self

    @property
    def default_index(self) -> int:
        return next(i for i, s in enumerate(self.steps) if s.is_default_current)

    def instantiate(self, current_index: Optional[int] = None) -> "PathwayInstance":
        """Deep-copy this template into a session-local instance."""
        if current_index is None:
            current_index = self.default_index
        if not 0 <= current_index < len(self.steps):
            raise PathwayInvariantError(
                f"Step index {current_index} out of range for pathway '{self.key}'"
            )

        data = self.model_dump(exclude={"submission_months"})
        steps = []
        for i, step in enumerate(data.pop("steps")):
            step.pop("timing_rule", None)
            step.pop("acknowledgment_rule", None)
            steps.append(PathwayStep(**step, current=(i == current_index)))
        return PathwayInstance(**data, steps=steps)


class PathwayInstance(_PathwayBase):
    """
    Session-scoped mutable copy of a PathwayTemplate.

    Invariant: exactly one step has current=True at all times.
    """

    steps: List[PathwayStep]

    @model_validator(mode="after")
    def _check_current(self) -> "PathwayInstance":
        self.check_invariants()
        return self

    def check_invariants(self) -> None:
        if not self.steps:
            raise PathwayInvariantError(f"Pathway instance '{self.key}' has no steps")
        marked = sum(1 for s in self.steps if s.current)
        if marked != 1:
            raise PathwayInvariantError(
                f"Pathway instance '{self.key}' has {marked} current steps, expected exactly 1"
            )

    @property
    def current_index(self) -> int:
        return next(i for i, s in enumerate(self.steps) if s.current)

    @property
    def current_step(self) -> PathwayStep:
        return self.steps[self.current_index]

    def set_current(self, index: int) -> None:
        """Move the current marker, clearing every other step."""
        if not 0 <= index < len(self.steps):
            raise PathwayInvariantError(
                f"Step index {index} out of range for pathway '{self.key}'"
            )
        for i, step in enumerate(self.steps):
            step.current = i == index
        self.check_invariants()
