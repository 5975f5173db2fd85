"""Extracted Facts — the structured complaint record supplied by the conversation layer."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class BodyType(str, Enum):
    NHS_TRUST = "nhs_trust"
    GP = "gp"
    SOCIAL_CARE = "social_care"
    COUNCIL = "council"
    POLICE = "police"
    SCHOOL = "school"
    DWP = "dwp"
    HMRC = "hmrc"
    OTHER_GOV = "other_gov"


class ComplaintType(str, Enum):
    DECISION = "decision"   # Disagrees with a decision (benefit, tax, planning...)
    SERVICE = "service"     # Unhappy with treatment, delays, conduct
    GENERAL = "general"


class Nation(str, Enum):
    ENGLAND = "England"
    SCOTLAND = "Scotland"
    WALES = "Wales"
    NORTHERN_IRELAND = "Northern Ireland"


class SafeguardingConcern(str, Enum):
    NONE = "none"
    EMERGENCY = "emergency"
    CRIME = "crime"
    CHILD_SAFEGUARDING = "child_safeguarding"
    ADULT_SAFEGUARDING = "adult_safeguarding"
    REGULATORY = "regulatory"


class ExtractedFacts(BaseModel):
    """
    Read-only input to the engine. Accepts the camelCase record produced by
    the extraction layer as well as snake_case field names.

    Only body_type, complaint_type, nation, the date fields, steps_taken and
    safeguarding_concern drive engine logic; the rest is carried for display
    and for letter prompt composition.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    body_type: Optional[str] = None         # Unknown values fall back to other_gov
    complaint_type: Optional[ComplaintType] = None
    nation: Optional[Nation] = None
    date_range: Optional[str] = None
    date_specific: Optional[str] = None
    steps_taken: Optional[str] = None
    safeguarding_concern: SafeguardingConcern = SafeguardingConcern.NONE

    public_body: Optional[str] = None
    service: Optional[str] = None
    issue: Optional[str] = None
    details: Optional[str] = None
    within_time_limit: Optional[str] = None     # "yes" | "at_risk" | "no" | "unknown"
    severity: Optional[str] = None              # "low" | "medium" | "high" | "urgent"
    desired_outcome: Optional[str] = None
    tried_direct_resolution: Optional[str] = None
    personal_impact: Optional[str] = None
    third_party: bool = False
    third_party_name: Optional[str] = None
    reference_numbers: Optional[str] = None
    staff_involved: Optional[str] = None
    legal_action_status: Optional[str] = None
    contact_preference: Optional[str] = None
    additional_notes: Optional[str] = None

    @field_validator("body_type", mode="before")
    @classmethod
    def _normalize_body_type(cls, value):
        if value is None:
            return None
        value = str(value).strip().lower()
        return value or None

    @field_validator("complaint_type", mode="before")
    @classmethod
    def _normalize_complaint_type(cls, value):
        if value is None or isinstance(value, ComplaintType):
            return value
        value = str(value).strip().lower()
        return value if value in {c.value for c in ComplaintType} else None

    @field_validator("nation", mode="before")
    @classmethod
    def _normalize_nation(cls, value):
        if value is None or isinstance(value, Nation):
            return value
        wanted = str(value).strip().lower()
        for nation in Nation:
            if nation.value.lower() == wanted:
                return nation
        return None

    @field_validator("safeguarding_concern", mode="before")
    @classmethod
    def _normalize_concern(cls, value):
        # Unknown classifications are left to fail validation: a concern is
        # never silently downgraded to "none".
        if value is None:
            return SafeguardingConcern.NONE
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("third_party", mode="before")
    @classmethod
    def _normalize_third_party(cls, value):
        return False if value is None else value

    @property
    def is_complete(self) -> bool:
        """The record is usable for routing once a body type is known."""
        return self.body_type is not None
