"""
Safeguarding Gate — the sole enforcement point for serious concerns.

Behavioral Contract:
- Serious concerns (emergency, crime, child or adult safeguarding) are never
  approved; the caller is diverted to signposting
- A regulatory concern is approved only once the notice has been acknowledged
- With no concern recorded, confirmation alone is enough
- The gate does not classify free text; the concern arrives on the facts record
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from pathway_kernel.models.facts import ExtractedFacts, SafeguardingConcern
from pathway_kernel.models.workflow import GateDecision, SafeguardingSeverity, TransitionVerdict

logger = logging.getLogger(__name__)

SEVERITY = {
    SafeguardingConcern.NONE: SafeguardingSeverity.NONE,
    SafeguardingConcern.REGULATORY: SafeguardingSeverity.REGULATORY,
    SafeguardingConcern.EMERGENCY: SafeguardingSeverity.SERIOUS,
    SafeguardingConcern.CRIME: SafeguardingSeverity.SERIOUS,
    SafeguardingConcern.CHILD_SAFEGUARDING: SafeguardingSeverity.SERIOUS,
    SafeguardingConcern.ADULT_SAFEGUARDING: SafeguardingSeverity.SERIOUS,
}


class Signpost(BaseModel):
    """Where to send someone whose situation is not a routine complaint."""

    concern: SafeguardingConcern
    headline: str
    contacts: List[str]


SIGNPOSTS: Dict[SafeguardingConcern, Signpost] = {
    SafeguardingConcern.EMERGENCY: Signpost(
        concern=SafeguardingConcern.EMERGENCY,
        headline="If someone is in immediate danger, call 999 now",
        contacts=["Emergency services: 999", "NHS 111 for urgent medical advice"],
    ),
    SafeguardingConcern.CRIME: Signpost(
        concern=SafeguardingConcern.CRIME,
        headline="A possible crime should be reported to the police, not handled as a complaint",
        contacts=["Police non-emergency: 101", "Emergency services: 999", "Crimestoppers: 0800 555 111"],
    ),
    SafeguardingConcern.CHILD_SAFEGUARDING: Signpost(
        concern=SafeguardingConcern.CHILD_SAFEGUARDING,
        headline="Concerns about a child's safety go to children's services",
        contacts=["Your local council's children's services", "NSPCC helpline: 0808 800 5000"],
    ),
    SafeguardingConcern.ADULT_SAFEGUARDING: Signpost(
        concern=SafeguardingConcern.ADULT_SAFEGUARDING,
        headline="Concerns about an adult at risk go to the council's adult safeguarding team",
        contacts=["Your local council's adult safeguarding team", "Emergency services: 999"],
    ),
    SafeguardingConcern.REGULATORY: Signpost(
        concern=SafeguardingConcern.REGULATORY,
        headline="You can also tell the regulator about this alongside your complaint",
        contacts=[
            "Care Quality Commission (England)",
            "Healthcare Improvement Scotland / Care Inspectorate",
            "Healthcare Inspectorate Wales / Care Inspectorate Wales",
            "RQIA (Northern Ireland)",
        ],
    ),
}


def classify_concern(concern: SafeguardingConcern) -> SafeguardingSeverity:
    return SEVERITY[concern]


def signpost_for(concern: SafeguardingConcern) -> Optional[Signpost]:
    return SIGNPOSTS.get(concern)


class SafeguardingGate:
    """Rules on whether a confirmed summary may proceed to a pathway."""

    def evaluate(self, facts: ExtractedFacts, acknowledged: bool = False) -> GateDecision:
        concern = facts.safeguarding_concern
        severity = classify_concern(concern)

        if severity == SafeguardingSeverity.SERIOUS:
            logger.warning("Safeguarding concern %s blocks pathway; signposting", concern.value)
            return GateDecision(
                verdict=TransitionVerdict.DIVERTED,
                concern=concern,
                severity=severity,
                reason=f"safeguarding_{concern.value}",
            )

        if severity == SafeguardingSeverity.REGULATORY and not acknowledged:
            return GateDecision(
                verdict=TransitionVerdict.REJECTED,
                concern=concern,
                severity=severity,
                reason="acknowledgment_required",
                requires_acknowledgment=True,
            )

        return GateDecision(
            verdict=TransitionVerdict.APPROVED,
            concern=concern,
            severity=severity,
            requires_acknowledgment=severity == SafeguardingSeverity.REGULATORY,
        )
