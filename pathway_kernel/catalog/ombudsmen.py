"""
Shared escalation bodies.

Independent ombudsmen and reviewers appear as the final step of many
pathways. Their contact surface is declared once here and stamped into each
template by `ombudsman_step`, which returns an independent StepTemplate so
every pathway stays separately editable.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from pathway_kernel.models.pathway import StepTemplate


class EscalationBody(BaseModel):
    """Contact surface for an independent complaints body."""

    model_config = ConfigDict(frozen=True)

    name: str
    short_name: str
    contact_email: Optional[str] = None
    portal_url: Optional[str] = None
    postal_address: Optional[str] = None
    acknowledgment_timeline_text: str = "5 working days"

    @property
    def final_stage(self) -> str:
        return f"The {self.short_name} is the final stage"


PHSO = EscalationBody(
    name="Parliamentary and Health Service Ombudsman (PHSO)",
    short_name="PHSO",
    contact_email="phso.enquiries@ombudsman.org.uk",
    portal_url="https://www.ombudsman.org.uk/making-complaint",
    postal_address=(
        "Parliamentary and Health Service Ombudsman, Millbank Tower, "
        "Millbank, London SW1P 4QP"
    ),
)

LGSCO = EscalationBody(
    name="Local Government & Social Care Ombudsman (LGSCO)",
    short_name="LGSCO",
    portal_url="https://www.lgo.org.uk/make-a-complaint",
    postal_address="Local Government and Social Care Ombudsman, PO Box 4771, Coventry CV4 0EH",
)

SPSO = EscalationBody(
    name="Scottish Public Services Ombudsman (SPSO)",
    short_name="SPSO",
    portal_url="https://www.spso.org.uk/complain/form/start",
    postal_address="SPSO, Bridgeside House, 99 McDonald Road, Edinburgh EH7 4NS",
)

PSOW = EscalationBody(
    name="Public Services Ombudsman for Wales (PSOW)",
    short_name="PSOW",
    contact_email="ask@ombudsman.wales",
    portal_url="https://www.ombudsman.wales/make-a-complaint/",
    postal_address="Public Services Ombudsman for Wales, 1 Ffordd yr Hen Gae, Pencoed CF35 5LJ",
)

NIPSO = EscalationBody(
    name="Northern Ireland Public Services Ombudsman (NIPSO)",
    short_name="NIPSO",
    contact_email="nipso@nipso.org.uk",
    portal_url="https://nipso.org.uk/complain",
    postal_address="NIPSO, Progressive House, 33 Wellington Place, Belfast BT1 6HN",
)

IOPC = EscalationBody(
    name="Independent Office for Police Conduct (IOPC)",
    short_name="IOPC",
    contact_email="enquiries@policeconduct.gov.uk",
    portal_url="https://www.policeconduct.gov.uk/complaints/make-a-complaint",
    postal_address=(
        "Independent Office for Police Conduct, 10 South Colonnade, "
        "Canary Wharf, London E14 4PU"
    ),
    acknowledgment_timeline_text="15 working days",
)


def ombudsman_step(
    body: EscalationBody,
    description: str,
    info_needed: List[str],
    timeline_text: str = "Investigation can take several months",
    escalation_trigger: Optional[str] = None,
) -> StepTemplate:
    """Build the escalation step for `body`. Never the default entry point."""
    return StepTemplate(
        name=body.name,
        description=description,
        timeline_text=timeline_text,
        acknowledgment_timeline_text=body.acknowledgment_timeline_text,
        escalation_trigger=escalation_trigger or body.final_stage,
        portal_url=body.portal_url,
        postal_address=body.postal_address,
        contact_email=body.contact_email,
        info_needed=list(info_needed),
    )
