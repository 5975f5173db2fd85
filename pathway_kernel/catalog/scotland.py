"""Scottish pathways. Public services escalate to the SPSO; police complaints to PIRC."""

from pathway_kernel.catalog.ombudsmen import SPSO, ombudsman_step
from pathway_kernel.models.pathway import PathwayTemplate, StepTemplate

NHS_INFORM_URL = (
    "https://www.nhsinform.scot/care-support-and-rights/health-rights/"
    "feedback-and-complaints/complaining-about-the-nhs/"
)
NHS_SCOTLAND_LEGISLATION = (
    "NHS Scotland Complaints Procedure, Scottish Public Services Ombudsman Act 2002"
)


NHS_TRUST_SCOTLAND = PathwayTemplate(
    key="nhs_trust_scotland",
    title="NHS Scotland Complaint",
    description="Complaints about care received at an NHS Scotland hospital or health board.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "NHS Scotland complaints follow the same 12-month time limit. The SPSO expects "
        "complaints within 12 months of the event or of becoming aware of the issue."
    ),
    pre_requirements=[
        "Complain to the NHS board or hospital directly first",
        "The board must respond before you can escalate to the SPSO",
    ],
    evidence_guidance=[
        "Dates of appointments, admissions, and discharges",
        "Names of staff involved if known",
        "Ward or department name",
        "CHI number (Community Health Index, Scotland's patient identifier)",
        "Copies of any correspondence",
        "A timeline of events in your own words",
    ],
    steps=[
        StepTemplate(
            name="Formal Complaint to the NHS Board",
            description=(
                "Write a formal complaint to the NHS board's complaints department. They must "
                "acknowledge within 3 working days."
            ),
            timeline_text="Response within 20 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are unhappy with the board's final response",
            portal_url=NHS_INFORM_URL,
            postal_address="Complaints Department, [NHS Board Name], [Address]",
            info_needed=[
                "Full name and contact details",
                "CHI number if available",
                "Date(s) of treatment or events",
                "Ward, department, or clinic name",
                "Clear description of what went wrong",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            SPSO,
            description=(
                "If unhappy with the NHS board's response, escalate to the SPSO. They investigate independently."
            ),
            info_needed=[
                "Copy of the NHS board's final complaint response",
                "Your account of what happened",
                "How the situation has affected you",
                "What you want the SPSO to achieve",
            ],
        ),
    ],
    tips=[
        "The SPSO expects complaints within 12 months of the event",
        "You can contact the Patient Advice and Support Service (PASS) for free advocacy",
        "Professional conduct issues can be reported to the GMC, NMC, or relevant regulator",
        "Keep copies of everything you send and receive",
    ],
    legislation=NHS_SCOTLAND_LEGISLATION,
)


GP_SCOTLAND = PathwayTemplate(
    key="gp_scotland",
    title="GP Surgery Complaint (Scotland)",
    description="Complaints about care from your GP surgery in Scotland.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail="The same 12-month time limit applies. The SPSO expects complaints within 12 months.",
    pre_requirements=[
        "Complain to the GP practice directly first",
        "You can also complain to your NHS board if you prefer not to complain to the practice",
    ],
    evidence_guidance=[
        "Date(s) of the appointment(s) in question",
        "Name of the GP or staff member if known",
        "CHI number",
        "Copies of any letters or test results",
        "Notes of what was said during consultations",
    ],
    steps=[
        StepTemplate(
            name="Complain to the GP Practice",
            description="Write to the practice manager. All GP surgeries must have a complaints procedure.",
            timeline_text="Response within 20 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are unhappy with the practice's response",
            portal_url=NHS_INFORM_URL,
            postal_address="Practice Manager, [Surgery Name], [Surgery Address]",
            info_needed=[
                "Your full name and contact details",
                "CHI number",
                "Date(s) of the appointment(s)",
                "Description of what happened",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            SPSO,
            description="Final escalation if local resolution fails.",
            info_needed=[
                "Copy of the final complaint response",
                "Your account of events",
                "How the situation affected you",
                "What you want the SPSO to achieve",
            ],
        ),
    ],
    tips=[
        "Contact the Patient Advice and Support Service (PASS) for free help",
        "If a GP's fitness to practise is in question, report to the GMC",
        "Keep copies of all correspondence",
    ],
    legislation=NHS_SCOTLAND_LEGISLATION,
)


COUNCIL_SCOTLAND = PathwayTemplate(
    key="council_scotland",
    title="Council Services Complaint (Scotland)",
    description="Complaints about Scottish council services (housing, planning, social work, etc.).",
    time_limit="12 months from the event (the SPSO expects complaints within 12 months)",
    time_limit_detail=(
        "Scottish councils follow a two-stage complaints procedure. The SPSO expects "
        "complaints within 12 months of the event."
    ),
    pre_requirements=[
        "Scottish councils have a standard two-stage complaints process",
        "You must complete the council's process before going to the SPSO",
    ],
    evidence_guidance=[
        "Reference numbers for council services",
        "Dates of contact with the council",
        "Copies of letters, emails, or online messages",
        "Names of council officers you dealt with",
        "Photographs if relevant",
    ],
    steps=[
        StepTemplate(
            name="Council Complaints (Stage 1: Frontline Resolution)",
            description="Contact the council's complaints team. Stage 1 aims for a quick resolution.",
            timeline_text="Response within 5 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are unhappy with the Stage 1 response",
            portal_url="https://www.mygov.scot/organisations",
            postal_address="Complaints Team, [Council Name], [Address]",
            info_needed=[
                "Full name, address, and contact details",
                "Service area the complaint relates to",
                "What happened and when",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Council Complaints (Stage 2: Investigation)",
            description=(
                "If unhappy with Stage 1, request a Stage 2 investigation. A more senior "
                "officer will investigate."
            ),
            timeline_text="Response within 20 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are still unhappy after Stage 2",
            info_needed=[
                "Your Stage 1 complaint reference",
                "Why you are unhappy with the Stage 1 response",
                "What outcome you want",
            ],
        ),
        ombudsman_step(
            SPSO,
            description="Once you've completed the council's process, the SPSO can investigate.",
            info_needed=[
                "Copy of the council's final complaint response",
                "Your account of events",
                "How the situation has affected you",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Scottish councils follow a standard two-stage complaints procedure",
        "Your local councillor can sometimes help escalate issues",
        "Citizens Advice Scotland can provide free support",
        "Keep records of all correspondence",
    ],
    legislation="Scottish Public Services Ombudsman Act 2002, Local Government (Scotland) Act 1973",
)


POLICE_SCOTLAND = PathwayTemplate(
    key="police_scotland",
    title="Police Scotland Complaint",
    description="Complaints about Police Scotland officer conduct, decisions, or service.",
    time_limit="12 months from the incident",
    time_limit_detail="You should complain within 12 months. Police Scotland has discretion to extend this.",
    pre_requirements=[
        "You can complain directly to Police Scotland, or through PIRC for serious matters",
        "For less serious issues, local resolution may be offered first",
    ],
    evidence_guidance=[
        "Officer name(s), collar/shoulder number(s), rank if known",
        "Date, time, and location of the incident",
        "Crime reference number or custody record number",
        "Names and contact details of witnesses",
        "Photographs of any injuries",
        "Your own written account made as soon as possible",
    ],
    warnings=[
        "Serious matters (death, serious injury, serious corruption) may be referred directly to PIRC",
    ],
    steps=[
        StepTemplate(
            name="Complain to Police Scotland",
            description="Contact Police Scotland's Professional Standards Department.",
            timeline_text="Usually within 15 working days for initial response",
            acknowledgment_timeline_text="15 working days",
            escalation_trigger="If you are unhappy with how your complaint was handled",
            portal_url="https://www.scotland.police.uk/about-us/how-to-complain/",
            postal_address=(
                "Professional Standards Department, Police Scotland, Tulliallan Castle, Kincardine FK10 4BE"
            ),
            info_needed=[
                "Your full name, address, and contact details",
                "Date, time, and location of the incident",
                "Name(s) or description(s) of officer(s)",
                "Detailed account of what happened",
                "Any reference numbers",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Police Investigations & Review Commissioner (PIRC)",
            description=(
                "If unhappy with Police Scotland's handling, you can request a review from "
                "PIRC. Serious matters may be referred directly."
            ),
            timeline_text="Varies; investigations can take months",
            acknowledgment_timeline_text="10 working days",
            escalation_trigger="PIRC is the final review stage for police complaints in Scotland",
            portal_url="https://pirc.scot/making-a-complaint/",
            postal_address="PIRC, Hamilton House, Hamilton Business Park, Caird Park, Hamilton ML3 0QA",
            info_needed=[
                "Copy of Police Scotland's response",
                "Why you are unhappy with the handling",
                "Any new evidence",
            ],
        ),
    ],
    tips=[
        "You have 12 months from the incident to complain",
        "For very serious matters, contact PIRC directly",
        "Keep a written record of events as soon as possible",
        "You can also contact the Scottish Police Authority",
    ],
    legislation=(
        "Police and Fire Reform (Scotland) Act 2012, Police Investigations & Review Commissioner"
    ),
)


SOCIAL_CARE_SCOTLAND = PathwayTemplate(
    key="social_care_scotland",
    title="Social Care Complaint (Scotland)",
    description="Complaints about care homes, home care, or local authority social work in Scotland.",
    time_limit="12 months from the event",
    time_limit_detail=(
        "The SPSO expects complaints within 12 months of the event or of becoming aware of the issue."
    ),
    pre_requirements=[
        "Try raising the issue directly with the care provider first",
        "If the person is at immediate risk, contact adult protection at your local council",
    ],
    evidence_guidance=[
        "Care plan documents",
        "Dates of specific incidents",
        "Names of care workers involved if known",
        "Photographs or relevant evidence",
        "Correspondence with the care provider",
    ],
    warnings=[
        "If someone is at immediate risk, contact the local authority adult protection team or call 999",
    ],
    steps=[
        StepTemplate(
            name="Complain to the Care Provider",
            description="Raise your concern directly with the care home or home care provider first.",
            timeline_text="Usually within 20 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If the provider does not resolve your concern",
            portal_url="https://www.careinspectorate.com/index.php/care-services",
            postal_address="[Care Provider Name], [Address]",
            info_needed=[
                "Name of the person receiving care",
                "Your relationship to them",
                "Dates and details of incidents",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Local Authority Social Work Complaints",
            description=(
                "If the care is commissioned by the council, complain through their social "
                "work complaints procedure."
            ),
            timeline_text="Varies; follows the council's two-stage process",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If the council's process doesn't resolve your complaint",
            postal_address="Social Work Complaints, [Council Name], [Address]",
            info_needed=[
                "Full details of the complaint including dates",
                "Name of the person receiving care and their consent",
                "Previous complaint correspondence",
            ],
        ),
        ombudsman_step(
            SPSO,
            description="If the council process doesn't resolve your complaint, escalate to the SPSO.",
            info_needed=[
                "Copy of the final complaint response",
                "Your account of why the response was unsatisfactory",
                "How the situation has affected the person",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Report serious safety concerns to the Care Inspectorate",
        "Scottish Independent Advocacy Alliance can help find local advocacy support",
        "Keep a diary of incidents with dates and details",
    ],
    legislation=(
        "Scottish Public Services Ombudsman Act 2002, Social Work (Scotland) Act 1968, "
        "Public Services Reform (Scotland) Act 2010"
    ),
)


TEMPLATES = [
    NHS_TRUST_SCOTLAND,
    GP_SCOTLAND,
    COUNCIL_SCOTLAND,
    POLICE_SCOTLAND,
    SOCIAL_CARE_SCOTLAND,
]
