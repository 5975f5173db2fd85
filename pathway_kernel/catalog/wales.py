"""Welsh pathways. NHS concerns follow Putting Things Right; public services escalate to the PSOW."""

from pathway_kernel.catalog.ombudsmen import IOPC, PSOW, ombudsman_step
from pathway_kernel.models.pathway import PathwayTemplate, StepTemplate

NHS_DIRECT_WALES_URL = "https://www.nhsdirect.wales.nhs.uk/localservices/"
NHS_WALES_LEGISLATION = (
    "NHS (Concerns, Complaints and Redress Arrangements) (Wales) Regulations 2011, "
    "Public Services Ombudsman (Wales) Act 2019"
)


NHS_TRUST_WALES = PathwayTemplate(
    key="nhs_trust_wales",
    title="NHS Wales Complaint",
    description="Complaints about care received at an NHS Wales hospital or health board.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "NHS Wales complaints follow the Putting Things Right regulations with a 12-month "
        "time limit. The PSOW expects complaints within 12 months."
    ),
    pre_requirements=[
        "Under Putting Things Right, all NHS concerns in Wales go through the health board",
        "You do not need to go through PALS. Complain directly to the health board's concerns team",
    ],
    evidence_guidance=[
        "Dates of appointments, admissions, and discharges",
        "Names of staff involved if known",
        "Ward or department name",
        "NHS number",
        "Copies of any correspondence",
        "A timeline of events in your own words",
    ],
    steps=[
        StepTemplate(
            name="Formal Concern to the Health Board (Putting Things Right)",
            description=(
                "Submit a formal concern to the NHS health board under the Putting Things Right "
                "process. They must acknowledge within 2 working days."
            ),
            timeline_text="Investigation within 30 working days; complex cases may take longer",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If you are unhappy with the health board's response",
            portal_url=NHS_DIRECT_WALES_URL,
            postal_address="Concerns Team, [Health Board Name], [Address]",
            info_needed=[
                "Full name and contact details",
                "NHS number if available",
                "Date(s) of treatment or events",
                "Ward, department, or clinic name",
                "Clear description of what went wrong",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            PSOW,
            description="If unhappy with the health board's response, escalate to the PSOW.",
            info_needed=[
                "Copy of the health board's final response",
                "Your account of what happened",
                "How the situation has affected you",
                "What you want the PSOW to achieve",
            ],
        ),
    ],
    tips=[
        "Wales uses the Putting Things Right process for all NHS concerns",
        "Llais (formerly Community Health Council) can provide free advocacy",
        "Professional conduct issues can be reported to the GMC, NMC, or relevant regulator",
        "Keep copies of everything you send and receive",
    ],
    legislation=NHS_WALES_LEGISLATION,
)


GP_WALES = PathwayTemplate(
    key="gp_wales",
    title="GP Surgery Complaint (Wales)",
    description="Complaints about care from your GP surgery in Wales.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "The same 12-month Putting Things Right time limit applies. The PSOW expects "
        "complaints within 12 months."
    ),
    pre_requirements=[
        "Under Putting Things Right, you can complain to either the GP practice or the health board",
        "The health board manages complaints about GP services in its area",
    ],
    evidence_guidance=[
        "Date(s) of the appointment(s) in question",
        "Name of the GP or staff member if known",
        "NHS number",
        "Copies of any letters or test results",
        "Notes of what was said during consultations",
    ],
    steps=[
        StepTemplate(
            name="Complain to the GP Practice or Health Board",
            description=(
                "Under Putting Things Right, submit your concern to the GP practice or the local health board."
            ),
            timeline_text="Investigation within 30 working days",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If you are unhappy with the response",
            portal_url=NHS_DIRECT_WALES_URL,
            postal_address="Practice Manager, [Surgery Name], [Surgery Address]",
            info_needed=[
                "Your full name and contact details",
                "NHS number",
                "Date(s) of the appointment(s)",
                "Description of what happened",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            PSOW,
            description="Final escalation if local resolution fails.",
            info_needed=[
                "Copy of the final complaint response",
                "Your account of events",
                "How the situation affected you",
                "What you want the PSOW to achieve",
            ],
        ),
    ],
    tips=[
        "Llais (formerly CHC) can provide free advocacy in Wales",
        "If a GP's fitness to practise is in question, report to the GMC",
        "Keep copies of all correspondence",
    ],
    legislation=NHS_WALES_LEGISLATION,
)


COUNCIL_WALES = PathwayTemplate(
    key="council_wales",
    title="Council Services Complaint (Wales)",
    description="Complaints about Welsh council services (housing, planning, social services, etc.).",
    time_limit="12 months from the event (the PSOW expects complaints within 12 months)",
    time_limit_detail=(
        "Welsh councils follow a two-stage complaints process. The PSOW expects complaints "
        "within 12 months of the event."
    ),
    pre_requirements=[
        "Welsh councils follow a standard two-stage complaints process",
        "You must complete the council's process before going to the PSOW",
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
            name="Council Complaints (Stage 1: Informal/Early Resolution)",
            description="Contact the council to raise your complaint. Stage 1 aims for quick resolution.",
            timeline_text="Response within 10 working days",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If you are unhappy with the Stage 1 response",
            portal_url="https://www.gov.wales/local-authorities-in-wales",
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
            name="Council Complaints (Stage 2: Formal Investigation)",
            description="If unhappy with Stage 1, request a Stage 2 formal investigation.",
            timeline_text="Response within 20 working days",
            acknowledgment_timeline_text="5 working days",
            escalation_trigger="If you are still unhappy after Stage 2",
            info_needed=[
                "Your Stage 1 complaint reference",
                "Why you are unhappy with the Stage 1 response",
                "What outcome you want",
            ],
        ),
        ombudsman_step(
            PSOW,
            description="Once you've completed the council's process, the PSOW can investigate.",
            info_needed=[
                "Copy of the council's final complaint response",
                "Your account of events",
                "How the situation has affected you",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Welsh councils follow a standard two-stage complaints process",
        "Your local councillor can sometimes help",
        "Citizens Advice Cymru can provide free support",
        "Keep records of all correspondence",
    ],
    legislation="Public Services Ombudsman (Wales) Act 2019, Local Government Act 2000",
)


POLICE_WALES = PathwayTemplate(
    key="police_wales",
    title="Police Complaint (Wales)",
    description="Complaints about police officer conduct in a Welsh police force.",
    time_limit="12 months from the incident",
    time_limit_detail="You should complain within 12 months. The force has discretion to extend this.",
    pre_requirements=[
        "You can complain directly to the force, at any police station, or through the IOPC",
        "For less serious issues, local resolution may be offered",
    ],
    evidence_guidance=[
        "Officer name(s), collar/shoulder number(s), rank if known",
        "Date, time, and location of the incident",
        "Crime reference number or custody record number",
        "Names and contact details of witnesses",
        "Photographs of any injuries",
        "Your own written account",
    ],
    warnings=[
        "Serious matters (death, serious injury, corruption) may be referred directly to the IOPC",
    ],
    steps=[
        StepTemplate(
            name="Complain to the Police Force",
            description="Contact the force's Professional Standards Department.",
            timeline_text="Usually within 10-15 working days for initial response",
            acknowledgment_timeline_text="15 working days",
            escalation_trigger="If you are unhappy with how your complaint was handled",
            portal_url="https://www.police.uk/",
            postal_address="Professional Standards Department, [Force Name], [Force HQ Address]",
            info_needed=[
                "Your full name, address, and contact details",
                "Date, time, and location of the incident",
                "Name(s) or description(s) of officer(s)",
                "Detailed account of what happened",
                "Any reference numbers",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            IOPC,
            description="If unhappy with how your complaint was handled, request a review from the IOPC.",
            timeline_text="Varies; complex investigations can take months",
            escalation_trigger="The IOPC review is the final stage",
            info_needed=[
                "Copy of the force's response",
                "Why you are unhappy with the handling",
                "Any new evidence",
            ],
        ),
    ],
    tips=[
        "Wales has four police forces: South Wales, North Wales, Dyfed-Powys, and Gwent",
        "The IOPC covers police complaints in England and Wales",
        "You can also contact your Police and Crime Commissioner",
        "Ask the force to preserve body-worn camera footage",
    ],
    legislation="Police Reform Act 2002, Police (Complaints and Misconduct) Regulations 2020",
)


SOCIAL_CARE_WALES = PathwayTemplate(
    key="social_care_wales",
    title="Social Care Complaint (Wales)",
    description="Complaints about care homes, home care, or social services in Wales.",
    time_limit="12 months from the event",
    time_limit_detail=(
        "The PSOW expects complaints within 12 months of the event or of becoming aware of the issue."
    ),
    pre_requirements=[
        "Try raising the issue directly with the care provider first",
        "If the person is at immediate risk, contact adult safeguarding at your local council",
    ],
    evidence_guidance=[
        "Care plan documents",
        "Dates of specific incidents",
        "Names of care workers involved if known",
        "Photographs or relevant evidence",
        "Correspondence with the care provider",
    ],
    warnings=[
        "If someone is at immediate risk, contact the local authority safeguarding team or call 999",
    ],
    steps=[
        StepTemplate(
            name="Complain to the Care Provider",
            description="Raise your concern directly with the care home or home care provider.",
            timeline_text="Usually within 20 working days",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If the provider does not resolve your concern",
            portal_url="https://www.careinspectorate.wales/",
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
            name="Local Authority Social Services Complaints",
            description=(
                "If the care is commissioned by the council, complain through their social "
                "services complaints procedure."
            ),
            timeline_text="Follows the council's two-stage process",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If the council's process doesn't resolve your complaint",
            postal_address="Social Services Complaints, [Council Name], [Address]",
            info_needed=[
                "Full details including dates",
                "Name of the person receiving care and their consent",
                "Previous complaint correspondence",
            ],
        ),
        ombudsman_step(
            PSOW,
            description="If the council process doesn't resolve your complaint, escalate to the PSOW.",
            info_needed=[
                "Copy of the final complaint response",
                "Your account of why the response was unsatisfactory",
                "How the situation has affected the person",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Report serious safety concerns to Care Inspectorate Wales (CIW)",
        "Age Cymru and Llais can provide advocacy support",
        "Keep a diary of incidents with dates and details",
    ],
    legislation=(
        "Public Services Ombudsman (Wales) Act 2019, Social Services and Well-being (Wales) Act 2014"
    ),
)


TEMPLATES = [
    NHS_TRUST_WALES,
    GP_WALES,
    COUNCIL_WALES,
    POLICE_WALES,
    SOCIAL_CARE_WALES,
]
