"""Northern Ireland pathways. Public services escalate to NIPSO; police complaints go straight to the Police Ombudsman."""

from pathway_kernel.catalog.ombudsmen import NIPSO, ombudsman_step
from pathway_kernel.models.pathway import PathwayTemplate, StepTemplate

HSC_ONLINE_URL = "https://online.hscni.net/"
NIPSO_FINAL = "NIPSO is the final stage"
HSC_LEGISLATION = (
    "Health and Social Care (Reform) Act (NI) 2009, Commissioner for Complaints (NI) Order 1996"
)


NHS_TRUST_NI = PathwayTemplate(
    key="nhs_trust_ni",
    title="Health & Social Care Complaint (Northern Ireland)",
    description="Complaints about care received at an HSC trust in Northern Ireland.",
    time_limit="6 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "The Northern Ireland Ombudsman expects complaints within 6 months of the trust's "
        "final response. The trust itself expects complaints within 12 months of the event, "
        "but may accept late complaints at its discretion."
    ),
    pre_requirements=[
        "Complain to the HSC trust directly first",
        "The trust must respond before you can escalate to the NI Ombudsman",
    ],
    evidence_guidance=[
        "Dates of appointments, admissions, and discharges",
        "Names of staff involved if known",
        "Ward or department name",
        "Health and Care Number (HCN)",
        "Copies of any correspondence",
        "A timeline of events in your own words",
    ],
    steps=[
        StepTemplate(
            name="Formal Complaint to the HSC Trust",
            description="Write a formal complaint to the HSC trust's complaints department.",
            timeline_text="Acknowledgment within 2 working days; response usually within 20 working days",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If you are unhappy with the trust's final response",
            portal_url=HSC_ONLINE_URL,
            postal_address="Complaints Department, [HSC Trust Name], [Address]",
            info_needed=[
                "Full name and contact details",
                "Health and Care Number if available",
                "Date(s) of treatment or events",
                "Ward, department, or clinic name",
                "Clear description of what went wrong",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            NIPSO,
            description="If unhappy with the trust's response, escalate to NIPSO.",
            escalation_trigger=NIPSO_FINAL,
            info_needed=[
                "Copy of the trust's final complaint response",
                "Your account of what happened",
                "How the situation has affected you",
                "What you want NIPSO to achieve",
            ],
        ),
    ],
    tips=[
        "The Patient and Client Council (PCC) provides free advocacy for health complaints in NI",
        "Professional conduct issues can be reported to the GMC, NMC, or relevant regulator",
        "Keep copies of everything you send and receive",
    ],
    legislation=(
        "Health and Social Care (Reform) Act (Northern Ireland) 2009, "
        "Commissioner for Complaints (NI) Order 1996"
    ),
)


GP_NI = PathwayTemplate(
    key="gp_ni",
    title="GP Surgery Complaint (Northern Ireland)",
    description="Complaints about care from your GP surgery in Northern Ireland.",
    time_limit="6 months from the final response to escalate to NIPSO",
    time_limit_detail=(
        "Complain to the GP practice within 12 months of the event. NIPSO expects referrals "
        "within 6 months of the final response."
    ),
    pre_requirements=[
        "Complain to the GP practice directly first",
        "You can also contact the HSC Board for assistance",
    ],
    evidence_guidance=[
        "Date(s) of the appointment(s)",
        "Name of the GP or staff member if known",
        "Health and Care Number",
        "Copies of any letters or test results",
        "Notes of what was said during consultations",
    ],
    steps=[
        StepTemplate(
            name="Complain to the GP Practice",
            description="Write to the practice manager.",
            timeline_text="Response usually within 20 working days",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If you are unhappy with the practice's response",
            portal_url=HSC_ONLINE_URL,
            postal_address="Practice Manager, [Surgery Name], [Surgery Address]",
            info_needed=[
                "Your full name and contact details",
                "Health and Care Number",
                "Date(s) of the appointment(s)",
                "Description of what happened",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            NIPSO,
            description="Final escalation if local resolution fails.",
            escalation_trigger=NIPSO_FINAL,
            info_needed=[
                "Copy of the final complaint response",
                "Your account of events",
                "How the situation affected you",
                "What you want NIPSO to achieve",
            ],
        ),
    ],
    tips=[
        "The Patient and Client Council (PCC) can help with complaints in NI",
        "If a GP's fitness to practise is in question, report to the GMC",
        "Keep copies of all correspondence",
    ],
    legislation=HSC_LEGISLATION,
)


COUNCIL_NI = PathwayTemplate(
    key="council_ni",
    title="Council Services Complaint (Northern Ireland)",
    description="Complaints about Northern Ireland council services.",
    time_limit="6 months from the final response to escalate to NIPSO",
    time_limit_detail=(
        "Complain to the council first. NIPSO expects referrals within 6 months of the "
        "council's final response."
    ),
    pre_requirements=[
        "You must complete the council's internal complaints process before going to NIPSO",
        "Contact the relevant department first",
    ],
    evidence_guidance=[
        "Reference numbers for council services",
        "Dates of contact with the council",
        "Copies of letters, emails, or online messages",
        "Names of council officers you dealt with",
    ],
    steps=[
        StepTemplate(
            name="Council Complaints Procedure",
            description=(
                "Submit a formal complaint to the council. Most NI councils have an online complaints form."
            ),
            timeline_text="Response usually within 15-20 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are unhappy with the council's response",
            portal_url="https://www.nidirect.gov.uk/contacts/local-councils-in-northern-ireland",
            postal_address="Complaints Team, [Council Name], [Address]",
            info_needed=[
                "Full name, address, and contact details",
                "Service area the complaint relates to",
                "What happened and when",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            NIPSO,
            description="Once you've exhausted the council's process, NIPSO can investigate.",
            escalation_trigger=NIPSO_FINAL,
            info_needed=[
                "Copy of the council's final complaint response",
                "Your account of events",
                "How the situation has affected you",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Northern Ireland has 11 councils",
        "Your local councillor can sometimes help",
        "Advice NI can provide free support",
        "Keep records of all correspondence",
    ],
    legislation=(
        "Commissioner for Complaints (NI) Order 1996, Local Government Act (Northern Ireland) 2014"
    ),
)


# Single-step pathway: the Police Ombudsman is both entry point and final stage.
POLICE_NI = PathwayTemplate(
    key="police_ni",
    title="PSNI Complaint (Northern Ireland)",
    description="Complaints about PSNI officer conduct, decisions, or service.",
    time_limit="12 months from the incident",
    time_limit_detail=(
        "You should complain within 12 months. The Police Ombudsman has discretion to extend this."
    ),
    pre_requirements=[
        "In Northern Ireland, police complaints go to the Police Ombudsman, not the force itself",
        "The Police Ombudsman for Northern Ireland is independent of the PSNI",
    ],
    evidence_guidance=[
        "Officer name(s), service number(s), rank if known",
        "Date, time, and location of the incident",
        "Crime reference number or custody record number",
        "Names and contact details of witnesses",
        "Photographs of any injuries",
        "Your own written account",
    ],
    warnings=[
        "In NI, complaints about police go directly to the Police Ombudsman, not to the PSNI itself",
    ],
    steps=[
        StepTemplate(
            name="Police Ombudsman for Northern Ireland",
            description=(
                "Submit your complaint directly to the Police Ombudsman. They investigate all "
                "complaints about PSNI officers independently."
            ),
            timeline_text="Varies by complexity; they will explain the expected timeline",
            acknowledgment_timeline_text="5 working days",
            escalation_trigger=(
                "If you are unhappy with the Ombudsman's findings, you may seek judicial review"
            ),
            portal_url="https://www.policeombudsman.org/Make-a-Complaint",
            postal_address=(
                "Police Ombudsman for Northern Ireland, New Cathedral Buildings, "
                "11 Church Street, Belfast BT1 1PG"
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
    ],
    tips=[
        "The Police Ombudsman is independent. Complaints do not go through the PSNI",
        "You can make a complaint in person, by phone, by email, or online",
        "The Ombudsman can investigate current and historical complaints",
        "You can get free legal advice from a solicitor specialising in police complaints",
    ],
    legislation="Police (Northern Ireland) Act 1998, Police (Northern Ireland) Act 2000",
)


SOCIAL_CARE_NI = PathwayTemplate(
    key="social_care_ni",
    title="Social Care Complaint (Northern Ireland)",
    description=(
        "Complaints about care homes, home care, or HSC trust social services in Northern Ireland."
    ),
    time_limit="6 months from the final response to escalate to NIPSO",
    time_limit_detail=(
        "Complain to the HSC trust or care provider first. NIPSO expects referrals within 6 "
        "months of the final response."
    ),
    pre_requirements=[
        "Try raising the issue directly with the care provider or HSC trust first",
        "If the person is at immediate risk, contact adult safeguarding",
    ],
    evidence_guidance=[
        "Care plan documents",
        "Dates of specific incidents",
        "Names of care workers involved if known",
        "Photographs or relevant evidence",
        "Correspondence with the care provider",
    ],
    warnings=[
        "If someone is at immediate risk, contact the HSC trust adult safeguarding team or call 999",
    ],
    steps=[
        StepTemplate(
            name="Complain to the Care Provider or HSC Trust",
            description=(
                "Raise your concern with the care provider or the HSC trust's complaints department."
            ),
            timeline_text="Usually within 20 working days",
            acknowledgment_timeline_text="2 working days",
            escalation_trigger="If the provider or trust does not resolve your concern",
            portal_url="https://www.rqia.org.uk/services/",
            postal_address="[Care Provider Name / HSC Trust], [Address]",
            info_needed=[
                "Name of the person receiving care",
                "Your relationship to them",
                "Dates and details of incidents",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            NIPSO,
            description=(
                "If the provider/trust process doesn't resolve your complaint, escalate to NIPSO."
            ),
            escalation_trigger=NIPSO_FINAL,
            info_needed=[
                "Copy of the final complaint response",
                "Your account of why the response was unsatisfactory",
                "How the situation has affected the person",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Report serious safety concerns to the Regulation and Quality Improvement Authority (RQIA)",
        "The Patient and Client Council can provide advocacy support",
        "Keep a diary of incidents with dates and details",
    ],
    legislation=HSC_LEGISLATION,
)


TEMPLATES = [NHS_TRUST_NI, GP_NI, COUNCIL_NI, POLICE_NI, SOCIAL_CARE_NI]
