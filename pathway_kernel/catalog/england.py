"""Base pathways. These apply in England and wherever no nation-specific variant exists."""

from pathway_kernel.catalog.ombudsmen import IOPC, LGSCO, PHSO, ombudsman_step
from pathway_kernel.models.pathway import PathwayTemplate, StepTemplate

NHS_COMPLAINTS_REGULATIONS = (
    "NHS Constitution, Local Authority Social Services and NHS Complaints Regulations 2009"
)


NHS_TRUST = PathwayTemplate(
    key="nhs_trust",
    title="NHS Hospital/Trust Complaint",
    description="Complaints about care received at an NHS hospital or trust.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "The NHS complaints regulations set a 12-month time limit from the date of the "
        "event, or from the date you first became aware of the matter. The trust can "
        "extend this if there are good reasons and it is still possible to investigate."
    ),
    pre_requirements=[
        "Consider contacting PALS first for informal resolution. Many issues can be resolved quickly this way",
        "If you want a formal investigation, you can skip PALS and go straight to a written complaint",
    ],
    evidence_guidance=[
        "Dates of appointments, admissions, and discharges",
        "Names of staff involved (doctors, nurses, consultants) if known",
        "Ward or department name",
        "NHS number (found on appointment letters or your GP record)",
        "Copies of any correspondence (letters, discharge summaries)",
        "Photographs of injuries or conditions if relevant",
        "Names of any witnesses",
        "A timeline of events in your own words",
    ],
    steps=[
        StepTemplate(
            name="PALS (Patient Advice & Liaison Service)",
            description=(
                "Contact the hospital's PALS team for informal resolution. They can often "
                "resolve issues quickly without a formal complaint."
            ),
            timeline_text="Usually responds within a few days",
            acknowledgment_timeline_text="Same day or next working day",
            escalation_trigger="If PALS cannot resolve your concern, or you want a formal investigation",
            portal_url="https://www.nhs.uk/nhs-services/hospitals/what-is-pals-patient-advice-and-liaison-service/",
            postal_address="[Hospital Name] PALS, [Hospital Address]",
            info_needed=[
                "Your name and contact details",
                "NHS number if available",
                "Brief description of your concern",
                "Dates and department involved",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Formal Complaint to the Trust",
            description=(
                "Write a formal complaint to the trust's complaints department. They must "
                "acknowledge within 3 working days and agree a response timescale with you."
            ),
            timeline_text="Response within 6 months (often 25-40 working days)",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are unhappy with the trust's final response",
            portal_url="https://www.nhs.uk/nhs-services/hospitals/",
            postal_address="Complaints Department, [Trust Name], [Trust Address]",
            info_needed=[
                "Full name and contact details",
                "NHS number",
                "Date(s) of treatment or events",
                "Ward, department, or clinic name",
                "Names of staff involved if known",
                "Clear description of what went wrong",
                "How it affected you",
                "What outcome you want (e.g. apology, explanation, change in practice)",
                "Whether you are complaining on behalf of someone else (include their consent)",
            ],
        ),
        ombudsman_step(
            PHSO,
            description=(
                "If unhappy with the trust's response, escalate to the PHSO. They investigate "
                "independently and can recommend remedies."
            ),
            timeline_text="Investigation can take 6-12 months",
            escalation_trigger=(
                "The PHSO is the final stage. Their decisions can be challenged only by judicial review"
            ),
            info_needed=[
                "Copy of the trust's final complaint response",
                "Your account of what happened and why you are unhappy with the response",
                "How the situation has affected you personally (emotionally, physically, financially)",
                "What you want the PHSO to achieve",
                "Consent form if complaining on behalf of someone else",
            ],
        ),
    ],
    tips=[
        "You have 12 months from the event (or awareness) to make a formal complaint",
        "You can complain to the trust and CQC simultaneously",
        "Consider contacting your local Healthwatch for free advocacy support",
        "If there's a professional conduct issue, you can also report to the GMC (doctors), "
        "NMC (nurses), or HCPC (other professionals)",
        "Keep copies of everything you send and receive",
    ],
    legislation=NHS_COMPLAINTS_REGULATIONS,
)


GP = PathwayTemplate(
    key="gp",
    title="GP Surgery Complaint",
    description="Complaints about care from your GP surgery or a specific GP.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "The same 12-month NHS complaints time limit applies. Your GP practice or ICB can "
        "use discretion to extend this if there are good reasons."
    ),
    pre_requirements=[
        "You can choose to complain to either the GP practice directly or to your local ICB, "
        "but not both simultaneously for the same issue",
        "Consider speaking to the practice manager informally first if the issue is straightforward",
    ],
    evidence_guidance=[
        "Date(s) of the appointment(s) in question",
        "Name of the GP or staff member if known",
        "NHS number",
        "Copies of any letters or test results",
        "Prescription details if relevant",
        "Notes of what was said during consultations (written as soon as possible after the event)",
    ],
    steps=[
        StepTemplate(
            name="Complain to the GP Practice",
            description="Write to the practice manager. All GP surgeries must have a published complaints procedure.",
            timeline_text="Acknowledgement within 3 working days; response usually within 10-25 working days",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger=(
                "If you are unhappy with the practice's response, or prefer not to complain "
                "to the practice directly"
            ),
            portal_url="https://www.nhs.uk/service-search/find-a-gp",
            postal_address="Practice Manager, [Surgery Name], [Surgery Address]",
            info_needed=[
                "Your full name and contact details",
                "NHS number",
                "Date(s) of the appointment(s)",
                "Name of GP or staff member if known",
                "Description of what happened",
                "How it has affected you",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="NHS Integrated Care Board (ICB)",
            description=(
                "If you prefer not to complain to the practice directly, or are unhappy with "
                "their response, contact your local ICB."
            ),
            timeline_text="Response within 6 months",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If you are unhappy with the ICB's response",
            portal_url="https://www.nhs.uk/nhs-services/find-your-local-integrated-care-board/",
            info_needed=[
                "Same details as for the GP practice complaint",
                "Copy of any previous complaint response if applicable",
            ],
        ),
        ombudsman_step(
            PHSO,
            description="Final escalation if local resolution fails.",
            timeline_text="Investigation can take 6-12 months",
            info_needed=[
                "Copy of the final complaint response from the GP practice or ICB",
                "Your account of events and why the response was unsatisfactory",
                "How the situation affected you personally",
                "What you want the PHSO to achieve",
            ],
        ),
    ],
    tips=[
        "You can choose to complain to either the practice or the ICB, not both simultaneously for the same issue",
        "If a GP's fitness to practise is in question, report to the GMC separately",
        "Your local Healthwatch can provide free advocacy",
        "Keep copies of all correspondence",
    ],
    legislation=NHS_COMPLAINTS_REGULATIONS,
)


SOCIAL_CARE = PathwayTemplate(
    key="social_care",
    title="Social Care Complaint",
    description="Complaints about care homes, home care, or local authority social services.",
    time_limit="12 months from the event or from when you became aware of the issue",
    time_limit_detail=(
        "The standard 12-month limit applies under the NHS and social care complaints "
        "regulations. Local authorities may exercise discretion to extend this."
    ),
    pre_requirements=[
        "Try raising the issue directly with the care provider or your social worker first",
        "If the person receiving care is at immediate risk, contact adult safeguarding at your local council immediately",
    ],
    evidence_guidance=[
        "Care plan documents",
        "Dates of specific incidents",
        "Names of care workers involved if known",
        "Photographs of injuries, living conditions, or relevant evidence",
        "Any correspondence with the care provider",
        "Records of medications if relevant",
        "Names and contact details of witnesses",
    ],
    warnings=[
        "If someone is at immediate risk of harm, do not wait for the complaints process. "
        "Contact the local authority safeguarding team or call 999",
    ],
    steps=[
        StepTemplate(
            name="Complain to the Care Provider",
            description="Raise your concern directly with the care home or home care provider first.",
            timeline_text="Varies by provider; most respond within 10-20 working days",
            acknowledgment_timeline_text="3 working days (varies by provider)",
            escalation_trigger=(
                "If the provider does not resolve your concern, or if the care is "
                "commissioned by the local authority"
            ),
            portal_url="https://www.cqc.org.uk/care-services",
            postal_address="[Care Provider Name], [Provider Address]",
            info_needed=[
                "Name of the person receiving care",
                "Your relationship to them (and their consent if complaining on their behalf)",
                "Dates and details of incidents",
                "Names of staff involved if known",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Local Authority Complaint",
            description=(
                "If the care is commissioned by the local authority, complain through their "
                "adult social care complaints procedure."
            ),
            timeline_text="Usually a staged process over several months",
            acknowledgment_timeline_text="3 working days",
            escalation_trigger="If the local authority's process doesn't resolve your complaint",
            postal_address="Adult Social Care Complaints, [Council Name], [Council Address]",
            info_needed=[
                "Full details of the complaint including dates",
                "Name of the person receiving care and their consent",
                "Any reference numbers from the care provider",
                "Copies of previous complaint correspondence",
            ],
        ),
        ombudsman_step(
            LGSCO,
            description=(
                "If the local authority's process doesn't resolve your complaint, escalate to the LGSCO."
            ),
            timeline_text="Investigation typically takes 3-6 months",
            escalation_trigger="The LGSCO is the final stage for council-commissioned social care",
            info_needed=[
                "Copy of the local authority's final complaint response",
                "Your account of why the response was unsatisfactory",
                "How the situation has affected the person receiving care and/or you",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Report serious safety concerns to the CQC (Care Quality Commission) immediately",
        "If the person lacks capacity, consider whether a safeguarding referral is needed",
        "Local Healthwatch and Age UK can provide advocacy support",
        "Keep a diary of incidents with dates and details",
    ],
    legislation=(
        "Care Act 2014, Health and Social Care Act 2008 (Regulated Activities) Regulations 2014"
    ),
)


COUNCIL = PathwayTemplate(
    key="council",
    title="Council Services Complaint",
    description=(
        "Complaints about local council services (housing, planning, benefits, "
        "environmental health, etc.)."
    ),
    time_limit="12 months from the event (the LGSCO expects complaints within 12 months)",
    time_limit_detail=(
        "Most councils accept complaints at any time, but the Local Government Ombudsman "
        "expects you to complain within 12 months. Complain as soon as possible while "
        "evidence is fresh."
    ),
    pre_requirements=[
        "Most councils require you to try resolving the issue with the service directly before making a formal complaint",
        "Contact the relevant department first, by phone, email, or in person, and give them a chance to put things right",
        "If you have already tried and the issue is not resolved, you can go straight to the formal complaints process",
    ],
    evidence_guidance=[
        "Reference numbers for any council services (housing, council tax, planning applications)",
        "Dates of contact with the council and what was said",
        "Copies of letters, emails, or online messages",
        "Photographs if relevant (e.g. housing disrepair, environmental issues)",
        "Names of council officers you have dealt with if known",
        "Notes of phone conversations including dates and times",
    ],
    steps=[
        StepTemplate(
            name="Contact the Service Directly",
            description=(
                "Before making a formal complaint, contact the relevant council department "
                "and explain the problem. Give them a chance to resolve it."
            ),
            timeline_text="Allow 10-15 working days for a response",
            acknowledgment_timeline_text="5 working days",
            escalation_trigger="If the service does not resolve your issue, or you are unhappy with their response",
            portal_url="https://www.gov.uk/find-local-council",
            info_needed=[
                "Your name and contact details",
                "Account or reference numbers",
                "Clear description of the problem",
                "What you want them to do",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Council Complaints Procedure (Stage 1)",
            description="Submit a formal complaint to the council. Most councils have an online complaints form.",
            timeline_text="Response usually within 10-20 working days",
            acknowledgment_timeline_text="3-5 working days",
            escalation_trigger="If you are unhappy with the Stage 1 response",
            portal_url="https://www.gov.uk/find-local-council",
            postal_address="Complaints Team, [Council Name], [Council Address]",
            info_needed=[
                "Full name, address, and contact details",
                "Service area the complaint relates to",
                "What happened and when",
                "What you have already done to try to resolve it",
                "What outcome you want",
                "Any relevant reference numbers",
            ],
        ),
        StepTemplate(
            name="Council Complaints Procedure (Stage 2)",
            description=(
                "If unhappy with the Stage 1 response, request a review at Stage 2. A more "
                "senior officer will review your complaint."
            ),
            timeline_text="Response usually within 20 working days",
            acknowledgment_timeline_text="3-5 working days",
            escalation_trigger="If you are still unhappy after Stage 2",
            info_needed=[
                "Your Stage 1 complaint reference",
                "Why you are unhappy with the Stage 1 response",
                "What outcome you want",
            ],
        ),
        ombudsman_step(
            LGSCO,
            description="Once you've exhausted the council's complaints procedure, the LGSCO can investigate.",
            timeline_text="Investigation typically takes 3-6 months",
            escalation_trigger="The LGSCO is the final stage for council complaints",
            info_needed=[
                "Copy of the council's final complaint response",
                "Your account of events and why the response was unsatisfactory",
                "How the situation has affected you",
                "What outcome you want",
            ],
        ),
    ],
    tips=[
        "Keep records of all correspondence including dates and reference numbers",
        "Your local councillor can sometimes help escalate issues",
        "For housing disrepair, consider whether environmental health or the Housing Ombudsman is more appropriate",
        "Many councils allow you to complain online, by phone, by email, or in person",
    ],
    legislation="Relevant council-specific legislation varies by service area",
)


POLICE = PathwayTemplate(
    key="police",
    title="Police Complaint",
    description="Complaints about police officer conduct, decisions, or service.",
    time_limit="12 months from the incident",
    time_limit_detail=(
        "You should complain within 12 months of the incident. The police force has "
        "discretion to extend this time limit if there are good reasons for the delay."
    ),
    pre_requirements=[
        "You can complain directly to the force, at any police station, or through the IOPC",
        "For less serious issues, you may want to try local resolution first through the "
        "force's professional standards department",
    ],
    evidence_guidance=[
        "Officer name(s), collar/shoulder number(s), rank, and station if known",
        "Date, time, and location of the incident",
        "Crime reference number or custody record number if applicable",
        "Body-worn camera may exist. Note this in your complaint",
        "Names and contact details of any witnesses",
        "Photographs of any injuries",
        "CCTV footage if available (note locations of cameras)",
        "Medical records if you received treatment",
        "Your own written account, made as soon as possible after the event",
    ],
    warnings=[
        "If your complaint involves serious matters (death or serious injury, serious "
        "corruption, or a criminal offence by an officer), it may be referred directly to the IOPC",
    ],
    steps=[
        StepTemplate(
            name="Complain to the Police Force",
            description=(
                "Contact the force's Professional Standards Department (PSD). You can "
                "complain directly, at any police station, or by post/email."
            ),
            timeline_text="Usually within 10-15 working days for initial response",
            acknowledgment_timeline_text="15 working days",
            escalation_trigger=(
                "If you are unhappy with how your complaint was handled, you have the right to appeal/review"
            ),
            portal_url="https://www.police.uk/",
            postal_address="Professional Standards Department, [Force Name], [Force HQ Address]",
            info_needed=[
                "Your full name, address, and contact details",
                "Date, time, and location of the incident",
                "Name(s) or description(s) of the officer(s) involved",
                "Officer collar/shoulder numbers if known",
                "Station the officer(s) are based at if known",
                "Detailed account of what happened",
                "Details of any witnesses",
                "Any reference numbers (crime ref, custody ref)",
                "Whether you are complaining on behalf of someone else (include their consent)",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            IOPC,
            description=(
                "If unhappy with how your complaint was handled, you can request a review "
                "from the IOPC. Serious matters may be referred directly."
            ),
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
        "You have 12 months from the incident to complain (the force can extend this)",
        "Complaints about serious corruption, death/serious injury, or discrimination may "
        "be referred directly to the IOPC",
        "You can also contact your Police and Crime Commissioner",
        "Consider getting free legal advice from a solicitor specialising in police complaints",
        "Ask the force to preserve body-worn camera footage as soon as possible, as it may "
        "be deleted after a set period",
    ],
    legislation="Police Reform Act 2002, Police (Complaints and Misconduct) Regulations 2020",
)


SCHOOL = PathwayTemplate(
    key="school",
    title="School Complaint",
    description="Complaints about a state school or academy.",
    time_limit="No statutory time limit, but complain as soon as possible",
    time_limit_detail=(
        "There is no strict legal time limit for school complaints, but schools may set "
        "their own deadlines in their complaints procedures (often 3-6 months). "
        "Complaining promptly helps ensure the issue can be properly investigated."
    ),
    pre_requirements=[
        "All schools are required to have a published complaints procedure. Check the "
        "school website or ask the school office",
        "Most procedures expect you to raise the concern informally with the class teacher "
        "or relevant member of staff first",
    ],
    evidence_guidance=[
        "Dates of specific incidents",
        "Names of staff or pupils involved (where appropriate)",
        "Copies of relevant emails, letters, or notes from meetings",
        "School reports, IEPs, or EHCP documents if relevant",
        "Photographs or screenshots if applicable",
        "Notes from any conversations with school staff",
    ],
    steps=[
        StepTemplate(
            name="Raise Informally with Staff",
            description=(
                "Speak to the class teacher, head of year, or relevant member of staff. Many "
                "issues can be resolved informally."
            ),
            timeline_text="Allow 5-10 school days for a response",
            acknowledgment_timeline_text="3-5 school days",
            escalation_trigger="If the issue is not resolved informally",
            portal_url="https://www.gov.uk/school-performance-tables",
            info_needed=[
                "Brief description of your concern",
                "Your child's name and year group",
                "Dates of relevant incidents",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Formal Complaint to the Headteacher",
            description=(
                "Write a formal complaint to the headteacher. Follow the school's published "
                "complaints procedure."
            ),
            timeline_text="Most schools aim to respond within 10-15 school days",
            acknowledgment_timeline_text="5 school days (varies by school)",
            escalation_trigger="If you are unhappy with the headteacher's response",
            postal_address="Headteacher, [School Name], [School Address]",
            info_needed=[
                "Your full name and contact details",
                "Your child's name, year group, and class",
                "Clear description of the complaint",
                "Dates of events",
                "What you have already done to resolve it",
                "What outcome you want",
            ],
        ),
        StepTemplate(
            name="Governing Body / Academy Trust",
            description=(
                "If unresolved, escalate to the school's governing body (state schools) or "
                "academy trust board."
            ),
            timeline_text="Usually convenes a complaints panel within a few weeks",
            acknowledgment_timeline_text="5-10 school days",
            escalation_trigger="If the governing body panel does not resolve your complaint",
            postal_address="Chair of Governors, [School Name], [School Address]",
            info_needed=[
                "Copy of your complaint and the headteacher's response",
                "Why you remain dissatisfied",
                "What outcome you are seeking",
            ],
        ),
        StepTemplate(
            name="Department for Education / Local Government Ombudsman",
            description=(
                "For academies, complain to the Education and Skills Funding Agency (ESFA). "
                "For maintained schools, the LGSCO may investigate."
            ),
            timeline_text="Varies by route",
            acknowledgment_timeline_text="Varies",
            escalation_trigger="These are the final external options",
            portal_url="https://form.education.gov.uk/service/Contact_the_Department_for_Education",
            postal_address=(
                "Department for Education, Sanctuary Buildings, 20 Great Smith Street, London SW1P 3BT"
            ),
            info_needed=[
                "Evidence that you have completed the school's complaints procedure",
                "Copy of the governing body's decision",
                "Details of your complaint and why the school's response was inadequate",
            ],
        ),
    ],
    tips=[
        "All schools must have a published complaints procedure",
        "Ofsted does not investigate individual complaints but welcomes information about schools",
        "For special educational needs disputes, consider SEND Tribunal",
        "For exclusion appeals, there is a separate process via an independent review panel",
        "Keep a record of all meetings and conversations",
    ],
    legislation=(
        "Education Act 2002 (Section 29), School Complaints (England) Regulations 2006 (proposed)"
    ),
)


TEMPLATES = [NHS_TRUST, GP, SOCIAL_CARE, COUNCIL, POLICE, SCHOOL]
