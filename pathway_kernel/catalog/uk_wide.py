"""UK-wide pathways. Central government bodies have no nation-specific variants."""

from pathway_kernel.catalog.ombudsmen import PHSO, ombudsman_step
from pathway_kernel.models.pathway import PathwayTemplate, StepTemplate

TRIBUNAL_ADDRESS = (
    "HM Courts & Tribunals Service, Social Security and Child Support, "
    "PO Box 14620, Birmingham B16 6FR"
)
DWP_COMPLAINTS_URL = (
    "https://www.gov.uk/government/organisations/department-for-work-pensions/about/complaints-procedure"
)
ICE_URL = "https://www.gov.uk/government/organisations/independent-case-examiner"
ICE_ADDRESS = "Independent Case Examiner, PO Box 209, Bootle L20 7WA"
SOCIAL_SECURITY_LEGISLATION = (
    "Social Security Act 1998, Tribunal Procedure (First-tier Tribunal) "
    "(Social Entitlement Chamber) Rules 2008"
)


DWP_DECISION = PathwayTemplate(
    key="dwp_decision",
    title="DWP Benefits Decision Challenge",
    description=(
        "Challenging a DWP benefits decision (Universal Credit, PIP, ESA, JSA, State Pension, etc.)."
    ),
    time_limit="1 month from the date of the decision letter",
    time_limit_detail=(
        "You must request a mandatory reconsideration within one calendar month of the "
        "date on the decision letter. Late requests may be accepted if you have good "
        "reasons (up to 13 months), but act quickly. The DWP decision maker reviews the "
        "whole claim, so the outcome could stay the same, go up, or go down."
    ),
    pre_requirements=[
        "You must request a mandatory reconsideration before you can appeal to a tribunal",
        "Check the decision letter carefully. It will explain what you can do if you disagree",
    ],
    evidence_guidance=[
        "Copy of the decision letter (including the date)",
        "National Insurance number",
        "Benefit claim reference number",
        "Any new medical evidence (GP letters, hospital reports, specialist assessments)",
        "Details of how your condition affects your daily life",
        "Supporting letters from carers, family, support workers",
        "Copy of any assessment report (e.g. PIP assessment, WCA report). You can request this from DWP",
    ],
    warnings=[
        "Mandatory reconsideration reviews the entire claim. The outcome could go down as well as up or stay the same",
        "The one-month deadline is strict. Request reconsideration as soon as possible, even "
        "if you are still gathering evidence (you can send evidence later)",
        "If your benefit has been stopped, you may be able to claim a different benefit while waiting",
    ],
    steps=[
        StepTemplate(
            name="Request Mandatory Reconsideration",
            description=(
                "Contact DWP to say you disagree with the decision. You can do this by phone, "
                "online (for some benefits), or in writing. Explain clearly why you think the "
                "decision is wrong and include any new evidence."
            ),
            timeline_text="DWP aims for a decision within a few weeks, but it can take longer",
            acknowledgment_timeline_text=(
                "DWP should confirm receipt; follow up if you do not hear back within 2 weeks"
            ),
            escalation_trigger=(
                "If the mandatory reconsideration upholds the original decision and you still disagree"
            ),
            info_needed=[
                "National Insurance number",
                "Benefit claim reference number",
                "Date of the decision you are challenging",
                "Clear reasons why you think the decision is wrong",
                "Any new evidence to support your case",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Appeal to the First-tier Tribunal",
            description=(
                "If mandatory reconsideration upholds the decision, you can appeal to an "
                "independent tribunal. The tribunal is not part of DWP and makes its own "
                "decision based on the evidence."
            ),
            timeline_text="Hearing typically within a few months of appeal",
            acknowledgment_timeline_text="Written acknowledgment within a few weeks",
            escalation_trigger=(
                "You can request permission to appeal to the Upper Tribunal on a point of law only"
            ),
            portal_url="https://www.gov.uk/appeal-benefit-decision",
            postal_address=TRIBUNAL_ADDRESS,
            info_needed=[
                "Copy of the Mandatory Reconsideration Notice (MRN)",
                "Your SSCS1 appeal form (available online or from the tribunal)",
                "All supporting evidence",
                "Clear explanation of why the decision is wrong",
                "Whether you want a paper hearing or an oral hearing (oral hearings have higher success rates)",
            ],
        ),
    ],
    tips=[
        "Mandatory reconsideration has a strict one-month deadline. Act quickly",
        "You can request a copy of your assessment report from DWP. It can help you "
        "understand the decision and prepare your case",
        "Citizens Advice and welfare rights organisations can help with appeals for free",
        "At tribunal, success rates are significantly higher with an oral hearing and representation",
        "If your condition has worsened, consider making a new claim instead of (or as well "
        "as) challenging the old decision",
    ],
    legislation=SOCIAL_SECURITY_LEGISLATION,
)


DWP_SERVICE = PathwayTemplate(
    key="dwp_service",
    title="DWP Service Complaint",
    description=(
        "Complaints about DWP service quality, staff conduct, delays, or maladministration "
        "(not about the benefit decision itself)."
    ),
    time_limit="12 months (ICE expects complaints within 12 months of completing DWP's process)",
    time_limit_detail=(
        "There is no strict statutory time limit for DWP service complaints, but the "
        "Independent Case Examiner expects complaints to be referred within 12 months of "
        "completing DWP's internal complaints process."
    ),
    pre_requirements=[
        "You must complain to DWP directly first and complete their internal complaints process before escalating",
        "Make sure your complaint is about the service (e.g. delays, staff conduct, lost "
        "paperwork, wrong information given) rather than disagreeing with a benefit decision",
    ],
    evidence_guidance=[
        "National Insurance number",
        "Benefit claim reference number",
        "Dates of contact with DWP and what happened",
        "Names of DWP staff you dealt with if known",
        "Copies of letters, texts, or journal messages",
        "Notes of phone conversations (dates, times, what was said)",
        "Details of any financial loss caused by the DWP's error",
    ],
    warnings=[
        "This process is for service complaints only. If you disagree with a benefit "
        "decision, you need the mandatory reconsideration and appeal process instead",
    ],
    steps=[
        StepTemplate(
            name="DWP Complaints Procedure",
            description=(
                "Contact DWP through their complaints process. You can complain online, by "
                "phone, or in writing. If your complaint is about Jobcentre Plus, contact your "
                "local office."
            ),
            timeline_text="Response usually within 15 working days",
            acknowledgment_timeline_text="3-5 working days",
            escalation_trigger=(
                "If you are unhappy with DWP's response, ask for a review by a complaint resolution manager"
            ),
            portal_url=DWP_COMPLAINTS_URL,
            info_needed=[
                "Full name and contact details",
                "National Insurance number",
                "Benefit claim reference number",
                "Clear description of what went wrong",
                "Dates and details of events",
                "What outcome you want (apology, compensation, change in process)",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Independent Case Examiner (ICE)",
            description=(
                "If DWP's internal complaints process does not resolve your issue, you can "
                "escalate to the Independent Case Examiner."
            ),
            timeline_text="Several months. ICE has a significant backlog",
            acknowledgment_timeline_text="A few weeks (due to volume)",
            escalation_trigger="If you are unhappy with ICE's outcome",
            portal_url=ICE_URL,
            postal_address=ICE_ADDRESS,
            contact_email="ice@dwp.gov.uk",
            info_needed=[
                "Copy of DWP's final complaint response",
                "Your account of what happened and why the response was unsatisfactory",
                "Details of the impact on you",
                "What outcome you want",
            ],
        ),
        ombudsman_step(
            PHSO,
            description=(
                "The PHSO can investigate if ICE has not resolved your complaint. You must "
                "contact them through your MP."
            ),
            timeline_text="Several months",
            info_needed=[
                "Copy of ICE's final response",
                "Your MP must refer the complaint to the PHSO",
                "Full account of how the situation has affected you",
                "What remedy you are seeking",
            ],
        ),
    ],
    tips=[
        "Decision challenges go through mandatory reconsideration; service complaints go through this process",
        "You can claim compensation from DWP for proven financial losses caused by their errors",
        "Citizens Advice can help you with DWP complaints",
        "If DWP owes you money due to their error, they should pay this regardless of the complaints process",
    ],
    legislation="DWP Complaints Procedure, Parliamentary Commissioner Act 1967",
)


# Generic DWP route, used when the complaint type is unknown.
DWP = PathwayTemplate(
    key="dwp",
    title="DWP Benefits Complaint",
    description=(
        "Complaints about DWP benefits decisions or service (Universal Credit, PIP, ESA, etc.)."
    ),
    time_limit="1 month for decision challenges; 12 months for service complaints",
    time_limit_detail=(
        "If you are challenging a benefit decision, you have one calendar month from the "
        "decision letter to request a mandatory reconsideration. For service complaints, the "
        "Independent Case Examiner expects complaints within 12 months."
    ),
    pre_requirements=[
        "First determine whether you are challenging a decision or complaining about the "
        "service. They are completely different processes",
        "For decisions: you must request mandatory reconsideration before you can appeal",
        "For service: you must complain to DWP directly first",
    ],
    evidence_guidance=[
        "National Insurance number",
        "Benefit claim reference number",
        "Copy of the decision letter (if challenging a decision)",
        "Medical evidence (if relevant)",
        "Dates of contact with DWP",
        "Notes of phone conversations",
        "Copies of all correspondence",
    ],
    warnings=[
        "Decision challenges and service complaints are completely different processes. Make sure you use the right one",
        "For decision challenges: mandatory reconsideration reviews the whole claim, and the "
        "outcome could go down as well as up",
    ],
    steps=[
        StepTemplate(
            name="Mandatory Reconsideration (for decision challenges)",
            description=(
                "If you disagree with a benefits decision, request a mandatory reconsideration "
                "within one month of the decision letter."
            ),
            timeline_text="DWP aims for a decision within a few weeks",
            acknowledgment_timeline_text="Follow up if no response within 2 weeks",
            escalation_trigger="If the mandatory reconsideration upholds the original decision",
            info_needed=[
                "National Insurance number",
                "Claim reference number",
                "Date of the decision letter",
                "Reasons you disagree",
                "Any new evidence",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="Appeal to the Tribunal (for decision challenges)",
            description=(
                "If mandatory reconsideration upholds the decision, appeal to the First-tier Tribunal."
            ),
            timeline_text="Hearing typically within a few months of appeal",
            acknowledgment_timeline_text="Written acknowledgment within a few weeks",
            escalation_trigger="Upper Tribunal appeal on point of law only",
            portal_url="https://www.gov.uk/appeal-benefit-decision",
            postal_address=TRIBUNAL_ADDRESS,
            info_needed=[
                "Mandatory Reconsideration Notice",
                "SSCS1 appeal form",
                "All supporting evidence",
            ],
        ),
        StepTemplate(
            name="DWP Complaints Procedure (for service issues)",
            description="For service complaints (not decisions), use the DWP complaints process.",
            timeline_text="Response usually within 15 working days",
            acknowledgment_timeline_text="3-5 working days",
            escalation_trigger="If DWP's response is unsatisfactory",
            portal_url=DWP_COMPLAINTS_URL,
            info_needed=[
                "National Insurance number",
                "Claim reference number",
                "Details of the service issue",
                "What outcome you want",
            ],
        ),
        StepTemplate(
            name="Independent Case Examiner / PHSO",
            description=(
                "If the DWP complaints process doesn't resolve your service issue, escalate to "
                "the Independent Case Examiner, then the PHSO."
            ),
            timeline_text="Several months",
            acknowledgment_timeline_text="A few weeks",
            escalation_trigger="PHSO is the final stage (via your MP)",
            portal_url=ICE_URL,
            postal_address=ICE_ADDRESS,
            contact_email="ice@dwp.gov.uk",
            info_needed=[
                "Copy of DWP's final response",
                "Your account of events",
                "Impact on you",
            ],
        ),
    ],
    tips=[
        "Mandatory reconsideration has a strict one-month deadline. Act quickly",
        "You can request a \"mandatory reconsideration notice\" if you haven't received one",
        "Citizens Advice and welfare rights organisations can help with appeals for free",
        "At tribunal, success rates are significantly higher with representation",
        "Decision challenges and service complaints are separate processes",
    ],
    legislation=SOCIAL_SECURITY_LEGISLATION,
)


HMRC = PathwayTemplate(
    key="hmrc",
    title="HMRC Complaint",
    description="Complaints about HMRC tax service, decisions, or conduct.",
    time_limit="12 months (the Adjudicator expects complaints within 6 months of HMRC's final response)",
    time_limit_detail=(
        "HMRC does not set a strict time limit for initial complaints, but the "
        "Adjudicator's Office expects complaints within 6 months of HMRC's final response. "
        "Complain as soon as possible."
    ),
    pre_requirements=[
        "You must complain to HMRC directly first and complete both tiers of their internal "
        "process before escalating to the Adjudicator",
        "For tax decision disputes (e.g. tax liability, penalties), you may need the tax "
        "tribunal instead of the complaints process",
    ],
    evidence_guidance=[
        "Your tax reference number (UTR for self-assessment, or NI number)",
        "Dates of contact with HMRC and what was discussed",
        "Copies of tax calculations, letters, or notices",
        "Details of any financial loss caused by HMRC's error",
        "Notes of phone calls including dates, times, and what was said",
        "Copies of your tax returns if relevant",
    ],
    steps=[
        StepTemplate(
            name="HMRC Complaints Process (Tier 1)",
            description=(
                "Contact HMRC directly through their complaints process. You can call, write, "
                "or use the online form."
            ),
            timeline_text="HMRC aims to respond within 15 working days",
            acknowledgment_timeline_text="Verbal or written acknowledgment within a few days",
            escalation_trigger="If you are unhappy with the initial response",
            portal_url="https://www.gov.uk/complain-about-hmrc",
            info_needed=[
                "Full name and contact details",
                "Tax reference number or NI number",
                "Clear description of the problem",
                "Dates and details of events",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        StepTemplate(
            name="HMRC Tier 2 Review",
            description=(
                "If unhappy with the initial response, ask for a Tier 2 review by a complaints handler."
            ),
            timeline_text="Usually within 15 working days",
            acknowledgment_timeline_text="A few days",
            escalation_trigger="If the Tier 2 response is still unsatisfactory",
            info_needed=[
                "Your complaint reference number",
                "Why you are unhappy with the Tier 1 response",
                "Any additional information or evidence",
            ],
        ),
        StepTemplate(
            name="The Adjudicator's Office",
            description=(
                "An independent body that looks into complaints about HMRC's handling of your affairs."
            ),
            timeline_text="Investigation can take several months",
            acknowledgment_timeline_text="10 working days",
            escalation_trigger="If the Adjudicator cannot resolve your complaint",
            portal_url="https://www.gov.uk/government/organisations/the-adjudicators-office",
            postal_address="The Adjudicator's Office, PO Box 10280, Nottingham NG2 9PF",
            contact_email="enquiries@adjudicatorsoffice.gov.uk",
            info_needed=[
                "Copy of HMRC's final complaint response",
                "Full details of your complaint",
                "How the situation has affected you",
                "What outcome you want",
            ],
        ),
        ombudsman_step(
            PHSO,
            description=(
                "Final escalation via your MP. The PHSO can investigate if the Adjudicator has "
                "not resolved your complaint."
            ),
            timeline_text="Several months",
            info_needed=[
                "Copy of the Adjudicator's response",
                "Your MP must refer the complaint",
                "Full account of how the situation has affected you",
                "What remedy you are seeking",
            ],
        ),
    ],
    tips=[
        "For tax decision disputes (not service complaints), you may need the tax tribunal instead",
        "Keep copies of all correspondence and note reference numbers",
        "You can claim compensation for HMRC errors that cost you money",
        "TaxAid and Tax Help for Older People offer free advice",
        "HMRC has a dedicated helpline for complaints. Check gov.uk for the current number",
    ],
    legislation="HMRC Charter, Finance Act (various)",
)


# Fallback for any body type the catalog does not recognise.
OTHER_GOV = PathwayTemplate(
    key="other_gov",
    title="Government Body Complaint",
    description="Complaints about other government departments or agencies.",
    time_limit="12 months is a general guideline (the PHSO expects complaints within 12 months)",
    time_limit_detail=(
        "Most government bodies do not have a strict statutory time limit for complaints, "
        "but the PHSO expects complaints to be referred within 12 months. Individual "
        "departments may set their own deadlines."
    ),
    pre_requirements=[
        "You must complain to the government department directly first and complete their "
        "internal complaints process",
        "Check the department's website for their specific complaints procedure",
    ],
    evidence_guidance=[
        "Any reference numbers for your case or application",
        "Dates of contact and what was discussed",
        "Copies of letters, emails, or online communications",
        "Names of staff you dealt with if known",
        "Details of any financial loss or other impact",
    ],
    steps=[
        StepTemplate(
            name="Department's Own Complaints Procedure",
            description=(
                "Most government bodies have their own complaints process. Check their website "
                "or contact them directly."
            ),
            timeline_text="Usually within 15-20 working days",
            acknowledgment_timeline_text="3-5 working days",
            escalation_trigger="If you are unhappy with the department's response",
            info_needed=[
                "Full name and contact details",
                "Any reference numbers",
                "Clear description of the problem",
                "Dates and details of events",
                "What outcome you want",
            ],
            is_default_current=True,
        ),
        ombudsman_step(
            PHSO,
            description="For UK government departments, you can escalate to the PHSO via your MP.",
            info_needed=[
                "Copy of the department's final complaint response",
                "Your account of events and why the response was unsatisfactory",
                "How the situation has affected you personally",
                "What remedy you are seeking",
                "Your MP must refer the complaint",
            ],
        ),
    ],
    tips=[
        "Contact your MP. They can raise your complaint directly with the department",
        "Check whether the body has a specific regulator or independent complaints mechanism",
        "Citizens Advice can help identify the right complaint route",
        "Keep copies of all correspondence",
    ],
    legislation="Varies by department and issue",
)


TEMPLATES = [DWP_DECISION, DWP_SERVICE, DWP, HMRC, OTHER_GOV]
