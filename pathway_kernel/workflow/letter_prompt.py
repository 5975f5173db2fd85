"""Prompt composition for the letter-drafting collaborator. The engine never calls it."""

from typing import List

from pathway_kernel.models.facts import ExtractedFacts
from pathway_kernel.models.pathway import PathwayInstance
from pathway_kernel.models.workflow import LetterPromptPayload

LETTER_SYSTEM_PROMPT = """You write complaint text for UK citizens. The person will copy this into an online form, email it, or post it.

YOUR #1 RULE: Do NOT embellish, dramatise, or add anything the person did not say. Only include facts they actually told you. If they said "I waited a long time", do NOT upgrade that to "I endured an agonising and unacceptable wait". If they said "I was upset", do NOT write "I was left feeling devastated, anxious, and unable to sleep". Stick to their words.

BANNED PHRASES. Never use any of these:
- "I am writing to formally lodge" / "formally raise" / "formal complaint"
- "pursuant to" / "in accordance with" / "under the provisions of"
- "I trust this matter will receive due consideration"
- "I wish to draw your attention to"
- "the aforementioned" / "as previously stated"
- "I would be grateful if you could"
- "please do not hesitate to contact me"
- "I feel compelled to" / "I have no choice but to"
- "deeply disappointed" / "utterly unacceptable" / "gravely concerned"
- "caused me significant distress and inconvenience"
- "falls far short of" / "fails to meet the standards"
- "left me feeling" followed by a long list of emotions
- "I respectfully request" / "I humbly ask"
- Any Latin phrases, legal jargon, or formal register words

USE phrases like these instead:
- "I want to complain about..."
- "What happened was..."
- "This affected me because..."
- "I would like you to..."
- "Please reply within..."
- "I want to know why..."
- "I am not happy with..."
- "This caused me [specific problem]..."
- "Can you please explain..."

STYLE:
- Write as a normal person would. Read it back. If it sounds like a lawyer or an AI wrote it, rewrite it.
- Short sentences. Short paragraphs. One point per paragraph.
- Only state emotions or impacts the person actually described. Do not invent or amplify them.
- Do not pad the text. Say what needs saying and stop. Aim for under 500 words.
- First person throughout. It should sound like the person talking.

FORMAT:
- Start with a subject line.
- Include [YOUR NAME], [YOUR ADDRESS], [DATE] placeholders.
- The text must work in an online form, an email, or a printed letter. Keep it flexible.

CONTENT:
- Say who you are and what the complaint is about up front.
- Describe what happened in order. Facts only.
- Say how it affected you, but only what the person actually said, not embellished versions.
- Say what you want to happen.
- Ask specific questions.
- Set a response deadline (20 working days for NHS, 15 for most others).
- Include reference numbers if provided.
- If complaining for someone else, mention consent.
- Briefly mention the right to complain but do not quote legislation.
- Output ONLY the complaint text. No commentary.
- Do not fabricate or embellish any details."""

LETTER_PROMPT_HEADER = (
    "Write complaint text in plain, simple language based on these facts. The person may "
    "copy this into an online form, send it as an email, or post it as a letter, so keep "
    "the format flexible."
)

LETTER_PROMPT_FOOTER = (
    "CRITICAL: Do NOT embellish. Only include facts the person actually stated above. Do not "
    "dramatise, exaggerate emotions, or add formal language. Write under 500 words. If it "
    "sounds like a lawyer wrote it, you have failed."
)


NOT_SPECIFIED = "Not specified"


def _fact_lines(facts: ExtractedFacts) -> List[str]:
    lines = [
        f"Public body: {facts.public_body or NOT_SPECIFIED}",
        f"Type: {facts.body_type or NOT_SPECIFIED}",
        f"Service: {facts.service or NOT_SPECIFIED}",
        f"Issue: {facts.issue or NOT_SPECIFIED}",
        f"Full details: {facts.details or NOT_SPECIFIED}",
        f"When it happened: {facts.date_range or facts.date_specific or NOT_SPECIFIED}",
        f"Severity: {facts.severity or NOT_SPECIFIED}",
        f"Personal impact: {facts.personal_impact or NOT_SPECIFIED}",
        f"Desired outcome: {facts.desired_outcome or NOT_SPECIFIED}",
        f"Steps already taken: {facts.steps_taken or 'None'}",
        f"Tried direct resolution: {facts.tried_direct_resolution or 'Unknown'}",
    ]
    if facts.reference_numbers:
        lines.append(f"Reference numbers: {facts.reference_numbers}")
    if facts.staff_involved:
        lines.append(f"Staff involved: {facts.staff_involved}")
    if facts.third_party:
        lines.append(
            f"Complaining on behalf of: {facts.third_party_name or 'another person'} (consent is available)"
        )
    if facts.contact_preference and facts.contact_preference != "not_stated":
        lines.append(f"Preferred contact method: {facts.contact_preference}")
    lines.append(f"Additional notes: {facts.additional_notes or 'None'}")
    return lines


def build_letter_prompt(facts: ExtractedFacts, instance: PathwayInstance) -> LetterPromptPayload:
    """Compose the drafting request for the instance's current step."""
    step = instance.current_step
    user_prompt = "\n\n".join([
        LETTER_PROMPT_HEADER + "\n\n" + "\n".join(_fact_lines(facts)),
        "\n".join([
            f"The complaint is directed to: {step.name}",
            f"Relevant pathway: {instance.title}",
            f"Legislation: {instance.legislation}",
        ]),
        LETTER_PROMPT_FOOTER,
    ])
    return LetterPromptPayload(
        system_prompt=LETTER_SYSTEM_PROMPT,
        user_prompt=user_prompt,
        pathway_key=instance.key,
        pathway_title=instance.title,
        legislation=instance.legislation,
        directed_to=step.name,
    )
