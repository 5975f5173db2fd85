"""
Progress Inference — places the user on their pathway from "steps already taken" text.

Behavioral Contract:
- Returns a fresh PathwayInstance; the catalog template is never mutated
- Exactly one step is current in the result, for any input text
- Rules are evaluated in order and the first match wins
- Never raises on ambiguous or empty text
"""

import logging
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from pathway_kernel.models.pathway import PathwayInstance, PathwayTemplate

logger = logging.getLogger(__name__)

# Answers meaning "nothing done yet"; the template default applies.
NOTHING_DONE = {"none", "no", "nothing", "n/a", "na", "not yet"}


def _last_step(step_count: int) -> int:
    return step_count - 1


def _after_first_step(step_count: int) -> int:
    return min(1, step_count - 1)


def _second_step_if_any(step_count: int) -> int:
    return 1 if step_count > 1 else 0


class ProgressRule(BaseModel):
    """One row of the progress policy: keywords and the step they imply."""

    model_config = ConfigDict(frozen=True)

    name: str
    keywords: Tuple[str, ...]
    target: Callable[[int], int]     # step count -> current index

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


DEFAULT_PROGRESS_RULES: List[ProgressRule] = [
    ProgressRule(
        name="ombudsman",
        keywords=("ombudsman", "phso", "lgsco", "iopc", "spso", "psow", "nipso", "pirc"),
        target=_last_step,
    ),
    ProgressRule(
        name="formal",
        keywords=("formal", "written", "complained", "stage 2", "tier 2"),
        target=_after_first_step,
    ),
    ProgressRule(
        name="informal",
        keywords=("pals", "spoke", "called", "phoned", "mentioned", "raised", "tried"),
        target=_second_step_if_any,
    ),
]


def infer_step_index(
    template: PathwayTemplate,
    steps_taken: Optional[str],
    rules: Optional[List[ProgressRule]] = None,
) -> Tuple[int, Optional[str]]:
    """
    Work out which step should be current.

    Returns the index and the name of the rule that fired (None when the
    template default or the first-step fallback applied).
    """
    rules = DEFAULT_PROGRESS_RULES if rules is None else rules
    text = (steps_taken or "").strip().lower()
    if not text or text in NOTHING_DONE:
        return template.default_index, None

    step_count = len(template.steps)
    for rule in rules:
        if rule.matches(text):
            index = max(0, min(rule.target(step_count), step_count - 1))
            return index, rule.name

    return 0, None


def apply_progress(
    template: PathwayTemplate,
    steps_taken: Optional[str],
    rules: Optional[List[ProgressRule]] = None,
) -> PathwayInstance:
    """Clone the template and mark the inferred step as current."""
    index, rule = infer_step_index(template, steps_taken, rules)
    instance = template.instantiate(current_index=index)
    logger.debug(
        "Progress for %s: step %d (%s) via %s",
        template.key, index, instance.current_step.name, rule or "default",
    )
    return instance
