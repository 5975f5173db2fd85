"""
Deadline Calculator — concrete dates for the current stage of a complaint.

Behavioral Contract:
- No recognisable event date → None (not an error)
- submit_by = event date + the pathway's submission window in calendar months
- days_remaining counts from `today`, rounded up for a part day
- acknowledgment_by / response_by come from the current step's timing rules,
  counted from `today`: working days against the holiday calendar (the
  bundled bank holidays unless one is given), months by calendar month
- `today` is always injectable; nothing reads the clock when it is given
"""

import logging
import math
from datetime import date, datetime, time
from typing import Optional, Union

from pathway_kernel.deadlines.dates import extract_event_date
from pathway_kernel.deadlines.holidays import HolidayCalendar, add_months, default_calendar
from pathway_kernel.models.deadlines import DeadlineSet
from pathway_kernel.models.facts import ExtractedFacts
from pathway_kernel.models.pathway import (
    PathwayInstance,
    PathwayTemplate,
    TimingRule,
    TimingUnit,
)

logger = logging.getLogger(__name__)

DEFAULT_URGENT_THRESHOLD_DAYS = 30


def apply_timing_rule(rule: Optional[TimingRule], start: date, calendar: HolidayCalendar) -> Optional[date]:
    if rule is None:
        return None
    if rule.unit == TimingUnit.WORKING_DAYS:
        return calendar.add_working_days(start, rule.amount)
    return add_months(start, rule.amount)


def _days_until(deadline: date, today: Union[date, datetime]) -> int:
    if isinstance(today, datetime):
        delta = datetime.combine(deadline, time.min, tzinfo=today.tzinfo) - today
        return math.ceil(delta.total_seconds() / 86400)
    return (deadline - today).days


def compute_deadlines(
    facts: ExtractedFacts,
    pathway: Union[PathwayInstance, PathwayTemplate],
    today: Union[date, datetime, None] = None,
    calendar: Optional[HolidayCalendar] = None,
    urgent_threshold_days: int = DEFAULT_URGENT_THRESHOLD_DAYS,
) -> Optional[DeadlineSet]:
    """
    Derive the deadline set for a resolved pathway.

    A template may be passed instead of an instance; its default step then
    supplies the acknowledgment and response rules.
    """
    event_date = extract_event_date(facts)
    if event_date is None:
        logger.debug("No event date in %r / %r", facts.date_specific, facts.date_range)
        return None

    if today is None:
        today = date.today()
    today_date = today.date() if isinstance(today, datetime) else today
    if calendar is None:
        calendar = default_calendar()
    if not calendar.covers(today_date):
        logger.warning("Holiday calendar does not cover %s; working days may be off", today_date)

    deadlines = DeadlineSet(event_date=event_date, submission_months=pathway.submission_months)

    if pathway.submission_months:
        submit_by = add_months(event_date, pathway.submission_months)
        remaining = _days_until(submit_by, today)
        deadlines.submit_by = submit_by
        deadlines.days_remaining = remaining
        deadlines.submit_expired = remaining < 0
        deadlines.submit_urgent = remaining <= urgent_threshold_days

    if isinstance(pathway, PathwayInstance):
        step = pathway.current_step
    else:
        step = pathway.steps[pathway.default_index]
    deadlines.acknowledgment_by = apply_timing_rule(step.acknowledgment_rule, today_date, calendar)
    deadlines.response_by = apply_timing_rule(step.timing_rule, today_date, calendar)

    return deadlines
