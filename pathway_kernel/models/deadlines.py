"""Deadline Set — dates derived from the event date and the current pathway step."""

from datetime import date
from typing import Optional

from pydantic import BaseModel


class DeadlineSet(BaseModel):
    """Derived, session-scoped. Never persisted independently of its session."""

    event_date: date
    submission_months: Optional[int] = None
    submit_by: Optional[date] = None
    days_remaining: Optional[int] = None
    submit_urgent: bool = False
    submit_expired: bool = False
    acknowledgment_by: Optional[date] = None
    response_by: Optional[date] = None
