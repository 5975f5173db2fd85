"""
Session Store — owns the live complaint sessions.

Each session is an independent SessionWorkflow; nothing mutable is shared
between them. The catalog and holiday calendar are read-only and shared.
"""

import logging
from typing import Dict, List, Optional

from pathway_kernel.catalog import DEFAULT_CATALOG, PathwayCatalog
from pathway_kernel.deadlines.holidays import HolidayCalendar
from pathway_kernel.models.config import KernelConfig
from pathway_kernel.workflow.machine import SessionWorkflow

logger = logging.getLogger(__name__)


class SessionStore:
    """
    In-memory session registry for the prototype.
    Sessions are lost on restart; persistence is out of scope.
    """

    def __init__(self, config: Optional[KernelConfig] = None, catalog: Optional[PathwayCatalog] = None):
        self.config = config or KernelConfig()
        self.catalog = catalog or DEFAULT_CATALOG
        self.calendar = HolidayCalendar.from_config(self.config)
        self._sessions: Dict[str, SessionWorkflow] = {}

    def create(self) -> SessionWorkflow:
        """Start a new session in the intake state."""
        session = SessionWorkflow(
            catalog=self.catalog,
            calendar=self.calendar,
            urgent_threshold_days=self.config.urgent_threshold_days,
        )
        self._sessions[session.session_id] = session
        logger.debug("Created session %s", session.session_id)
        return session

    def get(self, session_id: str) -> Optional[SessionWorkflow]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        if session_id in self._sessions:
            del self._sessions[session_id]
            return True
        return False

    def list_ids(self) -> List[str]:
        return list(self._sessions.keys())

    def __len__(self) -> int:
        return len(self._sessions)
