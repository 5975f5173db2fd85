"""
Pathway Kernel API — FastAPI endpoints.

Exposes the engine to a presentation layer:
- Catalog browsing
- Stateless pathway resolution and deadline calculation
- Session lifecycle and workflow events
- Letter prompt payloads for the drafting collaborator
"""

import logging
from datetime import date
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from pathway_kernel.catalog import PathwayCatalog
from pathway_kernel.config import load_config
from pathway_kernel.deadlines.calculator import compute_deadlines
from pathway_kernel.models.config import KernelConfig
from pathway_kernel.models.facts import ExtractedFacts
from pathway_kernel.models.workflow import TransitionDecision, TransitionVerdict
from pathway_kernel.progress.inference import apply_progress
from pathway_kernel.router.resolver import resolve_for_facts, resolve_pathway
from pathway_kernel.session.store import SessionStore
from pathway_kernel.workflow.machine import SessionBusyError, SessionWorkflow
from pathway_kernel.workflow.safeguarding import signpost_for

logger = logging.getLogger(__name__)


# --- Request/Response Models ---

class ResolveRequest(BaseModel):
    body_type: Optional[str] = None
    complaint_type: Optional[str] = None
    nation: Optional[str] = None
    steps_taken: Optional[str] = None


class DeadlinesRequest(BaseModel):
    facts: ExtractedFacts
    today: Optional[date] = None


class ConfirmRequest(BaseModel):
    today: Optional[date] = None


# --- Application Factory ---

def create_app(
    session_store: Optional[SessionStore] = None,
    config: Optional[KernelConfig] = None,
    catalog: Optional[PathwayCatalog] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Pathway Kernel API",
        description="Complaint pathway routing and workflow engine",
        version="0.1.0",
    )

    if session_store is None:
        session_store = SessionStore(config=config or load_config(), catalog=catalog)
    store = session_store

    app.state.session_store = store
    app.state.catalog = store.catalog

    def _session(session_id: str) -> SessionWorkflow:
        session = store.get(session_id)
        if session is None:
            raise HTTPException(404, "Session not found")
        return session

    def _view(session: SessionWorkflow) -> dict:
        view = session.to_view().model_dump(mode="json")
        signpost = signpost_for(session.signposted_concern) if session.signposted_concern else None
        view["signpost"] = signpost.model_dump(mode="json") if signpost else None
        return view

    def _outcome(session: SessionWorkflow, decision: TransitionDecision) -> dict:
        if decision.verdict == TransitionVerdict.REJECTED:
            raise HTTPException(409, decision.model_dump(mode="json"))
        return {
            "decision": decision.model_dump(mode="json"),
            "session": _view(session),
        }

    # === CATALOG ===

    @app.get("/catalog")
    def get_catalog():
        """Catalog version and every template key."""
        return {
            "version": store.catalog.version,
            "keys": store.catalog.keys(),
            "body_types": store.catalog.supported_body_types(),
        }

    @app.get("/catalog/{key}")
    def get_template(key: str):
        template = store.catalog.get(key)
        if template is None:
            raise HTTPException(404, "Pathway not found")
        return template.model_dump(mode="json")

    # === STATELESS ===

    @app.post("/resolve")
    def resolve(req: ResolveRequest):
        """Resolve a pathway and place the user on it."""
        template = resolve_pathway(req.body_type, req.complaint_type, req.nation, store.catalog)
        instance = apply_progress(template, req.steps_taken)
        return instance.model_dump(mode="json")

    @app.post("/deadlines")
    def deadlines(req: DeadlinesRequest):
        """Deadline set for a facts record; null when no event date is found."""
        template = resolve_for_facts(req.facts, store.catalog)
        instance = apply_progress(template, req.facts.steps_taken)
        result = compute_deadlines(
            req.facts,
            instance,
            today=req.today,
            calendar=store.calendar,
            urgent_threshold_days=store.config.urgent_threshold_days,
        )
        return result.model_dump(mode="json") if result else None

    # === SESSIONS ===

    @app.post("/sessions")
    def create_session():
        return _view(store.create())

    @app.get("/sessions/{session_id}")
    def get_session(session_id: str):
        return _view(_session(session_id))

    @app.delete("/sessions/{session_id}")
    def delete_session(session_id: str):
        if not store.delete(session_id):
            raise HTTPException(404, "Session not found")
        return {"status": "deleted", "session_id": session_id}

    @app.post("/sessions/{session_id}/facts")
    def submit_facts(session_id: str, facts: ExtractedFacts):
        session = _session(session_id)
        try:
            decision = session.submit_facts(facts)
        except SessionBusyError as e:
            raise HTTPException(409, str(e))
        return _outcome(session, decision)

    @app.post("/sessions/{session_id}/acknowledge")
    def acknowledge(session_id: str):
        session = _session(session_id)
        return _outcome(session, session.acknowledge_notice())

    @app.post("/sessions/{session_id}/confirm")
    def confirm(session_id: str, req: Optional[ConfirmRequest] = None):
        session = _session(session_id)
        today = req.today if req else None
        return _outcome(session, session.confirm_summary(today=today))

    @app.post("/sessions/{session_id}/letter")
    def request_letter(session_id: str):
        session = _session(session_id)
        return _outcome(session, session.request_letter())

    @app.post("/sessions/{session_id}/restart")
    def restart(session_id: str):
        session = _session(session_id)
        return _outcome(session, session.restart())

    @app.get("/sessions/{session_id}/letter-prompt")
    def letter_prompt(session_id: str):
        payload = _session(session_id).letter_prompt()
        if payload is None:
            raise HTTPException(409, "No pathway resolved for this session")
        return payload.model_dump(mode="json")

    return app


# Default application instance
app = create_app()
