"""Tests for the Pathway Kernel API."""

import pytest
from fastapi.testclient import TestClient

from pathway_kernel.api.app import create_app
from pathway_kernel.models.config import KernelConfig
from pathway_kernel.session.store import SessionStore


@pytest.fixture
def client():
    app = create_app(session_store=SessionStore(config=KernelConfig()))
    return TestClient(app)


def _facts(**overrides) -> dict:
    facts = {
        "bodyType": "dwp",
        "complaintType": "decision",
        "nation": "England",
        "dateSpecific": "2025-03-10",
        "stepsTaken": "none",
        "issue": "PIP award reduced",
    }
    facts.update(overrides)
    return facts


def _new_session(client) -> str:
    resp = client.post("/sessions")
    assert resp.status_code == 200
    return resp.json()["session_id"]


class TestCatalogEndpoints:
    def test_catalog(self, client):
        resp = client.get("/catalog")
        assert resp.status_code == 200
        data = resp.json()
        assert data["version"] == "2025.1"
        assert len(data["keys"]) == 26
        assert "police_scotland" not in data["body_types"]

    def test_template(self, client):
        resp = client.get("/catalog/police_ni")
        assert resp.status_code == 200
        assert len(resp.json()["steps"]) == 1

    def test_unknown_template(self, client):
        resp = client.get("/catalog/nonexistent")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Pathway not found"


class TestStatelessEndpoints:
    def test_resolve(self, client):
        resp = client.post("/resolve", json={
            "body_type": "police",
            "nation": "Scotland",
            "steps_taken": "complained to PIRC",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["key"] == "police_scotland"
        assert [s["current"] for s in data["steps"]] == [False, True]

    def test_resolve_unknown_body(self, client):
        resp = client.post("/resolve", json={"body_type": "water_company"})
        assert resp.json()["key"] == "other_gov"

    def test_deadlines(self, client):
        resp = client.post("/deadlines", json={"facts": _facts(), "today": "2025-03-20"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["submit_by"] == "2025-04-10"
        assert data["days_remaining"] == 21
        assert data["submit_urgent"] is True

    def test_deadlines_without_date(self, client):
        resp = client.post("/deadlines", json={"facts": _facts(dateSpecific=None), "today": "2025-03-20"})
        assert resp.status_code == 200
        assert resp.json() is None


class TestSessionLifecycle:
    def test_create_and_get(self, client):
        session_id = _new_session(client)
        resp = client.get(f"/sessions/{session_id}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "intake"
        assert data["signpost"] is None

    def test_get_missing(self, client):
        resp = client.get("/sessions/nonexistent")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Session not found"

    def test_delete(self, client):
        session_id = _new_session(client)
        resp = client.delete(f"/sessions/{session_id}")
        assert resp.json() == {"status": "deleted", "session_id": session_id}
        assert client.get(f"/sessions/{session_id}").status_code == 404
        assert client.delete(f"/sessions/{session_id}").status_code == 404

    def test_full_flow(self, client):
        session_id = _new_session(client)

        resp = client.post(f"/sessions/{session_id}/facts", json=_facts())
        assert resp.status_code == 200
        assert resp.json()["session"]["status"] == "summary"

        resp = client.post(f"/sessions/{session_id}/confirm", json={"today": "2025-03-20"})
        assert resp.status_code == 200
        session = resp.json()["session"]
        assert session["status"] == "pathway"
        assert session["pathway"]["key"] == "dwp_decision"
        assert session["deadlines"]["submit_by"] == "2025-04-10"

        resp = client.get(f"/sessions/{session_id}/letter-prompt")
        assert resp.status_code == 200
        assert resp.json()["directed_to"] == "Request Mandatory Reconsideration"

        resp = client.post(f"/sessions/{session_id}/letter")
        assert resp.status_code == 200
        assert resp.json()["session"]["status"] == "letter"

    def test_confirm_without_body(self, client):
        session_id = _new_session(client)
        client.post(f"/sessions/{session_id}/facts", json=_facts())
        resp = client.post(f"/sessions/{session_id}/confirm")
        assert resp.status_code == 200
        assert resp.json()["decision"]["verdict"] == "approved"

    def test_null_fields_accepted(self, client):
        session_id = _new_session(client)
        resp = client.post(
            f"/sessions/{session_id}/facts",
            json=_facts(thirdParty=None, thirdPartyName=None, safeguardingConcern=None),
        )
        assert resp.status_code == 200
        assert resp.json()["session"]["facts"]["third_party"] is False

    def test_incomplete_facts_conflict(self, client):
        session_id = _new_session(client)
        resp = client.post(f"/sessions/{session_id}/facts", json={"issue": "Something"})
        assert resp.status_code == 409
        assert resp.json()["detail"]["reason"] == "facts_incomplete"

    def test_out_of_order_conflict(self, client):
        session_id = _new_session(client)
        resp = client.post(f"/sessions/{session_id}/letter")
        assert resp.status_code == 409
        assert resp.json()["detail"]["reason"] == "invalid_transition"

    def test_letter_prompt_before_pathway(self, client):
        session_id = _new_session(client)
        assert client.get(f"/sessions/{session_id}/letter-prompt").status_code == 409

    def test_busy_session_conflict(self, client):
        session_id = _new_session(client)
        client.app.state.session_store.get(session_id).begin_external_call()
        resp = client.post(f"/sessions/{session_id}/facts", json=_facts())
        assert resp.status_code == 409


class TestSafeguardingEndpoints:
    def test_serious_concern_signposted(self, client):
        session_id = _new_session(client)
        client.post(f"/sessions/{session_id}/facts", json=_facts(safeguardingConcern="crime"))
        resp = client.post(f"/sessions/{session_id}/confirm")
        assert resp.status_code == 200
        data = resp.json()
        assert data["decision"]["verdict"] == "diverted"
        assert data["session"]["status"] == "signposted"
        assert "101" in " ".join(data["session"]["signpost"]["contacts"])

    def test_regulatory_acknowledgment(self, client):
        session_id = _new_session(client)
        client.post(f"/sessions/{session_id}/facts", json=_facts(safeguardingConcern="regulatory"))

        resp = client.post(f"/sessions/{session_id}/confirm")
        assert resp.status_code == 409
        assert resp.json()["detail"]["reason"] == "acknowledgment_required"

        resp = client.post(f"/sessions/{session_id}/acknowledge")
        assert resp.status_code == 200

        resp = client.post(f"/sessions/{session_id}/confirm")
        assert resp.status_code == 200
        assert resp.json()["session"]["status"] == "pathway"

    def test_restart(self, client):
        session_id = _new_session(client)
        client.post(f"/sessions/{session_id}/facts", json=_facts(safeguardingConcern="emergency"))
        client.post(f"/sessions/{session_id}/confirm")

        resp = client.post(f"/sessions/{session_id}/restart")
        assert resp.status_code == 200
        session = resp.json()["session"]
        assert session["status"] == "intake"
        assert session["epoch"] == 1
        assert session["signpost"] is None
