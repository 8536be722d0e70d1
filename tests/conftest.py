"""
File: tests/conftest.py
Purpose: Fake PagerDuty REST API (FastAPI) and client fixtures wired through TestClient.
"""

from copy import deepcopy

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from pagerduty_rest import Client

API_KEY = "test-token"
SUBDOMAIN = "acme"

INCIDENTS = [
    {
        "id": "PT4KHLK",
        "incident_number": 1,
        "created_on": "2024-03-04T10:15:21Z",
        "status": "triggered",
        "html_url": "https://acme.pagerduty.com/incidents/PT4KHLK",
        "incident_key": "disk-full/db-01",
        "trigger_type": "trigger_svc_event",
        "trigger_details_html_url": "https://acme.pagerduty.com/incidents/PT4KHLK/log_entries/Q02JTSNZWHSEKV",
        "trigger_summary_data": {
            "subject": "Disk usage above 95%",
            "HOSTNAME": "db-01",
            "pd_description": "Root partition on db-01 nearly full",
        },
        "service": {
            "id": "PBAZLIU",
            "name": "Postgres",
            "html_url": "https://acme.pagerduty.com/services/PBAZLIU",
        },
        "escalation_policy": {"id": "PUS0KTE", "name": "Database on-call"},
        "assigned_to_user": {
            "id": "PPI9KUT",
            "name": "Alan Kay",
            "email": "alan@acme.example",
            "html_url": "https://acme.pagerduty.com/users/PPI9KUT",
        },
        "assigned_to": [
            {
                "at": "2024-03-04T10:15:22Z",
                "object": {"id": "PPI9KUT", "name": "Alan Kay", "email": "alan@acme.example", "type": "user"},
            }
        ],
        "last_status_change_on": "2024-03-04T10:15:21Z",
        "number_of_escalations": 2,
    },
    {
        "id": "PQ8ZBRA",
        "incident_number": 2,
        "created_on": "2024-03-05T08:01:00Z",
        "status": "acknowledged",
        "trigger_summary_data": {"subject": "API latency p99 > 2s", "HOSTNAME": ""},
        "service": {"id": "PWEB001", "name": "Web API"},
        "last_status_change_by": {"id": "PXPGF42", "name": "Grace Hopper"},
    },
    {
        "id": "PR3SOLV",
        "incident_number": 3,
        "created_on": "2024-03-01T23:40:12Z",
        "status": "resolved",
        "trigger_summary_data": {"subject": "Queue backlog", "HOSTNAME": "mq-02"},
        "resolved_by_user": {"id": "PXPGF42", "name": "Grace Hopper"},
    },
]

_TRANSITIONS = {"resolve": "resolved", "acknowledge": "acknowledged", "snooze": "acknowledged"}


def _error(status_code: int, message: str, code: int, errors=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "code": code, "errors": errors or []}},
    )


def build_fake_pagerduty() -> FastAPI:
    """In-memory stand-in for the /api/v1/incidents endpoints; records every request it sees."""
    app = FastAPI()
    app.state.incidents = {i["id"]: i for i in deepcopy(INCIDENTS)}
    app.state.requests = []

    def _record(request: Request, body=None) -> None:
        app.state.requests.append({
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query,
            "headers": dict(request.headers),
            "body": body,
        })

    def _authorized(request: Request) -> bool:
        return request.headers.get("authorization") == f"Token token={API_KEY}"

    @app.get("/api/v1/incidents")
    async def list_incidents(request: Request):
        _record(request)
        if not _authorized(request):
            return _error(401, "Unauthorized", 2006)
        items = list(app.state.incidents.values())
        status = request.query_params.get("status")
        if status:
            wanted = set(status.split(","))
            items = [i for i in items if i["status"] in wanted]
        sort_by = request.query_params.get("sort_by")
        if sort_by:
            field, _, direction = sort_by.partition(":")
            items.sort(key=lambda i: i.get(field), reverse=(direction == "desc"))
        return {"incidents": items, "limit": 100, "offset": 0, "total": len(items)}

    @app.get("/api/v1/incidents/{incident_id}")
    async def get_incident(incident_id: str, request: Request):
        _record(request)
        if not _authorized(request):
            return _error(401, "Unauthorized", 2006)
        incident = app.state.incidents.get(incident_id)
        if incident is None:
            return _error(404, "Incident Not Found", 5001)
        return incident

    @app.put("/api/v1/incidents/{incident_id}/{action}")
    async def change_status(incident_id: str, action: str, request: Request):
        body = await request.json()
        _record(request, body)
        if not _authorized(request):
            return _error(401, "Unauthorized", 2006)
        incident = app.state.incidents.get(incident_id)
        if incident is None or action not in _TRANSITIONS:
            return _error(404, "Incident Not Found", 5001)
        if action == "snooze" and "duration" not in body:
            return _error(400, "Invalid Input Provided", 2001, ["Duration is required"])
        incident["status"] = _TRANSITIONS[action]
        if body.get("requester_id"):
            incident["last_status_change_by"] = {"id": body["requester_id"]}
            if action == "resolve":
                incident["resolved_by_user"] = {"id": body["requester_id"]}
        return incident

    return app


@pytest.fixture
def fake_api() -> FastAPI:
    return build_fake_pagerduty()


@pytest.fixture
def client(fake_api):
    http = TestClient(fake_api)
    pd = Client(SUBDOMAIN, API_KEY, http=http)
    yield pd
    http.close()


@pytest.fixture
def mock_client():
    """Factory: Client whose requests are answered by handler(request) -> httpx.Response."""
    made = []

    def _make(handler) -> Client:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        made.append(http)
        return Client(SUBDOMAIN, API_KEY, http=http)

    yield _make
    for http in made:
        http.close()


@pytest.fixture
def incident_payloads():
    """Fresh copy of the raw incident JSON the fake API serves."""
    return deepcopy(INCIDENTS)
