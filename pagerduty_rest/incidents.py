"""
File: incidents.py
Purpose: Incidents resource accessor: get, list, resolve, acknowledge, snooze.
"""

from typing import TYPE_CHECKING, List, Optional
from urllib.parse import quote

from .schemas import (
    Incident,
    IncidentAcknowledgeBody,
    IncidentResolveBody,
    Incidents,
    IncidentSnoozeBody,
    IncidentsOptions,
    PagerDutyModel,
)
from .wire import add_options, decode_into

if TYPE_CHECKING:
    from .client import Client


def _incident_path(incident_id: str, action: str = "") -> str:
    path = "incidents/" + quote(incident_id, safe="")
    return f"{path}/{action}" if action else path


class IncidentsService:
    """Thin mapping of /incidents endpoints onto typed models.

    Transport errors propagate from httpx as-is; API and decoding errors carry the raw response.
    Status changes are whatever the remote API accepts; nothing is tracked locally.
    """

    def __init__(self, client: "Client") -> None:
        self._client = client

    def get(self, incident_id: str) -> Incident:
        """Return a single incident by id."""
        resp = self._client.get(_incident_path(incident_id))
        return decode_into(resp, Incident)

    def list(self, options: Optional[IncidentsOptions] = None) -> List[Incident]:
        """Return incidents matching options, in server order; no options means unfiltered."""
        resp = self._client.get(add_options("incidents", options))
        return decode_into(resp, Incidents).incidents

    def _transition(self, incident_id: str, action: str, body: Optional[PagerDutyModel]) -> Incident:
        resp = self._client.put(_incident_path(incident_id, action), body)
        return decode_into(resp, Incident)

    def resolve(self, incident_id: str, body: Optional[IncidentResolveBody] = None) -> Incident:
        """Resolve an incident. requester_id is required by the API in token auth mode."""
        return self._transition(incident_id, "resolve", body)

    def acknowledge(self, incident_id: str, body: Optional[IncidentAcknowledgeBody] = None) -> Incident:
        """Acknowledge an incident. requester_id is required by the API in token auth mode."""
        return self._transition(incident_id, "acknowledge", body)

    def snooze(self, incident_id: str, body: IncidentSnoozeBody) -> Incident:
        """Snooze an incident for body.duration seconds (sent even when 0)."""
        return self._transition(incident_id, "snooze", body)
