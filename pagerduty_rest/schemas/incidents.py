from typing import ClassVar, FrozenSet, List, Optional
from pydantic import Field
from .base import PagerDutyModel
from .services import EscalationPolicy, Service
from .users import User, UserObject


class IncidentSummary(PagerDutyModel):
    """Denormalized trigger metadata (`trigger_summary_data`)."""
    ALWAYS_SENT: ClassVar[FrozenSet[str]] = frozenset({"HOSTNAME"})

    subject: Optional[str] = None
    hostname: str = Field("", alias="HOSTNAME")
    description: Optional[str] = Field(None, alias="pd_description")


class Incident(PagerDutyModel):
    id: Optional[str] = None
    incident_number: Optional[int] = None
    status: Optional[str] = None
    created_on: Optional[str] = None
    summary: Optional[IncidentSummary] = Field(None, alias="trigger_summary_data")
    assigned_to_user: Optional[User] = None
    service: Optional[Service] = None
    escalation_policy: Optional[EscalationPolicy] = None
    html_url: Optional[str] = None
    incident_key: Optional[str] = None
    trigger_details_html_url: Optional[str] = None
    trigger_type: Optional[str] = None
    last_status_change_on: Optional[str] = None
    last_status_change_by: Optional[User] = None
    number_of_escalations: Optional[int] = None
    resolved_by_user: Optional[User] = None
    assigned_to: List[UserObject] = Field(default_factory=list)


class Incidents(PagerDutyModel):
    """List envelope returned by GET /incidents (paging keys are ignored)."""
    incidents: List[Incident] = Field(default_factory=list)


class IncidentsOptions(PagerDutyModel):
    """Optional filters for listing; passed through without validation."""
    status: Optional[str] = None
    sort_by: Optional[str] = None
    since: Optional[str] = None
    until: Optional[str] = None


class IncidentResolveBody(PagerDutyModel):
    # Required by the API in token auth mode; the caller is responsible for it.
    requester_id: Optional[str] = None


class IncidentAcknowledgeBody(PagerDutyModel):
    # Required by the API in token auth mode; the caller is responsible for it.
    requester_id: Optional[str] = None


class IncidentSnoozeBody(PagerDutyModel):
    ALWAYS_SENT: ClassVar[FrozenSet[str]] = frozenset({"duration"})

    requester_id: Optional[str] = None
    duration: int  # seconds
