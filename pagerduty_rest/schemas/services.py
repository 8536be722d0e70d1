from typing import Optional
from .base import PagerDutyModel


class Service(PagerDutyModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    service_url: Optional[str] = None
    service_key: Optional[str] = None
    auto_resolve_timeout: Optional[int] = None
    acknowledgement_timeout: Optional[int] = None
    created_at: Optional[str] = None
    status: Optional[str] = None
    last_incident_timestamp: Optional[str] = None
    type: Optional[str] = None


class EscalationPolicy(PagerDutyModel):
    id: Optional[str] = None
    name: Optional[str] = None
    num_loops: Optional[int] = None
