from .base import PagerDutyModel
from .incidents import (
    Incident,
    IncidentAcknowledgeBody,
    IncidentResolveBody,
    Incidents,
    IncidentSnoozeBody,
    IncidentsOptions,
    IncidentSummary,
)
from .services import EscalationPolicy, Service
from .users import User, UserObject

__all__ = [
    "PagerDutyModel",
    "Incident",
    "IncidentAcknowledgeBody",
    "IncidentResolveBody",
    "Incidents",
    "IncidentSnoozeBody",
    "IncidentsOptions",
    "IncidentSummary",
    "EscalationPolicy",
    "Service",
    "User",
    "UserObject",
]
