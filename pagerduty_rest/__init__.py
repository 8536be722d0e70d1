from .client import Client, __version__
from .errors import PagerDutyAPIError, PagerDutyDecodeError, PagerDutyError
from .incidents import IncidentsService
from .wire import add_options, decode, decode_into
from .schemas import (
    EscalationPolicy,
    Incident,
    IncidentAcknowledgeBody,
    IncidentResolveBody,
    IncidentSnoozeBody,
    IncidentsOptions,
    IncidentSummary,
    Service,
    User,
    UserObject,
)

__all__ = [
    "Client",
    "__version__",
    "add_options",
    "decode",
    "decode_into",
    "PagerDutyAPIError",
    "PagerDutyDecodeError",
    "PagerDutyError",
    "IncidentsService",
    "EscalationPolicy",
    "Incident",
    "IncidentAcknowledgeBody",
    "IncidentResolveBody",
    "IncidentSnoozeBody",
    "IncidentsOptions",
    "IncidentSummary",
    "Service",
    "User",
    "UserObject",
]
