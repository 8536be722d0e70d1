from typing import Optional
from pydantic import Field
from .base import PagerDutyModel


class User(PagerDutyModel):
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    time_zone: Optional[str] = None
    color: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None
    user_url: Optional[str] = None
    invitation_sent: Optional[bool] = None
    marketing_opt_out: Optional[bool] = None


class UserObject(PagerDutyModel):
    """One entry of an incident's `assigned_to` list."""
    at: Optional[str] = None
    user: Optional[User] = Field(None, alias="object")
