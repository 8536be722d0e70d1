"""
File: schemas/base.py
Purpose: Shared pydantic base for PagerDuty wire types (aliases in, omit-when-empty out).
"""

from typing import Any, ClassVar, Dict, FrozenSet
from pydantic import BaseModel, ConfigDict, model_validator


def _is_empty(value: Any) -> bool:
    """Zero values that the API treats as absent: None, False, 0, "" and empty containers."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _dump(value: Any) -> Any:
    if isinstance(value, PagerDutyModel):
        return value.to_payload()
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


class PagerDutyModel(BaseModel):
    """Base for every request/response body exchanged with the REST API."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Wire keys serialized even when empty
    ALWAYS_SENT: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _null_means_absent(cls, data: Any) -> Any:
        # JSON null decodes to the field's zero value, same as a missing key
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready dict keyed by wire names, dropping empty optional fields."""
        payload: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            key = field.alias or name
            value = getattr(self, name)
            if key not in self.ALWAYS_SENT and _is_empty(value):
                continue
            payload[key] = _dump(value)
        return payload
