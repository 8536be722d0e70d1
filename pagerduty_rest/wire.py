"""
File: wire.py
Purpose: Query-string encoding and response-body decoding shared by the client and resource accessors.
"""

from typing import Any, Optional, Type, TypeVar
import httpx
from pydantic import ValidationError

from .errors import PagerDutyDecodeError
from .schemas import PagerDutyModel

M = TypeVar("M", bound=PagerDutyModel)


def add_options(path: str, options: Optional[PagerDutyModel]) -> str:
    """Append the non-empty fields of an options model to path as a sorted query string."""
    if options is None:
        return path
    params = sorted(options.to_payload().items())
    if not params:
        return path
    return f"{path}?{httpx.QueryParams(params)}"


def decode(resp: httpx.Response) -> Any:
    """Decode a JSON body; an empty body or a bare null decodes to an empty object."""
    if not resp.content:
        return {}
    try:
        data = resp.json()
    except ValueError as e:
        raise PagerDutyDecodeError(f"invalid JSON in response: {e}", resp) from e
    return {} if data is None else data


def decode_into(resp: httpx.Response, model: Type[M]) -> M:
    """Decode resp into model; shape mismatches raise PagerDutyDecodeError carrying resp."""
    data = decode(resp)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PagerDutyDecodeError(f"unexpected {model.__name__} payload: {e}", resp) from e
