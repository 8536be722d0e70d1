"""
File: errors.py
Purpose: Exceptions raised for PagerDuty API failures. Transport errors from httpx pass through untouched.
"""

from typing import Any, List, Optional
import httpx


class PagerDutyError(Exception):
    """Base class for errors raised by this client."""


class PagerDutyAPIError(PagerDutyError, httpx.HTTPStatusError):
    """Raised when the API answers with a non-2xx status.

    Carries the raw request/response plus the fields of the PagerDuty
    error envelope: {"error": {"message": ..., "code": ..., "errors": [...]}}.
    """

    def __init__(
        self,
        message: str,
        *,
        request: httpx.Request,
        response: httpx.Response,
        code: Optional[int] = None,
        errors: Optional[List[Any]] = None,
    ) -> None:
        super().__init__(message, request=request, response=response)
        self.message = message
        self.code = code
        self.errors = errors or []

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        base = f"{self.request.method} {self.request.url}: {self.status_code} {self.message}"
        if self.code is not None:
            base += f" (code {self.code})"
        if self.errors:
            base += f" {self.errors}"
        return base


class PagerDutyDecodeError(PagerDutyError):
    """Raised when a successful response body is not valid JSON."""

    def __init__(self, message: str, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response


def check_response(resp: httpx.Response) -> None:
    """Raise PagerDutyAPIError unless the response status is 2xx."""
    if 200 <= resp.status_code < 300:
        return

    message = resp.reason_phrase or "request failed"
    code = None
    errors: List[Any] = []
    try:
        data = resp.json()
    except ValueError:
        data = None

    err = data.get("error") if isinstance(data, dict) else None
    if isinstance(err, dict):
        message = err.get("message") or message
        code = err.get("code")
        errors = err.get("errors") or []
    elif resp.text:
        message = resp.text[:200]

    raise PagerDutyAPIError(message, request=resp.request, response=resp, code=code, errors=errors)
