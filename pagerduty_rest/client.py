"""
File: client.py
Purpose: Shared synchronous HTTP client for the PagerDuty REST API (auth, JSON bodies, error checks).
"""

import logging
import time
from typing import Optional
import httpx

from .config import Settings
from .errors import check_response
from .incidents import IncidentsService
from .instrumentation import LATENCY, REQUESTS
from .schemas import PagerDutyModel

__version__ = "0.1.0"

log = logging.getLogger(__name__)

BASE_URL_TEMPLATE = "https://{subdomain}.pagerduty.com/api/v1/"
USER_AGENT = f"pagerduty-rest/{__version__}"
DEFAULT_TIMEOUT_SECS = 10.0


class Client:
    """Authenticated PagerDuty client; resource accessors hang off it (e.g. client.incidents)."""

    def __init__(
        self,
        subdomain: str = "",
        api_key: str = "",
        *,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECS,
        http: Optional[httpx.Client] = None,
    ) -> None:
        if not base_url:
            if not subdomain:
                raise ValueError("either subdomain or base_url is required")
            base_url = BASE_URL_TEMPLATE.format(subdomain=subdomain)
        self.base_url = base_url.rstrip("/") + "/"
        self._api_key = api_key
        # An injected httpx.Client belongs to the caller; we only close our own
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(timeout=httpx.Timeout(timeout))

        self.incidents = IncidentsService(self)

    @classmethod
    def from_settings(cls, settings: Settings, http: Optional[httpx.Client] = None) -> "Client":
        """Build a client from environment-backed settings."""
        return cls(
            settings.PAGERDUTY_SUBDOMAIN,
            settings.PAGERDUTY_API_KEY,
            base_url=settings.PAGERDUTY_BASE_URL or None,
            timeout=settings.HTTP_TIMEOUT_SECS,
            http=http,
        )

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _headers(self) -> dict:
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        if self._api_key:
            headers["authorization"] = f"Token token={self._api_key}"
        return headers

    def _url(self, path: str) -> str:
        return self.base_url + path.lstrip("/")

    def request(self, method: str, path: str, body: Optional[dict] = None) -> httpx.Response:
        """Send one request, record metrics, and raise on non-2xx. Transport errors propagate."""
        kwargs: dict = {"headers": self._headers()}
        if body is not None:
            kwargs["json"] = body

        start = time.perf_counter()
        try:
            resp = self._http.request(method, self._url(path), **kwargs)
        except httpx.TransportError as e:
            REQUESTS.labels(method=method, status="error").inc()
            log.warning("pagerduty request failed", extra={"method": method, "path": path, "error": str(e)})
            raise
        finally:
            LATENCY.labels(method=method).observe(time.perf_counter() - start)

        REQUESTS.labels(method=method, status=str(resp.status_code)).inc()
        fields = {"method": method, "path": path, "status": resp.status_code}
        log.debug("pagerduty request", extra=fields)
        if resp.status_code >= 400:
            log.warning("pagerduty request rejected", extra=fields)
        check_response(resp)
        return resp

    def get(self, path: str) -> httpx.Response:
        return self.request("GET", path)

    def put(self, path: str, body: Optional[PagerDutyModel] = None) -> httpx.Response:
        payload = body.to_payload() if body is not None else {}
        return self.request("PUT", path, payload)
