"""HTTP client for the job-board REST backend.

The backend is an external collaborator: this module only knows the endpoints
the wizards and dashboards call and the two response shapes list endpoints use
(a plain array, or an envelope with a ``results`` list). Failures surface as
:class:`core.errors.ApiError` subclasses; read requests are retried with
backoff, writes are sent once.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import requests
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

import config as app_config
from core.errors import (
    ApiError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
)
from utils.retry import API_READ_RETRY_EXCEPTIONS, retry_with_backoff

logger = logging.getLogger("hiring_wizards.api")
tracer = trace.get_tracer(__name__)

TokenProvider = Callable[[], str | None]

_DEFAULT_MESSAGES: dict[int, str] = {
    400: "The request was rejected. Please review your answers.",
    401: "Your session has expired. Please log in again.",
    403: "You do not have permission to do that.",
    404: "The requested resource was not found.",
}
_SERVER_MESSAGE = "The job board is having trouble right now. Please try again later."
_NETWORK_MESSAGE = "Network error - please check your connection."
_REQUEST_FAILED_MESSAGE = "Could not reach the job board. Please try again later."


def unwrap_results(payload: Any) -> list[Any]:
    """Return the list items of a list-endpoint response.

    Accepts either a bare JSON array or a ``{"results": [...]}`` envelope;
    anything else yields an empty list.
    """

    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        results = payload.get("results")
        if isinstance(results, list):
            return results
    return []


def _extract_message(response: requests.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, Mapping):
        for key in ("detail", "message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None


def _error_for_response(response: requests.Response) -> ApiError:
    status = response.status_code
    message = _extract_message(response)
    if status == 401:
        logger.warning("Unauthorized response from %s", response.url)
        return AuthenticationError(message or _DEFAULT_MESSAGES[401], status=status)
    if status == 403:
        logger.warning("Forbidden - insufficient permissions for %s", response.url)
        return PermissionDeniedError(message or _DEFAULT_MESSAGES[403], status=status)
    if status == 404:
        logger.warning("Resource not found: %s", response.url)
        return NotFoundError(message or _DEFAULT_MESSAGES[404], status=status)
    if status >= 500:
        logger.error("Server error %s from %s", status, response.url)
        return ServerError(_SERVER_MESSAGE, status=status)
    logger.warning("Request to %s failed with %s", response.url, status)
    return ApiError(message or _DEFAULT_MESSAGES.get(status, _DEFAULT_MESSAGES[400]), status=status)


class JobBoardClient:
    """Thin wrapper around ``requests`` for the job-board API."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        token_provider: TokenProvider | None = None,
        http: requests.Session | None = None,
        read_retries: int | None = None,
    ) -> None:
        self.base_url = (base_url or app_config.JOBBOARD_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else app_config.JOBBOARD_API_TIMEOUT
        self._token_provider = token_provider
        self._http = http or requests.Session()
        self._read_retries = read_retries if read_retries is not None else app_config.JOBBOARD_API_READ_RETRIES

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self._token_provider() if self._token_provider is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (``None`` when empty)."""

        url = self._url(path)
        with tracer.start_as_current_span("jobboard.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.url", url)
            try:
                response = self._http.request(
                    method,
                    url,
                    params=dict(params) if params else None,
                    json=json,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
            except (requests.ConnectionError, requests.Timeout) as exc:
                logger.error("Network error calling %s %s: %s", method, url, exc)
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                raise NetworkError(_NETWORK_MESSAGE) from exc
            except requests.RequestException as exc:
                logger.error("Request to %s %s failed: %s", method, url, exc)
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                raise ApiError(_REQUEST_FAILED_MESSAGE) from exc

            span.set_attribute("http.status_code", response.status_code)
            if response.status_code >= 400:
                error = _error_for_response(response)
                span.set_status(Status(StatusCode.ERROR, error.message))
                raise error

            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                span.record_exception(exc)
                raise ApiError("The job board returned an unreadable response.", status=response.status_code) from exc

    def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        """GET with exponential backoff on network and server errors."""

        @retry_with_backoff(exceptions=API_READ_RETRY_EXCEPTIONS, max_tries=self._read_retries)
        def _run() -> Any:
            return self.request("GET", path, params=params)

        return _run()

    def post(self, path: str, data: Any = None) -> Any:
        return self.request("POST", path, json=data)

    def patch(self, path: str, data: Any = None) -> Any:
        return self.request("PATCH", path, json=data)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    # Jobs
    def get_jobs(self, params: Mapping[str, Any] | None = None) -> list[Any]:
        return unwrap_results(self.get("/jobs/", params=params))

    def get_job(self, job_id: int | str) -> Any:
        return self.get(f"/jobs/{job_id}/")

    def create_job(self, data: Mapping[str, Any]) -> Any:
        return self.post("/jobs/", dict(data))

    def update_job(self, job_id: int | str, data: Mapping[str, Any]) -> Any:
        return self.patch(f"/jobs/{job_id}/", dict(data))

    def delete_job(self, job_id: int | str) -> Any:
        return self.delete(f"/jobs/{job_id}/")

    # Companies
    def get_companies(self, params: Mapping[str, Any] | None = None) -> list[Any]:
        return unwrap_results(self.get("/companies/", params=params))

    def get_company(self, company_id: int | str) -> Any:
        return self.get(f"/companies/{company_id}/")

    def create_company(self, data: Mapping[str, Any]) -> Any:
        return self.post("/companies/", dict(data))

    def update_company(self, company_id: int | str, data: Mapping[str, Any]) -> Any:
        return self.patch(f"/companies/{company_id}/", dict(data))

    # Applications
    def get_applications(self, params: Mapping[str, Any] | None = None) -> list[Any]:
        return unwrap_results(self.get("/applications/", params=params))

    def get_application(self, application_id: int | str) -> Any:
        return self.get(f"/applications/{application_id}/")

    def create_application(self, data: Mapping[str, Any]) -> Any:
        return self.post("/applications/", dict(data))

    def update_application(self, application_id: int | str, data: Mapping[str, Any]) -> Any:
        return self.patch(f"/applications/{application_id}/", dict(data))

    # Auth
    def register(self, data: Mapping[str, Any]) -> Any:
        return self.post("/auth/register/", dict(data))

    def get_profile(self) -> Any:
        return self.get("/auth/profile/")

    def update_profile(self, data: Mapping[str, Any]) -> Any:
        return self.patch("/auth/profile/", dict(data))

    # Analytics
    def track_job_view(self, job_id: int | str) -> Any:
        return self.post(f"/analytics/track/job/{job_id}/")

    def track_search(self, query: str, filters: Mapping[str, Any], results_count: int) -> Any:
        return self.post(
            "/analytics/track/search/",
            {"query": query, "filters": dict(filters), "results_count": results_count},
        )

    def get_employer_analytics(self, days: int | None = None) -> Any:
        return self.get("/analytics/employer/", params={"days": days} if days else None)

    def get_seeker_analytics(self, days: int | None = None) -> Any:
        return self.get("/analytics/seeker/", params={"days": days} if days else None)

    def health_check(self) -> Any:
        return self.get("/health/")


__all__ = ["JobBoardClient", "TokenProvider", "unwrap_results"]
