"""Upstream Employee Client — httpx wrapper for the employee mock API with error mapping.

Invariants:
    - Implements core.source_protocols.EmployeeSource
    - fetch_all: missing/null `data` → [] (logged, not raised)
    - fetch_by_id: upstream 404 or missing `data` → None
    - Timeouts and connection failures → UpstreamUnavailableError
    - 429 and 5xx → UpstreamUnavailableError; other 4xx / unparseable body → UpstreamResponseError
    - No retry, no caching: one upstream call per operation

Design Decisions:
    - Base URL and timeout injected at construction (config.Settings), never module globals
    - Optional transport parameter: tests plug in httpx.MockTransport, no network
"""

import logging
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from employee_api.core.domain_types import EmployeeRecord
from employee_api.core.errors import (
    EmployeeApiError,
    ErrorContext,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from employee_api.schemas.employee import (
    DeleteEmployeeRequest,
    UpstreamListEnvelope,
    UpstreamSingleEnvelope,
)

logger = logging.getLogger(__name__)

EMPLOYEE_PATH = "/api/v1/employee"

_Envelope = TypeVar("_Envelope", bound=BaseModel)


class UpstreamEmployeeClient:
    """Talks to the upstream employee API; maps every transport failure to core errors."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_all(self) -> list[EmployeeRecord]:
        response = await self._send("GET", EMPLOYEE_PATH)
        envelope = self._parse(response, UpstreamListEnvelope)
        if envelope.data is None:
            logger.warning(
                "No data returned from upstream for fetch_all, returning empty list",
                extra={"upstream_url": str(response.request.url)},
            )
            return []
        return [e.to_record() for e in envelope.data]

    async def fetch_by_id(self, employee_id: str) -> EmployeeRecord | None:
        path = f"{EMPLOYEE_PATH}/{quote(employee_id, safe='')}"
        response = await self._send("GET", path, allow_not_found=True)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning(
                f"Employee not found upstream for id: {employee_id}",
                extra={"employee_id": employee_id},
            )
            return None
        envelope = self._parse(response, UpstreamSingleEnvelope)
        if envelope.data is None:
            logger.warning(
                f"No data returned from upstream for fetch_by_id({employee_id})",
                extra={"employee_id": employee_id},
            )
            return None
        return envelope.data.to_record()

    async def create(self, employee_data: dict) -> EmployeeRecord:
        response = await self._send("POST", EMPLOYEE_PATH, json=employee_data)
        envelope = self._parse(response, UpstreamSingleEnvelope)
        if envelope.data is None:
            logger.warning("No data returned from upstream after employee creation")
            raise UpstreamResponseError(
                "employee creation returned no data",
                context=ErrorContext(upstream_url=str(response.request.url)),
            )
        return envelope.data.to_record()

    async def delete_by_name(self, name: str) -> None:
        body = DeleteEmployeeRequest(name=name).model_dump()
        await self._send("DELETE", EMPLOYEE_PATH, json=body)

    async def health_check(self) -> bool:
        """Check upstream reachability (for readiness probes)."""
        try:
            await self._send("GET", EMPLOYEE_PATH)
            return True
        except EmployeeApiError as e:
            logger.warning(f"Upstream health check failed: {e.message}")
            return False

    async def _send(
        self, method: str, path: str, allow_not_found: bool = False, **kwargs,
    ) -> httpx.Response:
        """Issue one request and map transport/status failures to core errors."""
        url = f"{self.base_url}{path}"
        logger.info(f"{method} {url}", extra={"method": method, "upstream_url": url})
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError(
                f"{method} {path} timed out", "timeout",
                context=ErrorContext(upstream_url=url, debug_info={"error": str(e)}),
            )
        except httpx.TransportError as e:
            logger.warning(
                f"{method} {url} transport failure: {e}",
                extra={"method": method, "upstream_url": url},
            )
            raise UpstreamUnavailableError(
                f"{method} {path} failed", "connection_error",
                context=ErrorContext(upstream_url=url, debug_info={"error": str(e)}),
            )

        status_code = response.status_code
        if status_code == httpx.codes.NOT_FOUND and allow_not_found:
            return response
        if status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise UpstreamUnavailableError(
                "rate limit exceeded", "rate_limit",
                retry_after_ms=self._extract_retry_after(response),
                context=ErrorContext(upstream_url=url, upstream_status=status_code),
            )
        if status_code >= 500:
            raise UpstreamUnavailableError(
                f"HTTP {status_code}", "server_error",
                context=ErrorContext(upstream_url=url, upstream_status=status_code),
            )
        if status_code >= 400:
            raise UpstreamResponseError(
                f"HTTP {status_code} from {method} {path}",
                context=ErrorContext(upstream_url=url, upstream_status=status_code),
            )
        logger.debug(
            f"{method} {url} -> {status_code}",
            extra={"status_code": status_code, "upstream_url": url},
        )
        return response

    def _parse(
        self, response: httpx.Response, model: type[_Envelope],
    ) -> _Envelope:
        """Validate an upstream envelope. Empty body → empty envelope."""
        if not response.content:
            return model()
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise UpstreamResponseError(
                f"unparseable body ({e.__class__.__name__})",
                context=ErrorContext(
                    upstream_url=str(response.request.url),
                    upstream_status=response.status_code,
                ),
            )

    def _extract_retry_after(self, response: httpx.Response) -> int | None:
        """Extract Retry-After header (returns milliseconds)."""
        val = response.headers.get("retry-after")
        if not val:
            return None
        try:
            return int(val) * 1000
        except ValueError:
            return None
