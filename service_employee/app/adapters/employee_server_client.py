"""
Employee server client for the Employee API.
"""

import time
from typing import Any, Dict, List, Optional
from uuid import UUID

import httpx

from shared.logging import get_logger
from shared.metrics import MetricsCollector
from ..domain.models import Employee, EmployeeInput
from ..domain.results import Result
from .employee_mapper import (
    DeleteResponse,
    EmployeeListResponse,
    EmployeeResponse,
    to_create_payload,
    to_delete_payload,
    to_employee,
)


class EmployeeServerClient:
    """Client for the upstream employee server.

    Every operation returns a :class:`Result`; transport errors, undecodable
    bodies and non-2xx statuses become failures instead of exceptions.
    This client never reads or writes the cache.
    """

    def __init__(
        self,
        employee_server_url: str,
        *,
        timeout: float = 10.0,
        metrics: Optional[MetricsCollector] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = employee_server_url.rstrip('/')
        self.timeout = timeout
        self.metrics = metrics
        self._transport = transport
        self.logger = get_logger("employee.server_client")

    async def fetch_all(self) -> Result[List[Employee]]:
        """Load every employee."""
        operation = "fetch_all"
        try:
            response = await self._send(operation, "GET", self.base_url)
        except httpx.HTTPError as exc:
            return self._transport_failure(operation, exc)

        if not response.is_success:
            return self._status_failure(operation, response)

        try:
            envelope = EmployeeListResponse.model_validate(response.json())
        except ValueError as exc:
            return self._decode_failure(operation, exc)

        if envelope.data is None:
            self.logger.error("Employee server returned no data", operation=operation)
            return Result.failure("Employee server returned no data")

        employees = [to_employee(entity) for entity in envelope.data if entity is not None]
        self.logger.debug("Employees loaded", count=len(employees))
        return Result.ok(employees)

    async def fetch_by_id(self, employee_id: UUID) -> Result[Employee]:
        """Load one employee; a 404 from upstream is reported as not found."""
        operation = "fetch_by_id"
        url = f"{self.base_url}/{employee_id}"
        try:
            response = await self._send(operation, "GET", url)
        except httpx.HTTPError as exc:
            return self._transport_failure(operation, exc, employee_id=employee_id)

        if response.status_code == 404:
            self.logger.info("Employee not found", employee_id=str(employee_id))
            return Result.not_found(f"Employee {employee_id} not found")

        if not response.is_success:
            return self._status_failure(operation, response, employee_id=employee_id)

        try:
            envelope = EmployeeResponse.model_validate(response.json())
        except ValueError as exc:
            return self._decode_failure(operation, exc, employee_id=employee_id)

        employee = to_employee(envelope.data)
        if employee is None:
            self.logger.info("Employee not found", employee_id=str(employee_id))
            return Result.not_found(f"Employee {employee_id} not found")

        return Result.ok(employee)

    async def create(self, employee_input: EmployeeInput) -> Result[Employee]:
        """Create an employee and return the record the server assigned."""
        operation = "create"
        try:
            response = await self._send(
                operation, "POST", self.base_url, json=to_create_payload(employee_input)
            )
        except httpx.HTTPError as exc:
            return self._transport_failure(operation, exc)

        if not response.is_success:
            return self._status_failure(operation, response)

        try:
            envelope = EmployeeResponse.model_validate(response.json())
        except ValueError as exc:
            return self._decode_failure(operation, exc)

        employee = to_employee(envelope.data)
        if employee is None:
            self.logger.error("Employee server returned no created employee", operation=operation)
            return Result.failure("Employee server returned no created employee")

        self.logger.info("Employee created", employee_id=str(employee.id))
        return Result.ok(employee)

    async def remove(self, employee_id: UUID) -> Result[str]:
        """Delete an employee by id and return the deleted name.

        The upstream delete is keyed by name, so the record is looked up
        first. That lookup always goes to the server; a missing employee
        short-circuits before any delete call is made.
        """
        operation = "remove"
        lookup = await self.fetch_by_id(employee_id)
        if lookup.is_not_found:
            self.logger.info("Employee not found, cannot delete", employee_id=str(employee_id))
            return Result.not_found(lookup.error)
        if lookup.is_failure:
            return Result.failure(lookup.error or "Employee lookup failed")

        name = lookup.value.name
        if name is None:
            self.logger.error("Employee has no name, cannot delete", employee_id=str(employee_id))
            return Result.failure(f"Employee {employee_id} has no name")

        try:
            response = await self._send(
                operation, "DELETE", self.base_url, json=to_delete_payload(name)
            )
        except httpx.HTTPError as exc:
            return self._transport_failure(operation, exc, employee_id=employee_id)

        if not response.is_success:
            return self._status_failure(operation, response, employee_id=employee_id)

        try:
            envelope = DeleteResponse.model_validate(response.json())
        except ValueError as exc:
            return self._decode_failure(operation, exc, employee_id=employee_id)

        if envelope.data is not True:
            self.logger.error(
                "Employee server did not delete employee",
                employee_id=str(employee_id),
                error=envelope.error,
            )
            return Result.failure(f"Employee {employee_id} was not deleted")

        self.logger.info("Employee deleted", employee_id=str(employee_id))
        return Result.ok(name)

    def _client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def _send(
        self,
        operation: str,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Issue one request and record its duration and status."""
        start_time = time.time()
        outcome = "error"
        try:
            async with self._client() as client:
                if method == "GET":
                    response = await client.get(url)
                elif method == "POST":
                    response = await client.post(url, json=json)
                else:
                    # httpx.AsyncClient.delete() takes no body
                    response = await client.request(method, url, json=json)
            outcome = str(response.status_code)
            return response
        finally:
            if self.metrics:
                self.metrics.record_upstream_request(operation, outcome, time.time() - start_time)

    def _transport_failure(self, operation: str, exc: Exception, **context) -> Result:
        self.logger.error(
            "Employee server HTTP error",
            operation=operation,
            error=str(exc),
            **self._stringify(context),
        )
        return Result.failure(f"Employee server unavailable: {exc}")

    def _status_failure(self, operation: str, response: httpx.Response, **context) -> Result:
        self.logger.error(
            "Employee server request failed",
            operation=operation,
            status_code=response.status_code,
            response=response.text,
            **self._stringify(context),
        )
        return Result.failure(f"Unexpected status {response.status_code}")

    def _decode_failure(self, operation: str, exc: Exception, **context) -> Result:
        self.logger.error(
            "Employee server response could not be decoded",
            operation=operation,
            error=str(exc),
            **self._stringify(context),
        )
        return Result.failure("Malformed response from employee server")

    @staticmethod
    def _stringify(context: Dict[str, Any]) -> Dict[str, str]:
        return {key: str(value) for key, value in context.items()}
