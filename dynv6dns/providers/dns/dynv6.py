"""dynv6 REST API store implementation."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from dynv6dns.deadline import Deadline
from dynv6dns.exceptions import (
    ConfigurationError,
    DeadlineExceededError,
    RemoteCallError,
    ZoneNotFoundError,
)
from dynv6dns.providers.dns.base import RemoteDNSStore
from dynv6dns.records import (
    RecordId,
    RecordRequest,
    RemoteRecord,
    Zone,
    remote_record_adapter,
    remote_records_adapter,
    request_payload,
)

logger = logging.getLogger(__name__)

_zone_adapter = TypeAdapter(Zone)
_zones_adapter = TypeAdapter(list[Zone])


class Dynv6Store(RemoteDNSStore):
    """Remote DNS store backed by the dynv6 REST API.

    Requests made under a deadline run on a worker thread so that a cancel
    or expiry returns to the caller at once. The client the abandoned
    request was using is closed and replaced.
    """

    BASE_URL = "https://dynv6.com/api/v2"

    def __init__(
        self,
        token: str,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the dynv6 client.

        Args:
            token: dynv6 HTTP token (https://dynv6.com/keys)
            base_url: API root, overridable for testing
            timeout: Default per-request timeout in seconds
            transport: Custom httpx transport, for testing
        """
        self.token = token
        self._client_options = {
            "base_url": base_url,
            "headers": {
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            "timeout": timeout,
            "transport": transport,
        }
        self.client = httpx.Client(**self._client_options)
        self._executor = ThreadPoolExecutor(thread_name_prefix="dynv6")

    @classmethod
    def from_token(cls, token: str | None, **kwargs: Any) -> "Dynv6Store":
        """Create a ready store, failing fast when the token is missing.

        Raises:
            ConfigurationError: If *token* is empty.
        """
        if not token:
            raise ConfigurationError(
                "No dynv6 token provided. Set DYNV6_TOKEN or pass token explicitly."
            )
        return cls(token=token, **kwargs)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.client.close()
        self._executor.shutdown(wait=False)

    def _abort(self) -> None:
        """Replace the client an abandoned request is still using."""
        stale, self.client = self.client, httpx.Client(**self._client_options)
        stale.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = getattr(self.client, method)(path, **kwargs)
        response.raise_for_status()
        return response

    def _request_within(
        self, deadline: Deadline, method: str, path: str, **kwargs: Any
    ) -> httpx.Response:
        """Run a request, giving up as soon as the deadline ends."""
        finished = threading.Event()
        future = self._executor.submit(self._request, method, path, **kwargs)
        future.add_done_callback(lambda _: finished.set())

        try:
            deadline.add_callback(finished.set)
            try:
                finished.wait(deadline.remaining())
            finally:
                deadline.remove_callback(finished.set)

            if future.done():
                return future.result()
            deadline.remaining()
            raise DeadlineExceededError("deadline exceeded")
        except DeadlineExceededError:
            self._abort()
            raise

    def _send(
        self, method: str, path: str, deadline: Deadline | None, **kwargs: Any
    ) -> httpx.Response:
        """Issue one request, mapping httpx failures to RemoteCallError.

        Under a deadline the whole request is bounded by the time left, and
        a deadline that ends while the response arrives still fails the call.
        """
        if deadline is not None:
            remaining = deadline.remaining()
            if remaining is not None:
                kwargs["timeout"] = remaining

        logger.debug("%s %s", method.upper(), path)
        try:
            if deadline is None:
                response = self._request(method, path, **kwargs)
            else:
                response = self._request_within(deadline, method, path, **kwargs)
        except httpx.TimeoutException as e:
            if deadline is not None:
                raise DeadlineExceededError(f"{method.upper()} {path} timed out") from e
            raise RemoteCallError(f"{method.upper()} {path} timed out") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise RemoteCallError(
                f"{method.upper()} {path} failed with HTTP {status}", status_code=status
            ) from e
        except httpx.RequestError as e:
            raise RemoteCallError(f"{method.upper()} {path} failed: {e}") from e

        if deadline is not None:
            deadline.remaining()
        return response

    @staticmethod
    def _parse(adapter: Any, response: httpx.Response) -> Any:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteCallError(f"unexpected response from dynv6: {e}") from e

    def list_zones(self, deadline: Deadline | None = None) -> list[Zone]:
        """List all zones of the account."""
        response = self._send("get", "/zones", deadline)
        return self._parse(_zones_adapter, response)

    def get_zone(self, name: str, deadline: Deadline | None = None) -> Zone:
        """Resolve a zone by name."""
        try:
            response = self._send("get", f"/zones/by-name/{quote(name, safe='')}", deadline)
        except RemoteCallError as e:
            if e.status_code == 404:
                raise ZoneNotFoundError(f"Zone '{name}' not found", status_code=404) from e
            raise
        return self._parse(_zone_adapter, response)

    def list_records(
        self, zone_id: RecordId, deadline: Deadline | None = None
    ) -> list[RemoteRecord]:
        """List all records in a zone."""
        response = self._send("get", f"/zones/{zone_id}/records", deadline)
        return self._parse(remote_records_adapter, response)

    def add_record(
        self, zone_id: RecordId, request: RecordRequest, deadline: Deadline | None = None
    ) -> RemoteRecord:
        """Create a record."""
        response = self._send(
            "post", f"/zones/{zone_id}/records", deadline, json=request_payload(request)
        )
        return self._parse(remote_record_adapter, response)

    def update_record(
        self,
        zone_id: RecordId,
        record_id: RecordId,
        request: RecordRequest,
        deadline: Deadline | None = None,
    ) -> RemoteRecord:
        """Update an existing record."""
        response = self._send(
            "patch",
            f"/zones/{zone_id}/records/{record_id}",
            deadline,
            json=request_payload(request),
        )
        return self._parse(remote_record_adapter, response)

    def delete_record(
        self, zone_id: RecordId, record_id: RecordId, deadline: Deadline | None = None
    ) -> None:
        """Delete a record."""
        self._send("delete", f"/zones/{zone_id}/records/{record_id}", deadline)
