"""Zone reconciliation against dynv6.

The Provider is what DNS automation (ACME DNS-01 solvers, dynamic DNS
updaters) talks to. It works in generic records and zone names, and
turns each call into one listing fetch plus one store mutation per input
record, issued in input order. Matching is always done against the
listing fetched at the start of the call, so a record created earlier in
the same call is never seen as a match.

Nothing is retried and nothing is rolled back: the first failure aborts
the operation, leaving mutations already applied in place.
"""

import logging
import threading
from collections.abc import Iterable

from pydantic import ValidationError

from dynv6dns.codec import decode, encode
from dynv6dns.config import Dynv6Settings, load_settings
from dynv6dns.deadline import Deadline
from dynv6dns.exceptions import ConfigurationError
from dynv6dns.matcher import find_record
from dynv6dns.providers.dns.base import RemoteDNSStore
from dynv6dns.providers.dns.dynv6 import Dynv6Store
from dynv6dns.records import GenericRecord, RemoteRecord, Zone

logger = logging.getLogger(__name__)


class Provider:
    """Generic record management for dynv6 zones."""

    def __init__(
        self,
        token: str | None = None,
        store: RemoteDNSStore | None = None,
        settings: Dynv6Settings | None = None,
    ):
        """Initialize the provider.

        The store is created on first use, so a missing token or bad
        environment settings are only reported when an operation is called.

        Args:
            token: dynv6 HTTP token. Falls back to ``settings.token``.
            store: Pre-built store, used as-is (no token needed).
            settings: Connection settings for the default dynv6 store.
                Loaded from the environment when omitted.
        """
        self.token = token
        self.settings = settings
        self._store = store
        self._lock = threading.Lock()

    def __enter__(self) -> "Provider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the store, if one was created or injected."""
        with self._lock:
            if self._store is not None:
                self._store.close()

    def _ensure_store(self) -> RemoteDNSStore:
        """Return the store, creating it once.

        Raises:
            ConfigurationError: If no token is configured or the
                environment settings are invalid.
        """
        with self._lock:
            if self._store is None:
                if self.settings is None:
                    try:
                        self.settings = load_settings()
                    except ValidationError as e:
                        raise ConfigurationError(f"Invalid dynv6 settings: {e}") from e
                token = self.token if self.token is not None else self.settings.token
                self._store = Dynv6Store.from_token(
                    token,
                    base_url=self.settings.base_url,
                    timeout=self.settings.timeout,
                )
            return self._store

    def _snapshot(
        self, zone: str, deadline: Deadline | None
    ) -> tuple[RemoteDNSStore, Zone, list[RemoteRecord]]:
        store = self._ensure_store()
        resolved = store.get_zone(zone, deadline=deadline)
        listing = store.list_records(resolved.id, deadline=deadline)
        return store, resolved, listing

    def list_zones(self, deadline: Deadline | None = None) -> list[Zone]:
        """List the zones available to the configured token."""
        return self._ensure_store().list_zones(deadline=deadline)

    def get_records(self, zone: str, deadline: Deadline | None = None) -> list[GenericRecord]:
        """Return all records in the zone, in listing order."""
        _, _, listing = self._snapshot(zone, deadline)
        return [decode(remote) for remote in listing]

    def append_records(
        self,
        zone: str,
        records: Iterable[GenericRecord],
        deadline: Deadline | None = None,
    ) -> list[GenericRecord]:
        """Create records that do not exist yet.

        A record whose type and name already exist in the zone is skipped;
        existing records are never changed.

        Returns:
            The records that were created, in creation order.
        """
        store, resolved, listing = self._snapshot(zone, deadline)
        created = []

        for record in records:
            if find_record(listing, record, len(listing)) is not None:
                logger.debug("%s %s already exists in %s, skipping", record.type, record.name, zone)
                continue

            request = encode(record)
            store.add_record(resolved.id, request, deadline=deadline)
            logger.info("Created %s record %s in %s", record.type, record.name, zone)
            created.append(record)

        return created

    def set_records(
        self,
        zone: str,
        records: Iterable[GenericRecord],
        deadline: Deadline | None = None,
    ) -> list[GenericRecord]:
        """Create or update records so the zone reflects the input.

        Returns:
            One record per input record, in input order.
        """
        store, resolved, listing = self._snapshot(zone, deadline)
        result = []

        for record in records:
            request = encode(record)
            existing = find_record(listing, record, len(listing))

            if existing is None:
                store.add_record(resolved.id, request, deadline=deadline)
                logger.info("Created %s record %s in %s", record.type, record.name, zone)
            else:
                store.update_record(resolved.id, existing.id, request, deadline=deadline)
                logger.info("Updated %s record %s in %s", record.type, record.name, zone)
            result.append(record)

        return result

    def delete_records(
        self,
        zone: str,
        records: Iterable[GenericRecord],
        deadline: Deadline | None = None,
    ) -> list[GenericRecord]:
        """Delete records matching the input; records not in the zone are ignored.

        Returns:
            The records that were deleted, in deletion order.
        """
        store, resolved, listing = self._snapshot(zone, deadline)
        deleted = []

        for record in records:
            existing = find_record(listing, record, len(listing))
            if existing is None:
                continue

            store.delete_record(resolved.id, existing.id, deadline=deadline)
            logger.info("Deleted %s record %s from %s", record.type, record.name, zone)
            deleted.append(record)

        return deleted
