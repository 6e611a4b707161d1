"""Abstract base class for remote DNS stores."""

from abc import ABC, abstractmethod

from dynv6dns.deadline import Deadline
from dynv6dns.records import RecordId, RecordRequest, RemoteRecord, Zone


class RemoteDNSStore(ABC):
    """Abstract remote DNS store interface.

    Every call accepts an optional deadline; implementations must check it
    before issuing the request.
    """

    @abstractmethod
    def list_zones(self, deadline: Deadline | None = None) -> list[Zone]:
        """List all zones visible to the credential."""
        pass

    @abstractmethod
    def get_zone(self, name: str, deadline: Deadline | None = None) -> Zone:
        """Resolve a zone by name.

        Args:
            name: The zone name (e.g. "example.dynv6.net")

        Raises:
            ZoneNotFoundError: If no such zone exists.
        """
        pass

    @abstractmethod
    def list_records(
        self, zone_id: RecordId, deadline: Deadline | None = None
    ) -> list[RemoteRecord]:
        """List all records in a zone, in the store's order."""
        pass

    @abstractmethod
    def add_record(
        self, zone_id: RecordId, request: RecordRequest, deadline: Deadline | None = None
    ) -> RemoteRecord:
        """Create a record and return it with its assigned id."""
        pass

    @abstractmethod
    def update_record(
        self,
        zone_id: RecordId,
        record_id: RecordId,
        request: RecordRequest,
        deadline: Deadline | None = None,
    ) -> RemoteRecord:
        """Replace the contents of an existing record."""
        pass

    @abstractmethod
    def delete_record(
        self, zone_id: RecordId, record_id: RecordId, deadline: Deadline | None = None
    ) -> None:
        """Delete a record."""
        pass

    def close(self) -> None:
        """Release any connections held by the store."""
