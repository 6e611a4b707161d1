"""Exception hierarchy for dynv6dns.

    Dynv6DNSError
    ├─ ConfigurationError       - missing or invalid configuration
    ├─ RemoteCallError          - dynv6 API or transport failure
    │  ├─ ZoneNotFoundError     - zone name does not resolve
    │  └─ DeadlineExceededError - deadline expired or cancelled
    └─ RecordCodecError         - record translation failure
       ├─ UnsupportedTypeError  - record type cannot be sent to dynv6
       └─ MalformedValueError   - type-specific payload is malformed
"""


class Dynv6DNSError(Exception):
    """Root exception for all dynv6dns errors."""


class ConfigurationError(Dynv6DNSError):
    """Configuration is missing or invalid (e.g. no API token)."""


class RemoteCallError(Dynv6DNSError):
    """A call to the dynv6 API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ZoneNotFoundError(RemoteCallError):
    """Zone not found on dynv6."""


class DeadlineExceededError(RemoteCallError):
    """The caller's deadline expired or was cancelled."""


class RecordCodecError(Dynv6DNSError):
    """Base exception for record translation failures."""


class UnsupportedTypeError(RecordCodecError):
    """Record type is outside the set dynv6 supports."""

    def __init__(self, record_type: str):
        super().__init__(f"unsupported record type: {record_type}")
        self.record_type = record_type


class MalformedValueError(RecordCodecError):
    """Record data does not match its type's expected format."""

    def __init__(self, message: str, field: str | None = None, value: str | None = None):
        super().__init__(message)
        self.field = field
        self.value = value
