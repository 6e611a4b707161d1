"""Translation between dynv6 records and generic records."""

import re

from dynv6dns.exceptions import MalformedValueError, UnsupportedTypeError
from dynv6dns.records import (
    DEFAULT_TTL,
    PLAIN_TYPES,
    CAARecord,
    CAARequest,
    GenericRecord,
    MXRecord,
    MXRequest,
    PlainRecord,
    PlainRequest,
    RecordRequest,
    RemoteRecord,
    SRVRecord,
    SRVRequest,
)

_DIGITS = re.compile(r"[0-9]+")


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _parse_uint(field: str, value: str, bits: int) -> int:
    """Parse *value* as an unsigned decimal integer of the given width."""
    limit = (1 << bits) - 1
    if not _DIGITS.fullmatch(value) or int(value) > limit:
        raise MalformedValueError(
            f"invalid {field} {value!r}: expected an unsigned integer in 0..{limit}",
            field=field,
            value=value,
        )
    return int(value)


def _split_fields(record: GenericRecord, count: int, form: str) -> list[str]:
    fields = record.data.split()
    if len(fields) != count:
        raise MalformedValueError(
            f"malformed {record.type} value; expected {count} fields in the form '{form}'"
        )
    return fields


def decode(record: RemoteRecord) -> GenericRecord:
    """Convert a dynv6 record to its generic form.

    Types whose data is made of several fields render them space-joined.
    A record with every type-specific field at its zero value renders as an
    empty string. The dynv6 TTL is not exposed, so every record gets
    DEFAULT_TTL.
    """
    if isinstance(record, PlainRecord):
        data = record.data
    elif isinstance(record, CAARecord):
        data = ""
        if record.flags != 0 or record.tag != "" or record.data != "":
            data = f"{record.flags} {record.tag} {_quote(record.data)}"
    elif isinstance(record, MXRecord):
        data = ""
        if record.priority != 0 or record.data != "":
            data = f"{record.priority} {record.data}"
    elif isinstance(record, SRVRecord):
        data = ""
        if record.priority != 0 or record.weight != 0 or record.port != 0 or record.data != "":
            data = f"{record.priority} {record.weight} {record.port} {record.data}"
    else:
        # Listings are validated against the same types encode() accepts
        raise AssertionError(f"unreachable: cannot decode record type {record.type!r}")

    return GenericRecord(name=record.name, type=record.type, data=data, ttl=DEFAULT_TTL)


def encode(record: GenericRecord) -> RecordRequest:
    """Convert a generic record to a dynv6 create/update request.

    Raises:
        UnsupportedTypeError: If dynv6 does not support the record type.
        MalformedValueError: If the data does not fit the type's format.
    """
    if record.type in PLAIN_TYPES:
        return PlainRequest(type=record.type, name=record.name, data=record.data)

    if record.type == "CAA":
        flags, tag, value = _split_fields(record, 3, 'flags tag "value"')
        return CAARequest(
            name=record.name,
            flags=_parse_uint("flags", flags, 8),
            tag=tag,
            data=value.strip('"'),
        )

    if record.type == "MX":
        priority, target = _split_fields(record, 2, "preference target")
        return MXRequest(
            name=record.name,
            priority=_parse_uint("priority", priority, 16),
            data=target,
        )

    if record.type == "SRV":
        priority, weight, port, target = _split_fields(
            record, 4, "priority weight port target"
        )
        return SRVRequest(
            name=record.name,
            priority=_parse_uint("priority", priority, 16),
            weight=_parse_uint("weight", weight, 16),
            port=_parse_uint("port", port, 16),
            data=target,
        )

    raise UnsupportedTypeError(record.type)
