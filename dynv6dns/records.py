"""Record and zone models.

Generic records are the provider-independent form used by callers.
Remote records mirror what the dynv6 API stores; each record type gets
its own model carrying only the fields that type uses.
"""

from datetime import timedelta
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter

DEFAULT_TTL = timedelta(seconds=60)

PLAIN_TYPES = ("A", "AAAA", "CNAME", "TXT", "SPF")


def _zero_if_none(value: Any) -> Any:
    return 0 if value is None else value


def _empty_if_none(value: Any) -> Any:
    return "" if value is None else value


# dynv6 returns null for numeric fields a record type does not use
UInt8 = Annotated[int, BeforeValidator(_zero_if_none), Field(ge=0, le=255)]
UInt16 = Annotated[int, BeforeValidator(_zero_if_none), Field(ge=0, le=65535)]
Text = Annotated[str, BeforeValidator(_empty_if_none)]
RecordId = Union[int, str]


class GenericRecord(BaseModel):
    """A DNS record in provider-independent presentation form."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    data: str = ""
    ttl: timedelta = DEFAULT_TTL


class Zone(BaseModel):
    """A dynv6 zone."""

    id: RecordId
    name: str
    ipv4address: str | None = None
    ipv6prefix: str | None = None


# --- Requests (no id, sent on create/update) ---


class PlainRequest(BaseModel):
    """A, AAAA, CNAME, TXT and SPF records."""

    type: Literal["A", "AAAA", "CNAME", "TXT", "SPF"]
    name: Text = ""
    data: Text = ""


class CAARequest(BaseModel):
    type: Literal["CAA"] = "CAA"
    name: Text = ""
    flags: UInt8 = 0
    tag: Text = ""
    data: Text = ""


class MXRequest(BaseModel):
    type: Literal["MX"] = "MX"
    name: Text = ""
    priority: UInt16 = 0
    data: Text = ""


class SRVRequest(BaseModel):
    type: Literal["SRV"] = "SRV"
    name: Text = ""
    priority: UInt16 = 0
    weight: UInt16 = 0
    port: UInt16 = 0
    data: Text = ""


RecordRequest = Annotated[
    Union[PlainRequest, CAARequest, MXRequest, SRVRequest],
    Field(discriminator="type"),
]


# --- Remote records (as listed by dynv6) ---


class PlainRecord(PlainRequest):
    id: RecordId


class CAARecord(CAARequest):
    id: RecordId


class MXRecord(MXRequest):
    id: RecordId


class SRVRecord(SRVRequest):
    id: RecordId


RemoteRecord = Annotated[
    Union[PlainRecord, CAARecord, MXRecord, SRVRecord],
    Field(discriminator="type"),
]

remote_record_adapter: TypeAdapter = TypeAdapter(RemoteRecord)
remote_records_adapter: TypeAdapter = TypeAdapter(list[RemoteRecord])


def request_payload(request: BaseModel) -> dict[str, Any]:
    """Serialize a record request into a dynv6 JSON body."""
    return request.model_dump(mode="json", exclude={"id"})
