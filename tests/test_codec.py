"""Tests for record translation between dynv6 and generic records."""

from datetime import timedelta

import pytest

from dynv6dns.codec import decode, encode
from dynv6dns.exceptions import MalformedValueError, UnsupportedTypeError
from dynv6dns.records import (
    CAARecord,
    CAARequest,
    GenericRecord,
    MXRecord,
    MXRequest,
    PlainRecord,
    PlainRequest,
    SRVRecord,
    SRVRequest,
)


class TestDecode:
    """Tests for decode()."""

    @pytest.mark.parametrize("record_type", ["A", "AAAA", "CNAME", "TXT", "SPF"])
    def test_plain_types_copy_data(self, record_type):
        """Test plain record data is copied verbatim."""
        record = decode(PlainRecord(id=1, type=record_type, name="www", data="some data"))

        assert record.type == record_type
        assert record.name == "www"
        assert record.data == "some data"

    def test_caa(self):
        """Test CAA fields are joined with the value quoted."""
        record = decode(CAARecord(id=1, name="", flags=0, tag="issue", data="letsencrypt.org"))
        assert record.data == '0 issue "letsencrypt.org"'

    def test_caa_escapes_quotes_in_value(self):
        """Test embedded quotes in a CAA value are escaped."""
        record = decode(CAARecord(id=1, name="", flags=128, tag="iodef", data='a"b'))
        assert record.data == '128 iodef "a\\"b"'

    def test_mx(self):
        """Test MX priority and target are joined."""
        record = decode(MXRecord(id=1, name="", priority=10, data="mail.example.com"))
        assert record.data == "10 mail.example.com"

    def test_srv(self):
        """Test SRV fields are joined in priority weight port target order."""
        record = decode(
            SRVRecord(id=1, name="_sip._tcp", priority=1, weight=5, port=5060, data="sip.example.com")
        )
        assert record.data == "1 5 5060 sip.example.com"

    @pytest.mark.parametrize(
        "remote",
        [
            CAARecord(id=1, name="x"),
            MXRecord(id=1, name="x"),
            SRVRecord(id=1, name="x"),
        ],
    )
    def test_zero_values_decode_to_empty_data(self, remote):
        """Test a record with all type-specific fields unset has empty data."""
        assert decode(remote).data == ""

    def test_mx_zero_priority_with_target(self):
        """Test a zero priority is still rendered when a target is set."""
        record = decode(MXRecord(id=1, name="", priority=0, data="mail.example.com"))
        assert record.data == "0 mail.example.com"

    def test_ttl_is_fixed_default(self):
        """Test every decoded record gets the 60 second default TTL."""
        record = decode(PlainRecord(id=1, type="A", name="www", data="203.0.113.7"))
        assert record.ttl == timedelta(seconds=60)

    def test_unknown_variant_is_unreachable(self):
        """Test decoding a type the listing could never contain is a defect."""
        class NSRecord:
            id = 1
            type = "NS"
            name = ""
            data = "ns1.dynv6.com"

        with pytest.raises(AssertionError, match="unreachable"):
            decode(NSRecord())


class TestEncode:
    """Tests for encode()."""

    @pytest.mark.parametrize("record_type", ["A", "AAAA", "CNAME", "TXT", "SPF"])
    def test_plain_types_copy_data(self, record_type):
        """Test plain record data is copied verbatim."""
        request = encode(GenericRecord(name="www", type=record_type, data="v=spf1 -all"))

        assert isinstance(request, PlainRequest)
        assert request.type == record_type
        assert request.data == "v=spf1 -all"

    def test_caa(self):
        """Test CAA data is split into flags, tag and unquoted value."""
        request = encode(GenericRecord(name="", type="CAA", data='0 issue "letsencrypt.org"'))

        assert isinstance(request, CAARequest)
        assert request.flags == 0
        assert request.tag == "issue"
        assert request.data == "letsencrypt.org"

    def test_caa_unquoted_value_passes_through(self):
        """Test a CAA value without quotes is accepted as-is."""
        request = encode(GenericRecord(name="", type="CAA", data="0 issue letsencrypt.org"))
        assert request.data == "letsencrypt.org"

    def test_caa_wrong_field_count(self):
        """Test CAA data with two fields names the expected count."""
        with pytest.raises(MalformedValueError, match="expected 3 fields") as exc_info:
            encode(GenericRecord(name="", type="CAA", data="1 issue"))
        assert "flags tag" in str(exc_info.value)

    def test_caa_flags_out_of_range(self):
        """Test CAA flags must fit in 8 bits."""
        with pytest.raises(MalformedValueError) as exc_info:
            encode(GenericRecord(name="", type="CAA", data='256 issue "ca"'))
        assert exc_info.value.field == "flags"
        assert exc_info.value.value == "256"

    def test_mx(self):
        """Test MX data is split into priority and target."""
        request = encode(GenericRecord(name="", type="MX", data="10 mail.example.com"))

        assert isinstance(request, MXRequest)
        assert request.priority == 10
        assert request.data == "mail.example.com"

    def test_mx_wrong_field_count(self):
        """Test MX data needs exactly two fields."""
        with pytest.raises(MalformedValueError, match="expected 2 fields"):
            encode(GenericRecord(name="", type="MX", data="mail.example.com"))

    @pytest.mark.parametrize("priority", ["-1", "+1", "65536", "1_0", "ten"])
    def test_mx_invalid_priority(self, priority):
        """Test MX priority must be an unsigned 16-bit decimal."""
        with pytest.raises(MalformedValueError, match="invalid priority"):
            encode(GenericRecord(name="", type="MX", data=f"{priority} mail.example.com"))

    def test_srv(self):
        """Test SRV data is split into its four fields."""
        request = encode(GenericRecord(name="_sip._tcp", type="SRV", data="1 5 5060 sip.example.com"))

        assert isinstance(request, SRVRequest)
        assert (request.priority, request.weight, request.port) == (1, 5, 5060)
        assert request.data == "sip.example.com"

    def test_srv_invalid_priority(self):
        """Test the SRV error names the offending field and value."""
        with pytest.raises(MalformedValueError) as exc_info:
            encode(GenericRecord(name="_sip._tcp", type="SRV", data="x 1 443 target"))

        assert exc_info.value.field == "priority"
        assert exc_info.value.value == "x"
        assert "priority" in str(exc_info.value)

    def test_srv_invalid_port_names_port(self):
        """Test a bad SRV port is reported against the port field."""
        with pytest.raises(MalformedValueError) as exc_info:
            encode(GenericRecord(name="_sip._tcp", type="SRV", data="1 1 99999 target"))

        assert exc_info.value.field == "port"
        assert exc_info.value.value == "99999"

    def test_srv_wrong_field_count(self):
        """Test SRV data needs exactly four fields."""
        with pytest.raises(MalformedValueError, match="expected 4 fields"):
            encode(GenericRecord(name="_sip._tcp", type="SRV", data="1 5 target"))

    def test_unsupported_type(self):
        """Test types dynv6 cannot store are rejected."""
        with pytest.raises(UnsupportedTypeError) as exc_info:
            encode(GenericRecord(name="", type="NS", data="ns1.example.com"))
        assert exc_info.value.record_type == "NS"


class TestRoundTrip:
    """Tests for decode/encode agreeing with each other."""

    def test_caa_round_trip(self):
        """Test the CAA example survives decode then encode."""
        remote = CAARecord(id=1, name="", flags=0, tag="issue", data="letsencrypt.org")
        request = encode(decode(remote))

        assert (request.flags, request.tag, request.data) == (0, "issue", "letsencrypt.org")

    def test_srv_round_trip(self):
        """Test SRV data survives encode then decode."""
        record = GenericRecord(name="_sip._tcp", type="SRV", data="1 5 5060 sip.example.com")
        request = encode(record)
        remote = SRVRecord(id=9, **request.model_dump())

        assert decode(remote).data == record.data
