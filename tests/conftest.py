"""Shared test fixtures for dynv6dns tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from dynv6dns.config import Dynv6Settings
from dynv6dns.providers.dns.base import RemoteDNSStore
from dynv6dns.records import CAARecord, MXRecord, PlainRecord, SRVRecord, Zone


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    """Create a records file with two records."""
    data = {
        "records": [
            {"type": "A", "name": "www", "data": "203.0.113.7"},
            {"type": "mx", "name": "", "data": "10 mail.example.com", "ttl": 300},
        ]
    }
    path = tmp_path / "records.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


# ============================================================================
# Mock Fixtures - HTTP/API
# ============================================================================


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.Client for API calls."""
    with patch("httpx.Client") as mock_client_class:
        mock_client = MagicMock()
        mock_client_class.return_value = mock_client
        yield mock_client


@pytest.fixture
def zone() -> Zone:
    """Provide the zone every mock store resolves to."""
    return Zone(id=42, name="example.dynv6.net")


@pytest.fixture
def mock_store(zone: Zone) -> MagicMock:
    """Mock remote store resolving any zone name to the sample zone."""
    store = MagicMock(spec=RemoteDNSStore)
    store.get_zone.return_value = zone
    store.list_records.return_value = []
    return store


# ============================================================================
# Mock Fixtures - Environment Settings
# ============================================================================


@pytest.fixture
def mock_settings():
    """Mock settings with a test token."""
    settings = Dynv6Settings(token="test-token")
    with patch("dynv6dns.commands.records.load_settings", return_value=settings):
        yield settings


@pytest.fixture
def mock_settings_missing_token():
    """Mock settings without a token."""
    settings = Dynv6Settings(token=None)
    with patch("dynv6dns.commands.records.load_settings", return_value=settings):
        yield settings


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_listing() -> list:
    """Provide a remote listing with one record of each variant."""
    return [
        PlainRecord(id=1, type="A", name="www", data="203.0.113.7"),
        PlainRecord(id=2, type="CNAME", name="blog", data="www.example.dynv6.net"),
        CAARecord(id=3, name="", flags=0, tag="issue", data="letsencrypt.org"),
        MXRecord(id=4, name="", priority=10, data="mail.example.com"),
        SRVRecord(id=5, name="_sip._tcp", priority=1, weight=5, port=5060, data="sip.example.com"),
    ]


@pytest.fixture
def sample_api_records() -> list[dict]:
    """Provide a dynv6 API records response body."""
    return [
        {
            "id": 1,
            "zoneID": 42,
            "type": "A",
            "name": "www",
            "data": "203.0.113.7",
            "priority": None,
            "flags": None,
            "tag": None,
            "weight": None,
            "port": None,
        },
        {
            "id": 4,
            "zoneID": 42,
            "type": "MX",
            "name": "",
            "data": "mail.example.com",
            "priority": 10,
            "flags": None,
            "tag": None,
            "weight": None,
            "port": None,
        },
    ]
