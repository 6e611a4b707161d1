"""dynv6dns - generic DNS record management for the dynv6 REST API."""

__version__ = "0.1.0"

from dynv6dns.provider import Provider
from dynv6dns.records import GenericRecord, Zone

__all__ = ["GenericRecord", "Provider", "Zone", "__version__"]
