"""DNS store implementations."""

from dynv6dns.providers.dns.base import RemoteDNSStore
from dynv6dns.providers.dns.dynv6 import Dynv6Store

__all__ = ["Dynv6Store", "RemoteDNSStore"]
