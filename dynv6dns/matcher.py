"""Matching of generic records against a dynv6 listing."""

from collections.abc import Sequence

from dynv6dns.records import GenericRecord, RemoteRecord


def find_record(
    listing: Sequence[RemoteRecord],
    candidate: GenericRecord,
    search_limit: int | None = None,
) -> RemoteRecord | None:
    """Find the remote record that stands for *candidate*.

    Records are the same when their type and name are equal; data is
    ignored. The first match in listing order wins.

    Args:
        listing: Records as returned by the store, in listing order.
        candidate: The record to look for.
        search_limit: Only the first *search_limit* entries are scanned.
            Defaults to the whole listing.

    Returns:
        The matching remote record, or None.
    """
    if search_limit is None:
        search_limit = len(listing)

    for remote in listing[:search_limit]:
        if remote.type == candidate.type and remote.name == candidate.name:
            return remote
    return None
