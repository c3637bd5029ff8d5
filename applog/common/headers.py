"""Header parsing and client address utilities."""

from typing import Optional


UNKNOWN_CLIENT = "unknown"


def first_forwarded_hop(forwarded_for: Optional[str]) -> Optional[str]:
    """Return the originating client from an X-Forwarded-For value.

    'X-Forwarded-For: 203.0.113.7, 10.0.0.1' -> '203.0.113.7'
    """
    if not forwarded_for:
        return None
    hop = forwarded_for.split(",")[0].strip()
    return hop or None


def resolve_client_ip(
    forwarded_for: Optional[str],
    peer_host: Optional[str],
    trust_proxy: bool = False,
) -> str:
    """Resolve the client address recorded for a request.

    Priority:
    1. First X-Forwarded-For hop (only when trust_proxy is set)
    2. Transport peer address
    3. 'unknown'

    Args:
        forwarded_for: Raw X-Forwarded-For header value
        peer_host: Host of the transport-level peer
        trust_proxy: Whether forwarded headers are honored

    Returns:
        Client address string
    """
    if trust_proxy:
        hop = first_forwarded_hop(forwarded_for)
        if hop:
            return hop

    return peer_host or UNKNOWN_CLIENT
