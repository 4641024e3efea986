"""Destination host extraction and resolution."""

from __future__ import annotations

import ipaddress
import socket
from urllib.parse import urlsplit

from wakeonwan.exceptions import DestinationUnresolvable
from wakeonwan.schemas.packet import AddressFamily, Destination


def extract_host(uri: str) -> str:
    """Return only the host part of a URI.

    Accepts bare hosts ("192.168.1.255", "nas.lan"), bare or bracketed IPv6
    literals ("::1", "[fe80::1%eth0]") and full URLs
    ("udp://user:pw@host:7/path"). Scheme, credentials, port and path are
    dropped; brackets are stripped.
    """
    uri = uri.strip()
    try:
        ipaddress.ip_address(uri)
        return uri
    except ValueError:
        pass

    try:
        netloc = urlsplit(uri if "://" in uri else f"//{uri}").netloc
    except ValueError as e:
        raise DestinationUnresolvable(uri, e) from e
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[1:].partition("]")[0]
    else:
        host = host.partition(":")[0]

    if not host:
        raise DestinationUnresolvable(uri, "URI has no hostname")
    return host


def resolve_destination(host: str, port: int) -> Destination:
    """Resolve host to the first address getaddrinfo returns for UDP."""
    host = host.strip("[]")
    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")

    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as e:
        raise DestinationUnresolvable(host, e) from e

    for family, _type, _proto, _canon, sockaddr in infos:
        try:
            addr_family = AddressFamily.from_socket_family(family)
        except ValueError:
            continue
        scope_id = sockaddr[3] if addr_family is AddressFamily.IPV6 else 0
        return Destination(
            host=host,
            address=sockaddr[0],
            port=port,
            family=addr_family,
            scope_id=scope_id,
        )

    raise DestinationUnresolvable(host, "no IPv4 or IPv6 address found")
