"""Magic packet dispatch over a single datagram socket."""

from __future__ import annotations

import socket
from collections.abc import Callable, Iterable

from wakeonwan.exceptions import SendFailed, SocketSetupFailed
from wakeonwan.schemas.packet import (
    AddressFamily,
    Destination,
    DispatchResult,
    DispatchStatus,
    MacAddress,
)
from wakeonwan.utils.wol import magic_packet

SocketFactory = Callable[..., socket.socket]


def open_socket(destination: Destination, socket_factory: SocketFactory | None = None) -> socket.socket:
    """Create a UDP socket bound to an ephemeral port in the destination's family."""
    family = destination.family
    try:
        sock = (socket_factory or socket.socket)(family.socket_family, socket.SOCK_DGRAM)
    except OSError as e:
        raise SocketSetupFailed(e) from e

    try:
        sock.bind((family.wildcard, 0))
        if family is AddressFamily.IPV4:
            # Directed broadcasts look like unicast without the netmask
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        elif destination.is_multicast:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_MULTICAST_HOPS, 1)
    except OSError as e:
        sock.close()
        raise SocketSetupFailed(e) from e
    return sock


class PacketSender:
    """Sends one magic packet per MAC to a fixed destination.

    Use as a context manager: the socket is opened on enter and closed on
    exit. In dry-run mode no socket is opened and nothing is transmitted,
    but payloads are built exactly as they would have been sent.
    """

    def __init__(
        self,
        destination: Destination,
        dry_run: bool = False,
        socket_factory: SocketFactory | None = None,
    ):
        self.destination = destination
        self.dry_run = dry_run
        self._socket_factory = socket_factory
        self._sock: socket.socket | None = None

    def __enter__(self) -> PacketSender:
        if not self.dry_run:
            self._sock = open_socket(self.destination, self._socket_factory)
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def send(self, mac: MacAddress, payload: bytes | None = None) -> DispatchResult:
        """Send (or in dry-run, only build) the magic packet for one MAC."""
        if payload is None:
            payload = magic_packet(mac)

        if self.dry_run:
            return self._result(mac, payload, DispatchStatus.REPORTED)

        if self._sock is None:
            raise RuntimeError("PacketSender not opened, use it as a context manager")

        try:
            self._sock.sendto(payload, self.destination.sockaddr)
        except OSError as e:
            return self._result(mac, payload, DispatchStatus.SEND_FAILED, SendFailed(mac, e))
        return self._result(mac, payload, DispatchStatus.SENT)

    def send_all(self, macs: Iterable[MacAddress]) -> list[DispatchResult]:
        """Send to every MAC in order. A failed send does not stop the rest."""
        # Build every payload before the first transmission.
        packets = [(mac, magic_packet(mac)) for mac in macs]
        return [self.send(mac, payload) for mac, payload in packets]

    def _result(
        self,
        mac: MacAddress,
        payload: bytes,
        status: DispatchStatus,
        error: SendFailed | None = None,
    ) -> DispatchResult:
        return DispatchResult(
            mac=mac,
            destination=self.destination,
            status=status,
            payload=payload,
            error=error,
        )


def send_magic_packets(
    destination: Destination,
    macs: Iterable[MacAddress],
    dry_run: bool = False,
    socket_factory: SocketFactory | None = None,
) -> list[DispatchResult]:
    """Deliver one magic packet per MAC, returning results in input order.

    Raises SocketSetupFailed if the socket cannot be opened; per-MAC send
    errors are returned as SEND_FAILED results instead.
    """
    macs = list(macs)
    if not macs:
        raise ValueError("At least one MAC address is required")
    with PacketSender(destination, dry_run=dry_run, socket_factory=socket_factory) as sender:
        return sender.send_all(macs)
