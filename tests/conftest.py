"""Test fixtures — recording fake socket and common destinations."""

import socket

import pytest

from wakeonwan.config import get_settings
from wakeonwan.schemas.packet import AddressFamily, Destination


class FakeSocket:
    """Stands in for a UDP socket and records everything done to it."""

    def __init__(self, family, type_, fail_on=None, fail_send_for=()):
        self.family = family
        self.type = type_
        self.fail_on = fail_on
        self.fail_send_for = set(fail_send_for)
        self.bound = None
        self.options = []
        self.sent = []
        self.closed = False

    def bind(self, address):
        if self.fail_on == "bind":
            raise OSError(98, "Address already in use")
        self.bound = address

    def setsockopt(self, level, option, value):
        if self.fail_on == "setsockopt":
            raise OSError(13, "Permission denied")
        self.options.append((level, option, value))

    def sendto(self, payload, address):
        if payload[6:12] in self.fail_send_for:
            raise OSError(101, "Network is unreachable")
        self.sent.append((payload, address))
        return len(payload)

    def close(self):
        self.closed = True


class FakeSocketFactory:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.sockets = []

    def __call__(self, family, type_):
        sock = FakeSocket(family, type_, **self.kwargs)
        self.sockets.append(sock)
        return sock

    @property
    def sent(self):
        return [item for sock in self.sockets for item in sock.sent]


@pytest.fixture
def socket_factory():
    return FakeSocketFactory()


@pytest.fixture
def ipv4_destination():
    return Destination(host="192.168.1.255", address="192.168.1.255", port=9, family=AddressFamily.IPV4)


@pytest.fixture
def ipv6_destination():
    return Destination(host="::1", address="::1", port=9, family=AddressFamily.IPV6)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_dns(monkeypatch):
    """Make every hostname lookup fail the way an unknown name does."""
    def _fail(*args, **kwargs):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr("wakeonwan.services.resolver.socket.getaddrinfo", _fail)


@pytest.fixture
def make_socket_factory():
    """Build a factory whose sockets fail in a given way."""
    return FakeSocketFactory
