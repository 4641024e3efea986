"""Magic packet dispatch schemas."""

from __future__ import annotations

import ipaddress
import socket
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wakeonwan.exceptions import SendFailed

MAC_LENGTH = 6


class MacAddress(BaseModel):
    """Six-byte hardware address."""
    model_config = ConfigDict(frozen=True)

    octets: bytes

    @field_validator("octets")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if len(value) != MAC_LENGTH:
            raise ValueError(f"MAC address must be {MAC_LENGTH} bytes, got {len(value)}")
        return value

    def __str__(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)


class AddressFamily(str, Enum):
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def socket_family(self) -> socket.AddressFamily:
        return socket.AF_INET if self is AddressFamily.IPV4 else socket.AF_INET6

    @property
    def wildcard(self) -> str:
        """Bind address for an ephemeral source port."""
        return "0.0.0.0" if self is AddressFamily.IPV4 else "::"

    @classmethod
    def from_socket_family(cls, family: int) -> AddressFamily:
        if family == socket.AF_INET:
            return cls.IPV4
        if family == socket.AF_INET6:
            return cls.IPV6
        raise ValueError(f"Unsupported address family: {family}")


class Destination(BaseModel):
    """Resolved UDP endpoint shared by every target of one run."""
    model_config = ConfigDict(frozen=True)

    host: str
    address: str
    port: int = Field(default=9, ge=0, le=65535)
    family: AddressFamily
    scope_id: int = 0  # IPv6 zone index

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        ipaddress.ip_address(value)
        return value

    @property
    def ip(self) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        return ipaddress.ip_address(self.address)

    @property
    def sockaddr(self) -> tuple:
        if self.family is AddressFamily.IPV6:
            return (self.address, self.port, 0, self.scope_id)
        return (self.address, self.port)

    @property
    def is_multicast(self) -> bool:
        return self.family is AddressFamily.IPV6 and self.ip.is_multicast

    def __str__(self) -> str:
        if self.family is AddressFamily.IPV6:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"


class DispatchStatus(str, Enum):
    SENT = "sent"
    REPORTED = "reported"  # dry-run
    SEND_FAILED = "send_failed"


class DispatchResult(BaseModel):
    """Outcome of one magic packet."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    mac: MacAddress
    destination: Destination
    status: DispatchStatus
    payload: bytes
    error: SendFailed | None = None

    @property
    def ok(self) -> bool:
        return self.status is not DispatchStatus.SEND_FAILED


class DispatchSummary(BaseModel):
    """Aggregate of one invocation, used for the final report and exit code."""
    results: list[DispatchResult] = []
    rejected: list[str] = []  # MAC strings that failed to parse

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> list[DispatchResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.rejected and not self.failed
