"""Error taxonomy for parsing, resolution and dispatch."""

from __future__ import annotations


class WakeOnWanError(Exception):
    """Base class for all wakeonwan errors."""


class InvalidMacAddress(WakeOnWanError, ValueError):
    """A MAC address string could not be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid MAC address: {value!r}")


class DestinationUnresolvable(WakeOnWanError):
    """The destination host has no usable address. Fatal for the whole run."""

    def __init__(self, host: str, reason: object = None):
        self.host = host
        self.reason = reason
        msg = f"Cannot resolve destination {host!r}"
        if reason is not None:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class SocketSetupFailed(WakeOnWanError):
    """The datagram socket could not be created or configured."""

    def __init__(self, reason: OSError):
        self.reason = reason
        super().__init__(f"Socket setup failed: {reason}")


class SendFailed(WakeOnWanError):
    """Transmission to a single MAC failed. Recorded, never fatal."""

    def __init__(self, mac, reason: OSError):
        self.mac = mac
        self.reason = reason
        super().__init__(f"Can't send magic packet to {mac}: {reason}")
