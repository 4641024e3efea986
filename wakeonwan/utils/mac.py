"""MAC address parsing."""

import re

from wakeonwan.exceptions import InvalidMacAddress
from wakeonwan.schemas.packet import MacAddress

# Six hex octets joined by one consistent delimiter (":" or "-") or none at all.
_MAC_RE = re.compile(r"[0-9A-Fa-f]{2}([:-]?)(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}")


def parse_mac(value: str) -> MacAddress:
    """Parse "AA:BB:CC:DD:EE:FF", "aa-bb-cc-dd-ee-ff" or "AABBCCDDEEFF"."""
    if not isinstance(value, str) or not _MAC_RE.fullmatch(value):
        raise InvalidMacAddress(value)
    return MacAddress(octets=bytes.fromhex(value.replace(":", "").replace("-", "")))
