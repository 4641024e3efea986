"""Wake-on-LAN (WOL) magic packet construction."""

from wakeonwan.schemas.packet import MacAddress

SYNC_STREAM = b"\xff" * 6
MAC_REPEAT = 16
PACKET_SIZE = len(SYNC_STREAM) + 6 * MAC_REPEAT  # 102


def magic_packet(mac: MacAddress) -> bytes:
    """Build the 102-byte payload: 6x 0xFF followed by 16x the MAC address."""
    return SYNC_STREAM + mac.octets * MAC_REPEAT
