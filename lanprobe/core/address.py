"""Target address matching for IPv4 literals."""

import ipaddress
import re
from typing import Iterable, List

from lanprobe.core.models import AddressRange

_IPV4_LITERAL = re.compile(r"([0-9]{1,3}\.){3}[0-9]{1,3}")


def ip_to_long(ip: str) -> int:
    """Fold a dotted quad into an integer. Octets are not range-checked."""
    value = 0
    for octet in ip.split("."):
        value = value * 256 + int(octet, 10)
    return value


def parse_range(text: str) -> AddressRange:
    """
    Parse ``A.B.C.D-E.F.G.H`` (inclusive) or CIDR ``A.B.C.D/N``.
    Raises ValueError on anything else.
    """
    text = text.strip()
    if "/" in text:
        net = ipaddress.IPv4Network(text, strict=False)
        return AddressRange(int(net.network_address), int(net.broadcast_address))

    low, sep, high = text.partition("-")
    if not sep:
        raise ValueError(f"Invalid address range: {text!r}")
    return AddressRange(int(ipaddress.IPv4Address(low.strip())),
                        int(ipaddress.IPv4Address(high.strip())))


class AddressClassifier:
    def __init__(self, ranges: Iterable[AddressRange]):
        self.ranges: List[AddressRange] = list(ranges)

    def is_target_address(self, hostname: str) -> bool:
        if not hostname or not _IPV4_LITERAL.fullmatch(hostname):
            return False
        # "999.1.1.1" passes the pattern but is not an address
        if any(int(o) > 255 for o in hostname.split(".")):
            return False
        value = ip_to_long(hostname)
        return any(r.contains(value) for r in self.ranges)
