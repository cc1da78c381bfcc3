#
# Copyright (c) 2025 Contributors to the Eclipse Foundation.
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License, Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
#
"""
Predicates and parsers for values given on the command line.

None of these functions raise on invalid input, they return False or None
and leave reporting to the caller.
"""
from __future__ import annotations

# Standard imports
import ipaddress
import re
from typing import Optional, Set, Tuple

# Third party imports
from pyroute2 import IPRoute  # type: ignore

# Local imports
from .common import IpVersion, MAX_NUMERIC_LENGTH, MAX_PORT, MIN_PORT

_NUMBER_RE = re.compile(r"[0-9]+")
# same notation as accepted by ether_aton(3)
_MAC_RE = re.compile(r"[0-9a-f]{1,2}(:[0-9a-f]{1,2}){5}", re.IGNORECASE | re.ASCII)
_LABEL_RE = re.compile(r"[a-z0-9-]+", re.IGNORECASE | re.ASCII)

# RFC 2181: full domain name is limited to 255 octets (including separators)
MAX_FQDN_LENGTH = 255
# RFC 2181: single label is limited to 63 octets
MAX_LABEL_LENGTH = 63
MAX_LABELS = 127


def is_number(text: Optional[str]) -> bool:
    """Check for unsigned decimal number of at most MAX_NUMERIC_LENGTH digits."""
    if not text or len(text) > MAX_NUMERIC_LENGTH:
        return False
    return _NUMBER_RE.fullmatch(text) is not None


def is_mac_address(text: str) -> bool:
    return _MAC_RE.fullmatch(text) is not None


def parse_ip_address(text: Optional[str]) -> Optional[Tuple[IpVersion, str]]:
    """Parse IPv4 or IPv6 address.

    Returns:
        IP version and the address in its canonical printable form (e.g.
        2001:0db8:0000::0001 becomes 2001:db8::1) or None if text is not an IP address.
    """
    if not text or not text.isascii() or "%" in text:
        return None
    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        return None
    version = IpVersion.V4 if address.version == 4 else IpVersion.V6
    return version, str(address)


def is_fqdn(name: str) -> bool:
    """Check name against RFC 1123/2181 host name rules.

    Labels consist of letters, digits and hyphens and neither start nor end with
    a hyphen. According to RFC 1738 the rightmost label never starts with a digit.
    A single trailing dot is allowed.
    """
    if not 1 <= len(name) <= MAX_FQDN_LENGTH:
        return False
    labels = (name[:-1] if name.endswith(".") else name).split(".")
    if not 1 <= len(labels) <= MAX_LABELS:
        return False
    for label in labels:
        if not 1 <= len(label) <= MAX_LABEL_LENGTH or _LABEL_RE.fullmatch(label) is None:
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
    return not labels[-1][0].isdigit()


def parse_port(text: str) -> Optional[int]:
    if not is_number(text):
        return None
    port = int(text)
    if MIN_PORT <= port <= MAX_PORT:
        return port
    return None


def get_system_network_interfaces() -> Set[str]:
    """Names of all network links known to the kernel."""
    with IPRoute() as ipr:
        return {link.get_attr("IFLA_IFNAME") for link in ipr.get_links()}
