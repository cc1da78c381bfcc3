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
Human readable report of the current network configuration.
"""
from __future__ import annotations

# Standard imports
from functools import singledispatch
from typing import Any, List, Mapping, Optional, Tuple

# Third party imports
import click

# Local imports
from netconfig.communication.dbus import Dbus, ManagedObjects, Properties
from netconfig.config.common import (
    DHCP_CONF_BOTH,
    DHCP_CONF_NONE,
    DHCP_CONF_V4,
    DHCP_CONF_V6,
    DHCP_DNS_ENABLED,
    DHCP_INTERFACE,
    DHCP_NTP_ENABLED,
    ETH_DHCP_ENABLED,
    ETH_DOMAIN_NAME,
    ETH_INTERFACE,
    ETH_LINK_UP,
    ETH_NAME,
    ETH_NAME_SERVERS,
    ETH_NTP_SERVERS,
    ETH_SPEED,
    ETH_STATIC_NAME_SERVERS,
    MAC_ADDRESS,
    MAC_INTERFACE,
    OBJECT_CONFIG,
    OBJECT_DHCP,
    SYSCFG_DEFAULT_GW4,
    SYSCFG_DEFAULT_GW6,
    SYSCFG_HOSTNAME,
    SYSCFG_INTERFACE,
    VLAN_ID,
    VLAN_INTERFACE,
)

# Width of the column with property title
NAME_WIDTH = 20
NOT_AVAILABLE = "N/A"
EMPTY = "-"

BoolLabels = Tuple[str, str]
DEFAULT_BOOL_LABELS: BoolLabels = ("Disabled", "Enabled")
LINK_STATE_LABELS: BoolLabels = ("DOWN", "UP")
DHCP_LABELS = {
    DHCP_CONF_BOTH: "Enabled (IPv4, IPv6)",
    DHCP_CONF_V4: "Enabled (IPv4 only)",
    DHCP_CONF_V6: "Enabled (IPv6 only)",
    DHCP_CONF_NONE: "Disabled",
}


@singledispatch
def format_value(value: Any, bool_labels: BoolLabels, str_map: Mapping[str, str]) -> str:
    raise TypeError(f"Unhandled value type: {type(value).__name__}")


@format_value.register
def _(value: bool, bool_labels: BoolLabels, str_map: Mapping[str, str]) -> str:
    return bool_labels[1] if value else bool_labels[0]


@format_value.register
def _(value: int, bool_labels: BoolLabels, str_map: Mapping[str, str]) -> str:
    return str(value)


@format_value.register
def _(value: str, bool_labels: BoolLabels, str_map: Mapping[str, str]) -> str:
    return str_map.get(value, value)


@format_value.register(list)
@format_value.register(tuple)
def _(value: Any, bool_labels: BoolLabels, str_map: Mapping[str, str]) -> str:
    return ", ".join(str_map.get(item, item) for item in value)


def format_row(title: str, value: Optional[str]) -> str:
    """Format property row, None is shown as N/A and empty value as '-'."""
    if value is None:
        value = NOT_AVAILABLE
    elif not value:
        value = EMPTY
    padding = " " * max(NAME_WIDTH - len(title), 0)
    return f"  {title}: {padding}{value}"


class Show:
    def __init__(self, bus: Dbus):
        self.bus = bus
        self.objects: ManagedObjects = bus.get_managed_objects()

    def print(self) -> None:
        for line in self.render():
            click.echo(line)

    def render(self) -> List[str]:
        lines = []

        global_config = self.get_properties(OBJECT_CONFIG, SYSCFG_INTERFACE)
        lines.append("Global network configuration:")
        lines.append(self.format_property("Host name", SYSCFG_HOSTNAME, global_config))
        lines.append(self.format_property("Default IPv4 gateway", SYSCFG_DEFAULT_GW4, global_config))
        lines.append(self.format_property("Default IPv6 gateway", SYSCFG_DEFAULT_GW6, global_config))

        dhcp_config = self.get_properties(OBJECT_DHCP, DHCP_INTERFACE)
        lines.append("Global DHCP configuration:")
        lines.append(self.format_property("DNS over DHCP", DHCP_DNS_ENABLED, dhcp_config))
        lines.append(self.format_property("NTP over DHCP", DHCP_NTP_ENABLED, dhcp_config))

        for path in sorted(self.objects):
            if ETH_INTERFACE in self.objects[path]:
                lines.extend(self.render_interface(path))
        return lines

    def render_interface(self, path: str) -> List[str]:
        eth = self.get_properties(path, ETH_INTERFACE)
        vlan = self.get_properties(path, VLAN_INTERFACE)
        mac = self.get_properties(path, MAC_INTERFACE)

        name = eth.get(ETH_NAME, path.rsplit("/", 1)[-1])
        lines = [f"Ethernet interface {name}:"]
        if vlan:
            lines.append(self.format_property("VLAN Id", VLAN_ID, vlan))
        lines.append(self.format_property("MAC address", MAC_ADDRESS, mac))
        lines.append(self.format_property("Link state", ETH_LINK_UP, eth, bool_labels=LINK_STATE_LABELS))
        lines.append(self.format_property("Link speed", ETH_SPEED, eth))

        for record in self.bus.get_addresses(path, self.objects):
            value = f"{record.address}/{record.prefix}"
            if record.gateway:
                value += f", gateway {record.gateway}"
            lines.append(format_row("IP address", value))

        lines.append(self.format_property("DHCP", ETH_DHCP_ENABLED, eth, str_map=DHCP_LABELS))
        lines.append(self.format_property("DNS servers", ETH_NAME_SERVERS, eth))
        lines.append(self.format_property("Static DNS servers", ETH_STATIC_NAME_SERVERS, eth))
        lines.append(self.format_property("Domain names", ETH_DOMAIN_NAME, eth))
        lines.append(self.format_property("NTP servers", ETH_NTP_SERVERS, eth))
        return lines

    def format_property(self, title: str, name: str, properties: Properties,
                        bool_labels: BoolLabels = DEFAULT_BOOL_LABELS,
                        str_map: Optional[Mapping[str, str]] = None) -> str:
        if name not in properties:
            return format_row(title, None)
        return format_row(title, format_value(properties[name], bool_labels, str_map or {}))

    def get_properties(self, path: str, interface: str) -> Properties:
        """Properties of the interface or empty set if the object or interface is missing."""
        return self.objects.get(path, {}).get(interface, {})
