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
Pytest configuration and shared fixtures
"""
from typing import Any, Dict, List, NamedTuple, Tuple
from unittest.mock import patch

import pytest

from netconfig.communication.common import BusError
from netconfig.communication.dbus import Dbus
from netconfig.config.common import (
    DHCP_CONF_BOTH,
    DHCP_CONF_NONE,
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
    IP_ADDRESS,
    IP_GATEWAY,
    IP_INTERFACE,
    IP_PREFIX,
    MAC_ADDRESS,
    MAC_INTERFACE,
    OBJECT_CONFIG,
    OBJECT_DHCP,
    OBJECT_ROOT,
    OBJMGR_INTERFACE,
    PROPERTIES_GET,
    PROPERTIES_INTERFACE,
    PROPERTIES_SET,
    SYSCFG_DEFAULT_GW4,
    SYSCFG_DEFAULT_GW6,
    SYSCFG_HOSTNAME,
    SYSCFG_INTERFACE,
    VLAN_ID,
    VLAN_INTERFACE,
)

SYSTEM_INTERFACES = {"lo", "eth0", "eth1", "eth0.42"}


class Call(NamedTuple):
    service: str
    object_path: str
    interface: str
    method: str
    signature: str
    args: Tuple[Any, ...]


class FakeTransport:
    """In-memory replacement of the bus.

    Property reads are served from `properties`, writes are stored there.
    GetManagedObjects returns `objects`. Methods listed in `errors` fail with
    the given raw error text.
    """
    def __init__(self) -> None:
        self.calls: List[Call] = []
        self.properties: Dict[Tuple[str, str, str], Any] = {}
        self.objects: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.errors: Dict[Tuple[str, str], str] = {}

    def call(self, service, object_path, interface, method, signature, args):
        self.calls.append(Call(service, object_path, interface, method, signature, tuple(args)))
        error = self.errors.get((interface, method))
        if error is not None:
            raise BusError(error)

        if interface == PROPERTIES_INTERFACE and method == PROPERTIES_GET:
            return (self.properties[(object_path, *args)],)
        if interface == PROPERTIES_INTERFACE and method == PROPERTIES_SET:
            property_interface, name, variant = args
            self.properties[(object_path, property_interface, name)] = variant.value
            return ()
        if interface == OBJMGR_INTERFACE:
            return (self.objects,)
        return ()

    def method_calls(self) -> List[Call]:
        """Calls other than property access."""
        return [call for call in self.calls if call.interface != PROPERTIES_INTERFACE]

    def property_writes(self) -> Dict[Tuple[str, str], Any]:
        """Written values keyed by (object path, property name)."""
        return {(call.object_path, call.args[1]): call.args[2]
                for call in self.calls
                if call.interface == PROPERTIES_INTERFACE and call.method == PROPERTIES_SET}


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def bus(transport) -> Dbus:
    return Dbus(transport)


@pytest.fixture(autouse=True)
def system_interfaces():
    """Network links known to the kernel"""
    with patch("netconfig.network.arguments.get_system_network_interfaces", return_value=SYSTEM_INTERFACES) as mocked:
        yield mocked


@pytest.fixture
def managed_objects() -> Dict[str, Dict[str, Dict[str, Any]]]:
    """Snapshot of the network service with one physical interface and one VLAN"""
    eth0 = f"{OBJECT_ROOT}/eth0"
    vlan = f"{OBJECT_ROOT}/eth0_42"
    return {
        OBJECT_CONFIG: {
            SYSCFG_INTERFACE: {
                SYSCFG_HOSTNAME: "bmc.example.com",
                SYSCFG_DEFAULT_GW4: "10.0.0.254",
                SYSCFG_DEFAULT_GW6: "",
            },
        },
        OBJECT_DHCP: {
            DHCP_INTERFACE: {
                DHCP_DNS_ENABLED: True,
                DHCP_NTP_ENABLED: False,
            },
        },
        vlan: {
            ETH_INTERFACE: {
                ETH_NAME: "eth0.42",
                ETH_LINK_UP: False,
                ETH_SPEED: 0,
                ETH_DHCP_ENABLED: DHCP_CONF_NONE,
                ETH_NAME_SERVERS: [],
                ETH_STATIC_NAME_SERVERS: [],
                ETH_DOMAIN_NAME: [],
                ETH_NTP_SERVERS: [],
            },
            VLAN_INTERFACE: {VLAN_ID: 42},
            MAC_INTERFACE: {MAC_ADDRESS: "aa:bb:cc:dd:ee:ff"},
        },
        eth0: {
            ETH_INTERFACE: {
                ETH_NAME: "eth0",
                ETH_LINK_UP: True,
                ETH_SPEED: 1000,
                ETH_DHCP_ENABLED: DHCP_CONF_BOTH,
                ETH_NAME_SERVERS: ["10.0.0.53"],
                ETH_STATIC_NAME_SERVERS: ["8.8.8.8", "8.8.4.4"],
                ETH_DOMAIN_NAME: ["example.com"],
                ETH_NTP_SERVERS: ["pool.ntp.org"],
            },
            MAC_INTERFACE: {MAC_ADDRESS: "aa:bb:cc:dd:ee:ff"},
        },
        f"{eth0}/ipv4/1": {
            IP_INTERFACE: {IP_ADDRESS: "10.0.0.1", IP_PREFIX: 8, IP_GATEWAY: "10.0.0.254"},
        },
        f"{eth0}/ipv6/2": {
            IP_INTERFACE: {IP_ADDRESS: "2001:db8::1", IP_PREFIX: 64, IP_GATEWAY: ""},
        },
    }
