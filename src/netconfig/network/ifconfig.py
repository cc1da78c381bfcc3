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
Network interfaces configuration commands (`ifconfig` group).

Every handler gets the bus and the arguments following the command name.
All arguments are validated before the first request is sent.
"""
from __future__ import annotations

# Standard imports
from typing import Callable, List

# Third party imports
import click

# Local imports
from .arguments import Arguments
from .command import Command
from .common import Action, IpVersion, MAX_VLAN_ID, MIN_VLAN_ID, Toggle
from .show import Show
from netconfig.common.logger import Logger
from netconfig.communication.common import (
    BusError,
    InvalidVlanIdError,
    NotEnoughArgsError,
    NotFoundError,
    VersionMismatchError,
)
from netconfig.communication.dbus import Dbus
from netconfig.config.common import (
    DELETE_INTERFACE,
    DELETE_METHOD,
    DHCP_CONF_BOTH,
    DHCP_CONF_NONE,
    DHCP_DNS_ENABLED,
    DHCP_INTERFACE,
    DHCP_NTP_ENABLED,
    ETH_DHCP_ENABLED,
    ETH_DOMAIN_NAME,
    ETH_INTERFACE,
    ETH_NTP_SERVERS,
    ETH_STATIC_NAME_SERVERS,
    IP4_PROTOCOL,
    IP6_PROTOCOL,
    IP_CREATE_INTERFACE,
    IP_CREATE_METHOD,
    MAC_ADDRESS,
    MAC_INTERFACE,
    NETWORK_SERVICE,
    OBJECT_CONFIG,
    OBJECT_DHCP,
    OBJECT_ROOT,
    RESET_INTERFACE,
    RESET_METHOD,
    SYSCFG_DEFAULT_GW4,
    SYSCFG_DEFAULT_GW6,
    SYSCFG_HOSTNAME,
    SYSCFG_INTERFACE,
    VLAN_CREATE_INTERFACE,
    VLAN_CREATE_METHOD,
)

logger = Logger(__name__)

STATIC_KEYWORD = "static"
FEATURE_DNS = "dns"
FEATURE_NTP = "ntp"
UNKNOWN_VLAN_MESSAGE = "Can't delete a nonexistent interface."


def _adding(action: Action) -> str:
    return "Adding" if action == Action.ADD else "Removing"


def _enabling(toggle: Toggle) -> str:
    return "Enable" if toggle == Toggle.ENABLE else "Disable"


def _values_list(args: Arguments, parse: Callable[[], str]) -> List[str]:
    """Consume all remaining arguments, at least one is required."""
    if args.peek() is None:
        raise NotEnoughArgsError()
    values = []
    while args.peek() is not None:
        values.append(parse())
    return values


def _update_list(bus: Dbus, object_path: str, name: str, action: Action, values: List[str]) -> None:
    if action == Action.ADD:
        bus.append(NETWORK_SERVICE, object_path, ETH_INTERFACE, name, values)
    else:
        bus.remove(NETWORK_SERVICE, object_path, ETH_INTERFACE, name, values)


def cmd_show(bus: Dbus, args: Arguments) -> None:
    """Show network configuration: `show`"""
    args.expect_end()
    Show(bus).print()


def cmd_reset(bus: Dbus, args: Arguments) -> None:
    """Reset network configuration: `reset`"""
    args.expect_end()
    click.echo("Reset network configuration...")
    bus.call(NETWORK_SERVICE, OBJECT_ROOT, RESET_INTERFACE, RESET_METHOD)


def cmd_mac(bus: Dbus, args: Arguments) -> None:
    """Set MAC address: `mac INTERFACE MAC`"""
    interface = args.as_net_interface()
    mac = args.as_mac_address()
    args.expect_end()
    click.echo(f"Set new MAC address {mac} on {interface}...")
    bus.set(NETWORK_SERVICE, Dbus.eth_to_path(interface), MAC_INTERFACE, MAC_ADDRESS, mac)


def cmd_hostname(bus: Dbus, args: Arguments) -> None:
    """Set host name: `hostname NAME`"""
    name = args.as_ip_or_fqdn()
    args.expect_end()
    click.echo(f"Set new host name {name}...")
    bus.set(NETWORK_SERVICE, OBJECT_CONFIG, SYSCFG_INTERFACE, SYSCFG_HOSTNAME, name)


def cmd_domain(bus: Dbus, args: Arguments) -> None:
    """Add/remove domain names: `domain INTERFACE {add|del} NAME [NAME...]`"""
    interface = args.as_net_interface()
    action = args.as_action()
    names = _values_list(args, args.as_ip_or_fqdn)

    click.echo(f"{_adding(action)} domain names {', '.join(names)} on {interface}...")
    _update_list(bus, Dbus.eth_to_path(interface), ETH_DOMAIN_NAME, action, names)


def cmd_gateway(bus: Dbus, args: Arguments) -> None:
    """Set default gateway: `gateway IP`"""
    gateway = args.as_ip_address()
    args.expect_end()
    click.echo(f"Setting default gateway for IPv{gateway.version.value} to {gateway.address}...")
    name = SYSCFG_DEFAULT_GW4 if gateway.version == IpVersion.V4 else SYSCFG_DEFAULT_GW6
    bus.set(NETWORK_SERVICE, OBJECT_CONFIG, SYSCFG_INTERFACE, name, gateway.address)


def cmd_ip(bus: Dbus, args: Arguments) -> None:
    """Add/remove static IP address: `ip INTERFACE {add IP[/PREFIX] [GATEWAY]|del IP}`"""
    interface = args.as_net_interface()
    object_path = Dbus.eth_to_path(interface)
    action = args.as_action()

    if action == Action.ADD:
        ip = args.as_ip_addr_mask()
        gateway = ""
        if args.peek() is not None:
            gateway_ip = args.as_ip_address()
            if gateway_ip.version != ip.version:
                raise VersionMismatchError()
            gateway = gateway_ip.address
        args.expect_end()

        description = f"{ip} on {interface}" + (f" with gateway {gateway}" if gateway else "")
        click.echo(f"Adding IP address {description}...")
        protocol = IP4_PROTOCOL if ip.version == IpVersion.V4 else IP6_PROTOCOL
        bus.call(NETWORK_SERVICE, object_path, IP_CREATE_INTERFACE, IP_CREATE_METHOD, "ssys",
                 protocol, ip.address, ip.prefix, gateway)
        return

    ip_address = args.as_ip_address()
    args.expect_end()

    record = next((record for record in bus.get_addresses(object_path) if record.address == ip_address.address), None)
    if record is None:
        raise NotFoundError(f"IP address {ip_address.address} not found on {interface}")
    click.echo(f"Removing IP address {record.address}/{record.prefix} from {interface}...")
    bus.call(NETWORK_SERVICE, record.object, DELETE_INTERFACE, DELETE_METHOD)


def cmd_dhcp(bus: Dbus, args: Arguments) -> None:
    """Enable/disable DHCP client: `dhcp INTERFACE {enable|disable}`"""
    interface = args.as_net_interface()
    toggle = args.as_toggle()
    args.expect_end()

    click.echo(f"{_enabling(toggle)} DHCP client on {interface}...")
    mode = DHCP_CONF_BOTH if toggle == Toggle.ENABLE else DHCP_CONF_NONE
    bus.set(NETWORK_SERVICE, Dbus.eth_to_path(interface), ETH_INTERFACE, ETH_DHCP_ENABLED, mode)


def cmd_dhcpcfg(bus: Dbus, args: Arguments) -> None:
    """Enable/disable DHCP features: `dhcpcfg {enable|disable} {dns|ntp}`"""
    toggle = args.as_toggle()
    feature = args.as_one_of(FEATURE_DNS, FEATURE_NTP)
    args.expect_end()

    click.echo(f"{_enabling(toggle)} {feature.upper()} over DHCP...")
    name = DHCP_DNS_ENABLED if feature == FEATURE_DNS else DHCP_NTP_ENABLED
    bus.set(NETWORK_SERVICE, OBJECT_DHCP, DHCP_INTERFACE, name, toggle == Toggle.ENABLE)


def cmd_dns(bus: Dbus, args: Arguments) -> None:
    """Add/remove DNS servers: `dns INTERFACE {add|del} [static] IP [IP...]`"""
    interface = args.as_net_interface()
    action = args.as_action()
    # only static servers are configurable, keyword kept for older scripts
    if args.peek() == STATIC_KEYWORD:
        args.advance()
    servers = _values_list(args, lambda: args.as_ip_address().address)

    click.echo(f"{_adding(action)} DNS servers {', '.join(servers)} on {interface}...")
    _update_list(bus, Dbus.eth_to_path(interface), ETH_STATIC_NAME_SERVERS, action, servers)


def cmd_ntp(bus: Dbus, args: Arguments) -> None:
    """Add/remove NTP servers: `ntp INTERFACE {add|del} ADDR [ADDR...]`"""
    interface = args.as_net_interface()
    action = args.as_action()
    servers = _values_list(args, args.as_ip_or_fqdn)

    click.echo(f"{_adding(action)} NTP servers {', '.join(servers)} on {interface}...")
    _update_list(bus, Dbus.eth_to_path(interface), ETH_NTP_SERVERS, action, servers)


def cmd_vlan(bus: Dbus, args: Arguments) -> None:
    """Add/remove VLAN: `vlan {add|del} INTERFACE ID`

    Deleting a VLAN which the network service does not know prints a hint for
    the user and still fails with the bus error (non zero exit status).
    """
    action = args.as_action()
    interface = args.as_net_interface()
    vlan_id = args.as_number()
    args.expect_end()
    if not MIN_VLAN_ID <= vlan_id <= MAX_VLAN_ID:
        raise InvalidVlanIdError(vlan_id, MIN_VLAN_ID, MAX_VLAN_ID)

    click.echo(f"{_adding(action)} VLAN {vlan_id} on {interface}...")
    if action == Action.ADD:
        bus.call(NETWORK_SERVICE, OBJECT_ROOT, VLAN_CREATE_INTERFACE, VLAN_CREATE_METHOD, "su", interface, vlan_id)
        return

    object_path = f"{Dbus.eth_to_path(interface)}_{vlan_id}"
    try:
        bus.call(NETWORK_SERVICE, object_path, DELETE_INTERFACE, DELETE_METHOD)
    except BusError as exc:
        if "UnknownObject" in exc.raw:
            logger.warning(f"VLAN object {object_path} does not exist")
            click.echo(UNKNOWN_VLAN_MESSAGE)
        raise


# fmt: off
COMMANDS = [
    Command("show", None, "Show current configuration", cmd_show, sends_request=False),
    Command("reset", None, "Reset configuration to factory defaults", cmd_reset),
    Command("mac", "INTERFACE MAC", "Set MAC address", cmd_mac),
    Command("hostname", "NAME", "Set host name", cmd_hostname),
    Command("domain", "INTERFACE {add|del} NAME [NAME...]", "Add or remove domain names", cmd_domain),
    Command("gateway", "IP", "Set default gateway", cmd_gateway),
    Command("ip", "INTERFACE {add IP[/PREFIX] [GATEWAY]|del IP}", "Add or remove static IP address", cmd_ip),
    Command("dhcp", "INTERFACE {enable|disable}", "Enable or disable DHCP client", cmd_dhcp),
    Command("dhcpcfg", "{enable|disable} {dns|ntp}", "Enable or disable DHCP features", cmd_dhcpcfg),
    Command("dns", "INTERFACE {add|del} [static] IP [IP...]", "Add or remove static DNS servers", cmd_dns),
    Command("ntp", "INTERFACE {add|del} ADDR [ADDR...]", "Add or remove NTP servers", cmd_ntp),
    Command("vlan", "{add|del} INTERFACE ID", "Add or remove VLAN", cmd_vlan),
]
# fmt: on
