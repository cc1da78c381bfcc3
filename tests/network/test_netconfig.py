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
from unittest.mock import MagicMock

import pytest

from netconfig.communication.dbus import ValueType, Variant
from netconfig.config.common import (
    COPYRIGHT,
    DELETE_INTERFACE,
    DELETE_METHOD,
    DESCRIPTION,
    ETH_DOMAIN_NAME,
    ETH_INTERFACE,
    ETH_NTP_SERVERS,
    ETH_STATIC_NAME_SERVERS,
    IP4_PROTOCOL,
    IP_CREATE_INTERFACE,
    IP_CREATE_METHOD,
    OBJECT_ROOT,
    OBJECT_SYSLOG,
    PROPERTIES_INTERFACE,
    PROPERTIES_SET,
    SYSLOG_ADDRESS,
    SYSLOG_INTERFACE,
    SYSLOG_PORT,
    VERSION,
)
from netconfig.network.netconfig import execute

ETH0 = f"{OBJECT_ROOT}/eth0"
BANNER = [DESCRIPTION, COPYRIGHT, f"Version {VERSION}."]
GROUP_LISTING = [
    "  ifconfig   Network interfaces configuration",
    "  syslog     Remote syslog server configuration",
]


@pytest.fixture
def bus_factory(bus):
    return MagicMock(return_value=bus)


def lines(text):
    return text.splitlines()


class TestScenarios:
    def test_add_ip_with_prefix(self, bus_factory, transport, capsys):
        assert execute(["tool", "ip", "eth0", "add", "10.0.0.1/8"], bus_factory) == 0
        (call,) = transport.method_calls()
        assert (call.object_path, call.interface, call.method) == (ETH0, IP_CREATE_INTERFACE, IP_CREATE_METHOD)
        assert call.args == (IP4_PROTOCOL, "10.0.0.1", 8, "")
        assert lines(capsys.readouterr().out) == ["Adding IP address 10.0.0.1/8 on eth0...", "Request has been sent"]

    def test_add_ip_default_prefix(self, bus_factory, transport):
        assert execute(["tool", "ip", "eth0", "add", "10.0.0.1"], bus_factory) == 0
        (call,) = transport.method_calls()
        assert call.args == (IP4_PROTOCOL, "10.0.0.1", 24, "")

    def test_vlan_id_out_of_range(self, bus_factory, transport, capsys):
        assert execute(["tool", "vlan", "add", "eth0", "1"], bus_factory) == 1
        captured = capsys.readouterr()
        assert "Invalid VLAN ID: 1" in captured.err
        assert "Request has been sent" not in captured.out
        assert transport.calls == []

    def test_delete_unknown_vlan(self, bus_factory, transport, capsys):
        transport.errors[(DELETE_INTERFACE, DELETE_METHOD)] = "org.freedesktop.DBus.Error.UnknownObject: Unknown object"
        assert execute(["tool", "vlan", "del", "eth0", "42"], bus_factory) == 1
        captured = capsys.readouterr()
        assert "Can't delete a nonexistent interface." in captured.out
        assert "UnknownObject" in captured.err

    def test_syslog_default_port(self, bus_factory, transport):
        assert execute(["tool", "syslog", "set", "10.0.0.5"], bus_factory) == 0
        assert transport.property_writes() == {
            (OBJECT_SYSLOG, SYSLOG_ADDRESS): Variant(ValueType.STRING, "10.0.0.5"),
            (OBJECT_SYSLOG, SYSLOG_PORT): Variant(ValueType.UINT16, 514),
        }

    def test_syslog_ipv6_with_port(self, bus_factory, transport):
        assert execute(["tool", "syslog", "set", "[2001:db8::1]:6514"], bus_factory) == 0
        writes = transport.property_writes()
        assert writes[(OBJECT_SYSLOG, SYSLOG_ADDRESS)] == Variant(ValueType.STRING, "2001:db8::1")
        assert writes[(OBJECT_SYSLOG, SYSLOG_PORT)] == Variant(ValueType.UINT16, 6514)

    def test_dns_add_twice(self, bus_factory, transport, capsys):
        transport.properties[(ETH0, ETH_INTERFACE, ETH_STATIC_NAME_SERVERS)] = ["8.8.8.8"]
        argv = ["tool", "dns", "eth0", "add", "8.8.8.8", "8.8.4.4"]
        assert execute(argv, bus_factory) == 0
        assert transport.properties[(ETH0, ETH_INTERFACE, ETH_STATIC_NAME_SERVERS)] == ["8.8.8.8", "8.8.4.4"]
        capsys.readouterr()

        assert execute(argv, bus_factory) == 1
        assert "Nothing to add" in capsys.readouterr().err

    def test_help_without_command_name(self, bus_factory, capsys):
        assert execute(["tool", "--cli-hide-cmd", "ip", "help"], bus_factory) == 0
        assert lines(capsys.readouterr().out) == [
            "Add or remove static IP address",
            "bmc ifconfig INTERFACE {add IP[/PREFIX] [GATEWAY]|del IP}",
        ]
        bus_factory.assert_not_called()


class TestHelp:
    def test_list_with_banner(self, bus_factory, capsys):
        assert execute(["tool"], bus_factory) == 0
        out = lines(capsys.readouterr().out)
        assert out[:4] == BANNER + ["Usage: tool COMMAND [OPTION...]"]
        assert "  show       Show current configuration" in out
        assert "  vlan       Add or remove VLAN" in out
        assert "             Command format: vlan {add|del} INTERFACE ID" in out
        bus_factory.assert_not_called()

    @pytest.mark.parametrize("token", ["help", "--help", "-h"])
    def test_help_tokens(self, bus_factory, capsys, token):
        assert execute(["tool", token], bus_factory) == 0
        assert DESCRIPTION in capsys.readouterr().out

    def test_list_in_cli_mode(self, bus_factory, capsys):
        assert execute(["tool", "--cli", "help"], bus_factory) == 0
        out = lines(capsys.readouterr().out)
        assert DESCRIPTION not in out
        assert out[0] == "  show       Show current configuration"

    def test_command_help(self, bus_factory, capsys):
        assert execute(["tool", "help", "vlan"], bus_factory) == 0
        assert lines(capsys.readouterr().out)[-2:] == ["Add or remove VLAN", "tool vlan {add|del} INTERFACE ID"]

    def test_command_help_after_command(self, bus_factory, capsys):
        assert execute(["tool", "--cli", "reset", "help"], bus_factory) == 0
        assert lines(capsys.readouterr().out) == ["Reset configuration to factory defaults", "bmc ifconfig reset"]

    def test_syslog_command_help(self, bus_factory, capsys):
        assert execute(["tool", "--cli", "syslog", "set", "help"], bus_factory) == 0
        assert lines(capsys.readouterr().out)[-1] == "bmc syslog set ADDR[:PORT]"

    def test_unknown_command_help(self, bus_factory, capsys):
        assert execute(["tool", "help", "bogus"], bus_factory) == 1
        assert "bogus is not a valid command, try --help option" in capsys.readouterr().err


class TestNetconfigGroups:
    @pytest.mark.parametrize("token", ["help", "--help", "-h"])
    def test_group_listing(self, bus_factory, capsys, token):
        assert execute(["netconfig", token], bus_factory) == 0
        assert lines(capsys.readouterr().out) == GROUP_LISTING

    def test_invalid_group(self, bus_factory, capsys):
        assert execute(["netconfig", "bogus"], bus_factory) == 0
        captured = capsys.readouterr()
        assert "Invalid command group: bogus" in captured.err
        assert lines(captured.out) == GROUP_LISTING

    def test_missing_group(self, bus_factory, capsys):
        assert execute(["/usr/bin/netconfig"], bus_factory) == 0
        captured = capsys.readouterr()
        assert "Command group expected" in captured.err
        assert lines(captured.out) == GROUP_LISTING

    def test_group_help_label(self, bus_factory, capsys):
        assert execute(["netconfig", "ifconfig", "help"], bus_factory) == 0
        assert "Usage: netconfig ifconfig COMMAND [OPTION...]" in lines(capsys.readouterr().out)

    def test_group_help_label_in_cli_mode(self, bus_factory, capsys):
        assert execute(["netconfig", "--cli", "syslog", "reset", "help"], bus_factory) == 0
        assert lines(capsys.readouterr().out)[-1] == "bmc syslog reset"

    def test_show_does_not_report_request(self, bus_factory, transport, capsys):
        transport.properties[(OBJECT_SYSLOG, SYSLOG_INTERFACE, SYSLOG_ADDRESS)] = ""
        transport.properties[(OBJECT_SYSLOG, SYSLOG_INTERFACE, SYSLOG_PORT)] = 0
        assert execute(["/usr/sbin/netconfig", "syslog", "show"], bus_factory) == 0
        assert lines(capsys.readouterr().out) == ["Remote syslog server: (none)"]


class TestCliAliases:
    def test_bmc_ifconfig(self, bus_factory, transport):
        assert execute(["bmc", "ifconfig", "vlan", "add", "eth0", "42"], bus_factory) == 0
        assert transport.calls[0].args == ("eth0", 42)

    def test_datetime_ntpconfig(self, bus_factory, transport, capsys):
        transport.properties[(ETH0, ETH_INTERFACE, ETH_NTP_SERVERS)] = []
        assert execute(["bmc", "datetime", "ntpconfig", "eth0", "add", "pool.ntp.org"], bus_factory) == 0
        assert transport.properties[(ETH0, ETH_INTERFACE, ETH_NTP_SERVERS)] == ["pool.ntp.org"]
        assert lines(capsys.readouterr().out)[-1] == "Request has been sent"

    def test_datetime_ntpconfig_help(self, bus_factory, capsys):
        assert execute(["bmc", "--cli", "datetime", "ntpconfig", "help"], bus_factory) == 0
        assert lines(capsys.readouterr().out) == [
            "Add or remove NTP servers",
            "bmc datetime ntpconfig INTERFACE {add|del} ADDR [ADDR...]",
        ]

    def test_datetime_ntpconfig_without_arguments(self, bus_factory, capsys):
        assert execute(["bmc", "--cli", "datetime", "ntpconfig"], bus_factory) == 0
        assert lines(capsys.readouterr().out) == [
            "Add or remove NTP servers",
            "bmc datetime ntpconfig INTERFACE {add|del} ADDR [ADDR...]",
        ]
        bus_factory.assert_not_called()

    def test_bmc_ifconfig_domain(self, bus_factory, transport, capsys):
        transport.properties[(ETH0, ETH_INTERFACE, ETH_DOMAIN_NAME)] = []
        assert execute(["bmc", "ifconfig", "domain", "eth0", "add", "example.com"], bus_factory) == 0
        assert transport.properties[(ETH0, ETH_INTERFACE, ETH_DOMAIN_NAME)] == ["example.com"]
        assert lines(capsys.readouterr().out) == ["Adding domain names example.com on eth0...", "Request has been sent"]


class TestFailures:
    def test_unknown_command(self, bus_factory, capsys):
        assert execute(["tool", "bogus"], bus_factory) == 1
        assert "Invalid command: bogus" in capsys.readouterr().err
        bus_factory.assert_not_called()

    def test_not_enough_arguments(self, bus_factory, capsys):
        assert execute(["tool", "mac", "eth0"], bus_factory) == 1
        assert "Not enough arguments" in capsys.readouterr().err

    def test_empty_argv(self, bus_factory, capsys):
        assert execute([], bus_factory) == 1
        assert "Not enough arguments" in capsys.readouterr().err

    def test_bus_error_description(self, bus_factory, transport, capsys):
        transport.errors[(PROPERTIES_INTERFACE, PROPERTIES_SET)] = "xyz.openbmc_project.Network.Error.UnreachableGW"
        assert execute(["tool", "gateway", "10.0.0.254"], bus_factory) == 1
        captured = capsys.readouterr()
        assert "Unreachable gateway specified" in captured.err
        assert "Request has been sent" not in captured.out

    def test_unexpected_exception_propagates(self, bus_factory):
        bus_factory.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            execute(["tool", "reset"], bus_factory)
