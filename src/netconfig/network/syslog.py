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
Remote syslog server configuration commands (`syslog` group).
"""
from __future__ import annotations

# Third party imports
import click

# Local imports
from .arguments import Arguments, Endpoint
from .command import Command
from netconfig.communication.common import NotEnoughArgsError
from netconfig.communication.dbus import Dbus, ValueType
from netconfig.config.common import OBJECT_SYSLOG, SYSLOG_ADDRESS, SYSLOG_INTERFACE, SYSLOG_PORT, SYSLOG_SERVICE

NO_SERVER = "(none)"
PROTOCOL = "tcp"


def _set_server(bus: Dbus, address: str, port: int) -> None:
    bus.set(SYSLOG_SERVICE, OBJECT_SYSLOG, SYSLOG_INTERFACE, SYSLOG_ADDRESS, address)
    bus.set(SYSLOG_SERVICE, OBJECT_SYSLOG, SYSLOG_INTERFACE, SYSLOG_PORT, port, ValueType.UINT16)


def cmd_set(bus: Dbus, args: Arguments) -> None:
    """Set remote syslog server: `set ADDR[:PORT]`"""
    server = args.parse_addr_and_port()
    if not server.host:
        raise NotEnoughArgsError()
    args.expect_end()

    click.echo(f"Setting remote syslog server to {server}...")
    _set_server(bus, server.host, server.port)


def cmd_reset(bus: Dbus, args: Arguments) -> None:
    """Disable sending logs to remote server: `reset`"""
    args.expect_end()
    click.echo("Resetting remote syslog server...")
    _set_server(bus, "", 0)


def cmd_show(bus: Dbus, args: Arguments) -> None:
    """Show remote syslog server: `show`"""
    args.expect_end()
    address = bus.get(SYSLOG_SERVICE, OBJECT_SYSLOG, SYSLOG_INTERFACE, SYSLOG_ADDRESS, ValueType.STRING)
    port = bus.get(SYSLOG_SERVICE, OBJECT_SYSLOG, SYSLOG_INTERFACE, SYSLOG_PORT, ValueType.UINT16)
    if not address or not port:
        click.echo(f"Remote syslog server: {NO_SERVER}")
    else:
        click.echo(f"Remote syslog server: {Endpoint(address, port)} ({PROTOCOL})")


# fmt: off
COMMANDS = [
    Command("set", "ADDR[:PORT]", "Set remote syslog server, IPv6 address with port as [ADDR]:PORT (default port 514)", cmd_set),
    Command("reset", None, "Stop sending logs to remote syslog server", cmd_reset),
    Command("show", None, "Show remote syslog server", cmd_show, sends_request=False),
]
# fmt: on
