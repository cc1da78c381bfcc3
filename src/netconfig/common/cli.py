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
from __future__ import annotations

import sys
from typing import Optional, Tuple

import click

from netconfig.communication.dbus import Dbus
from netconfig.communication.transport import GioTransport
from netconfig.config.common import BUS_ADDRESS_ENV, SESSION_BUS_ENV
from netconfig.network.netconfig import execute


@click.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
               add_help_option=False)
@click.option("--bus-address", envvar=BUS_ADDRESS_ENV, hidden=True, help="D-Bus address to connect to.")
@click.option("--session", envvar=SESSION_BUS_ENV, is_flag=True, hidden=True, help="Use session bus.")
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, bus_address: Optional[str], session: bool, argv: Tuple[str, ...]) -> None:
    """BMC network configuration.

    Options of the tool itself are handled by the command dispatcher, only bus
    selection is done here.
    """
    def connect() -> Dbus:
        return Dbus(GioTransport.connect(bus_address, session))

    sys.exit(execute([ctx.info_name or "", *argv], connect))
