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
Command dispatcher.

Invocation layout::

    app [--cli|--cli-hide-cmd] [GROUP] COMMAND [OPTION...]
    app [--cli|--cli-hide-cmd] [GROUP] help [COMMAND]

The group is mandatory when the tool is called as `netconfig`, the embedded
CLI calls it as `bmc ifconfig`, `bmc syslog` or `bmc datetime ntpconfig`.
"""
from __future__ import annotations

# Standard imports
import os
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Sequence, Tuple

# Third party imports
import click

# Local imports
from . import ifconfig, syslog
from .arguments import Arguments
from .command import COMPLETE_MESSAGE, Command, find_command
from .common import CLI_HIDE_COMMAND_FLAG, CLI_MODE_FLAG_PREFIX, HELP_TOKENS, CliMode
from netconfig.common.logger import Logger
from netconfig.communication.common import (
    BusError,
    InvalidCommandError,
    InvalidParameterError,
    NetconfigError,
    describe_bus_error,
)
from netconfig.communication.dbus import Dbus
from netconfig.communication.status_codes import FAILURE, SUCCESS
from netconfig.config.common import (
    CLI_DATETIME,
    CLI_DATETIME_NTPCONFIG,
    CLI_IFCONFIG,
    CLI_NTPCONFIG,
    CLI_PREFIX,
    CLI_SYSLOG,
    COPYRIGHT,
    DESCRIPTION,
    IFCONFIG,
    NETCONFIG,
    SYSLOG,
    VERSION,
)

logger = Logger(__name__)

GROUPS: Dict[str, Sequence[Command]] = {
    IFCONFIG: ifconfig.COMMANDS,
    SYSLOG: syslog.COMMANDS,
}
GROUP_HELP = {
    IFCONFIG: "Network interfaces configuration",
    SYSLOG: "Remote syslog server configuration",
}
CLI_LABELS = {
    IFCONFIG: CLI_IFCONFIG,
    SYSLOG: CLI_SYSLOG,
}
# `bmc datetime ntpconfig` is bound to this ifconfig command
NTPCONFIG_COMMAND = "ntp"

BusFactory = Callable[[], Dbus]


class HelpRequest(Enum):
    NONE = "none"
    LIST = "list"  # all commands of the group
    COMMAND = "command"  # single command


class Invocation(NamedTuple):
    # program name shown in help output
    label: str
    mode: CliMode
    commands: Sequence[Command]
    # command fixed by the invocation alias
    command: Optional[str] = None


def parse_mode(args: Arguments) -> CliMode:
    flag = args.peek()
    if flag is None or not flag.startswith(CLI_MODE_FLAG_PREFIX):
        return CliMode.NORMAL
    args.advance()
    return CliMode.CLI_NO_COMMAND if flag == CLI_HIDE_COMMAND_FLAG else CliMode.CLI


def print_groups() -> None:
    for group, description in GROUP_HELP.items():
        click.echo(f"  {group:<10} {description}")


def resolve_invocation(args: Arguments) -> Optional[Invocation]:
    """Resolve program alias, CLI mode and command group.

    Returns None when the request was completely handled here (group listing).
    """
    app = os.path.basename(args.as_text())
    mode = parse_mode(args)

    if app == NETCONFIG:
        group = args.peek()
        if group in HELP_TOKENS:
            print_groups()
            return None
        if group not in GROUPS:
            click.echo(f"Invalid command group: {group}" if group else "Command group expected", err=True)
            print_groups()
            return None
        args.advance()
        label = f"{app} {group}"
    elif app == CLI_PREFIX and args.peek() == CLI_DATETIME and args.peek_next() == CLI_NTPCONFIG:
        args.advance()
        args.advance()
        return Invocation(CLI_DATETIME_NTPCONFIG, mode, GROUPS[IFCONFIG], NTPCONFIG_COMMAND)
    elif args.peek() in GROUPS:
        group = args.as_text()
        label = f"{app} {group}"
    else:
        group = IFCONFIG
        label = app

    if mode != CliMode.NORMAL:
        label = CLI_LABELS[group]
    return Invocation(label, mode, GROUPS[group])


def resolve_help(args: Arguments, invocation: Invocation) -> Tuple[HelpRequest, Optional[str]]:
    """Detect help request, returns the kind of help and the command name (if any)."""
    token = args.peek()
    if invocation.command is not None:
        request = HelpRequest.COMMAND if token is None or token in HELP_TOKENS else HelpRequest.NONE
        return request, invocation.command

    if token is None:
        return HelpRequest.LIST, None
    if token in HELP_TOKENS:
        args.advance()
        subject = args.peek()
        return (HelpRequest.LIST, None) if subject is None else (HelpRequest.COMMAND, subject)
    if args.peek_next() in HELP_TOKENS:
        return HelpRequest.COMMAND, token
    return HelpRequest.NONE, token


def print_help(invocation: Invocation, request: HelpRequest, name: Optional[str] = None) -> None:
    command = None
    if request == HelpRequest.COMMAND:
        command = find_command(invocation.commands, name)
        if command is None:
            raise InvalidParameterError(f"{name} is not a valid command, try --help option")

    if invocation.mode == CliMode.NORMAL:
        click.echo(DESCRIPTION)
        click.echo(COPYRIGHT)
        click.echo(f"Version {VERSION}.")
        click.echo(f"Usage: {invocation.label} COMMAND [OPTION...]")

    if command is None:
        for entry in invocation.commands:
            click.echo(f"  {entry.name:<10} {entry.help}")
            if entry.fmt:
                click.echo(f"  {'':<10} Command format: {entry.name} {entry.fmt}")
            click.echo()
        return

    click.echo(command.help)
    line = [invocation.label]
    if invocation.mode != CliMode.CLI_NO_COMMAND and invocation.command is None:
        line.append(command.name)
    if command.fmt:
        line.append(command.fmt)
    click.echo(" ".join(line))


def run_command(invocation: Invocation, name: str, args: Arguments, bus_factory: BusFactory) -> None:
    command = find_command(invocation.commands, name)
    if command is None:
        raise InvalidCommandError(name)
    if invocation.command is None:
        args.advance()

    logger.debug(f"Executing '{invocation.label} {command.name}'")
    command.handler(bus_factory(), args)
    if command.sends_request:
        click.echo(COMPLETE_MESSAGE)


def _failure(message: str) -> int:
    logger.error(message)
    click.echo(message, err=True)
    return FAILURE


def execute(argv: Sequence[str], bus_factory: BusFactory) -> int:
    """Run the invocation described by the argument vector, returns the exit status.

    The bus is created with `bus_factory` only if a command is executed, help
    output never touches the bus.
    """
    args = Arguments(argv)
    try:
        invocation = resolve_invocation(args)
        if invocation is None:
            return SUCCESS

        request, name = resolve_help(args, invocation)
        if request != HelpRequest.NONE:
            print_help(invocation, request, name)
        else:
            run_command(invocation, name, args, bus_factory)
    except BusError as exc:
        return _failure(describe_bus_error(exc))
    except NetconfigError as exc:
        return _failure(str(exc))
    return SUCCESS
