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
Command line arguments parser.

Arguments keeps the whole argument vector and a cursor. Every as_*() method
consumes the current argument and raises an InvalidParameterError subclass
when it does not match the expected form.
"""
from __future__ import annotations

# Standard imports
from typing import NamedTuple, Optional, Sequence

# Local imports
from .common import (
    Action,
    DEFAULT_SYSLOG_PORT,
    IP4_DEFAULT_PREFIX,
    IP4_MAX_PREFIX,
    IP6_DEFAULT_PREFIX,
    IP6_MAX_PREFIX,
    IpVersion,
    Toggle,
)
from .validators import (
    get_system_network_interfaces,
    is_fqdn,
    is_mac_address,
    is_number,
    parse_ip_address,
    parse_port,
)
from netconfig.communication.common import (
    InvalidActionError,
    InvalidHostError,
    InvalidInterfaceError,
    InvalidIpError,
    InvalidIpMaskError,
    InvalidMacError,
    InvalidNumberError,
    InvalidPortError,
    NotEnoughArgsError,
    UnexpectedArgsError,
)


class IpAddress(NamedTuple):
    version: IpVersion
    address: str


class IpPrefix(NamedTuple):
    version: IpVersion
    address: str
    prefix: int

    def __str__(self) -> str:
        return f"{self.address}/{self.prefix}"


class Endpoint(NamedTuple):
    host: str
    port: int

    def __str__(self) -> str:
        # IPv6 host is bracketed to keep the port separable
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


class Arguments:
    def __init__(self, argv: Sequence[str]):
        self._args = tuple(argv)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._args)

    def peek(self) -> Optional[str]:
        """Current argument or None if all arguments were consumed."""
        if self._index < len(self._args):
            return self._args[self._index]
        return None

    def peek_next(self) -> Optional[str]:
        """Argument following the current one or None."""
        if self._index + 1 < len(self._args):
            return self._args[self._index + 1]
        return None

    def advance(self) -> None:
        if self._index >= len(self._args):
            raise NotEnoughArgsError()
        self._index += 1

    def expect_end(self) -> None:
        current = self.peek()
        if current is not None:
            raise UnexpectedArgsError(current)

    def as_text(self) -> str:
        current = self.peek()
        self.advance()
        assert current is not None
        return current

    def as_one_of(self, *expected: str) -> str:
        arg = self.as_text()
        if arg not in expected:
            raise InvalidActionError(arg, expected)
        return arg

    def as_number(self) -> int:
        arg = self.as_text()
        if not is_number(arg):
            raise InvalidNumberError(arg)
        return int(arg, 10)

    def as_action(self) -> Action:
        return Action(self.as_one_of(Action.ADD.value, Action.DEL.value))

    def as_toggle(self) -> Toggle:
        return Toggle(self.as_one_of(Toggle.ENABLE.value, Toggle.DISABLE.value))

    def as_net_interface(self) -> str:
        arg = self.as_text()
        if arg not in get_system_network_interfaces():
            raise InvalidInterfaceError(arg)
        return arg

    def as_mac_address(self) -> str:
        arg = self.as_text()
        if not is_mac_address(arg):
            raise InvalidMacError(arg)
        return arg

    def as_ip_address(self) -> IpAddress:
        arg = self.as_text()
        parsed = parse_ip_address(arg)
        if parsed is None:
            raise InvalidIpError(arg)
        return IpAddress(*parsed)

    def as_ip_addr_mask(self) -> IpPrefix:
        """IP[/PREFIX], prefix defaults to 24 for IPv4 and 64 for IPv6."""
        arg = self.as_text()
        address, delimiter, prefix_text = arg.rpartition("/")
        if not delimiter:
            parsed = parse_ip_address(arg)
            if parsed is not None:
                version, ip = parsed
                return IpPrefix(version, ip, IP4_DEFAULT_PREFIX if version == IpVersion.V4 else IP6_DEFAULT_PREFIX)
        elif is_number(prefix_text):
            parsed = parse_ip_address(address)
            if parsed is not None:
                version, ip = parsed
                prefix = int(prefix_text, 10)
                max_prefix = IP4_MAX_PREFIX if version == IpVersion.V4 else IP6_MAX_PREFIX
                if 0 < prefix <= max_prefix:
                    return IpPrefix(version, ip, prefix)
        raise InvalidIpMaskError(arg)

    def as_ip_or_fqdn(self, param: Optional[str] = None) -> str:
        """IP address (returned in canonical form) or fully qualified domain name.

        Given param is validated instead of the current argument, cursor is not moved then.
        """
        arg = self.as_text() if param is None else param
        parsed = parse_ip_address(arg)
        if parsed is not None:
            return parsed[1]
        if is_fqdn(arg):
            return arg
        raise InvalidHostError(arg)

    def parse_addr_and_port(self) -> Endpoint:
        """ADDR[:PORT] or [IPv6-ADDR]:PORT, port defaults to 514.

        Returns Endpoint("", 0) when there are no more arguments, otherwise the
        parsed argument is consumed.
        """
        arg = self.peek()
        if arg is None:
            return Endpoint("", 0)
        self.advance()

        colons = arg.count(":")
        if colons == 0:
            return Endpoint(self.as_ip_or_fqdn(arg), DEFAULT_SYSLOG_PORT)
        if colons == 1:
            host, _, port = arg.partition(":")
            return Endpoint(self.as_ip_or_fqdn(host), _port_from_text(port))
        # IPv6 address contains at least two colons, with a port it has
        # to be enclosed in square brackets: [IPv6-ADDR]:PORT
        if not arg.startswith("["):
            return Endpoint(self.as_ip_or_fqdn(arg), DEFAULT_SYSLOG_PORT)
        host, delimiter, rest = arg[1:].partition("]")
        if not delimiter:
            raise InvalidHostError(arg)
        host = self.as_ip_or_fqdn(host)
        if not rest:
            return Endpoint(host, DEFAULT_SYSLOG_PORT)
        if not rest.startswith(":"):
            raise InvalidPortError(rest)
        return Endpoint(host, _port_from_text(rest[1:]))


def _port_from_text(text: str) -> int:
    port = parse_port(text)
    if port is None:
        raise InvalidPortError(text)
    return port
