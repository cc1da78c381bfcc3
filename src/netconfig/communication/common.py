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
Errors reported to the user by netconfig.

Argument errors are raised at the token where the problem was detected, before
any request reaches the bus. Precondition errors depend on the current state of
the network service. Bus errors carry the raw text received from the bus.
"""
from __future__ import annotations

from typing import Iterable


class NetconfigError(Exception):
    pass


class InvalidParameterError(NetconfigError, ValueError):
    pass


class NotEnoughArgsError(InvalidParameterError):
    def __init__(self) -> None:
        super().__init__("Not enough arguments")


class UnexpectedArgsError(InvalidParameterError):
    def __init__(self, token: str):
        super().__init__(f"Unexpected arguments: {token}")
        self.token = token


class InvalidActionError(InvalidParameterError):
    def __init__(self, got: str, expected: Iterable[str]):
        self.got = got
        self.expected = tuple(expected)
        super().__init__(f"Invalid action: {got}, expected one of [{', '.join(self.expected)}]")


class InvalidCommandError(InvalidParameterError):
    def __init__(self, name: str):
        super().__init__(f"Invalid command: {name}")
        self.name = name


class InvalidNumberError(InvalidParameterError):
    def __init__(self, token: str):
        super().__init__(f"Invalid numeric argument: {token}")


class InvalidInterfaceError(InvalidParameterError):
    def __init__(self, name: str):
        super().__init__(f"Invalid network interface name: {name}")


class InvalidMacError(InvalidParameterError):
    def __init__(self, token: str):
        super().__init__(f"Invalid MAC address: {token}, expected hex-digits-and-colons notation")


class InvalidIpError(InvalidParameterError):
    def __init__(self, token: str):
        super().__init__(f"Invalid IP address: {token}, expected IPv4 or IPv6 address")


class InvalidIpMaskError(InvalidParameterError):
    def __init__(self, token: str):
        super().__init__(f"Invalid argument: {token}, expected IP[/PREFIX] (e.g. 10.0.0.1/8 or 192.168.1.1)")


class InvalidHostError(InvalidParameterError):
    def __init__(self, token: str):
        super().__init__(f"Invalid argument: {token}, expected IP address or FQDN. "
                         "Please, enter IPv4-addresses in dotted-decimal format.")


class InvalidPortError(InvalidParameterError):
    def __init__(self, text: str):
        super().__init__(f"Invalid port number: {text}, expected an integer in the range 1 - 65535")


class VersionMismatchError(InvalidParameterError):
    def __init__(self) -> None:
        super().__init__("IP version mismatch")


class InvalidVlanIdError(InvalidParameterError):
    def __init__(self, vlan_id: int, minimum: int, maximum: int):
        super().__init__(f"Invalid VLAN ID: {vlan_id}, expected an integer in the range {minimum} - {maximum}")


class InvalidPreconditionError(NetconfigError, RuntimeError):
    pass


class NotFoundError(InvalidPreconditionError):
    pass


class NothingToAddError(InvalidPreconditionError):
    def __init__(self, values: Iterable[str]):
        super().__init__(f"Nothing to add, already present: {', '.join(values)}")


class NothingToRemoveError(InvalidPreconditionError):
    def __init__(self, values: Iterable[str]):
        super().__init__(f"Nothing to remove, not found: {', '.join(values)}")


class BusError(NetconfigError, RuntimeError):
    """Failure reported by the object bus, `raw` holds the text as received."""
    def __init__(self, raw: str):
        super().__init__(raw)
        self.raw = raw


class InvalidPayloadError(NetconfigError, RuntimeError):
    pass


# Substrings of well known bus errors and their explanation for the user
BUS_ERROR_DESCRIPTIONS = {
    "UnreachableGW": "Unreachable gateway specified",
    "NotAllowed": "The operation is not allowed because no static addresses found",
}


def describe_bus_error(error: BusError) -> str:
    for marker, description in BUS_ERROR_DESCRIPTIONS.items():
        if marker in error.raw:
            return description
    return error.raw
