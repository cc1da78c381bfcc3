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
D-Bus transport on top of GDBus.
"""
from __future__ import annotations

# Standard imports
from typing import Any, Optional, Sequence, Tuple

# Local imports
from netconfig.common.logger import Logger
from netconfig.communication.common import BusError
from netconfig.communication.dbus import Variant

# This ugly non-pep8 compliant importing sequence is required by gi module
import gi  # type: ignore
gi.require_version("Gio", "2.0")  # Use before import to ensure that the right version gets loaded
# all PyGObject API Reference can be read in below link
# https://lazka.github.io/pgi-docs/
from gi.repository import GLib, Gio  # type: ignore # noqa: E402

logger = Logger(__name__)

# Use default timeout of the bus
DEFAULT_TIMEOUT_MS = -1


def to_glib_body(signature: str, args: Sequence[Any]) -> Optional[GLib.Variant]:
    """Pack method arguments into GLib.Variant tuple, Variant arguments become 'v' slots."""
    if not signature:
        return None
    values = tuple(GLib.Variant(arg.value_type.value, arg.value) if isinstance(arg, Variant) else arg for arg in args)
    return GLib.Variant(f"({signature})", values)


class GioTransport:
    def __init__(self, connection: Gio.DBusConnection, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.connection = connection
        self.timeout_ms = timeout_ms

    @classmethod
    def connect(cls, address: Optional[str] = None, session: bool = False) -> GioTransport:
        """Connect to the system bus, session bus or to the bus at given address."""
        try:
            if address:
                flags = Gio.DBusConnectionFlags.AUTHENTICATION_CLIENT | Gio.DBusConnectionFlags.MESSAGE_BUS_CONNECTION
                connection = Gio.DBusConnection.new_for_address_sync(address, flags, None, None)
            else:
                connection = Gio.bus_get_sync(Gio.BusType.SESSION if session else Gio.BusType.SYSTEM, None)
        except GLib.Error as exc:
            logger.error(f"Unable to connect to D-Bus: {exc.message}")
            raise BusError(exc.message) from exc
        return cls(connection)

    def call(self, service: str, object_path: str, interface: str, method: str,
             signature: str, args: Sequence[Any]) -> Tuple[Any, ...]:
        try:
            reply = self.connection.call_sync(
                service,
                object_path,
                interface,
                method,
                to_glib_body(signature, args),
                None,
                Gio.DBusCallFlags.NONE,
                self.timeout_ms,
                None,
            )
        except GLib.Error as exc:
            logger.error(f"{interface}.{method} on {object_path} failed: {exc.message}")
            raise BusError(exc.message) from exc
        if reply is None:
            return ()
        return tuple(reply.unpack())
