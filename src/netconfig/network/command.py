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

# Standard imports
from typing import Callable, NamedTuple, Optional, Sequence

# Local imports
from .arguments import Arguments
from netconfig.communication.dbus import Dbus

# Standard message to print after sending request
COMPLETE_MESSAGE = "Request has been sent"

# Handler gets arguments following the command name
Handler = Callable[[Dbus, Arguments], None]


class Command(NamedTuple):
    name: str
    fmt: Optional[str]
    help: str
    handler: Handler
    # read-only commands do not send any request
    sends_request: bool = True


def find_command(commands: Sequence[Command], name: str) -> Optional[Command]:
    return next((command for command in commands if command.name == name), None)
