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
from enum import Enum


class Action(Enum):
    ADD = "add"
    DEL = "del"


class Toggle(Enum):
    ENABLE = "enable"
    DISABLE = "disable"


class IpVersion(Enum):
    V4 = 4
    V6 = 6


class CliMode(Enum):
    NORMAL = "normal"  # banner and command name in help
    CLI = "cli"  # no banner, command name in help
    CLI_NO_COMMAND = "cliNoCommand"  # neither banner nor command name in help


CLI_MODE_FLAG_PREFIX = "--cli"
CLI_HIDE_COMMAND_FLAG = "--cli-hide-cmd"
HELP_TOKENS = ["help", "--help", "-h"]

MAX_NUMERIC_LENGTH = 10
IP4_MAX_PREFIX = 32
IP6_MAX_PREFIX = 64
IP4_DEFAULT_PREFIX = 24
IP6_DEFAULT_PREFIX = 64
MIN_PORT = 1
MAX_PORT = 65535
DEFAULT_SYSLOG_PORT = 514
# IEEE 802.1Q, 0 1 and 4095 are reserved
MIN_VLAN_ID = 2
MAX_VLAN_ID = 4094
