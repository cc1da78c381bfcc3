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
import logging
import os

# Third party imports
from systemd.journal import JournalHandler  # type: ignore

# Local imports
from netconfig.config.common import LOG_LEVEL_ENV


def Logger(name: str, identifier: str = "netconfig") -> logging.Logger:
    """Create logger which sends its records to the systemd journal.

    Args:
        name (str): logger name, usually __name__ of the calling module
        identifier (str, optional): prefix of SYSLOG_IDENTIFIER. Defaults to "netconfig".

    Returns:
        logging.Logger: configured logger
    """
    logger = logging.getLogger(name)
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
    # unknown names resolve to "Level X" strings
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    if not any(isinstance(handler, JournalHandler) for handler in logger.handlers):
        logger.addHandler(JournalHandler(APPLICATION_NAME=f"{name}", SYSLOG_IDENTIFIER=f"{identifier}: {name}", SYSLOG_FACILITY=22))
    # console output is reserved for the user facing messages
    logger.propagate = False
    return logger
