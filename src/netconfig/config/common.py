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
Common configuration constants
"""

VERSION = "1.0.0"
DESCRIPTION = "BMC network configuration."
COPYRIGHT = "Copyright (c) 2025 Contributors to the Eclipse Foundation."

# Environment variables consulted by the entry point
BUS_ADDRESS_ENV = "NETCONFIG_BUS_ADDRESS"
SESSION_BUS_ENV = "NETCONFIG_SESSION_BUS"
LOG_LEVEL_ENV = "NETCONFIG_LOG_LEVEL"

# Services
NETWORK_SERVICE = "xyz.openbmc_project.Network"
SYSLOG_SERVICE = "xyz.openbmc_project.Syslog.Config"

# Objects
OBJECT_ROOT = "/xyz/openbmc_project/network"
OBJECT_CONFIG = "/xyz/openbmc_project/network/config"
OBJECT_DHCP = "/xyz/openbmc_project/network/config/dhcp"
OBJECT_SYSLOG = "/xyz/openbmc_project/logging/config/remote"

# System configuration
SYSCFG_INTERFACE = "xyz.openbmc_project.Network.SystemConfiguration"
SYSCFG_HOSTNAME = "HostName"
SYSCFG_DEFAULT_GW4 = "DefaultGateway"
SYSCFG_DEFAULT_GW6 = "DefaultGateway6"

# DHCP configuration
DHCP_INTERFACE = "xyz.openbmc_project.Network.DHCPConfiguration"
DHCP_DNS_ENABLED = "DNSEnabled"
DHCP_NTP_ENABLED = "NTPEnabled"

# MAC address
MAC_INTERFACE = "xyz.openbmc_project.Network.MACAddress"
MAC_ADDRESS = "MACAddress"

# Ethernet interface
ETH_INTERFACE = "xyz.openbmc_project.Network.EthernetInterface"
ETH_NAME = "InterfaceName"
ETH_DHCP_ENABLED = "DHCPEnabled"
ETH_NTP_SERVERS = "NTPServers"
ETH_NAME_SERVERS = "Nameservers"
ETH_STATIC_NAME_SERVERS = "StaticNameServers"
ETH_LINK_UP = "LinkUp"
ETH_SPEED = "Speed"
ETH_DOMAIN_NAME = "DomainName"

DHCP_CONF_PREFIX = f"{ETH_INTERFACE}.DHCPConf"
DHCP_CONF_BOTH = f"{DHCP_CONF_PREFIX}.both"
DHCP_CONF_V4 = f"{DHCP_CONF_PREFIX}.v4"
DHCP_CONF_V6 = f"{DHCP_CONF_PREFIX}.v6"
DHCP_CONF_NONE = f"{DHCP_CONF_PREFIX}.none"

# VLAN
VLAN_INTERFACE = "xyz.openbmc_project.Network.VLAN"
VLAN_ID = "Id"
VLAN_CREATE_INTERFACE = "xyz.openbmc_project.Network.VLAN.Create"
VLAN_CREATE_METHOD = "VLAN"

# IP
IP_CREATE_INTERFACE = "xyz.openbmc_project.Network.IP.Create"
IP_CREATE_METHOD = "IP"
IP_INTERFACE = "xyz.openbmc_project.Network.IP"
IP_ADDRESS = "Address"
IP_GATEWAY = "Gateway"
IP_PREFIX = "PrefixLength"
IP4_PROTOCOL = "xyz.openbmc_project.Network.IP.Protocol.IPv4"
IP6_PROTOCOL = "xyz.openbmc_project.Network.IP.Protocol.IPv6"

# Object removal and factory reset
DELETE_INTERFACE = "xyz.openbmc_project.Object.Delete"
DELETE_METHOD = "Delete"
RESET_INTERFACE = "xyz.openbmc_project.Common.FactoryReset"
RESET_METHOD = "Reset"

# Standard D-Bus interfaces
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"
PROPERTIES_GET = "Get"
PROPERTIES_SET = "Set"
OBJMGR_INTERFACE = "org.freedesktop.DBus.ObjectManager"
OBJMGR_GET = "GetManagedObjects"

# Remote syslog server
SYSLOG_INTERFACE = "xyz.openbmc_project.Network.Client"
SYSLOG_ADDRESS = "Address"
SYSLOG_PORT = "Port"

# Invocation names
NETCONFIG = "netconfig"
IFCONFIG = "ifconfig"
SYSLOG = "syslog"
CLI_PREFIX = "bmc"
CLI_IFCONFIG = f"{CLI_PREFIX} {IFCONFIG}"
CLI_SYSLOG = f"{CLI_PREFIX} {SYSLOG}"
CLI_DATETIME = "datetime"
CLI_NTPCONFIG = "ntpconfig"
CLI_DATETIME_NTPCONFIG = f"{CLI_PREFIX} {CLI_DATETIME} {CLI_NTPCONFIG}"
