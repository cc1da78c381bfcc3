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
D-Bus wrapper to work with network configuration objects.

Property values travel over the bus as variants of a closed set of types
(see ValueType). Array properties have no atomic update on the bus, append()
and remove() read the whole array and write it back, so concurrent writers
are not detected and the last writer wins.
"""
from __future__ import annotations

# Standard imports
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Protocol, Sequence, Tuple, Union

# Local imports
from netconfig.common.logger import Logger
from netconfig.communication.common import InvalidPayloadError, NothingToAddError, NothingToRemoveError
from netconfig.config.common import (
    IP_ADDRESS,
    IP_GATEWAY,
    IP_INTERFACE,
    IP_PREFIX,
    NETWORK_SERVICE,
    OBJECT_ROOT,
    OBJMGR_GET,
    OBJMGR_INTERFACE,
    PROPERTIES_GET,
    PROPERTIES_INTERFACE,
    PROPERTIES_SET,
)

logger = Logger(__name__)


class ValueType(Enum):
    """D-Bus signatures of property values used by the network service."""
    BYTE = "y"
    UINT16 = "q"
    UINT32 = "u"
    BOOLEAN = "b"
    STRING = "s"
    STRING_ARRAY = "as"

    @classmethod
    def of(cls, value: Any) -> ValueType:
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.STRING_ARRAY
        # integers do not carry their width
        raise TypeError(f"Value type must be given explicitly for {value!r}")

    def matches(self, value: Any) -> bool:
        if self is ValueType.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueType.STRING:
            return isinstance(value, str)
        if self is ValueType.STRING_ARRAY:
            return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)
        return isinstance(value, int) and not isinstance(value, bool)


class Variant(NamedTuple):
    """Method argument which has to be sent as D-Bus variant."""
    value_type: ValueType
    value: Any


PropertyValue = Union[int, bool, str, List[str]]
Properties = Dict[str, PropertyValue]
ManagedObjects = Dict[str, Dict[str, Properties]]


class IpRecord(NamedTuple):
    object: str
    address: str
    prefix: int
    gateway: str


class Transport(Protocol):
    def call(self, service: str, object_path: str, interface: str, method: str,
             signature: str, args: Sequence[Any]) -> Tuple[Any, ...]:
        ...


class Dbus:
    def __init__(self, transport: Transport):
        self.transport = transport

    def call(self, service: str, object_path: str, interface: str, method: str,
             signature: str = "", *args: Any) -> Tuple[Any, ...]:
        """Call method of the object.

        Args:
            signature (str): D-Bus signature of args without enclosing parentheses

        Raises:
            BusError: if the bus or the called service reports a failure

        Returns:
            reply values unpacked to python types
        """
        logger.debug(f"Calling {service} {object_path} {interface}.{method}")
        return self.transport.call(service, object_path, interface, method, signature, args)

    def get(self, service: str, object_path: str, interface: str, name: str, value_type: ValueType) -> Any:
        (value,) = self.call(service, object_path, PROPERTIES_INTERFACE, PROPERTIES_GET, "ss", interface, name)
        if not value_type.matches(value):
            raise InvalidPayloadError(f"Property {name} of {object_path} is not of type '{value_type.value}'")
        if value_type is ValueType.STRING_ARRAY:
            return list(value)
        return value

    def set(self, service: str, object_path: str, interface: str, name: str, value: Any,
            value_type: Optional[ValueType] = None) -> None:
        if value_type is None:
            value_type = ValueType.of(value)
        if value_type is ValueType.STRING_ARRAY:
            value = list(value)
        logger.info(f"Setting {name} of {object_path} to {value!r}")
        self.call(service, object_path, PROPERTIES_INTERFACE, PROPERTIES_SET, "ssv",
                  interface, name, Variant(value_type, value))

    def append(self, service: str, object_path: str, interface: str, name: str, values: Sequence[str]) -> None:
        """Add values to array property.

        Raises:
            NothingToAddError: if all of the values are already present
        """
        array = self.get(service, object_path, interface, name, ValueType.STRING_ARRAY)
        new_values = [value for i, value in enumerate(values) if value not in array and value not in values[:i]]
        if not new_values:
            raise NothingToAddError(values)
        self.set(service, object_path, interface, name, array + new_values, ValueType.STRING_ARRAY)

    def remove(self, service: str, object_path: str, interface: str, name: str, values: Sequence[str]) -> None:
        """Remove values from array property.

        Raises:
            NothingToRemoveError: if none of the values is present
        """
        array = self.get(service, object_path, interface, name, ValueType.STRING_ARRAY)
        remaining = [value for value in array if value not in values]
        if len(remaining) == len(array):
            raise NothingToRemoveError(values)
        self.set(service, object_path, interface, name, remaining, ValueType.STRING_ARRAY)

    def get_managed_objects(self, service: str = NETWORK_SERVICE, root: str = OBJECT_ROOT) -> ManagedObjects:
        (objects,) = self.call(service, root, OBJMGR_INTERFACE, OBJMGR_GET)
        return objects

    def get_addresses(self, eth_object: str, objects: Optional[ManagedObjects] = None) -> List[IpRecord]:
        """Get IP addresses of the Ethernet object (physical interface or VLAN).

        Objects lacking the address or the prefix length are skipped.

        Args:
            objects: snapshot of managed objects to search, fetched from the bus if not given
        """
        if objects is None:
            objects = self.get_managed_objects()
        path_prefix = f"{eth_object}/ip"

        addresses = []
        for path, interfaces in sorted(objects.items()):
            if not path.startswith(path_prefix) or IP_INTERFACE not in interfaces:
                continue
            properties = interfaces[IP_INTERFACE]
            if IP_ADDRESS not in properties or IP_PREFIX not in properties:
                logger.warning(f"Skipping incomplete IP object {path}")
                continue
            addresses.append(IpRecord(
                object=path,
                address=properties[IP_ADDRESS],
                prefix=properties[IP_PREFIX],
                gateway=properties.get(IP_GATEWAY, ""),
            ))
        return addresses

    @staticmethod
    def eth_to_path(name: str) -> str:
        return f"{OBJECT_ROOT}/{name.replace('.', '_')}"
