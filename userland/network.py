"""Network application: network interfaces and their addresses."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from userland.core import Application, UserlandCapabilities, _CapabilityFlags, register_application


class NetworkCapabilities(_CapabilityFlags):
    """Networking features an interface supports."""

    IPV4 = 1 << 0
    IPV6 = 1 << 1
    TCP = 1 << 2
    UDP = 1 << 3
    ICMP = 1 << 4
    RAW = 1 << 5
    PACKET = 1 << 6
    MULTICAST = 1 << 7
    BROADCAST = 1 << 8
    PROMISCUOUS = 1 << 9
    VLAN = 1 << 10
    BRIDGE = 1 << 11
    ROUTE = 1 << 12
    FIREWALL = 1 << 13
    NAT = 1 << 14
    QOS = 1 << 15


def _fixed_bytes(value, length: int, what: str) -> bytes:
    data = bytes(value)
    if len(data) != length:
        raise ValueError(f"{what} must be {length} bytes, got {len(data)}")
    return data


@dataclass
class Ipv4Address:
    """An IPv4 address with its netmask and broadcast address, four bytes each."""

    address: bytes
    netmask: bytes
    broadcast: bytes

    def __post_init__(self) -> None:
        self.address = _fixed_bytes(self.address, 4, "address")
        self.netmask = _fixed_bytes(self.netmask, 4, "netmask")
        self.broadcast = _fixed_bytes(self.broadcast, 4, "broadcast")


@dataclass
class Ipv6Address:
    """An IPv6 address (sixteen bytes) with its prefix length."""

    address: bytes
    prefix_len: int

    def __post_init__(self) -> None:
        self.address = _fixed_bytes(self.address, 16, "address")
        if not 0 <= self.prefix_len <= 0xFF:
            raise ValueError(f"prefix length out of range: {self.prefix_len}")


@dataclass
class NetworkInterface:
    """A network interface."""

    name: str
    index: int
    if_type: str
    flags: int = 0
    mtu: int = 0
    mac: bytes = bytes(6)
    ipv4: list[Ipv4Address] = field(default_factory=list)
    ipv6: list[Ipv6Address] = field(default_factory=list)
    capabilities: NetworkCapabilities = NetworkCapabilities(0)

    def __post_init__(self) -> None:
        self.mac = _fixed_bytes(self.mac, 6, "MAC address")


class NetworkApplication(Application):
    """Application holding network interfaces."""

    def __init__(self) -> None:
        super().__init__("network", "0.1.0", UserlandCapabilities.all())
        self.net_capabilities = NetworkCapabilities.all()
        self._interfaces: list[NetworkInterface] = []

    @property
    def interfaces(self) -> tuple[NetworkInterface, ...]:
        """The interfaces, in the order they were added."""
        return tuple(self._interfaces)

    def add_interface(self, interface: NetworkInterface) -> None:
        """Add an interface."""
        self._interfaces.append(interface)

    def remove_interface(self, name: str) -> None:
        """Remove the first interface with this name, if any."""
        for position, interface in enumerate(self._interfaces):
            if interface.name == name:
                del self._interfaces[position]
                return

    def get_interface(self, name: str) -> Optional[NetworkInterface]:
        """Return the first interface with this name, or None."""
        return next((i for i in self._interfaces if i.name == name), None)

    def get_interface_by_index(self, index: int) -> Optional[NetworkInterface]:
        """Return the first interface with this index, or None."""
        return next((i for i in self._interfaces if i.index == index), None)


_application: Optional[NetworkApplication] = None
_lock = threading.Lock()


def init() -> NetworkApplication:
    """Create the network application, store it and register it globally."""
    global _application
    application = NetworkApplication()
    with _lock:
        _application = application
    register_application(application)
    return application


def get_application() -> Optional[NetworkApplication]:
    """Return the network application created by :func:`init`, if any."""
    with _lock:
        return _application