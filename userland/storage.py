"""Storage application: storage devices and their statistics."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from userland.core import Application, UserlandCapabilities, _CapabilityFlags, register_application


class StorageCapabilities(_CapabilityFlags):
    """Features a storage device supports."""

    READ = 1 << 0
    WRITE = 1 << 1
    TRIM = 1 << 2
    FLUSH = 1 << 3
    SECURE_ERASE = 1 << 4
    NCQ = 1 << 5
    SMART = 1 << 6
    POWER_MANAGEMENT = 1 << 7
    WRITE_CACHE = 1 << 8
    READ_CACHE = 1 << 9
    DMA = 1 << 10
    LBA48 = 1 << 11
    COMMAND_QUEUING = 1 << 12
    SATA = 1 << 13
    NVME = 1 << 14
    SCSI = 1 << 15


@dataclass
class StorageStatistics:
    """Counters kept for a storage device; all start at zero."""

    bytes_read: int = 0
    bytes_written: int = 0
    read_ops: int = 0
    write_ops: int = 0
    read_errors: int = 0
    write_errors: int = 0
    power_on_time: int = 0
    temperature: int = 0


@dataclass
class StorageDevice:
    """A storage device."""

    name: str
    model: str = ""
    serial: str = ""
    firmware: str = ""
    capacity: int = 0
    sector_size: int = 0
    capabilities: StorageCapabilities = StorageCapabilities(0)
    statistics: StorageStatistics = field(default_factory=StorageStatistics)


class StorageApplication(Application):
    """Application holding storage devices."""

    def __init__(self) -> None:
        super().__init__("storage", "0.1.0", UserlandCapabilities.all())
        self.storage_capabilities = StorageCapabilities.all()
        self._devices: list[StorageDevice] = []

    @property
    def devices(self) -> tuple[StorageDevice, ...]:
        """The devices, in the order they were added."""
        return tuple(self._devices)

    def add_device(self, device: StorageDevice) -> None:
        """Add a device."""
        self._devices.append(device)

    def remove_device(self, name: str) -> None:
        """Remove the first device with this name, if any."""
        for index, device in enumerate(self._devices):
            if device.name == name:
                del self._devices[index]
                return

    def get_device(self, name: str) -> Optional[StorageDevice]:
        """Return the first device with this name, or None."""
        return next((d for d in self._devices if d.name == name), None)

    def get_device_by_serial(self, serial: str) -> Optional[StorageDevice]:
        """Return the first device with this serial number, or None."""
        return next((d for d in self._devices if d.serial == serial), None)


_application: Optional[StorageApplication] = None
_lock = threading.Lock()


def init() -> StorageApplication:
    """Create the storage application, store it and register it globally."""
    global _application
    application = StorageApplication()
    with _lock:
        _application = application
    register_application(application)
    return application


def get_application() -> Optional[StorageApplication]:
    """Return the storage application created by :func:`init`, if any."""
    with _lock:
        return _application