"""Monitor application: monitored targets and the metrics collected for them."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from userland.core import Application, UserlandCapabilities, _CapabilityFlags, register_application


class MonitorCapabilities(_CapabilityFlags):
    """What a monitored target can report on."""

    PROCESS = 1 << 0
    THREAD = 1 << 1
    MEMORY = 1 << 2
    CPU = 1 << 3
    GPU = 1 << 4
    NPU = 1 << 5
    NETWORK = 1 << 6
    STORAGE = 1 << 7
    DEVICE = 1 << 8
    POWER = 1 << 9
    TEMPERATURE = 1 << 10
    FAN = 1 << 11
    VOLTAGE = 1 << 12
    CURRENT = 1 << 13
    FREQUENCY = 1 << 14
    PERFORMANCE = 1 << 15


@dataclass
class MonitorMetric:
    """A single measured value."""

    name: str
    metric_type: str
    value: float
    unit: str = ""
    description: str = ""
    timestamp: int = 0


@dataclass
class MonitorTarget:
    """Something being monitored."""

    name: str
    target_type: str
    description: str = ""
    metrics: list[MonitorMetric] = field(default_factory=list)
    capabilities: MonitorCapabilities = MonitorCapabilities(0)


class MonitorApplication(Application):
    """Application holding monitor targets."""

    def __init__(self) -> None:
        super().__init__("monitor", "0.1.0", UserlandCapabilities.all())
        self.monitor_capabilities = MonitorCapabilities.all()
        self._targets: list[MonitorTarget] = []

    @property
    def targets(self) -> tuple[MonitorTarget, ...]:
        """The targets, in the order they were added."""
        return tuple(self._targets)

    def add_target(self, target: MonitorTarget) -> None:
        """Add a target."""
        self._targets.append(target)

    def remove_target(self, name: str) -> None:
        """Remove the first target with this name, if any."""
        for index, target in enumerate(self._targets):
            if target.name == name:
                del self._targets[index]
                return

    def get_target(self, name: str) -> Optional[MonitorTarget]:
        """Return the first target with this name, or None."""
        return next((t for t in self._targets if t.name == name), None)

    def get_targets_by_type(self, target_type: str) -> list[MonitorTarget]:
        """Return the targets of the given type."""
        return [t for t in self._targets if t.target_type == target_type]

    def get_targets_by_capability(self, capability: MonitorCapabilities) -> list[MonitorTarget]:
        """Return the targets whose capabilities include all of ``capability``."""
        return [t for t in self._targets if capability in t.capabilities]


_application: Optional[MonitorApplication] = None
_lock = threading.Lock()


def init() -> MonitorApplication:
    """Create the monitor application, store it and register it globally."""
    global _application
    application = MonitorApplication()
    with _lock:
        _application = application
    register_application(application)
    return application


def get_application() -> Optional[MonitorApplication]:
    """Return the monitor application created by :func:`init`, if any."""
    with _lock:
        return _application