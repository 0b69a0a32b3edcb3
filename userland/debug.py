"""Debug application: debug targets with breakpoints and watchpoints."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from userland.core import Application, UserlandCapabilities, _CapabilityFlags, register_application


class DebugCapabilities(_CapabilityFlags):
    """Debugging features a target supports."""

    BREAKPOINT = 1 << 0
    WATCHPOINT = 1 << 1
    SINGLE_STEP = 1 << 2
    CALL_STACK = 1 << 3
    VARIABLES = 1 << 4
    REGISTERS = 1 << 5
    MEMORY = 1 << 6
    THREAD = 1 << 7
    PROCESS = 1 << 8
    CORE_DUMP = 1 << 9
    PROFILE = 1 << 10
    TRACE = 1 << 11
    LOG = 1 << 12
    ASSERT = 1 << 13
    DIAGNOSTIC = 1 << 14
    REMOTE = 1 << 15


@dataclass
class DebugBreakpoint:
    """A breakpoint at an address."""

    id: int
    address: int
    breakpoint_type: str
    condition: Optional[str] = None
    hit_count: int = 0
    enabled: bool = True


@dataclass
class DebugWatchpoint:
    """A watchpoint over a memory range."""

    id: int
    address: int
    size: int
    watchpoint_type: str
    condition: Optional[str] = None
    hit_count: int = 0
    enabled: bool = True


@dataclass
class DebugTarget:
    """Something being debugged."""

    id: int
    name: str
    target_type: str
    state: str
    breakpoints: list[DebugBreakpoint] = field(default_factory=list)
    watchpoints: list[DebugWatchpoint] = field(default_factory=list)
    capabilities: DebugCapabilities = DebugCapabilities(0)


class DebugApplication(Application):
    """Application holding debug targets."""

    def __init__(self) -> None:
        super().__init__("debug", "0.1.0", UserlandCapabilities.all())
        self.debug_capabilities = DebugCapabilities.all()
        self._targets: list[DebugTarget] = []

    @property
    def targets(self) -> tuple[DebugTarget, ...]:
        """The targets, in the order they were added."""
        return tuple(self._targets)

    def add_target(self, target: DebugTarget) -> None:
        """Add a target."""
        self._targets.append(target)

    def remove_target(self, target_id: int) -> None:
        """Remove the first target with this id, if any."""
        for index, target in enumerate(self._targets):
            if target.id == target_id:
                del self._targets[index]
                return

    def get_target(self, target_id: int) -> Optional[DebugTarget]:
        """Return the first target with this id, or None."""
        return next((t for t in self._targets if t.id == target_id), None)

    def get_targets_by_type(self, target_type: str) -> list[DebugTarget]:
        """Return the targets of the given type."""
        return [t for t in self._targets if t.target_type == target_type]

    def get_targets_by_state(self, state: str) -> list[DebugTarget]:
        """Return the targets in the given state."""
        return [t for t in self._targets if t.state == state]


_application: Optional[DebugApplication] = None
_lock = threading.Lock()


def init() -> DebugApplication:
    """Create the debug application, store it and register it globally."""
    global _application
    application = DebugApplication()
    with _lock:
        _application = application
    register_application(application)
    return application


def get_application() -> Optional[DebugApplication]:
    """Return the debug application created by :func:`init`, if any."""
    with _lock:
        return _application