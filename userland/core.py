"""Application registry and capability flags shared by all userland applications."""

from __future__ import annotations

import enum
import functools
import operator
import threading
from typing import Optional


class ApplicationError(Exception):
    """Raised when an application lifecycle operation fails."""


class ApplicationState(enum.Enum):
    """Lifecycle state of an application."""

    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class _CapabilityFlags(enum.IntFlag):
    """Base for capability bit sets; provides ``all()``."""

    @classmethod
    def all(cls):
        """Return the set holding every defined capability."""
        return functools.reduce(operator.or_, cls, cls(0))


class UserlandCapabilities(_CapabilityFlags):
    """Capabilities an application may support."""

    SHELL = 1 << 0
    AI = 1 << 1
    MONITOR = 1 << 2
    NETWORK = 1 << 3
    STORAGE = 1 << 4
    DEBUG = 1 << 5
    GRAPHICS = 1 << 6
    AUDIO = 1 << 7
    INPUT = 1 << 8
    OUTPUT = 1 << 9
    FILESYSTEM = 1 << 10
    PROCESS = 1 << 11
    MEMORY = 1 << 12
    DEVICE = 1 << 13
    SECURITY = 1 << 14
    SYSTEM = 1 << 15

    @classmethod
    def all(cls):
        """Return every capability (the low sixteen bits)."""
        return cls(0xFFFF)


class Application:
    """A userland application with a name, a version and a set of capabilities.

    Lifecycle methods always succeed and record the application's state;
    subclasses that can fail raise :class:`ApplicationError`.
    """

    def __init__(self, name: str, version: str, capabilities: UserlandCapabilities):
        self.name = name
        self.version = version
        self.capabilities = capabilities
        self.state = ApplicationState.STOPPED
        self.updates = 0
        self.configured = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, version={self.version!r})"

    def start(self) -> None:
        """Start the application."""
        self.state = ApplicationState.RUNNING

    def stop(self) -> None:
        """Stop the application."""
        self.state = ApplicationState.STOPPED

    def restart(self) -> None:
        """Stop the application, then start it again."""
        self.stop()
        self.start()

    def pause(self) -> None:
        """Pause the application."""
        self.state = ApplicationState.PAUSED

    def resume(self) -> None:
        """Resume a paused application."""
        self.state = ApplicationState.RUNNING

    def update(self) -> None:
        """Update the application, counting the update."""
        self.updates += 1

    def configure(self) -> None:
        """Configure the application."""
        self.configured = True

    def debug(self) -> dict:
        """Return a snapshot of the application's state for inspection."""
        return {
            "name": self.name,
            "version": self.version,
            "state": self.state,
            "updates": self.updates,
            "configured": self.configured,
        }


class ApplicationManager:
    """Keeps registered applications in registration order."""

    def __init__(self) -> None:
        self._applications: list[Application] = []

    def register(self, application: Application) -> None:
        """Add an application."""
        self._applications.append(application)

    def unregister(self, application: Application) -> None:
        """Remove the first registration of this very object, if present."""
        for index, registered in enumerate(self._applications):
            if registered is application:
                del self._applications[index]
                return

    def get_application(self, name: str) -> Optional[Application]:
        """Return the first application with the given name, or None."""
        return next((app for app in self._applications if app.name == name), None)

    def get_applications(self) -> list[Application]:
        """Return a copy of the registered applications."""
        return list(self._applications)


_MANAGER = ApplicationManager()
_LOCK = threading.Lock()


def register_application(application: Application) -> None:
    """Register an application with the global manager."""
    with _LOCK:
        _MANAGER.register(application)


def unregister_application(application: Application) -> None:
    """Remove an application from the global manager."""
    with _LOCK:
        _MANAGER.unregister(application)


def get_application(name: str) -> Optional[Application]:
    """Look up a globally registered application by name."""
    with _LOCK:
        return _MANAGER.get_application(name)


def get_applications() -> list[Application]:
    """Return all globally registered applications."""
    with _LOCK:
        return _MANAGER.get_applications()