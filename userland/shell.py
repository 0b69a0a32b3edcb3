"""Shell application: the catalogue of shell commands."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from userland.core import Application, UserlandCapabilities, _CapabilityFlags, register_application


class ShellCapabilities(_CapabilityFlags):
    """Shell features a command relies on or a shell supports."""

    EXECUTE = 1 << 0
    HISTORY = 1 << 1
    COMPLETION = 1 << 2
    ALIASES = 1 << 3
    SCRIPTING = 1 << 4
    PIPES = 1 << 5
    REDIRECTION = 1 << 6
    SUBSTITUTION = 1 << 7
    VARIABLES = 1 << 8
    FUNCTIONS = 1 << 9
    LOOPS = 1 << 10
    CONDITIONS = 1 << 11
    ARITHMETIC = 1 << 12
    ARRAYS = 1 << 13
    ASSOCIATIVE = 1 << 14
    DEBUG = 1 << 15


@dataclass
class ShellCommand:
    """A command known to the shell."""

    name: str
    description: str = ""
    usage: str = ""
    examples: list[str] = field(default_factory=list)
    capabilities: ShellCapabilities = ShellCapabilities(0)


class ShellApplication(Application):
    """Application holding shell commands."""

    def __init__(self) -> None:
        super().__init__("shell", "0.1.0", UserlandCapabilities.all())
        self.shell_capabilities = ShellCapabilities.all()
        self._commands: list[ShellCommand] = []

    @property
    def commands(self) -> tuple[ShellCommand, ...]:
        """The commands, in the order they were added."""
        return tuple(self._commands)

    def add_command(self, command: ShellCommand) -> None:
        """Add a command."""
        self._commands.append(command)

    def remove_command(self, name: str) -> None:
        """Remove the first command with this name, if any."""
        for index, command in enumerate(self._commands):
            if command.name == name:
                del self._commands[index]
                return

    def get_command(self, name: str) -> Optional[ShellCommand]:
        """Return the first command with this name, or None."""
        return next((c for c in self._commands if c.name == name), None)

    def get_commands_by_capability(self, capability: ShellCapabilities) -> list[ShellCommand]:
        """Return the commands whose capabilities include all of ``capability``."""
        return [c for c in self._commands if capability in c.capabilities]


_application: Optional[ShellApplication] = None
_lock = threading.Lock()


def init() -> ShellApplication:
    """Create the shell application, store it and register it globally."""
    global _application
    application = ShellApplication()
    with _lock:
        _application = application
    register_application(application)
    return application


def get_application() -> Optional[ShellApplication]:
    """Return the shell application created by :func:`init`, if any."""
    with _lock:
        return _application