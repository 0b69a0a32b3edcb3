"""Start-up of every userland application."""

from __future__ import annotations

from userland import ai, debug, monitor, network, shell, storage
from userland.core import Application


def init() -> list[Application]:
    """Initialise shell, AI, monitor, network, storage and debug, in that order.

    Returns the applications created, in the same order.
    """
    return [
        shell.init(),
        ai.init(),
        monitor.init(),
        network.init(),
        storage.init(),
        debug.init(),
    ]