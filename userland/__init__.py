"""User-space applications with capability flags, catalogues and a registry that tracks them."""

__version__ = "0.1.0"
__all__ = ["core", "ai", "debug", "monitor", "network", "shell", "storage", "system"]