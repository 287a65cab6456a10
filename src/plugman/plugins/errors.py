"""Plugin errors raised by the lifecycle, the store and the transport."""

from __future__ import annotations


class PluginError(Exception):
    """Base class for every plugin-management failure shown to the user."""


class InvalidArgument(PluginError):
    """Wrong number or shape of command arguments."""


class InstallFailed(PluginError):
    """Fetching a plugin failed. The message is the underlying reason."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class PluginNotFound(PluginError):
    def __init__(self, name: str):
        super().__init__(f"Plugin {name} not found.")
        self.name = name


class SymlinkSkip(PluginError):
    """A symlinked plugin cannot be refreshed from a remote."""

    def __init__(self, name: str):
        super().__init__(f"Plugin {name} is a symlink and cannot be updated.")
        self.name = name


class TransportError(PluginError):
    """git (or the filesystem) failed while changing a plugin on disk."""
