"""Plugins: installed-plugin store, git transport, lifecycle management."""

from .errors import (
    InstallFailed,
    InvalidArgument,
    PluginError,
    PluginNotFound,
    SymlinkSkip,
    TransportError,
)
from .lifecycle import PluginLifecycle
from .loader import activate_plugin, load_plugins
from .models import PluginKind, PluginRef, UpdateResult, UpdateStatus
from .resolver import is_local_source, plugin_name, resolve
from .store import PluginStore
from .transport import GitTransport

__all__ = [
    "GitTransport",
    "InstallFailed",
    "InvalidArgument",
    "PluginError",
    "PluginKind",
    "PluginLifecycle",
    "PluginNotFound",
    "PluginRef",
    "PluginStore",
    "SymlinkSkip",
    "TransportError",
    "UpdateResult",
    "UpdateStatus",
    "activate_plugin",
    "is_local_source",
    "load_plugins",
    "plugin_name",
    "resolve",
]
