"""Source resolution: plugin name and kind from a user-supplied locator."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidArgument
from .models import PluginKind
from .store import REGISTRY_FILE


def plugin_name(source: str) -> str:
    """Last path segment of *source* without a ``.git`` suffix.

    Handles URLs, filesystem paths and scp-style ``git@host:org/repo.git``.
    """
    tail = source.strip().rstrip("/\\")
    # scp form has no slash between host and path
    tail = tail.replace("\\", "/").rsplit("/", 1)[-1]
    tail = tail.rsplit(":", 1)[-1]
    if tail.endswith(".git"):
        tail = tail[: -len(".git")]
    return tail


def is_local_source(source: str) -> bool:
    try:
        return Path(source).expanduser().exists()
    except (OSError, ValueError):
        return False


def resolve(source: str) -> tuple[str, PluginKind]:
    if is_local_source(source):
        # "." or "../x" name the directory they point at
        name = plugin_name(os.path.abspath(Path(source).expanduser()))
        kind = PluginKind.SYMLINKED
    else:
        name = plugin_name(source)
        kind = PluginKind.REMOTE
    if not name or name in (".", ".."):
        raise InvalidArgument(f"cannot determine a plugin name from {source!r}")
    # hidden entries are staging dirs; the registry file owns its own slot
    if name.startswith(".") or name == REGISTRY_FILE:
        raise InvalidArgument(f"invalid plugin name {name!r}")
    return name, kind
