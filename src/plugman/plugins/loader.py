"""Plugin loader: activate_plugin, load_plugins."""

from __future__ import annotations

import importlib.util
import re
import sys
from types import ModuleType
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from .models import PluginRef
    from .store import PluginStore

console = Console()

ENTRY_FILE = "init.py"


def _module_name(plugin_name: str) -> str:
    return "plugman_plugin_" + re.sub(r"\W", "_", plugin_name)


def activate_plugin(ref: PluginRef) -> ModuleType | None:
    """Import the plugin's init.py so it is usable without restarting the host.

    A plugin that fails to import is reported and left installed.
    """
    if ref.path is None:
        return None
    entry = ref.path / ENTRY_FILE
    if not entry.is_file():
        return None

    name = _module_name(ref.name)
    try:
        spec = importlib.util.spec_from_file_location(name, entry)
        if spec is None or spec.loader is None:
            raise ImportError(f"cannot load {entry}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(name, None)
        console.print(f"Unable to load plugin {ref.name}: {e}", style="yellow", markup=False)
        return None
    return module


def load_plugins(store: PluginStore) -> list[ModuleType]:
    modules = []
    for ref in store.list():
        module = activate_plugin(ref)
        if module is not None:
            modules.append(module)
    return modules
