"""Installed-plugin registry: the plugins directory plus plugins.json metadata."""

from __future__ import annotations

import json
from pathlib import Path

from .models import PluginKind, PluginRef

REGISTRY_FILE = "plugins.json"


class PluginStore:
    """Enumerates installed plugins and persists their install metadata.

    A plugin is installed when ``plugins_dir/<name>`` exists (a directory or a
    symlink). ``plugins.json`` only adds source, kind and install time.
    """

    def __init__(self, plugins_dir: Path):
        self.plugins_dir = plugins_dir

    @property
    def registry_path(self) -> Path:
        return self.plugins_dir / REGISTRY_FILE

    def path_for(self, name: str) -> Path:
        return self.plugins_dir / name

    # ── registry file ───────────────────────────────────────────────

    def _load_registry(self) -> dict:
        path = self.registry_path
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError):
            return {}
        plugins = data.get("plugins", {}) if isinstance(data, dict) else {}
        return plugins if isinstance(plugins, dict) else {}

    def _save_registry(self, plugins: dict) -> None:
        path = self.registry_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"plugins": plugins}, indent=2, sort_keys=True) + "\n")

    # ── queries ─────────────────────────────────────────────────────

    def _is_installed(self, path: Path) -> bool:
        return path.is_symlink() or path.is_dir()

    def _ref(self, name: str, registry: dict) -> PluginRef:
        path = self.path_for(name)
        info = registry.get(name)
        if isinstance(info, dict):
            return PluginRef.from_record(name, info, path=path)
        # dropped in by hand, no metadata
        kind = PluginKind.SYMLINKED if path.is_symlink() else PluginKind.REMOTE
        return PluginRef(name=name, kind=kind, path=path)

    def list(self) -> list[PluginRef]:
        if not self.plugins_dir.is_dir():
            return []
        registry = self._load_registry()
        refs = []
        for entry in sorted(self.plugins_dir.iterdir(), key=lambda p: p.name):
            if entry.name.startswith(".") or not self._is_installed(entry):
                continue
            refs.append(self._ref(entry.name, registry))
        return refs

    def get(self, name: str) -> PluginRef | None:
        if not name or name.startswith(".") or "/" in name or "\\" in name:
            return None
        if not self._is_installed(self.path_for(name)):
            return None
        return self._ref(name, self._load_registry())

    # ── mutations ───────────────────────────────────────────────────

    def save(self, ref: PluginRef) -> None:
        registry = self._load_registry()
        registry[ref.name] = ref.to_record()
        self._save_registry(registry)
        ref.path = self.path_for(ref.name)

    def delete(self, name: str) -> None:
        registry = self._load_registry()
        if registry.pop(name, None) is not None:
            self._save_registry(registry)
