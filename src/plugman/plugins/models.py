"""Plugin data models: PluginKind, PluginRef, UpdateStatus, UpdateResult."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path


class PluginKind(str, Enum):
    """How a plugin got into the plugins directory."""

    REMOTE = "remote"  # cloned copy
    SYMLINKED = "symlinked"  # link to a local working tree


@dataclass
class PluginRef:
    """Identity and install metadata of one installed plugin."""

    name: str
    source: str = ""
    kind: PluginKind = PluginKind.REMOTE
    installed_at: datetime | None = None
    path: Path | None = None

    @property
    def is_symlinked(self) -> bool:
        return self.kind is PluginKind.SYMLINKED

    def to_record(self) -> dict:
        return {
            "source": self.source,
            "kind": self.kind.value,
            "installed_at": self.installed_at.isoformat() if self.installed_at else None,
        }

    @classmethod
    def from_record(cls, name: str, data: dict, path: Path | None = None) -> PluginRef:
        raw_kind = data.get("kind", PluginKind.REMOTE.value)
        try:
            kind = PluginKind(raw_kind)
        except ValueError:
            kind = PluginKind.REMOTE
        installed_at = None
        if stamp := data.get("installed_at"):
            try:
                installed_at = datetime.fromisoformat(stamp)
            except (TypeError, ValueError):
                installed_at = None
        return cls(
            name=name,
            source=data.get("source", "") or "",
            kind=kind,
            installed_at=installed_at,
            path=path,
        )


class UpdateStatus(str, Enum):
    UPDATED = "updated"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class UpdateResult:
    """Outcome of updating a single plugin."""

    name: str
    status: UpdateStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not UpdateStatus.ERROR


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
