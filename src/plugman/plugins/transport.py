"""git-backed transport: clone, pull and remove plugin working trees."""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from .errors import PluginNotFound, SymlinkSkip, TransportError
from .models import PluginKind, PluginRef
from .resolver import resolve


class GitTransport:
    """Changes plugin bytes on disk under *plugins_dir*.

    Remote sources are shallow-cloned; local paths are symlinked so edits in
    the developer's tree take effect without reinstalling.
    """

    def __init__(self, plugins_dir: Path, timeout: float = 120):
        self.plugins_dir = plugins_dir
        self.timeout = timeout

    def _git(self, args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ["git", *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise TransportError("git command not found. Please install git.") from e
        except subprocess.TimeoutExpired as e:
            raise TransportError(f"git {args[0]} timed out after {self.timeout}s") from e

    def _clear_slot(self, dest: Path) -> None:
        if dest.is_symlink() or dest.is_file():
            dest.unlink()
        elif dest.is_dir():
            shutil.rmtree(dest)

    # ── operations ──────────────────────────────────────────────────

    def fetch(self, source: str) -> PluginRef:
        name, kind = resolve(source)
        dest = self.plugins_dir / name
        try:
            self.plugins_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TransportError(str(e)) from e

        if kind is PluginKind.SYMLINKED:
            target = os.path.abspath(Path(source).expanduser())
            try:
                self._clear_slot(dest)
                dest.symlink_to(target, target_is_directory=True)
            except OSError as e:
                raise TransportError(str(e)) from e
            return PluginRef(name=name, source=source, kind=kind, path=dest)

        # staging dir is hidden from PluginStore.list; a failed clone never touches dest
        staging = Path(tempfile.mkdtemp(prefix=f".{name}-", dir=self.plugins_dir))
        try:
            checkout = staging / name
            result = self._git(["clone", "--depth", "1", source, str(checkout)])
            if result.returncode != 0:
                raise TransportError((result.stderr or result.stdout).strip())
            try:
                self._clear_slot(dest)
                checkout.rename(dest)
            except OSError as e:
                raise TransportError(str(e)) from e
        finally:
            shutil.rmtree(staging, ignore_errors=True)

        return PluginRef(name=name, source=source, kind=kind, path=dest)

    def refresh(self, ref: PluginRef) -> None:
        path = ref.path or self.plugins_dir / ref.name
        if ref.is_symlinked or path.is_symlink():
            raise SymlinkSkip(ref.name)
        if not path.is_dir():
            raise PluginNotFound(ref.name)

        remote = self._git(["config", "--get", "remote.origin.url"], cwd=path)
        if not remote.stdout.strip():
            return
        result = self._git(["pull"], cwd=path)
        if result.returncode != 0:
            output = (result.stderr or result.stdout).strip()
            raise TransportError(f"Unable to update {ref.name}.\n{output}")

    def remove(self, ref: PluginRef) -> None:
        path = ref.path or self.plugins_dir / ref.name
        try:
            if path.is_symlink():
                # leave the linked working tree alone
                path.unlink()
            elif path.is_dir():
                shutil.rmtree(path)
            else:
                raise PluginNotFound(ref.name)
        except OSError as e:
            raise TransportError(str(e)) from e
