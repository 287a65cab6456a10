"""Plugin lifecycle: list, install, uninstall, update."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Sequence

from .errors import InstallFailed, InvalidArgument, PluginNotFound, SymlinkSkip
from .models import PluginRef, UpdateResult, UpdateStatus, utcnow
from .resolver import resolve

if TYPE_CHECKING:
    from plugman.core.config import Config
    from plugman.core.usage import UsageReporter

    from .store import PluginStore
    from .transport import GitTransport


def _noop(_):
    return None


def _one_argument(args: Sequence[str], usage: str) -> str:
    if len(args) != 1 or not args[0].strip():
        raise InvalidArgument(f"usage: {usage}")
    return args[0].strip()


class PluginLifecycle:
    """Sequences store, transport and usage reporting for each plugin command.

    ``install`` and ``uninstall`` raise the first fatal error. ``update``
    collects one UpdateResult per target and never raises once its
    arguments are valid.
    """

    def __init__(
        self,
        store: PluginStore,
        transport: GitTransport,
        reporter: UsageReporter,
        activate: Callable[[PluginRef], object] = _noop,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.transport = transport
        self.reporter = reporter
        self.activate = activate
        self.clock = clock

    @classmethod
    def from_config(cls, config: Config) -> PluginLifecycle:
        from plugman.core.usage import UsageReporter

        from .loader import activate_plugin
        from .store import PluginStore
        from .transport import GitTransport

        reporter = UsageReporter(
            host=config.host,
            user_agent=config.user_agent,
            timeout=config.telemetry_timeout,
            background=config.telemetry_background,
        )
        return cls(
            store=PluginStore(config.plugins_dir),
            transport=GitTransport(config.plugins_dir, timeout=config.git_timeout),
            reporter=reporter,
            activate=activate_plugin,
        )

    # ── commands ────────────────────────────────────────────────────

    def list_plugins(self, args: Sequence[str] = ()) -> list[PluginRef]:
        if args:
            raise InvalidArgument(f"unexpected arguments: {' '.join(args)}")
        return self.store.list()

    def install(
        self,
        args: Sequence[str],
        on_start: Callable[[str], object] = _noop,
    ) -> PluginRef:
        source = _one_argument(args, "plugins:install SOURCE")
        name, kind = resolve(source)
        on_start(name)

        self.reporter.report("install", name)
        try:
            ref = self.transport.fetch(source)
        except Exception as e:
            raise InstallFailed(str(e)) from e

        ref.kind = kind
        ref.installed_at = self.clock()
        self.store.save(ref)
        self.activate(ref)
        return ref

    def uninstall(
        self,
        args: Sequence[str],
        on_start: Callable[[str], object] = _noop,
    ) -> PluginRef:
        name = _one_argument(args, "plugins:uninstall NAME")
        on_start(name)

        self.reporter.report("uninstall", name)
        ref = self.store.get(name)
        if ref is None:
            # the directory is gone; drop any registry entry left behind
            self.store.delete(name)
            raise PluginNotFound(name)
        self.transport.remove(ref)
        self.store.delete(name)
        return ref

    def update(
        self,
        args: Sequence[str] = (),
        on_start: Callable[[str], object] = _noop,
        on_result: Callable[[UpdateResult], object] = _noop,
    ) -> list[UpdateResult]:
        if len(args) > 1:
            raise InvalidArgument("usage: plugins:update [NAME]")
        if args:
            targets = [args[0].strip()]
        else:
            targets = [ref.name for ref in self.store.list()]

        results = []
        for name in targets:
            on_start(name)
            result = self._update_one(name)
            on_result(result)
            results.append(result)
        return results

    def _update_one(self, name: str) -> UpdateResult:
        self.reporter.report("update", name)
        ref = self.store.get(name)
        if ref is None:
            return UpdateResult(name, UpdateStatus.ERROR, str(PluginNotFound(name)))
        if ref.is_symlinked:
            return UpdateResult(name, UpdateStatus.SKIPPED, "skipped symlink")
        try:
            self.transport.refresh(ref)
            ref.installed_at = self.clock()
            self.store.save(ref)
        except SymlinkSkip:
            # linked by hand, registry says remote
            return UpdateResult(name, UpdateStatus.SKIPPED, "skipped symlink")
        except Exception as e:
            return UpdateResult(name, UpdateStatus.ERROR, str(e) or type(e).__name__)
        return UpdateResult(name, UpdateStatus.UPDATED)
