"""Rich-based console output for plugin commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from plugman.plugins.models import UpdateStatus

if TYPE_CHECKING:
    from plugman.plugins.models import PluginRef, UpdateResult

console = Console(highlight=False)


def styled_header(title: str) -> None:
    console.print(f"=== {title}", style="bold")


def styled_list(items: list[str]) -> None:
    for item in items:
        console.print(item, markup=False)
    console.print()


def start_action(message: str) -> None:
    """Print ``MESSAGE... `` and leave the cursor on the line for the status."""
    console.print(f"{message}... ", end="", markup=False)


def end_action(status: str = "done", style: str | None = None) -> None:
    console.print(status, style=style, markup=False)


def error(message: str) -> None:
    console.print(f" !    {message}", style="red", markup=False)


def _format_installed_at(ref: PluginRef) -> str:
    if ref.installed_at is None:
        return ""
    return ref.installed_at.strftime("%Y-%m-%d %H:%M")


def format_plugin(ref: PluginRef, verbose: bool = False) -> str:
    if not verbose:
        return ref.name
    parts = [ref.name, ref.kind.value]
    if ref.source:
        parts.append(ref.source)
    if stamp := _format_installed_at(ref):
        parts.append(stamp)
    return "  ".join(parts)


def render_plugins(refs: list[PluginRef], verbose: bool = False) -> None:
    if not refs:
        console.print("You have no installed plugins.")
        return
    styled_header("Installed Plugins")
    styled_list([format_plugin(ref, verbose) for ref in refs])


def render_update_result(result: UpdateResult) -> None:
    if result.status is UpdateStatus.UPDATED:
        end_action("done")
    elif result.status is UpdateStatus.SKIPPED:
        end_action(result.message or "skipped symlink", style="dim")
    else:
        end_action("error", style="red")
        console.print(result.message, markup=False)
