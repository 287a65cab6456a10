"""CLI entry point: plugins, plugins:install, plugins:uninstall, plugins:update."""

from __future__ import annotations

import click

from .core.config import VERSION, load_config
from .plugins import InvalidArgument, PluginError, PluginLifecycle
from .tui import (
    console,
    end_action,
    error,
    render_plugins,
    render_update_result,
    start_action,
)


def _lifecycle(ctx: click.Context) -> PluginLifecycle:
    config = ctx.obj["config"]
    return PluginLifecycle.from_config(config)


@click.group()
@click.version_option(VERSION, prog_name="plugman")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """plugman: manage plugins for the host CLI."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(verbose=verbose)


# ── Plugin commands ─────────────────────────────────────────────────


@cli.command("plugins")
@click.argument("args", nargs=-1)
@click.pass_context
def plugins_list(ctx: click.Context, args: tuple[str, ...]):
    """List installed plugins.

    \b
    $ plugman plugins
    === Installed Plugins
    watchtower
    """
    config = ctx.obj["config"]
    try:
        refs = _lifecycle(ctx).list_plugins(args)
    except InvalidArgument as e:
        raise click.UsageError(str(e), ctx) from e
    render_plugins(refs, verbose=config.verbose)


@cli.command("plugins:install")
@click.argument("args", nargs=-1)
@click.pass_context
def plugins_install(ctx: click.Context, args: tuple[str, ...]):
    """Install a plugin from a git URL or a local directory.

    \b
    $ plugman plugins:install https://github.com/org/watchtower.git
    Installing watchtower... done
    """
    config = ctx.obj["config"]
    lifecycle = _lifecycle(ctx)
    if config.verbose:
        console.print(f"usage endpoint: {lifecycle.reporter.base_url}", style="dim")
    try:
        ref = lifecycle.install(args, on_start=lambda name: start_action(f"Installing {name}"))
    except InvalidArgument as e:
        raise click.UsageError(str(e), ctx) from e
    except PluginError as e:
        end_action("failed", style="red")
        error(str(e))
        ctx.exit(1)
    end_action("done")
    if config.verbose:
        console.print(f"{ref.name} ({ref.kind.value}) -> {ref.path}", style="dim")


@cli.command("plugins:uninstall")
@click.argument("args", nargs=-1)
@click.pass_context
def plugins_uninstall(ctx: click.Context, args: tuple[str, ...]):
    """Uninstall a plugin.

    \b
    $ plugman plugins:uninstall watchtower
    Uninstalling watchtower... done
    """
    try:
        _lifecycle(ctx).uninstall(args, on_start=lambda name: start_action(f"Uninstalling {name}"))
    except InvalidArgument as e:
        raise click.UsageError(str(e), ctx) from e
    except PluginError as e:
        end_action("failed", style="red")
        error(str(e))
        ctx.exit(1)
    end_action("done")


@cli.command("plugins:update")
@click.argument("args", nargs=-1)
@click.pass_context
def plugins_update(ctx: click.Context, args: tuple[str, ...]):
    """Update all plugins, or a single plugin by name.

    \b
    $ plugman plugins:update
    Updating watchtower... done
    """
    try:
        _lifecycle(ctx).update(
            args,
            on_start=lambda name: start_action(f"Updating {name}"),
            on_result=render_update_result,
        )
    except InvalidArgument as e:
        raise click.UsageError(str(e), ctx) from e


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
