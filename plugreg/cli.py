"""plugreg CLI — search Git registries for Terminus plugins and manage them."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from plugreg import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log network requests and file writes")
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for each registry host (default: no limit)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, timeout: float | None):
    """plugreg — find Terminus plugins.

    Plugins are looked up live in the Git registries listed in
    registries.yml under the Terminus plugins directory
    (TERMINUS_PLUGINS_DIR, default ~/terminus/plugins).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["timeout"] = timeout


# ── Search ───────────────────────────────────────────────────────────


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def search(ctx: click.Context, names: tuple):
    """Search for plugins in well-known or custom registries.

    NAMES are one or more partial or complete plugin names.
    """
    from plugreg.registry.store import RegistryStore
    from plugreg.search.engine import PluginSearch

    engine = PluginSearch(RegistryStore(), timeout=ctx.obj.get("timeout"))
    result = _apply(engine.search, list(names))

    for registry in result.skipped:
        console.print(
            f"[yellow]Skipped {escape(registry)}: host not supported for listing.[/]",
            soft_wrap=True,
        )

    if result.registries_searched == 0:
        console.print("[red]No plugin registries exist.[/]")
        return

    if not result.plugins:
        console.print("No plugins were found.")
        return

    console.print("The following plugins were found:")
    table = Table()
    table.add_column("Location", style="cyan")
    table.add_column("Description")
    for candidate in result.candidates():
        table.add_row(candidate.location, candidate.description)
    console.print(table)
    console.print(f"{result.summary()}  Use 'terminus plugin install' to add plugins.")


main.add_command(search, name="find")


# ── Registry ─────────────────────────────────────────────────────────


@main.group()
def registry():
    """Manage the plugin registries that search looks in."""


main.add_command(registry, name="reg")


@registry.command()
@click.argument("urls", nargs=-1, required=True)
def add(urls: tuple):
    """Add one or more registry URLs, e.g. https://github.com/my-org."""
    from plugreg.errors import InvalidRegistryURL
    from plugreg.registry.models import RegistryChange
    from plugreg.registry.store import RegistryStore

    store = RegistryStore()
    for url in urls:
        try:
            change = _apply(store.add, url)
        except InvalidRegistryURL as e:
            raise click.UsageError(str(e))

        if change is RegistryChange.ADDED:
            console.print("[green]Plugin registry was added successfully.[/]")
        elif change is RegistryChange.ALREADY_ADDED:
            console.print(f"[red]Registry {escape(url)} already added.[/]", soft_wrap=True)
        elif change is RegistryChange.ROOT_PATH:
            console.print(
                f"[red]Registry {escape(url)} has no organization path and was not added.[/]",
                soft_wrap=True,
            )


@registry.command(name="list")
def list_registries():
    """List the configured registries."""
    from plugreg.registry.store import RegistryStore

    store = RegistryStore()
    registries = _apply(store.list_registries)
    if not registries:
        console.print("[red]No plugin registries exist.[/]")
        return

    console.print(f"Plugin registries are stored in {escape(str(store.path))}.", soft_wrap=True)
    console.print("The following plugin registries are available:")
    for url in registries:
        console.print(f"  [cyan]{escape(url)}[/]", soft_wrap=True)
    console.print("The 'plugreg search' command will only search in these registries.")


@registry.command()
@click.argument("urls", nargs=-1, required=True)
def remove(urls: tuple):
    """Remove one or more registry URLs."""
    from plugreg.registry.models import RegistryChange
    from plugreg.registry.store import RegistryStore

    store = RegistryStore()
    for url in urls:
        change = _apply(store.remove, url)
        if change is RegistryChange.REMOVED:
            console.print("[green]Plugin registry was removed successfully.[/]")
        else:
            console.print(f"[red]Registry {escape(url)} does not exist.[/]", soft_wrap=True)


def _apply(operation, *args):
    """Run a store operation, turning file failures into command failures."""
    from plugreg.errors import RegistryConfigError, RegistrySaveError

    try:
        return operation(*args)
    except (RegistryConfigError, RegistrySaveError) as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
