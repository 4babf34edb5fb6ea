"""Command-line interface for inspecting components."""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from component_class.component import Component

app = typer.Typer(
    name="component-class",
    help="Inspect component features and dependencies.",
    no_args_is_help=True,
)

console = Console()


def _load_component_class(target: str) -> type["Component"]:
    """Import ``module:ClassName`` and check it is a Component subclass."""
    from component_class.component import Component

    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        msg = f"Target must look like 'package.module:ClassName', got: {target!r}"
        raise ValueError(msg)

    module = importlib.import_module(module_name)
    cls = getattr(module, class_name, None)
    if not isinstance(cls, type) or not issubclass(cls, Component):
        msg = f"{target} is not a Component subclass"
        raise ValueError(msg)
    return cls


@app.command()
def inspect(
    target: Annotated[
        str,
        typer.Argument(help="Component class as 'package.module:ClassName'."),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration YAML with feature values to apply.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Component name in the config file (defaults to the kebab-case class name).",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level for component events (overrides the config file).",
        ),
    ] = None,
) -> None:
    """Construct a component with a stub manager and list its features."""
    from component_class.component import Component
    from component_class.config import apply_component_config, load_config
    from component_class.exceptions import ComponentError
    from component_class.features import kebab_case
    from component_class.testing import StubComponentManager
    from component_class.utils.logging import configure_from_settings, configure_logging

    configure_logging(level=log_level or "WARNING")

    try:
        cls = _load_component_class(target)
    except (ImportError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    try:
        component: Component = cls(StubComponentManager())
        if config is not None:
            settings = load_config(config)
            if log_level is None:
                configure_from_settings(settings.logging)
            component_name = name or kebab_case(cls.__name__)
            console.print(f"[blue]Applying '{component_name}' from {config}[/blue]")
            apply_component_config(component, settings.get(component_name))
    except (ComponentError, KeyError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[dim]{cls.__module__}.{cls.__name__} "
        f"(component-class {component.version})[/dim]"
    )

    features_table = Table(title="Features")
    features_table.add_column("#", style="dim")
    features_table.add_column("Feature", style="cyan")
    features_table.add_column("Handler", style="green")
    for i, feature in enumerate(component.features(), start=1):
        handler_name = getattr(feature.handler, "__qualname__", repr(feature.handler))
        features_table.add_row(str(i), feature.name, handler_name)
    console.print(features_table)

    deps_table = Table(title="Dependencies")
    deps_table.add_column("Kind", style="cyan")
    deps_table.add_column("Target", style="green")
    for dependency in component.dependencies():
        for kind, value in dependency.as_dict().items():
            deps_table.add_row(kind, value)
    console.print(deps_table)

    values = component.values()
    if values:
        values_table = Table(title="Values")
        values_table.add_column("Key", style="cyan")
        values_table.add_column("Value", style="green")
        for key, value in values.items():
            values_table.add_row(key, repr(value))
        console.print(values_table)


@app.command()
def version() -> None:
    """Show version information."""
    from component_class import __version__

    console.print(f"component-class version {__version__}")


if __name__ == "__main__":
    app()
