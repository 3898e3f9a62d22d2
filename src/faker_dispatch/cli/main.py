"""Main CLI entry point for faker-dispatch.

Browse the function catalog and invoke generator functions from the
command line.
"""

from pathlib import Path
from typing import Any
import json
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from faker_dispatch import __version__
from faker_dispatch.engine.catalog_export import catalog_json, export_catalog, signature
from faker_dispatch.engine.faker_engine import FakerEngine
from faker_dispatch.engine.validation_engine import ValidationEngine, ValidationResult
from faker_dispatch.registry.ingestion import ZEN
from faker_dispatch.registry.registry import get_registry
from faker_dispatch.settings.loader import load_settings
from faker_dispatch.utils.logging import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="faker-dispatch")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="YAML settings file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """faker-dispatch - Generate random data by function name.

    Functions are grouped in categories; the "zen" category lists them all.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    try:
        ctx.obj["settings"] = load_settings(config_path)
    except Exception as e:
        console.print(f"[red]Error loading settings: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
def categories() -> None:
    """List function categories."""
    registry = get_registry()

    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Functions", justify="right")

    for name in registry.category_names():
        table.add_row(name, str(len(registry.by_category[name])))

    console.print(table)


@cli.command()
@click.argument("category", default=ZEN)
def functions(category: str) -> None:
    """List the functions of a category.

    CATEGORY defaults to "zen", which holds every function.
    """
    registry = get_registry()
    funcs = registry.lookup_category(category)
    if funcs is None:
        console.print(f"[red]Unknown category: {escape(category)}[/red]")
        sys.exit(1)

    table = Table(title=f"Functions in '{category}'")
    table.add_column("Signature", style="cyan")
    table.add_column("Description")

    for name in sorted(funcs):
        descriptor = funcs[name]
        description = descriptor.description
        if len(description) > 60:
            description = description[:60] + "..."
        table.add_row(escape(signature(descriptor)), escape(description or "-"))

    console.print(table)


@cli.command()
@click.argument("name")
def describe(name: str) -> None:
    """Show documentation for one function.

    NAME is the public function name, e.g. creditCardNumber.
    """
    descriptor = get_registry().lookup_by_name(name)
    if descriptor is None:
        console.print(f"[red]Unknown function: {escape(name)}[/red]")
        sys.exit(1)

    console.print(Panel.fit(
        f"[cyan]Signature:[/cyan] {escape(signature(descriptor))}\n"
        f"[cyan]Category:[/cyan] {escape(descriptor.category)}\n"
        f"[cyan]Description:[/cyan] {escape(descriptor.description or '-')}\n"
        f"[cyan]Example:[/cyan] {escape(descriptor.example or '-')}",
        title=escape(descriptor.display or descriptor.name),
    ))

    if descriptor.params:
        table = Table(title="Parameters")
        table.add_column("Field", style="cyan")
        table.add_column("Type")
        table.add_column("Default")
        table.add_column("Required")
        table.add_column("Description")

        for param in descriptor.params:
            table.add_row(
                escape(param.field),
                escape(param.type.value),
                escape(param.default or "-"),
                "[red]Yes[/red]" if param.required else "No",
                escape(param.description or "-"),
            )

        console.print(table)


@cli.command()
@click.argument("name")
@click.argument("args", nargs=-1)
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of values to generate")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
@click.pass_context
def call(
    ctx: click.Context,
    name: str,
    args: tuple[str, ...],
    seed: int | None,
    count: int,
    pretty: bool,
) -> None:
    """Invoke a function and print the result as JSON.

    NAME is the public function name. Each of ARGS is read as a YAML value,
    so "[a, b]" passes a list and "~" leaves a parameter at its default.

    \b
    Examples:
      faker-dispatch call firstName --seed 11
      faker-dispatch call intRange 1 6 -n 5
      faker-dispatch call creditCardNumber "[visa16]" "~" true
    """
    verbose = ctx.obj.get("verbose", False)
    settings = ctx.obj["settings"]

    try:
        values = [_parse_arg(a) for a in args]
        engine = FakerEngine(
            seed=seed if seed is not None else settings.seed,
            locale=settings.locale,
        )

        results = [engine.call(name, values) for _ in range(count)]
        output: Any = results[0] if count == 1 else results
        click.echo(json.dumps(output, indent=2 if pretty else None, default=str, ensure_ascii=False))

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback
            console.print(escape(traceback.format_exc()))
        sys.exit(1)


@cli.command()
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
def export(output: str | None, pretty: bool) -> None:
    """Export the function catalog as JSON."""
    registry = get_registry()
    json_output = catalog_json(registry, indent=2 if pretty else None)

    if output:
        Path(output).write_text(json_output, encoding="utf-8")
        console.print(f"[green]Wrote {len(registry)} functions to {escape(output)}[/green]")
    else:
        click.echo(json_output)


@cli.command()
def validate() -> None:
    """Validate the registry and its exported catalog."""
    registry = get_registry()
    validation_engine = ValidationEngine()

    registry_result = validation_engine.validate_registry(registry)
    catalog_result = validation_engine.validate_catalog(export_catalog(registry))

    _print_validation_result("registry", registry_result)
    _print_validation_result("catalog", catalog_result)

    if not (registry_result.valid and catalog_result.valid):
        sys.exit(1)


def _parse_arg(text: str) -> Any:
    """Read a command line argument as a YAML value."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return text


def _print_validation_result(name: str, result: ValidationResult) -> None:
    """Print validation results."""
    status = "[green]VALID[/green]" if result.valid else "[red]INVALID[/red]"
    console.print(f"\n{name}: {status} ({result.validated_count} checked)")

    if result.issues:
        for issue in result.issues:
            color = {
                "error": "red",
                "warning": "yellow",
                "info": "blue",
            }.get(issue.severity.value, "white")

            console.print(f"  [{color}]{issue.severity.value.upper()}[/{color}]: {escape(issue.message)}")
            if issue.path:
                console.print(f"    Path: {escape(issue.path)}")


if __name__ == "__main__":
    cli()
