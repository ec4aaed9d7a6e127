from __future__ import annotations

import json
from typing import Any

import click

from ...catalog.endpoint_catalog import (
    EndpointCatalogData,
    EndpointDefinition,
    verify_catalog,
)
from ...catalog.registry import configured_catalogs


def _load_catalogs(ctx_obj: Any) -> list[tuple[str, EndpointCatalogData]]:
    try:
        return configured_catalogs(ctx_obj.config)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _iter_definitions(ctx_obj: Any, scheme: str | None = None) -> list[EndpointDefinition]:
    # Later catalogs override earlier ones, matching registry precedence
    by_scheme: dict[str, EndpointDefinition] = {}
    for _, data in _load_catalogs(ctx_obj):
        for definition in data.endpoints:
            by_scheme[definition.scheme] = definition

    items = list(by_scheme.values())
    if scheme is not None:
        needle = scheme.lower()
        items = [d for d in items if needle in d.schemes]
    # Stable ordering for UX
    return sorted(items, key=lambda d: d.scheme)


def _describe(definition: EndpointDefinition) -> dict[str, Any]:
    return {
        "scheme": definition.scheme,
        "alternative_schemes": definition.alternative_schemes,
        "syntax": definition.syntax,
        "title": definition.title,
        "description": definition.description,
        "required": [p.name for p in definition.path_parameters if p.required],
        "defaults": {
            p.name: p.default for p in definition.path_parameters if p.default is not None
        },
        "path_parameters": [p.model_dump() for p in definition.path_parameters],
    }


@click.group("syntaxes")
def syntaxes_group() -> None:
    """Endpoint syntax catalog utilities."""


@syntaxes_group.command("show")
@click.option("--scheme", help="Only show the entry for this scheme")
@click.option("--format", "fmt", type=click.Choice(["table", "json"]), default="table")
@click.pass_obj
def syntaxes_show(obj: Any, scheme: str | None, fmt: str) -> None:
    """Show endpoint syntaxes in the configured catalogs."""
    rows = [_describe(d) for d in _iter_definitions(obj, scheme)]
    if scheme is not None and not rows:
        raise click.ClickException(f"Unknown scheme: {scheme}")

    if fmt == "json":
        click.echo(json.dumps(rows, indent=2))
        return

    obj.rich_cli.console.print(obj.rich_cli.endpoint_table(rows))


@syntaxes_group.command("verify")
@click.pass_obj
def syntaxes_verify(obj: Any) -> None:
    """Verify catalogs for duplicates and malformed syntaxes."""
    ok = True
    for source, data in _load_catalogs(obj):
        report = verify_catalog(data)
        clean = not report.get("duplicates") and not report.get("issues")
        ok = ok and clean
        click.echo(f"Catalog {source}: {'OK' if clean else 'ISSUES'}")
        for k, v in report.items():
            click.echo(f"- {k}: {v}")
    if not ok:
        raise SystemExit(1)


def add_syntax_commands(app: click.Group) -> None:
    """Register the syntaxes command group with the main app."""
    app.add_command(syntaxes_group)
