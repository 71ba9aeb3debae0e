"""CLI entry point for swagger-assembler."""

import logging
from pathlib import Path

import click

from swagger_assembler.builder.assembler import SwaggerBuilder
from swagger_assembler.config import DEFAULT_SECURITY_PROPERTY, BuilderOptions
from swagger_assembler.errors import SwaggerAssemblerError
from swagger_assembler.frontend.scanner import load_target, scan_controller


@click.group()
def main():
    """Swagger Assembler: build Swagger 2.0 documents from decorated controllers."""
    pass


@main.command()
@click.argument("targets", nargs=-1, required=True)
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the generated document.")
@click.option("--base", "base_document", default=None, type=click.Path(exists=True, path_type=Path), envvar="SWAGGER_BASE_DOCUMENT", help="JSON or YAML document merged under the generated one.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--security-property", default=DEFAULT_SECURITY_PROPERTY, help="Property that lists every referenced security scheme.")
@click.option("-v", "--verbose", is_flag=True, help="Log every processed event.")
def generate(targets: tuple[str, ...], output: Path, base_document: Path | None, fmt: str, security_property: str, verbose: bool):
    """Generate a document from TARGETS ('package.module' or 'package.module:Class')."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    options = BuilderOptions(base_document=base_document, default_security_property=security_property)
    try:
        builder = SwaggerBuilder(options=options)
        for target in targets:
            controllers = load_target(target)
            click.echo(f"Scanning {target} ({len(controllers)} controllers)...")
            for controller in controllers:
                scan_controller(builder, controller)
        text = builder.render(fmt)
    except (SwaggerAssemblerError, ImportError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text.rstrip("\n") + "\n", encoding="utf-8")
    click.echo(f"Document saved to {output}")
