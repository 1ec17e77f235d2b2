import logging
import os
from typing import Any

import click
from arbgen import config as arbgen_config
from arbgen import generator
from arbgen.classifier import classify_locale
from arbgen.exceptions import ArbGenError
from arbgen.parser import ValuesFolder

logger = logging.getLogger(__name__)


def _setup(config_folder: str) -> dict[str, Any]:
    try:
        config = arbgen_config.load_config(config_folder)
    except ArbGenError as exc:
        logger.error(str(exc))
        raise click.exceptions.Exit(1)
    arbgen_config.configure_logging(config)
    return config


@click.group()
@click.version_option(package_name="arb-gen")
def cli() -> None:
    pass


@cli.command("generate")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--values-folder", default=None, help="Folder holding the strings_*.arb files.")
@click.option("--output", default=None, help="Generated Dart file path.")
def generate(config_folder: str, values_folder: str | None, output: str | None) -> None:
    config = _setup(config_folder)
    values_folder_path = os.path.abspath(values_folder or config["paths"]["values_folder"])
    output_path = os.path.abspath(output or config["paths"]["output_file"])

    try:
        changed = generator.generate(ValuesFolder(values_folder_path), generator.I18nFile(output_path))
    except ArbGenError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"{output_path}: {'updated' if changed else 'unchanged'}")


@cli.command("classify")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--values-folder", default=None, help="Folder holding the strings_*.arb files.")
@click.option("--locale", "locales", multiple=True, help="Only show these locales.")
def classify(config_folder: str, values_folder: str | None, locales: tuple[str, ...]) -> None:
    config = _setup(config_folder)
    values_folder_path = os.path.abspath(values_folder or config["paths"]["values_folder"])

    for bundle in ValuesFolder(values_folder_path).bundles():
        if locales and bundle.locale not in locales:
            continue
        classified = classify_locale(bundle.entries, bundle.entries)
        click.echo(f"[{bundle.locale}]")
        click.echo(f"  plain: {', '.join(classified.plain)}")
        click.echo(f"  parametrized: {', '.join(classified.parametrized)}")
        for family in classified.plurals:
            quantities = ", ".join(q.value for q in family.values)
            click.echo(f"  plural {family.method_name}: {quantities}")
