"""CLI entry point for interface-mock."""

import json
import logging
import random
from pathlib import Path
from typing import Any

import click
import yaml

from interface_mock.config import MockConfig
from interface_mock.errors import InvalidCountError, InterfaceMockError
from interface_mock.generator.mock import generate_mock_data
from interface_mock.parser.interface import parse_interface
from interface_mock.registry import ApiResponse, parse_count


def _read_source(source_path: Path) -> str:
    """Read interface text from a file, or stdin for ``-``."""
    if str(source_path) == "-":
        return click.get_text_stream("stdin").read()
    return source_path.read_text(encoding="utf-8")


def _load_config(config_path: Path | None) -> MockConfig:
    if config_path is not None:
        return MockConfig.load(config_path)
    return MockConfig.from_env()


def _dump(data: Any, fmt: str, indent: int = 2) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=indent, ensure_ascii=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Interface Mock — generate mock API data from interface definitions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("source_path", type=click.Path(exists=True, allow_dash=True, path_type=Path))
@click.option("--indent", default=2, type=int, help="JSON indentation.")
def parse(source_path: Path, indent: int):
    """Print the structural model of an interface definition as JSON."""
    try:
        parsed = parse_interface(_read_source(source_path))
    except InterfaceMockError as e:
        raise click.ClickException(str(e)) from e

    click.echo(parsed.model_dump_json(indent=indent, by_alias=True, exclude_none=True))


@main.command()
@click.argument("source_path", type=click.Path(exists=True, allow_dash=True, path_type=Path))
@click.option("-n", "--count", default=None, type=int, help="Number of records; more than 1 returns an array.")
@click.option("--seed", default=None, type=int, help="Seed for reproducible output.")
@click.option("--array-size", default=None, type=click.IntRange(min=1), help="Maximum generated array length.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--envelope", is_flag=True, help="Wrap data in a {success, data, timestamp} response.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write output to a file.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML config file.")
def generate(
    source_path: Path,
    count: int | None,
    seed: int | None,
    array_size: int | None,
    fmt: str,
    envelope: bool,
    output: Path | None,
    config_path: Path | None,
):
    """Generate mock data for an interface definition."""
    config = _load_config(config_path)
    try:
        count = parse_count(count, config.max_count)
    except InvalidCountError as e:
        raise click.BadParameter(str(e), param_hint="--count") from e

    options = config.generator
    if array_size is not None:
        options = options.model_copy(update={"array_size": array_size})
    rng = random.Random(seed) if seed is not None else None

    try:
        parsed = parse_interface(_read_source(source_path))
        data = generate_mock_data(parsed, count, options=options, rng=rng)
    except InterfaceMockError as e:
        raise click.ClickException(str(e)) from e

    if envelope:
        data = ApiResponse.ok(data).model_dump(mode="json", exclude_none=True)
    text = _dump(data, fmt)

    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Mock data for {parsed.name} saved to {output}")
