"""Toylang command line interface."""

from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass
from pathlib import Path

import click

from toylang import __version__
from toylang.config import ToylangConfig, find_config, load_config
from toylang.errors import CompileError, DiagnosticRenderer
from toylang.log import setup_logging
from toylang.parser import parse
from toylang.project import scaffold

logger = logging.getLogger(__name__)


def _load_config_or_default(path: Path) -> ToylangConfig:
    try:
        config_path = find_config(path)
    except FileNotFoundError:
        logger.debug("no toylang.toml above %s, using defaults", path)
        return ToylangConfig()
    logger.debug("using config %s", config_path)
    return load_config(config_path)


def _source_files(target: Path, extensions: list[str]) -> list[Path]:
    if target.is_file():
        return [target]
    return sorted(
        p for p in target.rglob("*") if p.is_file() and p.suffix in extensions
    )


def _check_file(path: Path, renderer: DiagnosticRenderer) -> bool:
    """Parse one file, echoing diagnostics on failure. Returns True if OK."""
    source = path.read_text()
    filename = str(path)
    try:
        parse(source, filename)
    except CompileError as e:
        renderer.sources[filename] = source
        for diag in e.diagnostics:
            click.echo(renderer.render(diag), err=True)
        return False
    return True


@click.group()
@click.version_option(__version__, prog_name="toylang")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Parser front end for the toylang language."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True))
def check(path: str) -> None:
    """Parse toylang sources and report syntax errors."""
    target = Path(path)
    config = _load_config_or_default(target)
    files = _source_files(target, config.check.extensions)
    if not files:
        click.echo("warning: no source files found", err=True)
        return

    renderer = DiagnosticRenderer(color=config.check.color)
    failed = [f for f in files if not _check_file(f, renderer)]

    if failed:
        click.echo(f"{len(failed)} of {len(files)} file(s) failed to parse", err=True)
        raise SystemExit(1)
    click.echo(f"checked {len(files)} file(s), no errors")


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def view(file: str) -> None:
    """View the AST of a toylang source file."""
    path = Path(file)
    config = _load_config_or_default(path)
    source = path.read_text()
    filename = str(file)

    try:
        program = parse(source, filename)
    except CompileError as e:
        renderer = DiagnosticRenderer(color=config.check.color, sources={filename: source})
        for diag in e.diagnostics:
            click.echo(renderer.render(diag), err=True)
        raise SystemExit(1)

    _dump_ast(program)


@main.command()
@click.argument("name")
def new(name: str) -> None:
    """Create a new toylang project."""
    try:
        project_dir = scaffold(name)
        click.echo(f"created project '{name}' at {project_dir}")
    except FileExistsError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)


def _dump_ast(node: object, depth: int = 0) -> None:
    """Echo node and its children, one field per line."""
    pad = "  " * depth
    if not is_dataclass(node):
        click.echo(f"{pad}{node!r}")
        return

    click.echo(f"{pad}{type(node).__name__}")
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            # parameter names, or an empty list
            click.echo(f"{pad}  {f.name}: {value!r}")
        elif isinstance(value, list):
            click.echo(f"{pad}  {f.name}:")
            for item in value:
                _dump_ast(item, depth + 2)
        elif is_dataclass(value):
            click.echo(f"{pad}  {f.name}:")
            _dump_ast(value, depth + 2)
        else:
            click.echo(f"{pad}  {f.name}: {value!r}")
