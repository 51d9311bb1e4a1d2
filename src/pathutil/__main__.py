"""CLI entry point for pathutil.

Provides commands for normalizing, resolving, comparing and
searching paths. Lookups that find nothing print nothing and exit
with status 1.
"""

from pathlib import Path

import click

from pathutil import __version__
from pathutil.config.models import Config


def _finish(ctx: click.Context, result: str) -> None:
    if not result:
        ctx.exit(1)
    click.echo(result)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, config: Path | None) -> None:
    """POSIX path utilities.

    Normalize, resolve, compare and search POSIX-style paths.
    """
    from pathutil.config.loader import load_config
    from pathutil.errors import ConfigurationError
    from pathutil.utils.logging import configure_logging

    try:
        cfg = load_config(config)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="'--config'") from e
    configure_logging(cfg.logging)
    ctx.obj = cfg


@cli.command()
@click.argument("path")
@click.option("--forbidden", default=None, help="Characters to replace in segments")
@click.option("--replacement", default=None, help="Character substituted for forbidden ones")
@click.pass_obj
def normalize(cfg: Config, path: str, forbidden: str | None, replacement: str | None) -> None:
    """Print the normalized form of PATH.

    Absolute paths have their dot segments resolved; relative paths
    only have repeated separators collapsed.
    """
    from pathutil.errors import ConfigurationError
    from pathutil.services.normalizer import PathNormalizer

    settings = cfg.normalization
    try:
        normalizer = PathNormalizer(
            separator=settings.separator,
            forbidden_characters=settings.forbidden_characters if forbidden is None else forbidden,
            replacement=settings.replacement if replacement is None else replacement,
        )
    except ConfigurationError as e:
        raise click.BadParameter(str(e)) from e

    click.echo(normalizer.normalize(path))


@cli.command()
@click.argument("path")
@click.argument("base")
def relative(path: str, base: str) -> None:
    """Print the path leading from directory BASE to PATH."""
    from pathutil.services.relative import relative_to

    click.echo(relative_to(path, base))


@cli.command()
@click.argument("path")
@click.option("--cwd", default=None, help="Directory to resolve relative paths against")
@click.option("--canonical", is_flag=True, help="Resolve symlinks (the path must exist)")
@click.pass_context
def resolve(ctx: click.Context, path: str, cwd: str | None, canonical: bool) -> None:
    """Print the absolute form of PATH."""
    from pathutil.services.normalizer import PathNormalizer
    from pathutil.services.resolver import PathResolver

    resolver = PathResolver(
        working_directory=cwd,
        normalizer=PathNormalizer.from_config(ctx.obj.normalization),
    )
    if canonical:
        _finish(ctx, resolver.resolve_canonical(resolver.resolve_relative(path)))
    else:
        _finish(ctx, resolver.resolve_relative(path))


@cli.command()
@click.argument("name")
@click.option(
    "--path",
    "search_path",
    default=None,
    help="Delimited directory list (defaults to the search variable)",
)
@click.pass_context
def find(ctx: click.Context, name: str, search_path: str | None) -> None:
    """Print the first match for NAME in the search path."""
    from pathutil.services.searcher import FileSearcher

    searcher = FileSearcher(config=ctx.obj.search)
    if search_path is None:
        search_path = searcher.environ.get(ctx.obj.search.path_variable, "")
    _finish(ctx, searcher.find_file(name, search_path))


@cli.command()
@click.argument("name")
@click.option(
    "--path",
    "search_path",
    default=None,
    help="Delimited directory list (defaults to the search variable)",
)
@click.pass_context
def which(ctx: click.Context, name: str, search_path: str | None) -> None:
    """Print the first executable match for NAME."""
    from pathutil.services.searcher import FileSearcher

    _finish(ctx, FileSearcher(config=ctx.obj.search).find_executable(name, search_path))


@cli.command()
@click.argument("path")
@click.pass_context
def mkdir(ctx: click.Context, path: str) -> None:
    """Create directory PATH and any missing parents."""
    from pathutil.services.filesystem import create_directory

    if not create_directory(path, mode=ctx.obj.filesystem.directory_mode):
        raise click.ClickException(f"Cannot create directory: {path}")


@cli.command()
@click.argument("path")
@click.pass_context
def rm(ctx: click.Context, path: str) -> None:
    """Remove file PATH."""
    from pathutil.services.filesystem import remove

    if not remove(path, retries=ctx.obj.filesystem.remove_retries):
        raise click.ClickException(f"Cannot remove: {path}")


@cli.command(name="list")
@click.argument("directory")
@click.option("--pattern", "-p", default="", help="Glob pattern for entry names")
@click.option("--recursive", "-r", is_flag=True, help="Descend into subdirectories")
@click.option("--ignore-case", "-i", is_flag=True, help="Match names case-insensitively")
def list_entries(directory: str, pattern: str, recursive: bool, ignore_case: bool) -> None:
    """List entries of DIRECTORY matching a pattern."""
    from pathutil.services.filesystem import enumerate_directory, enumerate_recursive

    def emit(entry: str) -> bool:
        click.echo(entry)
        return True

    walk = enumerate_recursive if recursive else enumerate_directory
    if not walk(directory, pattern, emit, ignore_case):
        raise click.ClickException(f"Cannot read directory: {directory}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
