"""Command-line interface for canonpath."""
import functools
import logging
import sys
from typing import List, Optional

import click
from .core.models import Config
from .core.cwd import WorkingDirectoryError
from .core.path import Path
from .utils.console_base import ConsoleManager, THEMES
from .utils.validator import is_canonical


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


class CliState:
    """Objects shared by all subcommands."""

    def __init__(self, config: Config, console: ConsoleManager):
        self.config = config
        self.console = console

    @property
    def as_json(self) -> bool:
        return self.config.output_format == 'json'


def handle_errors(func):
    """Report unexpected failures on the console and exit with status 1."""
    @functools.wraps(func)
    def wrapper(state: CliState, *args, **kwargs):
        try:
            return func(state, *args, **kwargs)
        except click.ClickException:
            raise
        except KeyboardInterrupt:
            state.console.print_error("Interrupted")
            sys.exit(1)
        except WorkingDirectoryError as e:
            state.console.print_error(str(e))
            sys.exit(1)
        except Exception as e:
            state.console.print_error(f"Unexpected error: {e}")
            if state.config.debug:
                state.console.print_exception()
            sys.exit(1)
    return wrapper


def _emit_paths(state: CliState, pairs: List[tuple], key: str) -> None:
    """Print (input, result) pairs as plain lines or one JSON list."""
    if state.as_json:
        state.console.print_json([{'input': source, key: str(result)} for source, result in pairs])
        return
    for _, result in pairs:
        state.console.print_path(result)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.option('--format', '-f', 'output_format', type=click.Choice(['text', 'json']),
              help='Output format (default: text, or CANONPATH_FORMAT)')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), help='Terminal color theme')
@click.option('--cwd', 'working_directory', help='Absolute directory used to resolve relative paths')
@click.version_option(package_name='canonpath')
@click.pass_context
def main(ctx: click.Context, debug: bool, output_format: Optional[str],
         theme: Optional[str], working_directory: Optional[str]) -> None:
    """
    Canonicalize and manipulate slash-separated paths without touching the filesystem.

    Examples:

        canonpath canon /foo/bar/../baz ./a//b/

        canonpath join /srv/www ../logs app.log

        canonpath relative /srv/www/static /srv

        find . -type d | canonpath sort --unique
    """
    try:
        config = Config()
    except ValueError as e:
        raise click.UsageError(str(e))
    if debug:
        config.debug = True
    if output_format:
        config.output_format = output_format
    if theme:
        config.theme = theme
    if working_directory:
        config.working_directory = working_directory

    setup_logging(config.debug)
    ctx.obj = CliState(config, ConsoleManager(theme=config.theme))


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
@handle_errors
def canon(state: CliState, paths: List[str]) -> None:
    """Print the canonical form of each PATH."""
    _emit_paths(state, [(p, Path(p)) for p in paths], 'canonical')


@main.command()
@click.argument('texts', nargs=-1, required=True)
@click.pass_obj
@handle_errors
def check(state: CliState, texts: List[str]) -> None:
    """Report whether each TEXT is already canonical."""
    results = [(text, is_canonical(text)) for text in texts]
    if state.as_json:
        state.console.print_json([{'input': text, 'canonical': ok} for text, ok in results])
    else:
        for text, ok in results:
            if ok:
                state.console.print_success(text)
            else:
                state.console.print_error(f"{text} (canonical: {Path(text)})")
    if not all(ok for _, ok in results):
        sys.exit(1)


@main.command()
@click.argument('path')
@click.option('--levels', '-n', type=click.IntRange(min=0), default=1, show_default=True,
              help='How many levels to climb')
@click.pass_obj
@handle_errors
def parent(state: CliState, path: str, levels: int) -> None:
    """Print the parent directory of PATH."""
    result = Path(path)
    for _ in range(levels):
        result = result.parent()
    _emit_paths(state, [(path, result)], 'parent')


@main.command()
@click.argument('base')
@click.argument('suffixes', nargs=-1, required=True)
@click.pass_obj
@handle_errors
def join(state: CliState, base: str, suffixes: List[str]) -> None:
    """Join each SUFFIX onto BASE, left to right."""
    result = Path(base)
    for suffix in suffixes:
        result = result / Path(suffix)
    _emit_paths(state, [(base, result)], 'joined')


@main.command()
@click.argument('path')
@click.argument('parent_path', metavar='PARENT')
@click.pass_obj
@handle_errors
def relative(state: CliState, path: str, parent_path: str) -> None:
    """Print PATH relative to its ancestor PARENT."""
    result = Path(path).make_relative(Path(parent_path))
    if state.as_json:
        state.console.print_json({
            'input': path,
            'parent': parent_path,
            'relative': str(result) if result is not None else None,
        })
    elif result is not None:
        state.console.print_path(result)
    else:
        state.console.print_error(f"{Path(path)} is not inside {Path(parent_path)}")
    if result is None:
        sys.exit(1)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
@handle_errors
def common(state: CliState, paths: List[str]) -> None:
    """Print the deepest directory containing every PATH."""
    if len(paths) < 2:
        raise click.UsageError("common needs at least two paths")
    result = Path(paths[0])
    for path in paths[1:]:
        result = result.common_parent(Path(path))
    if state.as_json:
        state.console.print_json({'inputs': list(paths), 'common': str(result)})
    else:
        state.console.print_path(result)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
@handle_errors
def absolute(state: CliState, paths: List[str]) -> None:
    """Resolve each PATH against the working directory."""
    provider = state.config.working_directory_provider()
    _emit_paths(state, [(p, Path(p).absolute(provider)) for p in paths], 'absolute')


@main.command(name='sort')
@click.argument('source', type=click.File('r'), default='-')
@click.option('--unique', '-u', is_flag=True, help='Drop paths that canonicalize to the same value')
@click.pass_obj
@handle_errors
def sort_paths(state: CliState, source, unique: bool) -> None:
    """
    Canonicalize and sort the paths in SOURCE, one per line.

    Reads standard input when SOURCE is omitted or '-'. Absolute paths
    come first and every directory sorts before its contents.
    """
    paths = [Path(line.rstrip('\r\n')) for line in source if line.strip()]
    if unique:
        paths = set(paths)
    result = sorted(paths)
    if state.as_json:
        state.console.print_json([str(p) for p in result])
    else:
        for p in result:
            state.console.print_path(p)


if __name__ == '__main__':
    main()
