"""CLI command implementations"""

import sys
from contextlib import ExitStack
from typing import IO, Annotated, Optional

import typer
import yaml
from loguru import logger

from hunkdiff.config import Settings, load_config
from hunkdiff.core.compare import get_comparer
from hunkdiff.core.models import SourceInfo
from hunkdiff.core.pipeline import create


STDIN = "-"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 2 (1 is reserved for 'files differ')."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(2)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(level: str) -> None:
    """Route hunkdiff log records to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {message}")
    logger.enable("hunkdiff")


def _open(path: str, stack: ExitStack) -> IO:
    """Open path for binary reading ('-' is stdin); files are closed when stack exits."""
    if path == STDIN:
        return sys.stdin.buffer
    return stack.enter_context(open(path, "rb"))


def diff_cmd(
    old: Annotated[str, typer.Argument(help="Original file ('-' for stdin)")],
    new: Annotated[str, typer.Argument(help="Changed file ('-' for stdin)")],
    unified: Annotated[Optional[int], typer.Option("--unified", "-U", help="Lines of context")] = None,
    label_old: Annotated[Optional[str], typer.Option("--label-old", help="Header label for OLD (default: path)")] = None,
    label_new: Annotated[Optional[str], typer.Option("--label-new", help="Header label for NEW (default: path)")] = None,
    ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Compare lines case-insensitively")] = False,
    ignore_whitespace: Annotated[bool, typer.Option("--ignore-whitespace", "-w", help="Ignore whitespace differences")] = False,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Input/output text encoding")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log diagnostics to stderr")] = False,
    ):
    """Write a unified diff of OLD -> NEW to stdout. Exit 0 if identical, 1 if different."""
    if ignore_case and ignore_whitespace:
        _fail("--ignore-case and --ignore-whitespace are mutually exclusive")
    if old == STDIN and new == STDIN:
        _fail("only one input may be read from stdin")

    comparison = "ignore_case" if ignore_case else "ignore_whitespace" if ignore_whitespace else None
    settings = _settings(overrides={
        "context_lines": unified, "comparison": comparison, "encoding": encoding,
        "log_level": "DEBUG" if verbose else None,
    })
    _setup_logging(settings.log_level)

    try:
        with ExitStack() as stack:
            old_info = SourceInfo(_open(old, stack), old if label_old is None else label_old)
            new_info = SourceInfo(_open(new, stack), new if label_new is None else label_new)
            differ = create(
                old_info, new_info, sys.stdout, settings.context_lines,
                comparer=get_comparer(settings.comparison), encoding=settings.encoding,
            )
    except (OSError, UnicodeDecodeError) as e:
        _fail("Diff failed", e)

    logger.info("{} and {} {}", old, new, "differ" if differ else "are identical")
    if differ:
        raise typer.Exit(1)


def config_cmd():
    """Print the effective settings (hunkdiff.yaml + HUNKDIFF_* env vars) as YAML."""
    settings = _settings()
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())
