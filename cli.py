#!/usr/bin/env python3
"""
EBI Search CLI.

Command-line client for the EBI Search (EB-eye) REST web service.
The first positional argument selects the method, the remaining ones are
passed to it in order. Results go to stdout, diagnostics to stderr.

Usage:
    python cli.py --help
    python cli.py getDomainHierarchy
    python cli.py getDomainDetails uniprot
    python cli.py getResults uniprot "brca1" id,name 10 0
    python cli.py getFacetedResults uniprot "brca1" id 10 0 "" "" "" "" 5 TAXONOMY
    python cli.py getEntries uniprot P38398 id,name
    python cli.py getReferencedEntries uniprot P38398 interpro id --debugLevel 11
"""

import sys
from pathlib import Path

import click
import httpx
import structlog
from click.core import ParameterSource

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from ebisearch.cli.methods import METHODS, run_method, usage_text
from ebisearch.client.transport import SearchClient
from ebisearch.core.config import resolve_client_options, validate_project_root
from ebisearch.core.exceptions import ApplicationError, UsageError
from ebisearch.core.logging import debug_message, get_logger, level_for, setup_logging
from ebisearch.services.search import SearchService

SCRIPT_NAME = "cli.py"


def print_usage() -> None:
    """Print the usage message to stderr."""
    click.echo(usage_text(SCRIPT_NAME), err=True, nl=False)


class SearchCommand(click.Command):
    """Command that reports malformed flags with the project usage text."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(click.style(f"Error: {e.format_message()}", fg="red"), err=True)
            print_usage()
            ctx.exit(1)


def _has_arguments(ctx: click.Context) -> bool:
    """Whether anything at all was given on the command line."""
    return any(
        ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE
        for name in ("args", "quiet", "verbose", "debug_level", "base_url")
    )


@click.command(
    cls=SearchCommand,
    add_help_option=False,
    context_settings={
        "allow_interspersed_args": True,
        "ignore_unknown_options": True,
    },
)
@click.argument("method", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--quiet",
    is_flag=True,
    help="Decrease output level.",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Increase output level.",
)
@click.option(
    "--debugLevel", "debug_level",
    type=click.IntRange(min=0),
    default=0,
    help="Debug output level.",
)
@click.option(
    "--baseUrl", "base_url",
    default=None,
    help="Base URL for service.",
)
@click.option(
    "--help", "show_help",
    is_flag=True,
    help="Show usage and exit.",
)
@click.pass_context
def main(
    ctx: click.Context,
    method: str | None,
    args: tuple[str, ...],
    quiet: bool,
    verbose: bool,
    debug_level: int,
    base_url: str | None,
    show_help: bool,
) -> None:
    """
    EBI Search REST client.

    \b
    Examples:
        python cli.py getDomainHierarchy
        python cli.py getDomainDetails uniprot
        python cli.py getResults uniprot brca1 id,name 10 0
        python cli.py getDomainsReferencedInDomain uniprot --baseUrl http://localhost/rest
    """
    validate_project_root()

    if show_help:
        print_usage()
        sys.exit(0)

    if method is None:
        print_usage()
        sys.exit(1 if _has_arguments(ctx) else 0)

    if method not in METHODS:
        print_usage()
        sys.exit(1)

    try:
        options = resolve_client_options(
            base_url=base_url,
            verbose=verbose,
            quiet=quiet,
            debug_level=debug_level,
        )
    except (RuntimeError, ValueError, FileNotFoundError) as e:
        click.echo(click.style(f"Error: Could not load configuration: {e}", fg="red"), err=True)
        sys.exit(1)

    setup_logging(
        level=level_for(options.output_level, options.debug_level),
        debug_level=options.debug_level,
    )

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)

    debug_message(logger, "main", f"httpx version: {httpx.__version__}", 1)
    debug_message(logger, "main", f"baseUrl: {options.base_url}", 1)
    debug_message(logger, "main", "params", 11, method=method, args=list(args))

    try:
        with SearchClient(timeout=options.timeout) as client:
            service = SearchService(client, options)
            for line in run_method(service, method, args):
                click.echo(line)
    except UsageError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        print_usage()
        sys.exit(1)
    except ApplicationError as e:
        logger.info("Request failed", extra={"code": e.code, "error": e.message})
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
