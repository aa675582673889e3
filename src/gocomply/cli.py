"""Command-line interface for gocomply.

Provides the main entry point and subcommands for collecting the license
files of a Go module's dependencies.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from gocomply.credentials import load_credentials
from gocomply.exceptions import GoComplyError
from gocomply.models import Credentials, ModuleLicense, ResolverConfig
from gocomply.reporters import TextReporter
from gocomply.resolvers import DiscoveryResolver, WaterfallResolver
from gocomply.scanners import get_scanner

app = typer.Typer(
    name="gocomply",
    help="Collect the license files of Go module dependencies.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("gocomply")

# The Go standard library is always a dependency
STDLIB_MODULE = "github.com/golang/go"


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("gocomply").setLevel(level)


def _build_config(
    github_user: Optional[str],
    github_token: Optional[str],
    netrc: Optional[Path],
    timeout: float,
    delay: float,
    api_delay: float,
) -> ResolverConfig:
    """Build the resolver configuration, reading credentials once.

    Command-line credentials take precedence over the netrc entry.
    """
    credentials: Optional[Credentials] = None
    if github_user and github_token:
        credentials = Credentials(username=github_user, token=github_token)
    else:
        try:
            credentials = load_credentials(netrc_path=netrc)
        except ValueError as e:
            err_console.print(f"[yellow]Warning:[/yellow] {e}")

    config = ResolverConfig(
        credentials=credentials,
        timeout=timeout,
        file_delay=delay,
        api_delay=api_delay,
    )

    if not config.has_credentials:
        err_console.print(
            "[yellow]Warning:[/yellow] no credentials set for GitHub API\n"
            " -- gocomply may be slower and less accurate"
        )

    return config


def _list_modules(modules: Optional[list[str]], scan: Path, verbose: bool) -> list[str]:
    """Return module paths from the arguments, or from scanning the project.

    Raises:
        ValueError: If no scanner handles the path or scanning fails.
        FileNotFoundError: If the scanned path or the go tool is missing.
    """
    if modules:
        return list(modules)

    scanner = get_scanner(scan)
    if verbose:
        err_console.print(f"[dim]Using scanner: {scanner.source_name}[/dim]")

    return [spec.path for spec in scanner.scan()]


async def _resolve_modules(
    modules: list[str],
    config: ResolverConfig,
    reporter: TextReporter,
    stream: bool,
) -> list[ModuleLicense]:
    """Resolve modules one at a time, streaming each block to stdout.

    Args:
        modules: Module paths, in output order.
        config: Resolver configuration.
        reporter: Reporter used to render each block.
        stream: Whether to write each block to stdout as it is resolved.

    Returns:
        The licenses found, in input order.
    """
    found: list[ModuleLicense] = []

    async with WaterfallResolver(config=config) as resolver:
        for module in modules:
            err_console.print(f"> {module}", markup=False, highlight=False)

            try:
                license = await resolver.resolve(module)
            except GoComplyError as e:
                err_console.print(
                    f"unable to find a license for module {module!r}: {e}",
                    markup=False,
                    highlight=False,
                )
                continue

            found.append(license)
            if stream:
                sys.stdout.write(reporter.render([license]))
                sys.stdout.flush()

    return found


@app.command()
def gen(
    modules: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="Module paths to check. When given, this is taken as the complete "
            "list and no scanning is done.",
        ),
    ] = None,
    scan: Annotated[
        Path,
        typer.Option(
            "--scan",
            "-s",
            help="Go module directory, go.mod, or a *.txt module list",
            exists=True,
        ),
    ] = Path("."),
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the license bundle to a file instead of stdout",
        ),
    ] = None,
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            help="Custom Jinja2 template file",
            exists=True,
            readable=True,
        ),
    ] = None,
    no_stdlib: Annotated[
        bool,
        typer.Option(
            "--no-stdlib",
            help="Do not include the Go standard library license",
        ),
    ] = False,
    github_user: Annotated[
        Optional[str],
        typer.Option(
            "--github-user",
            envvar="GITHUB_USER",
            help="GitHub user name for the tree API (overrides .netrc)",
        ),
    ] = None,
    github_token: Annotated[
        Optional[str],
        typer.Option(
            "--github-token",
            envvar="GITHUB_TOKEN",
            help="GitHub API token for the tree API (overrides .netrc)",
        ),
    ] = None,
    netrc: Annotated[
        Optional[Path],
        typer.Option(
            "--netrc",
            help="netrc file to read credentials from (default: $NETRC or ~/.netrc)",
        ),
    ] = None,
    timeout: Annotated[
        float,
        typer.Option("--timeout", help="Per-request timeout in seconds"),
    ] = 10.0,
    delay: Annotated[
        float,
        typer.Option("--delay", help="Pause before each candidate file, in seconds"),
    ] = 1.0,
    api_delay: Annotated[
        float,
        typer.Option("--api-delay", help="Pause before each GitHub API listing, in seconds"),
    ] = 2.46,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output",
        ),
    ] = False,
) -> None:
    """Download the license files of all required modules.

    License blocks go to stdout (or --output); progress and warnings go to
    stderr. Modules without a license are reported and skipped.
    """
    _setup_logging(verbose)

    try:
        module_list = _list_modules(modules, scan, verbose)
    except (ValueError, FileNotFoundError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if not no_stdlib:
        module_list.append(STDLIB_MODULE)

    config = _build_config(github_user, github_token, netrc, timeout, delay, api_delay)
    reporter = TextReporter(template_path=template) if template else TextReporter()

    if output is not None and not output.suffix:
        output = output.with_suffix(reporter.default_extension)

    found = asyncio.run(
        _resolve_modules(module_list, config, reporter, stream=output is None)
    )

    if output is not None:
        try:
            reporter.write(found, output)
        except OSError as e:
            err_console.print(f"[red]Error writing output:[/red] {e}")
            raise typer.Exit(code=1)
        err_console.print(f"[green]Generated:[/green] {output} ({reporter.format_name})")

    err_console.print(
        f"Found licenses for [bold]{len(found)}[/bold]/{len(module_list)} modules"
    )


@app.command()
def lookup(
    module: Annotated[str, typer.Argument(help="Module path to look up")],
    timeout: Annotated[
        float,
        typer.Option("--timeout", help="Per-request timeout in seconds"),
    ] = 10.0,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output",
        ),
    ] = False,
) -> None:
    """Show the repository a module path resolves to."""
    _setup_logging(verbose)

    async def run_lookup():
        async with DiscoveryResolver(ResolverConfig(timeout=timeout)) as resolver:
            return await resolver.lookup(module)

    try:
        location, source = asyncio.run(run_lookup())
    except GoComplyError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Import prefix:[/bold] {location.import_prefix}")
    console.print(f"[bold]VCS:[/bold] {location.vcs}")
    console.print(f"[bold]Repository:[/bold] {location.repo_root}")
    if source is not None:
        console.print(f"[bold]Directory template:[/bold] {source.directory}")
        console.print(f"[bold]File template:[/bold] {source.file}")


if __name__ == "__main__":
    app()
