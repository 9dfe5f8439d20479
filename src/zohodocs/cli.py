import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .checker import CheckContext, check_products
from .config import BrowserConfig, CheckerConfig
from .errors import ConfigError
from .fetcher import DocsFetcher
from .report import UpdateReport
from .smoke import DEFAULT_SCREENSHOT, DEFAULT_SMOKE_URL, run_smoke
from .types import CheckResult

logger = logging.getLogger(__name__)

console = Console()

USAGE = """\
Usage:
  zoho-docs check                    # Check all products
  zoho-docs check crm books desk     # Check specific products
  zoho-docs check --deluge           # Also check Deluge docs
  zoho-docs check --full-report      # Show remote/local details per product"""


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_config(
    config_path: Optional[Path],
    docs_root: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    timeout: Optional[float] = None,
    workers: Optional[int] = None,
) -> CheckerConfig:
    """Load the config file (if any) and apply CLI overrides on top."""
    config = CheckerConfig.from_yaml(config_path) if config_path else CheckerConfig()

    overrides = {
        "docs_root": docs_root,
        "output_dir": output_dir,
        "workers": workers,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if timeout is not None:
        overrides["browser"] = replace(config.browser, timeout=timeout)
    # replace() runs __post_init__ again: ~ expansion and range checks
    return replace(config, **overrides)


def _print_result(result: CheckResult, full_report: bool) -> None:
    product = result.product
    if result.status == "inaccessible":
        console.print(
            f"[yellow]⚠ Could not access {product} documentation (HTTP {result.http_status})[/yellow]"
        )
        return
    if result.status == "error":
        console.print(f"[red]✗ Error checking {product}: {escape(str(result.error))}[/red]")
        return

    if result.needs_update:
        console.print(f"[yellow]⚠ {product}: UPDATE NEEDED - {result.reason_detail}[/yellow]")
    else:
        console.print(f"[green]✓ {product}: Up to date[/green]")

    if full_report:
        remote, local = result.remote, result.local
        console.print(
            f"  Remote: {_describe_version(remote.version)} | {remote.last_updated or 'No date found'}",
            highlight=False,
        )
        console.print(
            f"  Local:  {_describe_version(local.version)} | {local.last_updated or 'No date found'}",
            highlight=False,
        )


def _describe_version(version: Optional[str]) -> str:
    return f"v{version}" if version else "No version found"


async def _run_checks(
    config: CheckerConfig, products: Sequence[str], full_report: bool
) -> List[CheckResult]:
    async with DocsFetcher(config.browser) as fetcher:
        ctx = CheckContext.create(fetcher, config)
        console.print(f"[blue]Checking {len(products)} product(s)...[/blue]\n")
        return await check_products(
            ctx,
            products,
            progress_callback=lambda i, n, p: console.print(f"[cyan]Checking {p}...[/cyan]"),
            on_result=lambda r: _print_result(r, full_report),
        )


@click.group()
def cli():
    """Zoho documentation update checker."""
    pass


@cli.command()
@click.argument("products", nargs=-1)
@click.option("--full-report", is_flag=True, help="Print remote/local details for every product")
@click.option(
    "--deluge",
    "include_excluded",
    is_flag=True,
    help="Include products left out of the default run (deluge)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="ZOHO_DOCS_CONFIG",
    help="Path to a YAML configuration file",
)
@click.option(
    "--docs-root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory containing zoho-docs/api-reference",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Where to write the update report",
)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Per-page timeout in seconds")
@click.option("--workers", type=click.IntRange(min=1), help="Pages fetched at once")
@click.option("--json", "write_json", is_flag=True, help="Also write the report as JSON")
@click.option("--verbose", is_flag=True, help="Enable debug logs")
def check(
    products,
    full_report,
    include_excluded,
    config_path,
    docs_root,
    output_dir,
    timeout,
    workers,
    write_json,
    verbose,
):
    """Check documentation for updates (all products by default)."""
    setup_logging(verbose)

    try:
        config = load_config(config_path, docs_root, output_dir, timeout, workers)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    registry = config.registry
    selection = registry.resolve(products, include_excluded=include_excluded)

    if selection.unknown:
        console.print(
            f"[yellow]Warning: Unknown products: {', '.join(selection.unknown)}[/yellow]\n"
        )

    if selection.is_empty:
        console.print("[red]No valid products to check![/red]")
        console.print(f"\n{USAGE}", highlight=False, markup=False)
        console.print(f"\nAvailable products: {', '.join(registry.names)}", highlight=False)
        sys.exit(1)

    console.print("[blue]Initializing Zoho Documentation Checker...[/blue]\n")

    try:
        results = asyncio.run(_run_checks(config, selection.products, full_report))

        report = UpdateReport.from_results(results, docs_subdir=config.docs_subdir)
        report.print_summary(console)

        report_path = report.save(config.output_dir)
        console.print(f"\n[green]Report generated: {report_path}[/green]")
        if write_json:
            json_path = report.save_json(config.output_dir)
            console.print(f"[green]JSON report: {json_path}[/green]")
    except Exception as e:
        logger.exception("Fatal error")
        console.print(f"[red]Fatal error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="ZOHO_DOCS_CONFIG",
    help="Path to a YAML configuration file",
)
def products(config_path):
    """List the products in the registry."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    registry = config.registry
    table = Table(title="Documentation Registry")
    table.add_column("Product", style="cyan")
    table.add_column("URL")
    table.add_column("Default Run", style="magenta")

    for name, url in registry.products.items():
        default = "[dim]excluded[/dim]" if name in registry.excluded else "yes"
        table.add_row(name, url, default)

    console.print(table)


@cli.command()
@click.argument("url", default=DEFAULT_SMOKE_URL)
@click.option(
    "--screenshot",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_SCREENSHOT,
    show_default=True,
    help="Where to save the screenshot",
)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=30.0, show_default=True, help="Page timeout in seconds")
@click.option("--verbose", is_flag=True, help="Enable debug logs")
def smoke(url, screenshot, timeout, verbose):
    """Launch a headless browser, open URL and take a screenshot."""
    setup_logging(verbose)
    console.print("Launching browser...")

    try:
        config = BrowserConfig(timeout=timeout)
        result = asyncio.run(run_smoke(url, screenshot, config=config))
    except Exception as e:
        logger.exception("Smoke test failed")
        console.print(f"[red]Smoke test failed: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"Page title: {result.title}", highlight=False)
    console.print(f"Main heading: {result.heading}", highlight=False)
    console.print(f"[green]Screenshot saved to {result.screenshot_path}[/green]")


cli.add_command(check)
cli.add_command(products)
cli.add_command(smoke)

if __name__ == "__main__":
    cli()
