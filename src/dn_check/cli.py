"""CLI interface for dn-check."""

import asyncio
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn, TimeRemainingColumn

from . import __version__
from .checkers import AvailabilityService, DNSChecker, Outcome
from .exceptions import DNCheckError, IncompleteRunError
from .models import ResultSet
from .utils.config import load_config
from .utils.logging import setup_logging
from .utils.names import load_names, split_names, split_tlds
from .utils.output import build_table, format_sentences, spool_output, to_json


err_console = Console(stderr=True)


def _render(console: Console, result_set: ResultSet, json_output: bool, text_output: bool, color: bool):
    if json_output:
        click.echo(to_json(result_set))
    elif text_output:
        for line in format_sentences(result_set):
            click.echo(line)
    else:
        console.print(build_table(result_set, color=color))


def _resolver_settings(config: dict, timeout, nameservers) -> dict:
    dns_config = config.get('dns') or {}
    return {
        'timeout': timeout if timeout is not None else dns_config.get('timeout', 3.0),
        'nameservers': list(nameservers) or dns_config.get('nameservers'),
        'record_type': dns_config.get('record_type', 'A')
    }


@click.group()
@click.version_option(version=__version__, prog_name="dn-check")
def cli():
    """dn-check - Find out which domain names are still free."""
    pass


@cli.command()
@click.argument('words', nargs=-1)
@click.option('--names', '-n', default=None, help='Names to check (comma-separated). Takes precedence over --file')
@click.option('--file', '-f', 'names_file', default=None, help='File with one name per line')
@click.option('--tlds', '-d', default=None, help='TLDs to check (comma-separated, default: com)')
@click.option('--output', '-o', default=None, help='Spool output to a file')
@click.option('--json', '-j', 'json_output', is_flag=True, help='Output using JSON format')
@click.option('--text', 'text_output', is_flag=True, help='Plain text listing instead of a table')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose mode')
@click.option('--timeout', type=float, default=None, help='Per-lookup timeout in seconds')
@click.option('--max-concurrent', type=int, default=None, help='Maximum simultaneous lookups')
@click.option('--server', '-s', 'nameservers', multiple=True, help='DNS server to use (repeatable)')
@click.option('--config', '-c', 'config_path', default=None, help='Path to YAML config file')
@click.option('--color/--no-color', default=True, help='Colour YES/NO in the table')
@click.option('--progress/--no-progress', default=True, help='Show a progress bar')
def check(words, names, names_file, tlds, output, json_output, text_output, verbose,
          timeout, max_concurrent, nameservers, config_path, color, progress):
    """Check domain availability for NAMES across TLDs."""
    setup_logging(verbose=verbose, console=err_console)
    console = Console(no_color=not color)

    try:
        config = load_config(config_path)
        tld_list = split_tlds(tlds) if tlds else list(config['tlds'])

        if names or words:
            name_list = split_names(names) if names else []
            for word in words:
                name_list.extend(split_names(word))
        else:
            name_list = load_names(file=names_file)

        settings = _resolver_settings(config, timeout, nameservers)
        service = AvailabilityService(
            resolver=DNSChecker(**settings),
            timeout=settings['timeout'],
            max_concurrent=(
                max_concurrent if max_concurrent is not None
                else (config.get('dns') or {}).get('max_concurrent', 20)
            )
        )
    except (DNCheckError, ValueError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if verbose:
        err_console.print(f"[bold]Checking {len(name_list)} names for {len(tld_list)} TLDs...[/bold]")

    try:
        if progress:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                TimeRemainingColumn(),
                console=err_console,
                transient=True
            ) as bar:
                task = bar.add_task("[blue]DNS check...", total=len(service.build_requests(name_list, tld_list)))
                result_set = service.run(
                    name_list, tld_list,
                    progress_callback=lambda done, total: bar.update(task, completed=done)
                )
        else:
            result_set = service.run(name_list, tld_list)
    except IncompleteRunError as e:
        interrupted = isinstance(e.__cause__, (asyncio.CancelledError, KeyboardInterrupt))
        err_console.print(f"[red]Error: {escape(str(e))}. Results are incomplete.[/red]")
        if e.partial is not None and e.partial.count_verdicts() and not output:
            _render(console, e.partial, json_output, text_output, color)
        sys.exit(130 if interrupted else 1)
    except KeyboardInterrupt:
        err_console.print("\n[red]Interrupted by user[/red]")
        sys.exit(130)

    if output:
        try:
            spool_output(output, result_set, json_output=json_output)
        except DNCheckError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)
        err_console.print(f"[green]Saved to {output}[/green]")
    else:
        _render(console, result_set, json_output, text_output, color)


@cli.command()
@click.argument('fqdn')
@click.option('--timeout', type=float, default=None, help='Lookup timeout in seconds')
@click.option('--server', '-s', 'nameservers', multiple=True, help='DNS server to use (repeatable)')
@click.option('--config', '-c', 'config_path', default=None, help='Path to YAML config file')
def lookup(fqdn, timeout, nameservers, config_path):
    """Resolve a single FQDN and show the raw outcome."""
    setup_logging(console=err_console)
    try:
        config = load_config(config_path)
        checker = DNSChecker(**_resolver_settings(config, timeout, nameservers))
    except DNCheckError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    result = checker.check_single(fqdn)
    if result.outcome is Outcome.REGISTERED:
        click.echo(f"{fqdn}: registered")
    elif result.outcome is Outcome.NOT_FOUND:
        click.echo(f"{fqdn}: not found (available)")
    else:
        click.echo(f"{fqdn}: lookup failed ({result.detail})")
        sys.exit(1)


def main():
    cli()


if __name__ == '__main__':
    main()
