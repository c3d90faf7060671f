import sys

import click

from .aggregator import SearchAggregator
from .cli_logger import get_latest_log_file, logger
from .config import SearchConfig
from .decorators import handle_exceptions
from .errors import SearchAborted
from .renderer import render_records


def show_log_file(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    log_file = get_latest_log_file(logger.log_dir)
    if log_file is None:
        click.echo("No log files found.", err=True)
        ctx.exit(1)
    click.echo(log_file)
    ctx.exit()


@click.command()
@click.argument("query", nargs=-1, required=True)
@click.option("--all", "-a", "all_pages", is_flag=True, help="Load all result pages.")
@click.option("--raw", "-r", is_flag=True, help="Print tab-separated name, synopsis and info.")
@click.option("--verbose", "-v", is_flag=True, help="Show diagnostic messages on stderr.")
@click.option("--log-file", is_flag=True, expose_value=False, is_eager=True,
              callback=show_log_file, help="Print the path of the latest log file and exit.")
@click.version_option(package_name="gofind")
@handle_exceptions
def cli(query, all_pages, raw, verbose):
    """Find Go packages via pkg.go.dev."""
    config = SearchConfig.from_options(query, all_pages=all_pages, raw=raw, verbose=verbose)
    logger.configure(config)
    logger.info(f"Searching pkg.go.dev for {' '.join(config.terms)!r}")

    sink = sys.stdout
    try:
        records = SearchAggregator(config).run()
    except SearchAborted as e:
        render_records(e.records, sink, config)
        raise
    render_records(records, sink, config)


if __name__ == '__main__':
    cli()
