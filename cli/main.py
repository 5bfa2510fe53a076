"""
Main CLI entry point for PageSift.
"""

import click

from pagesift.config.settings import Config
from pagesift.utils.logging import setup_logging
from .search import search_cmd, history_cmd


@click.group()
@click.option('--data-dir', '-d', help='Data directory path')
@click.option('--log-level', '-l', default='WARNING', help='Logging level')
@click.option('--log-file', help='Log file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, data_dir, log_level, log_file, verbose):
   """PageSift - find the most relevant passages of a web page"""

   if verbose:
       log_level = 'DEBUG'

   setup_logging(log_level=log_level, log_file=log_file)

   config = Config(data_dir=data_dir)

   # Store config in context for subcommands
   ctx.ensure_object(dict)
   ctx.obj['config'] = config


@cli.command()
@click.pass_context
def version(ctx):
   """Show version information."""
   from pagesift import __version__

   click.echo(f"PageSift version {__version__}")


@cli.command()
@click.pass_context
def status(ctx):
   """Show PageSift configuration and storage status."""
   config = ctx.obj['config']

   click.echo("PageSift Status:")
   for key, value in config.to_dict().items():
       click.echo(f"  {key}: {value}")
   click.echo()

   if config.db_file.exists():
       click.echo(f"  Database: ✓ {config.db_file}")
   else:
       click.echo("  Database: ✗ Not found")


cli.add_command(search_cmd, name='search')
cli.add_command(history_cmd, name='history')


def main():
   """Main entry point for the CLI."""
   cli()


if __name__ == '__main__':
   main()
