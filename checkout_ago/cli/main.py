"""Main CLI entry point for checkout-ago."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..core.checkout_engine import CheckoutEngine
from ..core.config import ConfigManager
from ..core.errors import CheckoutAgoError, ConfigError, UsageError
from ..core.git_runner import GitRunner, find_repository_root


logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  checkout-ago 2d
  checkout-ago "3 hours" --print
  checkout-ago 1w --show"""


def setup_logging(level: int) -> None:
    """Send checkout-ago's log records to stderr through rich."""
    package_logger = logging.getLogger("checkout_ago")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
    package_logger.setLevel(level)


def fail(message: str) -> None:
    click.echo(f"error: {message}", err=True)
    sys.exit(1)


@click.command(
    context_settings={'help_option_names': ['-h', '--help']},
    epilog="\b\n" + EXAMPLES,
)
@click.argument('ago', metavar='TIME', required=False)
@click.option('--print', '--show', '--dry-run', 'print_only', is_flag=True,
              help='Only print where you are and where you would jump to')
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False),
              help='Path to configuration file')
@click.option('--project-root', '-p', type=click.Path(exists=True, file_okay=False),
              help='Directory inside the repository (defaults to the current directory)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.version_option(__version__, prog_name='checkout-ago')
@click.pass_context
def cli(ctx: click.Context, ago: Optional[str], print_only: bool, config: Optional[str],
        project_root: Optional[str], verbose: bool):
    """Check out the most recent git commit before a given time.

    TIME is how far back to go, e.g. "2 days", 2d, 3h or 1w.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        if ago is None:
            raise UsageError("missing TIME argument")

        repo_root = find_repository_root(Path(project_root) if project_root else None)

        config_manager = ConfigManager(repo_root)
        config_data = config_manager.load_config(Path(config) if config else None)
        validation_errors = config_manager.validate_config(config_data)
        if validation_errors:
            raise ConfigError(validation_errors)

        if not verbose:
            setup_logging(config_data['logging']['level'].upper())

        git_config = config_data['git']
        runner = GitRunner(repo_root, executable=git_config['executable'])
        engine = CheckoutEngine(runner, reference=git_config['reference'], output=click.echo)

        print_only = print_only or config_data['behavior']['print_only']
        result = engine.run(ago, print_only=print_only)
    except UsageError as e:
        click.echo(f"error: {e}", err=True)
        click.echo(ctx.get_usage(), err=True)
        click.echo("", err=True)
        click.echo(EXAMPLES, err=True)
        sys.exit(1)
    except CheckoutAgoError as e:
        fail(str(e))

    logger.debug(f"Finished, checked out: {result.checked_out}")


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
