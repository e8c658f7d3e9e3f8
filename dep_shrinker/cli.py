"""Command-line interface for the dependency shrinker."""

import logging
import sys
import click
from typing import Optional

from .core.classifier import classify
from .core.shrinker import DependencyShrinker
from .config.config_manager import ConfigManager
from .exceptions import DependencyShrinkerError
from .reporters.summary_reporter import SummaryReporter


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _create_shrinker(ctx, project_dir: Optional[str], modules_dir: Optional[str]) -> DependencyShrinker:
    """Build a shrinker and configure logging from CLI options or config."""
    shrinker = DependencyShrinker(ctx.obj.get('config_path'), project_dir=project_dir,
                                  modules_dir=modules_dir)
    logging_config = shrinker.config_manager.get_logging_config()
    setup_logging(ctx.obj.get('log_level') or logging_config['level'],
                  ctx.obj.get('log_file') or logging_config['file'])
    return shrinker


target_options = [
    click.option('--project-dir', '-p', type=click.Path(file_okay=False),
                 help='Project directory containing the dependency tree'),
    click.option('--modules-dir', '-m',
                 help='Dependency directory relative to the project (default: node_modules)'),
    click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
                 help='Summary format'),
]


def with_target_options(func):
    for option in reversed(target_options):
        func = option(func)
    return func


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Dependency Shrinker - Strip and minify installed dependencies."""
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path
    ctx.obj['log_level'] = log_level
    ctx.obj['log_file'] = log_file


@cli.command()
@with_target_options
@click.pass_context
def run(ctx, project_dir: Optional[str], modules_dir: Optional[str], output: str):
    """Reinstall production dependencies and shrink them."""
    try:
        shrinker = _create_shrinker(ctx, project_dir, modules_dir)
        stats = shrinker.run()
    except (DependencyShrinkerError, ValueError, OSError) as e:
        click.echo(f"Error during shrink: {e}", err=True)
        sys.exit(1)

    click.echo(SummaryReporter().render(stats, output))


@cli.command()
@with_target_options
@click.pass_context
def shrink(ctx, project_dir: Optional[str], modules_dir: Optional[str], output: str):
    """Shrink an installed dependency tree without reinstalling."""
    try:
        shrinker = _create_shrinker(ctx, project_dir, modules_dir)
        stats = shrinker.shrink()
    except (DependencyShrinkerError, ValueError, OSError) as e:
        click.echo(f"Error during shrink: {e}", err=True)
        sys.exit(1)

    click.echo(SummaryReporter().render(stats, output))


@cli.command(name='classify')
@click.argument('names', nargs=-1, required=True)
def classify_names(names):
    """Show what would be done with files of the given names."""
    width = max(len(name) for name in names)
    for name in names:
        click.echo(f"{name.ljust(width)}  {classify(name).value}")


@cli.command()
@click.pass_context
def validate_config(ctx):
    """Validate configuration file."""
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)

    if config_manager.loaded_from:
        click.echo(f"Configuration loaded from {config_manager.loaded_from}")
    else:
        click.echo("No configuration file found, using defaults")

    target = config_manager.get_target_config()
    installer = config_manager.get_installer_config()
    minifier = config_manager.get_minifier_config()

    click.echo(f"  Project directory: {target['project_dir']}")
    click.echo(f"  Modules directory: {target['modules_dir']}")
    click.echo(f"  Install command: {' '.join(installer['command'])}")
    click.echo(f"  Minifier command: {' '.join(minifier['command'])} (ecma {minifier['ecma']})")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
