"""Main CLI entry point for release-contributors."""

import logging
import sys

import click

from .. import __version__
from ..config import get_config, create_sample_config
from ..git import GitClient
from .generate import generate


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--github-token', help='GitHub token for API access (or GITHUB_TOKEN / GH_TOKEN)')
@click.option('--config-file', '-c', help='Path to JSON configuration file')
@click.option('--repo', 'repo_path', help='Path to the git repository (default: current directory)')
@click.version_option(version=__version__, prog_name="release-contributors")
@click.pass_context
def cli(ctx, debug, github_token, config_file, repo_path):
    """Generate contributor credits for releases from git history."""

    # Diagnostics go to stderr, the report itself to stdout
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    ctx.ensure_object(dict)
    ctx.obj['config_file'] = config_file
    ctx.obj['global_overrides'] = {
        'github_token': github_token,
        'repo_path': repo_path,
    }
    ctx.obj['logger'] = logging.getLogger('release_contributors')


def build_config(ctx, **overrides):
    """Build the run configuration: config file < environment < flags."""
    merged = dict(ctx.obj['global_overrides'])
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return get_config(ctx.obj['config_file'], **merged)
    except ValueError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def tags(ctx):
    """List release tags, newest first."""
    config = build_config(ctx)
    git_client = GitClient(config.repo_path, ctx.obj['logger'])

    release_tags = git_client.list_tags()
    if not release_tags:
        click.echo("No tags found in repository", err=True)
        sys.exit(1)

    for tag in release_tags:
        click.echo(tag)


@cli.command()
@click.option('--path', '-p', default='release-contributors.json', help='Path for the config file')
def init_config(path):
    """Create a sample configuration file."""
    try:
        create_sample_config(path)
    except OSError as e:
        click.echo(f"Error creating config file: {e}", err=True)
        sys.exit(1)
    click.echo(f"Sample configuration file created at: {path}")
    click.echo("Please edit the file and add your GitHub token.")


@cli.command()
def version():
    """Show version information."""
    click.echo(f"release-contributors version {__version__}")


cli.add_command(generate)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
