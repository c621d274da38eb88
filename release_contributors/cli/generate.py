"""Generate command implementation."""

import os
import sys

import click

from ..contributors import (
    generate_for_release,
    generate_for_all_releases,
    resolve_release_range,
)
from ..contributors.sorter import SORT_KEYS
from ..errors import ContributorsError, NoOutputError
from ..git import GitClient
from ..models import FORMATS, FORMAT_MARKDOWN


@click.command()
@click.option('--tag', '-t', help='Generate contributors for a specific tag (default: latest)')
@click.option('--all', 'all_releases', is_flag=True, help='Generate contributors for all releases')
@click.option('--format', '-f', 'fmt', type=click.Choice(FORMATS), default=FORMAT_MARKDOWN,
              show_default=True, help='Output format')
@click.option('--detailed', is_flag=True, help='Detailed contributor list instead of avatar badges')
@click.option('--output', '-o', help='Write output to file instead of stdout')
@click.option('--include-email/--no-include-email', default=None, help='Show contributor emails')
@click.option('--avatar/--no-avatar', 'include_avatar', default=None, help='Show contributor avatars')
@click.option('--sort-by', type=click.Choice(SORT_KEYS, case_sensitive=False), help='Sort order')
@click.pass_context
def generate(ctx, tag, all_releases, fmt, detailed, output, include_email, include_avatar, sort_by):
    """Generate the contributors section for one or all releases."""

    # Import here to avoid circular dependency
    from .main import build_config

    if tag and all_releases:
        click.echo("Error: --tag and --all cannot be used together", err=True)
        sys.exit(1)

    config = build_config(
        ctx,
        include_email=include_email,
        include_avatar=include_avatar,
        sort_by=sort_by,
    )
    logger = ctx.obj['logger']
    git_client = GitClient(config.repo_path, logger)

    try:
        if all_releases:
            result = generate_for_all_releases(git_client, config, fmt, detailed)
        else:
            release_range = resolve_release_range(git_client.list_tags(), tag)
            result = generate_for_release(
                git_client, config, release_range.tag, release_range.previous_tag, fmt, detailed
            )

        if not result:
            raise NoOutputError()
    except ContributorsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output:
        output_path = os.path.abspath(output)
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(result)
        except OSError as e:
            click.echo(f"Error writing to file {output_path}: {e}", err=True)
            sys.exit(1)
        click.echo(f"Output written to: {output_path}", err=True)
    else:
        click.echo(result)
