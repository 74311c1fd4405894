"""
Forte CLI - Command line access to the Forte content platform.

This module provides the main CLI entry point. Commands live in
``forte_sdk.commands``:
- Configuration management (configure, config-clear, scope)
- Organization, location and content lookups
- Developer log entries
"""

import logging
from pathlib import Path
from typing import Optional

import click

from . import __prog_name__, __version__
from .commands import ForteContext
from .commands.resources import register_resource_commands
from .commands.settings import register_settings_commands
from .config import get_config_manager

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--config-dir',
    type=click.Path(path_type=Path),
    envvar='FORTE_CONFIG_DIR',
    help='Custom configuration directory'
)
@click.pass_context
def cli(ctx, config_dir: Optional[Path]):
    """
    Forte CLI - Query the Forte content platform.

    \b
    Quick Start:
      1. Configure scope:       forte configure --hostname shop.example.com --trunk acme
      2. Add credentials:       forte configure --token TOKEN
      3. List organizations:    forte organizations list -F status=active
      4. Browse content:        forte content list product --branch store-42

    \b
    Environment Variables:
      FORTE_BEARER_TOKEN  - Bearer token
      FORTE_PRIVATE_KEY   - Developer private key
      FORTE_PUBLIC_KEY    - Developer public key
      FORTE_API_URL       - API base URL (default: https://api.powerchord.io)
      FORTE_CONFIG_DIR    - Custom configuration directory
    """
    ctx.ensure_object(ForteContext)
    ctx.obj.config_manager = get_config_manager(config_dir)


register_settings_commands(cli)
register_resource_commands(cli)


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
