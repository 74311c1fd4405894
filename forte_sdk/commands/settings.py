"""
Configuration/settings commands for the Forte CLI.

Commands:
- configure: Configure CLI settings
- config-clear: Clear all configuration
- scope: Show the effective scope
"""

import sys
from typing import Optional

import click

from ..api import create_api_from_config
from ..config import DEFAULT_API_URL
from ..exceptions import ForteError
from . import (
    ForteContext,
    OutputFormat,
    common_options,
    pass_context,
    print_error,
    print_info,
    print_json,
    print_success,
    require_config,
    setup_logging,
)


def _mask(secret: str) -> str:
    if not secret:
        return "(not set)"
    return secret[:4] + "*" * 12 if len(secret) > 8 else "*" * 8


def register_settings_commands(cli: click.Group) -> None:
    """Register configuration commands with the CLI."""

    @cli.command('configure')
    @click.option('--url', help=f'API base URL (default: {DEFAULT_API_URL})')
    @click.option('--hostname', help='Hostname of the calling site')
    @click.option('--trunk', help='Trunk organization id')
    @click.option('--branch', help='Branch organization id')
    @click.option('--token', help='Bearer token')
    @click.option('--private-key', help='Developer private key')
    @click.option('--public-key', help='Developer public key')
    @click.option('--timeout', '-t', type=int, help='Request timeout in seconds')
    @click.option(
        '--max-retries',
        type=int,
        help='Max retries for transient errors (0 to disable)'
    )
    @click.option('--no-verify-ssl', is_flag=True, help='Disable SSL certificate verification')
    @click.option('--no-fingerprinting', is_flag=True, help='Disable client fingerprinting')
    @click.option('--show', is_flag=True, help='Show current configuration')
    @pass_context
    def configure(
        ctx: ForteContext,
        url: Optional[str],
        hostname: Optional[str],
        trunk: Optional[str],
        branch: Optional[str],
        token: Optional[str],
        private_key: Optional[str],
        public_key: Optional[str],
        timeout: Optional[int],
        max_retries: Optional[int],
        no_verify_ssl: bool,
        no_fingerprinting: bool,
        show: bool
    ):
        """
        Configure Forte CLI settings.

        \b
        Examples:
          forte configure --hostname shop.example.com --trunk acme --token TOKEN
          forte configure --private-key PRIV --public-key PUB
          forte configure --show
        """
        config_manager = ctx.config_manager

        if show:
            try:
                config = config_manager.get()
            except ForteError as e:
                print_error(str(e), e.details)
                sys.exit(1)
            click.echo("\nCurrent Configuration:")
            click.echo(f"  API URL:         {config.api_url}")
            click.echo(f"  Hostname:        {config.hostname or '(not set)'}")
            click.echo(f"  Trunk:           {config.trunk or '(not set)'}")
            click.echo(f"  Branch:          {config.branch or '(not set)'}")
            click.echo(f"  Bearer Token:    {_mask(config.bearer_token)}")
            click.echo(f"  Public Key:      {_mask(config.public_key)}")
            click.echo(f"  Timeout:         {config.timeout}s")
            click.echo(f"  Max Retries:     {config.max_retries}")
            click.echo(f"  Verify SSL:      {config.verify_ssl}")
            click.echo(f"  Fingerprinting:  {config.fingerprinting_enabled}")
            click.echo(f"  Config Path:     {config_manager.get_config_path()}")
            return

        updates = {}
        if url:
            updates['api_url'] = url
        if hostname:
            updates['hostname'] = hostname
        if trunk:
            updates['trunk'] = trunk
        if branch:
            updates['branch'] = branch
        if token:
            updates['bearer_token'] = token
        if private_key:
            updates['private_key'] = private_key
        if public_key:
            updates['public_key'] = public_key
        if timeout is not None:
            updates['timeout'] = timeout
        if max_retries is not None:
            updates['max_retries'] = max_retries
        if no_verify_ssl:
            updates['verify_ssl'] = False
        if no_fingerprinting:
            updates['fingerprinting_enabled'] = False

        if not updates:
            print_info("Nothing to update. Use --show to view the current configuration.")
            return

        try:
            config_manager.update(**updates)
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)
        print_success(f"Configuration saved to {config_manager.get_config_path()}")

    @cli.command('config-clear')
    @click.confirmation_option(prompt='Clear all Forte configuration?')
    @pass_context
    def config_clear(ctx: ForteContext):
        """Clear all stored configuration."""
        ctx.config_manager.clear()
        print_success("Configuration cleared.")

    @cli.command('scope')
    @common_options
    @click.option('--branch', '-b', help='Narrow the configured scope to this branch')
    @pass_context
    @require_config
    def show_scope(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        branch: Optional[str]
    ):
        """Show the scope requests are made against."""
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)

        try:
            with create_api_from_config(ctx.config_manager.get(), branch=branch) as client:
                scope = client.get_scope().as_dict()
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

        if fmt == OutputFormat.JSON:
            print_json(scope)
        else:
            for key, value in scope.items():
                click.echo(f"  {key.capitalize():<10} {value}")
