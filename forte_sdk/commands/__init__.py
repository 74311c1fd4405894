"""
Command modules for the Forte CLI.

Each module exposes a ``register_*_commands(cli)`` function that attaches
its commands to the main click group.
"""

import sys

import click

from ..config import ConfigManager
from ..exceptions import ConfigurationError
from ..utils import (
    OutputFormat,
    print_error,
    print_info,
    print_json,
    print_success,
    print_table,
    setup_logging,
)


class ForteContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config_manager: ConfigManager = None  # type: ignore[assignment]
        self.verbose: bool = False
        self.quiet: bool = False
        self.output_format: OutputFormat = OutputFormat.TABLE


pass_context = click.make_pass_decorator(ForteContext, ensure=True)


def common_options(f):
    """Common options for all commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice(['table', 'json']),
        default='table',
        help='Output format'
    )(f)
    return f


def require_config(f):
    """Decorator to require valid configuration."""
    @click.pass_context
    def wrapper(click_ctx, *args, **kwargs):
        ctx = click_ctx.ensure_object(ForteContext)
        try:
            config = ctx.config_manager.get()
        except ConfigurationError as e:
            print_error(str(e), e.details)
            sys.exit(1)

        if not config.is_configured():
            print_error(
                "Forte CLI is not configured.",
                "Run 'forte configure' to set credentials, hostname and trunk."
            )
            sys.exit(1)

        return click_ctx.invoke(f, *args, **kwargs)

    return wrapper


__all__ = [
    "ForteContext",
    "pass_context",
    "common_options",
    "require_config",
    "OutputFormat",
    "print_error",
    "print_info",
    "print_json",
    "print_success",
    "print_table",
    "setup_logging",
]
