"""
Resource commands (organizations, locations, content, log) for the Forte CLI.
"""

import sys
from typing import Any, Optional, Tuple

import click

from ..api import create_api_from_config
from ..exceptions import ForteError
from ..utils import extract_items, load_json_argument, parse_filters
from ..validators import LOG_LEVELS
from . import (
    ForteContext,
    OutputFormat,
    common_options,
    pass_context,
    print_error,
    print_json,
    print_success,
    print_table,
    require_config,
    setup_logging,
)

LIST_COLUMNS = ["id", "name", "type"]


def _render(data: Any, fmt: OutputFormat, title: str) -> None:
    if fmt == OutputFormat.JSON:
        print_json(data)
        return

    items = extract_items(data)
    click.echo(f"\n{title} ({len(items)} total):\n")
    rows = [[item.get(col, '-') for col in LIST_COLUMNS] for item in items]
    print_table([col.capitalize() for col in LIST_COLUMNS], rows)


def _parse_filters_or_exit(filters: Tuple[str, ...]) -> Optional[dict]:
    try:
        return parse_filters(filters) or None
    except ValueError as e:
        print_error(str(e))
        sys.exit(1)


def register_resource_commands(cli: click.Group) -> None:
    """Register resource commands with the CLI."""

    @cli.group('organizations')
    def organizations():
        """Look up organizations."""

    @organizations.command('list')
    @common_options
    @click.option('--filter', '-F', 'filters', multiple=True, help='Filter as key=value (repeatable)')
    @pass_context
    @require_config
    def list_organizations(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        filters: Tuple[str, ...]
    ):
        """
        List organizations matching a filter.

        \b
        Examples:
          forte organizations list -F status=active
          forte organizations list -F parent=acme --format json
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        filter_map = _parse_filters_or_exit(filters)

        try:
            with create_api_from_config(ctx.config_manager.get()) as client:
                result = client.organizations.get_many(filter_map).result()
                _render(result.data, fmt, "Organizations")
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

    @organizations.command('get')
    @common_options
    @click.argument('org_id')
    @pass_context
    @require_config
    def get_organization(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        org_id: str
    ):
        """Get a single organization."""
        setup_logging(verbose, quiet)

        try:
            with create_api_from_config(ctx.config_manager.get()) as client:
                result = client.organizations.get_one(org_id).result()
                print_json(result.data)
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

    @cli.group('locations')
    def locations():
        """Browse locations of a branch."""

    @locations.command('list')
    @common_options
    @click.option('--branch', '-b', help='Branch to query (defaults to the configured one)')
    @click.option('--filter', '-F', 'filters', multiple=True, help='Filter as key=value (repeatable)')
    @pass_context
    @require_config
    def list_locations(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        branch: Optional[str],
        filters: Tuple[str, ...]
    ):
        """List locations of a branch."""
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        filter_map = _parse_filters_or_exit(filters)

        try:
            with create_api_from_config(ctx.config_manager.get(), branch=branch) as client:
                result = client.locations.get_many(filter_map).result()
                _render(result.data, fmt, "Locations")
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

    @locations.command('get')
    @common_options
    @click.argument('location_id')
    @click.option('--branch', '-b', help='Branch to query (defaults to the configured one)')
    @pass_context
    @require_config
    def get_location(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        location_id: str,
        branch: Optional[str]
    ):
        """Get a single location."""
        setup_logging(verbose, quiet)

        try:
            with create_api_from_config(ctx.config_manager.get(), branch=branch) as client:
                result = client.locations.get_one(location_id).result()
                print_json(result.data)
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

    @cli.group('content')
    def content():
        """Browse content items of a branch."""

    @content.command('list')
    @common_options
    @click.argument('content_type')
    @click.option('--branch', '-b', help='Branch to query (defaults to the configured one)')
    @click.option('--filter', '-F', 'filters', multiple=True, help='Filter as key=value (repeatable)')
    @pass_context
    @require_config
    def list_content(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        content_type: str,
        branch: Optional[str],
        filters: Tuple[str, ...]
    ):
        """
        List content items of one type.

        \b
        Examples:
          forte content list product
          forte content list banner --branch store-42 -F placement=home
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        filter_map = _parse_filters_or_exit(filters)

        try:
            with create_api_from_config(ctx.config_manager.get(), branch=branch) as client:
                result = client.content.get_many(content_type, filter_map).result()
                _render(result.data, fmt, f"Content '{content_type}'")
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

    @content.command('get')
    @common_options
    @click.argument('content_type')
    @click.argument('content_id')
    @click.option('--branch', '-b', help='Branch to query (defaults to the configured one)')
    @pass_context
    @require_config
    def get_content(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        content_type: str,
        content_id: str,
        branch: Optional[str]
    ):
        """Get a single content item."""
        setup_logging(verbose, quiet)

        try:
            with create_api_from_config(ctx.config_manager.get(), branch=branch) as client:
                result = client.content.get_one(content_type, content_id).result()
                print_json(result.data)
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

    @cli.command('log')
    @common_options
    @click.argument('level', type=click.Choice(LOG_LEVELS))
    @click.argument('message')
    @click.option('--meta', help='Extra fields as a JSON object')
    @pass_context
    @require_config
    def send_log(
        ctx: ForteContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        level: str,
        message: str,
        meta: Optional[str]
    ):
        """
        Send an entry to the developer log.

        \b
        Examples:
          forte log info "Kiosk started"
          forte log error "Sync failed" --meta '{"attempt": 3}'
        """
        setup_logging(verbose, quiet)

        try:
            meta_map = load_json_argument(meta)
        except ValueError as e:
            print_error(f"Invalid --meta: {e}")
            sys.exit(1)

        try:
            with create_api_from_config(ctx.config_manager.get()) as client:
                client.log(level, message, meta_map).result()
        except ForteError as e:
            print_error(str(e), e.details)
            sys.exit(1)

        if not quiet:
            print_success("Log entry sent.")
