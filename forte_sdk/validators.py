"""
Argument validation for public client methods.

Each entry in VALIDATORS checks the raw arguments of one public method and
raises InvalidArgumentError naming the offending field. Validation is
synchronous and always runs before any request is built.

Inputs may be plain mappings or the typed values from ``forte_sdk.scope``.
A key missing from a mapping counts as "not supplied"; a key present with
value ``None`` counts as supplied.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from .exceptions import InvalidArgumentError
from .scope import BearerCredentials, ClientOptions, KeyPairCredentials, Scope

LOG_LEVELS = ["trace", "debug", "info", "warn", "error", "fatal"]

SUPPORTED_EVENTS = ["auth"]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def argument_error(field_path: str, reason: Optional[str] = None) -> None:
    raise InvalidArgumentError(field_path, reason)


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping or typed value, MISSING when absent."""
    if isinstance(obj, Mapping):
        return obj.get(name, MISSING)
    value = getattr(obj, name, MISSING)
    # typed values use None for "not supplied"
    return MISSING if value is None else value


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_invalid_string(value: Any) -> bool:
    """True unless ``value`` is a string with visible content."""
    return not isinstance(value, str) or value.strip() == ""


def is_empty_mapping(value: Any) -> bool:
    return not isinstance(value, Mapping) or len(value) == 0


# ============================================================================
# create_api
# ============================================================================

def verify_credentials(credentials: Any) -> None:
    if credentials is None:
        argument_error("credentials")
    if not isinstance(credentials, (Mapping, BearerCredentials, KeyPairCredentials)):
        argument_error("credentials")

    bearer_token = _field(credentials, "bearer_token")
    if bearer_token is not MISSING:
        if not is_string(bearer_token):
            argument_error("credentials.bearer_token")
        return

    if not is_string(_field(credentials, "private_key")):
        argument_error("credentials.private_key")

    if not is_string(_field(credentials, "public_key")):
        argument_error("credentials.public_key")


def verify_scope(scope: Any) -> None:
    if scope is None or not isinstance(scope, (Mapping, Scope)):
        argument_error("scope")

    if not is_non_empty_string(_field(scope, "hostname")):
        argument_error("scope.hostname")

    if not is_non_empty_string(_field(scope, "trunk")):
        argument_error("scope.trunk")

    branch = _field(scope, "branch")
    if branch is not MISSING and not is_non_empty_string(branch):
        argument_error("scope.branch")


def verify_options(options: Any) -> None:
    # None selects the defaults
    if options is None:
        return
    if not isinstance(options, ClientOptions) and is_empty_mapping(options):
        argument_error("options")

    url = _field(options, "url")
    if url is not MISSING and not is_string(url):
        argument_error("options.url")

    enabled = _field(options, "fingerprinting_enabled")
    if enabled is not MISSING and not isinstance(enabled, bool):
        argument_error("options.fingerprinting_enabled")


def validate_create_api(credentials: Any = None, scope: Any = None, options: Any = None) -> None:
    verify_credentials(credentials)
    verify_scope(scope)
    verify_options(options)


# ============================================================================
# Client methods
# ============================================================================

def validate_with_branch(branch_id: Any = None) -> None:
    # Only a missing id is rejected here; the derived scope is not re-checked.
    if branch_id is None or branch_id is MISSING:
        argument_error("id")


def validate_log(level: Any, message: Any, meta: Any = None) -> None:
    if level not in LOG_LEVELS:
        argument_error(
            "level",
            f'Log level "{level}" is invalid. Use one of: {", ".join(LOG_LEVELS)}',
        )

    if is_invalid_string(message):
        argument_error("message", f'Message "{message}" is invalid.')

    # sent as a field mapping, so sequences are refused
    if meta is not None and not isinstance(meta, Mapping):
        argument_error("meta", f'Meta "{meta}" is invalid.')


def validate_on(name: Any, callback: Any) -> None:
    if name not in SUPPORTED_EVENTS:
        argument_error("name", f'"{name}" is not a supported event.')

    if not callable(callback):
        argument_error("callback", "callback must be a function.")


def validate_organizations_get_many(filter: Any) -> None:
    if is_empty_mapping(filter):
        argument_error("filter")


def validate_organizations_get_one(org_id: Any) -> None:
    if is_invalid_string(org_id):
        argument_error("id")


def _require_branch(scope: Any) -> None:
    if not is_non_empty_string(_field(scope, "branch")):
        argument_error("scope.branch", "This operation requires a scope with a branch.")


def _verify_optional_filter(filter: Any) -> None:
    if filter is not None and is_empty_mapping(filter):
        argument_error("filter")


def validate_locations_get_many(scope: Any, filter: Any = None) -> None:
    _require_branch(scope)
    _verify_optional_filter(filter)


def validate_locations_get_one(scope: Any, location_id: Any) -> None:
    _require_branch(scope)
    if is_invalid_string(location_id):
        argument_error("id")


def validate_content_get_many(scope: Any, content_type: Any, filter: Any = None) -> None:
    _require_branch(scope)
    if is_invalid_string(content_type):
        argument_error("type")
    _verify_optional_filter(filter)


def validate_content_get_one(scope: Any, content_type: Any, content_id: Any) -> None:
    _require_branch(scope)
    if is_invalid_string(content_type):
        argument_error("type")
    if is_invalid_string(content_id):
        argument_error("id")


def validate_composite_query(scope: Any, query: Any) -> None:
    _require_branch(scope)
    if is_empty_mapping(query):
        argument_error("query")


def validate_experience_bootstrap(experience_id: Any) -> None:
    if is_invalid_string(experience_id):
        argument_error("id")


VALIDATORS: Dict[str, Callable[..., None]] = {
    "create_api": validate_create_api,
    "with_branch": validate_with_branch,
    "log": validate_log,
    "on": validate_on,
    "off": validate_on,
    "organizations.get_many": validate_organizations_get_many,
    "organizations.get_one": validate_organizations_get_one,
    "locations.get_many": validate_locations_get_many,
    "locations.get_one": validate_locations_get_one,
    "content.get_many": validate_content_get_many,
    "content.get_one": validate_content_get_one,
    "composite.query": validate_composite_query,
    "experience.bootstrap": validate_experience_bootstrap,
}


def validate_args(method: str, *args: Any) -> None:
    """Run the validator registered for ``method`` against ``args``."""
    try:
        validator = VALIDATORS[method]
    except KeyError:
        raise KeyError(f"No validator registered for {method!r}") from None
    validator(*args)
