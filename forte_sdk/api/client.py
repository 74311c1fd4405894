"""
Forte API Client - Main facade for all API operations.

``create_api`` validates credentials, scope and options, then returns a
ForteAPIClient bound to that scope. Resource accessors are exposed as
domain-specific sub-clients (``client.organizations``,
``client.locations``...). Every public method validates its arguments
synchronously and returns a Future for the network call.
"""

import logging
from concurrent.futures import Future
from typing import Any, Mapping, Optional

from ..config import ForteConfig
from ..events import AuthCallback, EventRegistry
from ..paths import ApiPaths
from ..scope import (
    ClientOptions,
    Credentials,
    Scope,
    merge_options,
    to_credentials,
    to_scope,
)
from ..validators import validate_args
from ._http import ApiResult, HTTPClient, TransportSettings
from .composite import CompositeAPI
from .content import ContentAPI
from .experience import ExperienceAPI
from .locations import LocationsAPI
from .organizations import OrganizationsAPI

logger = logging.getLogger(__name__)


class ForteAPIClient:
    """
    Client for the Forte content platform, bound to one scope.

    Usage:
        client = create_api({"bearer_token": "..."}, {"hostname": "h", "trunk": "acme"})
        client.on("auth", lambda err, result: ...)
        orgs = client.organizations.get_many({"status": "active"}).result()

        store = client.with_branch("store-42")
        locations = store.locations.get_many().result()
    """

    def __init__(
        self,
        credentials: Credentials,
        scope: Scope,
        options: ClientOptions,
        settings: Optional[TransportSettings] = None,
    ):
        """
        Initialize the client from already validated values.

        Prefer ``create_api``, which validates raw input first.
        """
        self._credentials = credentials
        self._scope = scope
        self._options = options
        self._settings = settings or TransportSettings()
        self._events = EventRegistry(["auth"])

        self._http = HTTPClient(
            scope.hostname,
            credentials,
            options.url,
            on_auth=self._dispatch_auth,
            fingerprinting_enabled=options.fingerprinting_enabled,
            settings=self._settings,
        )

        # Domain-specific API modules
        self.organizations = OrganizationsAPI(self._http)
        self.locations = LocationsAPI(self._http, scope)
        self.content = ContentAPI(self._http, scope)
        self.composite = CompositeAPI(self._http, scope)
        self.experience = ExperienceAPI(self._http)

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def http(self) -> HTTPClient:
        return self._http

    def get_scope(self) -> Scope:
        """Get the scope this client is bound to."""
        return self._scope

    def with_branch(self, branch_id: Any) -> "ForteAPIClient":
        """
        Return a new client scoped to ``branch_id``.

        The new client shares credentials, options and transport settings,
        and gets its own session and event subscriptions. This client's
        scope is left unchanged.

        Raises:
            InvalidArgumentError: If ``branch_id`` is None
        """
        validate_args("with_branch", branch_id)
        new_scope = self._scope.derive(branch_id)
        logger.debug(f"Deriving client for branch {branch_id!r} of trunk {self._scope.trunk!r}")
        return ForteAPIClient(self._credentials, new_scope, self._options, self._settings)

    # ========== Events ==========

    def on(self, name: str, callback: AuthCallback) -> None:
        """
        Subscribe to an event.

        ``auth`` handlers receive ``(error, result)`` after every
        authentication exchange, in subscription order.
        """
        validate_args("on", name, callback)
        self._events.subscribe(name, callback)

    def off(self, name: str, callback: AuthCallback) -> bool:
        """Unsubscribe a handler. Returns False if it was not subscribed."""
        validate_args("off", name, callback)
        return self._events.unsubscribe(name, callback)

    def _dispatch_auth(self, error: Optional[Exception], result: Any) -> None:
        self._events.emit("auth", error, result)

    # ========== Developer log ==========

    def log(
        self,
        level: str,
        message: str,
        meta: Optional[Mapping[str, Any]] = None
    ) -> "Future[ApiResult]":
        """
        Send a log entry to the developer log.

        Args:
            level: One of trace, debug, info, warn, error, fatal
            message: Non-blank message
            meta: Optional mapping of extra fields
        """
        validate_args("log", level, message, meta)
        data = {"level": level, "message": message}
        if meta is not None:
            data["meta"] = dict(meta)
        return self._http.post(ApiPaths.log, data=data)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "ForteAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ForteAPIClient(scope={self._scope!r}, url={self._options.url!r})"


def create_api(
    credentials: Any,
    scope: Any,
    options: Any = None,
    settings: Optional[TransportSettings] = None,
) -> ForteAPIClient:
    """
    Create a client after validating its inputs.

    Args:
        credentials: ``{"bearer_token": ...}`` or
            ``{"private_key": ..., "public_key": ...}`` (or the typed forms)
        scope: ``{"hostname": ..., "trunk": ..., "branch": ...}`` or a Scope;
            ``branch`` is optional
        options: Optional ``{"url": ..., "fingerprinting_enabled": ...}``,
            merged over the defaults
        settings: Optional transport tuning

    Raises:
        InvalidArgumentError: If any input is malformed
    """
    validate_args("create_api", credentials, scope, options)
    return ForteAPIClient(
        to_credentials(credentials),
        to_scope(scope),
        merge_options(options),
        settings,
    )


def create_api_from_config(config: ForteConfig, branch: Optional[str] = None) -> ForteAPIClient:
    """
    Create a client from stored configuration.

    Args:
        config: Loaded configuration
        branch: Optional branch overriding the configured one
    """
    scope = config.scope()
    if branch:
        scope["branch"] = branch
    settings = TransportSettings(
        timeout=config.timeout,
        max_retries=config.max_retries,
        verify_ssl=config.verify_ssl,
        max_workers=config.max_workers,
    )
    return create_api(config.credentials(), scope, config.options(), settings)
