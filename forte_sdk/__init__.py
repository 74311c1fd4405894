"""
Forte SDK - Python client for the Forte content platform.

Authenticates a caller, scopes requests to an organization/branch hierarchy
and exposes resource accessors (organizations, locations, content,
composite queries, logging).

Usage:
    from forte_sdk import create_api

    client = create_api(
        {"bearer_token": "..."},
        {"hostname": "shop.example.com", "trunk": "acme"},
    )
    orgs = client.organizations.get_many({"status": "active"}).result()
"""

__version__ = "1.2.0"
__prog_name__ = "forte"

from .api import ForteAPIClient, create_api, create_api_from_config  # noqa: E402
from .exceptions import ForteError, InvalidArgumentError  # noqa: E402
from .scope import BearerCredentials, ClientOptions, KeyPairCredentials, Scope  # noqa: E402

__all__ = [
    "__version__",
    "create_api",
    "create_api_from_config",
    "ForteAPIClient",
    "ForteError",
    "InvalidArgumentError",
    "BearerCredentials",
    "KeyPairCredentials",
    "ClientOptions",
    "Scope",
]
