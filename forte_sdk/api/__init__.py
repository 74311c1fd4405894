"""
Forte API Client Package.

Structure:
    - client.py: ForteAPIClient facade and the create_api factory
    - _http.py: Base HTTP client with session, auth, and error handling
    - organizations.py: Organization lookups
    - locations.py: Branch locations
    - content.py: Typed content items
    - composite.py: Composite queries
    - experience.py: Session and bootstrap data

Usage:
    from forte_sdk.api import create_api

    client = create_api({"bearer_token": "..."}, {"hostname": "h", "trunk": "acme"})
    org = client.organizations.get_one("acme").result()
"""

from .client import ForteAPIClient, create_api, create_api_from_config
from ._http import ApiResult, HTTPClient, TransportSettings
from .organizations import OrganizationsAPI
from .locations import LocationsAPI
from .content import ContentAPI
from .composite import CompositeAPI
from .experience import ExperienceAPI

__all__ = [
    # Main client
    "ForteAPIClient",
    "create_api",
    "create_api_from_config",
    # HTTP layer
    "HTTPClient",
    "ApiResult",
    "TransportSettings",
    # Domain APIs
    "OrganizationsAPI",
    "LocationsAPI",
    "ContentAPI",
    "CompositeAPI",
    "ExperienceAPI",
]
