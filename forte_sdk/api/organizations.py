"""
Organizations API - Organization lookups.
"""

from concurrent.futures import Future
from typing import Any, Dict, Mapping

from ..paths import ApiPaths
from ..validators import validate_args
from ._http import ApiResult, HTTPClient


class OrganizationsAPI:
    """
    API for organization lookups.

    Organizations are addressed globally, independent of the client scope.
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Organizations API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def get_many(self, filter: Mapping[str, Any]) -> "Future[ApiResult]":
        """
        List organizations matching ``filter``.

        Args:
            filter: Non-empty mapping of query parameters

        Raises:
            InvalidArgumentError: If ``filter`` is empty or not a mapping
        """
        validate_args("organizations.get_many", filter)
        params: Dict[str, Any] = dict(filter)
        return self._http.get(ApiPaths.organizations.get_many(filter), params=params)

    def get_one(self, org_id: str) -> "Future[ApiResult]":
        """Get a single organization by id."""
        validate_args("organizations.get_one", org_id)
        return self._http.get(ApiPaths.organizations.get_one(org_id))
