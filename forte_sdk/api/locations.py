"""
Locations API - Locations of the scoped branch.
"""

from concurrent.futures import Future
from typing import Any, Mapping, Optional

from ..paths import ApiPaths
from ..scope import Scope
from ..validators import validate_args
from ._http import ApiResult, HTTPClient


class LocationsAPI:
    """
    API for branch locations.

    Requires a client scoped to a branch.
    """

    def __init__(self, http: HTTPClient, scope: Scope):
        self._http = http
        self._scope = scope

    def get_many(self, filter: Optional[Mapping[str, Any]] = None) -> "Future[ApiResult]":
        """List locations of the current branch, optionally filtered."""
        validate_args("locations.get_many", self._scope, filter)
        params = dict(filter) if filter else None
        return self._http.get(ApiPaths.locations.get_many(self._scope), params=params)

    def get_one(self, location_id: str) -> "Future[ApiResult]":
        """Get a single location of the current branch."""
        validate_args("locations.get_one", self._scope, location_id)
        return self._http.get(ApiPaths.locations.get_one(self._scope, location_id))
