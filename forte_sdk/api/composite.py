"""
Composite API - Multi-resource queries in one round trip.
"""

from concurrent.futures import Future
from typing import Any, Mapping

from ..paths import ApiPaths
from ..scope import Scope
from ..validators import validate_args
from ._http import ApiResult, HTTPClient


class CompositeAPI:
    """API for composite queries against the current branch."""

    def __init__(self, http: HTTPClient, scope: Scope):
        self._http = http
        self._scope = scope

    def query(self, query: Mapping[str, Any]) -> "Future[ApiResult]":
        """
        Run a composite query.

        Args:
            query: Non-empty mapping describing the resources to fetch

        Returns:
            Future resolving to the combined result
        """
        validate_args("composite.query", self._scope, query)
        return self._http.post(ApiPaths.composite.query(self._scope), data={"query": dict(query)})
