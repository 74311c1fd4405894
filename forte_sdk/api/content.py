"""
Content API - Typed content items of the scoped branch.
"""

from concurrent.futures import Future
from typing import Any, Mapping, Optional

from ..paths import ApiPaths
from ..scope import Scope
from ..validators import validate_args
from ._http import ApiResult, HTTPClient


class ContentAPI:
    """
    API for content items.

    Content is grouped by type (e.g. ``product``, ``banner``) under the
    current branch.
    """

    def __init__(self, http: HTTPClient, scope: Scope):
        self._http = http
        self._scope = scope

    def get_many(
        self,
        content_type: str,
        filter: Optional[Mapping[str, Any]] = None
    ) -> "Future[ApiResult]":
        """
        List content items of one type.

        Args:
            content_type: Content type name
            filter: Optional query parameters
        """
        validate_args("content.get_many", self._scope, content_type, filter)
        params = dict(filter) if filter else None
        return self._http.get(
            ApiPaths.content.get_many(self._scope, content_type),
            params=params
        )

    def get_one(self, content_type: str, content_id: str) -> "Future[ApiResult]":
        """Get a single content item."""
        validate_args("content.get_one", self._scope, content_type, content_id)
        return self._http.get(ApiPaths.content.get_one(self._scope, content_type, content_id))
