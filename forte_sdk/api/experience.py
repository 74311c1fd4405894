"""
Experience API - Session checks and experience bootstrap data.
"""

from concurrent.futures import Future

from ..paths import ApiPaths
from ..validators import validate_args
from ._http import ApiResult, HTTPClient


class ExperienceAPI:
    """API for experience sessions."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def session(self) -> "Future[ApiResult]":
        """Check the current session."""
        return self._http.get(ApiPaths.experience.session())

    def bootstrap(self, experience_id: str) -> "Future[ApiResult]":
        """Fetch bootstrap data for an experience."""
        validate_args("experience.bootstrap", experience_id)
        return self._http.get(ApiPaths.experience.bootstrap(experience_id))
