"""
URL path templates for the Forte API.

Routes:

    Organizations:
        get_many:   /organizations/
        get_one:    /organizations/{id}

    Locations:
        get_many:   /forte/organizations/{trunk}/{branch}/locations/
        get_one:    /forte/organizations/{trunk}/{branch}/locations/{id}

    Content:
        get_many:   /forte/{trunk}/{branch}/content/{type}/
        get_one:    /forte/{trunk}/{branch}/content/{type}/{id}

    Composite:
        query:      /forte/composite/{trunk}/{branch}/

    Experience:
        session:    /session/check
        bootstrap:  /forte/bootstrap/{id}

Values are concatenated as given; callers pass URL-safe identifiers.
Trailing slashes are significant.
"""

from typing import Any, Mapping, Tuple, Union

from .scope import Scope

ScopeLike = Union[Scope, Mapping[str, Any]]


def _trunk_branch(scope: ScopeLike) -> Tuple[Any, Any]:
    if isinstance(scope, Mapping):
        return scope.get("trunk"), scope.get("branch")
    return scope.trunk, scope.branch


class _OrganizationPaths:
    @staticmethod
    def get_many(filter: Any = None) -> str:
        return "/organizations/"

    @staticmethod
    def get_one(org_id: str) -> str:
        return f"/organizations/{org_id}"


class _LocationPaths:
    @staticmethod
    def get_many(scope: ScopeLike) -> str:
        trunk, branch = _trunk_branch(scope)
        return f"/forte/organizations/{trunk}/{branch}/locations/"

    @staticmethod
    def get_one(scope: ScopeLike, location_id: str) -> str:
        trunk, branch = _trunk_branch(scope)
        return f"/forte/organizations/{trunk}/{branch}/locations/{location_id}"


class _ContentPaths:
    @staticmethod
    def get_many(scope: ScopeLike, content_type: str) -> str:
        trunk, branch = _trunk_branch(scope)
        return f"/forte/{trunk}/{branch}/content/{content_type}/"

    @staticmethod
    def get_one(scope: ScopeLike, content_type: str, content_id: str) -> str:
        trunk, branch = _trunk_branch(scope)
        return f"/forte/{trunk}/{branch}/content/{content_type}/{content_id}"


class _CompositePaths:
    @staticmethod
    def query(scope: ScopeLike) -> str:
        trunk, branch = _trunk_branch(scope)
        return f"/forte/composite/{trunk}/{branch}/"


class _ExperiencePaths:
    @staticmethod
    def session() -> str:
        return "/session/check"

    @staticmethod
    def bootstrap(experience_id: str) -> str:
        return f"/forte/bootstrap/{experience_id}"


class ApiPaths:
    """Namespace of path builders, grouped by resource."""

    log = "/developer/log"
    auth = "/auth/token"
    organizations = _OrganizationPaths
    locations = _LocationPaths
    content = _ContentPaths
    composite = _CompositePaths
    experience = _ExperiencePaths
