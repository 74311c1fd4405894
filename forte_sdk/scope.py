"""
Value types describing who is calling and where requests are scoped.

A Scope is the (hostname, trunk, branch) triple every resource path is
built from. Scopes are frozen; narrowing to a branch returns a new value.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional, Union

DEFAULT_API_URL = "https://api.powerchord.io"


@dataclass(frozen=True)
class BearerCredentials:
    """Pre-issued bearer token."""

    bearer_token: str

    def as_dict(self) -> Dict[str, Any]:
        return {"bearer_token": self.bearer_token}


@dataclass(frozen=True)
class KeyPairCredentials:
    """Developer key pair, exchanged for a bearer token on first use."""

    private_key: str
    public_key: str

    def as_dict(self) -> Dict[str, Any]:
        return {"private_key": self.private_key, "public_key": self.public_key}


Credentials = Union[BearerCredentials, KeyPairCredentials]


@dataclass(frozen=True)
class Scope:
    """Organization scope of a client.

    ``trunk`` is the top-level organization, ``branch`` an optional
    sub-organization nested under it.
    """

    hostname: str
    trunk: str
    branch: Optional[str] = None

    def derive(self, branch: Any) -> "Scope":
        """Return a copy of this scope bound to ``branch``.

        The parent is left untouched. ``branch`` is not re-checked here.
        """
        return replace(self, branch=branch)

    @property
    def has_branch(self) -> bool:
        return self.branch is not None

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.branch is None:
            data.pop("branch")
        return data


@dataclass(frozen=True)
class ClientOptions:
    """Client options, already merged over the defaults."""

    url: str = DEFAULT_API_URL
    fingerprinting_enabled: bool = True

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_OPTIONS = ClientOptions()


def to_credentials(value: Any) -> Credentials:
    """Convert validated credentials (mapping or typed) to a typed value."""
    if isinstance(value, (BearerCredentials, KeyPairCredentials)):
        return value
    if value.get("bearer_token") is not None:
        return BearerCredentials(value["bearer_token"])
    return KeyPairCredentials(value["private_key"], value["public_key"])


def to_scope(value: Any) -> Scope:
    """Convert a validated scope (mapping or typed) to a Scope."""
    if isinstance(value, Scope):
        return value
    return Scope(
        hostname=value["hostname"],
        trunk=value["trunk"],
        branch=value.get("branch"),
    )


def merge_options(value: Any) -> ClientOptions:
    """Merge validated options over DEFAULT_OPTIONS."""
    if value is None:
        return DEFAULT_OPTIONS
    if isinstance(value, ClientOptions):
        # None on a typed value falls back to the default
        return replace(DEFAULT_OPTIONS, **{k: v for k, v in asdict(value).items() if v is not None})
    return replace(DEFAULT_OPTIONS, **{k: v for k, v in value.items() if k in ("url", "fingerprinting_enabled")})
