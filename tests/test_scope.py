"""
Tests for scope and option values.
"""

import dataclasses

import pytest

from forte_sdk.scope import (
    DEFAULT_API_URL,
    BearerCredentials,
    ClientOptions,
    KeyPairCredentials,
    Scope,
    merge_options,
    to_credentials,
    to_scope,
)


class TestScope:
    """Tests for Scope."""

    def test_derive_returns_new_scope(self):
        """Test derive overwrites branch and leaves the parent alone."""
        parent = Scope(hostname="h", trunk="valid", branch="valid")
        child = parent.derive("branchid")

        assert child == Scope(hostname="h", trunk="valid", branch="branchid")
        assert parent.branch == "valid"
        assert child is not parent

    def test_derive_from_trunk_scope(self):
        assert Scope("h", "t").derive("b").branch == "b"

    def test_frozen(self):
        scope = Scope("h", "t")
        with pytest.raises(dataclasses.FrozenInstanceError):
            scope.branch = "b"  # type: ignore[misc]

    def test_as_dict_omits_missing_branch(self):
        assert Scope("h", "t").as_dict() == {"hostname": "h", "trunk": "t"}
        assert Scope("h", "t", "b").as_dict() == {"hostname": "h", "trunk": "t", "branch": "b"}

    def test_to_scope_from_mapping(self):
        assert to_scope({"hostname": "h", "trunk": "t"}) == Scope("h", "t")


class TestCredentials:
    """Tests for credential conversion."""

    def test_bearer(self):
        assert to_credentials({"bearer_token": "tok"}) == BearerCredentials("tok")

    def test_key_pair(self):
        creds = to_credentials({"private_key": "priv", "public_key": "pub"})
        assert creds == KeyPairCredentials("priv", "pub")

    def test_typed_passthrough(self):
        creds = BearerCredentials("tok")
        assert to_credentials(creds) is creds


class TestOptions:
    """Tests for option merging."""

    def test_defaults(self):
        options = merge_options(None)
        assert options.url == DEFAULT_API_URL == "https://api.powerchord.io"
        assert options.fingerprinting_enabled is True

    def test_partial_override(self):
        options = merge_options({"fingerprinting_enabled": False})
        assert options == ClientOptions(url=DEFAULT_API_URL, fingerprinting_enabled=False)

    def test_unknown_keys_ignored(self):
        assert merge_options({"url": "https://x", "retries": 3}).url == "https://x"

    def test_typed_none_fields_use_defaults(self):
        """Test None fields of a ClientOptions value fall back to the defaults."""
        assert merge_options(ClientOptions(url=None)).url == DEFAULT_API_URL  # type: ignore[arg-type]
        options = merge_options(ClientOptions(url="https://x", fingerprinting_enabled=None))  # type: ignore[arg-type]
        assert options == ClientOptions(url="https://x", fingerprinting_enabled=True)

    def test_typed_values_kept(self):
        options = ClientOptions(url="https://x", fingerprinting_enabled=False)
        assert merge_options(options) == options
