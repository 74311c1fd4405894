"""
Shared fixtures for Forte SDK tests.
"""

import json
from typing import Any, Optional

import pytest
import requests


VALID_HOSTNAME = "shop.example.com"


def make_response(
    status_code: int = 200,
    body: Optional[Any] = None,
    method: str = "GET",
    url: str = "https://api.powerchord.io/",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    response.url = url
    response.request = requests.Request(method, url).prepare()
    return response


@pytest.fixture
def token_creds():
    return {"bearer_token": "valid"}


@pytest.fixture
def key_creds():
    return {"private_key": "valid", "public_key": "valid"}


@pytest.fixture
def trunk_scope():
    return {"hostname": VALID_HOSTNAME, "trunk": "valid"}


@pytest.fixture
def branch_scope():
    return {"hostname": VALID_HOSTNAME, "trunk": "valid", "branch": "valid"}


@pytest.fixture
def isolated_env(monkeypatch):
    """Remove FORTE_* variables so config tests see only their own input."""
    for name in [
        "FORTE_API_URL", "FORTE_HOSTNAME", "FORTE_TRUNK", "FORTE_BRANCH",
        "FORTE_BEARER_TOKEN", "FORTE_PRIVATE_KEY", "FORTE_PUBLIC_KEY",
        "FORTE_TIMEOUT", "FORTE_CONFIG_DIR",
    ]:
        monkeypatch.delenv(name, raising=False)
