"""
Tests for the base HTTP client.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from forte_sdk.api._http import HTTPClient, TransportSettings, compute_fingerprint
from forte_sdk.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from forte_sdk.scope import BearerCredentials, KeyPairCredentials

from .conftest import make_response


@pytest.fixture
def mock_request():
    with patch.object(requests.Session, "request") as mock:
        mock.return_value = make_response(200, {"ok": True})
        yield mock


def bearer_client(**kwargs) -> HTTPClient:
    return HTTPClient("shop.example.com", BearerCredentials("tok"), "https://api.example.com/", **kwargs)


def key_pair_client(on_auth=None) -> HTTPClient:
    return HTTPClient(
        "shop.example.com",
        KeyPairCredentials("priv", "pub"),
        "https://api.example.com",
        on_auth=on_auth,
    )


class TestSession:
    """Tests for session setup."""

    def test_default_headers(self):
        client = bearer_client()
        headers = client.session.headers
        assert headers["User-Agent"].startswith("forte-sdk/")
        assert headers["Accept"] == "application/json"
        assert headers["X-Forte-Hostname"] == "shop.example.com"
        assert headers["X-Forte-Fingerprint"] == compute_fingerprint("shop.example.com")

    def test_fingerprinting_disabled(self):
        client = bearer_client(fingerprinting_enabled=False)
        assert "X-Forte-Fingerprint" not in client.session.headers

    def test_fingerprint_is_stable(self):
        assert compute_fingerprint("a") == compute_fingerprint("a")
        assert compute_fingerprint("a") != compute_fingerprint("b")

    def test_base_url_trailing_slash_stripped(self):
        assert bearer_client().build_url("/organizations/") == "https://api.example.com/organizations/"

    def test_settings_passed_to_request(self, mock_request):
        client = bearer_client(settings=TransportSettings(timeout=5, verify_ssl=False))
        client.request("GET", "/session/check")
        kwargs = mock_request.call_args.kwargs
        assert kwargs["timeout"] == 5
        assert kwargs["verify"] is False

    def test_close(self):
        client = bearer_client()
        client.session
        client.executor
        client.close()
        assert client._session is None
        assert client._executor is None


class TestRequest:
    """Tests for request handling."""

    def test_success(self, mock_request):
        result = bearer_client().request("GET", "/organizations/", params={"a": 1, "b": None})

        assert result.data == {"ok": True}
        kwargs = mock_request.call_args.kwargs
        assert kwargs["params"] == {"a": 1}
        assert kwargs["headers"] == {"Authorization": "Bearer tok"}

    def test_empty_body(self, mock_request):
        mock_request.return_value = make_response(204)
        result = bearer_client().request("POST", "/developer/log", json_data={"level": "info"})
        assert result.data is None
        assert result.status_code == 204

    @pytest.mark.parametrize("status, error_class", [
        (400, ValidationError),
        (401, AuthenticationError),
        (403, PermissionDeniedError),
        (404, NotFoundError),
        (422, ValidationError),
        (500, APIError),
    ])
    def test_error_mapping(self, mock_request, status, error_class):
        mock_request.return_value = make_response(status, {"message": "nope"})

        with pytest.raises(error_class) as excinfo:
            bearer_client().request("GET", "/organizations/x")

        assert excinfo.value.status_code == status
        assert excinfo.value.result == {"message": "nope"}
        assert "nope" in str(excinfo.value)

    def test_error_list_message(self, mock_request):
        mock_request.return_value = make_response(400, {
            "errors": [{"code": "E1", "message": "bad filter"}, "other"]
        })
        with pytest.raises(ValidationError) as excinfo:
            bearer_client().request("GET", "/organizations/")
        assert "[E1] bad filter; other" in str(excinfo.value)

    @pytest.mark.parametrize("exc, text", [
        (requests.exceptions.ConnectionError("refused"), "Connection failed"),
        (requests.exceptions.Timeout("slow"), "Request timed out"),
        (requests.exceptions.RequestException("boom"), "Request failed"),
    ])
    def test_transport_errors(self, mock_request, exc, text):
        mock_request.side_effect = exc
        with pytest.raises(APIError) as excinfo:
            bearer_client().request("GET", "/organizations/")
        assert text in str(excinfo.value)

    def test_get_returns_future(self, mock_request):
        with bearer_client() as client:
            future = client.get("/organizations/")
            assert future.result().data == {"ok": True}

    def test_post_sends_json(self, mock_request):
        with bearer_client() as client:
            client.post("/developer/log", data={"level": "info"}).result()
        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"level": "info"}


class TestKeyPairAuth:
    """Tests for key-pair authentication."""

    def test_token_exchanged_once(self, mock_request):
        on_auth = MagicMock()
        mock_request.side_effect = [
            make_response(200, {"token": "t1"}, "POST"),
            make_response(200, {"a": 1}),
            make_response(200, {"b": 2}),
        ]
        client = key_pair_client(on_auth)

        client.request("GET", "/organizations/a")
        client.request("GET", "/organizations/b")

        assert mock_request.call_count == 3
        on_auth.assert_called_once()
        error, result = on_auth.call_args.args
        assert error is None
        assert result.data == {"token": "t1"}

    def test_access_token_key_accepted(self, mock_request):
        mock_request.return_value = make_response(200, {"access_token": "t2"}, "POST")
        client = key_pair_client()
        client.authenticate()
        assert client._token == "t2"

    def test_missing_token_is_auth_error(self, mock_request):
        on_auth = MagicMock()
        mock_request.return_value = make_response(200, {"user": "x"}, "POST")

        with pytest.raises(AuthenticationError):
            key_pair_client(on_auth).authenticate()

        error, _ = on_auth.call_args.args
        assert isinstance(error, AuthenticationError)

    def test_server_error_wrapped_as_auth_error(self, mock_request):
        on_auth = MagicMock()
        mock_request.return_value = make_response(500, {"message": "down"}, "POST")

        with pytest.raises(AuthenticationError) as excinfo:
            key_pair_client(on_auth).authenticate()

        assert excinfo.value.status_code == 500
        error, response = on_auth.call_args.args
        assert isinstance(error, APIError)
        assert response.status_code == 500

    def test_reauthenticates_after_401(self, mock_request):
        on_auth = MagicMock()
        mock_request.side_effect = [
            make_response(200, {"token": "old"}, "POST"),
            make_response(401, {"message": "expired"}),
            make_response(200, {"token": "new"}, "POST"),
            make_response(200, {"ok": True}),
        ]
        client = key_pair_client(on_auth)

        result = client.request("GET", "/organizations/a")

        assert result.data == {"ok": True}
        assert on_auth.call_count == 2
        last = mock_request.call_args_list[-1]
        assert last.kwargs["headers"]["Authorization"] == "Bearer new"

    def test_bearer_credentials_cannot_authenticate(self):
        with pytest.raises(AuthenticationError):
            bearer_client().authenticate()

    def test_auth_handler_can_issue_requests(self, mock_request):
        """Test an auth handler may call the API without deadlocking."""
        def respond(method, url, **kwargs):
            if url.endswith("/auth/token"):
                return make_response(200, {"token": "t1"}, "POST", url)
            return make_response(200, {"url": url}, method, url)

        mock_request.side_effect = respond
        seen = []

        def on_auth(error, result):
            seen.append(client.get("/organizations/b").result(timeout=5).data)

        client = key_pair_client(on_auth)
        with client:
            result = client.get("/organizations/a").result(timeout=10)

        assert result.data == {"url": "https://api.example.com/organizations/a"}
        assert seen == [{"url": "https://api.example.com/organizations/b"}]

    def test_failed_exchange_notifies_once_and_raises(self, mock_request):
        on_auth = MagicMock()
        mock_request.return_value = make_response(403, {"message": "bad key"}, "POST")
        client = key_pair_client(on_auth)

        with pytest.raises(AuthenticationError) as excinfo:
            client.request("GET", "/organizations/a")

        assert excinfo.value.status_code == 403
        on_auth.assert_called_once()
        assert client._token is None
