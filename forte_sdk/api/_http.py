"""
Base HTTP client for the Forte API.

Handles session management, authentication, retries, fingerprinting and
error handling. Requests run on a small thread pool; ``get`` and ``post``
return a Future resolving to an ApiResult.
"""

import hashlib
import logging
import platform
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .. import __version__
from ..events import AuthCallback
from ..exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from ..paths import ApiPaths
from ..scope import BearerCredentials, Credentials, KeyPairCredentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportSettings:
    """Connection tuning shared by every request of a client."""

    timeout: int = 30
    max_retries: int = 3
    verify_ssl: bool = True
    max_workers: int = 4


@dataclass
class ApiResult:
    """Successful API response."""

    response: requests.Response
    data: Any = None

    @property
    def status_code(self) -> int:
        return self.response.status_code


def compute_fingerprint(hostname: str) -> str:
    """Stable identifier for this client installation."""
    raw = "|".join([
        hostname,
        platform.platform(),
        platform.python_version(),
        __version__,
    ])
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class HTTPClient:
    """
    Base HTTP client for the Forte API.

    Handles:
    - Session management with retry logic
    - Bearer and key-pair authentication
    - Auth outcome notification
    - Error response handling
    """

    def __init__(
        self,
        hostname: str,
        credentials: Credentials,
        base_url: str,
        on_auth: Optional[AuthCallback] = None,
        fingerprinting_enabled: bool = True,
        settings: Optional[TransportSettings] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            hostname: Hostname of the calling site, sent with every request
            credentials: Bearer token or developer key pair
            base_url: API base URL
            on_auth: Called with ``(error, result)`` after every key exchange
            fingerprinting_enabled: Send the client fingerprint header
            settings: Timeout, retry and pool settings
        """
        self.hostname = hostname
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.on_auth = on_auth
        self.fingerprinting_enabled = fingerprinting_enabled
        self.settings = settings or TransportSettings()
        self._session: Optional[requests.Session] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        self._token: Optional[str] = None
        self._auth_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session with retry logic."""
        if self._session is None:
            self._session = requests.Session()

            retry_strategy = Retry(
                total=self.settings.max_retries,
                backoff_factor=1,
                status_forcelist=[429, 502, 503, 504],
                allowed_methods=["HEAD", "GET", "OPTIONS", "POST"],
                respect_retry_after_header=True,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

            headers = {
                "User-Agent": f"forte-sdk/{__version__}",
                "Accept": "application/json",
                "X-Forte-Hostname": self.hostname,
            }
            if self.fingerprinting_enabled:
                headers["X-Forte-Fingerprint"] = compute_fingerprint(self.hostname)
            self._session.headers.update(headers)

        return self._session

    @property
    def executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.settings.max_workers,
                thread_name_prefix="forte-http",
            )
        return self._executor

    @property
    def uses_key_pair(self) -> bool:
        return isinstance(self.credentials, KeyPairCredentials)

    def build_url(self, path: str) -> str:
        return self.base_url + path

    # ========== Authentication ==========

    def _current_token(self) -> str:
        """Return a bearer token, exchanging the key pair on first use."""
        if isinstance(self.credentials, BearerCredentials):
            return self.credentials.bearer_token

        exchanged = None
        with self._auth_lock:
            if self._token is None:
                exchanged = self._exchange_key_pair()
            token = self._token

        # handlers may issue requests of their own, so they run unlocked
        if exchanged is not None:
            self._finish_auth(*exchanged)
        return token  # type: ignore[return-value]

    def authenticate(self) -> ApiResult:
        """
        Exchange the developer key pair for a bearer token.

        Invokes ``on_auth`` exactly once with the outcome.

        Raises:
            AuthenticationError: If the exchange fails or returns no token
        """
        if not isinstance(self.credentials, KeyPairCredentials):
            raise AuthenticationError("Bearer credentials do not require a key exchange")

        with self._auth_lock:
            outcome = self._exchange_key_pair()
        return self._finish_auth(*outcome)

    def _exchange_key_pair(self) -> Tuple[Optional[APIError], Any]:
        """POST the key pair and store the token. Caller holds ``_auth_lock``."""
        logger.info(f"Authenticating key pair against {self.base_url}")
        payload = {
            "privateKey": self.credentials.private_key,  # type: ignore[union-attr]
            "publicKey": self.credentials.public_key,  # type: ignore[union-attr]
        }

        try:
            response = self._send("POST", ApiPaths.auth, json_data=payload, token=None)
            result = self._handle_response(response)
            token = self._extract_token(result.data)
            if not token:
                raise AuthenticationError(
                    "Authentication response did not include a token",
                    status_code=response.status_code,
                    response=response,
                )
        except APIError as e:
            logger.warning(f"Authentication failed: {e}")
            self._token = None
            return e, e.response

        self._token = token
        logger.info("Authentication succeeded")
        return None, result

    def _finish_auth(self, error: Optional[APIError], result: Any) -> ApiResult:
        """Notify ``on_auth``, then raise the failure or return the result."""
        self._notify_auth(error, result)
        if error is None:
            return result
        if isinstance(error, AuthenticationError):
            raise error
        raise AuthenticationError(
            f"Authentication failed: {error}",
            status_code=error.status_code,
            response_data=error.response_data,
            response=error.response,
        ) from error

    @staticmethod
    def _extract_token(data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        token = data.get("token") or data.get("access_token")
        if not token and isinstance(data.get("data"), dict):
            token = data["data"].get("token")
        return token

    def _notify_auth(self, error: Optional[Exception], result: Any) -> None:
        if self.on_auth is not None:
            self.on_auth(error, result)

    # ========== Requests ==========

    def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> requests.Response:
        url = self.build_url(path)
        headers = {"Authorization": f"Bearer {token}"} if token else {}

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            return self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                headers=headers,
                timeout=self.settings.timeout,
                verify=self.settings.verify_ssl,
            )
        except requests.exceptions.ConnectionError as e:
            raise APIError(f"Connection failed: {e}")
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}")

    def _handle_response(
        self,
        response: requests.Response,
        expected_status: Union[int, Sequence[int]] = (200, 201, 202, 204),
    ) -> ApiResult:
        """Handle API response and raise appropriate exceptions."""
        if isinstance(expected_status, int):
            expected_status = [expected_status]

        logger.debug(f"Request: {response.request.method} {response.request.url}")
        logger.debug(f"Response: {response.status_code}")

        if response.status_code in expected_status:
            if response.status_code == 204 or not response.content:
                return ApiResult(response=response)
            try:
                return ApiResult(response=response, data=response.json())
            except ValueError:
                return ApiResult(response=response, data=response.text)

        try:
            error_data = response.json()
            if not isinstance(error_data, dict):
                error_data = {"data": error_data}
            error_msg = self._extract_error_message(error_data)
        except ValueError:
            error_msg = response.text or f"HTTP {response.status_code}"
            error_data = {}

        kwargs = {
            "status_code": response.status_code,
            "response_data": error_data,
            "details": error_msg,
            "response": response,
        }

        if response.status_code == 401:
            raise AuthenticationError(
                "Authentication failed: " + (error_msg or "Please check your credentials."),
                **kwargs,
            )
        elif response.status_code == 403:
            raise PermissionDeniedError(
                "Permission denied: " + (error_msg or "You don't have access to this resource."),
                **kwargs,
            )
        elif response.status_code == 404:
            raise NotFoundError(
                "Resource not found: " + (error_msg or "The requested resource does not exist."),
                **kwargs,
            )
        elif response.status_code in (400, 422):
            raise ValidationError(f"Invalid request: {error_msg}", **kwargs)
        else:
            raise APIError(f"API request failed: {error_msg}", **kwargs)

    def _extract_error_message(self, error_data: Dict[str, Any]) -> str:
        """Extract error message from API response."""
        if error_data.get("errors"):
            errors = error_data["errors"]
            if isinstance(errors, list):
                messages = []
                for err in errors:
                    if isinstance(err, dict):
                        code = err.get("code", "")
                        msg = err.get("message", str(err))
                        messages.append(f"[{code}] {msg}" if code else msg)
                    else:
                        messages.append(str(err))
                return "; ".join(messages)
            return str(errors)
        if "message" in error_data:
            return str(error_data["message"])
        if "error" in error_data:
            return str(error_data["error"])
        return str(error_data)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        """
        Make an API request and wait for the result.

        Args:
            method: HTTP method
            path: API path, starting with "/"
            params: Query parameters
            json_data: JSON body data

        Returns:
            ApiResult for a successful response
        """
        token = self._current_token()
        response = self._send(method, path, params=params, json_data=json_data, token=token)

        if response.status_code == 401 and self.uses_key_pair:
            logger.info("Token rejected, re-authenticating")
            with self._auth_lock:
                self._token = None
            token = self._current_token()
            response = self._send(method, path, params=params, json_data=json_data, token=token)

        return self._handle_response(response)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> "Future[ApiResult]":
        """Issue a GET on the worker pool."""
        return self.executor.submit(self.request, "GET", path, params)

    def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> "Future[ApiResult]":
        """Issue a POST with a JSON body on the worker pool."""
        return self.executor.submit(self.request, "POST", path, None, data)

    def close(self) -> None:
        """Shut down the worker pool and close the HTTP session."""
        if self._executor:
            self._executor.shutdown(wait=True)
            self._executor = None
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
