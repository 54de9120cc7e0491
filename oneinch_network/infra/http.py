"""
Request executor

Performs exactly one HTTP call per resolved request and returns the parsed
JSON body. Failures surface as RemoteApiError; nothing is retried, since
order creation and cancellation are not safe to repeat.
"""

import logging
from typing import Any, Optional

import httpx

from ..config import config as global_config
from ..errors import ConfigurationError, RemoteApiError
from ..types import ResolvedRequest

logger = logging.getLogger(__name__)

_MAX_ERROR_TEXT = 500


def extract_error_message(response: httpx.Response) -> str:
    """
    Pull a human-readable message out of an error response

    1inch error bodies carry "description", "error" or "message"; anything
    else falls back to the raw text or the bare status.
    """
    fallback = f"HTTP {response.status_code}"
    try:
        error_data = response.json()
    except ValueError:
        return response.text[:_MAX_ERROR_TEXT] if response.text else fallback

    if isinstance(error_data, dict):
        for key in ("description", "error", "message"):
            if error_data.get(key):
                return str(error_data[key])
    return str(error_data)[:_MAX_ERROR_TEXT] if error_data else fallback


class RequestExecutor:
    """
    Single-shot HTTP executor for resolved requests

    Usage:
        with RequestExecutor() as executor:
            data = executor.execute(request)
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize executor

        Args:
            client: Optional preconfigured httpx client (owned by the caller)
            timeout: Client timeout in seconds (defaults to ONEINCH_TIMEOUT)
        """
        self._timeout = timeout if timeout is not None else global_config.oneinch.timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        return self._client

    def execute(self, request: ResolvedRequest) -> Any:
        """
        Perform one request

        Args:
            request: Resolved request

        Returns:
            Parsed JSON body ({} for an empty 2xx body)

        Raises:
            RemoteApiError: On non-2xx status, transport failure or non-JSON body
            ConfigurationError: If the body or URL cannot be encoded
        """
        client = self._get_client()
        logger.debug(f"{request.method} {request.url}")

        try:
            http_request = client.build_request(
                request.method,
                request.url,
                params=request.params or None,
                json=request.body,
                headers=request.headers,
            )
        except (TypeError, ValueError, httpx.InvalidURL) as e:
            # Body values json cannot encode (Decimal, bytes, ...) or an unparsable URL
            logger.warning(f"Cannot build {request.method} {request.url}: {e}")
            raise ConfigurationError.invalid(f"{request.method} {request.url}", str(e)) from e

        try:
            response = client.send(http_request)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            message = extract_error_message(e.response)
            logger.warning(f"1inch API error {e.response.status_code} for {request.method} {request.url}: {message}")
            body: Any
            try:
                body = e.response.json()
            except ValueError:
                body = e.response.text[:_MAX_ERROR_TEXT] or None
            raise RemoteApiError.from_status(
                e.response.status_code, message, url=request.url, response_body=body
            ) from e

        except httpx.TimeoutException as e:
            logger.warning(f"1inch API timeout for {request.method} {request.url}")
            raise RemoteApiError.timeout(request.url, e) from e

        except httpx.RequestError as e:
            logger.warning(f"1inch API request error for {request.method} {request.url}: {e}")
            raise RemoteApiError.connection_failed(request.url, e) from e

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise RemoteApiError.invalid_response(request.url, response.status_code, e) from e

    def close(self):
        """Close HTTP client if this executor created it"""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"RequestExecutor(timeout={self._timeout})"
