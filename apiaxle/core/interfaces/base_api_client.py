"""
Base API Client interface and abstract implementation.

Implements the Template Method pattern: every request is pre-processed,
sent once through an ``httpx.Client``, checked for HTTP errors and then
handed to a subclass hook that turns the response into its result type.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TypeVar, Generic
from enum import Enum
import logging
import time

import httpx

from ...shared.exceptions import (
    APIClientError,
    create_api_exception_from_response,
    create_network_exception_from_httpx_error
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class BaseAPIClient(ABC, Generic[T]):
    """
    Abstract base class for API clients implementing Template Method pattern.

    Requests are never retried; transport failures surface immediately as
    ``NetworkError`` and HTTP error statuses as typed ``APIClientError``s.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.client: Optional[httpx.Client] = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()

    def close(self) -> None:
        if self.client:
            self.client.close()
            self.client = None

    # Template method pattern implementation
    def request(
        self,
        method: RequestMethod,
        url: str,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> T:
        """
        Template method for making API requests.

        Follows the pattern:
        1. Pre-process request
        2. Make HTTP request
        3. Raise on HTTP error status (hook for error extraction)
        4. Transform the response into the result type
        """
        request_params = self._preprocess_request(method, url, content, headers)
        response = self._make_request(request_params)
        return self._transform_response(response)

    def _preprocess_request(
        self,
        method: RequestMethod,
        url: str,
        content: Optional[bytes],
        headers: Optional[Dict[str, str]]
    ) -> Dict[str, Any]:
        """Hook method for request preprocessing"""
        request_params = {
            "method": method.value,
            "url": url,
            "content": content,
            "headers": dict(headers or {})
        }

        request_params["headers"].setdefault("Accept", "application/json")
        if content is not None:
            request_params["headers"].setdefault("Content-Type", "application/json")
        if self.user_agent:
            request_params["headers"].setdefault("User-Agent", self.user_agent)

        return request_params

    def _make_request(self, request_params: Dict[str, Any]) -> httpx.Response:
        """Send a single HTTP request, converting failures to client exceptions"""
        if not self.client:
            raise APIClientError("Client is closed")

        method = request_params["method"]
        url = request_params["url"]
        start = time.monotonic()
        try:
            response = self.client.request(**request_params)
        except httpx.HTTPError as e:
            logger.warning(
                f"{method} {url} failed: {e}",
                extra={"method": method, "url": url}
            )
            raise create_network_exception_from_httpx_error(e) from e

        duration_ms = round((time.monotonic() - start) * 1000, 2)
        logger.debug(
            f"{method} {url} -> {response.status_code}",
            extra={
                "method": method,
                "url": url,
                "status_code": response.status_code,
                "duration_ms": duration_ms
            }
        )

        # Convert HTTP errors to appropriate exceptions
        if response.status_code >= 400:
            error = self._error_from_response(response)
            logger.warning(
                f"{method} {url} returned {response.status_code}: {error.message}",
                extra={"method": method, "url": url, "status_code": response.status_code}
            )
            raise error

        return response

    def _error_from_response(self, response: httpx.Response) -> APIClientError:
        """Hook method for building the exception for an error response"""
        return create_api_exception_from_response(response)

    @abstractmethod
    def _transform_response(self, response: httpx.Response) -> T:
        """Transform a successful response (must be implemented by subclasses)"""
        pass
