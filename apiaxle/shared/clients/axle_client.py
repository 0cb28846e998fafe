"""
HTTP client for the ApiAxle management API.

Implements BaseAPIClient with ApiAxle specific error extraction; successful
responses are returned as raw bytes for the envelope decoder.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from ...core.config import Settings, get_settings
from ...core.constants import EnvelopeKeys
from ...core.interfaces.base_api_client import BaseAPIClient, RequestMethod
from ..exceptions import APIClientError, create_api_exception_from_response
from ..urls import build_url

logger = logging.getLogger(__name__)


class AxleClient(BaseAPIClient[bytes]):
    """
    Client bound to one ApiAxle service address.

    The address is always passed explicitly; settings only provide the
    version prefix, timeout and user agent defaults.
    """

    def __init__(
        self,
        address: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        settings: Optional[Settings] = None
    ):
        settings = settings or get_settings()
        self.address = (address or settings.address).rstrip("/")
        self.version_endpoint = settings.version_endpoint
        super().__init__(
            timeout=timeout if timeout is not None else settings.timeout,
            user_agent=settings.user_agent,
            transport=transport
        )

    def __repr__(self) -> str:
        return f"AxleClient(address={self.address!r})"

    def url(self, *segments: Any, query: Optional[Mapping[str, Any]] = None) -> str:
        """Build an escaped request URL below this client's address"""
        return build_url(self.address, segments, query, self.version_endpoint)

    def do_http_request(
        self,
        method: RequestMethod,
        url: str,
        body: Optional[bytes] = None
    ) -> bytes:
        """Perform one request and return the raw response body"""
        return self.request(method, url, content=body)

    def _transform_response(self, response: httpx.Response) -> bytes:
        return response.content

    def _error_from_response(self, response: httpx.Response) -> APIClientError:
        """Use the message from ApiAxle's ``results.error`` envelope when present"""
        message, error_type = self._extract_error(response)
        return create_api_exception_from_response(response, message=message, error_code=error_type)

    @staticmethod
    def _extract_error(response: httpx.Response) -> Sequence[Optional[str]]:
        try:
            payload = json.loads(response.content or b"null")
        except ValueError:
            return None, None

        if not isinstance(payload, dict):
            return None, None
        results = payload.get(EnvelopeKeys.RESULTS)
        if not isinstance(results, dict):
            return None, None
        error: Dict[str, Any] = results.get(EnvelopeKeys.ERROR) or {}
        if not isinstance(error, dict):
            return None, None
        return error.get("message"), error.get("type")
