"""
Transport-level exception classes for the ApiAxle client.

Provides a hierarchical exception structure for HTTP and network failures.
"""

from typing import Optional, Dict, Any
import httpx


class AxleError(Exception):
    """Base exception for all ApiAxle client errors"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class APIClientError(AxleError):
    """General API client error"""
    pass


class APITimeoutError(APIClientError):
    """API request timeout error"""

    def __init__(self, message: str = "API request timed out", timeout_duration: Optional[float] = None):
        super().__init__(message, status_code=408)
        self.timeout_duration = timeout_duration


class APIRateLimitError(APIClientError):
    """API rate limit exceeded error"""

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        retry_after: Optional[int] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(message, status_code=429, error_code=error_code)
        self.retry_after = retry_after


class APIServerError(APIClientError):
    """API server error (5xx status codes)"""

    def __init__(self, message: str, status_code: int = 500, error_code: Optional[str] = None):
        super().__init__(message, status_code=status_code, error_code=error_code)


class APINotFoundError(APIClientError):
    """Resource not found (404)"""

    def __init__(self, message: str = "Resource not found", error_code: Optional[str] = None):
        super().__init__(message, status_code=404, error_code=error_code)


class APIBadRequestError(APIClientError):
    """Bad request error (400)"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message, status_code=400, error_code=error_code)


class APIConflictError(APIClientError):
    """Resource already exists or conflicts with server state (409)"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message, status_code=409, error_code=error_code)


class NetworkError(APIClientError):
    """Network connectivity error"""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


def create_api_exception_from_response(
    response: httpx.Response,
    message: Optional[str] = None,
    error_code: Optional[str] = None
) -> APIClientError:
    """
    Create appropriate exception from httpx Response.

    Args:
        response: httpx Response object
        message: Error message extracted from the body, if any
        error_code: Server-side error type, if any

    Returns:
        Appropriate API exception based on status code
    """
    status_code = response.status_code
    content = message or response.text[:500]  # Limit content for logging

    if status_code == 400:
        return APIBadRequestError(f"Bad request: {content}", error_code=error_code)
    elif status_code == 404:
        return APINotFoundError(f"Resource not found: {content}", error_code=error_code)
    elif status_code == 408:
        return APITimeoutError(f"Request timeout: {content}")
    elif status_code == 409:
        return APIConflictError(f"Conflict: {content}", error_code=error_code)
    elif status_code == 429:
        retry_after = response.headers.get("Retry-After")
        retry_after_int = int(retry_after) if retry_after and retry_after.isdigit() else None
        return APIRateLimitError(
            f"Rate limit exceeded: {content}", retry_after=retry_after_int, error_code=error_code
        )
    elif 500 <= status_code < 600:
        return APIServerError(f"Server error: {content}", status_code=status_code, error_code=error_code)
    else:
        return APIClientError(f"HTTP {status_code}: {content}", status_code=status_code, error_code=error_code)


def create_network_exception_from_httpx_error(error: Exception) -> NetworkError:
    """
    Create NetworkError from httpx exceptions.

    Args:
        error: Original httpx exception

    Returns:
        NetworkError with appropriate message
    """
    error_type = type(error).__name__

    if isinstance(error, httpx.ConnectTimeout):
        return NetworkError(f"Connect timeout: {str(error)}", error)
    elif isinstance(error, httpx.ReadTimeout):
        return NetworkError(f"Read timeout: {str(error)}", error)
    elif isinstance(error, httpx.WriteTimeout):
        return NetworkError(f"Write timeout: {str(error)}", error)
    elif isinstance(error, httpx.PoolTimeout):
        return NetworkError(f"Connection pool timeout: {str(error)}", error)
    elif isinstance(error, httpx.TimeoutException):
        return NetworkError(f"Request timed out: {str(error)}", error)
    elif isinstance(error, httpx.ConnectError):
        return NetworkError(f"Connection failed: {str(error)}", error)
    else:
        return NetworkError(f"Network error ({error_type}): {str(error)}", error)
