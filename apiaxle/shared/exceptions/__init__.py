"""
Exceptions raised by the ApiAxle client.

Transport errors come from HTTP/network failures, data errors from
encoding and decoding, resource errors from lifecycle rules.
"""

from .api_exceptions import *
from .data_exceptions import *
from .resource_exceptions import *

__all__ = [
    # API Exceptions
    'AxleError',
    'APIClientError',
    'APITimeoutError',
    'APIRateLimitError',
    'APIServerError',
    'APINotFoundError',
    'APIBadRequestError',
    'APIConflictError',
    'NetworkError',
    'create_api_exception_from_response',
    'create_network_exception_from_httpx_error',

    # Data Exceptions
    'DataValidationError',
    'DataTransformationError',
    'DataParsingError',
    'EnvelopeError',
    'EnvelopeTypeError',

    # Resource Exceptions
    'ResourceError',
    'UnsupportedUpdateError',
    'DeleteFailedError',
    'ResourceDeletedError',
    'UnboundResourceError',
]
