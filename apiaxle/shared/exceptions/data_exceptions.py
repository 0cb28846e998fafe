"""
Data-related exception classes.

Handles JSON encoding, response parsing and envelope navigation errors.
"""

from typing import List, Any, Optional, Sequence
from .api_exceptions import AxleError


class DataValidationError(AxleError):
    """Decoded data does not fit the target model"""

    def __init__(
        self,
        message: str = "Data validation failed",
        validation_errors: Optional[List[str]] = None,
        model_name: Optional[str] = None
    ):
        super().__init__(message)
        self.validation_errors = validation_errors or []
        self.model_name = model_name


class DataTransformationError(AxleError):
    """A local object could not be serialized for sending"""

    def __init__(
        self,
        message: str = "Data transformation failed",
        source_format: Optional[str] = None,
        target_format: Optional[str] = None,
        original_data: Optional[Any] = None
    ):
        super().__init__(message)
        self.source_format = source_format
        self.target_format = target_format
        self.original_data = original_data


class DataParsingError(AxleError):
    """Response body could not be parsed"""

    def __init__(
        self,
        message: str = "Data parsing failed",
        data_format: Optional[str] = "json",
        raw_content: Optional[str] = None
    ):
        super().__init__(message)
        self.data_format = data_format
        self.raw_content = raw_content[:1000] if raw_content else None  # Limit for logging


class EnvelopeError(DataParsingError):
    """Response envelope does not contain an expected key"""

    def __init__(self, message: str, key: Optional[str] = None, path: Sequence[str] = ()):
        super().__init__(message)
        self.key = key
        self.path = tuple(path)


class EnvelopeTypeError(EnvelopeError):
    """Response envelope holds a value of the wrong type under a key"""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        path: Sequence[str] = (),
        expected_type: Optional[str] = None,
        actual_type: Optional[str] = None
    ):
        super().__init__(message, key=key, path=path)
        self.expected_type = expected_type
        self.actual_type = actual_type
