"""
Semantic failures of resource proxy operations.
"""

from typing import Optional
from .api_exceptions import AxleError


class ResourceError(AxleError):
    """Base class for resource lifecycle errors"""

    def __init__(self, message: str, resource: Optional[str] = None, identifier: Optional[str] = None):
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier


class UnsupportedUpdateError(ResourceError):
    """Updating an existing resource of this type is not supported"""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"Unable to update {resource} '{identifier}', updates are not supported",
            resource=resource,
            identifier=identifier
        )


class DeleteFailedError(ResourceError):
    """The server did not acknowledge a delete"""

    def __init__(self, resource: str, identifier: str, url: Optional[str] = None):
        super().__init__(
            f"Delete of {resource} at {url or identifier} failed",
            resource=resource,
            identifier=identifier
        )
        self.url = url


class ResourceDeletedError(ResourceError):
    """The local proxy refers to a resource that has been deleted"""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} '{identifier}' has been deleted and cannot be saved",
            resource=resource,
            identifier=identifier
        )


class UnboundResourceError(ResourceError):
    """The proxy has no client to talk to"""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} '{identifier}' is not bound to an AxleClient",
            resource=resource,
            identifier=identifier
        )
