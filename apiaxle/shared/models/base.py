"""
Base model for objects mirroring a remote ApiAxle resource.

A proxy knows its identifier, the client it talks through and where it is
in its lifecycle. Locally constructed proxies start as ``PENDING_CREATE``
and are created on the first ``save()``; proxies decoded from a server
response are ``PERSISTED``.
"""

import json
import logging
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel

from ...core.interfaces.base_api_client import RequestMethod
from ..envelope import RESULTS, UPDATED_RESULTS, load_response, unwrap, unwrap_bool, unwrap_mapping, validate
from ..exceptions import (
    DataTransformationError,
    DeleteFailedError,
    ResourceDeletedError,
    UnboundResourceError,
    UnsupportedUpdateError,
)

if TYPE_CHECKING:
    from ..clients.axle_client import AxleClient

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="ResourceProxy")

# Server-managed timestamps are left out of request bodies when unset or zero
TIMESTAMP_ALIASES = ("createdAt", "updatedAt")


class ResourceState(str, Enum):
    """Lifecycle of a resource proxy"""
    PENDING_CREATE = "pending_create"
    PERSISTED = "persisted"
    DELETED = "deleted"


def now_ms() -> float:
    return float(time.time_ns() // 1_000_000)


def ms_to_datetime(value: Optional[float]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)


class ResourceProxy(BaseModel):
    """In-process mirror of one remote resource"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    resource_name: ClassVar[str] = "Resource"
    resource_path: ClassVar[str] = ""
    collection_path: ClassVar[str] = ""
    supports_update: ClassVar[bool] = True

    identifier: str = Field(exclude=True, frozen=True, min_length=1)
    created_at: Optional[float] = None
    updated_at: Optional[float] = None

    _client: Any = PrivateAttr(default=None)
    _state: ResourceState = PrivateAttr(default=ResourceState.PENDING_CREATE)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(cls: Type[P], client: "AxleClient", identifier: str, **fields: Any) -> P:
        """Create a local proxy that will be created on the server by save()"""
        proxy = cls(identifier=identifier, **fields)
        return proxy._bind(client, ResourceState.PENDING_CREATE)

    @classmethod
    def from_payload(
        cls: Type[P],
        client: Optional["AxleClient"],
        identifier: str,
        payload: Union[bytes, str, Mapping[str, Any]]
    ) -> P:
        """Decode the bare resource fields (no envelope) into a persisted proxy"""
        if isinstance(payload, (bytes, str)):
            payload = load_response(payload)
        proxy = validate(cls, payload, overrides={"identifier": identifier})
        return proxy._bind(client, ResourceState.PERSISTED)

    @classmethod
    def from_response(
        cls: Type[P],
        client: Optional["AxleClient"],
        identifier: str,
        body: Union[bytes, str],
        path=RESULTS
    ) -> P:
        """Decode an enveloped server response into a persisted proxy"""
        proxy = unwrap(body, path, cls, overrides={"identifier": identifier})
        return proxy._bind(client, ResourceState.PERSISTED)

    def _bind(self: P, client: Optional["AxleClient"], state: ResourceState) -> P:
        self._client = client
        self._state = state
        return self

    # ------------------------------------------------------------------
    # Remote operations addressed by identifier
    # ------------------------------------------------------------------
    @classmethod
    def resource_url(cls, client: "AxleClient", identifier: str, *segments: Any, query=None) -> str:
        return client.url(cls.resource_path, identifier, *segments, query=query)

    @classmethod
    def fetch(cls: Type[P], client: "AxleClient", identifier: str) -> P:
        """GET one resource from the server"""
        url = cls.resource_url(client, identifier)
        body = client.do_http_request(RequestMethod.GET, url)
        return cls.from_response(client, identifier, body)

    @classmethod
    def remove(cls, client: "AxleClient", identifier: str) -> None:
        """DELETE one resource; the server must acknowledge with ``results: true``"""
        url = cls.resource_url(client, identifier)
        body = client.do_http_request(RequestMethod.DELETE, url)
        if not unwrap_bool(body):
            raise DeleteFailedError(cls.resource_name, identifier, url)
        logger.info(f"Deleted {cls.resource_name} {identifier}")

    @classmethod
    def list_all(cls: Type[P], client: "AxleClient", from_: int = 0, to: int = 10) -> List[P]:
        """List every resource of this type in the ``[from_, to]`` window"""
        url = client.url(cls.collection_path, query={"resolve": True, "from": from_, "to": to})
        return do_collection_request(client, url, cls)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def client(self) -> "AxleClient":
        if self._client is None:
            raise UnboundResourceError(self.resource_name, self.identifier)
        return self._client

    @property
    def state(self) -> ResourceState:
        return self._state

    @property
    def pending_create(self) -> bool:
        return self._state is ResourceState.PENDING_CREATE

    @property
    def url(self) -> str:
        return self.resource_url(self.client, self.identifier)

    @property
    def created(self) -> Optional[datetime]:
        """``created_at`` as an aware UTC datetime"""
        return ms_to_datetime(self.created_at)

    @property
    def updated(self) -> Optional[datetime]:
        """``updated_at`` as an aware UTC datetime"""
        return ms_to_datetime(self.updated_at)

    # ------------------------------------------------------------------
    # Instance operations
    # ------------------------------------------------------------------
    def save(self, allow_update: Optional[bool] = None) -> None:
        """
        Create this resource, or update it if it already exists.

        Creation POSTs the entity and reads the result from ``results``.
        Updates PUT the entity and read ``results.new``; types with
        ``supports_update = False`` refuse updates unless ``allow_update``
        is passed explicitly.
        """
        if self._state is ResourceState.DELETED:
            raise ResourceDeletedError(self.resource_name, self.identifier)

        creating = self.pending_create
        if not creating:
            update_allowed = self.supports_update if allow_update is None else allow_update
            if not update_allowed:
                raise UnsupportedUpdateError(self.resource_name, self.identifier)

        url = self.url
        stamp = now_ms()
        body = self._encode(updated_at=stamp)

        if creating:
            response = self.client.do_http_request(RequestMethod.POST, url, body)
            saved = self.from_response(None, self.identifier, response, RESULTS)
        else:
            response = self.client.do_http_request(RequestMethod.PUT, url, body)
            saved = self.from_response(None, self.identifier, response, UPDATED_RESULTS)

        self.updated_at = stamp
        self._apply(saved)
        self._state = ResourceState.PERSISTED
        logger.info(f"{'Created' if creating else 'Updated'} {self.resource_name} {self.identifier}")

    def delete(self) -> None:
        """Delete this resource; the proxy can no longer be saved afterwards"""
        self.remove(self.client, self.identifier)
        self._state = ResourceState.DELETED

    def _apply(self, other: "ResourceProxy") -> None:
        """Overwrite local fields with the ones present in ``other``"""
        for name in other.model_fields_set:
            if name == "identifier":
                continue
            setattr(self, name, getattr(other, name))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_payload(self) -> Dict[str, Any]:
        """Wire representation: camelCase keys, no identifier, no empty timestamps"""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for alias in TIMESTAMP_ALIASES:
            if not payload.get(alias):
                payload.pop(alias, None)
        return payload

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_payload(), indent=indent)

    def _encode(self, updated_at: Optional[float] = None) -> bytes:
        """Request body; ``updated_at`` stamps the payload without touching the proxy"""
        try:
            payload = self.to_payload()
            if updated_at:
                payload["updatedAt"] = updated_at
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise DataTransformationError(
                f"Unable to marshal {self.resource_name}: {e}",
                source_format=type(self).__name__,
                target_format="json"
            ) from e

    def __str__(self) -> str:
        location = self.url if self._client is not None else self.identifier
        try:
            rendered = self.to_json(indent=4)
        except (TypeError, ValueError):
            rendered = "<nil>"
        return f"{self.resource_name} - {location}: {rendered}"


def do_collection_request(client: "AxleClient", url: str, model: Type[P]) -> List[P]:
    """
    GET a resolved collection and decode it into proxies.

    The ``results`` value maps identifier to resource fields; proxies are
    returned in the mapping's iteration order.
    """
    body = client.do_http_request(RequestMethod.GET, url)
    entries = unwrap_mapping(body, RESULTS)
    return [
        model.from_payload(client, identifier, fields)
        for identifier, fields in entries.items()
    ]
