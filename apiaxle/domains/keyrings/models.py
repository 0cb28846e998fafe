from typing import ClassVar, List, Optional, TYPE_CHECKING

from ...core.constants import PageDefaults
from ...shared.models.base import ResourceProxy

if TYPE_CHECKING:
    from ..keys.models import Key
    from ..statistics.models import StatsTable


class Keyring(ResourceProxy):
    """
    A named group of keys.

    Keyrings carry no fields of their own beyond the server timestamps.
    The server does not support updating an existing keyring, so
    ``save()`` on a persisted keyring raises ``UnsupportedUpdateError``
    unless ``allow_update=True`` is passed, in which case the keyring is
    PUT and read back from ``results.new``.
    """

    resource_name: ClassVar[str] = "Keyring"
    resource_path: ClassVar[str] = "keyring"
    collection_path: ClassVar[str] = "keyrings"
    supports_update: ClassVar[bool] = False

    def link_key(self, key_identifier: str) -> "Key":
        """Associate a key with this keyring"""
        from .service import keyring_link_key
        return keyring_link_key(self.client, self.identifier, key_identifier)

    def unlink_key(self, key_identifier: str) -> "Key":
        """Disassociate a key from this keyring"""
        from .service import keyring_unlink_key
        return keyring_unlink_key(self.client, self.identifier, key_identifier)

    def keys(self, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List["Key"]:
        """List keys belonging to this keyring"""
        from .service import keyring_keys
        return keyring_keys(self.client, self.identifier, from_, to)

    def stats(self, from_, to, granularity) -> "StatsTable":
        from .service import keyring_stats
        return keyring_stats(self.client, self.identifier, from_, to, granularity)

    def stats_for_key(self, from_, to, forkey: str, granularity) -> "StatsTable":
        from .service import keyring_stats
        return keyring_stats(self.client, self.identifier, from_, to, granularity, forkey=forkey)

    def stats_for_api(self, from_, to, forapi: str, granularity) -> "StatsTable":
        from .service import keyring_stats
        return keyring_stats(self.client, self.identifier, from_, to, granularity, forapi=forapi)
