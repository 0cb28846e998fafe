from typing import ClassVar, List, Optional, TYPE_CHECKING

from pydantic import Field

from ...core.constants import PageDefaults, QuotaDefaults
from ...shared.models.base import ResourceProxy

if TYPE_CHECKING:
    from ..apis.models import Api
    from ..keyrings.models import Keyring
    from ..statistics.models import StatsTable


class Key(ResourceProxy):
    """An API key with its own quotas, linkable to apis and keyrings"""

    resource_name: ClassVar[str] = "Key"
    resource_path: ClassVar[str] = "key"
    collection_path: ClassVar[str] = "keys"
    supports_update: ClassVar[bool] = True

    shared_secret: Optional[str] = Field(default=None, description="Secret used for signed requests")
    qps: int = Field(default=QuotaDefaults.QPS, description="Queries per second, -1 for unlimited")
    qpm: int = Field(default=QuotaDefaults.QPM, description="Queries per minute, -1 for unlimited")
    qpd: int = Field(default=QuotaDefaults.QPD, description="Queries per day, -1 for unlimited")
    disabled: bool = False

    def apis(self, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List["Api"]:
        """List the apis this key can access"""
        from .service import key_apis
        return key_apis(self.client, self.identifier, from_, to)

    def keyrings(self, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List["Keyring"]:
        """List the keyrings this key belongs to"""
        from .service import key_keyrings
        return key_keyrings(self.client, self.identifier, from_, to)

    def stats(self, from_, to, granularity) -> "StatsTable":
        from .service import key_stats
        return key_stats(self.client, self.identifier, from_, to, granularity)

    def stats_for_api(self, from_, to, forapi: str, granularity) -> "StatsTable":
        from .service import key_stats
        return key_stats(self.client, self.identifier, from_, to, granularity, forapi=forapi)
