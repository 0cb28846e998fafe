from typing import ClassVar, List, Literal, Optional, TYPE_CHECKING

from pydantic import Field

from ...core.constants import PageDefaults, QuotaDefaults
from ...shared.models.base import ResourceProxy

if TYPE_CHECKING:
    from ..keys.models import Key
    from ..statistics.models import StatsTable


class Api(ResourceProxy):
    """An upstream API proxied by ApiAxle"""

    resource_name: ClassVar[str] = "Api"
    resource_path: ClassVar[str] = "api"
    collection_path: ClassVar[str] = "apis"
    supports_update: ClassVar[bool] = True

    end_point: Optional[str] = Field(default=None, description="host[:port] requests are forwarded to")
    protocol: Literal["http", "https"] = "http"
    api_format: Literal["json", "xml"] = "json"
    end_point_timeout: int = Field(default=2, ge=0, description="Seconds to wait for the endpoint")
    end_point_max_redirects: int = Field(default=2, ge=0)
    default_path: Optional[str] = None
    extract_key_regex: Optional[str] = None
    key_parameter: str = "api_key"
    disabled: bool = False
    strict_ssl: bool = Field(default=True, alias="strictSSL")
    send_through_api_key: bool = False
    send_through_api_sig: bool = False
    token_skew_protection_count: int = 3
    has_capture_paths: bool = False
    cors_enabled: bool = False
    allow_keyless_use: bool = False
    keyless_qps: int = QuotaDefaults.QPS
    keyless_qpd: int = QuotaDefaults.QPD

    def keys(self, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List["Key"]:
        """List keys that can access this api"""
        from .service import api_keys
        return api_keys(self.client, self.identifier, from_, to)

    def link_key(self, key_identifier: str) -> "Key":
        from .service import api_link_key
        return api_link_key(self.client, self.identifier, key_identifier)

    def unlink_key(self, key_identifier: str) -> "Key":
        from .service import api_unlink_key
        return api_unlink_key(self.client, self.identifier, key_identifier)

    def stats(self, from_, to, granularity) -> "StatsTable":
        from .service import api_stats
        return api_stats(self.client, self.identifier, from_, to, granularity)

    def stats_for_key(self, from_, to, forkey: str, granularity) -> "StatsTable":
        from .service import api_stats
        return api_stats(self.client, self.identifier, from_, to, granularity, forkey=forkey)
