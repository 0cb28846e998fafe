"""
Python client for the ApiAxle management API.

Keyrings, keys and apis are mirrored by resource proxies that talk to the
server through an ``AxleClient``::

    with AxleClient("http://localhost:3000") as client:
        ring = Keyring.new(client, "partners")
        ring.save()
        ring.link_key("acme-key")
"""

import logging

from .core.config import Settings, get_settings
from .core.logging_config import setup_logging
from .shared.clients.axle_client import AxleClient
from .shared.exceptions import *  # noqa: F401,F403
from .shared.models.base import ResourceProxy, ResourceState
from .domains.statistics.models import Granularity, HitType, StatsTable
from .domains.keys.models import Key
from .domains.apis.models import Api
from .domains.keyrings.models import Keyring
from .domains.keys.service import (
    delete_key,
    get_key,
    key_apis,
    key_keyrings,
    key_stats,
    list_keys,
    new_key,
)
from .domains.apis.service import (
    api_keys,
    api_link_key,
    api_stats,
    api_unlink_key,
    delete_api,
    get_api,
    list_apis,
    new_api,
)
from .domains.keyrings.service import (
    delete_keyring,
    get_keyring,
    keyring_keys,
    keyring_link_key,
    keyring_stats,
    keyring_unlink_key,
    list_keyrings,
    new_keyring,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
