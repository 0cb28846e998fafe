"""
Key operations addressed by identifier, plus the key collection and
link/unlink helpers shared with apis and keyrings.
"""

import logging
from typing import List, Optional

from ...core.constants import PageDefaults
from ...core.interfaces.base_api_client import RequestMethod
from ...shared.models.base import do_collection_request
from ..apis.models import Api
from ..keyrings.models import Keyring
from ..statistics.service import fetch_stats
from .models import Key

logger = logging.getLogger(__name__)

EMPTY_BODY = b"{}"


def new_key(client, identifier: str, **fields) -> Key:
    """Local key, created on the server by ``save()``"""
    return Key.new(client, identifier, **fields)


def get_key(client, identifier: str) -> Key:
    return Key.fetch(client, identifier)


def delete_key(client, identifier: str) -> None:
    Key.remove(client, identifier)


def list_keys(client, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Key]:
    return Key.list_all(client, from_, to)


def do_keys_request(client, url: str) -> List[Key]:
    """GET a resolved key collection"""
    return do_collection_request(client, url, Key)


def change_key_link(client, owner_path: str, owner_id: str, action: str, key_id: str) -> Key:
    """
    PUT ``/<owner>/<id>/<action>/<key>`` with an empty object body.

    ``action`` is ``linkkey`` or ``unlinkkey``; the server answers with
    the key, which is returned as a persisted proxy.
    """
    url = client.url(owner_path, owner_id, action, key_id)
    body = client.do_http_request(RequestMethod.PUT, url, EMPTY_BODY)
    key = Key.from_response(client, key_id, body)
    logger.info(f"{action} {owner_path} {owner_id} key {key_id}")
    return key


def key_apis(client, identifier: str, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Api]:
    url = Key.resource_url(client, identifier, "apis", query={"resolve": True, "from": from_, "to": to})
    return do_collection_request(client, url, Api)


def key_keyrings(client, identifier: str, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Keyring]:
    url = Key.resource_url(client, identifier, "keyrings", query={"resolve": True, "from": from_, "to": to})
    return do_collection_request(client, url, Keyring)


def key_stats(client, identifier: str, from_, to, granularity, forapi: Optional[str] = None):
    return fetch_stats(client, Key.resource_path, identifier, from_, to, granularity, forapi=forapi)
