"""
Api operations addressed by identifier.
"""

from typing import List, Optional

from ...core.constants import PageDefaults
from ..keys.models import Key
from ..keys.service import change_key_link, do_keys_request
from ..statistics.service import fetch_stats
from .models import Api


def new_api(client, identifier: str, **fields) -> Api:
    """Local api, created on the server by ``save()``"""
    return Api.new(client, identifier, **fields)


def get_api(client, identifier: str) -> Api:
    return Api.fetch(client, identifier)


def delete_api(client, identifier: str) -> None:
    Api.remove(client, identifier)


def list_apis(client, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Api]:
    return Api.list_all(client, from_, to)


def api_link_key(client, api_identifier: str, key_identifier: str) -> Key:
    """Give a key access to an api"""
    return change_key_link(client, Api.resource_path, api_identifier, "linkkey", key_identifier)


def api_unlink_key(client, api_identifier: str, key_identifier: str) -> Key:
    """Revoke a key's access to an api"""
    return change_key_link(client, Api.resource_path, api_identifier, "unlinkkey", key_identifier)


def api_keys(client, identifier: str, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Key]:
    url = Api.resource_url(client, identifier, "keys", query={"resolve": True, "from": from_, "to": to})
    return do_keys_request(client, url)


def api_stats(client, identifier: str, from_, to, granularity, forkey: Optional[str] = None):
    return fetch_stats(client, Api.resource_path, identifier, from_, to, granularity, forkey=forkey)
