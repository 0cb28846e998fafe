"""
Keyring operations addressed by identifier.

Each function performs exactly one HTTP request through the given client.
"""

from typing import List, Optional

from ...core.constants import PageDefaults
from ..keys.models import Key
from ..keys.service import change_key_link, do_keys_request
from ..statistics.service import fetch_stats
from .models import Keyring


def new_keyring(client, identifier: str) -> Keyring:
    """Local keyring, created on the server by ``save()``"""
    return Keyring.new(client, identifier)


def get_keyring(client, identifier: str) -> Keyring:
    """Retrieve an existing keyring from the server"""
    return Keyring.fetch(client, identifier)


def delete_keyring(client, identifier: str) -> None:
    """Remove the keyring. Proxies still holding it will fail on save()."""
    Keyring.remove(client, identifier)


def list_keyrings(client, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Keyring]:
    return Keyring.list_all(client, from_, to)


def keyring_link_key(client, keyring_identifier: str, key_identifier: str) -> Key:
    return change_key_link(client, Keyring.resource_path, keyring_identifier, "linkkey", key_identifier)


def keyring_unlink_key(client, keyring_identifier: str, key_identifier: str) -> Key:
    return change_key_link(client, Keyring.resource_path, keyring_identifier, "unlinkkey", key_identifier)


def keyring_keys(client, identifier: str, from_: int = PageDefaults.FROM, to: int = PageDefaults.TO) -> List[Key]:
    url = Keyring.resource_url(client, identifier, "keys", query={"resolve": True, "from": from_, "to": to})
    return do_keys_request(client, url)


def keyring_stats(
    client,
    identifier: str,
    from_,
    to,
    granularity,
    forkey: Optional[str] = None,
    forapi: Optional[str] = None
):
    """Hit statistics for a keyring, optionally narrowed to one key or api"""
    return fetch_stats(
        client, Keyring.resource_path, identifier, from_, to, granularity,
        forkey=forkey, forapi=forapi
    )
