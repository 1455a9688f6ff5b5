"""
OP-FW API Client
Polls the op-framework resource on each game server for its connected players
"""
import ipaddress
import logging
from typing import Optional, Dict, Any
from urllib.parse import urlparse

import requests

from app import config
from app.helpers import cache

logger = logging.getLogger(__name__)


def fix_api_url(server: str) -> str:
    """Normalise a configured server address to its op-framework API root."""
    url = server.strip()
    if not url.endswith("/"):
        url += "/"
    if not url.endswith("/op-framework/"):
        url += "op-framework/"
    if not url.startswith("http://") and not url.startswith("https://"):
        url = "https://" + url
    return url


def get_server_name(server: str) -> str:
    """Short display name: first host label (c3s1.op-framework.com -> c3s1), IPs unchanged."""
    host = urlparse(fix_api_url(server)).hostname or server
    try:
        ipaddress.ip_address(host)
        return host
    except ValueError:
        return host.split(".")[0]


class OpFwClient:
    """Client for the per-server connections endpoint"""

    def __init__(self, timeout: float = 5):
        self.timeout = timeout  # seconds

    def _make_request(self, url: str) -> Optional[Any]:
        """
        GET a JSON document.

        Returns:
            Decoded JSON or None if the request failed
        """
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout:
            logger.warning(f"OP-FW request to {url} timed out")
            return None
        except requests.exceptions.ConnectionError:
            logger.warning(f"Could not connect to OP-FW at {url}")
            return None
        except requests.exceptions.RequestException as e:
            logger.error(f"OP-FW request failed: {e}")
            return None
        except ValueError as e:
            logger.error(f"OP-FW returned invalid JSON from {url}: {e}")
            return None

    def fetch_steam_identifiers(self, server: str, use_cache: bool = True) -> Optional[Dict[str, Dict]]:
        """
        Get the players connected to a server, keyed by steam identifier.

        Args:
            server: Configured server address
            use_cache: Serve a recent result if one is cached. The cache is
                refreshed either way.

        Returns:
            {steam_identifier: {source, character, fakeDisconnected, identityOverride, name}}
            or None if the server could not be queried, in which case any
            cached result for it is dropped
        """
        key = "server_status_" + server
        if use_cache and cache.exists(key):
            return cache.read(key)

        data = self._make_request(fix_api_url(server) + "connections.json")
        if data is None:
            cache.forget(key)
            return None

        if isinstance(data, dict):
            data = data.get("data")
        if not isinstance(data, list):
            logger.error(f"Unexpected connections payload from {server}")
            cache.forget(key)
            return None

        players = {}
        for entry in data:
            if not isinstance(entry, dict) or not entry.get("steamIdentifier"):
                continue
            players[entry["steamIdentifier"]] = {
                "source": entry.get("source", 0),
                "character": entry.get("character"),
                "fakeDisconnected": bool(entry.get("fakeDisconnected", False)),
                "identityOverride": bool(entry.get("identityOverride", False)),
                "name": entry.get("name"),
            }

        cache.write(key, players, config.status_cache_ttl())
        return players


client = OpFwClient()
