"""
Panel configuration.
Values are read from the environment (and .env) on every call so a running
panel picks up changes made by the CLI and tests can patch them.
"""
import os
from typing import List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_STATUS_CACHE_TTL = 10
DEFAULT_LOGS_PER_PAGE = 15


def _split(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def op_fw_servers() -> List[str]:
    """Game servers to poll, in configured order (OP_FW_SERVERS=host1,host2)"""
    return _split(os.getenv("OP_FW_SERVERS", ""))


def status_cache_ttl() -> int:
    return int(os.getenv("OP_FW_STATUS_CACHE_TTL", DEFAULT_STATUS_CACHE_TTL))


def root_steam_identifiers() -> List[str]:
    return _split(os.getenv("ROOT_STEAM_IDENTIFIERS", ""))


def steam_api_key() -> str:
    return os.getenv("STEAM_API_KEY", "")


def logs_per_page() -> int:
    return int(os.getenv("LOGS_PER_PAGE", DEFAULT_LOGS_PER_PAGE))
