from typing import Optional

IDENTIFIER_LABELS = {
    "ip": "IP-Address",
    "steam": "Steam Account",
    "discord": "Discord Account",
    "fivem": "FiveM Account",
    "license": "Rockstar Account",
    "license2": "Rockstar Account",
    "live": "Microsoft Account",
    "xbl": "XBox Live",
}


def get_identifier_label(identifier: str) -> Optional[str]:
    identifier_type = identifier.split(":")[0]
    return IDENTIFIER_LABELS.get(identifier_type)


def is_valid_identifier(identifier: str) -> bool:
    return len(identifier.split(":")) == 2 and get_identifier_label(identifier) is not None
