"""
Audit log listing: turns the panel's filter inputs into a query.
"""
import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, Query

from database.models.log import Log


def multi_values(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated filter into trimmed values."""
    if not value:
        return None
    return [v.strip() for v in value.split(",")]


def to_int(value: str) -> int:
    """Leading-digit integer coercion; non-numeric input becomes 0."""
    value = value.strip()
    sign = 1
    if value[:1] in ("-", "+"):
        sign = -1 if value[0] == "-" else 1
        value = value[1:]
    digits = ""
    for char in value:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def _match(column, value: str):
    # "=value" means exact, anything else is a substring match
    if value.startswith("="):
        return column == value[1:]
    return column.like(f"%{value}%")


def _from_unix(value: str) -> datetime.datetime:
    """Naive UTC datetime for unix seconds, clamped to the representable range."""
    seconds = to_int(value)
    try:
        return datetime.datetime.fromtimestamp(seconds, datetime.timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError, OSError):
        return datetime.datetime.max if seconds > 0 else datetime.datetime.min


def build_log_query(
    db: Session,
    identifier: Optional[str] = None,
    before: Optional[str] = None,
    after: Optional[str] = None,
    server: Optional[str] = None,
    action: Optional[str] = None,
    details: Optional[str] = None,
) -> Query:
    query = db.query(Log).order_by(Log.timestamp.desc())

    # Filtering by identifier.
    identifiers = multi_values(identifier)
    if identifiers:
        query = query.filter(or_(*[Log.identifier == i for i in identifiers]))

    # Filtering by before.
    if before:
        query = query.filter(Log.timestamp < _from_unix(before))

    # Filtering by after.
    if after:
        query = query.filter(Log.timestamp > _from_unix(after))

    # Filtering by server. Details carry the server id as " [3] ".
    servers = multi_values(server)
    if servers:
        query = query.filter(or_(*[Log.details.like(f"% [{to_int(s)}] %") for s in servers]))

    # Filtering by action.
    actions = multi_values(action)
    if actions:
        query = query.filter(or_(*[_match(Log.action, a) for a in actions]))

    # Filtering by details.
    if details:
        query = query.filter(_match(Log.details, details))

    return query


def paginate(query: Query, page: int, per_page: int) -> list:
    return query.limit(per_page).offset((page - 1) * per_page).all()
