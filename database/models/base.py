import datetime

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# NAMING CONVENTION: The key to cross-database generic migrations
# This ensures constraints (FKs, PKs, Checks) have deterministic names.
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)
Base = declarative_base(metadata=metadata)


def utcnow() -> datetime.datetime:
    """Naive UTC now; stored timestamps carry no tzinfo."""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
