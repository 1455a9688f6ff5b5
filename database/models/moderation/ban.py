from sqlalchemy import Column, Integer, String, DateTime, Text
from database.models.base import Base, utcnow


class Ban(Base):
    __tablename__ = "user_bans"

    id = Column(Integer, primary_key=True, index=True)
    ban_hash = Column(String, index=True)  # Shared by every row of one ban
    identifier = Column(String, index=True)
    reason = Column(Text, nullable=True)
    timestamp = Column(DateTime, default=utcnow)
    expire = Column(Integer, nullable=True)  # Seconds, Null = Permanent
    creator_name = Column(String, nullable=True)
    creator_identifier = Column(String, nullable=True)
