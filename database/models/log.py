from sqlalchemy import Column, Integer, String, DateTime, Text, JSON
from database.models.base import Base, utcnow


class Log(Base):
    __tablename__ = "user_logs"

    id = Column(Integer, primary_key=True, index=True)
    identifier = Column(String, index=True)
    action = Column(String, index=True)
    details = Column(Text)
    # "metadata" is reserved on declarative classes
    log_metadata = Column("metadata", JSON, nullable=True)
    timestamp = Column(DateTime, default=utcnow, index=True)
