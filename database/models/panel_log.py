from sqlalchemy import Column, Integer, String, DateTime, Text
from database.models.base import Base, utcnow


class PanelLog(Base):
    __tablename__ = "panel_logs"

    id = Column(Integer, primary_key=True, index=True)
    source_identifier = Column(String, index=True)
    target_identifier = Column(String, index=True)
    action = Column(String)  # e.g. "Issued Warning", "Banned Player"
    log = Column(Text)
    timestamp = Column(DateTime, default=utcnow)
