from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from database.models.base import Base, utcnow


class Warning(Base):
    __tablename__ = "warnings"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("users.user_id"), index=True, nullable=False)
    issuer_id = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    message = Column(Text)
    warning_type = Column(String, default="warning")  # warning, note
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    player = relationship("Player", foreign_keys=[player_id], back_populates="warnings")
    issuer = relationship("Player", foreign_keys=[issuer_id])
