from sqlalchemy import Column, Integer, String, Boolean, Date, Text, ForeignKey
from sqlalchemy.orm import relationship
from database.models.base import Base


class Character(Base):
    __tablename__ = "characters"

    character_id = Column(Integer, primary_key=True, index=True)
    steam_identifier = Column(String, ForeignKey("users.steam_identifier"), index=True, nullable=False)
    character_slot = Column(Integer, default=0)

    gender = Column(Integer, default=0)  # 0 = male, 1 = female
    first_name = Column(String)
    last_name = Column(String)
    date_of_birth = Column(Date, nullable=True)
    backstory = Column(Text, nullable=True)

    # Economy
    cash = Column(Integer, default=0)
    bank = Column(Integer, default=0)
    money = Column(Integer, default=0)
    stocks_balance = Column(Integer, default=0)

    # Job
    job_name = Column(String, nullable=True)
    department_name = Column(String, nullable=True)
    position_name = Column(String, nullable=True)

    character_deleted = Column(Boolean, default=False)
    character_deletion_timestamp = Column(Integer, nullable=True)  # unix seconds

    player = relationship("Player", back_populates="characters")
    vehicles = relationship("Vehicle", back_populates="owner", cascade="all, delete-orphan")

    @property
    def name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
