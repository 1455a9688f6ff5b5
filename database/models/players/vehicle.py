from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.models.base import Base


class Vehicle(Base):
    __tablename__ = "character_vehicles"

    vehicle_id = Column(Integer, primary_key=True, index=True)
    owner_cid = Column(Integer, ForeignKey("characters.character_id"), index=True, nullable=False)
    model_name = Column(String)
    plate = Column(String, index=True)

    owner = relationship("Character", back_populates="vehicles")
