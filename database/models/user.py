from sqlalchemy import Column, Integer, String
from database.models.base import Base


class User(Base):
    """Panel account. Linked to the staff member's in-game player by steam identifier."""
    __tablename__ = "panel_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True)
    hashed_password = Column(String)
    steam_identifier = Column(String, nullable=True, index=True)
