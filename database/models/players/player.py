from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON
from sqlalchemy.orm import relationship
from database.models.base import Base
from app import config


class Player(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    steam_identifier = Column(String, unique=True, index=True, nullable=False)
    player_name = Column(String, index=True)
    identifiers = Column(JSON, default=list)

    is_staff = Column(Boolean, default=False)
    is_super_admin = Column(Boolean, default=False)
    is_trusted = Column(Boolean, default=False)
    is_panel_trusted = Column(Boolean, default=False)
    is_debugger = Column(Boolean, default=False)
    is_soft_banned = Column(Boolean, default=False)

    playtime = Column(Integer, default=0)  # seconds
    total_joins = Column(Integer, default=0)
    priority_level = Column(Integer, default=0)
    last_connection = Column(DateTime, nullable=True)

    # Relationships
    characters = relationship(
        "Character",
        back_populates="player",
        order_by="Character.character_slot",
        cascade="all, delete-orphan",
    )
    warnings = relationship(
        "Warning",
        foreign_keys="Warning.player_id",
        back_populates="player",
        cascade="all, delete-orphan",
    )
    panel_logs = relationship(
        "PanelLog",
        primaryjoin="Player.steam_identifier == foreign(PanelLog.target_identifier)",
        order_by="[PanelLog.timestamp.desc(), PanelLog.id.desc()]",
        viewonly=True,
    )

    # --- Identifiers ---
    def get_identifiers(self):
        """All known identifiers, steam identifier included, without duplicates."""
        identifiers = list(self.identifiers or [])
        identifiers.append(self.steam_identifier)
        return list(dict.fromkeys(identifiers))

    def get_bannable_identifiers(self):
        return [i for i in self.get_identifiers() if not i.startswith("ip:")]

    def get_identifier(self, key: str):
        for identifier in self.get_identifiers():
            if identifier.startswith(key):
                return identifier
        return None

    def get_discord_id(self) -> str:
        identifier = self.get_identifier("discord:")
        return identifier.replace("discord:", "", 1) if identifier else ""

    # --- Roles ---
    def is_root(self) -> bool:
        return self.steam_identifier in config.root_steam_identifiers()

    def is_super_admin_user(self) -> bool:
        return bool(self.is_super_admin) or self.is_root()

    def is_staff_user(self) -> bool:
        return bool(self.is_staff) or self.is_super_admin_user()

    def is_panel_trusted_user(self) -> bool:
        return self.is_super_admin_user() or bool(self.is_panel_trusted)

    def is_debugger_user(self) -> bool:
        return self.is_super_admin_user() or bool(self.is_debugger)

    # --- Bans ---
    def bans_query(self, db):
        from database.models.moderation.ban import Ban
        return db.query(Ban).filter(Ban.identifier.in_(self.get_identifiers()))

    def get_active_ban(self, db):
        from database.models.moderation.ban import Ban
        return db.query(Ban).filter(Ban.identifier == self.steam_identifier).first()

    def is_banned(self, db) -> bool:
        return self.get_active_ban(db) is not None
