# Export Base for Alembic migrations
from .base import Base

# Export all models
from .user import User
from .log import Log
from .panel_log import PanelLog

# Player System
from .players.player import Player
from .players.character import Character
from .players.vehicle import Vehicle

# Moderation
from .moderation.ban import Ban
from .moderation.warning import Warning
