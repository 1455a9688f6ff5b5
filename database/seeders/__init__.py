"""
Database Seeders Package
__init__.py for the seeders module
"""
from .user_seeder import seed_users
from .player_seeder import seed_players
from .logs_seeder import seed_logs

__all__ = [
    'seed_users',
    'seed_players',
    'seed_logs',
]
