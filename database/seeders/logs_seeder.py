"""
Logs Seeder
Seeds 1000 random log entries for one random player
"""
from sqlalchemy import func
from database.connection import SessionLocal
from database.models.base import utcnow
from database.models.players.player import Player
from database.models.log import Log
import datetime
import random

ACTIONS = [
    ("User Joined", "{name} has connected to the server [{server}] ."),
    ("User Disconnected", "{name} has disconnected from the server [{server}] ."),
    ("Character Loaded", "{name} loaded character #{character} [{server}] ."),
    ("Purchased Vehicle", "{name} purchased a vehicle for ${amount} [{server}] ."),
    ("Bank Transfer", "{name} transferred ${amount} to another account [{server}] ."),
]


def seed_logs(count: int = 1000):
    """Seed the user_logs table with sample data"""
    db = SessionLocal()

    try:
        player = db.query(Player).order_by(func.random()).first()
        if player is None:
            print("No players found. Run the player seeder first.")
            return

        print(f"Seeding {count} logs for {player.steam_identifier}...")
        now = utcnow()

        for _ in range(count):
            action, template = random.choice(ACTIONS)
            server = random.randint(1, 3)
            db.add(Log(
                identifier=player.steam_identifier,
                action=action,
                details=template.format(
                    name=player.player_name,
                    server=server,
                    character=random.randint(1, 500),
                    amount=random.randint(100, 50000),
                ),
                log_metadata={"server": server},
                timestamp=now - datetime.timedelta(minutes=random.randint(0, 60 * 24 * 14)),
            ))

        db.commit()
        print(f"Seeded {count} log entries successfully.")
    except Exception as e:
        print(f"Error seeding logs: {e}")
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":
    seed_logs()
