"""
Player Seeder
Seeds sample players with characters, vehicles and a warning each
"""
from database.connection import SessionLocal
from database.models.base import utcnow
from database.models.players.player import Player
from database.models.players.character import Character
from database.models.players.vehicle import Vehicle
from database.models.moderation.warning import Warning
import datetime
import random

FIRST_NAMES = ["James", "Maria", "Tommy", "Lucia", "Franklin", "Lamar", "Denise", "Trevor"]
LAST_NAMES = ["Vercetti", "Clinton", "Philips", "Davis", "Caminos", "Reyes", "Nguyen"]
JOBS = [
    ("Law Enforcement", "SASP", "Trooper"),
    ("Medical", "EMS", "Paramedic"),
    ("Mechanic", "Bennys", "Technician"),
    (None, None, None),
]
MODELS = ["sultan", "elegy", "police3", "ambulance", "faggio"]


def _steam(n: int) -> str:
    return f"steam:1100001{n:08x}"


def seed_players(count: int = 25):
    """Seed the users/characters tables with sample data"""
    db = SessionLocal()

    try:
        if db.query(Player).first():
            print("Players already exist. Skipping seed.")
            return

        print("Seeding Players...")
        now = utcnow()

        for n in range(1, count + 1):
            steam = _steam(n)
            player = Player(
                steam_identifier=steam,
                player_name=f"{random.choice(FIRST_NAMES)}{n}",
                identifiers=[steam, f"license:{n:040x}", f"discord:{100000000000000000 + n}", f"ip:10.0.0.{n}"],
                is_staff=n == 1,
                is_super_admin=n == 1,
                playtime=random.randint(0, 500) * 3600,
                total_joins=random.randint(1, 400),
                last_connection=now - datetime.timedelta(hours=random.randint(0, 24 * 30)),
            )
            db.add(player)
            db.flush()

            for slot in range(1, random.randint(1, 3) + 1):
                job, department, position = random.choice(JOBS)
                character = Character(
                    steam_identifier=steam,
                    character_slot=slot,
                    gender=random.randint(0, 1),
                    first_name=random.choice(FIRST_NAMES),
                    last_name=random.choice(LAST_NAMES),
                    date_of_birth=datetime.date(random.randint(1960, 2003), random.randint(1, 12), random.randint(1, 28)),
                    cash=random.randint(0, 5000),
                    bank=random.randint(0, 250000),
                    job_name=job,
                    department_name=department,
                    position_name=position,
                    backstory="Moved to Los Santos looking for a fresh start.",
                )
                character.money = character.cash + character.bank
                db.add(character)
                db.flush()

                db.add(Vehicle(
                    owner_cid=character.character_id,
                    model_name=random.choice(MODELS),
                    plate=f"{random.randint(10, 99)}OPF{random.randint(100, 999)}",
                ))

            if n > 1 and n % 5 == 0:
                db.add(Warning(player_id=player.user_id, issuer_id=1, message="Failure to roleplay"))

        db.commit()
        print(f"Seeded {count} players successfully.")
    except Exception as e:
        print(f"Error seeding players: {e}")
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":
    seed_players()
