"""
Seeder Runner
Main entry point to run all database seeders
"""
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database.seeders import seed_users, seed_players, seed_logs

# Order matters - players before the logs that reference them
SEEDERS = {
    "users": seed_users,
    "players": seed_players,
    "logs": seed_logs,
}


def run_all_seeders():
    """Run all database seeders in order"""
    print("=" * 50)
    print("Starting Database Seeding...")
    print("=" * 50)

    for name, seeder_func in SEEDERS.items():
        print(f"\n[SEEDER] Running {name} seeder...")
        try:
            seeder_func()
            print(f"[SEEDER] {name} seeder completed ✓")
        except Exception as e:
            print(f"[SEEDER] {name} seeder failed ✗: {e}")

    print("\n" + "=" * 50)
    print("Database Seeding Complete!")
    print("=" * 50)


def run_specific_seeder(seeder_name: str) -> bool:
    """Run a specific seeder by name"""
    seeder_name = seeder_name.lower()
    if seeder_name not in SEEDERS:
        print(f"Unknown seeder: {seeder_name}")
        print(f"Available seeders: {', '.join(SEEDERS)}")
        return False

    print(f"Running {seeder_name} seeder...")
    SEEDERS[seeder_name]()
    print(f"{seeder_name} seeder completed!")
    return True


if __name__ == "__main__":
    if len(sys.argv) > 1:
        run_specific_seeder(sys.argv[1])
    else:
        run_all_seeders()
