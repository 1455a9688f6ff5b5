"""
Migration Runner
Main entry point for running database migrations using Alembic
"""
import sys
import os
import subprocess

# Add the project root to the Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


def _alembic(*args):
    return subprocess.run(
        [sys.executable, "-m", "alembic", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True
    )


def _run_step(label: str, *args) -> bool:
    try:
        result = _alembic(*args)
    except OSError as e:
        print(f"[MIGRATE] Error running {label}: {e}")
        return False

    if result.returncode != 0:
        print(f"[MIGRATE] {label} failed ✗")
        print(result.stderr)
        return False

    print(result.stdout)
    print(f"\n[MIGRATE] {label} completed successfully ✓")
    return True


def create_database():
    """Create tables straight from the models and stamp alembic head"""
    print("=" * 50)
    print("Initializing Database...")
    print("=" * 50)

    # Import here so a broken .env doesn't stop the CLI from loading
    from database.connection import engine
    from database.models import Base

    print("[INIT] Creating tables via SQLAlchemy...")
    Base.metadata.create_all(bind=engine)
    print("[INIT] Tables created successfully.")

    print("[INIT] Stamping Alembic header...")
    return _run_step("Stamp", "stamp", "head")


def run_migrations():
    """Run all pending migrations"""
    print("=" * 50)
    print("Running Database Migrations...")
    print("=" * 50)
    return _run_step("Migration", "upgrade", "head")


def rollback_migration():
    """Rollback the last migration"""
    print("Rolling back last migration...")
    return _run_step("Rollback", "downgrade", "-1")


def reset_database():
    """Reset database by rolling back all migrations and re-running them"""
    print("=" * 50)
    print("Resetting Database...")
    print("=" * 50)
    return _run_step("Reset downgrade", "downgrade", "base") and _run_step("Reset upgrade", "upgrade", "head")


def show_current():
    """Show current migration status"""
    result = _alembic("current")
    print(result.stdout or result.stderr)


def show_history():
    """Show migration history"""
    result = _alembic("history")
    print(result.stdout or result.stderr)


COMMANDS = {
    "run": run_migrations,
    "rollback": rollback_migration,
    "reset": reset_database,
    "status": show_current,
    "history": show_history,
    "init": create_database,
}


if __name__ == "__main__":
    command = sys.argv[1] if len(sys.argv) > 1 else "run"

    if command in COMMANDS:
        COMMANDS[command]()
    else:
        print(f"Unknown command: {command}")
        print(f"Available commands: {', '.join(COMMANDS)}")
