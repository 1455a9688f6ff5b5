import typer

from database.migrate import run_migrations, rollback_migration, reset_database, show_current, show_history, create_database
from database.seeder import run_all_seeders, run_specific_seeder
from dev.utils import print_header, print_success, print_error

app = typer.Typer(help="Database management commands")


@app.command("all")
def db_all():
    """Run migrations and seeders together"""
    print_header("Running Database Setup (Migrate + Seed)")
    if run_migrations():
        print_success("Migrations applied.")
        run_all_seeders()
        print_success("Seeding completed.")
    else:
        print_error("Migrations failed. Aborting seeding.")
        raise typer.Exit(code=1)


@app.command("migrate")
def migrate_cmd():
    """Apply pending migrations"""
    print_header("Applying Migrations")
    if run_migrations():
        print_success("Done.")
    else:
        print_error("Failed.")
        raise typer.Exit(code=1)


@app.command("rollback")
def rollback_cmd():
    """Rollback the last migration"""
    print_header("Rolling Back")
    if rollback_migration():
        print_success("Done.")
    else:
        print_error("Failed.")
        raise typer.Exit(code=1)


@app.command("reset")
def reset_cmd():
    """Reset database (Rollback all + Migrate)"""
    print_header("Resetting Database")
    if reset_database():
        print_success("Database reset successfully.")
    else:
        print_error("Reset failed.")
        raise typer.Exit(code=1)


@app.command("init-db")
def init_db_cmd():
    """Create tables from the models and stamp the latest migration"""
    print_header("Initializing Database")
    if create_database():
        print_success("Database ready.")
    else:
        print_error("Initialization failed.")
        raise typer.Exit(code=1)


@app.command("seed")
def seed_cmd(name: str = typer.Argument("all", help="Seeder to run: all, users, players, logs")):
    """Run database seeders"""
    print_header("Seeding Database")
    if name == "all":
        run_all_seeders()
    elif not run_specific_seeder(name):
        raise typer.Exit(code=1)


@app.command("status")
def status_cmd():
    """Show the current migration"""
    show_current()


@app.command("history")
def history_cmd():
    """Show migration history"""
    show_history()
