import typer
from rich.prompt import Prompt
from rich.table import Table

from database.connection import SessionLocal
from database.models.user import User
from dev.utils import console, print_header, print_success, print_error, create_user_service

app = typer.Typer(help="Panel user management commands")


@app.command("create")
def create(
    username: str = typer.Option(None, help="Username (prompted if omitted)"),
    steam: str = typer.Option("", help="Steam identifier of the staff member's player"),
):
    """Create a panel user"""
    print_header("Create Panel User")

    username = username or Prompt.ask("[bold cyan]Enter username[/bold cyan]")
    password = Prompt.ask("[bold cyan]Enter password[/bold cyan]", password=True)

    success, message = create_user_service(username, password, steam)
    if success:
        print_success(message)
    else:
        print_error(message)
        raise typer.Exit(code=1)


@app.command("list")
def list_users():
    """List panel users"""
    db = SessionLocal()
    try:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID", style="dim")
        table.add_column("Username")
        table.add_column("Steam Identifier")
        for user in db.query(User).order_by(User.id).all():
            table.add_row(str(user.id), user.username, user.steam_identifier or "-")
        console.print(table)
    finally:
        db.close()
