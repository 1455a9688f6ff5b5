import importlib
import os
import subprocess
import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

app = typer.Typer(help="OP-FW Admin Panel CLI Tool")
console = Console()

DEV_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dev")


# --- Dynamic Loader ---
def load_commands():
    """
    Register every module in 'dev/' that exposes a Typer `app` as a sub-command group.
    """
    for filename in sorted(os.listdir(DEV_DIR)):
        if not filename.endswith(".py") or filename in ("__init__.py", "utils.py"):
            continue

        module_name = filename[:-3]
        try:
            module = importlib.import_module(f"dev.{module_name}")
        except Exception as e:
            console.print(f"[red]Failed to load module {module_name}: {e}[/red]")
            continue

        if hasattr(module, "app"):
            app.add_typer(module.app, name=module_name)


load_commands()


# --- Interactive Menu ---
MENU = [
    ("1", "Server", "Run (Dev)", "Start development server", ["server", "run"]),
    ("2", "Database", "Setup", "Migrate + seed", ["database", "all"]),
    ("3", "Database", "Initialize", "Create tables + stamp", ["database", "init-db"]),
    ("4", "Users", "Create User", "Interactive panel user creation", ["users", "create"]),
    ("5", "Status", "Servers", "Poll game servers", ["status", "servers"]),
]


@app.callback(invoke_without_command=True)
def main_interactive(ctx: typer.Context):
    """
    Main entry point. Launches interactive menu if no command is provided.
    """
    if ctx.invoked_subcommand is None:
        show_menu()


def show_menu():
    while True:
        console.clear()

        console.print(Panel.fit(
            "[bold white]OP-FW Admin Panel CLI[/bold white]\n[cyan]Manage the panel database, users and servers.[/cyan]",
            title="Welcome",
            border_style="blue"
        ))

        table = Table(show_header=True, header_style="bold magenta", expand=True)
        table.add_column("No.", style="dim", width=4, justify="center")
        table.add_column("Category", style="cyan", width=12)
        table.add_column("Action", style="white")
        table.add_column("Description", style="dim")

        for number, category, action, description, _ in MENU:
            table.add_row(number, category, action, description)
        table.add_row("0", "Exit", "Quit", "Close the CLI")

        console.print(table)
        console.print("\n")

        choices = [entry[0] for entry in MENU] + ["0"]
        choice = Prompt.ask("Select an option", choices=choices, default="1")

        if choice == "0":
            console.print("[bold]Goodbye![/bold]")
            sys.exit(0)

        command = next(entry[4] for entry in MENU if entry[0] == choice)
        subprocess.run([sys.executable, __file__, *command])

        input("\nPress Enter to continue...")


if __name__ == "__main__":
    app()
