import os
import re
import time

from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme
from sqlalchemy.exc import OperationalError

from database.connection import SessionLocal
from database.models.user import User
from app.services.auth_service import get_password_hash, verify_password

# Custom theme for the CLI
custom_theme = Theme({
    "info": "dim cyan",
    "warning": "magenta",
    "error": "bold red",
    "success": "bold green",
    "header": "bold white on blue",
})

console = Console(theme=custom_theme)


def print_header(text: str):
    """Prints a styled header panel."""
    console.print(Panel(f"[bold white]{text}[/bold white]", style="blue", expand=False))


def print_success(text: str):
    console.print(f"[success]✔ {text}[/success]")


def print_error(text: str):
    console.print(f"[error]✖ {text}[/error]")


def print_info(text: str):
    console.print(f"[info]ℹ {text}[/info]")


def print_warning(text: str):
    console.print(f"[warning]⚠ {text}[/warning]")


def update_env_variable(key: str, value: str):
    """
    Updates or adds a key-value pair in the .env file.
    Preserves existing comments and structure.
    """
    env_path = os.path.join(os.getcwd(), ".env")

    content = ""
    if os.path.exists(env_path):
        with open(env_path, "r") as f:
            content = f.read()

    # Matches "KEY=value" or "KEY = value"
    pattern = re.compile(rf"^{re.escape(key)}\s*=\s*.*$", re.MULTILINE)

    if pattern.search(content):
        new_content = pattern.sub(f"{key}={value}", content)
    else:
        if content and not content.endswith("\n"):
            content += "\n"
        new_content = content + f"{key}={value}\n"

    with open(env_path, "w") as f:
        f.write(new_content)

    print_success(f"Updated .env: {key}={value}")


def create_user_service(username, password, steam_identifier=None):
    db = SessionLocal()
    max_retries = 3
    retry_delay = 1

    try:
        if db.query(User).filter(User.username == username).first():
            return False, f"User '{username}' already exists."

        new_user = User(
            username=username,
            hashed_password=get_password_hash(password),
            steam_identifier=steam_identifier or None,
        )
        db.add(new_user)

        # SQLite may be locked by a running panel
        for attempt in range(max_retries):
            try:
                db.commit()
                break
            except OperationalError as e:
                if "database is locked" in str(e) and attempt < max_retries - 1:
                    time.sleep(retry_delay)
                    continue
                raise

        db.refresh(new_user)
        if not verify_password(password, new_user.hashed_password):
            return True, f"User '{username}' created, BUT immediate password verification FAILED. Please report this."

        return True, f"User '{username}' created successfully."

    except Exception as e:
        db.rollback()
        return False, f"Error creating user: {e}"
    finally:
        db.close()
