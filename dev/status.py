import typer
from rich.table import Table

from app import config
from app.services.opfw import opfw_client
from app.services.opfw.opfw_client import get_server_name
from app.services.opfw.player_status import get_online_status
from dev.utils import console, print_header, print_error, print_info, print_warning, update_env_variable

app = typer.Typer(help="Game server status commands")


@app.command("servers")
def servers():
    """Poll every configured server and show its player count"""
    print_header("Game Servers")

    tracked = config.op_fw_servers()
    if not tracked:
        print_warning("OP_FW_SERVERS is empty.")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Server")
    table.add_column("Name", style="cyan")
    table.add_column("Players", justify="right")

    for server in tracked:
        players = opfw_client.client.fetch_steam_identifiers(server, use_cache=False)
        count = "[red]unreachable[/red]" if players is None else str(len(players))
        table.add_row(server, get_server_name(server), count)

    console.print(table)


@app.command("player")
def player(steam_identifier: str, true: bool = typer.Option(False, "--true", help="Show the true status")):
    """Show the online status of a player"""
    status = get_online_status(steam_identifier, use_cache=False, true_status=true)
    if status.is_online():
        print_info(f"{steam_identifier} is online on {status.server_name} (#{status.server_id}, character {status.character})")
    elif status.status == status.STATUS_UNAVAILABLE:
        print_error("Status unavailable, at least one server could not be reached.")
    else:
        print_info(f"{steam_identifier} is offline.")


@app.command("set-servers")
def set_servers(servers: str):
    """Store the comma separated server list in .env"""
    update_env_variable("OP_FW_SERVERS", servers)
