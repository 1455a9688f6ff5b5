import typer
import uvicorn
from dev.utils import print_header

app = typer.Typer(help="Web server commands")


@app.command("run")
def run_server(
    host: str = typer.Option("127.0.0.1", help="Host to bind"),
    port: int = typer.Option(8000, help="Port to bind"),
    reload: bool = typer.Option(True, help="Enable auto-reload (Dev mode)"),
    prod: bool = typer.Option(False, "--prod", help="Production mode (disables reload)")
):
    """
    Start the Admin Panel Web Server
    """
    if prod:
        reload = False
        print_header("Starting Panel in PRODUCTION mode")
    else:
        print_header("Starting Panel in DEVELOPMENT mode")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )
