from fastapi import APIRouter, Depends

from app import config
from database.models.user import User
from app.services.opfw import opfw_client
from app.services.opfw.opfw_client import fix_api_url, get_server_name
from routes.auth import get_current_user

router = APIRouter(prefix="/api/servers", tags=["Servers"])


@router.get("/")
def list_servers(current_user: User = Depends(get_current_user)):
    """Configured game servers and how many players each one reports"""
    servers = []
    for server in config.op_fw_servers():
        players = opfw_client.client.fetch_steam_identifiers(server, use_cache=True)
        servers.append({
            "server": server,
            "name": get_server_name(server),
            "apiUrl": fix_api_url(server),
            "online": players is not None,
            "onlineCount": len(players) if players is not None else None,
        })
    return {"servers": servers}
