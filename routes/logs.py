from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Optional
import time

from app import config
from database.connection import get_db
from database.models.user import User
from app.helpers import cache
from app.helpers.pagination import get_page_urls
from app.resources import log_resource
from app.services.log_service import build_log_query, paginate
from routes.auth import get_current_user

router = APIRouter(prefix="/api/logs", tags=["Logs"])


@router.get("/")
def get_logs(
    request: Request,
    page: int = Query(1, ge=1),
    identifier: Optional[str] = None,
    server: Optional[str] = None,
    action: Optional[str] = None,
    details: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    start = time.perf_counter()

    query = build_log_query(
        db,
        identifier=identifier,
        before=before,
        after=after,
        server=server,
        action=action,
        details=details,
    )
    logs = [log_resource(log) for log in paginate(query, page, config.logs_per_page())]

    player_map = cache.load_steam_player_name_map(db, [log["steamIdentifier"] for log in logs])
    for log in logs:
        log["playerName"] = player_map.get(log["steamIdentifier"])

    elapsed = round((time.perf_counter() - start) * 1000)

    return {
        "logs": logs,
        "filters": {
            "identifier": identifier,
            "server": server,
            "action": action,
            "details": details,
            "after": after,
            "before": before,
        },
        "links": get_page_urls(request, page),
        "time": elapsed,
        "playerMap": player_map or {"empty": "empty"},
        "page": page,
    }
