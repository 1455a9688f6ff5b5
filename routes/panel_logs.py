from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Optional

from database.connection import get_db
from database.models.user import User
from database.models.panel_log import PanelLog
from app.helpers import cache
from app.helpers.pagination import PER_PAGE, get_page_urls
from app.resources import panel_log_resource
from routes.auth import get_current_user

router = APIRouter(prefix="/api/panel-logs", tags=["Panel Logs"])


@router.get("/")
def list_panel_logs(
    request: Request,
    page: int = Query(1, ge=1),
    source: Optional[str] = None,
    target: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(PanelLog)

    if source:
        query = query.filter(PanelLog.source_identifier == source)

    if target:
        query = query.filter(PanelLog.target_identifier == target)

    logs = query.order_by(PanelLog.timestamp.desc(), PanelLog.id.desc()) \
                .offset((page - 1) * PER_PAGE) \
                .limit(PER_PAGE) \
                .all()

    items = [panel_log_resource(log) for log in logs]
    identifiers = [i["sourceIdentifier"] for i in items] + [i["targetIdentifier"] for i in items]
    player_map = cache.load_steam_player_name_map(db, identifiers)

    return {
        "logs": items,
        "filters": {"source": source, "target": target},
        "playerMap": player_map or {"empty": "empty"},
        "links": get_page_urls(request, page),
        "page": page,
    }
