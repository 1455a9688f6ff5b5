from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import String, cast
from sqlalchemy.orm import Session
from typing import Optional
import datetime
import uuid

from database.connection import get_db
from database.models.user import User
from database.models.players.player import Player
from database.models.moderation.ban import Ban
from database.models.moderation.warning import Warning
from database.models.base import utcnow
from database.schemas import WarningCreate, BanCreate
from app.helpers.identifiers import is_valid_identifier
from app.helpers.pagination import PER_PAGE, get_page_urls
from app.resources import (
    player_resource, character_resource, warning_resource, panel_log_resource, ban_resource
)
from app.services import player_service
from app.services.opfw.player_status import get_online_status
from app.services.panel_log_service import PanelLogService
from routes.auth import get_current_user

router = APIRouter(prefix="/api/players", tags=["Players"])


def get_player_or_404(db: Session, steam: str) -> Player:
    player = player_service.get_player(db, steam)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    return player


def get_issuer(db: Session, user: User) -> Optional[Player]:
    if not user.steam_identifier:
        return None
    return player_service.get_player(db, user.steam_identifier)


@router.get("/")
def list_players(
    request: Request,
    page: int = Query(1, ge=1),
    name: Optional[str] = None,
    steam: Optional[str] = None,
    identifier: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(Player)

    # Filters
    if name:
        query = query.filter(Player.player_name.ilike(f"%{name}%"))

    if steam:
        query = query.filter(Player.steam_identifier.like(f"{steam}%"))

    if identifier:
        if not is_valid_identifier(identifier):
            raise HTTPException(status_code=400, detail="Invalid identifier")
        query = query.filter(cast(Player.identifiers, String).like(f'%"{identifier}"%'))

    players = query.order_by(Player.last_connection.desc()) \
                   .offset((page - 1) * PER_PAGE) \
                   .limit(PER_PAGE) \
                   .all()

    return {
        "players": [player_resource(p, db) for p in players],
        "filters": {"name": name, "steam": steam, "identifier": identifier},
        "links": get_page_urls(request, page),
        "page": page,
    }


@router.get("/{steam}")
def get_player_details(steam: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Player page data: profile, characters, moderation history and live status"""
    resolved = player_service.resolve_player(db, steam)
    if resolved is None:
        raise HTTPException(status_code=404, detail="Player not found")

    # Fake identities resolve to a prepared payload
    if isinstance(resolved, dict):
        return resolved

    player = resolved
    data = player_resource(player, db)
    data["status"] = get_online_status(player.steam_identifier, use_cache=True).to_dict()

    return {
        "player": data,
        "characters": [character_resource(c) for c in player.characters],
        "warnings": [warning_resource(w) for w in sorted(player.warnings, key=lambda w: w.created_at or datetime.datetime.min, reverse=True)],
        "panelLogs": [panel_log_resource(log) for log in player.panel_logs],
        "bans": [ban_resource(b) for b in player.bans_query(db).order_by(Ban.timestamp.desc()).all()],
        "discord": player.get_discord_id() or None,
    }


@router.get("/{steam}/status")
def get_player_status(
    steam: str,
    true: bool = Query(False, description="Ignore fake disconnects and identity overrides"),
    current_user: User = Depends(get_current_user)
):
    return get_online_status(steam, use_cache=True, true_status=true).to_dict()


@router.post("/{steam}/warnings")
def create_warning(steam: str, data: WarningCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    player = get_player_or_404(db, steam)
    issuer = get_issuer(db, current_user)

    warning = Warning(
        player_id=player.user_id,
        issuer_id=issuer.user_id if issuer else None,
        message=data.message,
        warning_type=data.warning_type,
    )
    db.add(warning)
    db.commit()
    db.refresh(warning)

    PanelLogService.log_action(db, current_user, player.steam_identifier, "Issued Warning",
                               f"{current_user.username} warned {player.player_name}: {data.message}")
    return warning_resource(warning)


@router.delete("/{steam}/warnings/{warning_id}")
def delete_warning(steam: str, warning_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    player = get_player_or_404(db, steam)
    warning = db.query(Warning).filter(Warning.id == warning_id, Warning.player_id == player.user_id).first()
    if not warning:
        raise HTTPException(status_code=404, detail="Warning not found")

    db.delete(warning)
    db.commit()

    PanelLogService.log_action(db, current_user, player.steam_identifier, "Removed Warning",
                               f"{current_user.username} removed warning #{warning_id} from {player.player_name}")
    return {"message": "Warning deleted"}


@router.post("/{steam}/ban")
def ban_player(steam: str, data: BanCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    player = get_player_or_404(db, steam)
    if player.is_banned(db):
        raise HTTPException(status_code=400, detail="Player is already banned")

    issuer = get_issuer(db, current_user)
    ban_hash = str(uuid.uuid4())
    timestamp = utcnow()

    bans = []
    for identifier in player.get_bannable_identifiers():
        ban = Ban(
            ban_hash=ban_hash,
            identifier=identifier,
            reason=data.reason,
            timestamp=timestamp,
            expire=data.expire,
            creator_name=issuer.player_name if issuer else current_user.username,
            creator_identifier=issuer.steam_identifier if issuer else None,
        )
        db.add(ban)
        bans.append(ban)
    db.commit()

    duration = f"{data.expire} seconds" if data.expire else "permanently"
    PanelLogService.log_action(db, current_user, player.steam_identifier, "Banned Player",
                               f"{current_user.username} banned {player.player_name} {duration}: {data.reason or 'no reason'}")
    return {"banHash": ban_hash, "bans": [ban_resource(b) for b in bans]}


@router.delete("/{steam}/ban")
def unban_player(steam: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    player = get_player_or_404(db, steam)
    deleted = player.bans_query(db).delete(synchronize_session=False)
    if not deleted:
        raise HTTPException(status_code=404, detail="Player is not banned")
    db.commit()

    PanelLogService.log_action(db, current_user, player.steam_identifier, "Unbanned Player",
                               f"{current_user.username} unbanned {player.player_name}")
    return {"message": "Player unbanned", "removed": deleted}
