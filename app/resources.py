"""
JSON representations of panel records.
Keys are camelCase to match what the panel frontend consumes.
"""
from typing import Dict, Optional

from sqlalchemy.orm import Session

from database.models.players.player import Player
from database.models.players.character import Character
from database.models.players.vehicle import Vehicle
from database.models.moderation.ban import Ban
from database.models.moderation.warning import Warning
from database.models.panel_log import PanelLog
from database.models.log import Log
from app.helpers.identifiers import get_identifier_label
from app.services import steam_service


def _timestamp(value):
    return value.isoformat() if value else None


def ban_resource(ban: Optional[Ban]) -> Optional[Dict]:
    if ban is None:
        return None
    return {
        "id": ban.id,
        "banHash": ban.ban_hash,
        "identifier": ban.identifier,
        "reason": ban.reason,
        "timestamp": _timestamp(ban.timestamp),
        "expire": ban.expire,
        "creatorName": ban.creator_name,
        "creatorIdentifier": ban.creator_identifier,
    }


def player_resource(player: Player, db: Session) -> Dict:
    return {
        "id": player.user_id,
        "avatar": steam_service.get_avatar(player.steam_identifier),
        "discord": player.get_discord_id() or None,
        "steamIdentifier": player.steam_identifier,
        "steam36": steam_service.steam36(player.steam_identifier),
        "playerName": player.player_name,
        "playTime": player.playtime,
        "lastConnection": _timestamp(player.last_connection),
        "steamProfileUrl": steam_service.get_steam_profile_url(player.steam_identifier),
        "identifiers": [
            {"identifier": identifier, "label": get_identifier_label(identifier)}
            for identifier in player.get_identifiers()
        ],
        "isTrusted": bool(player.is_trusted),
        "isDebugger": player.is_debugger_user(),
        "isPanelTrusted": player.is_panel_trusted_user(),
        "isStaff": player.is_staff_user(),
        "isSuperAdmin": player.is_super_admin_user(),
        "isRoot": player.is_root(),
        "isSoftBanned": bool(player.is_soft_banned),
        "isBanned": player.is_banned(db),
        "warnings": len(player.warnings),
        "ban": ban_resource(player.get_active_ban(db)),
    }


def character_resource(character: Character) -> Dict:
    return {
        "id": character.character_id,
        "slot": character.character_slot,
        "gender": character.gender,
        "firstName": character.first_name,
        "lastName": character.last_name,
        "name": character.name,
        "dateOfBirth": character.date_of_birth.strftime("%Y-%m-%d") if character.date_of_birth else None,
        "jobName": character.job_name,
        "departmentName": character.department_name,
        "positionName": character.position_name,
        "characterDeleted": bool(character.character_deleted),
        "characterDeletionTimestamp": character.character_deletion_timestamp,
        "steamIdentifier": character.steam_identifier,
    }


def vehicle_resource(vehicle: Vehicle) -> Dict:
    return {
        "id": vehicle.vehicle_id,
        "owner": vehicle.owner_cid,
        "modelName": vehicle.model_name,
        "plate": vehicle.plate,
    }


def extended_character_resource(character: Character, db: Session) -> Dict:
    data = character_resource(character)
    data.update({
        "cash": character.cash,
        "bank": character.bank,
        "money": character.money,
        "stocksBalance": character.stocks_balance,
        "backstory": character.backstory,
        "vehicles": [vehicle_resource(v) for v in character.vehicles],
        "player": player_resource(character.player, db) if character.player else None,
    })
    return data


def warning_resource(warning: Warning) -> Dict:
    issuer = warning.issuer
    return {
        "id": warning.id,
        "message": warning.message,
        "warningType": warning.warning_type,
        "issuer": {
            "id": issuer.user_id,
            "playerName": issuer.player_name,
            "steamIdentifier": issuer.steam_identifier,
        } if issuer else None,
        "createdAt": _timestamp(warning.created_at),
        "updatedAt": _timestamp(warning.updated_at),
    }


def panel_log_resource(panel_log: PanelLog) -> Dict:
    return {
        "id": panel_log.id,
        "sourceIdentifier": panel_log.source_identifier,
        "targetIdentifier": panel_log.target_identifier,
        "action": panel_log.action,
        "log": panel_log.log,
        "timestamp": _timestamp(panel_log.timestamp),
    }


def log_resource(log: Log) -> Dict:
    return {
        "id": log.id,
        "steamIdentifier": log.identifier,
        "action": log.action,
        "details": log.details,
        "metadata": log.log_metadata,
        "timestamp": _timestamp(log.timestamp),
    }
