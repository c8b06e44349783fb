"""Permissions declared by the plugin."""

from __future__ import annotations

from barricadewall.core.types import Player
from barricadewall.host.protocol import PermissionService

USE = "barricadetowall.use"

PERMISSIONS: tuple[str, ...] = (USE,)


def register_permissions(service: PermissionService, owner: str) -> None:
    for permission in PERMISSIONS:
        service.register_permission(permission, owner)


def has_permission(service: PermissionService, player: Player, permission: str) -> bool:
    return service.has_permission(player.user_id, permission)
