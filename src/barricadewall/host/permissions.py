"""In-memory permission service."""

from __future__ import annotations

from barricadewall.core.identity import validate_player_id


class MemoryPermissions:
    """Dict-backed PermissionService.

    Grants are kept per player even for permissions that are not (yet)
    registered, but has_permission only answers True for registered ones.
    """

    def __init__(self) -> None:
        self._owners: dict[str, str] = {}
        self._grants: dict[int, set[str]] = {}

    def register_permission(self, name: str, owner: str) -> None:
        name = name.lower()
        existing = self._owners.get(name)
        if existing is not None and existing != owner:
            raise ValueError(f"Permission {name!r} is already registered by {existing!r}")
        self._owners[name] = owner

    def unregister_permissions(self, owner: str) -> None:
        for name in [n for n, o in self._owners.items() if o == owner]:
            del self._owners[name]

    def permission_exists(self, name: str) -> bool:
        return name.lower() in self._owners

    def grant(self, player_id: int, name: str) -> None:
        self._grants.setdefault(validate_player_id(player_id), set()).add(name.lower())

    def revoke(self, player_id: int, name: str) -> None:
        self._grants.get(player_id, set()).discard(name.lower())

    def has_permission(self, player_id: int, name: str) -> bool:
        name = name.lower()
        if name not in self._owners:
            return False
        return name in self._grants.get(player_id, set())
