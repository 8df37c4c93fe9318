"""Roles: named sets of permissions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import SimpleResponse, _parse_time


@dataclass
class Role:
    """A set of permissions, either built in or defined by the user."""

    id: str = ""
    name: str = ""
    permissions: str = ""
    built_in: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Role:
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            permissions=data.get("permissions") or "",
            built_in=bool(data.get("built_in", False)),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


class RolesMixin:
    """Role operations for the client."""

    def list_roles(self) -> list[Role]:
        """Return all roles, built in and user defined."""
        return [Role.from_dict(item) for item in self._decode(self.get("/v2/roles"))]

    def create_role(self, name: str, permissions: str) -> Role:
        """Create a role with the given permissions."""
        body = self.post("/v2/roles", {"name": name, "permissions": permissions})
        return Role.from_dict(self._decode(body))

    def delete_role(self, role_id: str) -> SimpleResponse:
        """Remove a role that is not built in."""
        return self._simple(self.delete(f"/v2/roles/{role_id}"))