"""Teams and their members."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import SimpleResponse, _parse_time, find_match


@dataclass
class Team:
    """A named group of users."""

    id: str = ""
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Team:
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


@dataclass
class TeamMember:
    """The link between a user and a team, with its permissions and roles."""

    id: str = ""
    team_id: str = ""
    user_id: str = ""
    permissions: str = ""
    roles: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TeamMember:
        return cls(
            id=data.get("id") or "",
            team_id=data.get("team_id") or "",
            user_id=data.get("user_id") or "",
            permissions=data.get("permissions") or "",
            roles=data.get("roles") or "",
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


class TeamsMixin:
    """Team operations for the client."""

    def list_teams(self) -> list[Team]:
        """Return every team of the account."""
        return [Team.from_dict(item) for item in self._decode(self.get("/v2/teams"))]

    def create_team(self, name: str) -> Team:
        """Create a team."""
        return Team.from_dict(self._decode(self.post("/v2/teams", {"name": name})))

    def find_team(self, search: str) -> Team:
        """Find a team by its name or ID, or by part of either."""
        return find_match(self.list_teams(), search, ["name", "id"], noun="team")

    def rename_team(self, team_id: str, name: str) -> Team:
        """Change the name of a team."""
        return Team.from_dict(self._decode(self.put(f"/v2/teams/{team_id}", {"name": name})))

    def delete_team(self, team_id: str) -> SimpleResponse:
        """Remove a team, and with it all member access."""
        return self._simple(self.delete(f"/v2/teams/{team_id}"))

    def list_team_members(self, team_id: str) -> list[TeamMember]:
        """Return the members of a team with their permissions."""
        body = self.get(f"/v2/teams/{team_id}/members")
        return [TeamMember.from_dict(item) for item in self._decode(body)]

    def add_team_member(
        self, team_id: str, user_id: str, permissions: str, roles: str
    ) -> list[TeamMember]:
        """Add a user to a team and return the team's members afterwards."""
        self.post(
            f"/v2/teams/{team_id}/members",
            {"user_id": user_id, "permissions": permissions, "roles": roles},
        )
        return self.list_team_members(team_id)

    def update_team_member(
        self, team_id: str, team_member_id: str, permissions: str, roles: str
    ) -> TeamMember:
        """Change the permissions or roles of a team member."""
        body = self.post(
            f"/v2/teams/{team_id}/members/{team_member_id}",
            {"permissions": permissions, "roles": roles},
        )
        return TeamMember.from_dict(self._decode(body))

    def remove_team_member(self, team_id: str, team_member_id: str) -> SimpleResponse:
        """Remove a member from a team."""
        return self._simple(self.delete(f"/v2/teams/{team_id}/members/{team_member_id}"))