"""SSH public keys uploaded for access to instances."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import SimpleResponse, _parse_time, find_match


@dataclass
class SSHKey:
    """An uploaded SSH public key."""

    id: str = ""
    name: str = ""
    fingerprint: str = ""
    public_key: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SSHKey:
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            fingerprint=data.get("fingerprint") or "",
            public_key=data.get("public_key") or "",
            created_at=_parse_time(data.get("created_at")),
        )


class SSHKeysMixin:
    """SSH key operations for the client."""

    def list_ssh_keys(self) -> list[SSHKey]:
        """Return every SSH key of the account."""
        return [SSHKey.from_dict(item) for item in self._decode(self.get("/v2/sshkeys"))]

    def new_ssh_key(self, name: str, public_key: str) -> SimpleResponse:
        """Upload a new SSH public key."""
        return self._simple(self.post("/v2/sshkeys", {"name": name, "public_key": public_key}))

    def update_ssh_key(self, name: str, ssh_key_id: str) -> SSHKey:
        """Rename an SSH key."""
        body = self.put(f"/v2/sshkeys/{ssh_key_id}", {"name": name})
        return SSHKey.from_dict(self._decode(body))

    def find_ssh_key(self, search: str) -> SSHKey:
        """Find a key by its name or ID, or by part of either."""
        return find_match(self.list_ssh_keys(), search, ["name", "id"])

    def delete_ssh_key(self, key_id: str) -> SimpleResponse:
        """Delete an SSH key."""
        return self._simple(self.delete(f"/v2/sshkeys/{key_id}"))