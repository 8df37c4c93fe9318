"""Volume snapshots: point-in-time copies of volumes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import SimpleResponse


@dataclass
class VolumeSnapshot:
    """A point-in-time copy of a volume."""

    name: str = ""
    snapshot_id: str = ""
    snapshot_description: str = ""
    volume_id: str = ""
    instance_id: str = ""
    source_volume_name: str = ""
    restore_size: int = 0
    state: str = ""
    creation_time: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VolumeSnapshot:
        return cls(
            name=data.get("name") or "",
            snapshot_id=data.get("snapshot_id") or "",
            snapshot_description=data.get("snapshot_description") or "",
            volume_id=data.get("volume_id") or "",
            instance_id=data.get("instance_id") or "",
            source_volume_name=data.get("source_volume_name") or "",
            restore_size=int(data.get("restore_size") or 0),
            state=data.get("state") or "",
            creation_time=data.get("creation_time") or "",
        )


@dataclass
class VolumeSnapshotConfig:
    """Settings for a new volume snapshot."""

    name: str = ""
    description: str = ""
    region: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "region": self.region}


class VolumeSnapshotsMixin:
    """Volume snapshot operations for the client."""

    def list_volume_snapshots(self) -> list[VolumeSnapshot]:
        """Return every volume snapshot of the account."""
        body = self.get("/v2/snapshots?resource_type=volume")
        return [VolumeSnapshot.from_dict(item) for item in self._decode(body)]

    def get_volume_snapshot(self, snapshot_id: str) -> VolumeSnapshot:
        """Return a volume snapshot by its ID."""
        body = self.get(f"/v2/snapshots/{snapshot_id}?resource_type=volume")
        return VolumeSnapshot.from_dict(self._decode(body))

    def delete_volume_snapshot(self, snapshot_id: str) -> SimpleResponse:
        """Delete a volume snapshot."""
        return self._simple(self.delete(f"/v2/snapshots/{snapshot_id}"))