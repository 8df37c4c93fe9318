import json

import pytest
import responses
from responses import matchers

from civoclient.base import BaseClient, CivoError, SimpleResponse
from civoclient.volume_snapshots import (
    VolumeSnapshot,
    VolumeSnapshotConfig,
    VolumeSnapshotsMixin,
)

BASE = "https://api.example.com"


class _Client(VolumeSnapshotsMixin, BaseClient):
    pass


@pytest.fixture
def client():
    return _Client(api_key="placeholder", region="TEST", base_url=BASE)


@pytest.fixture
def api():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_list_volume_snapshots(api, client):
    api.add(
        responses.GET,
        f"{BASE}/v2/snapshots",
        match=[matchers.query_param_matcher({"region": "TEST", "resource_type": "volume"})],
        json=[
            {
                "name": "test-snapshot",
                "snapshot_id": "12345",
                "snapshot_description": "snapshot for test",
                "volume_id": "12345",
                "source_volume_name": "test-volume",
                "instance_id": "ins1234",
                "restore_size": 20,
                "state": "Ready",
                "creation_time": "2020-01-01T00:00:00Z",
            }
        ],
    )
    got = client.list_volume_snapshots()
    assert got == [
        VolumeSnapshot(
            name="test-snapshot",
            snapshot_id="12345",
            snapshot_description="snapshot for test",
            volume_id="12345",
            source_volume_name="test-volume",
            instance_id="ins1234",
            restore_size=20,
            state="Ready",
            creation_time="2020-01-01T00:00:00Z",
        )
    ]


def test_get_volume_snapshot(api, client):
    api.add(
        responses.GET,
        f"{BASE}/v2/snapshots/snapshot-uuid",
        match=[matchers.query_param_matcher({"region": "TEST", "resource_type": "volume"})],
        json={
            "name": "test-snapshot",
            "snapshot_id": "snapshot-uuid",
            "snapshot_description": "snapshot for testing",
            "volume_id": "12345",
            "source_volume_name": "test-volume",
            "instance_id": "ins1234",
            "restore_size": 20,
            "state": "Ready",
            "creation_time": "2020-01-01T00:00:00Z",
        },
    )
    got = client.get_volume_snapshot("snapshot-uuid")
    assert got == VolumeSnapshot(
        name="test-snapshot",
        snapshot_id="snapshot-uuid",
        snapshot_description="snapshot for testing",
        volume_id="12345",
        source_volume_name="test-volume",
        instance_id="ins1234",
        restore_size=20,
        state="Ready",
        creation_time="2020-01-01T00:00:00Z",
    )


def test_delete_volume_snapshot(api, client):
    api.add(
        responses.DELETE,
        f"{BASE}/v2/snapshots/12346",
        json={"result": "success"},
    )
    assert client.delete_volume_snapshot("12346") == SimpleResponse(result="success")


def test_get_volume_snapshot_error_raises(api, client):
    api.add(
        responses.GET,
        f"{BASE}/v2/snapshots/missing",
        status=404,
        body="not found",
    )
    with pytest.raises(CivoError) as info:
        VolumeSnapshotsMixin.get_volume_snapshot(client, "missing")
    assert info.value.status == 404


def test_volume_snapshot_config_to_dict():
    cfg = VolumeSnapshotConfig(name="snap", description="desc", region="LON1")
    assert cfg.to_dict() == {"name": "snap", "description": "desc", "region": "LON1"}
    assert json.loads(json.dumps(cfg.to_dict()))["name"] == "snap"


def test_volume_snapshot_from_dict_defaults():
    snap = VolumeSnapshot.from_dict({"name": "only-name"})
    assert snap.name == "only-name"
    assert snap.restore_size == 0
    assert snap.creation_time == ""