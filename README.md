# civoclient

Building blocks for talking to the Civo cloud API from Python. The package
provides an HTTP transport (`civoclient.base.BaseClient`) and a set of mixin
classes, one per area of the API:

| Module                        | Mixin                  | Covers                                  |
|-------------------------------|------------------------|-----------------------------------------|
| `civoclient.quotas`           | `QuotaMixin`           | account quota limits and usage          |
| `civoclient.regions`          | `RegionsMixin`         | listing, finding, creating, connecting regions |
| `civoclient.roles`            | `RolesMixin`           | listing, creating and deleting roles    |
| `civoclient.sshkeys`          | `SSHKeysMixin`         | SSH public keys                         |
| `civoclient.teams`            | `TeamsMixin`           | teams and team members                  |
| `civoclient.volume_snapshots` | `VolumeSnapshotsMixin` | listing, reading and deleting volume snapshots |

Responses are returned as dataclasses (`Quota`, `Region`, `Feature`, `Role`,
`SSHKey`, `Team`, `TeamMember`, `VolumeSnapshot`), each with a `from_dict`
class method that reads the API's JSON.

## Installation

```
pip install civoclient
```

To run the test suite, install the test extra:

```
pip install "civoclient[test]"
pytest
```

## Building a client

The mixins share the transport of `BaseClient`, so a client is a class that
combines the mixins you need with `BaseClient`:

```python
from civoclient.base import BaseClient
from civoclient.quotas import QuotaMixin
from civoclient.regions import RegionsMixin
from civoclient.roles import RolesMixin
from civoclient.sshkeys import SSHKeysMixin
from civoclient.teams import TeamsMixin
from civoclient.volume_snapshots import VolumeSnapshotsMixin


class Client(
    QuotaMixin,
    RegionsMixin,
    RolesMixin,
    SSHKeysMixin,
    TeamsMixin,
    VolumeSnapshotsMixin,
    BaseClient,
):
    pass


with Client(api_key="placeholder", region="LON1", base_url="https://api.example.com") as client:
    quota = client.get_quota()
    print(quota.instance_count_usage, "of", quota.instance_count_limit, "instances used")

    for region in client.list_regions():
        print(region.code, region.name, region.features.kubernetes)
```

`BaseClient` sends the API key as a bearer token. When a region is set, it is
added as a `region` query parameter to GET and DELETE requests. `get`, `post`,
`put` and `delete` return the raw response body; `post` and `put` accept a
plain dict or any object with a `to_dict()` method.

## Finding resources

`find_ssh_key`, `find_team` and `find_region` accept a full or partial name or
ID. An exact match always wins; otherwise exactly one partial match must exist.

```python
from civoclient.base import MultipleMatchesError, ZeroMatchesError

try:
    key = client.find_ssh_key("laptop")
except MultipleMatchesError:
    print("more than one key matches, be more specific")
except ZeroMatchesError:
    print("no key matches")
else:
    print(key.id, key.fingerprint)
```

`find_region` compares names and codes case-insensitively, so
`client.find_region("lon1")` finds the region with code `LON1`.
`get_default_region()` returns the region flagged as the account's default.

The same lookup is available for your own lists through
`civoclient.base.find_match(items, search, fields, noun)`, where `fields` are
attribute names or functions that return the text to compare.

## Regions

```python
from civoclient.regions import CreateRegionRequest

region = client.create_region(
    CreateRegionRequest(code="TEST1", country_iso_code="US", features={"iaas": True})
)
client.connect_region("TEST1")
client.disconnect_region("TEST1")
```

## Teams and roles

```python
role = client.create_role("Org Admin", "organisation.*")
team = client.create_team("Operations")
members = client.add_team_member(team.id, "user-id", "*.*", "")
client.rename_team(team.id, "Platform")
client.remove_team_member(team.id, members[0].id)
```

## Volume snapshots

```python
for snapshot in client.list_volume_snapshots():
    print(snapshot.snapshot_id, snapshot.state, snapshot.restore_size)

client.delete_volume_snapshot("snapshot-id")
```

`civoclient.volume_snapshots.VolumeSnapshotConfig` holds the name,
description and region for a new snapshot and turns them into a request body
with `to_dict()`.

## Errors

API failures, network failures and unreadable responses raise
`civoclient.base.CivoError`; its `status` attribute holds the HTTP status when
there was one. Lookups raise its subclasses `MultipleMatchesError` and
`ZeroMatchesError`. Calls that the API answers with a plain acknowledgement
return a `civoclient.base.SimpleResponse`, whose `result` field holds the
API's answer, such as `"success"`.

## Helpers

`civoclient.names.random_name()` returns a random two-word name such as
`misty-river`, handy for naming new instances or clusters.
`civoclient.version.get_version()` reports the installed package version, or
`"dev"` when the package is not installed.

## What the package does not do

- It ships no ready-made client class; you combine the mixins with
  `BaseClient` as shown above.
- It does not create, attach, resize or delete volumes, list volume types,
  manage webhooks, manage Kubernetes clusters or their node pools, or read
  user accounts. Only the areas listed in the table above are covered.
- It has no command-line tool.