"""Account quota: limits and current usage."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


def _json(key: str, default: Any = 0) -> Any:
    return field(default=default, metadata={"json": key})


@dataclass
class Quota:
    """The limits of an account and how much of each is in use."""

    id: str = _json("id", "")
    default_user_id: str = _json("default_user_id", "")
    default_user_email_address: str = _json("default_user_email_address", "")
    instance_count_limit: int = _json("instance_count_limit")
    instance_count_usage: int = _json("instance_count_usage")
    cpu_core_limit: int = _json("cpu_core_limit")
    cpu_core_usage: int = _json("cpu_core_usage")
    ram_megabytes_limit: int = _json("ram_mb_limit")
    ram_megabytes_usage: int = _json("ram_mb_usage")
    disk_gigabytes_limit: int = _json("disk_gb_limit")
    disk_gigabytes_usage: int = _json("disk_gb_usage")
    disk_volume_count_limit: int = _json("disk_volume_count_limit")
    disk_volume_count_usage: int = _json("disk_volume_count_usage")
    disk_snapshot_count_limit: int = _json("disk_snapshot_count_limit")
    disk_snapshot_count_usage: int = _json("disk_snapshot_count_usage")
    public_ip_address_limit: int = _json("public_ip_address_limit")
    public_ip_address_usage: int = _json("public_ip_address_usage")
    subnet_count_limit: int = _json("subnet_count_limit")
    subnet_count_usage: int = _json("subnet_count_usage")
    network_count_limit: int = _json("network_count_limit")
    network_count_usage: int = _json("network_count_usage")
    security_group_limit: int = _json("security_group_limit")
    security_group_usage: int = _json("security_group_usage")
    security_group_rule_limit: int = _json("security_group_rule_limit")
    security_group_rule_usage: int = _json("security_group_rule_usage")
    port_count_limit: int = _json("port_count_limit")
    port_count_usage: int = _json("port_count_usage")
    load_balancer_count_limit: int = _json("loadbalancer_count_limit")
    load_balancer_count_usage: int = _json("loadbalancer_count_usage")
    object_store_gigabytes_limit: int = _json("objectstore_gb_limit")
    object_store_gigabytes_usage: int = _json("objectstore_gb_usage")
    database_count_limit: int = _json("database_count_limit")
    database_count_usage: int = _json("database_count_usage")
    database_snapshot_count_limit: int = _json("database_snapshot_count_limit")
    database_snapshot_count_usage: int = _json("database_snapshot_count_usage")
    database_cpu_core_limit: int = _json("database_cpu_core_limit")
    database_cpu_core_usage: int = _json("database_cpu_core_usage")
    database_ram_megabytes_limit: int = _json("database_ram_mb_limit")
    database_ram_megabytes_usage: int = _json("database_ram_mb_usage")
    database_disk_gigabytes_limit: int = _json("database_disk_gb_limit")
    database_disk_gigabytes_usage: int = _json("database_disk_gb_usage")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Quota:
        kwargs = {}
        for item in fields(cls):
            value = data.get(item.metadata["json"])
            kwargs[item.name] = item.default if value is None else value
        return cls(**kwargs)


class QuotaMixin:
    """Quota operations for the client."""

    def get_quota(self) -> Quota:
        """Return the quota limits and usage of the account."""
        return Quota.from_dict(self._decode(self.get("/v2/quota")))