"""Regions: the data centres resources live in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import CivoError, find_match


@dataclass
class Feature:
    """The services a region offers."""

    iaas: bool = False
    kubernetes: bool = False
    object_store: bool = False
    load_balancer: bool = False
    gpu: bool = False
    dbaas: bool = False
    volume: bool = False
    paas: bool = False
    kfaas: bool = False
    public_ip_node_pools: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Feature:
        return cls(
            iaas=bool(data.get("iaas", False)),
            kubernetes=bool(data.get("kubernetes", False)),
            object_store=bool(data.get("object_store", False)),
            load_balancer=bool(data.get("loadbalancer", False)),
            gpu=bool(data.get("gpu", False)),
            dbaas=bool(data.get("dbaas", False)),
            volume=bool(data.get("volume", False)),
            paas=bool(data.get("paas", False)),
            kfaas=bool(data.get("kfaas", False)),
            public_ip_node_pools=bool(data.get("public_ip_node_pools", False)),
        )


@dataclass
class Region:
    """A geographical region for resources."""

    code: str = ""
    name: str = ""
    type: str = ""
    out_of_capacity: bool = False
    country: str = ""
    country_name: str = ""
    features: Feature = field(default_factory=Feature)
    default: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Region:
        return cls(
            code=data.get("code") or "",
            name=data.get("name") or "",
            type=data.get("type") or "",
            out_of_capacity=bool(data.get("out_of_capacity", False)),
            country=data.get("country") or "",
            country_name=data.get("country_name") or "",
            features=Feature.from_dict(data.get("features") or {}),
            default=bool(data.get("default", False)),
        )


@dataclass
class CreateRegionRequest:
    """Settings for a new region.

    ``kubeconfig`` holds base64 encoded kubeconfig content;
    ``compute_soft_deletion_hours`` applies to private regions only.
    """

    code: str
    country_iso_code: str = ""
    private: bool = False
    account_ids: list[str] = field(default_factory=list)
    kubeconfig: str = ""
    compute_soft_deletion_hours: int | None = None
    features: dict[str, bool] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "code": self.code,
            "country_iso_code": self.country_iso_code,
        }
        if self.private:
            data["private"] = True
        if self.account_ids:
            data["account_ids"] = list(self.account_ids)
        data["kubeconfig"] = self.kubeconfig
        data["compute_soft_deletion_hours"] = self.compute_soft_deletion_hours
        data["features"] = dict(self.features) if self.features is not None else None
        return data


class RegionsMixin:
    """Region operations for the client."""

    def list_regions(self) -> list[Region]:
        """Return every region available to the account."""
        return [Region.from_dict(item) for item in self._decode(self.get("/v2/regions"))]

    def find_region(self, search: str) -> Region:
        """Find a region by name or code, ignoring case, or by part of either."""
        return find_match(
            self.list_regions(),
            search.upper(),
            [lambda region: region.name.upper(), lambda region: region.code.upper()],
        )

    def get_default_region(self) -> Region:
        """Return the account's default region."""
        for region in self.list_regions():
            if region.default:
                return region
        raise CivoError("no default region found")

    def create_region(self, request: CreateRegionRequest) -> Region:
        """Create a new region."""
        return Region.from_dict(self._decode(self.post("/v2/regions", request)))

    def connect_region(self, code: str) -> None:
        """Connect a region to the API."""
        self.post("/v2/regions/connect", {"code": code})

    def disconnect_region(self, code: str) -> None:
        """Disconnect a region from the API."""
        self.post("/v2/regions/disconnect", {"code": code})