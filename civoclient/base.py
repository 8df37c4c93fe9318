"""Shared pieces of the API client: errors, the HTTP transport and lookup helpers."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

import requests

DEFAULT_BASE_URL = "https://api.civo.com"
DEFAULT_TIMEOUT = 60.0

T = TypeVar("T")


class CivoError(Exception):
    """Raised when the API reports a failure or returns something unreadable."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message}"


class MultipleMatchesError(CivoError):
    """Raised when a search matches more than one resource."""


class ZeroMatchesError(CivoError):
    """Raised when a search matches no resource at all."""


@dataclass
class SimpleResponse:
    """The short result the API returns for many actions."""

    id: str = ""
    result: str = ""
    error_code: str = ""
    error_reason: str = ""
    error_details: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimpleResponse:
        return cls(
            id=data.get("id") or "",
            result=data.get("result") or "",
            error_code=data.get("code") or data.get("error_code") or "",
            error_reason=data.get("reason") or data.get("error_reason") or "",
            error_details=data.get("details") or data.get("error_details") or "",
        )


def _parse_time(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; empty values give None."""
    if not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise CivoError(f"invalid timestamp {value!r}") from exc


class BaseClient:
    """Sends authenticated requests to the API and returns the raw response bodies."""

    def __init__(self, api_key: str, region: str = "", base_url: str = DEFAULT_BASE_URL) -> None:
        self.api_key = api_key
        self.region = region
        self.base_url = base_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"bearer {api_key}",
                "Accept": "application/json",
                "User-Agent": "civoclient",
            }
        )

    def __enter__(self) -> BaseClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _request(self, method: str, path: str, data: Any = None) -> bytes:
        params = {"region": self.region} if self.region and method in ("GET", "DELETE") else None
        if data is not None and hasattr(data, "to_dict"):
            data = data.to_dict()
        try:
            response = self._session.request(
                method,
                self.base_url + path,
                params=params,
                json=data,
                timeout=DEFAULT_TIMEOUT,
            )
        except requests.RequestException as exc:
            raise CivoError(str(exc)) from exc
        if response.status_code >= 300:
            message = response.text.strip() or response.reason or "request failed"
            raise CivoError(f"{response.status_code}: {message}", status=response.status_code)
        return response.content

    def get(self, path: str) -> bytes:
        return self._request("GET", path)

    def post(self, path: str, data: Any) -> bytes:
        return self._request("POST", path, data)

    def put(self, path: str, data: Any) -> bytes:
        return self._request("PUT", path, data)

    def delete(self, path: str) -> bytes:
        return self._request("DELETE", path)

    @staticmethod
    def _decode(body: bytes) -> Any:
        try:
            return json.loads(body)
        except ValueError as exc:
            raise CivoError(f"unable to decode response: {exc}") from exc

    def _simple(self, body: bytes) -> SimpleResponse:
        return SimpleResponse.from_dict(self._decode(body))


FieldSpec = str | Callable[[Any], str]


def _field_value(item: Any, field: FieldSpec) -> str:
    return field(item) if callable(field) else getattr(item, field)


def find_match(
    items: Iterable[T],
    search: str,
    fields: Sequence[FieldSpec],
    noun: str = "",
) -> T:
    """Pick the item whose fields equal ``search``, or the single one containing it.

    An exact match always wins; otherwise exactly one partial match is required.
    """
    exact: T | None = None
    partial: T | None = None
    partial_count = 0
    for item in items:
        values = [_field_value(item, field) for field in fields]
        if any(value == search for value in values):
            exact = item
        elif exact is None and any(search in value for value in values):
            partial = item
            partial_count += 1

    if exact is not None:
        return exact
    if partial_count == 1:
        return partial  # type: ignore[return-value]
    target = f"{search} {noun}" if noun else search
    if partial_count > 1:
        raise MultipleMatchesError(f"unable to find {target} because there were multiple matches")
    raise ZeroMatchesError(f"unable to find {target}, zero matches")